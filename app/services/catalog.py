"""Product catalog operations"""
import logging
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.core.auth_utils import check_not_found
from app.core.errors import ValidationError
from app.core.metrics import track_db_operation
from app.models.base import utcnow
from app.models.product import Product

logger = logging.getLogger(__name__)

@track_db_operation("select", "products")
async def list_products(db: AsyncSession) -> List[Product]:
    res = await db.execute(select(Product).order_by(Product.created_at.desc(), Product.id.desc()))
    return list(res.scalars().all())

@track_db_operation("select", "products")
async def get_product(db: AsyncSession, product_id: int) -> Product:
    product = await db.get(Product, product_id)
    check_not_found(product, "Product")
    return product

@track_db_operation("insert", "products")
async def create_product(
    db: AsyncSession,
    name: Optional[str],
    description: Optional[str],
    price: Optional[Decimal],
    category: Optional[str],
) -> Product:
    if not name or price is None:
        raise ValidationError("Name and price are required")

    product = Product(name=name, description=description, price=price, category=category)
    db.add(product)
    await db.commit()
    await db.refresh(product)

    logger.info(f"Created product {product.id} ({product.name})")
    return product

@track_db_operation("update", "products")
async def update_product(db: AsyncSession, product_id: int, fields: dict) -> Product:
    """Overwrite the given fields of a product and bump ``updated_at``.

    ``fields`` holds only the keys the caller actually sent.
    """
    if "name" in fields and not fields["name"]:
        raise ValidationError("Name cannot be empty")
    if "price" in fields and fields["price"] is None:
        raise ValidationError("Price cannot be empty")

    product = await db.get(Product, product_id)
    check_not_found(product, "Product")

    for field, value in fields.items():
        setattr(product, field, value)
    product.updated_at = utcnow()

    db.add(product)
    await db.commit()
    await db.refresh(product)

    logger.info(f"Updated product {product.id}: {sorted(fields)}")
    return product

@track_db_operation("delete", "products")
async def delete_product(db: AsyncSession, product_id: int) -> None:
    product = await db.get(Product, product_id)
    check_not_found(product, "Product")

    await db.delete(product)
    await db.commit()

    logger.info(f"Deleted product {product_id}")
