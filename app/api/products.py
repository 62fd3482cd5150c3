from typing import List

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.schemas.product import MAX_DB_INTEGER, ProductCreate, ProductUpdate, ProductOut, MessageOut
from app.core.security import get_current_identity, require_admin
from app.core.response_builders import build_product_response, build_product_response_list
from app.services import catalog

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=List[ProductOut])
async def list_products(
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_identity)
):
    products = await catalog.list_products(db)
    return build_product_response_list(products)


@router.get("/{product_id}", response_model=ProductOut)
async def get_product(
    product_id: int = Path(..., ge=1, le=MAX_DB_INTEGER),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_identity)
):
    product = await catalog.get_product(db, product_id)
    return build_product_response(product)


@router.post("", response_model=ProductOut, status_code=201)
async def create_product(
    payload: ProductCreate,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(require_admin)
):
    product = await catalog.create_product(
        db,
        name=payload.name,
        description=payload.description,
        price=payload.price,
        category=payload.category,
    )
    return build_product_response(product)


@router.put("/{product_id}", response_model=ProductOut)
async def update_product(
    payload: ProductUpdate,
    product_id: int = Path(..., ge=1, le=MAX_DB_INTEGER),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(require_admin)
):
    """Update the fields present in the body"""
    product = await catalog.update_product(db, product_id, payload.model_dump(exclude_unset=True))
    return build_product_response(product)


@router.delete("/{product_id}", response_model=MessageOut)
async def delete_product(
    product_id: int = Path(..., ge=1, le=MAX_DB_INTEGER),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(require_admin)
):
    await catalog.delete_product(db, product_id)
    return {"message": "Product deleted successfully"}
