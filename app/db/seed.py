"""Startup data: optional default admin and sample catalog"""
import logging

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.core.config import Settings
from app.core.enums import UserRole
from app.models.product import Product
from app.services.auth import create_user, get_user_by_email

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = [
    ("Business Loan", "Flexible business financing solutions", 50000, "Loans"),
    ("Investment Portfolio", "Diversified investment options", 10000, "Investments"),
    ("Insurance Package", "Comprehensive business insurance", 5000, "Insurance"),
    ("Credit Line", "Revolving credit facility", 25000, "Credit"),
]


async def ensure_default_admin(db: AsyncSession, settings: Settings) -> bool:
    if not settings.ADMIN_PASSWORD:
        return False
    if await get_user_by_email(db, settings.ADMIN_EMAIL):
        return False

    await create_user(db, settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD, settings.ADMIN_NAME, UserRole.ADMIN)
    logger.info(f"Default admin user created: {settings.ADMIN_EMAIL}")
    return True


async def seed_sample_products(db: AsyncSession) -> int:
    res = await db.execute(select(func.count()).select_from(Product))
    if res.scalar_one() > 0:
        return 0

    for name, description, price, category in SAMPLE_PRODUCTS:
        db.add(Product(name=name, description=description, price=price, category=category))
    await db.commit()
    logger.info(f"Seeded {len(SAMPLE_PRODUCTS)} sample products")
    return len(SAMPLE_PRODUCTS)


async def seed_database(db: AsyncSession, settings: Settings) -> None:
    await ensure_default_admin(db, settings)
    if settings.SEED_SAMPLE_PRODUCTS:
        await seed_sample_products(db)
