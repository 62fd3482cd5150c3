from sqlalchemy import Column, String, Numeric, Text, DateTime
from app.models.base import BaseModel, utcnow


class Product(BaseModel):
    __tablename__ = "products"
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    category = Column(String(120), nullable=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
