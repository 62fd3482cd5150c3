from decimal import Decimal
from pydantic import BaseModel, Field, PlainSerializer
from typing import Annotated, Optional
from datetime import datetime

# Largest value a 64-bit signed INTEGER column can hold.
MAX_DB_INTEGER = 2**63 - 1

# Stored as NUMERIC(10, 2); rendered as a JSON number.
Money = Annotated[
    Decimal,
    Field(ge=0, max_digits=10, decimal_places=2),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class ProductCreate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Money] = None
    category: Optional[str] = None


class ProductUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Money] = None
    category: Optional[str] = None


class ProductOut(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: Money
    category: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class MessageOut(BaseModel):
    message: str
