from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from app.core.enums import QuoteStatus
from app.schemas.product import MAX_DB_INTEGER, Money


class QuoteRequestCreate(BaseModel):
    product_id: Optional[int] = Field(None, ge=0, le=MAX_DB_INTEGER)
    quantity: Optional[int] = Field(None, gt=0, le=MAX_DB_INTEGER)
    message: Optional[str] = None


class QuoteStatusUpdate(BaseModel):
    # Plain string so unknown values reach the service and get its error message.
    status: Optional[str] = None


class QuoteRequestCreated(BaseModel):
    id: int
    message: str


class QuoteRequestOut(BaseModel):
    id: int
    client_id: int
    product_id: int
    quantity: int
    message: Optional[str] = None
    status: QuoteStatus
    created_at: datetime
    client_name: str
    client_email: str
    product_name: str
    product_price: Money
