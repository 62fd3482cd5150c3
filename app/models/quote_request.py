from sqlalchemy import Column, Integer, Text, ForeignKey, Enum
from app.models.base import BaseModel
from app.core.enums import QuoteStatus


class QuoteRequest(BaseModel):
    __tablename__ = "quote_requests"

    client_id = Column(ForeignKey("users.id"), nullable=False, index=True)
    # No foreign key: products may be deleted while requests referencing them remain.
    product_id = Column(Integer, nullable=False, index=True)

    quantity = Column(Integer, nullable=False)
    message = Column(Text, nullable=True)
    status = Column(
        Enum(QuoteStatus, values_callable=lambda statuses: [s.value for s in statuses]),
        nullable=False,
        default=QuoteStatus.PENDING,
    )
