"""Quote request lifecycle: submission, role-scoped listing and status changes"""
import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.core.auth_utils import check_not_found, filter_by_owner
from app.core.enums import QuoteStatus, VALID_QUOTE_STATUSES
from app.core.errors import ValidationError
from app.core.metrics import track_db_operation
from app.core.security import Identity
from app.models.product import Product
from app.models.quote_request import QuoteRequest
from app.models.user import User

logger = logging.getLogger(__name__)


@track_db_operation("insert", "quote_requests")
async def submit_quote_request(
    db: AsyncSession,
    identity: Identity,
    product_id: Optional[int],
    quantity: Optional[int],
    message: Optional[str] = None,
) -> QuoteRequest:
    if not product_id or not quantity:
        raise ValidationError("Product ID and quantity are required")

    product = await db.get(Product, product_id)
    check_not_found(product, "Product")

    quote = QuoteRequest(
        client_id=identity.id,
        product_id=product_id,
        quantity=quantity,
        message=message,
        status=QuoteStatus.PENDING,
    )
    db.add(quote)
    await db.commit()
    await db.refresh(quote)

    logger.info(f"User {identity.id} submitted quote request {quote.id} for product {product_id}")
    return quote


@track_db_operation("select", "quote_requests")
async def list_quote_requests(db: AsyncSession, identity: Identity) -> List[tuple]:
    """Return ``(quote, client_name, client_email, product_name, product_price)`` rows.

    Admins see every request, clients only their own. Requests whose product
    has been deleted are left out.
    """
    q = (
        select(QuoteRequest, User.name, User.email, Product.name, Product.price)
        .join(User, QuoteRequest.client_id == User.id)
        .join(Product, QuoteRequest.product_id == Product.id)
    )
    q = filter_by_owner(q, QuoteRequest.client_id, identity)
    q = q.order_by(QuoteRequest.created_at.desc(), QuoteRequest.id.desc())

    res = await db.execute(q)
    return [tuple(row) for row in res.all()]


@track_db_operation("update", "quote_requests")
async def update_quote_status(db: AsyncSession, quote_id: int, status: Optional[str]) -> QuoteRequest:
    # Any status may follow any other; only membership is checked.
    if status not in VALID_QUOTE_STATUSES:
        raise ValidationError("Invalid status")

    quote = await db.get(QuoteRequest, quote_id)
    check_not_found(quote, "Quote request")

    previous = quote.status
    quote.status = QuoteStatus(status)
    db.add(quote)
    await db.commit()
    await db.refresh(quote)

    logger.info(f"Quote request {quote_id} status {previous} -> {quote.status}")
    return quote
