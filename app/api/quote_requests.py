from typing import List

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.schemas.product import MAX_DB_INTEGER, MessageOut
from app.schemas.quote_request import (
    QuoteRequestCreate,
    QuoteRequestCreated,
    QuoteRequestOut,
    QuoteStatusUpdate,
)
from app.core.security import get_current_identity, require_admin
from app.core.response_builders import build_quote_request_response_list
from app.services import quotes

router = APIRouter(prefix="/quote-requests", tags=["quote-requests"])


@router.post("", response_model=QuoteRequestCreated, status_code=201)
async def submit_quote_request(
    payload: QuoteRequestCreate,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_identity)
):
    quote = await quotes.submit_quote_request(
        db,
        current_user,
        product_id=payload.product_id,
        quantity=payload.quantity,
        message=payload.message,
    )
    return QuoteRequestCreated(id=quote.id, message="Quote request submitted successfully")


@router.get("", response_model=List[QuoteRequestOut])
async def list_quote_requests(
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_identity)
):
    rows = await quotes.list_quote_requests(db, current_user)
    return build_quote_request_response_list(rows)


@router.put("/{quote_id}/status", response_model=MessageOut)
async def update_quote_status(
    payload: QuoteStatusUpdate,
    quote_id: int = Path(..., ge=1, le=MAX_DB_INTEGER),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(require_admin)
):
    await quotes.update_quote_status(db, quote_id, payload.status)
    return {"message": "Quote request status updated successfully"}
