from typing import Any

from fastapi import APIRouter, Depends

from api.dependencies import read_json_body
from api.schemas import ErrorResponse, InvoiceStatus, InvoiceSubmitted
from core.config import STATUS_MESSAGE, STATUS_PROCESSED
from services import invoice_service

router = APIRouter()


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Simple health check endpoint."""
    return {"status": "ok"}


@router.post(
    "/invoices",
    status_code=201,
    response_model=InvoiceSubmitted,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def submit_invoice(invoice: Any = Depends(read_json_body)) -> InvoiceSubmitted:
    """Accepts an invoice and returns its optimized payment date.

    The body must be a JSON object with an `id`; every other field is passed
    to the processing step untouched.
    """
    result = await invoice_service.submit_invoice(invoice)
    return InvoiceSubmitted(
        message=result.message,
        optimized_payment_date=result.optimized_payment_date,
    )


@router.get("/invoices/{invoice_id}/status")
async def invoice_status(invoice_id: str) -> InvoiceStatus:
    """Returns the processing status of an invoice.

    There is no backing store yet, so every id reports the same status.
    """
    return InvoiceStatus(status=STATUS_PROCESSED, message=STATUS_MESSAGE)
