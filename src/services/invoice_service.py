from typing import Any

from api.schemas import ProcessingResult
from core.errors import InvalidInvoiceError, InvoiceProcessingError
from core.logging import logger
from services.processing import process_invoice


def validate_invoice(invoice: Any) -> dict[str, Any]:
    """Checks that the body is a JSON object carrying a non-null id."""
    if not isinstance(invoice, dict) or invoice.get("id") is None:
        logger.warning(f"Rejecting invalid invoice data: {invoice!r}")
        raise InvalidInvoiceError()
    return invoice


async def submit_invoice(invoice: Any) -> ProcessingResult:
    """Validates an invoice and runs it through the processing step.

    Nothing is stored, so the same id can be submitted any number of times.
    """
    invoice = validate_invoice(invoice)
    invoice_id = invoice["id"]
    logger.info(f"Submitting invoice {invoice_id!r} for processing...")

    try:
        result = await process_invoice(invoice)
    except Exception as e:
        logger.exception(f"Processing raised for invoice {invoice_id!r}: {e}")
        raise InvoiceProcessingError(details=str(e)) from e

    if not result.success:
        logger.error(f"Processing reported failure for invoice {invoice_id!r}")
        raise InvoiceProcessingError()

    logger.info(f"Invoice {invoice_id!r} processed.")
    return result
