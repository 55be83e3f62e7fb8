from datetime import UTC, datetime
from typing import Any

from api.schemas import ProcessingResult
from core.config import PAYMENT_DELAY, PROCESSED_MESSAGE
from core.logging import logger


async def process_invoice(invoice: dict[str, Any]) -> ProcessingResult:
    """Simulates the AI processing step for an invoice.

    Stands in for a model or external service call. It always succeeds and
    schedules payment a fixed delay after the processing time.
    """
    logger.info(f"Starting AI processing for invoice: {invoice.get('id')}")
    result = ProcessingResult(
        success=True,
        message=PROCESSED_MESSAGE,
        optimized_payment_date=datetime.now(UTC) + PAYMENT_DELAY,
    )
    logger.info(f"Finished AI processing. Result: {result}")
    return result
