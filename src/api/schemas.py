from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ProcessingResult(BaseModel):
    """Outcome of the processing step for a single invoice."""

    success: bool
    message: str
    optimized_payment_date: datetime


class InvoiceSubmitted(BaseModel):
    """Schema for an accepted invoice submission."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    optimized_payment_date: datetime = Field(alias="optimizedPaymentDate")


class InvoiceStatus(BaseModel):
    """Schema for the invoice status payload."""

    status: str
    message: str


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
