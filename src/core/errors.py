from core.config import (
    INVALID_INVOICE_ERROR,
    MALFORMED_BODY_ERROR,
    PAYLOAD_TOO_LARGE_ERROR,
    PROCESSING_EXCEPTION_ERROR,
    PROCESSING_FAILED_ERROR,
)


class InvoiceError(Exception):
    """Base error for the invoice API, rendered as a JSON error body."""

    status_code = 500

    def __init__(self, error: str, details: str | None = None) -> None:
        super().__init__(error)
        self.error = error
        self.details = details


class MalformedBodyError(InvoiceError):
    """Raised when the request body is not valid JSON."""

    status_code = 400

    def __init__(self) -> None:
        super().__init__(MALFORMED_BODY_ERROR)


class InvalidInvoiceError(InvoiceError):
    """Raised when the invoice body is missing or has no id."""

    status_code = 400

    def __init__(self) -> None:
        super().__init__(INVALID_INVOICE_ERROR)


class InvoiceProcessingError(InvoiceError):
    status_code = 500

    def __init__(self, details: str | None = None) -> None:
        # Without details the processor reported failure; with details it raised
        error = PROCESSING_FAILED_ERROR if details is None else PROCESSING_EXCEPTION_ERROR
        super().__init__(error, details)


class PayloadTooLargeError(InvoiceError):
    """Raised when the request body exceeds the size limit."""

    status_code = 413

    def __init__(self) -> None:
        super().__init__(PAYLOAD_TOO_LARGE_ERROR)
