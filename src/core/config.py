from datetime import timedelta

HOST = "0.0.0.0"
PORT = 3000

SERVICE_NAME = "invoice-api"
LOG_LEVEL = "INFO"

JSON_MEDIA_TYPE = "application/json"
MAX_BODY_BYTES = 100 * 1024

STARTUP_POLL_SECONDS = 0.05

# Fixed offset used by the stub processor
PAYMENT_DELAY = timedelta(days=3)

PROCESSED_MESSAGE = "Invoice processed successfully."

STATUS_PROCESSED = "Processed"
STATUS_MESSAGE = "Payment scheduled for 2023-10-15"

INVALID_INVOICE_ERROR = "Invalid invoice data"
MALFORMED_BODY_ERROR = "Malformed JSON body"
PAYLOAD_TOO_LARGE_ERROR = "Request entity too large"
PROCESSING_FAILED_ERROR = "Invoice processing failed"
PROCESSING_EXCEPTION_ERROR = "An error occurred while processing the invoice"
