"""
Exceptions raised while turning a ticket image into an invoice record.

Each carries the HTTP status and the message the API returns as
``{"error": message}``.
"""


class InvoiceProcessingError(Exception):
    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ApiKeyNotConfiguredError(InvoiceProcessingError):
    def __init__(self):
        super().__init__("API key not configured", status_code=500)


class InferenceServiceError(InvoiceProcessingError):
    """Non-success response from the Anthropic Messages API."""


class ExtractionError(InvoiceProcessingError):
    """The model reply held no usable JSON object."""
