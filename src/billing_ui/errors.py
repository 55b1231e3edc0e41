"""
Error taxonomy for the invoice access layer.

Callers only ever see these types; raw backend payloads and httpx
exceptions are translated before they leave the services package.
Not-found is not an error: lookups return None and deletes return False.
"""


class InvoiceServiceError(Exception):
    """Base class for failures reported by an invoice service."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} (HTTP {self.status_code})"


class TransportError(InvoiceServiceError):
    """The backend was unreachable or answered with an unexpected status."""


class ValidationError(InvoiceServiceError):
    """The backend rejected the submitted invoice payload."""
