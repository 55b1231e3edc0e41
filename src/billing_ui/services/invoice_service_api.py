"""
HTTP implementation of InvoiceService backed by the invoice REST API.

Endpoints (relative to INVOICE_API_BASE_URL):

    GET    /invoices          -> list of wire records
    GET    /invoices/{id}     -> one wire record, 404 when missing
    POST   /invoices          -> created wire record
    PUT    /invoices/{id}     -> updated wire record
    DELETE /invoices/{id}     -> empty body, 404 when missing

Failed writes carry a JSON body with a ``message`` field; that message is
what the caller sees. httpx exceptions never leave this module.
"""

import os
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, List

import httpx

from billing_ui.errors import InvoiceServiceError, TransportError, ValidationError
from billing_ui.lib import logs
from billing_ui.models.invoice import Invoice, InvoiceFormData
from billing_ui.services import wire
from billing_ui.services.invoice_service import InvoiceService

LOG = logs.logger(__file__)

DEFAULT_BASE_URL = "https://invoiceusa.vercel.app/api"

# Statuses meaning the backend understood the request but refused the content.
_VALIDATION_STATUSES = {400, 422}


class InvoiceServiceApi(InvoiceService):
    """
    Invoice service talking to the remote REST backend.

    Optional Environment Variables:
        INVOICE_API_BASE_URL: API root (default: DEFAULT_BASE_URL)
        INVOICE_API_TIMEOUT: Request timeout in seconds (default: 30)

    Attributes:
        base_url: API root without a trailing slash.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the service.

        Args:
            base_url: API root, overrides INVOICE_API_BASE_URL.
            timeout: Request timeout, overrides INVOICE_API_TIMEOUT.
            client: Shared client to use instead of opening one per call.
                The caller owns its lifecycle.
        """
        self.base_url = (
            base_url or os.getenv("INVOICE_API_BASE_URL") or DEFAULT_BASE_URL
        ).rstrip("/")
        self.timeout = timeout or float(os.getenv("INVOICE_API_TIMEOUT", "30"))
        self._client = client

    async def list_invoices(self) -> List[Invoice]:
        response = await self._request("GET", "/invoices")
        if not response.is_success:
            raise _error(response, "Failed to fetch invoices", TransportError)
        payload = _json(response)
        if not isinstance(payload, list):
            raise TransportError("Expected a list of invoices", response.status_code)
        LOG.info("list_invoices - count:%s", len(payload))
        return [_decode(record) for record in payload]

    async def get_invoice(self, invoice_id: str) -> Invoice | None:
        response = await self._request("GET", f"/invoices/{invoice_id}")
        if response.status_code == httpx.codes.NOT_FOUND:
            return None
        if not response.is_success:
            raise _error(response, "Failed to fetch invoice", TransportError)
        return _decode(_json(response))

    async def delete_invoice(self, invoice_id: str) -> bool:
        response = await self._request("DELETE", f"/invoices/{invoice_id}")
        if response.status_code == httpx.codes.NOT_FOUND:
            LOG.info("delete_invoice - not found id:%s", invoice_id)
            return False
        if not response.is_success:
            raise _error(response, "Failed to delete invoice", TransportError)
        LOG.info("delete_invoice - deleted id:%s", invoice_id)
        return True

    async def _insert(self, form: InvoiceFormData, invoice_no: int) -> Invoice:
        response = await self._request(
            "POST", "/invoices", json=wire.to_wire(form, invoice_no)
        )
        return self._written(response, "Failed to create invoice")

    async def _replace(
        self, invoice_id: str, form: InvoiceFormData, invoice_no: int
    ) -> Invoice:
        response = await self._request(
            "PUT", f"/invoices/{invoice_id}", json=wire.to_wire(form, invoice_no)
        )
        return self._written(response, "Failed to update invoice")

    def _written(self, response: httpx.Response, default_message: str) -> Invoice:
        """Map the response of a POST/PUT back to an Invoice."""
        if response.status_code in _VALIDATION_STATUSES:
            raise _error(response, default_message, ValidationError)
        if not response.is_success:
            raise _error(response, default_message, TransportError)
        return _decode(_json(response))

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Issue one request, translating network failures to TransportError."""
        url = f"{self.base_url}{path}"
        LOG.info("%s %s", method, url)
        try:
            async with self._open_client() as client:
                response = await client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            LOG.error("%s %s failed: %s", method, url, exc)
            raise TransportError(f"Invoice backend unreachable: {exc}") from exc
        LOG.info("%s %s -> %s", method, url, response.status_code)
        return response

    @asynccontextmanager
    async def _open_client(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            yield client


def _json(response: httpx.Response) -> Any:
    """Decode a JSON body or fail with TransportError."""
    try:
        return response.json()
    except ValueError as exc:
        raise TransportError(
            "Invoice backend returned a malformed body", response.status_code
        ) from exc


def _decode(record: Any) -> Invoice:
    """Map one wire record, reporting bad records as a protocol failure."""
    if not isinstance(record, dict):
        raise TransportError("Invoice backend returned a malformed record")
    try:
        return wire.from_wire(record)
    except (ValidationError, TypeError, ValueError) as exc:
        raise TransportError(f"Invoice backend returned a bad record: {exc}") from exc


def _error(
    response: httpx.Response,
    default_message: str,
    error_type: type[InvoiceServiceError],
) -> InvoiceServiceError:
    """Build an error carrying the backend's ``message`` when it sent one."""
    message = default_message
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        message = str(body["message"])
    LOG.warning("%s: %s (HTTP %s)", default_message, message, response.status_code)
    return error_type(message, response.status_code)
