"""
Abstract base class defining the invoice data access contract.

Backends implement the storage primitives (list, get, insert, replace,
delete). Invoice numbering, search and the update flow are implemented
once here on top of those primitives, so every backend numbers and filters
invoices identically.

Implementations:
- InvoiceServiceApi: REST backend reached over HTTP
- DemoInvoiceService: in-memory wire records for development/testing
"""

from abc import ABC, abstractmethod
from typing import List

from billing_ui.errors import InvoiceServiceError
from billing_ui.lib import logs
from billing_ui.models.invoice import Invoice, InvoiceFormData
from billing_ui.utils import matches_query

LOG = logs.logger(__file__)

# Number given to the first invoice, and whenever the list cannot be read.
SEED_INVOICE_NUMBER = 2636


class InvoiceService(ABC):
    """
    Abstract base class for invoice data access.

    All operations are coroutines. Missing invoices are reported as None
    (get, update) or False (delete); everything else that goes wrong is
    raised as an InvoiceServiceError subclass.
    """

    @abstractmethod
    async def list_invoices(self) -> List[Invoice]:
        """
        Return every stored invoice in backend order.

        Raises:
            TransportError: If the backend cannot be reached or fails.
        """

    @abstractmethod
    async def get_invoice(self, invoice_id: str) -> Invoice | None:
        """
        Return a single invoice, or None if the backend reports not-found.

        Raises:
            TransportError: For any failure other than not-found.
        """

    @abstractmethod
    async def delete_invoice(self, invoice_id: str) -> bool:
        """
        Delete an invoice.

        Returns:
            True when deleted, False when no such invoice exists.

        Raises:
            TransportError: For any failure other than not-found.
        """

    @abstractmethod
    async def _insert(self, form: InvoiceFormData, invoice_no: int) -> Invoice:
        """Persist a new invoice carrying the given number."""

    @abstractmethod
    async def _replace(
        self, invoice_id: str, form: InvoiceFormData, invoice_no: int
    ) -> Invoice:
        """Overwrite an existing invoice, keeping the given number."""

    async def next_invoice_number(self) -> int:
        """
        Return the number the next created invoice should carry.

        This is one more than the highest existing number, or the seed when
        there are no invoices. A failure to list invoices also yields the
        seed so that invoice creation stays available while the backend is
        degraded.
        """
        try:
            invoices = await self.list_invoices()
        except InvoiceServiceError as exc:
            LOG.warning(
                "next_invoice_number - list failed, using seed %s: %s",
                SEED_INVOICE_NUMBER,
                exc,
            )
            return SEED_INVOICE_NUMBER
        if not invoices:
            return SEED_INVOICE_NUMBER
        return max(invoice.invoice_no for invoice in invoices) + 1

    async def create_invoice(self, form: InvoiceFormData) -> Invoice:
        """
        Number and persist a new invoice.

        Raises:
            ValidationError: If the backend rejects the payload.
            TransportError: For network or protocol failures.
        """
        invoice_no = await self.next_invoice_number()
        LOG.info("create_invoice - invoice_no:%s", invoice_no)
        return await self._insert(form, invoice_no)

    async def update_invoice(
        self, invoice_id: str, form: InvoiceFormData
    ) -> Invoice | None:
        """
        Replace the content of an existing invoice.

        The invoice number is read back from the stored invoice and reused;
        it is never reassigned. Returns None without writing anything when
        the invoice does not exist.

        Raises:
            ValidationError: If the backend rejects the payload.
            TransportError: For network or protocol failures.
        """
        existing = await self.get_invoice(invoice_id)
        if existing is None:
            LOG.info("update_invoice - not found id:%s", invoice_id)
            return None
        return await self._replace(invoice_id, form, existing.invoice_no)

    async def search_invoices(self, query: str) -> List[Invoice]:
        """
        Return invoices whose customer name, city or number match the query.

        The whole list is fetched and filtered locally; see
        billing_ui.utils.matches_query for the matching rules. A blank or
        whitespace-only query is not a filter and returns every invoice.
        """
        invoices = await self.list_invoices()
        return [invoice for invoice in invoices if matches_query(invoice, query)]
