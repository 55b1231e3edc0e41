"""
Demo implementation of InvoiceService using in-memory wire records.

This service is useful for:
- Local development without access to the invoice API
- Testing the UI and the service contract with realistic data

Records are kept in backend wire format and every read and write goes
through billing_ui.services.wire, so the demo exercises the same mapping
as the HTTP service.
"""

import copy
from typing import Any, Dict, List, Sequence
from uuid import uuid4

from billing_ui.data.demo_invoices import DEMO_INVOICES
from billing_ui.errors import ValidationError
from billing_ui.lib import logs
from billing_ui.models.invoice import Invoice, InvoiceFormData
from billing_ui.services import wire
from billing_ui.services.invoice_service import InvoiceService

LOG = logs.logger(__file__)


class DemoInvoiceService(InvoiceService):
    """
    In-memory invoice service seeded with static demo records.

    Rejects the same payloads the real backend refuses (no line items,
    missing customer name) with ValidationError.
    """

    def __init__(self, records: Sequence[Dict[str, Any]] | None = None) -> None:
        """
        Initialize with wire-format records.

        Args:
            records: Records without ``_id``, or None to use DEMO_INVOICES.
                Pass an empty list for an empty store.
        """
        seed = DEMO_INVOICES if records is None else records
        self._records: Dict[str, Dict[str, Any]] = {}
        for record in seed:
            self._store(copy.deepcopy(record))

    async def list_invoices(self) -> List[Invoice]:
        return [wire.from_wire(record) for record in self._records.values()]

    async def get_invoice(self, invoice_id: str) -> Invoice | None:
        record = self._records.get(invoice_id)
        return wire.from_wire(record) if record is not None else None

    async def delete_invoice(self, invoice_id: str) -> bool:
        if self._records.pop(invoice_id, None) is None:
            return False
        LOG.info("delete_invoice - deleted id:%s", invoice_id)
        return True

    async def _insert(self, form: InvoiceFormData, invoice_no: int) -> Invoice:
        payload = wire.to_wire(form, invoice_no)
        _check(payload)
        return wire.from_wire(self._store(payload))

    async def _replace(
        self, invoice_id: str, form: InvoiceFormData, invoice_no: int
    ) -> Invoice:
        payload = wire.to_wire(form, invoice_no)
        _check(payload)
        return wire.from_wire(self._store(payload, invoice_id))

    def _store(
        self, record: Dict[str, Any], invoice_id: str | None = None
    ) -> Dict[str, Any]:
        """Assign backend identifiers and keep the record."""
        record["_id"] = invoice_id or uuid4().hex
        for item in record.get("items", []):
            item["_id"] = uuid4().hex
        self._records[record["_id"]] = record
        return copy.deepcopy(record)


def _check(payload: Dict[str, Any]) -> None:
    """Apply the backend's required-field rules."""
    if not payload["items"]:
        raise ValidationError("Invoice must contain at least one item", 400)
    if not payload["customer"]["name"]:
        raise ValidationError("Customer name is required", 400)
