"""
Mapping between the internal invoice model and the backend wire format.

Wire records look like::

    {
        "_id": "...",
        "invoiceNumber": "INV-2636",
        "date": "2024-05-01",
        "terms": "COD",
        "customer": {"name": ..., "address": ..., "city": ..., "phone": ...},
        "items": [{"_id": ..., "stockId": ..., "description": ..., "pieces": 3,
                   "weight": 1.25, "pricePerUnit": 10.0, "total": 30.0}],
        "charges": {"subtotal": 30.0, "shipping": 5.0, "other": 2.5,
                    "totalAmount": 37.5},
    }

Outbound payloads never carry ``_id`` and always recompute line totals and
charges locally. Inbound records are read through benedict keypaths so a
record missing an optional field still maps.
"""

from datetime import datetime, timezone
from typing import Any, Mapping

from benedict import benedict

from billing_ui import calculations
from billing_ui.errors import ValidationError
from billing_ui.models.invoice import Invoice, InvoiceFormData, LineItem
from billing_ui.utils import parse_date

INVOICE_NUMBER_PREFIX = "INV-"


def format_invoice_number(invoice_no: int) -> str:
    """Return the wire token for an invoice number, zero-padded to 4 digits."""
    return f"{INVOICE_NUMBER_PREFIX}{invoice_no:04d}"


def parse_invoice_number(token: str) -> int:
    """
    Recover the integer invoice number from its wire token.

    Raises:
        ValidationError: If the token is not of the form INV-<digits>.
    """
    value = str(token or "").strip()
    if value.startswith(INVOICE_NUMBER_PREFIX):
        value = value[len(INVOICE_NUMBER_PREFIX) :]
    if not value.isdigit():
        raise ValidationError(f"Malformed invoice number: {token!r}")
    return int(value)


def to_wire(form: InvoiceFormData, invoice_no: int) -> dict:
    """
    Build the create/update request body for an invoice.

    Args:
        form: Submitted invoice content.
        invoice_no: Number to embed; on update this is the existing number.

    Returns:
        JSON-serializable dictionary without any backend identifiers.
    """
    subtotal = calculations.subtotal(form.items)
    return {
        "invoiceNumber": format_invoice_number(invoice_no),
        "date": form.date.isoformat(),
        "terms": form.terms,
        "customer": {
            "name": form.customer_name,
            "phone": form.customer_phone,
            "address": form.customer_address,
            "city": form.customer_city,
        },
        "items": [
            {
                "stockId": item.stock_id,
                "description": item.description,
                "pieces": item.pieces,
                "weight": item.weight,
                "pricePerUnit": item.price_per_unit,
                "total": calculations.line_total(item.pieces, item.price_per_unit),
            }
            for item in form.items
        ],
        "charges": {
            "subtotal": subtotal,
            "shipping": form.shipping_charges,
            "other": form.other_charges,
            "totalAmount": subtotal + form.shipping_charges + form.other_charges,
        },
    }


def from_wire(record: Mapping[str, Any], now: datetime | None = None) -> Invoice:
    """
    Convert a backend record into an Invoice.

    The backend does not report creation or update times, so both are
    synthesized from ``now`` (default: current UTC time).

    Raises:
        ValidationError: If the record has no usable invoice number or its
            items are not a list of objects.
    """
    b = benedict(dict(record), keypath_separator=".")
    timestamp = now or datetime.now(timezone.utc)
    raw_items = b.get("items") or []
    if not isinstance(raw_items, list) or not all(
        isinstance(item, Mapping) for item in raw_items
    ):
        raise ValidationError("Invoice items must be a list of objects")
    items = [
        LineItem(
            id=str(item.get("_id") or ""),
            stock_id=item.get("stockId") or "",
            description=item.get("description") or "",
            pieces=int(item.get("pieces") or 0),
            weight=float(item.get("weight") or 0),
            price_per_unit=float(item.get("pricePerUnit") or 0),
            total=float(item.get("total") or 0),
        )
        for item in raw_items
    ]
    return Invoice(
        id=str(b.get("_id") or ""),
        invoice_no=parse_invoice_number(b.get("invoiceNumber", "")),
        date=parse_date(b.get("date")) or timestamp.date(),
        terms=b.get("terms") or "",
        customer_name=b.get("customer.name") or "",
        customer_address=b.get("customer.address") or "",
        customer_city=b.get("customer.city") or "",
        customer_phone=b.get("customer.phone") or "",
        items=items,
        subtotal=float(b.get("charges.subtotal") or 0),
        shipping_charges=float(b.get("charges.shipping") or 0),
        other_charges=float(b.get("charges.other") or 0),
        total_amount=float(b.get("charges.totalAmount") or 0),
        created_at=timestamp,
        updated_at=timestamp,
    )
