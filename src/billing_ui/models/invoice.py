"""
Invoice domain models.

The internal shape is flat (customer and charge fields live directly on the
invoice) while the backend stores nested ``customer`` and ``charges``
objects; billing_ui.services.wire converts between the two. The hierarchy is:

    Invoice
    ├── customer fields (name, address, city, phone)
    ├── LineItem[] (stock id, description, pieces, carats, unit price)
    └── charges (subtotal, shipping, other, total)

InvoiceFormData is what the create/edit form produces: no identifiers and
no derived totals, those are assigned by the access layer on save.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Sequence

from billing_ui import calculations

DEFAULT_TERMS = "COD"


@dataclass(slots=True)
class LineItem:
    """A priced entry on a saved invoice."""

    id: str
    stock_id: str
    description: str
    pieces: int
    weight: float
    price_per_unit: float
    total: float

    @property
    def line_total(self) -> float:
        """Return the extended price recomputed from pieces and unit price."""
        return calculations.line_total(self.pieces, self.price_per_unit)


@dataclass(slots=True)
class LineItemInput:
    """A line as entered on the form, before the backend assigns an id."""

    description: str = ""
    stock_id: str = ""
    pieces: int = 0
    weight: float = 0.0
    price_per_unit: float = 0.0

    @property
    def line_total(self) -> float:
        return calculations.line_total(self.pieces, self.price_per_unit)


@dataclass(slots=True)
class Invoice:
    """Primary dataclass for saved invoices."""

    id: str
    invoice_no: int
    date: date
    terms: str
    customer_name: str
    customer_address: str
    customer_city: str
    customer_phone: str
    items: Sequence[LineItem]
    subtotal: float
    shipping_charges: float
    other_charges: float
    total_amount: float
    created_at: datetime
    updated_at: datetime

    @property
    def invoice_label(self) -> str:
        """Return the invoice number as it is stored by the backend."""
        from billing_ui.services.wire import format_invoice_number

        return format_invoice_number(self.invoice_no)

    def searchable_terms(self) -> List[str]:
        """Return the lower-cased text fields matched by search."""
        return [
            value.lower()
            for value in (self.customer_name, self.customer_city)
            if value
        ]


@dataclass(slots=True)
class InvoiceFormData:
    """Editable invoice content submitted to create or update."""

    date: date
    customer_name: str
    customer_address: str
    customer_city: str
    customer_phone: str = ""
    terms: str = DEFAULT_TERMS
    items: Sequence[LineItemInput] = field(default_factory=list)
    shipping_charges: float = 0.0
    other_charges: float = 0.0

    @classmethod
    def blank(cls, today: date | None = None) -> "InvoiceFormData":
        """Return the form shown for a new invoice: today, COD, one empty line."""
        return cls(
            date=today or date.today(),
            customer_name="",
            customer_address="",
            customer_city="",
            items=[LineItemInput()],
        )

    @classmethod
    def from_invoice(cls, invoice: Invoice) -> "InvoiceFormData":
        """Return the editable content of a saved invoice."""
        return cls(
            date=invoice.date,
            terms=invoice.terms,
            customer_name=invoice.customer_name,
            customer_address=invoice.customer_address,
            customer_city=invoice.customer_city,
            customer_phone=invoice.customer_phone,
            items=[
                LineItemInput(
                    description=item.description,
                    stock_id=item.stock_id,
                    pieces=item.pieces,
                    weight=item.weight,
                    price_per_unit=item.price_per_unit,
                )
                for item in invoice.items
            ],
            shipping_charges=invoice.shipping_charges,
            other_charges=invoice.other_charges,
        )

    @property
    def subtotal(self) -> float:
        return calculations.subtotal(self.items)

    @property
    def total_amount(self) -> float:
        return calculations.total_amount(
            self.items, self.shipping_charges, self.other_charges
        )

    def validate(self) -> List[str]:
        """
        Return the problems that prevent this form from being submitted.

        An empty list means the form is valid. Checks mirror the required
        markers on the form: customer name, address and city, at least one
        line with a description, and no negative quantities or amounts.
        """
        problems: List[str] = []
        if not self.customer_name.strip():
            problems.append("Customer name is required")
        if not self.customer_address.strip():
            problems.append("Customer address is required")
        if not self.customer_city.strip():
            problems.append("Customer city is required")
        if not self.items:
            problems.append("At least one line item is required")
        for index, item in enumerate(self.items, start=1):
            if not item.description.strip():
                problems.append(f"Line {index}: description is required")
            if item.pieces < 0 or item.weight < 0 or item.price_per_unit < 0:
                problems.append(f"Line {index}: values cannot be negative")
        if self.shipping_charges < 0 or self.other_charges < 0:
            problems.append("Charges cannot be negative")
        return problems
