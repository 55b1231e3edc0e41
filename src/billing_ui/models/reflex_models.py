"""
Reflex-compatible models for the billing UI.

These models extend rx.Base so they can be used with rx.foreach and other
Reflex reactive components. Monetary and date fields are pre-formatted
strings because components cannot call Python formatting on state vars.
"""

import math

import reflex as rx

from billing_ui import calculations
from billing_ui.models.invoice import Invoice, InvoiceFormData, LineItemInput
from billing_ui.utils import format_currency, format_date, parse_date


class LineItemModel(rx.Base):
    """Saved line item as displayed."""

    id: str = ""
    stock_id: str = ""
    description: str = ""
    pieces: int = 0
    weight: str = "0.00"
    price_per_unit: str = "$0.00"
    total: str = "$0.00"


class InvoiceModel(rx.Base):
    """Saved invoice as displayed in the list and preview."""

    id: str = ""
    invoice_no: int = 0
    invoice_label: str = ""
    date: str = ""
    terms: str = ""
    customer_name: str = ""
    customer_address: str = ""
    customer_city: str = ""
    customer_phone: str = ""
    items: list[LineItemModel] = []
    item_count: int = 0
    subtotal: str = "$0.00"
    shipping_charges: str = "$0.00"
    other_charges: str = "$0.00"
    total_amount: str = "$0.00"
    created_at: str = ""


class FormLineModel(rx.Base):
    """Editable line on the invoice form; numeric fields hold raw input."""

    stock_id: str = ""
    description: str = ""
    pieces: str = "0"
    weight: str = "0"
    price_per_unit: str = "0"
    total: str = "$0.00"


def invoice_to_model(invoice: Invoice) -> InvoiceModel:
    """
    Convert a domain Invoice to an InvoiceModel.

    Line totals are shown as recomputed from pieces and unit price.

    Args:
        invoice: Invoice from the service layer.

    Returns:
        InvoiceModel instance.
    """
    return InvoiceModel(
        id=invoice.id,
        invoice_no=invoice.invoice_no,
        invoice_label=invoice.invoice_label,
        date=format_date(invoice.date),
        terms=invoice.terms,
        customer_name=invoice.customer_name,
        customer_address=invoice.customer_address,
        customer_city=invoice.customer_city,
        customer_phone=invoice.customer_phone,
        items=[
            LineItemModel(
                id=item.id,
                stock_id=item.stock_id,
                description=item.description,
                pieces=item.pieces,
                weight=f"{item.weight:.2f}",
                price_per_unit=format_currency(item.price_per_unit),
                total=format_currency(item.line_total),
            )
            for item in invoice.items
        ],
        item_count=len(invoice.items),
        subtotal=format_currency(invoice.subtotal),
        shipping_charges=format_currency(invoice.shipping_charges),
        other_charges=format_currency(invoice.other_charges),
        total_amount=format_currency(invoice.total_amount),
        created_at=format_date(invoice.created_at.date()),
    )


def form_line_to_model(item: LineItemInput) -> FormLineModel:
    return FormLineModel(
        stock_id=item.stock_id,
        description=item.description,
        pieces=str(item.pieces),
        weight=_plain(item.weight),
        price_per_unit=_plain(item.price_per_unit),
        total=format_currency(item.line_total),
    )


def model_to_form_line(model: FormLineModel) -> LineItemInput:
    """Parse raw form input; unparseable numbers count as zero."""
    return LineItemInput(
        stock_id=model.stock_id.strip(),
        description=model.description.strip(),
        pieces=int(_number(model.pieces)),
        weight=_number(model.weight),
        price_per_unit=_number(model.price_per_unit),
    )


def with_line_total(model: FormLineModel) -> FormLineModel:
    """Return the line with its displayed total refreshed."""
    line = model_to_form_line(model)
    return FormLineModel(
        stock_id=model.stock_id,
        description=model.description,
        pieces=model.pieces,
        weight=model.weight,
        price_per_unit=model.price_per_unit,
        total=format_currency(
            calculations.line_total(line.pieces, line.price_per_unit)
        ),
    )


def build_form_data(
    date_str: str,
    terms: str,
    customer_name: str,
    customer_address: str,
    customer_city: str,
    customer_phone: str,
    lines: list[FormLineModel],
    shipping_charges: str,
    other_charges: str,
) -> InvoiceFormData:
    """Assemble InvoiceFormData from the raw values held by the form state."""
    return InvoiceFormData(
        date=parse_date(date_str) or InvoiceFormData.blank().date,
        terms=terms.strip(),
        customer_name=customer_name.strip(),
        customer_address=customer_address.strip(),
        customer_city=customer_city.strip(),
        customer_phone=customer_phone.strip(),
        items=[model_to_form_line(line) for line in lines],
        shipping_charges=_number(shipping_charges),
        other_charges=_number(other_charges),
    )


def _number(value: str) -> float:
    try:
        number = float(value.strip() or 0)
    except ValueError:
        return 0.0
    return number if math.isfinite(number) else 0.0


def _plain(value: float) -> str:
    """Render a number for an input box without a trailing .0 on integers."""
    return str(int(value)) if float(value).is_integer() else str(value)
