"""
Invoice form component for Reflex.

Used both for new invoices and for editing; the state decides which by
whether an invoice is attached to the current view.
"""

import reflex as rx

from billing_ui.components.totals import totals_row
from billing_ui.models.reflex_models import FormLineModel
from billing_ui.state import InvoiceState


def invoice_form() -> rx.Component:
    """
    Build the create/edit form.

    Returns:
        The form card component.
    """
    return rx.box(
        rx.heading(InvoiceState.form_title, size="4", as_="h2"),
        _details_section(),
        _customer_section(),
        _items_section(),
        _charges_section(),
        rx.box(
            rx.button(
                "Cancel",
                variant="soft",
                color_scheme="gray",
                on_click=InvoiceState.show_list,
            ),
            rx.button(
                rx.cond(InvoiceState.editing_no, "Update Invoice", "Create Invoice"),
                loading=InvoiceState.is_saving,
                on_click=InvoiceState.save,
            ),
            class_name="action-row end",
        ),
        class_name="card form-card",
    )


def _details_section() -> rx.Component:
    return _section(
        "Invoice Details",
        rx.box(
            _field("Date", "form_date", InvoiceState.form_date, type_="date"),
            _field("Terms", "form_terms", InvoiceState.form_terms),
            class_name="form-grid",
        ),
    )


def _customer_section() -> rx.Component:
    return _section(
        "Customer Information",
        rx.box(
            _field("Customer Name *", "customer_name", InvoiceState.customer_name),
            _field("Phone", "customer_phone", InvoiceState.customer_phone),
            _field("City *", "customer_city", InvoiceState.customer_city),
            class_name="form-grid",
        ),
        rx.box(
            rx.text("Address *", class_name="label"),
            rx.text_area(
                value=InvoiceState.customer_address,
                on_change=lambda value: InvoiceState.set_form_field(
                    "customer_address", value
                ),
            ),
            class_name="form-field",
        ),
    )


def _items_section() -> rx.Component:
    return _section(
        "Items",
        rx.foreach(InvoiceState.form_items, _line_row),
        rx.button(
            rx.icon("plus", size=16),
            "Add Item",
            variant="outline",
            on_click=InvoiceState.add_item,
        ),
    )


def _line_row(line: FormLineModel, index: int) -> rx.Component:
    """Build the inputs of one line; the total is read-only."""
    return rx.box(
        _line_field("Stock ID", line.stock_id, index, "stock_id"),
        _line_field("Description *", line.description, index, "description"),
        _line_field("Pieces", line.pieces, index, "pieces", type_="number"),
        _line_field("Weight (ct)", line.weight, index, "weight", type_="number"),
        _line_field(
            "Price / Unit",
            line.price_per_unit,
            index,
            "price_per_unit",
            type_="number",
        ),
        rx.box(
            rx.text("Total", class_name="label"),
            rx.text(line.total, class_name="value"),
            class_name="form-field",
        ),
        rx.button(
            rx.icon("trash-2", size=16),
            variant="ghost",
            color_scheme="red",
            disabled=InvoiceState.form_items.length() <= 1,
            on_click=InvoiceState.remove_item(index),
            title="Remove item",
        ),
        class_name="line-row",
    )


def _charges_section() -> rx.Component:
    return _section(
        "Charges",
        rx.box(
            _field(
                "Shipping",
                "shipping_charges",
                InvoiceState.shipping_charges,
                type_="number",
            ),
            _field(
                "Other / Tax",
                "other_charges",
                InvoiceState.other_charges,
                type_="number",
            ),
            class_name="form-grid",
        ),
        rx.box(
            totals_row("Subtotal", InvoiceState.form_subtotal),
            totals_row("Total Amount", InvoiceState.form_total, emphasize=True),
            class_name="totals",
        ),
    )


def _section(title: str, *children: rx.Component) -> rx.Component:
    return rx.box(
        rx.heading(title, size="3", as_="h3"),
        *children,
        class_name="surface form-section",
    )


def _field(label: str, name: str, value, type_: str = "text") -> rx.Component:
    return rx.box(
        rx.text(label, class_name="label"),
        rx.input(
            value=value,
            type=type_,
            on_change=lambda new_value: InvoiceState.set_form_field(name, new_value),
        ),
        class_name="form-field",
    )


def _line_field(
    label: str, value, index, name: str, type_: str = "text"
) -> rx.Component:
    return rx.box(
        rx.text(label, class_name="label"),
        rx.input(
            value=value,
            type=type_,
            on_change=lambda new_value: InvoiceState.set_item_field(
                index, name, new_value
            ),
        ),
        class_name="form-field",
    )
