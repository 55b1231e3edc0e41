"""
Printable invoice preview for Reflex.

Renders the selected invoice the way it is printed: company header,
bill-to block, item table and totals. Printing goes through the browser's
print dialog; the toolbar is hidden in print media by the stylesheet.
"""

import reflex as rx

from billing_ui.components.totals import totals_row
from billing_ui.models.reflex_models import LineItemModel
from billing_ui.state import COMPANY_NAME, COMPANY_PHONE, InvoiceState


def invoice_preview() -> rx.Component:
    """
    Build the preview panel.

    Returns:
        The preview card of the selected invoice.
    """
    invoice = InvoiceState.selected
    return rx.box(
        rx.box(
            rx.button(
                rx.icon("printer", size=16),
                "Print",
                on_click=InvoiceState.print_invoice,
            ),
            rx.button(
                rx.icon("download", size=16),
                "Download PDF",
                variant="outline",
                on_click=InvoiceState.download_pdf,
            ),
            rx.button(
                rx.icon("pencil", size=16),
                "Edit",
                variant="outline",
                on_click=InvoiceState.edit(invoice.id),
            ),
            class_name="action-row print-hidden",
        ),
        rx.text(
            'To download, choose "Save as PDF" as the printer.',
            class_name="muted print-hidden",
        ),
        rx.box(
            rx.box(
                rx.box(
                    rx.heading(COMPANY_NAME, size="6", as_="h1"),
                    rx.text(f"Tel No: {COMPANY_PHONE}", class_name="muted"),
                ),
                rx.box(
                    rx.heading("INVOICE", size="5", as_="h2"),
                    _meta("Invoice No", invoice.invoice_no),
                    _meta("Date", invoice.date),
                    _meta("Terms", invoice.terms),
                    class_name="invoice-meta",
                ),
                class_name="invoice-header",
            ),
            rx.box(
                rx.text("Bill To", class_name="label"),
                rx.text(invoice.customer_name, class_name="value"),
                rx.text(invoice.customer_address),
                rx.text(invoice.customer_city),
                rx.cond(
                    invoice.customer_phone != "",
                    rx.text(f"Tel: {invoice.customer_phone}"),
                ),
                class_name="bill-to",
            ),
            _items_table(),
            rx.box(
                totals_row("Subtotal", invoice.subtotal),
                totals_row("Shipping", invoice.shipping_charges),
                totals_row("Other", invoice.other_charges),
                rx.box(class_name="divider subtle"),
                totals_row("Total", invoice.total_amount, emphasize=True),
                class_name="totals",
            ),
            class_name="invoice-content",
        ),
        class_name="card preview-card",
    )


def _items_table() -> rx.Component:
    return rx.table.root(
        rx.table.header(
            rx.table.row(
                rx.table.column_header_cell("Stock ID"),
                rx.table.column_header_cell("Description"),
                rx.table.column_header_cell("Pcs"),
                rx.table.column_header_cell("Weight (ct)"),
                rx.table.column_header_cell("Price / Unit"),
                rx.table.column_header_cell("Total"),
            ),
        ),
        rx.table.body(rx.foreach(InvoiceState.selected.items, _item_row)),
        class_name="items-table",
    )


def _item_row(item: LineItemModel) -> rx.Component:
    return rx.table.row(
        rx.table.cell(item.stock_id),
        rx.table.cell(item.description),
        rx.table.cell(item.pieces),
        rx.table.cell(item.weight),
        rx.table.cell(item.price_per_unit),
        rx.table.cell(item.total),
    )


def _meta(label: str, value) -> rx.Component:
    return rx.box(
        rx.text(f"{label}:", class_name="label"),
        rx.text(value),
        class_name="meta-item",
    )

