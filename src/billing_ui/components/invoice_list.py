"""
Invoice list component for Reflex.

Shows the search box, one card per invoice with view/edit/delete actions,
the empty state and the delete confirmation dialog.
"""

import reflex as rx

from billing_ui.models.reflex_models import InvoiceModel
from billing_ui.state import InvoiceState


def invoice_list() -> rx.Component:
    """
    Build the invoice management panel.

    Returns:
        The list panel component.
    """
    return rx.box(
        rx.heading("Invoice Management", size="4", as_="h2"),
        _search_box(),
        rx.cond(
            InvoiceState.is_loading,
            _loader(),
            rx.cond(InvoiceState.is_empty, _empty(), _results()),
        ),
        _delete_dialog(),
        class_name="card list-card",
    )


def _search_box() -> rx.Component:
    return rx.box(
        rx.icon("search", class_name="input-icon"),
        rx.input(
            placeholder="Search by customer name, invoice number, or city...",
            value=InvoiceState.query,
            on_change=InvoiceState.search,
            class_name="search-input",
            debounce_timeout=300,
        ),
        class_name="input-with-icon",
    )


def _results() -> rx.Component:
    return rx.box(
        rx.text(InvoiceState.result_summary, class_name="muted results-summary"),
        rx.foreach(InvoiceState.invoices, _invoice_card),
        class_name="results",
    )


def _invoice_card(invoice: InvoiceModel) -> rx.Component:
    """Build the summary card of one invoice."""
    return rx.box(
        rx.box(
            rx.box(
                rx.heading(f"Invoice #{invoice.invoice_no}", size="3", as_="h3"),
                rx.text(invoice.terms, class_name="badge secondary"),
                class_name="title-row",
            ),
            rx.box(
                rx.box(
                    rx.text(invoice.customer_name, class_name="value"),
                    rx.text(invoice.customer_city, class_name="muted"),
                ),
                rx.box(
                    rx.text(f"Date: {invoice.date}"),
                    rx.text(f"Items: {invoice.item_count}"),
                    class_name="muted",
                ),
                rx.box(
                    rx.text(f"Total: {invoice.total_amount}", class_name="value"),
                    rx.text(f"Created: {invoice.created_at}", class_name="muted"),
                ),
                class_name="info-grid",
            ),
            class_name="header-text",
        ),
        rx.box(
            _action("eye", "View", InvoiceState.preview(invoice.id)),
            _action("pencil", "Edit", InvoiceState.edit(invoice.id)),
            _action(
                "trash-2",
                "Delete",
                InvoiceState.request_delete(invoice.id, invoice.invoice_no),
                danger=True,
            ),
            class_name="action-row",
        ),
        class_name="card invoice-card",
    )


def _action(icon: str, title: str, on_click, danger: bool = False) -> rx.Component:
    return rx.button(
        rx.icon(icon, size=16),
        on_click=on_click,
        title=title,
        variant="outline",
        color_scheme="red" if danger else "blue",
        size="1",
    )


def _delete_dialog() -> rx.Component:
    """Confirmation shown before an invoice is deleted."""
    return rx.alert_dialog.root(
        rx.alert_dialog.content(
            rx.alert_dialog.title("Delete invoice"),
            rx.alert_dialog.description(
                f"Are you sure you want to delete "
                f"Invoice #{InvoiceState.pending_delete_no}?"
            ),
            rx.flex(
                rx.alert_dialog.cancel(
                    rx.button(
                        "Cancel",
                        variant="soft",
                        color_scheme="gray",
                        on_click=InvoiceState.cancel_delete,
                    ),
                ),
                rx.alert_dialog.action(
                    rx.button(
                        "Delete",
                        color_scheme="red",
                        on_click=InvoiceState.confirm_delete,
                    ),
                ),
                spacing="3",
                justify="end",
            ),
        ),
        open=InvoiceState.pending_delete_id != "",
    )


def _empty() -> rx.Component:
    """Build the empty state when no invoices are found."""
    return rx.box(
        rx.icon("file-x", class_name="empty-icon", size=60),
        rx.cond(
            InvoiceState.query != "",
            rx.text("No invoices found matching your search.", class_name="muted"),
            rx.text("No invoices created yet.", class_name="muted"),
        ),
        class_name="empty-state",
    )


def _loader() -> rx.Component:
    return rx.box(
        rx.box(class_name="spinner"),
        rx.text("Loading invoices...", class_name="muted"),
        class_name="loading-state",
    )
