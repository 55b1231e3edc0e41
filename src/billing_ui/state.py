"""
Reflex state management for the billing UI.

This module contains the main application state class that handles the
invoice list and search, the create/edit form and the preview. Navigation
goes through billing_ui.models.common.ViewState transitions; the Reflex vars
below are projections of it for the components.
"""

import os
from typing import Dict

import reflex as rx

from billing_ui.errors import InvoiceServiceError
from billing_ui.lib import logs
from billing_ui.models.common import ViewMode, ViewState
from billing_ui.models.invoice import Invoice, InvoiceFormData
from billing_ui.models.reflex_models import (
    FormLineModel,
    InvoiceModel,
    build_form_data,
    form_line_to_model,
    invoice_to_model,
    with_line_total,
)
from billing_ui.services import get_invoice_service
from billing_ui.utils import format_currency, print_script

LOG = logs.logger(__file__)

# Branding configuration
COMPANY_NAME = os.getenv("INVOICE_UI_COMPANY", "Starlink Jewels")
COMPANY_PHONE = os.getenv("INVOICE_UI_COMPANY_PHONE", "+91 83472 78188")
APP_TITLE = COMPANY_NAME
APP_SUBTITLE = "Billing Management System"

_FORM_FIELDS = {
    "form_date",
    "form_terms",
    "customer_name",
    "customer_address",
    "customer_city",
    "customer_phone",
    "shipping_charges",
    "other_charges",
}
_LINE_FIELDS = {"stock_id", "description", "pieces", "weight", "price_per_unit"}


def _get_service():
    """Get the configured invoice service (lazy loaded)."""
    return get_invoice_service()


class InvoiceState(rx.State):
    """
    Main application state for the billing UI.

    Handles listing, search, create/edit, delete and preview.
    """

    # Navigation
    mode: str = ViewMode.LISTING.value
    selected: InvoiceModel = InvoiceModel()
    editing_no: int = 0

    # Listing
    invoices: list[InvoiceModel] = []
    query: str = ""
    is_loading: bool = True
    pending_delete_id: str = ""
    pending_delete_no: int = 0

    # Form (raw input values)
    form_date: str = ""
    form_terms: str = ""
    customer_name: str = ""
    customer_address: str = ""
    customer_city: str = ""
    customer_phone: str = ""
    form_items: list[FormLineModel] = []
    shipping_charges: str = "0"
    other_charges: str = "0"
    is_saving: bool = False

    # Backend-only: domain objects are not sent to the browser
    _view: ViewState = ViewState()
    _by_id: Dict[str, Invoice] = {}

    @rx.var
    def result_summary(self) -> str:
        """Generate summary text for the invoice list."""
        noun = "invoice" if len(self.invoices) == 1 else "invoices"
        base = f"{len(self.invoices)} {noun}"
        if self.query.strip():
            return f'{base} matching "{self.query.strip()}"'
        return base

    @rx.var
    def is_empty(self) -> bool:
        """Check if empty state should be shown."""
        return not self.is_loading and len(self.invoices) == 0

    @rx.var
    def form_title(self) -> str:
        if self.editing_no:
            return f"Edit Invoice #{self.editing_no}"
        return "Create New Invoice"

    @rx.var(cache=False)
    def form_subtotal(self) -> str:
        return format_currency(self._form_data().subtotal)

    @rx.var(cache=False)
    def form_total(self) -> str:
        return format_currency(self._form_data().total_amount)

    @rx.event
    async def on_load(self):
        """Event handler for initial page load."""
        self._navigate(self._view.listing())
        return await self._refresh()

    @rx.event
    async def search(self, query: str):
        """
        Event handler for search query changes.

        A blank query shows the full list newest first; otherwise the
        service filters on customer name, city and invoice number.
        """
        self.query = query or ""
        return await self._refresh()

    @rx.event
    def show_list(self):
        self._navigate(self._view.listing())

    @rx.event
    def create_new(self):
        """Open a blank form for a new invoice."""
        self._navigate(self._view.create_new())
        self._load_form(InvoiceFormData.blank())

    @rx.event
    def show_form(self):
        """Switch to the form tab, keeping an edit in progress."""
        if self._view.mode is not ViewMode.EDITING:
            self._navigate(self._view.create_new())
            self._load_form(InvoiceFormData.blank())

    @rx.event
    def edit(self, invoice_id: str):
        invoice = self._by_id.get(invoice_id)
        if invoice is None:
            return rx.toast.error("Invoice is no longer available")
        self._navigate(self._view.edit(invoice))
        self._load_form(InvoiceFormData.from_invoice(invoice))

    @rx.event
    def preview(self, invoice_id: str):
        invoice = self._by_id.get(invoice_id)
        if invoice is None:
            return rx.toast.error("Invoice is no longer available")
        self._navigate(self._view.preview(invoice))

    @rx.event
    def show_preview(self):
        """Switch to the preview tab for the last selected invoice, if any."""
        invoice = self._view.preview_target
        if invoice is None:
            return rx.toast.info("Select an invoice from the list to preview")
        self._navigate(self._view.preview(invoice))

    @rx.event
    def print_invoice(self):
        return rx.call_script(print_script())

    @rx.event
    def download_pdf(self):
        """Open the print dialog titled after the invoice for saving as PDF."""
        return rx.call_script(print_script(self.selected.invoice_label))

    @rx.event
    def request_delete(self, invoice_id: str, invoice_no: int):
        self.pending_delete_id = invoice_id
        self.pending_delete_no = invoice_no

    @rx.event
    def cancel_delete(self):
        self.pending_delete_id = ""
        self.pending_delete_no = 0

    @rx.event
    async def confirm_delete(self):
        """Delete the invoice awaiting confirmation and reload the list."""
        invoice_id = self.pending_delete_id
        self.pending_delete_id = ""
        self.pending_delete_no = 0
        if not invoice_id:
            return None
        try:
            deleted = await _get_service().delete_invoice(invoice_id)
        except InvoiceServiceError as e:
            LOG.error("Delete failed: %s", e, exc_info=True)
            return rx.toast.error("Failed to delete invoice")
        if not deleted:
            await self._refresh()
            return rx.toast.error("Failed to delete invoice")
        self._navigate(self._view.forget(invoice_id))
        await self._refresh()
        return rx.toast.success("Invoice deleted successfully")

    @rx.event
    async def save(self):
        """Create or update the invoice held by the form."""
        form = self._form_data()
        problems = form.validate()
        if problems:
            return rx.toast.error("; ".join(problems))

        editing_id = self._view.editing_id
        self.is_saving = True
        try:
            if editing_id:
                saved = await _get_service().update_invoice(editing_id, form)
                if saved is None:
                    return rx.toast.error("Invoice no longer exists")
                message = "Invoice updated successfully"
            else:
                saved = await _get_service().create_invoice(form)
                message = "Invoice created successfully"
        except InvoiceServiceError as e:
            LOG.error("Save failed: %s", e, exc_info=True)
            return rx.toast.error(f"Failed to save invoice: {e.message}")
        finally:
            self.is_saving = False

        LOG.info("Saved invoice %s id:%s", saved.invoice_no, saved.id)
        self._navigate(self._view.after_save())
        self.query = ""
        await self._refresh()
        return rx.toast.success(message)

    @rx.event
    def set_form_field(self, field: str, value: str):
        if field not in _FORM_FIELDS:
            raise ValueError(f"Unknown form field: {field}")
        setattr(self, field, value)

    @rx.event
    def set_item_field(self, index: int, field: str, value: str):
        if field not in _LINE_FIELDS:
            raise ValueError(f"Unknown line field: {field}")
        items = list(self.form_items)
        line = FormLineModel(**{**items[index].dict(), field: value})
        items[index] = with_line_total(line)
        self.form_items = items

    @rx.event
    def add_item(self):
        self.form_items = [*self.form_items, FormLineModel()]

    @rx.event
    def remove_item(self, index: int):
        """Remove a line; the last remaining line is kept."""
        if len(self.form_items) <= 1:
            return
        self.form_items = [
            line for position, line in enumerate(self.form_items) if position != index
        ]

    async def _refresh(self):
        """Reload the list from the service according to the current query."""
        self.is_loading = True
        try:
            if self.query.strip():
                invoices = await _get_service().search_invoices(self.query)
            else:
                invoices = await _get_service().list_invoices()
                invoices.sort(key=lambda invoice: invoice.invoice_no, reverse=True)
        except InvoiceServiceError as e:
            LOG.error("Loading invoices failed: %s", e, exc_info=True)
            self.invoices = []
            return rx.toast.error("Failed to load invoices")
        finally:
            self.is_loading = False
        self._by_id = {invoice.id: invoice for invoice in invoices}
        self.invoices = [invoice_to_model(invoice) for invoice in invoices]
        return None

    def _navigate(self, view: ViewState) -> None:
        """Apply a view transition and project it onto the frontend vars."""
        self._view = view
        self.mode = view.mode.value
        self.editing_no = view.invoice.invoice_no if view.editing_id else 0
        self.selected = (
            invoice_to_model(view.invoice) if view.invoice else InvoiceModel()
        )

    def _load_form(self, form: InvoiceFormData) -> None:
        self.form_date = form.date.isoformat()
        self.form_terms = form.terms
        self.customer_name = form.customer_name
        self.customer_address = form.customer_address
        self.customer_city = form.customer_city
        self.customer_phone = form.customer_phone
        self.form_items = [form_line_to_model(item) for item in form.items]
        self.shipping_charges = str(form.shipping_charges)
        self.other_charges = str(form.other_charges)

    def _form_data(self) -> InvoiceFormData:
        return build_form_data(
            self.form_date,
            self.form_terms,
            self.customer_name,
            self.customer_address,
            self.customer_city,
            self.customer_phone,
            self.form_items,
            self.shipping_charges,
            self.other_charges,
        )
