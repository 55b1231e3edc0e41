"""
Reflex UI components for the billing application.

This package provides one component per screen:
- invoice_list: searchable invoice cards with view/edit/delete actions
- invoice_form: create/edit form with live totals
- invoice_preview: printable invoice rendering
"""

from billing_ui.components.invoice_form import invoice_form
from billing_ui.components.invoice_list import invoice_list
from billing_ui.components.invoice_preview import invoice_preview

__all__ = ["invoice_form", "invoice_list", "invoice_preview"]
