"""
Data models for the billing UI.

This package provides:
- Invoice domain models (Invoice, LineItem, InvoiceFormData, LineItemInput)
- The immutable view state driving which screen is shown

All domain models are plain dataclasses; the Reflex-facing copies live in
billing_ui.models.reflex_models and are not re-exported here.
"""

from billing_ui.models.common import ViewMode, ViewState
from billing_ui.models.invoice import (
    DEFAULT_TERMS,
    Invoice,
    InvoiceFormData,
    LineItem,
    LineItemInput,
)

__all__ = [
    "DEFAULT_TERMS",
    "Invoice",
    "InvoiceFormData",
    "LineItem",
    "LineItemInput",
    "ViewMode",
    "ViewState",
]
