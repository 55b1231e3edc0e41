"""
Service factory for the billing UI.

This module provides the get_invoice_service() factory function that returns
the appropriate InvoiceService implementation based on configuration.

Available Implementations:
- api: REST backend over HTTP (INVOICE_API_BASE_URL)
- demo: In-memory service with static invoice data (no network required)

The service is cached at the module level, so the same instance is reused
across all requests. Configure via INVOICE_UI_SERVICE environment variable.
"""

import os
from functools import cache
from typing import Callable, Dict

from billing_ui.lib import logs
from billing_ui.services.invoice_service import SEED_INVOICE_NUMBER, InvoiceService
from billing_ui.services.invoice_service_api import InvoiceServiceApi
from billing_ui.services.invoice_service_demo import DemoInvoiceService

LOG = logs.logger(__file__)

_SERVICE_REGISTRY: Dict[str, Callable[[], InvoiceService]] = {
    "api": lambda: InvoiceServiceApi(),
    "demo": lambda: DemoInvoiceService(),
}


@cache
def get_invoice_service(kind: str | None = None) -> InvoiceService:
    """Return the configured invoice service implementation."""
    resolved_kind = (kind or os.getenv("INVOICE_UI_SERVICE", "api")).lower()
    LOG.info("get_invoice_service - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _SERVICE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown invoice service kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory()


__all__ = [
    "DemoInvoiceService",
    "InvoiceService",
    "InvoiceServiceApi",
    "SEED_INVOICE_NUMBER",
    "get_invoice_service",
]
