"""Reflex configuration for the billing UI application."""

import os

import reflex as rx

APP_PORT = int(os.getenv("INVOICE_UI_PORT", "8000"))

config = rx.Config(
    app_name="billing_ui",
    # Use the src directory structure
    app_module_import="billing_ui.app",
    frontend_port=APP_PORT,
)
