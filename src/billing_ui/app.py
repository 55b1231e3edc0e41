"""
Reflex application entry point for the billing UI.

This module initializes the Reflex app and defines the main page layout:
header, tab bar and the screen selected by InvoiceState.mode.
"""

import os

import reflex as rx

from billing_ui.components import invoice_form, invoice_list, invoice_preview
from billing_ui.lib import logs
from billing_ui.models.common import ViewMode
from billing_ui.state import APP_SUBTITLE, APP_TITLE, InvoiceState

LOG = logs.logger(__file__)

# Configuration from environment
APP_PORT = int(os.getenv("INVOICE_UI_PORT", "8000"))
LOG.info("INVOICE_UI_SERVICE: %s", os.getenv("INVOICE_UI_SERVICE", "api"))
LOG.info("INVOICE_API_BASE_URL: %s", os.getenv("INVOICE_API_BASE_URL", "<default>"))

_FONT_URL = "https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&display=swap"


def page_header() -> rx.Component:
    """Build the title area and the New Invoice button."""
    return rx.box(
        rx.box(
            rx.heading(APP_TITLE, size="7", as_="h1"),
            rx.text(APP_SUBTITLE, class_name="muted"),
        ),
        rx.button(
            rx.icon("plus", size=16),
            "New Invoice",
            on_click=InvoiceState.create_new,
        ),
        class_name="page-header print-hidden",
    )


def tab_bar() -> rx.Component:
    """Build the three navigation tabs."""
    return rx.box(
        _tab("list", "Invoices", ViewMode.LISTING, InvoiceState.show_list),
        _tab(
            "plus",
            rx.cond(InvoiceState.editing_no, "Edit Invoice", "Create Invoice"),
            ViewMode.EDITING,
            InvoiceState.show_form,
        ),
        _tab("file-text", "Preview", ViewMode.PREVIEWING, InvoiceState.show_preview),
        class_name="tab-bar print-hidden",
    )


def _tab(icon: str, label, mode: ViewMode, on_click) -> rx.Component:
    return rx.button(
        rx.icon(icon, size=16),
        label,
        on_click=on_click,
        variant=rx.cond(InvoiceState.mode == mode.value, "solid", "soft"),
        class_name="tab-button",
    )


def index() -> rx.Component:
    """
    Build the main page layout.

    Returns:
        The complete page component.
    """
    return rx.box(
        rx.box(
            page_header(),
            tab_bar(),
            rx.match(
                InvoiceState.mode,
                (ViewMode.EDITING.value, invoice_form()),
                (ViewMode.PREVIEWING.value, invoice_preview()),
                invoice_list(),
            ),
            class_name="app-container",
        ),
        class_name="app-shell",
    )


# Create the Reflex app
app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="large",
        accent_color="blue",
    ),
    stylesheets=[
        _FONT_URL,
        "/styles.css",
    ],
)

app.add_page(
    index,
    title=f"{APP_TITLE} - {APP_SUBTITLE}",
    on_load=InvoiceState.on_load,
)


def main() -> None:
    """Entrypoint used by `billing-ui` console script."""
    import subprocess
    import sys

    subprocess.run([sys.executable, "-m", "reflex", "run", "--port", str(APP_PORT)])


if __name__ == "__main__":
    main()
