"""
Utility functions for invoice formatting and filtering.

Provides helpers for:
- Date parsing (ISO and the d/m/Y form used on printed invoices)
- Currency and date formatting for display
- Search query matching against invoice fields
- The browser script behind print and PDF download
"""

import json
from datetime import date, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from billing_ui.models.invoice import Invoice


def parse_date(date_str: str | None) -> date | None:
    """
    Parse a calendar date from a string.

    Args:
        date_str: ISO date or datetime (e.g., "2024-12-25",
            "2024-12-25T00:00:00.000Z") or d/m/Y (e.g., "25/12/2024").

    Returns:
        date object if parsing succeeds, None otherwise
    """
    if date_str:
        date_str = date_str.strip()
    if not date_str:
        return None

    # The backend echoes dates back either as plain ISO dates or as
    # full timestamps; only the calendar date is meaningful.
    try:
        return date.fromisoformat(date_str[:10])
    except ValueError:
        pass

    try:
        return datetime.strptime(date_str, "%d/%m/%Y").date()
    except ValueError:
        pass

    return None


def format_date(value: date | None) -> str:
    """Format a date the way it is printed on invoices (dd/mm/yyyy)."""
    if not value:
        return "N/A"
    return value.strftime("%d/%m/%Y")


def format_currency(value: float, symbol: str = "$") -> str:
    """
    Format a monetary amount rounded to cents.

    Args:
        value: Numeric amount to format.
        symbol: Currency symbol prefix.

    Returns:
        Formatted string like '$1,234.56'.
    """
    return f"{symbol}{value:,.2f}"


def print_script(title: str | None = None) -> str:
    """
    Build the browser script that opens the print dialog.

    With a title, the page title is swapped for it while the dialog is open
    so "Save as PDF" proposes it as the file name.
    """
    if not title:
        return "window.print()"
    return (
        "(() => { const previous = document.title; "
        f"document.title = {json.dumps(title)}; "
        "window.print(); document.title = previous; })()"
    )


def matches_query(invoice: "Invoice", query: str) -> bool:
    """
    Check if an invoice matches the search query.

    Customer name and city match case-insensitively by substring; the
    invoice number matches when the query appears in its decimal form.
    Any one of the three is enough.

    Args:
        invoice: Invoice to check.
        query: Search query string.

    Returns:
        True if the query matches, or if the query is blank.
    """
    if not query or not query.strip():
        return True
    normalized = query.lower()
    if any(normalized in value for value in invoice.searchable_terms()):
        return True
    return query in str(invoice.invoice_no)
