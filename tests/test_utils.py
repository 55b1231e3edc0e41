from __future__ import annotations

from datetime import date

import pytest

from billing_ui.utils import (
    format_currency,
    format_date,
    matches_query,
    parse_date,
    print_script,
)
from test_models import make_invoice


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2024-12-25", date(2024, 12, 25)),
        ("2024-12-25T10:00:00.000Z", date(2024, 12, 25)),
        ("25/12/2024", date(2024, 12, 25)),
        ("  ", None),
        (None, None),
        ("yesterday", None),
    ],
)
def test_parse_date(raw, expected):
    assert parse_date(raw) == expected


def test_format_currency_rounds_to_cents():
    assert format_currency(37.5) == "$37.50"
    assert format_currency(1234.567) == "$1,234.57"


def test_format_date():
    assert format_date(date(2024, 3, 4)) == "04/03/2024"
    assert format_date(None) == "N/A"


def test_matches_query():
    invoice = make_invoice(number=2636)
    assert matches_query(invoice, "")
    assert matches_query(invoice, "   ")
    assert matches_query(invoice, "smith")
    assert matches_query(invoice, "DALLAS")
    assert matches_query(invoice, "63")
    assert not matches_query(invoice, "pearl")
    assert not matches_query(invoice, "2637")


def test_print_script_without_title_just_prints():
    assert print_script() == "window.print()"
    assert print_script("") == "window.print()"


def test_print_script_titles_the_document_for_pdf_export():
    script = print_script("INV-2636")
    assert 'document.title = "INV-2636";' in script
    assert "window.print();" in script
    assert script.index("INV-2636") < script.index("window.print()")
    assert script.endswith("document.title = previous; })()")


def test_print_script_escapes_the_title():
    script = print_script('INV-1"; alert(1); "')
    assert 'document.title = "INV-1\\"; alert(1); \\"";' in script
