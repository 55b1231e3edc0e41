from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timezone

import pytest

from billing_ui.errors import ValidationError
from billing_ui.models.invoice import InvoiceFormData, LineItemInput
from billing_ui.services import wire

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "number, token",
    [(7, "INV-0007"), (2636, "INV-2636"), (12345, "INV-12345")],
)
def test_format_invoice_number(number, token):
    assert wire.format_invoice_number(number) == token
    assert wire.parse_invoice_number(token) == number


@pytest.mark.parametrize("token", ["", "INV-", "INV-12a", "ABC"])
def test_parse_invoice_number_rejects_malformed_tokens(token):
    with pytest.raises(ValidationError):
        wire.parse_invoice_number(token)


def test_to_wire_nests_customer_and_charges(form):
    payload = wire.to_wire(form, 2640)

    assert "_id" not in payload
    assert payload["invoiceNumber"] == "INV-2640"
    assert payload["date"] == "2024-05-01"
    assert payload["terms"] == "Net 30"
    assert payload["customer"] == {
        "name": "Asha Rao",
        "phone": "555-0100",
        "address": "12 Gem Lane",
        "city": "Jaipur",
    }
    assert payload["charges"] == {
        "subtotal": 30.0,
        "shipping": 5.0,
        "other": 2.5,
        "totalAmount": 37.5,
    }
    assert payload["items"] == [
        {
            "stockId": "DR-1",
            "description": "Diamond",
            "pieces": 3,
            "weight": 1.5,
            "pricePerUnit": 10.0,
            "total": 30.0,
        }
    ]


def test_to_wire_recomputes_line_totals(form):
    form.items = [
        LineItemInput(description="a", pieces=2, price_per_unit=4.5),
        LineItemInput(description="b", pieces=0, price_per_unit=99.0),
    ]
    payload = wire.to_wire(form, 1)
    assert [item["total"] for item in payload["items"]] == [9.0, 0.0]
    assert payload["charges"]["subtotal"] == 9.0


def test_from_wire_maps_ids_and_flattens(form):
    record = wire.to_wire(form, 2640)
    record["_id"] = "abc"
    record["items"][0]["_id"] = "item-1"

    invoice = wire.from_wire(record, now=NOW)

    assert invoice.id == "abc"
    assert invoice.invoice_no == 2640
    assert invoice.date == date(2024, 5, 1)
    assert invoice.customer_name == "Asha Rao"
    assert invoice.customer_city == "Jaipur"
    assert invoice.items[0].id == "item-1"
    assert invoice.items[0].total == 30.0
    assert invoice.subtotal == 30.0
    assert invoice.total_amount == 37.5
    assert invoice.created_at == NOW
    assert invoice.updated_at == NOW


def test_from_wire_keeps_backend_line_total():
    record = {
        "_id": "x",
        "invoiceNumber": "INV-0001",
        "date": "2024-01-02T00:00:00.000Z",
        "items": [{"_id": "i", "description": "d", "pieces": 2, "total": 5}],
    }
    invoice = wire.from_wire(record, now=NOW)
    assert invoice.items[0].total == 5.0
    assert invoice.items[0].line_total == 0.0
    assert invoice.date == date(2024, 1, 2)
    assert invoice.customer_name == ""
    assert invoice.total_amount == 0.0


@pytest.mark.parametrize("items", [[None], ["x"], "abc", {"_id": "i"}])
def test_from_wire_rejects_items_that_are_not_objects(items):
    record = {"_id": "x", "invoiceNumber": "INV-0001", "items": items}
    with pytest.raises(ValidationError):
        wire.from_wire(record, now=NOW)


def test_from_wire_synthesizes_timestamps_when_not_given(form):
    record = {**wire.to_wire(form, 3), "_id": "x"}
    invoice = wire.from_wire(record)
    assert invoice.created_at.tzinfo is not None
    assert invoice.created_at == invoice.updated_at


def test_round_trip_preserves_all_but_timestamps(form):
    record = {**wire.to_wire(form, 2700), "_id": "inv-1"}
    original = wire.from_wire(record, now=NOW)

    again = wire.to_wire(InvoiceFormData.from_invoice(original), original.invoice_no)
    again["_id"] = original.id
    for item, source in zip(again["items"], original.items):
        item["_id"] = source.id
    restored = wire.from_wire(again, now=datetime(2030, 1, 1, tzinfo=timezone.utc))

    assert replace(restored, created_at=NOW, updated_at=NOW) == original
