from __future__ import annotations

import asyncio
import json

import pytest

from billing_ui.errors import TransportError, ValidationError
from billing_ui.services.invoice_service import SEED_INVOICE_NUMBER
from conftest import wire_record


def test_list_invoices_maps_records(service, backend):
    backend.route("GET", "/invoices", body=[wire_record("a", 2636, "Ann", "Pune")])

    invoices = asyncio.run(service.list_invoices())

    assert [invoice.id for invoice in invoices] == ["a"]
    assert invoices[0].invoice_no == 2636
    assert invoices[0].customer_city == "Pune"


def test_list_invoices_raises_transport_error_on_failure_status(service, backend):
    backend.route("GET", "/invoices", status=500, body={"message": "boom"})
    with pytest.raises(TransportError) as info:
        asyncio.run(service.list_invoices())
    assert info.value.status_code == 500


def test_list_invoices_raises_transport_error_when_unreachable(service, backend):
    backend.fail("GET", "/invoices")
    with pytest.raises(TransportError):
        asyncio.run(service.list_invoices())


def test_list_invoices_rejects_malformed_body(service, backend):
    backend.route("GET", "/invoices", body={"not": "a list"})
    with pytest.raises(TransportError):
        asyncio.run(service.list_invoices())


@pytest.mark.parametrize("items", [[None], ["x"]])
def test_list_invoices_rejects_records_with_malformed_items(service, backend, items):
    record = {"_id": "a", "invoiceNumber": "INV-0001", "items": items}
    backend.route("GET", "/invoices", body=[record])
    with pytest.raises(TransportError):
        asyncio.run(service.list_invoices())


def test_get_invoice_rejects_record_with_malformed_items(service, backend):
    record = {"_id": "a", "invoiceNumber": "INV-0001", "items": [None]}
    backend.route("GET", "/invoices/a", body=record)
    with pytest.raises(TransportError):
        asyncio.run(service.get_invoice("a"))


def test_get_invoice_returns_none_on_404(service, backend):
    assert asyncio.run(service.get_invoice("missing")) is None


def test_get_invoice_raises_on_other_failures(service, backend):
    backend.route("GET", "/invoices/a", status=503)
    with pytest.raises(TransportError):
        asyncio.run(service.get_invoice("a"))


def test_get_invoice_returns_invoice(service, backend):
    backend.route("GET", "/invoices/a", body=wire_record("a", 2700, "Ann"))
    invoice = asyncio.run(service.get_invoice("a"))
    assert invoice is not None
    assert invoice.invoice_no == 2700


def test_next_invoice_number_on_empty_collection(service, backend):
    backend.route("GET", "/invoices", body=[])
    assert asyncio.run(service.next_invoice_number()) == SEED_INVOICE_NUMBER == 2636


def test_next_invoice_number_is_max_plus_one(service, backend):
    backend.route(
        "GET",
        "/invoices",
        body=[wire_record("a", 2700), wire_record("b", 2650), wire_record("c", 2699)],
    )
    assert asyncio.run(service.next_invoice_number()) == 2701


def test_next_invoice_number_falls_back_to_seed_when_backend_fails(service, backend):
    backend.route("GET", "/invoices", status=500)
    assert asyncio.run(service.next_invoice_number()) == 2636

    backend.fail("GET", "/invoices")
    assert asyncio.run(service.next_invoice_number()) == 2636


def test_next_invoice_number_falls_back_to_seed_on_malformed_records(
    service, backend
):
    record = {"_id": "a", "invoiceNumber": "INV-2700", "items": ["x"]}
    backend.route("GET", "/invoices", body=[record])
    assert asyncio.run(service.next_invoice_number()) == SEED_INVOICE_NUMBER


def test_create_invoice_posts_numbered_payload(service, backend, form):
    backend.route("GET", "/invoices", body=[wire_record("a", 2640)])
    created = {
        **wire_record("new", 2641, "Asha Rao", "Jaipur"),
        "charges": {
            "subtotal": 30.0,
            "shipping": 5.0,
            "other": 2.5,
            "totalAmount": 37.5,
        },
    }
    backend.route("POST", "/invoices", status=201, body=created)

    invoice = asyncio.run(service.create_invoice(form))

    (post,) = backend.writes()
    body = json.loads(post.content)
    assert post.url.path == "/api/invoices"
    assert body["invoiceNumber"] == "INV-2641"
    assert "_id" not in body
    assert body["charges"]["subtotal"] == 30.0
    assert body["charges"]["totalAmount"] == 37.5
    assert invoice.id == "new"
    assert invoice.total_amount == 37.5


def test_create_invoice_uses_seed_when_list_fails(service, backend, form):
    backend.fail("GET", "/invoices")
    backend.route("POST", "/invoices", status=201, body=wire_record("new", 2636))

    asyncio.run(service.create_invoice(form))

    body = json.loads(backend.writes()[0].content)
    assert body["invoiceNumber"] == "INV-2636"


def test_create_invoice_surfaces_backend_message(service, backend, form):
    backend.route("GET", "/invoices", body=[])
    backend.route("POST", "/invoices", status=400, body={"message": "date is required"})

    with pytest.raises(ValidationError) as info:
        asyncio.run(service.create_invoice(form))

    assert info.value.message == "date is required"
    assert info.value.status_code == 400


def test_create_invoice_server_error_is_transport_error(service, backend, form):
    backend.route("GET", "/invoices", body=[])
    backend.route("POST", "/invoices", status=500)

    with pytest.raises(TransportError) as info:
        asyncio.run(service.create_invoice(form))

    assert info.value.message == "Failed to create invoice"


def test_update_invoice_keeps_existing_number(service, backend, form):
    backend.route("GET", "/invoices/a", body=wire_record("a", 2650, "Old"))
    backend.route("GET", "/invoices", body=[wire_record("z", 9999)])
    backend.route("PUT", "/invoices/a", body=wire_record("a", 2650, "Asha Rao"))

    invoice = asyncio.run(service.update_invoice("a", form))

    (put,) = backend.writes()
    body = json.loads(put.content)
    assert body["invoiceNumber"] == "INV-2650"
    assert body["customer"]["name"] == "Asha Rao"
    assert body["charges"]["totalAmount"] == 37.5
    assert invoice is not None
    assert invoice.invoice_no == 2650


def test_update_missing_invoice_returns_none_without_writing(service, backend, form):
    assert asyncio.run(service.update_invoice("missing", form)) is None
    assert backend.writes() == []


def test_update_invoice_rejected_payload(service, backend, form):
    backend.route("GET", "/invoices/a", body=wire_record("a", 2650))
    backend.route("PUT", "/invoices/a", status=422, body={"message": "bad items"})
    with pytest.raises(ValidationError, match="bad items"):
        asyncio.run(service.update_invoice("a", form))


def test_delete_invoice(service, backend):
    backend.route("DELETE", "/invoices/a", body={"message": "deleted"})
    assert asyncio.run(service.delete_invoice("a")) is True


def test_delete_missing_invoice_returns_false(service, backend):
    assert asyncio.run(service.delete_invoice("missing")) is False


def test_delete_invoice_raises_on_other_failures(service, backend):
    backend.route("DELETE", "/invoices/a", status=500)
    with pytest.raises(TransportError):
        asyncio.run(service.delete_invoice("a"))


def test_search_matches_name_or_city_case_insensitively(service, backend):
    backend.route(
        "GET",
        "/invoices",
        body=[
            wire_record("a", 2636, "John Smith", "Austin"),
            wire_record("b", 2637, "Maria Lopez", "Smithville"),
            wire_record("c", 2638, "Lee Wong", "Boston"),
        ],
    )

    results = asyncio.run(service.search_invoices("smith"))

    assert [invoice.id for invoice in results] == ["a", "b"]


def test_search_matches_partial_invoice_number(service, backend):
    backend.route(
        "GET",
        "/invoices",
        body=[
            wire_record("a", 2636, "Ann", "Pune"),
            wire_record("b", 2737, "Bob", "Goa"),
        ],
    )

    assert [i.id for i in asyncio.run(service.search_invoices("263"))] == ["a"]
    assert [i.id for i in asyncio.run(service.search_invoices("37"))] == ["b"]


def test_search_with_whitespace_query_returns_everything(service, backend):
    backend.route(
        "GET",
        "/invoices",
        body=[wire_record("a", 2636, "Ann"), wire_record("b", 2637, "Bob")],
    )
    results = asyncio.run(service.search_invoices("   "))
    assert [invoice.id for invoice in results] == ["a", "b"]


def test_search_propagates_transport_errors(service, backend):
    backend.route("GET", "/invoices", status=502)
    with pytest.raises(TransportError):
        asyncio.run(service.search_invoices("x"))
