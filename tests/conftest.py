from __future__ import annotations

import json
from datetime import date

import httpx
import pytest

from billing_ui.models.invoice import InvoiceFormData, LineItemInput
from billing_ui.services.invoice_service_api import InvoiceServiceApi

BASE_URL = "https://invoices.test/api"


def wire_record(invoice_id: str, number: int, name: str = "", city: str = "") -> dict:
    return {
        "_id": invoice_id,
        "invoiceNumber": f"INV-{number:04d}",
        "date": "2024-05-01",
        "terms": "COD",
        "customer": {"name": name, "address": "1 Main St", "city": city, "phone": ""},
        "items": [
            {
                "_id": f"{invoice_id}-1",
                "stockId": "S1",
                "description": "Ring",
                "pieces": 1,
                "weight": 0.5,
                "pricePerUnit": 100.0,
                "total": 100.0,
            }
        ],
        "charges": {
            "subtotal": 100.0,
            "shipping": 0,
            "other": 0,
            "totalAmount": 100.0,
        },
    }


class FakeBackend:
    """Records requests and answers them from a routing table."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], tuple[int, bytes] | None] = {}

    def route(self, method: str, path: str, status: int = 200, body=None) -> None:
        content = b"" if body is None else json.dumps(body).encode()
        self.routes[(method, path)] = (status, content)

    def fail(self, method: str, path: str) -> None:
        self.routes[(method, path)] = None

    def writes(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.method in {"POST", "PUT", "DELETE"}]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api")
        key = (request.method, path)
        if key not in self.routes:
            return httpx.Response(404, json={"message": "Not found"})
        route = self.routes[key]
        if route is None:
            raise httpx.ConnectError("connection refused", request=request)
        status, content = route
        return httpx.Response(status, content=content)


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def service(backend: FakeBackend) -> InvoiceServiceApi:
    client = httpx.AsyncClient(transport=httpx.MockTransport(backend))
    return InvoiceServiceApi(base_url=BASE_URL, client=client)


@pytest.fixture
def form() -> InvoiceFormData:
    return InvoiceFormData(
        date=date(2024, 5, 1),
        terms="Net 30",
        customer_name="Asha Rao",
        customer_address="12 Gem Lane",
        customer_city="Jaipur",
        customer_phone="555-0100",
        items=[
            LineItemInput(
                stock_id="DR-1",
                description="Diamond",
                pieces=3,
                weight=1.5,
                price_per_unit=10.0,
            )
        ],
        shipping_charges=5.0,
        other_charges=2.5,
    )
