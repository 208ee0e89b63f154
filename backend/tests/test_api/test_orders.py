"""
Orders API tests

Author: TM3
Date: 2026-10-17
"""
import pytest
from decimal import Decimal
from unittest.mock import MagicMock

from app.api.orders import get_order_repository, get_order_service
from app.core.errors import ConflictError, InvalidInputError, NotFoundError
from app.domain.order import Order, OrderDetail, OrderItem, OrderSummary


@pytest.fixture
def repo(app):
    mock_repo = MagicMock()
    app.dependency_overrides[get_order_repository] = lambda: mock_repo
    return mock_repo


@pytest.fixture
def service(app):
    mock_service = MagicMock()
    app.dependency_overrides[get_order_service] = lambda: mock_service
    return mock_service


VALID_BODY = {
    "customer_id": 3,
    "address_id": 4,
    "items": [{"product_id": 1, "quantity": 2}],
}


def test_list_orders(client, repo, sample_order_row):
    repo.find_recent.return_value = [
        OrderSummary(**sample_order_row, first_name="Ada", last_name="Lovelace"),
    ]

    response = client.get("/api/orders")

    assert response.status_code == 200
    data = response.json()
    assert data[0]["order_id"] == 7
    assert data[0]["first_name"] == "Ada"
    assert data[0]["total"] == 19.98


def test_get_order_returns_order_and_items(client, repo, sample_order_row):
    repo.find_by_id.return_value = OrderDetail(
        **sample_order_row,
        street="12 Rue de la Paix",
        city="Paris",
        items=[
            OrderItem(
                order_item_id=11, order_id=7, product_id=1, name="Oud Royale 50ml",
                quantity=2, unit_price=Decimal("9.99"), line_total=Decimal("19.98"),
            ),
        ],
    )

    response = client.get("/api/orders/7")

    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"order", "items"}
    assert body["order"]["city"] == "Paris"
    assert body["items"][0]["unit_price"] == 9.99
    assert body["items"][0]["name"] == "Oud Royale 50ml"


def test_get_missing_order_is_404(client, repo):
    repo.find_by_id.return_value = None

    response = client.get("/api/orders/12345")

    assert response.status_code == 404
    assert response.json() == {"error": "Order not found", "kind": "not_found"}


def test_create_order(client, service, sample_order_row):
    service.create_order.return_value = Order(**sample_order_row)

    response = client.post("/api/orders", json=VALID_BODY)

    assert response.status_code == 201
    body = response.json()
    assert body["order"]["order_id"] == 7
    assert body["order"]["status"] == "pending"
    assert body["order"]["total"] == 19.98

    request = service.create_order.call_args[0][0]
    assert request.customer_id == 3
    assert request.items[0].product_id == 1
    assert request.items[0].quantity == 2


@pytest.mark.parametrize("body", [
    {"address_id": 4, "items": [{"product_id": 1, "quantity": 1}]},
    {"customer_id": 3, "items": [{"product_id": 1, "quantity": 1}]},
    {"customer_id": 3, "address_id": 4},
    {"customer_id": 3, "address_id": 4, "items": []},
    {"customer_id": 0, "address_id": 4, "items": [{"product_id": 1, "quantity": 1}]},
])
def test_create_order_missing_fields_is_400(client, service, body):
    response = client.post("/api/orders", json=body)

    assert response.status_code == 400
    assert response.json()["kind"] == "invalid_input"
    service.create_order.assert_not_called()


@pytest.mark.parametrize("item", [
    {"product_id": 1, "quantity": 1.5},
    {"product_id": 1, "quantity": "two"},
    {"product_id": 1, "quantity": 2**31},
    {"product_id": 2**31, "quantity": 1},
])
def test_create_order_rejects_unusable_items(client, service, item):
    """Non-integer or out-of-range items never reach the order transaction"""
    body = dict(VALID_BODY, items=[item])

    response = client.post("/api/orders", json=body)

    assert response.status_code == 400
    assert response.json()["kind"] == "invalid_input"
    service.create_order.assert_not_called()


def test_create_order_rejects_customer_id_beyond_integer_column(client, service):
    body = dict(VALID_BODY, customer_id=2**31)

    response = client.post("/api/orders", json=body)

    assert response.status_code == 400
    service.create_order.assert_not_called()


def test_get_order_id_beyond_integer_column_is_400(client, repo):
    response = client.get(f"/api/orders/{2**31}")

    assert response.status_code == 400
    repo.find_by_id.assert_not_called()


@pytest.mark.parametrize("error, status, kind", [
    (NotFoundError("Product 999 not found"), 404, "not_found"),
    (InvalidInputError("Invalid quantity 0 for product 1"), 400, "invalid_input"),
    (ConflictError("Insufficient stock for product 1: requested 2, available 1"), 409, "conflict"),
])
def test_create_order_error_kinds(client, service, error, status, kind):
    service.create_order.side_effect = error

    response = client.post("/api/orders", json=VALID_BODY)

    assert response.status_code == status
    assert response.json() == {"error": error.message, "kind": kind}


def test_create_order_unexpected_failure_is_500(client, service):
    service.create_order.side_effect = RuntimeError("server closed the connection")

    response = client.post("/api/orders", json=VALID_BODY)

    assert response.status_code == 500
    assert response.json()["kind"] == "internal"
    assert "server closed" not in response.json()["error"]
