"""
Tests for the orders API endpoints (repository mocked)

Author: TM3
Date: 2025-12-02
"""
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.domain.order import Order


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def mock_repo():
    with patch('app.api.orders.OrderRepository') as mock_repo_cls:
        yield mock_repo_cls.return_value


def test_create_order(client, mock_repo, sample_order_row):
    mock_repo.create.return_value = Order(**sample_order_row)

    response = client.post("/api/v1/orders/", json={
        "cart": sample_order_row['cart'],
        "totalPrice": 462,
        "oldTotalPrice": 1738,
        "totalQnt": 2,
        "customerName": "Pam",
        "shippingMethod": "courier"
    })

    assert response.status_code == 201
    assert response.json()["data"]["id"] == 7

    order_input = mock_repo.create.call_args[0][0]
    assert order_input.customer_name == "Pam"
    assert order_input.total_qnt == 2


def test_create_order_rejects_unknown_status(client, mock_repo):
    response = client.post("/api/v1/orders/", json={"status": "teleported"})

    assert response.status_code == 400
    mock_repo.create.assert_not_called()


def test_create_order_validates_payload(client, mock_repo):
    response = client.post("/api/v1/orders/", json={"totalQnt": -3})
    assert response.status_code == 422


def test_list_orders(client, mock_repo, sample_order_row):
    mock_repo.find_all.return_value = ([Order(**sample_order_row)], 1)

    response = client.get("/api/v1/orders/", params={"status": "pending", "limit": 10})

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 1
    assert body["count"] == 1
    assert body["data"][0]["customerName"] == "Pam"
    mock_repo.find_all.assert_called_once_with(
        status="pending", user_id=None, search=None, limit=10, offset=0
    )


def test_get_order_not_found(client, mock_repo):
    mock_repo.find_by_id.return_value = None

    response = client.get("/api/v1/orders/42")

    assert response.status_code == 404


def test_update_status(client, mock_repo, sample_order_row):
    mock_repo.update_status.return_value = Order(**{**sample_order_row, "status": "shipped"})

    response = client.patch("/api/v1/orders/7/status", json={"status": "shipped"})

    assert response.status_code == 200
    assert response.json()["data"]["status"] == "shipped"
    mock_repo.update_status.assert_called_once_with(7, "shipped")


def test_update_status_rejects_unknown_status(client, mock_repo):
    response = client.patch("/api/v1/orders/7/status", json={"status": "lost"})
    assert response.status_code == 400


def test_delete_order_not_found(client, mock_repo):
    mock_repo.delete.return_value = {'success': False, 'error': 'Order not found'}

    response = client.delete("/api/v1/orders/7")

    assert response.status_code == 404


def test_repository_error_returns_500(client, mock_repo):
    mock_repo.find_all.side_effect = Exception("DATABASE_URL not configured")

    response = client.get("/api/v1/orders/")

    assert response.status_code == 500
    assert "DATABASE_URL" in response.json()["detail"]
