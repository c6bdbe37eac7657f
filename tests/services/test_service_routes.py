# tests/services/test_service_routes.py
"""
Тесты HTTP-слоя сервисов через TestClient.
Lifespan не запускается, зависимости подменяются через dependency_overrides.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from src.services.orders_service.app import app as orders_app
from src.services.orders_service.dependencies import get_order_service
from src.services.orders_service.service import OrderService
from src.services.products_service.app import app as products_app
from src.services.products_service.dependencies import get_product_service
from src.services.products_service.service import ProductService
from src.services.users_service.app import app as users_app
from src.services.users_service.dependencies import get_user_service
from src.services.users_service.service import UserService
from src.shared.errors import CatalogUnavailableError, PersistenceError
from src.shared.models.order_dto import OrderDTO
from src.shared.models.product_dto import ProductDTO
from src.shared.models.user_dto import UserDTO


@pytest.fixture
def order_service() -> MagicMock:
    service = MagicMock(spec=OrderService)
    service.create_order = AsyncMock()
    service.list_orders = AsyncMock(return_value=[])
    return service


@pytest.fixture
def orders_client(order_service: MagicMock):
    orders_app.dependency_overrides[get_order_service] = lambda: order_service
    yield TestClient(orders_app)
    orders_app.dependency_overrides.clear()


@pytest.fixture
def product_service() -> MagicMock:
    service = MagicMock(spec=ProductService)
    service.add_product = AsyncMock()
    service.list_products = AsyncMock(return_value=[])
    return service


@pytest.fixture
def products_client(product_service: MagicMock):
    products_app.dependency_overrides[get_product_service] = lambda: product_service
    yield TestClient(products_app)
    products_app.dependency_overrides.clear()


@pytest.fixture
def user_service() -> MagicMock:
    service = MagicMock(spec=UserService)
    service.create_user = AsyncMock()
    service.list_users = AsyncMock(return_value=[])
    return service


@pytest.fixture
def users_client(user_service: MagicMock):
    users_app.dependency_overrides[get_user_service] = lambda: user_service
    yield TestClient(users_app)
    users_app.dependency_overrides.clear()


class TestOrderRoutes:
    """Тесты /api/orders."""

    def test_create_order_response(self, orders_client: TestClient, order_service: MagicMock) -> None:
        """Ответ содержит сообщение, итог и id записи."""
        order_service.create_order.return_value = OrderDTO(
            id="o-1", user_id="u1", product_ids=["A", "B", "C"], total=15.0
        )

        response = orders_client.post("/api/orders", json={"userId": "u1", "productIds": ["A", "B", "C"]})

        assert response.status_code == 200
        assert response.json() == {"message": "✅ Order created", "total": 15.0, "orderId": "o-1"}
        request = order_service.create_order.call_args.args[0]
        assert request.user_id == "u1"
        assert request.product_ids == ["A", "B", "C"]

    def test_create_order_catalog_unavailable(self, orders_client: TestClient, order_service: MagicMock) -> None:
        """Недоступный каталог даёт 500 со статическим сообщением."""
        order_service.create_order.side_effect = CatalogUnavailableError(
            "http://catalog.test:8081/api/products", ConnectionRefusedError()
        )

        response = orders_client.post("/api/orders", json={"userId": "u1", "productIds": ["A"]})

        assert response.status_code == 500
        assert response.json() == {"error": "Error creating order"}

    def test_create_order_store_failure(self, orders_client: TestClient, order_service: MagicMock) -> None:
        """Ошибка записи в хранилище даёт тот же ответ."""
        order_service.create_order.side_effect = PersistenceError("orders_schema.orders", "insert")

        response = orders_client.post("/api/orders", json={"userId": "u1", "productIds": []})

        assert response.status_code == 500
        assert response.json() == {"error": "Error creating order"}

    def test_create_order_wrong_types_rejected(self, orders_client: TestClient, order_service: MagicMock) -> None:
        """productIds не-список отклоняется до вызова сервиса."""
        response = orders_client.post("/api/orders", json={"userId": "u1", "productIds": "A"})

        assert response.status_code == 422
        order_service.create_order.assert_not_called()

    def test_list_orders(self, orders_client: TestClient, order_service: MagicMock) -> None:
        """Записи отдаются с полями в camelCase."""
        order_service.list_orders.return_value = [
            OrderDTO(id="o-1", user_id="u1", product_ids=["A"], total=10.0),
        ]

        response = orders_client.get("/api/orders")

        assert response.status_code == 200
        assert response.json() == [
            {"id": "o-1", "userId": "u1", "productIds": ["A"], "total": 10.0, "status": "Created"},
        ]

    def test_list_orders_failure(self, orders_client: TestClient, order_service: MagicMock) -> None:
        order_service.list_orders.side_effect = PersistenceError("orders_schema.orders", "find_all")

        response = orders_client.get("/api/orders")

        assert response.status_code == 500
        assert response.json() == {"error": "Error fetching orders"}


class TestProductRoutes:
    """Тесты /api/products."""

    def test_add_product(self, products_client: TestClient, product_service: MagicMock) -> None:
        product_service.add_product.return_value = ProductDTO(id="p1", name="Laptop", price=10, stock=3)

        response = products_client.post("/api/products", json={"name": "Laptop", "price": 10, "stock": 3})

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "✅ Product added"
        assert body["product"]["id"] == "p1"

    def test_add_product_failure(self, products_client: TestClient, product_service: MagicMock) -> None:
        product_service.add_product.side_effect = PersistenceError("catalog_schema.products", "insert")

        response = products_client.post("/api/products", json={"name": "Laptop"})

        assert response.status_code == 500
        assert response.json() == {"error": "Error adding product"}

    def test_list_products_failure(self, products_client: TestClient, product_service: MagicMock) -> None:
        product_service.list_products.side_effect = PersistenceError("catalog_schema.products", "find_all")

        response = products_client.get("/api/products")

        assert response.status_code == 500
        assert response.json() == {"error": "Error fetching products"}


class TestUserRoutes:
    """Тесты /api/users."""

    def test_create_user(self, users_client: TestClient, user_service: MagicMock) -> None:
        user_service.create_user.return_value = UserDTO(id="u1", name="Ann", email="ann@example.com")

        response = users_client.post("/api/users", json={"name": "Ann", "email": "ann@example.com"})

        assert response.status_code == 200
        assert response.json() == {
            "message": "✅ User created",
            "user": {"id": "u1", "name": "Ann", "email": "ann@example.com"},
        }

    def test_list_users(self, users_client: TestClient, user_service: MagicMock) -> None:
        user_service.list_users.return_value = [UserDTO(id="u1", name="Ann")]

        response = users_client.get("/api/users")

        assert response.status_code == 200
        assert response.json()[0]["id"] == "u1"

    def test_list_users_failure(self, users_client: TestClient, user_service: MagicMock) -> None:
        user_service.list_users.side_effect = PersistenceError("identity_schema.users", "find_all")

        response = users_client.get("/api/users")

        assert response.status_code == 500
        assert response.json() == {"error": "Error fetching users"}


class TestServiceFrame:
    """Общие эндпоинты: liveness, health, метрики."""

    @pytest.mark.parametrize(
        "app, text",
        [
            (users_app, "User Service Running ✅"),
            (products_app, "Product Service Running ✅"),
            (orders_app, "Order Service Running ✅"),
        ],
    )
    def test_liveness_text(self, app, text: str) -> None:
        response = TestClient(app).get("/")

        assert response.status_code == 200
        assert response.text == text
        assert response.headers["content-type"].startswith("text/plain")

    def test_health(self) -> None:
        response = TestClient(orders_app).get("/health")

        assert response.status_code == 200
        assert response.json() == {"service": "order-service", "status": "ok", "database": "down"}

    def test_metrics_exposition(self, orders_client: TestClient) -> None:
        """Метрики в текстовом формате Prometheus со стандартными метриками процесса."""
        orders_client.get("/api/orders")

        response = orders_client.get("/metrics")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "http_request_duration_seconds_bucket" in response.text
        assert 'route="/api/orders"' in response.text
        assert "python_info" in response.text

    def test_request_counter_is_monotonic(self, orders_client: TestClient) -> None:
        """Счётчик запросов между двумя снятиями не уменьшается."""
        registry = orders_app.state.metrics.registry
        labels = {"method": "GET", "route": "/api/orders", "status_code": "200"}

        orders_client.get("/api/orders")
        first = registry.get_sample_value("http_requests_total", labels) or 0.0
        orders_client.get("/api/orders")
        second = registry.get_sample_value("http_requests_total", labels)

        assert second == first + 1
