# tests/common/test_constants.py
"""
Тесты для модуля констант.
"""

from src.common.constants import (
    TypeMsg,
    OrderStatus,
    ComponentMode,
    USERS_SERVICE_PORT,
    PRODUCTS_SERVICE_PORT,
    ORDERS_SERVICE_PORT,
    HTTP_LATENCY_BUCKETS,
)


class TestTypeMsg:
    """Тесты для перечисления TypeMsg."""

    def test_values(self) -> None:
        assert TypeMsg.DEBUG.value == "debug"
        assert TypeMsg.INFO.value == "info"
        assert TypeMsg.ERROR.value == "error"

    def test_is_str(self) -> None:
        assert isinstance(TypeMsg.INFO, str)


class TestOrderStatus:
    """Тесты для OrderStatus."""

    def test_single_initial_status(self) -> None:
        """Статус один и выставляется при создании."""
        assert [s.value for s in OrderStatus] == ["Created"]

    def test_str(self) -> None:
        assert str(OrderStatus.CREATED) == "Created"
        assert OrderStatus.CREATED == "Created"


class TestPorts:
    """Порты сервисов фиксированы."""

    def test_ports(self) -> None:
        assert USERS_SERVICE_PORT == 8080
        assert PRODUCTS_SERVICE_PORT == 8081
        assert ORDERS_SERVICE_PORT == 8082

    def test_component_modes(self) -> None:
        assert {m.value for m in ComponentMode} == {"users", "products", "orders", "web_client"}


def test_latency_buckets_sorted() -> None:
    assert list(HTTP_LATENCY_BUCKETS) == sorted(HTTP_LATENCY_BUCKETS)
    assert HTTP_LATENCY_BUCKETS == (0.05, 0.1, 0.3, 0.5, 1, 2, 5)
