"""
Tests for the ordered validation pipelines
"""
import pytest
from unittest.mock import MagicMock
from grubdash.business import (
    BadRequestError,
    NotFoundError,
    DishRules,
    OrderRules,
    Messages,
    ValidationContext,
    ValidationPipeline
)
from grubdash.models import Dish, Order, DishPayload, OrderPayload
from grubdash.services.store import ResourceStore

@pytest.fixture
def dish_store():
    return ResourceStore([
        Dish(id="5", name="Spaghetti", description="Fresh", price=10, image_url="https://example.com/a.jpg")
    ])

@pytest.fixture
def order_store():
    return ResourceStore([
        Order.model_validate({
            "id": str(index),
            "deliverTo": "Main St.",
            "mobileNumber": "555",
            "status": status,
            "dishes": [{"id": "5", "quantity": 1}]
        })
        for index, status in enumerate(["pending", "preparing", "delivered"], start=1)
    ])

class TestValidationPipeline:
    """Тесты для ValidationPipeline"""

    def test_stops_at_first_failure(self):
        """Тест: после первой ошибки проверки не выполняются"""
        def failing(ctx):
            raise BadRequestError("first")
        later = MagicMock()
        pipeline = ValidationPipeline("dish", "create", [("first", failing), ("later", later)])

        with pytest.raises(BadRequestError, match="first"):
            pipeline.run(ValidationContext())

        later.assert_not_called()

    def test_runs_every_step_in_order(self):
        calls = []
        pipeline = ValidationPipeline("dish", "create", [
            ("a", lambda ctx: calls.append("a")),
            ("b", lambda ctx: calls.append("b")),
        ])

        context = pipeline.run(ValidationContext())

        assert calls == ["a", "b"]
        assert isinstance(context, ValidationContext)

class TestDishRules:
    """Тесты для цепочек проверок блюд"""

    def test_step_order(self, dish_store):
        rules = DishRules(dish_store)

        assert rules.create.step_names == ["name", "description", "price", "image_url"]
        assert rules.read.step_names == ["exists"]
        assert rules.update.step_names == ["exists", "name", "description", "price", "image_url", "id_matches"]

    def test_create_reports_first_missing_field(self, dish_store):
        """Тест: при нескольких ошибках возвращается первая по порядку"""
        payload = DishPayload.model_validate({"price": 0})

        with pytest.raises(BadRequestError) as exc_info:
            DishRules(dish_store).create.run(ValidationContext(payload=payload))

        assert exc_info.value.message == Messages.DISH_NAME

    def test_read_locates_record(self, dish_store):
        context = DishRules(dish_store).read.run(ValidationContext(route_id="5"))

        assert context.record is dish_store.find_by_id("5")

    def test_update_missing_record_is_not_found(self, dish_store):
        """Тест: проверка существования выполняется первой"""
        with pytest.raises(NotFoundError) as exc_info:
            DishRules(dish_store).update.run(ValidationContext(route_id="99", payload=None, partial=True))

        assert exc_info.value.status == 404
        assert exc_info.value.message == "Dish not found: 99"

    def test_update_field_errors_precede_id_mismatch(self, dish_store):
        payload = DishPayload.model_validate({"id": "9", "name": ""})

        with pytest.raises(BadRequestError) as exc_info:
            DishRules(dish_store).update.run(ValidationContext(route_id="5", payload=payload, partial=True))

        assert exc_info.value.message == Messages.DISH_NAME

class TestOrderRules:
    """Тесты для цепочек проверок заказов"""

    def test_step_order(self, order_store):
        rules = OrderRules(order_store)

        assert rules.create.step_names == ["deliverTo", "mobileNumber", "dishes", "dish_quantities", "status"]
        assert rules.update.step_names == [
            "exists", "deliverTo", "mobileNumber", "dishes", "dish_quantities",
            "id_matches", "status", "not_delivered"
        ]
        assert rules.delete.step_names == ["exists", "pending"]

    def test_create_without_status_passes(self, order_store):
        payload = OrderPayload.model_validate({
            "deliverTo": "A",
            "mobileNumber": "555",
            "dishes": [{"id": "d1", "quantity": 2}]
        })

        OrderRules(order_store).create.run(ValidationContext(payload=payload))

    def test_create_with_invalid_status_fails(self, order_store):
        payload = OrderPayload.model_validate({
            "deliverTo": "A",
            "mobileNumber": "555",
            "status": "invalid",
            "dishes": [{"id": "d1", "quantity": 2}]
        })

        with pytest.raises(BadRequestError, match="status"):
            OrderRules(order_store).create.run(ValidationContext(payload=payload))

    def test_delivered_order_rejects_valid_update(self, order_store):
        """Тест: доставленный заказ нельзя изменить"""
        payload = OrderPayload.model_validate({"status": "pending"})

        with pytest.raises(BadRequestError) as exc_info:
            OrderRules(order_store).update.run(ValidationContext(route_id="3", payload=payload, partial=True))

        assert exc_info.value.message == Messages.ORDER_DELIVERED

    def test_delivered_order_rejects_invalid_update(self, order_store):
        payload = OrderPayload.model_validate({"deliverTo": ""})

        with pytest.raises(BadRequestError) as exc_info:
            OrderRules(order_store).update.run(ValidationContext(route_id="3", payload=payload, partial=True))

        assert exc_info.value.status == 400

    def test_delete_requires_pending(self, order_store):
        rules = OrderRules(order_store)

        rules.delete.run(ValidationContext(route_id="1"))
        with pytest.raises(BadRequestError, match="pending"):
            rules.delete.run(ValidationContext(route_id="2"))
        with pytest.raises(NotFoundError, match="Order not found: 42"):
            rules.delete.run(ValidationContext(route_id="42"))
