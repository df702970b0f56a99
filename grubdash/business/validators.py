from typing import Any, Optional
from grubdash.models.base import PartialPayload
from .errors import BadRequestError
from .standards import Messages, OrderStatusPolicy

_MISSING = object()

def _value(payload: Optional[PartialPayload], field: str) -> Any:
    """Значение поля; отсутствие конверта data равносильно отсутствию поля"""
    if payload is None or not payload.is_present(field):
        return _MISSING
    return getattr(payload, field)

def _skipped(payload: Optional[PartialPayload], field: str, partial: bool) -> bool:
    """При частичном обновлении непереданные поля не проверяются"""
    return partial and payload is not None and not payload.is_present(field)

def _is_text(value: Any) -> bool:
    return isinstance(value, str) and len(value) > 0

def _is_positive_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value > 0
    if isinstance(value, float):
        return value.is_integer() and value > 0
    return False

def _require_text(payload: Optional[PartialPayload], field: str, message: str, partial: bool):
    if _skipped(payload, field, partial):
        return
    if not _is_text(_value(payload, field)):
        raise BadRequestError(message)

def _same_id(body_id: Any, route_id: str) -> bool:
    return str(body_id) == str(route_id)

def _id_absent(body_id: Any) -> bool:
    return body_id is _MISSING or not body_id

class DishValidator:
    """Валидатор полей блюда"""

    @staticmethod
    def name(payload: Optional[PartialPayload], partial: bool = False):
        _require_text(payload, "name", Messages.DISH_NAME, partial)

    @staticmethod
    def description(payload: Optional[PartialPayload], partial: bool = False):
        _require_text(payload, "description", Messages.DISH_DESCRIPTION, partial)

    @staticmethod
    def price(payload: Optional[PartialPayload], partial: bool = False):
        if _skipped(payload, "price", partial):
            return
        if not _is_positive_integer(_value(payload, "price")):
            raise BadRequestError(Messages.DISH_PRICE)

    @staticmethod
    def image_url(payload: Optional[PartialPayload], partial: bool = False):
        _require_text(payload, "image_url", Messages.DISH_IMAGE, partial)

    @staticmethod
    def id_matches(route_id: str, payload: Optional[PartialPayload]):
        """ID из тела, если передан, должен совпадать с ID маршрута"""
        body_id = _value(payload, "id")
        if _id_absent(body_id):
            return
        if not _same_id(body_id, route_id):
            raise BadRequestError(Messages.DISH_ID_MISMATCH.format(body_id=body_id, route_id=route_id))
        payload.id = route_id

class OrderValidator:
    """Валидатор полей заказа"""

    @staticmethod
    def deliver_to(payload: Optional[PartialPayload], partial: bool = False):
        _require_text(payload, "deliver_to", Messages.ORDER_DELIVER_TO, partial)

    @staticmethod
    def mobile_number(payload: Optional[PartialPayload], partial: bool = False):
        _require_text(payload, "mobile_number", Messages.ORDER_MOBILE_NUMBER, partial)

    @staticmethod
    def dishes(payload: Optional[PartialPayload], partial: bool = False):
        if _skipped(payload, "dishes", partial):
            return
        dishes = _value(payload, "dishes")
        if not isinstance(dishes, list) or len(dishes) == 0:
            raise BadRequestError(Messages.ORDER_DISHES)

    @staticmethod
    def dish_quantities(payload: Optional[PartialPayload], partial: bool = False):
        """Каждая позиция должна иметь целое положительное количество"""
        if _skipped(payload, "dishes", partial):
            return
        dishes = _value(payload, "dishes")
        if not isinstance(dishes, list):
            raise BadRequestError(Messages.ORDER_DISHES)

        for index, dish in enumerate(dishes):
            quantity = dish.get("quantity") if isinstance(dish, dict) else None
            if not _is_positive_integer(quantity):
                raise BadRequestError(Messages.ORDER_DISH_QUANTITY.format(index=index))

    @staticmethod
    def status(payload: Optional[PartialPayload], partial: bool = False):
        if _skipped(payload, "status", partial):
            return
        status = _value(payload, "status")
        OrderStatusPolicy.check_incoming(None if status is _MISSING else status)

    @staticmethod
    def id_matches(route_id: str, payload: Optional[PartialPayload]):
        """Пустой ID в теле заменяется ID маршрута; несовпадающий отклоняется"""
        body_id = _value(payload, "id")
        if _id_absent(body_id):
            if payload is not None:
                payload.id = route_id
            return
        if not _same_id(body_id, route_id):
            raise BadRequestError(Messages.ORDER_ID_MISMATCH.format(body_id=body_id, route_id=route_id))
        payload.id = route_id
