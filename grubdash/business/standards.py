from typing import Any, Tuple
from grubdash.models.base import OrderStatus
from .errors import BadRequestError

class Messages:
    """Тексты ошибок валидации"""
    
    DISH_NOT_FOUND = "Dish not found: {id}"
    DISH_NAME = "Dish must include a name"
    DISH_DESCRIPTION = "Dish must include a description"
    DISH_PRICE = "Dish must have a price that is an integer greater than 0"
    DISH_IMAGE = "Dish must include an image_url"
    DISH_ID_MISMATCH = "Dish ID does not match route id. Dish: {body_id}, Route: {route_id}"
    
    ORDER_NOT_FOUND = "Order not found: {id}"
    ORDER_DELIVER_TO = "Order must include a deliverTo"
    ORDER_MOBILE_NUMBER = "Order must include a mobileNumber"
    ORDER_DISHES = "Order must include at least one dish"
    ORDER_DISH_QUANTITY = "Dish {index} must have a quantity that is an integer greater than 0"
    ORDER_ID_MISMATCH = "Order id does not match route id. Order: {body_id}, Route: {route_id}"
    ORDER_STATUS = "Order must have a status of pending, preparing, out-for-delivery, delivered"
    ORDER_DELIVERED = "A delivered order cannot be changed"
    ORDER_NOT_PENDING = "An order cannot be deleted unless it is pending"

class OrderStatusPolicy:
    """Правила жизненного цикла заказа: pending → preparing → out-for-delivery → delivered.

    Переходы между четырьмя статусами не ограничены; действуют три запрета:
    статус из тела запроса обязан быть одним из четырёх, доставленный заказ
    нельзя изменить, удалить можно только заказ в статусе pending.
    """
    
    STATUSES: Tuple[str, ...] = tuple(status.value for status in OrderStatus)
    TERMINAL = OrderStatus.DELIVERED.value
    DELETABLE = OrderStatus.PENDING.value
    
    @classmethod
    def is_valid_status(cls, value: Any) -> bool:
        return isinstance(value, str) and value in cls.STATUSES
    
    @classmethod
    def check_incoming(cls, value: Any):
        """Статус из тела запроса"""
        if not cls.is_valid_status(value):
            raise BadRequestError(Messages.ORDER_STATUS)
    
    @classmethod
    def check_not_delivered(cls, order):
        """Доставленный заказ изменить нельзя (проверяется до слияния)"""
        if order.status == cls.TERMINAL:
            raise BadRequestError(Messages.ORDER_DELIVERED)
    
    @classmethod
    def check_deletable(cls, order):
        if order.status != cls.DELETABLE:
            raise BadRequestError(Messages.ORDER_NOT_PENDING)
