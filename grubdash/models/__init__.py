from .base import GrubDashBaseModel, OrderStatus
from .dish import Dish, DishPayload, DishEnvelope
from .order import Order, OrderDish, OrderPayload, OrderEnvelope

__all__ = [
    'GrubDashBaseModel',
    'OrderStatus',
    'Dish',
    'DishPayload',
    'DishEnvelope',
    'Order',
    'OrderDish',
    'OrderPayload',
    'OrderEnvelope'
]
