"""
Validation core for GrubDash
Упорядоченные цепочки проверок для блюд и заказов
"""

from .errors import ResourceError, BadRequestError, NotFoundError
from .rules import ValidationContext, ValidationPipeline, DishRules, OrderRules
from .standards import Messages, OrderStatusPolicy
from .validators import DishValidator, OrderValidator

__all__ = [
    'ResourceError',
    'BadRequestError',
    'NotFoundError',
    'ValidationContext',
    'ValidationPipeline',
    'DishRules',
    'OrderRules',
    'Messages',
    'OrderStatusPolicy',
    'DishValidator',
    'OrderValidator'
]

__version__ = '1.0.0'
