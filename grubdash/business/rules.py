from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple
from grubdash.models.base import PartialPayload
from .errors import NotFoundError
from .standards import Messages, OrderStatusPolicy
from .validators import DishValidator, OrderValidator

@dataclass
class ValidationContext:
    """Состояние одного прохода цепочки проверок"""
    payload: Optional[PartialPayload] = None
    route_id: Optional[str] = None
    record: Optional[Any] = None
    partial: bool = False

Step = Tuple[str, Callable[[ValidationContext], None]]

class ValidationPipeline:
    """Упорядоченная цепочка проверок.

    Проверки выполняются по порядку; первая упавшая выбрасывает
    ResourceError, и ни следующие проверки, ни мутация не выполняются.
    """

    def __init__(self, kind: str, operation: str, steps: List[Step]):
        self.kind = kind
        self.operation = operation
        self.steps = steps

    @property
    def step_names(self) -> List[str]:
        return [name for name, _ in self.steps]

    def run(self, context: ValidationContext) -> ValidationContext:
        for _, check in self.steps:
            check(context)
        return context

def record_exists(store, message: str) -> Callable[[ValidationContext], None]:
    """Проверка существования записи; найденная запись кладётся в контекст"""

    def check(context: ValidationContext):
        record = store.find_by_id(context.route_id)
        if record is None:
            raise NotFoundError(message.format(id=context.route_id))
        context.record = record

    return check

class DishRules:
    """Цепочки проверок для блюд"""

    def __init__(self, store):
        exists = ("exists", record_exists(store, Messages.DISH_NOT_FOUND))
        fields = [
            ("name", lambda ctx: DishValidator.name(ctx.payload, ctx.partial)),
            ("description", lambda ctx: DishValidator.description(ctx.payload, ctx.partial)),
            ("price", lambda ctx: DishValidator.price(ctx.payload, ctx.partial)),
            ("image_url", lambda ctx: DishValidator.image_url(ctx.payload, ctx.partial)),
        ]

        self.create = ValidationPipeline("dish", "create", fields)
        self.read = ValidationPipeline("dish", "read", [exists])
        self.update = ValidationPipeline("dish", "update", [
            exists,
            *fields,
            ("id_matches", lambda ctx: DishValidator.id_matches(ctx.route_id, ctx.payload)),
        ])

class OrderRules:
    """Цепочки проверок для заказов"""

    def __init__(self, store):
        exists = ("exists", record_exists(store, Messages.ORDER_NOT_FOUND))
        fields = [
            ("deliverTo", lambda ctx: OrderValidator.deliver_to(ctx.payload, ctx.partial)),
            ("mobileNumber", lambda ctx: OrderValidator.mobile_number(ctx.payload, ctx.partial)),
            ("dishes", lambda ctx: OrderValidator.dishes(ctx.payload, ctx.partial)),
            ("dish_quantities", lambda ctx: OrderValidator.dish_quantities(ctx.payload, ctx.partial)),
        ]

        # статус при создании необязателен, по умолчанию pending
        self.create = ValidationPipeline("order", "create", [
            *fields,
            ("status", lambda ctx: OrderValidator.status(ctx.payload, partial=True)),
        ])
        self.read = ValidationPipeline("order", "read", [exists])
        self.update = ValidationPipeline("order", "update", [
            exists,
            *fields,
            ("id_matches", lambda ctx: OrderValidator.id_matches(ctx.route_id, ctx.payload)),
            ("status", lambda ctx: OrderValidator.status(ctx.payload, ctx.partial)),
            ("not_delivered", lambda ctx: OrderStatusPolicy.check_not_delivered(ctx.record)),
        ])
        self.delete = ValidationPipeline("order", "delete", [
            exists,
            ("pending", lambda ctx: OrderStatusPolicy.check_deletable(ctx.record)),
        ])
