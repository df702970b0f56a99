"""
Order management service
"""
from grubdash.business import OrderRules, ValidationContext
from grubdash.config.settings import settings
from grubdash.models.order import Order
from grubdash.services.resource_service import ResourceService
from grubdash.utils.logger import logger

class OrderService(ResourceService):
    """Сервис управления заказами"""

    kind = "order"
    model = Order

    def _build_rules(self, store):
        return OrderRules(store)

    def delete(self, record_id: str):
        """Удаление заказа; разрешено только в статусе pending"""
        with self.store.lock:
            context = self._validate(self.rules.delete, ValidationContext(route_id=record_id))
            self.store.remove_at(self.store.index_of(context.record))

        logger.resource_event(self.kind, "deleted", id=record_id)

def create_order_service() -> OrderService:
    return OrderService(seed_path=settings.ORDERS_SEED_PATH)
