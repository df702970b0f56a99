"""
Dish management service
"""
from grubdash.business import DishRules
from grubdash.config.settings import settings
from grubdash.models.dish import Dish
from grubdash.services.resource_service import ResourceService

class DishService(ResourceService):
    """Сервис управления блюдами (удаление блюд не поддерживается)"""

    kind = "dish"
    model = Dish

    def _build_rules(self, store):
        return DishRules(store)

def create_dish_service() -> DishService:
    return DishService(seed_path=settings.DISHES_SEED_PATH)
