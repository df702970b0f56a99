"""
Dishes API endpoints
"""
from fastapi import APIRouter, Depends
from typing import Optional
from grubdash.api.deps import get_dish_service
from grubdash.models.dish import DishEnvelope
from grubdash.services.dish_service import DishService

router = APIRouter(prefix="/dishes", tags=["dishes"])

def _render(dish) -> dict:
    return dish.model_dump(by_alias=True)

@router.get("")
async def list_dishes(service: DishService = Depends(get_dish_service)):
    """Список всех блюд"""
    return {"data": [_render(dish) for dish in service.list()]}

@router.post("", status_code=201)
async def create_dish(
    envelope: Optional[DishEnvelope] = None,
    service: DishService = Depends(get_dish_service)
):
    """Создание блюда"""
    dish = service.create(envelope.data if envelope else None)
    return {"data": _render(dish)}

@router.get("/{dish_id}")
async def read_dish(dish_id: str, service: DishService = Depends(get_dish_service)):
    """Получить блюдо по ID"""
    return {"data": _render(service.read(dish_id))}

@router.put("/{dish_id}")
async def update_dish(
    dish_id: str,
    envelope: Optional[DishEnvelope] = None,
    service: DishService = Depends(get_dish_service)
):
    """Частичное обновление блюда"""
    dish = service.update(dish_id, envelope.data if envelope else None)
    return {"data": _render(dish)}
