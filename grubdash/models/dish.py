"""
Dish models
"""
from pydantic import BaseModel, Field
from typing import Any, Optional
from grubdash.models.base import GrubDashBaseModel, PartialPayload

class Dish(GrubDashBaseModel):
    """Блюдо в хранилище"""
    
    id: str = Field(..., description="Уникальный ID блюда")
    name: str = Field(..., min_length=1, description="Название")
    description: str = Field(..., min_length=1, description="Описание")
    price: int = Field(..., gt=0, description="Цена")
    image_url: str = Field(..., min_length=1, description="Ссылка на изображение")

class DishPayload(PartialPayload):
    """Поля блюда из тела запроса, без проверки типов"""
    
    id: Optional[Any] = None
    name: Optional[Any] = None
    description: Optional[Any] = None
    price: Optional[Any] = None
    image_url: Optional[Any] = None

class DishEnvelope(BaseModel):
    """Конверт {data: {...}}"""
    data: Optional[DishPayload] = None
