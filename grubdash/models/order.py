"""
Order models
"""
from pydantic import BaseModel, Field
from typing import Any, List, Optional
from grubdash.models.base import GrubDashBaseModel, PartialPayload, OrderStatus

class OrderDish(GrubDashBaseModel):
    """Позиция заказа; лишние поля блюда сохраняются как есть"""
    
    id: Optional[Any] = None
    quantity: int = Field(..., gt=0, description="Количество")
    
    class Config:
        extra = "allow"

class Order(GrubDashBaseModel):
    """Заказ в хранилище"""
    
    id: str = Field(..., description="Уникальный ID заказа")
    deliver_to: str = Field(..., alias="deliverTo", min_length=1)
    mobile_number: str = Field(..., alias="mobileNumber", min_length=1)
    status: OrderStatus = Field(default=OrderStatus.PENDING.value)
    dishes: List[OrderDish] = Field(..., min_length=1)

class OrderPayload(PartialPayload):
    """Поля заказа из тела запроса, без проверки типов"""
    
    id: Optional[Any] = None
    deliver_to: Optional[Any] = Field(None, alias="deliverTo")
    mobile_number: Optional[Any] = Field(None, alias="mobileNumber")
    status: Optional[Any] = None
    dishes: Optional[Any] = None

class OrderEnvelope(BaseModel):
    """Конверт {data: {...}}"""
    data: Optional[OrderPayload] = None
