"""
Base models for GrubDash
"""
from pydantic import BaseModel
from typing import Any, Dict
from enum import Enum

class GrubDashBaseModel(BaseModel):
    """Base model with common configuration"""
    
    class Config:
        validate_assignment = True
        use_enum_values = True
        populate_by_name = True

class PartialPayload(GrubDashBaseModel):
    """Тело запроса, в котором любое поле может отсутствовать"""
    
    def is_present(self, field: str) -> bool:
        """Было ли поле передано клиентом"""
        return field in self.model_fields_set
    
    def present_fields(self) -> Dict[str, Any]:
        """Только переданные клиентом поля"""
        return self.model_dump(exclude_unset=True)

class OrderStatus(str, Enum):
    """Order status enumeration"""
    PENDING = "pending"
    PREPARING = "preparing"
    OUT_FOR_DELIVERY = "out-for-delivery"
    DELIVERED = "delivered"
