"""
Orders API endpoints
"""
from fastapi import APIRouter, Depends, Response
from typing import Optional
from grubdash.api.deps import get_order_service
from grubdash.models.order import OrderEnvelope
from grubdash.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])

def _render(order) -> dict:
    return order.model_dump(by_alias=True)

@router.get("")
async def list_orders(service: OrderService = Depends(get_order_service)):
    """Список всех заказов"""
    return {"data": [_render(order) for order in service.list()]}

@router.post("", status_code=201)
async def create_order(
    envelope: Optional[OrderEnvelope] = None,
    service: OrderService = Depends(get_order_service)
):
    """Создание заказа"""
    order = service.create(envelope.data if envelope else None)
    return {"data": _render(order)}

@router.get("/{order_id}")
async def read_order(order_id: str, service: OrderService = Depends(get_order_service)):
    """Получить заказ по ID"""
    return {"data": _render(service.read(order_id))}

@router.put("/{order_id}")
async def update_order(
    order_id: str,
    envelope: Optional[OrderEnvelope] = None,
    service: OrderService = Depends(get_order_service)
):
    """Частичное обновление заказа"""
    order = service.update(order_id, envelope.data if envelope else None)
    return {"data": _render(order)}

@router.delete("/{order_id}", status_code=204)
async def delete_order(order_id: str, service: OrderService = Depends(get_order_service)):
    """Удаление заказа в статусе pending"""
    service.delete(order_id)
    return Response(status_code=204)
