"""
Request-scoped access to the services held in app.state
"""
from fastapi import Request
from grubdash.services.dish_service import DishService
from grubdash.services.order_service import OrderService

def get_dish_service(request: Request) -> DishService:
    return request.app.state.dish_service

def get_order_service(request: Request) -> OrderService:
    return request.app.state.order_service
