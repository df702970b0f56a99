"""
GrubDash API - dishes & orders
Main FastAPI application
"""
from datetime import datetime
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from grubdash import __version__
from grubdash.api.routes import dishes, orders
from grubdash.business import ResourceError
from grubdash.config.settings import settings
from grubdash.services.dish_service import DishService, create_dish_service
from grubdash.services.order_service import OrderService, create_order_service
from grubdash.utils.logger import logger

def create_app(
    dish_service: Optional[DishService] = None,
    order_service: Optional[OrderService] = None
) -> FastAPI:
    """Создание и настройка FastAPI приложения"""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Управление жизненным циклом приложения"""
        logger.info("🚀 GrubDash API starting up", version=__version__)

        try:
            await app.state.dish_service.initialize()
            await app.state.order_service.initialize()
            logger.info("🎉 All services initialized successfully", **settings.to_dict())
            yield
        except Exception as e:
            logger.error("❌ Failed to initialize services", error=str(e))
            raise
        finally:
            logger.info("🔄 GrubDash API shutting down")

    app = FastAPI(
        title=settings.APP_NAME,
        description="In-memory dishes and orders API with ordered validation rules",
        version=__version__,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan
    )

    # Хранилища живут в сервисах, сервисы - в app.state
    app.state.dish_service = dish_service if dish_service is not None else create_dish_service()
    app.state.order_service = order_service if order_service is not None else create_order_service()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(dishes.router)
    app.include_router(orders.router)

    @app.get("/health")
    async def health():
        """Проверка здоровья сервиса"""
        return {
            "status": "healthy",
            "dishes": len(app.state.dish_service.store),
            "orders": len(app.state.order_service.store)
        }

    @app.get("/")
    async def root():
        """Корневой endpoint с информацией о сервисе"""
        return {
            "service": settings.APP_NAME,
            "version": __version__,
            "status": "running",
            "timestamp": datetime.now().isoformat(),
            "endpoints": {
                "dishes": "/dishes",
                "dish": "/dishes/{dishId}",
                "orders": "/orders",
                "order": "/orders/{orderId}",
                "health": "/health"
            },
            "configuration": {
                "debug_mode": settings.DEBUG,
                "environment": settings.ENVIRONMENT
            }
        }

    @app.exception_handler(ResourceError)
    async def resource_error_handler(request: Request, exc: ResourceError):
        """Ошибки валидации и отсутствующие записи"""
        return JSONResponse(status_code=exc.status, content=exc.to_dict())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """404 для неизвестных путей и 405 для неподдерживаемых методов"""
        if exc.status_code == 405:
            message = f"{request.method} not allowed for {request.url.path}"
        elif exc.status_code == 404:
            message = f"Path not found: {request.url.path}"
        else:
            message = str(exc.detail)

        logger.warning(message, status=exc.status_code, path=request.url.path)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": message},
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Тело запроса не является объектом {data: {...}}"""
        errors = exc.errors()
        location = ".".join(str(part) for part in errors[0]["loc"]) if errors else "body"
        message = f"Request body must be a JSON object with a \"data\" object ({location})"
        logger.warning(message, path=request.url.path)
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Глобальный обработчик исключений"""
        logger.error("💥 Unhandled exception",
                    path=request.url.path,
                    method=request.method,
                    error=str(exc))

        content = {"error": "Internal server error"}
        if settings.DEBUG:
            content["detail"] = str(exc)
        return JSONResponse(status_code=500, content=content)

    return app

# Create the application
app = create_app()

if __name__ == "__main__":
    logger.info("🚀 Starting GrubDash development server...")
    logger.info(f"📍 Server will start on http://{settings.APP_HOST}:{settings.APP_PORT}")
    logger.info(f"🔧 Debug mode: {settings.DEBUG}")

    uvicorn.run(
        "grubdash.api.main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        reload=settings.DEBUG,
        log_level="info"
    )
