"""
Settings for the GrubDash API
"""
import os
from pathlib import Path
from typing import List
from dotenv import load_dotenv

# Загружаем переменные окружения из .env файла
load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_DATA_DIR = PACKAGE_DIR / "data"

class Settings:
    """Конфигурация GrubDash API"""
    
    # ===== LOGGING SETTINGS =====
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    DETAILED_LOGGING: bool = os.getenv("DETAILED_LOGGING", "true").lower() == "true"
    
    # ===== APPLICATION SETTINGS =====
    APP_NAME: str = "GrubDash API"
    APP_HOST: str = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT: int = int(os.getenv("APP_PORT", "5000"))
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    CORS_ORIGINS: List[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "*").split(",")
        if origin.strip()
    ]
    
    # ===== SEED DATA =====
    DISHES_SEED_PATH: str = os.getenv("DISHES_SEED_PATH", str(DEFAULT_DATA_DIR / "dishes.json"))
    ORDERS_SEED_PATH: str = os.getenv("ORDERS_SEED_PATH", str(DEFAULT_DATA_DIR / "orders.json"))
    
    # ===== VALIDATION METHODS =====
    
    @classmethod
    def validate_app_config(cls) -> bool:
        """Проверка конфигурации приложения"""
        return all([
            0 < cls.APP_PORT < 65536,
            Path(cls.DISHES_SEED_PATH).exists(),
            Path(cls.ORDERS_SEED_PATH).exists()
        ])
    
    @classmethod
    def to_dict(cls) -> dict:
        """Конвертация настроек в словарь для логирования"""
        return {
            "app_host": cls.APP_HOST,
            "app_port": cls.APP_PORT,
            "environment": cls.ENVIRONMENT,
            "debug": cls.DEBUG,
            "log_level": cls.LOG_LEVEL,
            "cors_origins": cls.CORS_ORIGINS,
            "dishes_seed_path": cls.DISHES_SEED_PATH,
            "orders_seed_path": cls.ORDERS_SEED_PATH,
            "app_config_valid": cls.validate_app_config()
        }

# Глобальный экземпляр настроек
settings = Settings()

if not settings.validate_app_config():
    import warnings
    warnings.warn(
        "Seed data files not found or APP_PORT out of range; stores will start empty.",
        UserWarning
    )
