import logging
import uvicorn
from grubdash.config.settings import settings

# Настройка логирования
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

def main():
    """Главная функция: запускает API сервер."""
    logger.info("Starting GrubDash API on %s:%s", settings.APP_HOST, settings.APP_PORT)
    uvicorn.run(
        "grubdash.api.main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )

if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        logger.info("Server stopped by user.")
