"""
Logging configuration for the GrubDash API
"""
import logging
import json
import sys
from grubdash.config.settings import settings

class ApiLogger:
    """Логгер API с контекстом в формате JSON"""

    def __init__(self, name: str = "grubdash"):
        self.logger = logging.getLogger(name)
        self._setup_logger()

    def _setup_logger(self):
        """Настройка логгера"""
        if not self.logger.handlers:
            # Консольный обработчик
            console_handler = logging.StreamHandler(sys.stdout)

            formatter = logging.Formatter(
                fmt=settings.LOG_FORMAT,
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

            log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
            self.logger.setLevel(log_level)

            # Предотвращаем дублирование логов
            self.logger.propagate = False

    def info(self, message: str, **kwargs):
        """Логирование информации с контекстом"""
        if settings.DETAILED_LOGGING:
            context = self._format_context(**kwargs)
            self.logger.info(f"{message} {context}".rstrip())
        else:
            self.logger.info(message)

    def error(self, message: str, **kwargs):
        """Логирование ошибок с контекстом"""
        context = self._format_context(**kwargs)
        self.logger.error(f"{message} {context}".rstrip())

    def warning(self, message: str, **kwargs):
        """Логирование предупреждений с контекстом"""
        context = self._format_context(**kwargs)
        self.logger.warning(f"{message} {context}".rstrip())

    def debug(self, message: str, **kwargs):
        """Логирование отладочной информации"""
        if settings.DEBUG:
            context = self._format_context(**kwargs)
            self.logger.debug(f"{message} {context}".rstrip())

    def resource_event(self, kind: str, action: str, **kwargs):
        """Логирование успешной операции над ресурсом"""
        self.info(
            f"📦 {kind} {action}",
            kind=kind,
            action=action,
            **kwargs
        )

    def validation_rejected(self, kind: str, operation: str, status: int, message: str, **kwargs):
        """Логирование отклонённой валидации"""
        self.warning(
            f"🚫 {kind} {operation} rejected: {message}",
            kind=kind,
            operation=operation,
            status=status,
            **kwargs
        )

    def _format_context(self, **kwargs) -> str:
        """Форматирование контекста для логов"""
        if not kwargs:
            return ""

        # Удаляем None значения и большие объекты
        clean_context = {}
        for key, value in kwargs.items():
            if value is not None:
                if isinstance(value, (dict, list)):
                    str_value = str(value)
                    if len(str_value) > 500:
                        clean_context[key] = f"<{type(value).__name__} size={len(str_value)}>"
                    else:
                        clean_context[key] = value
                elif isinstance(value, str) and len(value) > 200:
                    clean_context[key] = f"{value[:200]}..."
                else:
                    clean_context[key] = value

        if not clean_context:
            return ""

        try:
            return f"| {json.dumps(clean_context, ensure_ascii=False, default=str)}"
        except (TypeError, ValueError):
            return f"| {str(clean_context)}"

# Глобальный экземпляр логгера
logger = ApiLogger("grubdash")
