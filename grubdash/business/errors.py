"""
Ошибки ядра валидации
"""

class ResourceError(Exception):
    """Структурированная ошибка операции над ресурсом"""
    
    status: int = 500
    
    def __init__(self, message: str, status: int = None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status
    
    def to_dict(self) -> dict:
        return {"error": self.message}

class BadRequestError(ResourceError):
    status = 400

class NotFoundError(ResourceError):
    status = 404
