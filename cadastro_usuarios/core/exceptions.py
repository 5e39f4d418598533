# cadastro_usuarios/core/exceptions.py

class AppError(Exception):
    def __init__(self, message: str, *, status_code: int = 400) -> None:
        super().__init__(message)
        self.status_code = status_code


class ValidationError(AppError):
    def __init__(self, message: str = "Dados inválidos.") -> None:
        super().__init__(message, status_code=422)


class NotFoundError(AppError):
    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, status_code=404)
