# cadastro_usuarios/__init__.py

from cadastro_usuarios.core.exceptions import AppError, NotFoundError, ValidationError
from cadastro_usuarios.core.logging import configure_logging
from cadastro_usuarios.entities.user import User, UserStatus
from cadastro_usuarios.repositories.user_repository import InMemoryUserRepository
from cadastro_usuarios.services.user_service import UserService

__all__ = [
    "AppError",
    "InMemoryUserRepository",
    "NotFoundError",
    "User",
    "UserService",
    "UserStatus",
    "ValidationError",
    "configure_logging",
]
