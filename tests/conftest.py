"""Pytest configuration and shared fixtures."""

import pytest

from cadastro_usuarios.config.settings import Settings
from cadastro_usuarios.repositories.user_repository import InMemoryUserRepository
from cadastro_usuarios.services.user_service import UserService


@pytest.fixture
def app_settings() -> Settings:
    """Settings with explicit values, independent of the environment."""
    return Settings(environment="test", debug=False, log_level="DEBUG", default_page_size=50)


@pytest.fixture
def repository() -> InMemoryUserRepository:
    """An empty in-memory store."""
    return InMemoryUserRepository()


@pytest.fixture
def user_service(repository: InMemoryUserRepository, app_settings: Settings) -> UserService:
    """A fresh service bound to its own store."""
    service = UserService(repository, config=app_settings)
    service.clear_users()
    return service
