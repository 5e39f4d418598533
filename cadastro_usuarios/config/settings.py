# cadastro_usuarios/config/settings.py
import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    environment: str = "development"
    debug: bool = False

    # nível do logger "cadastro_usuarios" (DEBUG, INFO, WARNING, ...)
    log_level: str = "INFO"

    # limit padrão de UserService.list_users
    default_page_size: int = 50

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("environment", "log_level", mode="before")
    @classmethod
    def strip_strings(cls, v):
        if isinstance(v, str):
            return v.strip().strip('"').strip("'")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"log_level inválido: '{v}'")
        return level

    @field_validator("default_page_size")
    @classmethod
    def validate_page_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("default_page_size deve ser maior que zero.")
        return v

    @property
    def effective_log_level(self) -> int:
        if self.debug:
            return logging.DEBUG
        return logging.getLevelName(self.log_level)


settings = Settings()
