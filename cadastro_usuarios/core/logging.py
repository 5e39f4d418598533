# cadastro_usuarios/core/logging.py

from __future__ import annotations

import logging
import sys

from cadastro_usuarios.config.settings import Settings, settings as default_settings

LOGGER_NAME = "cadastro_usuarios"
LOG_FORMAT = "[cadastro-usuarios] %(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"

logger = logging.getLogger(LOGGER_NAME)


def configure_logging(config: Settings | None = None) -> logging.Logger:
    config = config or default_settings
    level = config.effective_log_level

    logger.setLevel(level)

    # idempotente: nunca empilha handlers
    handler = next(
        (h for h in logger.handlers if getattr(h, "_cadastro_usuarios", False)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler._cadastro_usuarios = True  # type: ignore[attr-defined]
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    handler.setLevel(level)
    return logger

