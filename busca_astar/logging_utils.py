from __future__ import annotations

import logging
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

from .settings import Settings

LOGGER_NAME = "busca_astar"


def _parse_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """Anexa um único StreamHandler ao logger do pacote (JSON por padrão)."""
    if settings is None:
        settings = Settings.from_env()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_parse_level(settings.log_level))

    # evita handlers duplicados em chamadas repetidas
    if getattr(logger, "_configured", False):
        return logger

    if settings.log_json:
        formatter: logging.Formatter = JsonFormatter("%(asctime)s %(name)s %(levelname)s %(message)s")
    else:
        formatter = logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s")

    sh = logging.StreamHandler()
    sh.setFormatter(formatter)
    logger.addHandler(sh)
    logger.propagate = False
    logger._configured = True  # type: ignore[attr-defined]
    return logger
