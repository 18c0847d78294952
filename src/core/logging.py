"""Configuración de logging (loguru).

Los módulos importan `from loguru import logger` directamente; aquí solo se
decide el sink y el nivel, una vez, desde el entrypoint.
"""

from __future__ import annotations

import sys

from loguru import logger

_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> - {message}"


def configure_logging(level: str = "INFO") -> None:
    """Reemplaza el sink por defecto de loguru por stderr con el nivel pedido."""

    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=_FORMAT, backtrace=False, diagnose=False)
