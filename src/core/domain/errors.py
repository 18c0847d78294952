"""Taxonomía de errores del dominio.

Política de propagación:
- Ruta de conocimiento/landmark: los errores se capturan en cada etapa y se
  convierten en textos fijos (`core.domain.messages`). Nunca sale una excepción.
- Ruta de itinerario: cualquier fallo se registra y se relanza como un único
  `GenerationError` (fail-fast).
- `InvalidInputError` es el único error que se detecta antes de cualquier I/O.
"""

from __future__ import annotations


class LandmarkLensError(Exception):
    """Base de todos los errores propios de la aplicación."""


class InvalidInputError(LandmarkLensError, ValueError):
    """Entrada malformada (data URI sin prefijo MIME, días <= 0, etc.)."""


class UpstreamError(LandmarkLensError):
    """Fallo de red/transporte o respuesta externa malformada."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NoResultError(LandmarkLensError):
    """La extracción no produjo un nombre de sujeto utilizable."""


class GenerationError(LandmarkLensError):
    """Fallo al generar un itinerario; envuelve el error upstream original."""
