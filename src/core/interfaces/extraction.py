"""Contrato de extracción de nombres.

Por qué Protocol:
- La heurística por regex es solo una implementación posible; un extractor
  NER o uno basado en salida estructurada del modelo deben poder sustituirla
  sin tocar el pipeline.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class NameExtractionStrategy(Protocol):
    """Convierte la salida libre de un modelo en un único nombre de sujeto.

    Reglas de diseño:
    - Es síncrono y puro: no hace I/O.
    - Puede devolver "" cuando no encuentra nada; decidir qué hacer con eso es
      responsabilidad del llamador.
    """

    def extract(self, model_output: str) -> str:
        ...
