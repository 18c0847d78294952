"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el pipeline depende de abstracciones y los
  tests pueden inyectar stubs deterministas.
"""

from core.interfaces.extraction import NameExtractionStrategy
from core.interfaces.generation import ItineraryPromptStrategy, KnowledgeSource, TextGenerator

__all__ = [
    "ItineraryPromptStrategy",
    "KnowledgeSource",
    "NameExtractionStrategy",
    "TextGenerator",
]
