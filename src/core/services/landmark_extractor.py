"""Extracción heurística del nombre del landmark.

La salida del modelo de visión es texto libre ("This is a photo of the Eiffel
Tower in Paris..."). El resto del pipeline necesita un único nombre, así que
aquí se aplica una heurística deliberadamente permisiva:

1. Buscar un determinante ("the"/"a"/"an") seguido de una secuencia de palabras
   capitalizadas separadas por espacios; la primera coincidencia gana.
2. Si no hay coincidencia, usar la primera línea del texto, recortada.

Puede equivocarse (cualquier frase capitalizada tras "the" vale). Para algo más
preciso se implementa otra `NameExtractionStrategy`.
"""

from __future__ import annotations

import re

_DETERMINER_PHRASE_RE = re.compile(r"(?:the|a|an) ([A-Z][a-z]+(?: [A-Z][a-z]+)*)")


class DeterminerPhraseExtractor:
    """`NameExtractionStrategy` basada en regex (determinante + frase capitalizada)."""

    def __init__(self, pattern: re.Pattern[str] | None = None) -> None:
        self._pattern = pattern or _DETERMINER_PHRASE_RE

    def extract(self, model_output: str) -> str:
        text = model_output or ""
        match = self._pattern.search(text)
        if match:
            return match.group(1)
        return text.split("\n", 1)[0].strip()
