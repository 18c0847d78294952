"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta en el borde (data URIs, días de itinerario) sin acoplar
  el Core a HTTP.
- Todos los valores son de alcance de request e inmutables (frozen): se crean
  una vez, los consume una sola etapa y nadie los muta después.

Nota:
- Estos modelos describen *qué* viaja por el pipeline, no *cómo* se obtiene.
"""

from __future__ import annotations

import base64
import binascii
import re
from typing import Any, Literal, Union

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from core.domain.errors import InvalidInputError
from core.domain.messages import RECOMMENDATIONS_HEADER

_DATA_URI_MIME_RE = re.compile(r"data:(.*?);base64")
_MIME_TYPE_PATTERN = r"^[\w.+-]+/[\w.+-]+$"
_MIME_TYPE_RE = re.compile(_MIME_TYPE_PATTERN)


class TextQuery(BaseModel):
    """Consulta de texto libre (teclado o voz ya transcrita)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    value: str = Field(..., description="Texto tal cual lo escribió el usuario.")

    def to_prompt(self) -> "TextPrompt":
        return TextPrompt(text=self.value, role="user")


class ImageQuery(BaseModel):
    """Imagen recibida como data URI (`data:<mime>;base64,<payload>`)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["image"] = "image"
    mime_type: str = Field(
        ...,
        pattern=_MIME_TYPE_PATTERN,
        description="Tipo MIME extraído del prefijo del data URI (p.ej. 'image/jpeg').",
    )
    data: str = Field(
        ...,
        min_length=1,
        description="Payload base64 tal cual se reenvía al modelo (inline_data).",
    )

    @field_validator("data")
    @classmethod
    def _check_base64(cls, value: str) -> str:
        try:
            base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ValueError("image payload is not valid base64") from exc
        return value

    @classmethod
    def from_data_uri(cls, data_uri: str) -> "ImageQuery":
        """Separa MIME y payload de un data URI.

        Lanza `InvalidInputError` si no hay prefijo `data:<mime>;base64` o si el
        payload no decodifica; nunca hace I/O.
        """

        if not isinstance(data_uri, str):
            raise InvalidInputError("image data must be a data URI string")
        match = _DATA_URI_MIME_RE.search(data_uri)
        if not match or not _MIME_TYPE_RE.match(match.group(1)):
            raise InvalidInputError("missing or malformed data:<mime>;base64 prefix")

        _, _, payload = data_uri.partition(",")
        try:
            return cls(mime_type=match.group(1), data=payload)
        except ValueError as exc:
            raise InvalidInputError(str(exc)) from exc


class TextPrompt(BaseModel):
    """Prompt de texto: `{role?, parts: [{text}]}`."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Texto del prompt.")
    role: str | None = Field(
        default="user",
        description="Rol del mensaje; None omite el campo (como hace el prompt de itinerarios).",
    )

    def to_content(self) -> dict[str, Any]:
        content: dict[str, Any] = {"parts": [{"text": self.text}]}
        if self.role:
            content = {"role": self.role, **content}
        return content


class InlineDataPrompt(BaseModel):
    """Prompt multimodal: `{parts: [{inline_data: {mime_type, data}}]}`."""

    model_config = ConfigDict(frozen=True)

    mime_type: str = Field(..., description="Tipo MIME de la imagen.")
    data: str = Field(..., description="Imagen en base64.")

    @classmethod
    def from_query(cls, query: ImageQuery) -> "InlineDataPrompt":
        return cls(mime_type=query.mime_type, data=query.data)

    def to_content(self) -> dict[str, Any]:
        return {"parts": [{"inline_data": {"mime_type": self.mime_type, "data": self.data}}]}


PromptPayload = Union[TextPrompt, InlineDataPrompt]


def build_generate_body(payload: PromptPayload) -> dict[str, Any]:
    """Cuerpo JSON para `generateContent`."""

    return {"contents": [payload.to_content()]}


class ItineraryRequest(BaseModel):
    """Parámetros de un itinerario (destino + número de días)."""

    model_config = ConfigDict(frozen=True)

    destination: str = Field(..., min_length=1, description="Destino del viaje.")
    days: int = Field(..., gt=0, description="Número de días (> 0).")

    @field_validator("destination")
    @classmethod
    def _strip_destination(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("destination must not be blank")
        return value


class LandmarkRecognition(BaseModel):
    """Resultado de reconocer un landmark en una imagen."""

    model_config = ConfigDict(frozen=True)

    landmark_name: str = Field(..., min_length=1, description="Nombre extraído de la respuesta del modelo.")
    description: str = Field(..., description="Respuesta cruda del modelo de visión.")


class KnowledgeAnswer(BaseModel):
    """Respuesta compuesta de la ruta de conocimiento.

    Por qué un modelo y no solo un string:
    - Permite a la CLI/tests inspeccionar cada etapa por separado.
    - `render()` es el único lugar donde se fija el formato de concatenación.
    """

    model_config = ConfigDict(frozen=True)

    subject: str = Field(..., description="Nombre del landmark/destino consultado.")
    summary: str = Field(..., description="Extracto de Wikipedia (o su placeholder).")
    refined: str = Field(..., description="Contenido reformateado en Markdown (o su placeholder).")
    recommendations: str = Field(..., description="Recomendaciones de viaje (o su placeholder).")

    def render(self) -> str:
        return f"{self.refined}\n\n{RECOMMENDATIONS_HEADER}\n{self.recommendations}"
