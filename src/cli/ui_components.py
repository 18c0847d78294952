"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar paneles en múltiples comandos.
"""

from __future__ import annotations

import re

from rich.align import Align
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.text import Text

_BR_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
_B_RE = re.compile(r"</?b>", re.IGNORECASE)


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("Landmark Lens", style="bold cyan")
    subtitle = Text("Landmarks • Wikipedia • Gemini • Travel tips", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_answer_panel(answer: str, *, title: str = "Answer") -> Panel:
    """Panel Markdown para respuestas del pipeline."""

    return Panel(Markdown(answer), title=Text(title, style="bold yellow"), border_style="yellow")


def html_itinerary_to_markdown(text: str) -> str:
    """Traduce el marcado mínimo del itinerario HTML (<b>, <br>) a Markdown."""

    out = _BR_RE.sub("\n", text)
    return _B_RE.sub("**", out)


def build_itinerary_panel(itinerary: str, *, destination: str, days: int, html: bool) -> Panel:
    body = html_itinerary_to_markdown(itinerary) if html else itinerary
    title = Text(f"{destination} · {days}-day itinerary", style="bold green")
    return Panel(Markdown(body), title=title, border_style="green")


def build_error_panel(message: str) -> Panel:
    return Panel(Text(message, style="red"), title=Text("Error", style="bold red"), border_style="red")
