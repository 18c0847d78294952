"""CLI principal (Typer).

Es la "aplicación que rodea" al pipeline: cada comando es una única llamada
asíncrona a `LandmarkPipeline` y la presentación queda en Rich.
"""

from __future__ import annotations

import asyncio
import base64
import mimetypes
from pathlib import Path
from typing import Awaitable, Callable, TypeVar

import typer
from rich.console import Console

from cli import doctor
from cli.ui_components import build_answer_panel, build_error_panel, build_itinerary_panel, print_banner
from core.config import AppSettings
from core.domain.errors import GenerationError, InvalidInputError, LandmarkLensError
from core.logging import configure_logging
from core.services.itinerary import get_itinerary_strategy
from core.services.landmark_pipeline import LandmarkPipeline

app = typer.Typer(
    no_args_is_help=True,
    help="Identify landmarks, fetch background knowledge and plan trips (Gemini + Wikipedia).",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()

T = TypeVar("T")


def image_file_to_data_uri(path: Path) -> str:
    """Lee una imagen local y la devuelve como `data:<mime>;base64,<payload>`."""

    mime_type, _ = mimetypes.guess_type(path.name)
    if not mime_type or not mime_type.startswith("image/"):
        raise InvalidInputError(f"cannot infer an image MIME type for {path.name!r}")
    payload = base64.b64encode(path.read_bytes()).decode("ascii")
    return f"data:{mime_type};base64,{payload}"


def _run(call: Callable[[LandmarkPipeline], Awaitable[T]]) -> T:
    settings = AppSettings()

    async def runner() -> T:
        async with LandmarkPipeline.from_settings(settings) as pipeline:
            return await call(pipeline)

    return asyncio.run(runner())


def _emit(answer: str, *, raw: bool, title: str) -> None:
    if raw:
        typer.echo(answer)
    else:
        _console.print(build_answer_panel(answer, title=title))


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log raw model responses (DEBUG)."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Hide the banner."),
) -> None:
    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)
    if not quiet:
        print_banner(_console)


@app.command()
def ask(
    text: str = typer.Argument(..., help="Free-text question for the model."),
    raw: bool = typer.Option(False, "--raw", help="Print plain text instead of a Rich panel."),
) -> None:
    """Send a free-text query to the model (sendText)."""

    answer = _run(lambda p: p.handle_text_query(text))
    _emit(answer, raw=raw, title="Gemini")


@app.command()
def knowledge(
    name: str = typer.Argument(..., help="Landmark or destination name."),
    raw: bool = typer.Option(False, "--raw", help="Print plain text instead of a Rich panel."),
) -> None:
    """Wikipedia summary, refined, plus travel recommendations (fetchKnowledge)."""

    answer = _run(lambda p: p.handle_knowledge_request(name))
    _emit(answer, raw=raw, title=name)


@app.command()
def image(
    source: str = typer.Argument(..., help="Image file path or a data:<mime>;base64,<payload> URI."),
    raw: bool = typer.Option(False, "--raw", help="Print plain text instead of a Rich panel."),
) -> None:
    """Identify the landmark in a photo and describe it (sendImage)."""

    data_uri = source
    path = Path(source)
    if not source.startswith("data:") and path.is_file():
        try:
            data_uri = image_file_to_data_uri(path)
        except InvalidInputError as exc:
            _console.print(build_error_panel(str(exc)))
            raise typer.Exit(code=2) from exc

    answer = _run(lambda p: p.handle_image_query(data_uri))
    _emit(answer, raw=raw, title="Landmark")


@app.command()
def recognize(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Image file."),
) -> None:
    """Only identify the landmark (no Wikipedia, no recommendations)."""

    try:
        data_uri = image_file_to_data_uri(path)
        result = _run(lambda p: p.recognize_landmark(data_uri))
    except LandmarkLensError as exc:
        _console.print(build_error_panel(str(exc)))
        raise typer.Exit(code=1) from exc

    _console.print(f"[bold cyan]{result.landmark_name}[/bold cyan]")
    _console.print(result.description, style="dim")


@app.command()
def category(
    name: str = typer.Argument(..., help="Landmark or destination name."),
    number: int = typer.Argument(..., help="Category number (1-13)."),
    raw: bool = typer.Option(False, "--raw", help="Print plain text instead of a Rich panel."),
) -> None:
    """Detailed recommendations for a single travel category."""

    try:
        answer = _run(lambda p: p.category_info(name, number))
    except InvalidInputError as exc:
        _console.print(build_error_panel(str(exc)))
        raise typer.Exit(code=2) from exc
    _emit(answer, raw=raw, title=f"{name} · #{number}")


@app.command()
def itinerary(
    destination: str = typer.Argument(..., help="Destination city or region."),
    days: int = typer.Argument(..., min=1, help="Number of days."),
    fmt: str = typer.Option("html", "--format", "-f", help="Prompt shape: html or plain."),
    raw: bool = typer.Option(False, "--raw", help="Print the model output untouched."),
) -> None:
    """Generate a day-by-day itinerary (generateItinerary)."""

    try:
        strategy = get_itinerary_strategy(fmt)
        if strategy.name == "html":
            plan = _run(lambda p: p.handle_itinerary_request(destination, days))
        else:
            plan = _run(lambda p: p.plain_itinerary(destination, days))
    except (GenerationError, InvalidInputError) as exc:
        _console.print(build_error_panel(str(exc)))
        raise typer.Exit(code=1) from exc

    if raw:
        typer.echo(plan)
    else:
        _console.print(build_itinerary_panel(plan, destination=destination, days=days, html=strategy.name == "html"))


def run() -> None:
    app()
