"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from adapters.wikipedia import summary_url
from core.config import AppSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return response.status_code < 400, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or exc.__class__.__name__


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="Landmark Lens Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    if settings.gemini_api_key:
        table.add_row("Gemini key", "OK", "Key configured")
    else:
        table.add_row("Gemini key", "MISSING", "Set GEMINI_API_KEY or run `doctor setup-ai`")
    table.add_row("Gemini endpoint", "OK", settings.generate_content_url())
    timeout = "none (requests may hang)" if settings.http_timeout_seconds is None else f"{settings.http_timeout_seconds}s"
    table.add_row("HTTP timeout", "OK", timeout)

    # Connectivity (best-effort)
    ok_wiki, detail_wiki = asyncio.run(
        _check_http(summary_url(settings.wikipedia_summary_url, "Eiffel Tower"), settings)
    )
    table.add_row("Wikipedia summary API", "OK" if ok_wiki else "FAIL", detail_wiki)

    _console.print(table)

    if not settings.gemini_api_key:
        _console.print(
            "\n[yellow]Note:[/yellow] Without a key every model call degrades to an error string."
        )


@app.command(name="setup-ai")
def setup_ai() -> None:
    """Interactive Gemini setup (stores config in the user config .env)."""

    presets: dict[str, dict[str, str]] = {
        "flash": {"LANDMARK_LENS_GEMINI_API_VERSION": "v1", "LANDMARK_LENS_GEMINI_MODEL": "gemini-1.5-flash"},
        "pro": {"LANDMARK_LENS_GEMINI_API_VERSION": "v1beta", "LANDMARK_LENS_GEMINI_MODEL": "gemini-pro"},
    }

    preset = typer.prompt("Model preset (flash/pro)", default="flash", show_default=True).strip().lower()
    values = presets.get(preset, {}).copy()
    if not values:
        _console.print("[yellow]Unknown preset. You can still enter custom values.[/yellow]")

    api_version = typer.prompt(
        "API version", default=values.get("LANDMARK_LENS_GEMINI_API_VERSION", "v1"), show_default=True
    ).strip()
    model = typer.prompt(
        "Model", default=values.get("LANDMARK_LENS_GEMINI_MODEL", ""), show_default=True
    ).strip()
    api_key = typer.prompt("Gemini API key", hide_input=True, confirmation_prompt=False).strip()

    if not model or not api_key:
        raise typer.BadParameter("model and API key are required")

    env_path = write_user_env_vars(
        {
            "LANDMARK_LENS_GEMINI_API_VERSION": api_version,
            "LANDMARK_LENS_GEMINI_MODEL": model,
            "LANDMARK_LENS_GEMINI_API_KEY": api_key,
        }
    )

    _console.print(f"[green]Saved Gemini config to:[/green] {env_path}")
