"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.dog_api import fetch_random_dog_image
from adapters.http_client import build_async_client
from adapters.image_renderer import download_image, render_image
from core.config import AppSettings, get_user_env_file
from core.errors import RandomDogError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

CheckRow = tuple[str, str, str]


async def _check_api(settings: AppSettings, client: httpx.AsyncClient) -> tuple[bool, str, str | None]:
    try:
        image = await fetch_random_dog_image(settings=settings, client=client)
    except RandomDogError as exc:
        return False, str(exc), None
    return True, f"status={image.status}", image.message


async def _check_image(settings: AppSettings, url: str, client: httpx.AsyncClient) -> tuple[bool, str]:
    try:
        data = await download_image(url, settings=settings, client=client)
        render_image(data, 8)
    except RandomDogError as exc:
        return False, str(exc)
    return True, f"{len(data)} bytes"


async def collect_checks(
    settings: AppSettings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[CheckRow]:
    """Run every check and return `(check, status, details)` rows."""

    env_file = get_user_env_file()
    rows: list[CheckRow] = [
        ("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file)),
        ("API URL", "OK", settings.api_url),
        ("Timeout", "OK", f"{settings.http_timeout_seconds:g}s"),
    ]

    # Connectivity (best-effort)
    async with build_async_client(settings, transport=transport) as client:
        ok_api, detail_api, image_url = await _check_api(settings, client)
        rows.append(("API connectivity", "OK" if ok_api else "FAIL", detail_api))

        if not settings.render_images:
            rows.append(("Image rendering", "DISABLED", "RANDOM_DOG_RENDER_IMAGES=false"))
        elif image_url:
            ok_img, detail_img = await _check_image(settings, image_url, client)
            rows.append(("Image rendering", "OK" if ok_img else "FAIL", detail_img))
    return rows


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()
    rows = asyncio.run(collect_checks(settings))

    table = Table(title="Random Dog Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    for row in rows:
        table.add_row(*row)

    _console.print(table)

    if any(check == "API connectivity" and status == "FAIL" for check, status, _ in rows):
        _console.print(
            "\n[yellow]Note:[/yellow] When the API is unreachable the screen shows the placeholder image "
            "and the breed text falls back to the error message."
        )
