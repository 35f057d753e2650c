"""Command-line entry point (typer).

Commands:
- `show`: the interactive single screen (default when no command is given).
- `fetch`: one load, printed as JSON or as a table.
- `breed`: format a breed segment the way the screen does.
- `doctor`: configuration and connectivity checks.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Callable

import typer
from rich.console import Console
from rich.live import Live

from adapters.dog_api import DogCeoClient
from adapters.image_renderer import ImageView, load_image_view
from adapters.json_exporter import dump_state_json, export_state_json
from cli import doctor
from cli.logging_setup import configure_logging
from cli.ui_components import BUTTON_LABEL, build_screen, build_state_table, print_banner
from core.config import AppSettings
from core.domain.breed import format_breed_name
from core.domain.models import DogScreenState, ImagePhase
from core.services.dog_screen import DogScreen, ScreenHooks

app = typer.Typer(help="Show a random dog from dog.ceo in your terminal.")
app.add_typer(doctor.app, name="doctor")

_console = Console()

_QUIT_ANSWERS = {"q", "quit", "exit"}


@app.callback(invoke_without_command=True)
def _root(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    settings = AppSettings()
    configure_logging(settings.log_level, verbose=verbose)
    if ctx.invoked_subcommand is None:
        ctx.invoke(show, once=False, no_image=False)


async def _press_button(
    screen: DogScreen,
    settings: AppSettings,
    *,
    with_image: bool,
    image_loading: Callable[[ImageView], None] | None = None,
) -> ImageView | None:
    state = await screen.load_new_image()
    if not with_image or not state.image_url:
        return None
    if image_loading:
        image_loading(ImageView(ImagePhase.EMPTY))
    return await load_image_view(state.image_url, settings=settings)


@app.command()
def show(
    once: bool = typer.Option(False, "--once", help="Load a single image and exit."),
    no_image: bool = typer.Option(False, "--no-image", help="Do not download/render the picture."),
) -> None:
    """Interactive screen: press Enter to load a new dog, q to quit."""

    settings = AppSettings()
    with_image = settings.render_images and not no_image

    lives: list[Live] = []

    def _on_state_changed(state: DogScreenState) -> None:
        if lives:
            lives[-1].update(build_screen(screen.title, state, None))

    def _on_image_loading(view: ImageView) -> None:
        if lives:
            lives[-1].update(build_screen(screen.title, screen.state, view))

    screen = DogScreen(
        DogCeoClient(settings),
        settings,
        hooks=ScreenHooks(state_changed=_on_state_changed),
    )

    def _load() -> ImageView | None:
        with Live(build_screen(screen.title, screen.state, None), console=_console, transient=True) as live:
            lives.append(live)
            try:
                return asyncio.run(
                    _press_button(
                        screen,
                        settings,
                        with_image=with_image,
                        image_loading=_on_image_loading,
                    )
                )
            finally:
                lives.pop()

    print_banner(_console)

    if once:
        view = _load()
        _console.print(build_screen(screen.title, screen.state, view))
        return

    view = None
    _console.print(build_screen(screen.title, screen.state, view))
    while True:
        answer = typer.prompt(
            f"{BUTTON_LABEL}? [Enter] / q to quit",
            default="",
            show_default=False,
        )
        if answer.strip().lower() in _QUIT_ANSWERS:
            break
        view = _load()
        _console.print(build_screen(screen.title, screen.state, view))


@app.command()
def fetch(
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the JSON to this file."),
    table: bool = typer.Option(False, "--table", help="Print a table instead of JSON."),
) -> None:
    """Load one random dog and print the resulting state."""

    settings = AppSettings()
    screen = DogScreen(DogCeoClient(settings), settings)
    state = asyncio.run(screen.load_new_image())

    if output is not None:
        path = export_state_json(state=state, output_path=output)
        _console.print(f"[green]Saved:[/green] {path}")
        return
    if table:
        _console.print(build_state_table(state))
        return
    # Plain stdout so the JSON stays machine readable.
    typer.echo(dump_state_json(state), nl=False)


@app.command()
def breed(name: str = typer.Argument(..., help="Breed segment, e.g. 'schnauzer-miniature'.")) -> None:
    """Format a breed segment as shown on screen."""

    if not name.strip():
        raise typer.BadParameter("breed name must not be empty")
    typer.echo(format_breed_name(name))


def run() -> None:
    app()
