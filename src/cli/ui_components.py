"""Rich UI components for the CLI.

Why separate components:
- Keeps command logic apart from visual details.
- The screen panel is rebuilt on every state change from the same pieces.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.spinner import Spinner
from rich.table import Table
from rich.text import Text

from adapters.image_renderer import ImageView
from core.domain.models import DogScreenState, ImagePhase

EMPTY_IMAGE_TEXT = "Press the button to load a dog image"
BUTTON_LABEL = "Load New Dog Image"


def print_banner(console: Console) -> None:
    """Print the welcome banner.

    Skipped in non-interactive modes (JSON output).
    """

    title = Text("RANDOM DOG", style="bold cyan")
    subtitle = Text("dog.ceo • one random dog per press", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_image_area(state: DogScreenState, view: ImageView | None) -> RenderableType:
    """Image area: prompt, spinner, picture, or failure text."""

    if state.image_url is None and not state.loading:
        return Text(EMPTY_IMAGE_TEXT, style="italic")
    if state.loading or (view is not None and view.phase is ImagePhase.EMPTY):
        return Spinner("dots", text=Text(" Loading...", style="dim"))
    if view is None or view.renderable is None:
        # Image rendering disabled: show where the picture lives.
        return Text(state.image_url or "", style="magenta")
    return view.renderable


def build_button_hint() -> Text:
    return Text.assemble(
        (f" {BUTTON_LABEL} ", "bold white on blue"),
        ("  [Enter]   quit [q]", "dim"),
    )


def build_screen(title: str, state: DogScreenState, view: ImageView | None) -> Panel:
    """The whole single screen: title, image area and button."""

    heading = Text(title, style="bold", justify="center")
    parts: list[RenderableType] = [
        heading,
        Text(""),
        Align.center(build_image_area(state, view)),
    ]
    if view is not None and state.image_url and not state.loading:
        parts.append(Align.center(Text(state.image_url, style="dim")))
    parts.extend([Text(""), Align.center(build_button_hint())])
    return Panel(Group(*parts), border_style="blue", padding=(1, 2))


def build_state_table(state: DogScreenState) -> Table:
    """Compact key/value view of the state (used by `fetch --table`)."""

    table = Table(title="Random Dog")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("Breed", state.breed_name)
    table.add_row("Image URL", state.image_url or "-")
    table.add_row("Status", state.status or "-")
    if state.last_error:
        table.add_row("Error", Text(state.last_error, style="red"))
    return table
