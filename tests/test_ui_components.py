from __future__ import annotations

from rich.console import Console
from rich.spinner import Spinner
from rich.text import Text

from adapters.image_renderer import ImageView
from cli.ui_components import EMPTY_IMAGE_TEXT, build_image_area, build_screen
from core.domain.models import DogScreenState, ImagePhase


def _render(renderable) -> str:
    console = Console(width=80, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


def test_prompt_before_first_load():
    area = build_image_area(DogScreenState(), None)

    assert isinstance(area, Text)
    assert area.plain == EMPTY_IMAGE_TEXT


def test_spinner_while_loading():
    area = build_image_area(DogScreenState(loading=True), None)

    assert isinstance(area, Spinner)


def test_failure_view_is_shown():
    state = DogScreenState(image_url="https://via.placeholder.com/300", breed_name="Error loading breed")
    view = ImageView(ImagePhase.FAILURE, Text("Failed to load image", style="red"))

    assert build_image_area(state, view) is view.renderable


def test_url_shown_when_rendering_disabled():
    state = DogScreenState(image_url="https://images.dog.ceo/breeds/pug/1.jpg", breed_name="Pug")

    area = build_image_area(state, None)

    assert area.plain == "https://images.dog.ceo/breeds/pug/1.jpg"


def test_screen_contains_title_and_button():
    out = _render(build_screen("Miniature Schnauzer", DogScreenState(), None))

    assert "Miniature Schnauzer" in out
    assert "Load New Dog Image" in out
    assert EMPTY_IMAGE_TEXT in out
