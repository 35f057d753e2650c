"""Terminal image view.

Downloads the dog picture and renders it with half-block characters: each
terminal cell shows two vertical pixels, the upper one as foreground colour
of "▀" and the lower one as background colour.

The view has the same three phases as an async image widget: empty while
loading, success with the picture, failure with a short red message.
"""

from __future__ import annotations

import asyncio
import io
import logging
from dataclasses import dataclass

import httpx
from PIL import Image
from rich.color import Color
from rich.console import RenderableType
from rich.style import Style
from rich.text import Text

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import ImagePhase
from core.errors import ImageLoadError

logger = logging.getLogger(__name__)

FAILED_TO_LOAD_TEXT = "Failed to load image"
_UPPER_HALF_BLOCK = "▀"


@dataclass
class ImageView:
    """What the image area should currently display."""

    phase: ImagePhase
    renderable: RenderableType | None = None


async def download_image(
    url: str,
    *,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> bytes:
    settings = settings or AppSettings()
    try:
        if client is None:
            async with build_async_client(settings) as own:
                resp = await own.get(url)
        else:
            resp = await client.get(url)
        resp.raise_for_status()
    except httpx.HTTPError as exc:
        raise ImageLoadError(f"download of {url} failed: {exc}") from exc
    return resp.content


def render_image(data: bytes, width: int) -> Text:
    """Decode `data` with Pillow and render it `width` columns wide."""

    try:
        with Image.open(io.BytesIO(data)) as img:
            rgb = img.convert("RGB")
    except (OSError, Image.DecompressionBombError) as exc:
        raise ImageLoadError(f"cannot decode image: {exc}") from exc

    src_w, src_h = rgb.size
    height = max(2, round(width * src_h / max(src_w, 1)))
    # Two pixel rows per terminal row.
    height += height % 2
    rgb = rgb.resize((width, height), Image.Resampling.LANCZOS)
    pixels = rgb.load()

    text = Text(no_wrap=True, overflow="crop")
    for y in range(0, height, 2):
        for x in range(width):
            top = pixels[x, y]
            bottom = pixels[x, y + 1]
            text.append(
                _UPPER_HALF_BLOCK,
                style=Style(color=Color.from_rgb(*top), bgcolor=Color.from_rgb(*bottom)),
            )
        if y + 2 < height:
            text.append("\n")
    return text


async def load_image_view(
    url: str,
    *,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> ImageView:
    """Download and render `url`; load errors end in the failure phase."""

    settings = settings or AppSettings()
    try:
        data = await download_image(url, settings=settings, client=client)
        rendered = await asyncio.to_thread(render_image, data, settings.image_width)
    except ImageLoadError as exc:
        logger.warning("Failed to load image %s: %s", url, exc)
        return ImageView(ImagePhase.FAILURE, Text(FAILED_TO_LOAD_TEXT, style="red"))
    return ImageView(ImagePhase.SUCCESS, rendered)
