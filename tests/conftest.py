from __future__ import annotations

import io
from typing import Callable

import httpx
import pytest
from PIL import Image

from core.config import AppSettings



@pytest.fixture()
def settings() -> AppSettings:
    # Ignore any .env lying around on the developer machine.
    return AppSettings(_env_file=None, image_width=8)


@pytest.fixture()
def png_bytes() -> bytes:
    img = Image.new("RGB", (4, 4), (200, 30, 30))
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture()
def mock_transport() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.MockTransport]:
    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.MockTransport:
        return httpx.MockTransport(handler)

    return _make
