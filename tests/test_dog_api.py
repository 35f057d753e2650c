from __future__ import annotations

import httpx
import pytest

from adapters.dog_api import DogCeoClient, fetch_random_dog_image
from adapters.http_client import build_async_client
from core.errors import DogApiError
from core.interfaces.image_source import DogImageSource

IMAGE_URL = "https://images.dog.ceo/breeds/schnauzer-miniature/n02097047_6567.jpg"


@pytest.mark.asyncio
async def test_fetch_decodes_payload(settings, mock_transport):
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"message": IMAGE_URL, "status": "success"})

    async with build_async_client(settings, transport=mock_transport(handler)) as client:
        image = await fetch_random_dog_image(settings=settings, client=client)

    assert image.message == IMAGE_URL
    assert image.status == "success"
    assert str(seen[0].url) == "https://dog.ceo/api/breeds/image/random"
    assert seen[0].headers["User-Agent"] == settings.user_agent


@pytest.mark.asyncio
async def test_extra_keys_are_ignored(settings, mock_transport):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"message": IMAGE_URL, "status": "success", "code": 200})

    async with build_async_client(settings, transport=mock_transport(handler)) as client:
        image = await DogCeoClient(settings, client=client).fetch_random()

    assert image.message == IMAGE_URL


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500, json={"message": "boom", "status": "error"}),
        httpx.Response(200, text="<html>not json</html>"),
        httpx.Response(200, json={"message": IMAGE_URL}),
        httpx.Response(200, json=["not", "an", "object"]),
    ],
)
async def test_failures_are_wrapped(settings, mock_transport, response):
    def handler(request: httpx.Request) -> httpx.Response:
        return response

    async with build_async_client(settings, transport=mock_transport(handler)) as client:
        with pytest.raises(DogApiError):
            await fetch_random_dog_image(settings=settings, client=client)


@pytest.mark.asyncio
async def test_network_error_is_wrapped(settings, mock_transport):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with build_async_client(settings, transport=mock_transport(handler)) as client:
        with pytest.raises(DogApiError) as info:
            await DogCeoClient(settings, client=client).fetch_random()

    assert isinstance(info.value.__cause__, httpx.ConnectError)


def test_client_satisfies_source_protocol(settings):
    assert isinstance(DogCeoClient(settings), DogImageSource)
