"""Client for the dog.ceo random image endpoint.

One GET, one JSON decode. Everything that can go wrong on the way
(connection, HTTP status, body) is reported as `DogApiError`.
"""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import DogImage
from core.errors import DogApiError
from core.interfaces.image_source import DogImageSource


async def fetch_random_dog_image(
    *,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> DogImage:
    """GET the random image endpoint and decode its payload."""

    settings = settings or AppSettings()
    url = settings.api_url

    try:
        if client is None:
            async with build_async_client(settings, extra_headers={"Accept": "application/json"}) as own:
                resp = await own.get(url)
        else:
            resp = await client.get(url)
        resp.raise_for_status()
    except httpx.HTTPError as exc:
        raise DogApiError(f"request to {url} failed: {exc}") from exc

    try:
        payload = resp.json()
    except ValueError as exc:
        raise DogApiError(f"invalid JSON from {url}") from exc

    try:
        return DogImage.model_validate(payload)
    except ValidationError as exc:
        raise DogApiError(f"unexpected payload from {url}: {exc.error_count()} error(s)") from exc


class DogCeoClient(DogImageSource):
    """`DogImageSource` backed by the public dog.ceo API."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    async def fetch_random(self) -> DogImage:
        return await fetch_random_dog_image(settings=self._settings, client=self._client)
