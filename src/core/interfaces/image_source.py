"""Contract for random dog image sources.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- The screen controller can be driven by the real API client or by a stub
  in tests without knowing which.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import DogImage


@runtime_checkable
class DogImageSource(Protocol):
    """Minimal contract for something that hands out random dog images.

    Design rules:
    - `fetch_random` is async because it does I/O (HTTP).
    - Every failure (network, HTTP status, decode) surfaces as `DogApiError`.
    """

    async def fetch_random(self) -> DogImage:
        """Fetch one random image description."""

        ...
