"""Screen controller for the random dog viewer.

The CLI owns rendering (Rich); this module owns the state that rendering
reads. Keeping the fetch/fallback flow here makes it reusable from any
front-end and testable with a stub source.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from core.config import AppSettings
from core.domain.breed import capitalize_words, extract_breed_name, format_breed_name
from core.domain.models import DogScreenState
from core.errors import DogApiError
from core.interfaces.image_source import DogImageSource

logger = logging.getLogger(__name__)


@dataclass
class ScreenHooks:
    """Optional callbacks for UI layers."""

    state_changed: Callable[[DogScreenState], None] | None = None


class DogScreen:
    """State holder behind the "Load New Dog Image" button."""

    def __init__(
        self,
        source: DogImageSource,
        settings: AppSettings | None = None,
        *,
        hooks: ScreenHooks | None = None,
    ) -> None:
        self._source = source
        self._settings = settings or AppSettings()
        self._hooks = hooks or ScreenHooks()
        self.state = DogScreenState(breed_name=self._settings.default_breed_name)

    @property
    def title(self) -> str:
        """Breed name as displayed above the image."""

        return capitalize_words(self.state.breed_name)

    def _notify(self) -> None:
        if self._hooks.state_changed:
            self._hooks.state_changed(self.state)

    async def load_new_image(self) -> DogScreenState:
        """Fetch a random image and update the screen state.

        On failure the image falls back to the placeholder URL and the breed
        to the configured error text. The breed is left untouched when the
        returned URL carries no breed segment.
        """

        self.state.loading = True
        self._notify()
        try:
            image = await self._source.fetch_random()
        except DogApiError as exc:
            logger.warning("Error fetching dog image: %s", exc)
            self.state.image_url = self._settings.placeholder_image_url
            self.state.breed_name = self._settings.error_breed_name
            self.state.status = None
            self.state.last_error = str(exc)
        else:
            logger.debug("Fetched dog image %s (status=%s)", image.message, image.status)
            self.state.image_url = image.message
            self.state.status = image.status
            self.state.last_error = None
            breed = extract_breed_name(image.message)
            if breed and breed.strip("-"):
                self.state.breed_name = format_breed_name(breed)
            else:
                logger.debug("No breed segment in %s", image.message)
        finally:
            self.state.loading = False
        self._notify()
        return self.state
