"""Exception hierarchy.

Adapters raise these; the screen controller and the image view translate them
into the fallback state, so they never reach the user as tracebacks.
"""

from __future__ import annotations


class RandomDogError(Exception):
    """Base class for every error raised by this project."""


class DogApiError(RandomDogError):
    """The random-image endpoint could not be reached or decoded."""


class ImageLoadError(RandomDogError):
    """The image bytes could not be downloaded or decoded."""
