"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation at the decode boundary: a payload missing a field fails
  loudly instead of producing half-filled state.
- `model_dump(mode="json")` gives the JSON export for free.

Note:
- These models describe *what* the data is, not *how* it is fetched.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

"""
Example response of https://dog.ceo/api/breeds/image/random

{
    "message": "https://images.dog.ceo/breeds/schnauzer-miniature/n02097047_6567.jpg",
    "status": "success"
}
"""


class DogImage(BaseModel):
    """Decoded response of the random-image endpoint."""

    model_config = ConfigDict(extra="ignore")

    message: str = Field(
        ...,
        description="Image URL (or an error message when status is not 'success').",
    )
    status: str = Field(
        ...,
        description="API status flag, 'success' on the happy path.",
    )


class ImagePhase(str, Enum):
    """Loading phases of the image area."""

    EMPTY = "empty"
    SUCCESS = "success"
    FAILURE = "failure"


class DogScreenState(BaseModel):
    """UI-bound state of the single screen.

    Written only by the fetch completion path of `DogScreen`.
    """

    image_url: str | None = Field(
        default=None,
        description="URL of the image currently displayed (None before the first load).",
    )
    breed_name: str = Field(
        default="Unknown Breed",
        min_length=1,
        description="Formatted breed name shown above the image.",
    )
    loading: bool = Field(
        default=False,
        description="True while the fetch is in flight.",
    )
    status: str | None = Field(
        default=None,
        description="`status` of the last successful response.",
    )
    last_error: str | None = Field(
        default=None,
        description="Diagnostic text of the last failed fetch.",
    )
