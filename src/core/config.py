"""Application configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- Lets adapters (HTTP client, image renderer) read config consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DOG_API_URL = "https://dog.ceo/api/breeds/image/random"
PLACEHOLDER_IMAGE_URL = "https://via.placeholder.com/300"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "random-dog"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "random-dog"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "random-dog"
    return Path.home() / ".config" / "random-dog"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars) without leaking into the core.
    - One configuration contract shared by the CLI and the adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="RANDOM_DOG_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_url: str = Field(
        default=DOG_API_URL,
        min_length=8,
        description="Endpoint returning a random dog image as JSON.",
    )
    placeholder_image_url: str = Field(
        default=PLACEHOLDER_IMAGE_URL,
        min_length=8,
        description="Image URL shown when the fetch fails.",
    )
    error_breed_name: str = Field(
        default="Error loading breed",
        min_length=1,
        description="Breed text shown when the fetch fails.",
    )
    default_breed_name: str = Field(
        default="Unknown Breed",
        min_length=1,
        description="Breed text shown before the first successful fetch.",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="random-dog/0.1",
        min_length=1,
        description="User-Agent sent with every request.",
    )

    image_width: int = Field(
        default=60,
        ge=8,
        le=300,
        description="Width in terminal columns of the rendered image.",
    )
    render_images: bool = Field(
        default=True,
        description="Download and render the image in the terminal.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level for the CLI (DEBUG, INFO, WARNING, ...).",
    )
