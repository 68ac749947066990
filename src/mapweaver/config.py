"""Application configuration.

Configuration is loaded from environment variables. For local development, you can provide a
`.env` file and set `MAPWEAVER_ENV_FILE` to point to it.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LayoutSpacing(BaseModel):
    """Geometry constants shared by the layout modes.

    Sibling and depth spacing default to the 140x160 node size the original map view used.
    """

    margin: float = Field(default=80.0, ge=0.0)

    # Layered modes (logical tree, org chart)
    sibling_spacing: float = Field(default=140.0, gt=0.0)
    depth_spacing: float = Field(default=160.0, gt=0.0)

    # Radial
    radius_step: float = Field(default=200.0, gt=0.0)

    # Catalog
    column_width: float = Field(default=220.0, gt=0.0)
    row_spacing: float = Field(default=70.0, gt=0.0)

    # Timeline
    event_spacing: float = Field(default=200.0, gt=0.0)
    event_offset: float = Field(default=40.0, ge=0.0)
    detail_offset: float = Field(default=110.0, ge=0.0)
    indent: float = Field(default=30.0, ge=0.0)

    # Fishbone
    bone_spacing: float = Field(default=180.0, gt=0.0)
    bone_offset: float = Field(default=80.0, ge=0.0)
    bone_offset_step: float = Field(default=40.0, ge=0.0)
    rib_dx: float = Field(default=60.0, ge=0.0)
    rib_dy: float = Field(default=50.0, ge=0.0)

    # Edge curves
    curvature: float = Field(default=0.5, ge=0.0, le=1.0)


class Settings(BaseSettings):
    """mapweaver settings.

    All fields are environment-configurable. Prefix is `MAPWEAVER_`; nested spacing fields use a
    double underscore, e.g. `MAPWEAVER_SPACING__RADIUS_STEP=240`.
    """

    model_config = SettingsConfigDict(
        env_prefix="MAPWEAVER_",
        env_file=None,
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    log_level: str = Field(default="INFO")

    # Rendering defaults
    default_mode: str = Field(default="logical-right")
    palette_index: int = Field(default=0, ge=0)
    root_color: str = Field(default="#64748b")
    default_title: str = Field(default="Mind Map")

    spacing: LayoutSpacing = Field(default_factory=LayoutSpacing)


def load_settings() -> Settings:
    """Load settings from env.

    Returns:
        Settings: Parsed settings.
    """

    env_file_override = os.getenv("MAPWEAVER_ENV_FILE")
    if env_file_override:
        env_path = Path(env_file_override)
        return Settings(_env_file=env_path)

    default_env = Path.cwd() / ".env"
    if default_env.exists():
        return Settings(_env_file=default_env)

    return Settings()
