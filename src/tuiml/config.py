"""Configuration parsing for tuiml.yaml"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

import yaml
from pydantic import BaseModel, Field, ValidationError

from tuiml.builder import Builder, Resolution, StylePolicy
from tuiml.exceptions import ConfigError

if TYPE_CHECKING:
    from tuiml.engine import Screen

log = logging.getLogger(__name__)

CONFIG_FILENAME = "tuiml.yaml"


class BorderSetName(str, Enum):
    PLAIN = "plain"
    ROUNDED = "rounded"
    DOUBLE = "double"
    THICK = "thick"
    ASCII = "ascii"


class BuilderConfig(BaseModel):
    """Validation policies of the render-tree builder"""

    resolution: Resolution = Field(
        default=Resolution.CASCADE, description="Sub-builder resolution policy"
    )
    style: StylePolicy = Field(
        default=StylePolicy.LENIENT, description="Style clause validation policy"
    )


class RenderConfig(BaseModel):
    """Size and glyphs of the off-screen frame"""

    width: int = Field(default=80, ge=0, description="Frame width in cells")
    height: int = Field(default=24, ge=0, description="Frame height in cells")
    border_set: BorderSetName = Field(
        default=BorderSetName.PLAIN, description="Glyphs used to draw borders"
    )


class TuimlConfig(BaseModel):
    """Full tuiml.yaml configuration"""

    builder: BuilderConfig = Field(default_factory=BuilderConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)

    @classmethod
    def load(cls, path: Path) -> "TuimlConfig":
        """Load config from yaml file, defaults when the file is missing"""
        if not path.exists():
            log.debug("No config at %s, using defaults", path)
            return cls()

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(str(path), str(e)) from e

        if not isinstance(data, dict):
            raise ConfigError(str(path), "top level must be a mapping")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(str(path), str(e)) from e

    def make_builder(self) -> Builder:
        return Builder(resolution=self.builder.resolution, style=self.builder.style)

    def make_screen(self) -> Screen:
        from tuiml.engine import Renderer, Screen

        return Screen(
            width=self.render.width,
            height=self.render.height,
            builder=self.make_builder(),
            renderer=Renderer(border_set=self.render.border_set),
        )


def find_config_file(start: Path | None = None) -> Path | None:
    """Find tuiml.yaml in the given directory or its parents."""
    cwd = start or Path.cwd()
    for parent in [cwd] + list(cwd.parents):
        candidate = parent / CONFIG_FILENAME
        if candidate.exists():
            return candidate
    return None


def load_config(path: Path | None = None) -> TuimlConfig:
    """Load an explicit config file, or the nearest tuiml.yaml, or defaults."""
    if path is not None:
        if not path.exists():
            raise ConfigError(str(path), "file not found")
        return TuimlConfig.load(path)

    found = find_config_file()
    if found is None:
        return TuimlConfig()
    return TuimlConfig.load(found)
