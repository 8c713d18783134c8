from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .models import (
    DEFAULT_BACKGROUND,
    DEFAULT_COMPRESSION,
    DEFAULT_FORMAT,
    DEFAULT_MODEL,
    DEFAULT_MODERATION,
    DEFAULT_QUALITY,
)
from .resolve.size import Preset, SizeRequest


@dataclass(frozen=True)
class GenOptions:
    """Generation arguments after defaults and config have been applied."""

    model: str = DEFAULT_MODEL
    size: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    square: bool = False
    landscape: bool = False
    portrait: bool = False
    format: str = DEFAULT_FORMAT
    quality: str = DEFAULT_QUALITY
    background: str = DEFAULT_BACKGROUND
    moderation: str = DEFAULT_MODERATION
    compression: int = DEFAULT_COMPRESSION
    count: int = 1
    out: Optional[str] = None
    directory: str = "."
    name: Optional[str] = None
    user: Optional[str] = None
    open: bool = False

    @property
    def preset(self) -> Optional[Preset]:
        if self.square:
            return Preset.square
        if self.landscape:
            return Preset.landscape
        if self.portrait:
            return Preset.portrait
        return None

    @property
    def preset_count(self) -> int:
        return int(self.square) + int(self.landscape) + int(self.portrait)

    def size_request(self) -> SizeRequest:
        """Build the size request; assumes the options passed validation.

        A preset takes precedence over the other forms.
        """
        preset = self.preset
        if preset is not None:
            return SizeRequest(preset=preset)
        if self.size:
            return SizeRequest(explicit=self.size)
        if self.width is not None and self.height is not None:
            return SizeRequest(width=self.width, height=self.height)
        return SizeRequest()
