from __future__ import annotations

from .format import resolve_saved_format
from .quality import resolve_quality
from .size import Preset, SizeRequest, is_api_size, is_dims, resolve_size

__all__ = [
    "Preset",
    "SizeRequest",
    "is_api_size",
    "is_dims",
    "resolve_quality",
    "resolve_saved_format",
    "resolve_size",
]
