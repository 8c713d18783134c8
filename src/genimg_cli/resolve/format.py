from __future__ import annotations

from typing import Optional

from ..models import ModelFamily, classify


def resolve_saved_format(model: str, requested: str, reported: Optional[str] = None) -> str:
    """Return the container format the saved file will have.

    A format reported by the service for the finished generation always wins.
    Only GPT image models honour the requested format; the others return png.
    """
    if reported:
        return reported

    if classify(model) is ModelFamily.GPT:
        return requested

    return "png"
