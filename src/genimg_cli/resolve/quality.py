from __future__ import annotations

from ..models import ModelFamily, classify

GPT_QUALITIES = {"auto", "low", "medium", "high"}


def resolve_quality(requested: str, model: str) -> str:
    """Translate a user-facing quality token into one the model accepts.

    Unrecognized tokens fall back to the family default instead of failing.
    """
    token = requested.strip().lower()
    family = classify(model)

    if family is ModelFamily.GPT:
        return token if token in GPT_QUALITIES else "auto"

    if family is ModelFamily.DALL_E_3:
        return "hd" if token in ("high", "hd") else "standard"

    return "standard"
