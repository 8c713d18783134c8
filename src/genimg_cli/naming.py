from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Optional

_CLEAN_RE = re.compile(r"[^a-z0-9]+")

MAX_SLUG = 60
FALLBACK_SLUG = "image"


def slug(text: str) -> str:
    """Lower-case, hyphen-delimited file name fragment of at most 60 chars."""
    cleaned = _CLEAN_RE.sub("-", text.lower()).strip("-")
    cleaned = cleaned[:MAX_SLUG].rstrip("-")
    return cleaned or FALLBACK_SLUG


def seq_suffix(idx: int, count: int) -> str:
    if count <= 1:
        return ""
    return f"-{idx + 1:02d}"


def base_name(prompt: str, size: str, idx: int, count: int) -> str:
    return f"{slug(prompt)}-{size}{seq_suffix(idx, count)}"


def named_stem(name: str, idx: int, count: int) -> str:
    return f"{Path(name).stem}{seq_suffix(idx, count)}"


def output_path(
    out: Optional[str],
    directory: str | Path,
    name: Optional[str],
    prompt: str,
    size: str,
    fmt: str,
    idx: int,
    count: int,
) -> Path:
    """Absolute path for image ``idx`` of ``count``.

    An explicit ``out`` is used as-is (made absolute); callers only pass one
    when a single image is requested.
    """
    if out:
        return Path(os.path.abspath(out))

    stem = named_stem(name, idx, count) if name else base_name(prompt, size, idx, count)
    return Path(os.path.abspath(Path(directory) / f"{stem}.{fmt}"))
