from __future__ import annotations

import base64
import logging
import subprocess
from pathlib import Path
from typing import Any, Sequence

from .naming import output_path
from .options import GenOptions
from .request import RunPlan
from .resolve.format import resolve_saved_format

logger = logging.getLogger(__name__)


class EmptyResponseError(Exception):
    """Raised when the service returns no usable image data."""

    pass


class OpenError(Exception):
    """Raised when saved files could not be opened."""

    pass


def write_image(path: Path, b64_data: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(base64.b64decode(b64_data))


def save_images(response: Any, opts: GenOptions, prompt: str, requested_size: str) -> RunPlan:
    """Write every returned image to disk, in response order.

    File names use the size and format the service reports, falling back to
    the requested ones.

    Raises:
        EmptyResponseError: If there are no images or an image has no data.
    """
    items = list(response.data or [])
    if not items:
        raise EmptyResponseError("OpenAI did not return any images.")

    actual_size = response.size or requested_size
    fmt = resolve_saved_format(opts.model, opts.format, response.output_format)
    paths: list[str] = []

    for idx, item in enumerate(items):
        if not item.b64_json:
            raise EmptyResponseError("OpenAI returned an image without base64 content.")

        path = output_path(
            opts.out,
            opts.directory,
            opts.name,
            item.revised_prompt or prompt,
            actual_size,
            fmt,
            idx,
            len(items),
        )
        write_image(path, item.b64_json)
        logger.info("Saved %s", path)
        paths.append(str(path))

    return RunPlan(format=fmt, model=opts.model, paths=paths, prompt=prompt, size=actual_size)


def open_files(paths: Sequence[str]) -> None:
    """Open saved files with the macOS ``open`` command."""
    try:
        proc = subprocess.run(
            ["open", *paths],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as e:
        raise OpenError(f"Failed to run open: {e}") from e

    if proc.returncode != 0:
        raise OpenError(f"open exited with code {proc.returncode}")
