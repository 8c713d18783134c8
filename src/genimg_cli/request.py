from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict

from .models import is_gpt_model
from .naming import output_path
from .options import GenOptions
from .resolve.format import resolve_saved_format
from .resolve.quality import resolve_quality

logger = logging.getLogger(__name__)


class RunPlan(BaseModel):
    """What a run will produce, or did produce.

    Dry runs and real runs report the same shape.
    """

    model_config = ConfigDict(frozen=True)

    format: str
    model: str
    paths: list[str]
    prompt: str
    size: str

    def to_json(self) -> str:
        return json.dumps(self.model_dump(), indent=2, ensure_ascii=False)


def build_request(opts: GenOptions, prompt: str, size: str) -> dict[str, Any]:
    """Keyword arguments for ``client.images.generate``."""
    body: dict[str, Any] = {
        "prompt": prompt,
        "model": opts.model,
        "n": opts.count,
        "quality": resolve_quality(opts.quality, opts.model),
        "size": size,
    }

    if opts.user:
        body["user"] = opts.user

    if is_gpt_model(opts.model):
        body["background"] = opts.background
        body["moderation"] = opts.moderation
        body["output_format"] = opts.format
        if opts.format != "png":
            body["output_compression"] = opts.compression
    else:
        body["response_format"] = "b64_json"

    logger.debug("Request for %s: %s", opts.model, {k: v for k, v in body.items() if k != "prompt"})
    return body


def plan_run(opts: GenOptions, prompt: str, size: str) -> RunPlan:
    fmt = resolve_saved_format(opts.model, opts.format)
    paths = [
        str(output_path(opts.out, opts.directory, opts.name, prompt, size, fmt, idx, opts.count))
        for idx in range(opts.count)
    ]
    return RunPlan(format=fmt, model=opts.model, paths=paths, prompt=prompt, size=size)
