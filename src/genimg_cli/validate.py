from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional

from .models import MAX_COUNT, is_gpt_model
from .options import GenOptions
from .resolve.size import is_api_size, is_dims


@dataclass
class ValidationResult:
    ok: bool
    errors: list[str]


def validate_options(opts: GenOptions, platform: Optional[str] = None) -> ValidationResult:
    if platform is None:
        platform = sys.platform
    errors: list[str] = []

    has_width = opts.width is not None
    has_height = opts.height is not None

    if opts.size and not (is_api_size(opts.size) or is_dims(opts.size)):
        errors.append(
            "Expected --size to be a supported API size (e.g. auto, 1024x1024, 1536x1024) "
            "or WIDTHxHEIGHT. Use --width and --height for flexible dimensions."
        )

    if has_width != has_height:
        errors.append("Use --width and --height together.")

    if has_width and opts.width <= 0:
        errors.append("--width must be greater than 0.")

    if has_height and opts.height <= 0:
        errors.append("--height must be greater than 0.")

    if opts.size and (has_width or has_height):
        errors.append("Use either --size or --width/--height, not both.")

    if opts.preset_count > 1:
        errors.append("Use only one of --square, --landscape, or --portrait.")

    if opts.preset_count > 0 and (opts.size or has_width or has_height):
        errors.append("Use either a preset, --size, or --width/--height.")

    if opts.count < 1 or opts.count > MAX_COUNT:
        errors.append(f"--count must be between 1 and {MAX_COUNT}.")

    if opts.model == "dall-e-3" and opts.count > 1:
        errors.append("--count greater than 1 is not supported for dall-e-3.")

    if opts.out and opts.count > 1:
        errors.append("--out only supports a single generated image. Use --dir with --count instead.")

    if opts.compression < 0 or opts.compression > 100:
        errors.append("--compression must be between 0 and 100.")

    if not is_gpt_model(opts.model) and opts.format != "png":
        errors.append("--format other than png is only supported for GPT image models.")

    if opts.open and platform != "darwin":
        errors.append("--open is only supported on macOS.")

    return ValidationResult(len(errors) == 0, errors)
