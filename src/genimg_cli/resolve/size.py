from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..models import ACCEPTED_SIZES, DEFAULT_SIZE, ModelFamily, classify


class Preset(str, Enum):
    square = "square"
    landscape = "landscape"
    portrait = "portrait"


PRESET_SIZES: dict[ModelFamily, dict[Preset, str]] = {
    ModelFamily.GPT: {
        Preset.square: "1024x1024",
        Preset.landscape: "1536x1024",
        Preset.portrait: "1024x1536",
    },
    ModelFamily.DALL_E_3: {
        Preset.square: "1024x1024",
        Preset.landscape: "1792x1024",
        Preset.portrait: "1024x1792",
    },
    # dall-e-2 has no non-square sizes
    ModelFamily.DALL_E_2: {
        Preset.square: "1024x1024",
        Preset.landscape: "1024x1024",
        Preset.portrait: "1024x1024",
    },
}

API_SIZES: frozenset[str] = frozenset(s for sizes in ACCEPTED_SIZES.values() for s in sizes)


@dataclass(frozen=True)
class SizeRequest:
    """One way of asking for an image size: explicit, width/height, or preset.

    An empty request asks for the default size.
    """

    explicit: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    preset: Optional[Preset] = None

    def __post_init__(self) -> None:
        if (self.width is None) != (self.height is None):
            raise ValueError("width and height must be given together")
        if self.width is not None and (self.width <= 0 or self.height <= 0):
            raise ValueError("width and height must be greater than 0")
        forms = [self.explicit is not None, self.width is not None, self.preset is not None]
        if sum(forms) > 1:
            raise ValueError("size request may use only one of explicit, width/height, or preset")

    @property
    def is_empty(self) -> bool:
        return self.explicit is None and self.width is None and self.preset is None


def is_api_size(raw: str) -> bool:
    return raw.strip().lower() in API_SIZES


def parse_dims(raw: str) -> Optional[tuple[float, float]]:
    """Parse a ``WxH`` string into numbers, or None when it is not one."""
    parts = raw.strip().lower().split("x")
    if len(parts) != 2:
        return None
    try:
        return float(parts[0]), float(parts[1])
    except ValueError:
        return None


def is_dims(raw: str) -> bool:
    dims = parse_dims(raw)
    return dims is not None and dims[0] > 0 and dims[1] > 0


def orientation(width: float, height: float) -> Preset:
    if width == height:
        return Preset.square
    return Preset.landscape if width > height else Preset.portrait


def fit_dims(width: float, height: float, family: ModelFamily) -> str:
    if family is ModelFamily.DALL_E_2:
        longest = max(width, height)
        if longest <= 256:
            return "256x256"
        if longest <= 512:
            return "512x512"
        return "1024x1024"
    return PRESET_SIZES[family][orientation(width, height)]


def resolve_explicit(raw: str, family: ModelFamily) -> str:
    value = raw.strip().lower()
    if value in ACCEPTED_SIZES[family]:
        return value

    dims = parse_dims(value)
    if dims is None:
        return PRESET_SIZES[family][Preset.square]
    return fit_dims(dims[0], dims[1], family)


def resolve_size(request: SizeRequest, model: str, default: str = DEFAULT_SIZE) -> str:
    """Resolve a size request to a size the model's family accepts.

    Sizes another family accepts (and free-form ``WxH`` strings) are mapped by
    orientation, or by their longest side for dall-e-2.
    """
    family = classify(model)

    if request.preset is not None:
        return PRESET_SIZES[family][request.preset]

    if request.explicit is not None:
        return resolve_explicit(request.explicit, family)

    if request.width is not None and request.height is not None:
        return resolve_explicit(f"{request.width}x{request.height}", family)

    return default
