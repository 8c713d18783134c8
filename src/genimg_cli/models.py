from __future__ import annotations

from enum import Enum

GPT_MODEL_PREFIX = "gpt-image-"

DEFAULT_MODEL = "gpt-image-1.5"
DEFAULT_SIZE = "1024x1024"
DEFAULT_FORMAT = "png"
DEFAULT_QUALITY = "auto"
DEFAULT_BACKGROUND = "auto"
DEFAULT_MODERATION = "auto"
DEFAULT_COMPRESSION = 100

MAX_COUNT = 10


class ModelFamily(str, Enum):
    GPT = "gpt"
    DALL_E_3 = "dall-e-3"
    DALL_E_2 = "dall-e-2"


def classify(model: str) -> ModelFamily:
    """Map a model id onto the family whose size/quality/format rules apply.

    Unknown ids that are neither GPT image models nor dall-e-3 get the
    dall-e-2 rules.
    """
    if model.startswith(GPT_MODEL_PREFIX):
        return ModelFamily.GPT
    if model == "dall-e-3":
        return ModelFamily.DALL_E_3
    return ModelFamily.DALL_E_2


def is_gpt_model(model: str) -> bool:
    return classify(model) is ModelFamily.GPT


ACCEPTED_SIZES: dict[ModelFamily, tuple[str, ...]] = {
    ModelFamily.GPT: ("auto", "1024x1024", "1536x1024", "1024x1536"),
    ModelFamily.DALL_E_3: ("1024x1024", "1792x1024", "1024x1792"),
    ModelFamily.DALL_E_2: ("256x256", "512x512", "1024x1024"),
}

ACCEPTED_QUALITIES: dict[ModelFamily, tuple[str, ...]] = {
    ModelFamily.GPT: ("auto", "low", "medium", "high"),
    ModelFamily.DALL_E_3: ("standard", "hd"),
    ModelFamily.DALL_E_2: ("standard",),
}


# Choice sets exposed on the command line.


class OutputFormat(str, Enum):
    png = "png"
    jpeg = "jpeg"
    webp = "webp"


class Quality(str, Enum):
    auto = "auto"
    low = "low"
    medium = "medium"
    high = "high"
    standard = "standard"
    hd = "hd"


class Background(str, Enum):
    auto = "auto"
    opaque = "opaque"
    transparent = "transparent"


class Moderation(str, Enum):
    auto = "auto"
    low = "low"
