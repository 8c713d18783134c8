"""Thin wrapper around the OpenAI Images API.

One request per run; errors from the SDK propagate unchanged.
"""

from __future__ import annotations

import logging
from typing import Any

from openai import OpenAI
from openai.types import ImagesResponse

logger = logging.getLogger(__name__)


def create_client(api_key: str) -> OpenAI:
    return OpenAI(api_key=api_key)


def generate_images(client: OpenAI, payload: dict[str, Any]) -> ImagesResponse:
    logger.info("Requesting %d image(s) from %s at %s", payload["n"], payload["model"], payload["size"])
    return client.images.generate(**payload)
