# imagegen/providers.py
"""
Image generation providers.

A provider turns a prompt into the URL of a rendered image. Only a
simulated provider ships here; a real backend plugs in behind the same
`generate(prompt, filename)` call and raises ImageProviderError on failure.
"""
import logging
from typing import Protocol

from imagegen.core.config import settings

logger = logging.getLogger(__name__)


class ImageProviderError(Exception):
    pass


class ImageProvider(Protocol):
    def generate(self, prompt: str, filename: str) -> str:
        ...


class SimulatedImageProvider:
    """
    Pretends to render `prompt` and returns a URL under `base_url`.
    Prompts containing `failure_trigger` (case-insensitive) fail.
    """

    def __init__(self, base_url: str, failure_trigger: str = "error"):
        self.base_url = base_url.rstrip("/")
        self.failure_trigger = failure_trigger.lower()

    def generate(self, prompt: str, filename: str) -> str:
        if self.failure_trigger and self.failure_trigger in prompt.lower():
            raise ImageProviderError("Image generation service error")
        url = f"{self.base_url}/{filename}"
        logger.debug("Simulated render of %s", url)
        return url


def get_image_provider() -> ImageProvider:
    return SimulatedImageProvider(
        base_url=settings.IMAGE_BASE_URL,
        failure_trigger=settings.GENERATION_FAILURE_TRIGGER,
    )
