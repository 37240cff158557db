# Failure kinds raised by the generation pipeline.
# The HTTP layer catches GenerationError; everything below it propagates.

from __future__ import annotations
from typing import Any, Optional


class GenerationError(Exception):
    """Base class for every generation failure."""


class ConfigurationError(GenerationError):
    """No API credential is configured; no request can be made."""


class TransportError(GenerationError):
    """The completion endpoint answered with a non-success status."""

    def __init__(self, status_code: Optional[int], body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"OpenRouter error: {status_code} {body}")


class EmptyResponseError(GenerationError):
    """The endpoint answered but the first choice carried no text."""

    def __init__(self, payload: Any):
        self.payload = payload
        super().__init__("OpenRouter returned an empty description")
