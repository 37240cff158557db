# Generator package

# Makes generate/ importable and exposes key interfaces.

from .generator import DescriptionGenerator
from .continuation import looks_truncated
from .errors import ConfigurationError, EmptyResponseError, GenerationError, TransportError
from .types import GenerationRequest, Message, ModelParams
from .clients.openrouter_client import OpenRouterClient

__all__ = [
    "DescriptionGenerator",
    "looks_truncated",
    "GenerationError",
    "ConfigurationError",
    "TransportError",
    "EmptyResponseError",
    "GenerationRequest",
    "Message",
    "ModelParams",
    "OpenRouterClient",
]
