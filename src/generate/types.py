# Typed dataclasses shared across the generation modules.

from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Optional

Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class Message:
    """Single chat turn: system, user, or assistant."""
    role: Role
    content: str


@dataclass(frozen=True)
class ModelParams:
    """LLM parameters per request."""
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None


@dataclass(frozen=True)
class GenerationRequest:
    """Validated, normalized inputs for one product description."""
    product_name: str
    product_details: str
    keywords: str
