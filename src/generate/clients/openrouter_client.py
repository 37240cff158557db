# Client for OpenRouter's OpenAI-compatible Chat Completions API.
# One call per complete(); SDK retries are off so a failed call is never repeated.

from __future__ import annotations
import json
import logging
from typing import Any, Dict, List, Optional

import httpx
from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from ..errors import ConfigurationError, EmptyResponseError, TransportError
from ..types import Message, ModelParams

logger = logging.getLogger(__name__)

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_MODEL = "tngtech/deepseek-r1t2-chimera:free"


class OpenRouterClient:
    def __init__(
        self,
        api_key: Optional[str],
        model: str = DEFAULT_MODEL,
        base_url: str = OPENROUTER_BASE_URL,
        timeout: float = 120.0,
        referer: Optional[str] = None,
        title: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.model = model
        self.api_key = api_key or None
        headers = {}
        if referer:
            headers["HTTP-Referer"] = referer
        if title:
            headers["X-Title"] = title
        self.client: Optional[AsyncOpenAI] = None
        if self.api_key:
            self.client = AsyncOpenAI(
                api_key=self.api_key,
                base_url=base_url,
                timeout=timeout,
                max_retries=0,
                default_headers=headers,
                http_client=http_client,
            )

    @property
    def configured(self) -> bool:
        return self.client is not None

    def ensure_configured(self) -> None:
        if self.client is None:
            raise ConfigurationError("OPENROUTER_API_KEY is not configured")

    async def complete(self, messages: List[Message], params: ModelParams) -> str:
        """Send one chat-completion request and return the stripped text."""
        self.ensure_configured()
        formatted = [{"role": m.role, "content": m.content} for m in messages]
        extra: Dict[str, Any] = {}
        if params.temperature is not None:
            extra["temperature"] = params.temperature
        if params.max_tokens is not None:
            extra["max_tokens"] = params.max_tokens
        try:
            raw = await self.client.chat.completions.with_raw_response.create(
                model=self.model,
                messages=formatted,
                **extra,
            )
        except APIStatusError as exc:
            raise TransportError(exc.status_code, exc.response.text) from exc
        except APIConnectionError as exc:
            raise TransportError(None, str(exc)) from exc

        http_response = raw.http_response
        try:
            payload = http_response.json()
        except json.JSONDecodeError:
            payload = http_response.text

        text = _first_choice_content(payload)
        if not text:
            logger.error("OpenRouter returned an empty description. Raw response payload: %r", payload)
            raise EmptyResponseError(payload)
        return text


def _first_choice_content(payload: Any) -> str:
    if not isinstance(payload, dict):
        return ""
    choices = payload.get("choices") or []
    if not choices or not isinstance(choices[0], dict):
        return ""
    message = choices[0].get("message") or {}
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str):
        return ""
    return content.strip()
