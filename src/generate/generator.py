# DescriptionGenerator: builds the Etsy prompt, calls the model client and
# asks for continuations while the output still looks cut off.

from __future__ import annotations
import logging
from typing import Optional, Tuple

from .continuation import looks_truncated
from .prompts import CONTINUE_INSTRUCTION, SYSTEM_PROMPT, build_user_message
from .types import GenerationRequest, Message, ModelParams

logger = logging.getLogger(__name__)

TEMPERATURE = 0.7
CONTINUATION_BUDGET = 2


class DescriptionGenerator:
    def __init__(self, model_client, max_tokens: Optional[int] = None):
        self.model_client = model_client
        self.max_tokens = max_tokens

    def _base_messages(self, request: GenerationRequest) -> Tuple[Message, ...]:
        """System instructions followed by the product inputs."""
        return (
            Message(role="system", content=SYSTEM_PROMPT),
            Message(role="user", content=build_user_message(request)),
        )

    async def generate(self, request: GenerationRequest) -> str:
        """Main entry point: returns the finished Markdown description.

        Client errors propagate untouched; nothing generated before the
        failure is returned.
        """
        self.model_client.ensure_configured()

        base = self._base_messages(request)
        params = ModelParams(temperature=TEMPERATURE, max_tokens=self.max_tokens)

        description = await self.model_client.complete(list(base), params)
        calls = 1

        for attempt in range(1, CONTINUATION_BUDGET + 1):
            if not looks_truncated(description):
                break
            logger.info(
                "Description looks truncated (%d chars), requesting continuation %d/%d",
                len(description), attempt, CONTINUATION_BUDGET,
            )
            messages = [
                *base,
                Message(role="assistant", content=description),
                Message(role="user", content=CONTINUE_INSTRUCTION),
            ]
            continuation = await self.model_client.complete(messages, params)
            calls += 1
            description = f"{description}\n{continuation}".strip()

        logger.debug("Generated %d chars in %d call(s)", len(description), calls)
        return description
