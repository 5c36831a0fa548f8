"""Claude (Anthropic) reasoning engine."""

from __future__ import annotations

import os
from typing import Protocol

import anthropic
import structlog

from polymarket_analyst.constants import DEFAULT_ENGINE_MODEL

from ._pricing import AnthropicPricing
from .exceptions import ReasoningEngineError

logger = structlog.get_logger()


class _AnthropicMessages(Protocol):
    async def create(self, **kwargs: object) -> object: ...


class _AnthropicClient(Protocol):
    messages: _AnthropicMessages


class ClaudeEngine:
    """Plain text-completion engine backed by the Anthropic Messages API."""

    def __init__(
        self,
        *,
        model: str | None = None,
        api_key: str | None = None,
        client: _AnthropicClient | None = None,
    ) -> None:
        self.model = model or os.getenv("POLYMARKET_ENGINE_MODEL") or DEFAULT_ENGINE_MODEL
        self._pricing = AnthropicPricing.for_model(self.model)
        self._last_cost_usd = 0.0

        if client is not None:
            self._client: _AnthropicClient = client
            return

        resolved_key = api_key or os.getenv("ANTHROPIC_API_KEY")
        if not resolved_key:
            raise ValueError(
                "ANTHROPIC_API_KEY is required for the 'anthropic' engine backend. "
                "Set ANTHROPIC_API_KEY or use POLYMARKET_ENGINE_BACKEND=mock."
            )
        self._client = anthropic.AsyncAnthropic(api_key=resolved_key)

    async def complete(self, prompt: str, *, max_tokens: int) -> str:
        """Send a single user message and return the concatenated text blocks."""
        if max_tokens <= 0:
            raise ValueError("max_tokens must be positive")

        logger.debug("Calling reasoning engine", model=self.model, max_tokens=max_tokens)
        try:
            response = await self._client.messages.create(
                model=self.model,
                max_tokens=max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIStatusError as e:
            raise ReasoningEngineError(str(e), status_code=e.status_code) from e
        except anthropic.APIError as e:
            raise ReasoningEngineError(str(e)) from e

        self._track_usage(response)
        return self._extract_text(response)

    def get_last_call_cost_usd(self) -> float:
        """Return the estimated USD cost of the most recent call."""
        return self._last_cost_usd

    @staticmethod
    def _extract_text(response: object) -> str:
        content = getattr(response, "content", None)
        if not isinstance(content, list):
            raise ReasoningEngineError("Anthropic response content is not a list")

        texts: list[str] = []
        for block in content:
            if getattr(block, "type", None) != "text":
                continue
            text = getattr(block, "text", None)
            if isinstance(text, str):
                texts.append(text)

        if not texts:
            raise ReasoningEngineError("Anthropic response did not include any text")
        return "".join(texts)

    def _track_usage(self, response: object) -> None:
        usage = getattr(response, "usage", None)
        input_tokens = getattr(usage, "input_tokens", None)
        output_tokens = getattr(usage, "output_tokens", None)

        if not isinstance(input_tokens, int) or not isinstance(output_tokens, int):
            self._last_cost_usd = 0.0
            return

        self._last_cost_usd = self._pricing.cost_usd(
            input_tokens=input_tokens, output_tokens=output_tokens
        )
