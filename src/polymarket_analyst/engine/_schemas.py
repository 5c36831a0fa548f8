"""Protocol implemented by reasoning engine backends."""

from __future__ import annotations

from typing import Protocol


class ReasoningEngine(Protocol):
    """Black-box text completion service.

    No structured-call mode is assumed: JSON replies are requested through prompt
    text only and interpreted by the caller.
    """

    model: str

    async def complete(self, prompt: str, *, max_tokens: int) -> str:
        """Send one user prompt and return the reply text.

        Args:
            prompt: Full user prompt.
            max_tokens: Output token budget for this call.

        Returns:
            The engine's free-text reply.

        Raises:
            ReasoningEngineError: If the call fails or returns no text.
        """
        ...

    def get_last_call_cost_usd(self) -> float:
        """Return the estimated USD cost of the most recent call."""
        ...
