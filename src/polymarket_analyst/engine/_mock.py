"""Mock reasoning engine for tests and offline runs."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MOCK_REPLY = (
    "Mock analysis. No reasoning engine was called, so no fair-value estimate is "
    "available.\n\n**Verdict**: UNCERTAIN"
)


@dataclass(frozen=True)
class MockCall:
    """A prompt the mock engine received."""

    prompt: str
    max_tokens: int


class MockEngine:
    """Replays canned replies and records every prompt it was sent.

    Replies are returned in order; the last one repeats once the list is
    exhausted.
    """

    def __init__(self, replies: list[str] | None = None, *, model: str = "mock-v1") -> None:
        self.model = model
        self._replies = list(replies) if replies else [DEFAULT_MOCK_REPLY]
        self.calls: list[MockCall] = []

    async def complete(self, prompt: str, *, max_tokens: int) -> str:
        """Record the call and return the next canned reply."""
        self.calls.append(MockCall(prompt=prompt, max_tokens=max_tokens))
        index = min(len(self.calls), len(self._replies)) - 1
        return self._replies[index]

    def get_last_call_cost_usd(self) -> float:
        """Mock calls are free."""
        return 0.0
