from __future__ import annotations

import pytest

_ENV_VARS = (
    "POLYMARKET_ENGINE_BACKEND",
    "POLYMARKET_ENGINE_MODEL",
    "POLYMARKET_GAMMA_URL",
    "POLYMARKET_GAMMA_TIMEOUT",
)


@pytest.fixture(autouse=True)
def _isolate_cli_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
