from __future__ import annotations

import pytest


class FakeClock:
    """Monotonic clock whose time only moves when a test advances it."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.setenv("NAMEMC_CONFIG_FILE", str(tmp_path / "missing.yaml"))
    for name in (
        "NAMEMC_API_URL",
        "NAMEMC_HTTP_TIMEOUT",
        "NAMEMC_PROFILE_CACHE_TTL",
        "NAMEMC_PROFILE_CACHE_MAX_SIZE",
        "NAMEMC_PROFILE_SINGLE_FLIGHT",
        "NAMEMC_SERVER_CACHE_TTL",
        "NAMEMC_SERVER_CACHE_MAX_SIZE",
        "NAMEMC_SERVER_SINGLE_FLIGHT",
        "NAMEMC_LOG_LEVEL",
        "NAMEMC_LOG_ROOT",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
