"""pytest: wspólna konfiguracja i fixtures."""

import os

import pytest
from hypothesis import HealthCheck, settings as hyp_settings

from dialects import get_service

# ---------------------------------------------------------------------------
# Profile Hypothesis: lokalnie "dev" (szybko), w CI --hypothesis-profile=ci
# ---------------------------------------------------------------------------
hyp_settings.register_profile(
    "dev",
    max_examples=50,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
hyp_settings.register_profile(
    "ci",
    max_examples=500,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
hyp_settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Usuwa zmienne CODLAYOUT_* z otoczenia każdego testu."""
    for key in list(os.environ):
        if key.startswith("CODLAYOUT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def bo():
    return get_service("BO")


@pytest.fixture
def it():
    return get_service("IT")
