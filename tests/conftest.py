from __future__ import annotations

import pytest

from cardusage.card import Card
from cardusage.settings import get_settings
from cardusage.ui_loop import UiLoop
from tests.helpers.http_stub import StubSession

BASE_URL = "https://card.test"
SUMMARY_URL = f"{BASE_URL}/api/hello2"
USAGES_URL = f"{BASE_URL}/api/usages-list"


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep a developer's CARDUSAGE_* variables and .env out of the tests."""
    for name in ("BASE_URL", "SUMMARY_PATH", "USAGES_PATH", "LOG_LEVEL", "FETCH_WAIT_SECONDS"):
        monkeypatch.delenv(f"CARDUSAGE_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()


@pytest.fixture
def loop():
    ui = UiLoop()
    yield ui
    ui.close()


@pytest.fixture
def make_card():
    def _make(routes, base_url: str = BASE_URL) -> tuple[Card, StubSession]:
        session = StubSession(routes)
        return Card(session=session, base_url=base_url), session

    return _make
