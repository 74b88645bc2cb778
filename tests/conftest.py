import pytest
from fastapi.testclient import TestClient

from kanaedge.api.schemas import MODES, TARGETS
from kanaedge.core.errors import ConversionError
from kanaedge.services.transliteration import TransliterationService

ALLOWED_ORIGIN = "https://sotsuken-odai.pages.dev"


class FakeEngine:
    """Deterministic stand-in for the kakasi adapter."""

    init_calls = 0

    async def init(self):
        FakeEngine.init_calls += 1

    async def convert(self, text, to, mode):
        if to not in TARGETS:
            raise ConversionError("Invalid Target Syntax.")
        if mode not in MODES:
            raise ConversionError("Invalid Conversion Mode.")
        return f"[{to}/{mode}]{text}"


def setup_app(monkeypatch, engine_factory=FakeEngine):
    from kanaedge.api import routes
    from kanaedge.core.config import settings
    from kanaedge.main import create_app

    monkeypatch.setattr(routes, "service", TransliterationService(engine_factory=engine_factory))
    monkeypatch.setattr(settings, "ALLOWED_ORIGIN", ALLOWED_ORIGIN)
    monkeypatch.setattr(settings, "STREAM_CHAR_DELAY_MS", 0)
    return create_app()


@pytest.fixture
def client(monkeypatch):
    return TestClient(setup_app(monkeypatch))
