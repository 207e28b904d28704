"""Pytest configuration and shared fixtures."""

import asyncio
import os

# Required settings must exist before the app module is imported
os.environ.setdefault("MG_DOMAIN", "mg.example.com")
os.environ.setdefault("MG_API_KEY", "test-mailgun-key")
os.environ.setdefault("RECIPIENT_EMAIL", "owner@example.com")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from unittest.mock import AsyncMock  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from haier_site.config import Settings  # noqa: E402
from haier_site.core.app_factory import create_app  # noqa: E402
from haier_site.dependencies import get_mailer  # noqa: E402
from haier_site.models.contact import MailReceipt, OutboundMessage  # noqa: E402

LAYOUT_TEMPLATE = (
    "<title>{{ title }}</title>"
    "<nav>{% if is_homes %}homes-active{% endif %}{% if is_media %}media-active{% endif %}</nav>"
    '<main id="content">{{ content }}</main>'
    "<footer>{{ year }}</footer>"
)
CONTENT_TEMPLATE = "<h1>{{ title }}</h1><p>{{ page }} &amp; more</p>"


class RecordingMailer:
    """Mail sender double that records every message it is given."""

    def __init__(self):
        self.sent: list[OutboundMessage] = []
        self.receipt = MailReceipt(id="abc123", message="Queued. Thank you.")
        self.delay = 0.0
        self.error: Exception | None = None

    async def send(self, message: OutboundMessage) -> MailReceipt:
        self.sent.append(message)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.receipt


@pytest.fixture
def make_settings():
    """Factory for Settings with test values; keyword overrides win."""

    def _make(**overrides) -> Settings:
        values = {
            "mg_domain": "mg.example.com",
            "mg_api_key": "test-mailgun-key",
            "recipient_email": "owner@example.com",
            "rate_limit_enabled": False,
            "_env_file": None,
        }
        values.update(overrides)
        return Settings(**values)

    return _make


@pytest.fixture
def mock_settings(make_settings):
    """Settings instance with test values."""
    return make_settings()


@pytest.fixture
def recording_mailer():
    """Mail sender double."""
    return RecordingMailer()


@pytest.fixture
def make_client(recording_mailer):
    """Factory for a TestClient around an app built from the given settings."""

    def _make(settings: Settings) -> TestClient:
        app = create_app(settings)
        app.dependency_overrides[get_mailer] = lambda: recording_mailer
        return TestClient(app)

    return _make


@pytest.fixture
def test_client(make_client, mock_settings):
    """FastAPI test client with the recording mailer injected."""
    return make_client(mock_settings)


@pytest.fixture
def mock_http_client():
    """Mock httpx.AsyncClient for Mailgun calls."""
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.post = AsyncMock()
    mock_client.aclose = AsyncMock()
    return mock_client


@pytest.fixture
def templates_dir(tmp_path):
    """Template directory with a minimal layout and one content template."""
    (tmp_path / "layout.html").write_text(LAYOUT_TEMPLATE, encoding="utf-8")
    (tmp_path / "content.html").write_text(CONTENT_TEMPLATE, encoding="utf-8")
    return tmp_path
