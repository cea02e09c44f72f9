"""
Pytest Configuration and Fixtures
==================================
Loads test settings from environment and provides reusable fixtures.
"""

import os
import sys
import pytest
from pathlib import Path
from dotenv import load_dotenv

# Add lib to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "lib"))

from webhook_report.reporters.base import BaseExceptionReporter  # noqa: E402

# Load test environment variables
env_file = project_root / ".env.test"
if env_file.exists():
    load_dotenv(env_file)
else:
    # Try loading from CI environment
    load_dotenv()


# =============================================================================
# TEST DOUBLES
# =============================================================================

class RecordingReporter(BaseExceptionReporter):
    """
    Reporter that records every send() call.

    result may be True, False, or an exception instance to raise.
    """

    def __init__(self, result=True):
        self.result = result
        self.calls = []

    def send(self, exception, options):
        self.calls.append((exception, options))
        if isinstance(self.result, BaseException):
            raise self.result
        return self.result

    def get_reporter_type(self):
        return "recording"

    def get_reporter_name(self):
        return "Recording"


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, text="ok"):
        self.status_code = status_code
        self.text = text

    @property
    def ok(self):
        return self.status_code < 400


class FakeSession:
    """Records POSTs and answers with a fixed response or raises an error."""

    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse()
        self.error = error
        self.requests = []

    def post(self, url, **kwargs):
        self.requests.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


# =============================================================================
# OPTION FIXTURES
# =============================================================================

@pytest.fixture
def slack_url():
    """Syntactically valid (fake) Slack webhook URL."""
    return "https://hooks.slack.com/services/T0000000/B0000000/abcdefghijklmnop"


@pytest.fixture
def slack_options(slack_url):
    """Default Slack delivery options."""
    from webhook_report import WebHookOptions

    return WebHookOptions(slack_url, channel_name="#errors", username="test-app")


@pytest.fixture
def alternate_options():
    """Options a reporting hook may swap in."""
    from webhook_report import WebHookOptions

    return WebHookOptions("https://example.com/hooks/alternate", channel_name="#other")


# =============================================================================
# REPORTER FIXTURES
# =============================================================================

@pytest.fixture
def reporter():
    """Reporter whose sends succeed."""
    return RecordingReporter(result=True)


@pytest.fixture
def failing_reporter():
    """Reporter whose sends are declined."""
    return RecordingReporter(result=False)


@pytest.fixture
def erroring_reporter():
    """Reporter whose sends raise a transport error."""
    return RecordingReporter(result=ConnectionError("connection refused"))


@pytest.fixture
def make_reporter():
    """Factory for RecordingReporter with a chosen result."""
    return RecordingReporter


@pytest.fixture
def fake_session():
    """Session answering 200 OK."""
    return FakeSession()


@pytest.fixture
def make_session():
    """Factory for FakeSession: make_session(status_code=500) or make_session(error=exc)."""
    def _make_session(status_code=200, text="ok", error=None):
        return FakeSession(FakeResponse(status_code, text), error=error)
    return _make_session


@pytest.fixture
def raised_exception():
    """An exception carrying a real traceback."""
    try:
        raise ValueError("bad value")
    except ValueError as e:
        return e


@pytest.fixture(scope="session")
def webhook_url():
    """Real webhook URL for integration tests."""
    url = os.getenv("TEST_WEBHOOK_URL")

    if not url:
        pytest.skip("TEST_WEBHOOK_URL not configured")

    return url


# =============================================================================
# UTILITY FIXTURES
# =============================================================================

@pytest.fixture
def mock_env(monkeypatch):
    """Helper to mock environment variables."""
    def _mock_env(env_dict):
        for key, value in env_dict.items():
            monkeypatch.setenv(key, value)
    return _mock_env


@pytest.fixture
def clean_env(monkeypatch):
    """Remove any WEBHOOK_REPORT_* variables from the environment."""
    for key in list(os.environ):
        if key.startswith("WEBHOOK_REPORT_") or key.startswith("TESTPFX_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# TEST MARKERS COLLECTION
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: Tests that post to a real webhook")
    config.addinivalue_line("markers", "slack: Tests requiring a Slack webhook URL")
