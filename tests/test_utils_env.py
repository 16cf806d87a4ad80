"""Tests for the environment variable utility."""

from io import StringIO

from trawl.utils.env import get_env
from trawl.utils.logger import Logger


def test_get_env_basic(monkeypatch):
    """Test getting set variables and missing variables with defaults."""
    monkeypatch.setenv("TRAWL_TEST_VAR", "test_value")
    monkeypatch.delenv("TRAWL_MISSING_VAR", raising=False)

    assert get_env("TRAWL_TEST_VAR") == "test_value"
    assert get_env("TRAWL_MISSING_VAR", default="default") == "default"
    assert get_env("TRAWL_MISSING_VAR") is None


def test_get_env_empty_value(monkeypatch):
    """Test an empty variable is returned as-is, not replaced by the default."""
    monkeypatch.setenv("TRAWL_EMPTY", "")

    assert get_env("TRAWL_EMPTY", default="auto") == ""


def test_get_env_logs_access(monkeypatch):
    """Test log=True records the lookup at debug level."""
    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)
    monkeypatch.setenv("TRAWL_PLATFORM", "windows")

    assert get_env("TRAWL_PLATFORM", log=True) == "windows"
    assert "ENV GET TRAWL_PLATFORM=windows" in output.getvalue()
