"""Pytest configuration and shared fixtures."""

from collections.abc import Generator

import pytest

from srtsub.utils.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache(
    monkeypatch: pytest.MonkeyPatch, tmp_path
) -> Generator[None, None, None]:
    """Isolate tests from a developer's .env file and cached settings."""
    monkeypatch.chdir(tmp_path)
    for name in ("SRTSUB_STRICT_TIME_RANGES", "SRTSUB_INTERCHANGE_INDENT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_srt_content() -> str:
    """Return sample SRT content for testing."""
    return """1
00:00:01,000 --> 00:00:04,000
Hello, this is a test.

2
00:00:05,000 --> 00:00:08,000
This is the second subtitle.

3
00:00:09,000 --> 00:00:12,000
- And this is the third one.
- Is it?

"""
