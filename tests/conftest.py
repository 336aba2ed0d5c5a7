import pytest

from context_percent.config import loader


def pytest_configure(config):
    """Register custom test markers."""
    config.addinivalue_line("markers", "unit: Unit tests that do not perform real I/O")
    config.addinivalue_line("markers", "integration: Integration tests with mocked I/O")


@pytest.fixture(autouse=True)
def reset_config_cache(monkeypatch):
    """Keep the module-level config cache from leaking between tests."""
    monkeypatch.setattr(loader, "_cached_config", None)
    monkeypatch.setattr(loader, "_cached_mtime", 0.0)
    monkeypatch.setattr(loader, "_cached_path", None)


@pytest.fixture
def temp_config_dir(monkeypatch, tmp_path):
    """Point XDG_CONFIG_HOME at a temporary directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def mock_stdin(monkeypatch):
    """Factory fixture to mock stdin with custom content."""
    import io
    import sys

    def _mock_stdin(content: str):
        monkeypatch.setattr(sys, "stdin", io.StringIO(content))

    return _mock_stdin


@pytest.fixture
def sample_input_payload():
    """Sample statusline input payload with 40K tokens in context."""
    return {
        "session_id": "abc123-def456",
        "workspace": {"current_dir": "/path/to/project"},
        "model": {"id": "claude-sonnet-4-5-20250929", "display_name": "Sonnet 4.5"},
        "context_window": {
            "total_input_tokens": 15234,
            "total_output_tokens": 4521,
            "context_window_size": 200000,
            "current_usage": {
                "input_tokens": 20000,
                "output_tokens": 1200,
                "cache_creation_input_tokens": 15000,
                "cache_read_input_tokens": 5000,
            },
        },
        "version": "2.0.53",
    }
