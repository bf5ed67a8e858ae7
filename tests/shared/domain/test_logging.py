import logging

import structlog
from shared.logging import add_context, clear_context, configure_logging, get_log_level, setup_stdlib_logging


class TestLogLevel:
    def test_test_environment_is_quiet(self, monkeypatch):
        monkeypatch.setenv("APP_ENV", "test")
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert get_log_level() == "WARNING"

    def test_development_is_verbose(self, monkeypatch):
        monkeypatch.setenv("APP_ENV", "development")
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert get_log_level() == "DEBUG"

    def test_explicit_override(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert get_log_level() == "ERROR"


class TestStdlibHandlers:
    def test_no_file_handlers_without_log_dir(self, monkeypatch):
        monkeypatch.delenv("LOG_DIR", raising=False)
        setup_stdlib_logging()
        assert not any(isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers)

    def test_file_handlers_with_log_dir(self, monkeypatch, tmp_path):
        monkeypatch.setenv("LOG_DIR", str(tmp_path))
        setup_stdlib_logging()
        try:
            assert (tmp_path / "buynothing.log").exists()
            assert (tmp_path / "buynothing_error.log").exists()
        finally:
            monkeypatch.delenv("LOG_DIR")
            setup_stdlib_logging()


class TestContext:
    def test_bound_context_is_merged(self, monkeypatch):
        monkeypatch.setenv("APP_ENV", "test")
        configure_logging()
        add_context(request_id="req-1")
        try:
            assert structlog.contextvars.get_contextvars() == {"request_id": "req-1"}
        finally:
            clear_context()
        assert structlog.contextvars.get_contextvars() == {}
