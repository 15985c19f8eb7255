"""Tests for configuration helpers and logging setup."""

import json
import logging

import pytest

from allzap.config import (
    DEFAULT_SIM_INTERVAL,
    resolve_sim_autostart,
    resolve_sim_interval,
)
from allzap.logging_config import JSONFormatter, setup_logging


class TestResolveSimInterval:
    """Tests for resolve_sim_interval()."""

    def test_explicit_value(self):
        assert resolve_sim_interval("2.5") == 2.5
        assert resolve_sim_interval(3) == 3.0

    def test_env_value(self, monkeypatch):
        monkeypatch.setenv("SIM_INTERVAL_SECONDS", "7")
        assert resolve_sim_interval() == 7.0

    def test_missing_env(self, monkeypatch):
        monkeypatch.delenv("SIM_INTERVAL_SECONDS", raising=False)
        assert resolve_sim_interval() == DEFAULT_SIM_INTERVAL

    @pytest.mark.parametrize("value", ["", "zero", "0", "-1"])
    def test_invalid_values(self, value):
        assert resolve_sim_interval(value) == DEFAULT_SIM_INTERVAL


class TestResolveSimAutostart:
    """Tests for resolve_sim_autostart()."""

    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_truthy(self, value):
        assert resolve_sim_autostart(value) is True

    @pytest.mark.parametrize("value", ["", "0", "false", "nope"])
    def test_falsy(self, value):
        assert resolve_sim_autostart(value) is False

    def test_env_value(self, monkeypatch):
        monkeypatch.setenv("SIM_AUTOSTART", "true")
        assert resolve_sim_autostart() is True


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def _record(self, **extra) -> logging.LogRecord:
        record = logging.LogRecord(
            name="allzap.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=10,
            msg="Conversation %s deleted",
            args=("conv1",),
            exc_info=None,
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_format_is_json(self):
        data = json.loads(JSONFormatter().format(self._record()))
        assert data["level"] == "INFO"
        assert data["logger"] == "allzap.test"
        assert data["message"] == "Conversation conv1 deleted"
        assert "context" not in data

    def test_context_extra(self):
        record = self._record(context={"conversation_id": "conv1"})
        data = json.loads(JSONFormatter().format(record))
        assert data["context"] == {"conversation_id": "conv1"}


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "app.log"
    root = logging.getLogger()
    saved = (root.level, list(root.handlers))
    try:
        setup_logging(log_level="debug", log_file=str(log_file))
        logging.getLogger("allzap.test").info("hello")
        for handler in logging.getLogger().handlers:
            handler.flush()

        line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
        assert json.loads(line)["message"] == "hello"
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved[1]
        root.setLevel(saved[0])
