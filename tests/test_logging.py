import json
import logging

import pytest

from utils.logging import (
    CustomJsonFormatter,
    resolve_log_level,
    setup_logging,
    shutdown_logging,
)


def _record(msg: str, *args) -> logging.LogRecord:
    return logging.LogRecord(
        "site_config.config_loader", logging.INFO, __file__, 42, msg, args, None, func="load_config"
    )


def test_json_formatter_fields():
    record = _record("Configuration loaded successfully from %s", "site.yaml")
    record.config_path = "site.yaml"

    data = json.loads(CustomJsonFormatter().format(record))

    assert data["level"] == "INFO"
    assert data["module"] == "site_config.config_loader"
    assert data["funcName"] == "load_config"
    assert data["lineno"] == 42
    assert data["message"] == "Configuration loaded successfully from site.yaml"
    assert data["config_path"] == "site.yaml"


def test_json_formatter_keeps_non_ascii():
    output = CustomJsonFormatter().format(_record("Kevin Martínez"))

    assert "Martínez" in output


@pytest.mark.parametrize(
    ("name", "expected"),
    [("debug", logging.DEBUG), ("ERROR", logging.ERROR), ("bogus", logging.WARNING)],
)
def test_resolve_log_level(name, expected):
    assert resolve_log_level(name) == expected


def test_resolve_log_level_from_env(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "info")

    assert resolve_log_level() == logging.INFO


def test_resolve_log_level_default(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    assert resolve_log_level() == logging.WARNING


def test_setup_logging_writes_json_lines(tmp_path, restore_root_logging):
    log_file = tmp_path / "logs" / "site.log"

    setup_logging("INFO", log_file=str(log_file))
    logging.getLogger("site_config.test").info("hello from test")
    shutdown_logging()

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert json.loads(lines[-1])["message"] == "hello from test"
