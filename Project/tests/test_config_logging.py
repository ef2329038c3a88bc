import logging
import pytest
import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from pydantic import ValidationError
from fpcore.boundary import attempt, attempt_either
from fpcore.config import DEFAULT_SEED_PATH, Settings
from fpcore.logger import get_logger, setup_logger
from fpcore.pipeline import process_form
from fpcore.transforms import load_seed


def messages(caplog, level, name):
    return [r.getMessage() for r in caplog.records if r.levelno == level and r.name == name]


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("FPCORE_SEED_PATH", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    s = Settings()
    assert s.seed_path == DEFAULT_SEED_PATH
    assert s.log_level == "INFO"


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("FPCORE_SEED_PATH", "/tmp/other.json")
    monkeypatch.setenv("LOG_LEVEL", " debug ")
    s = Settings()
    assert str(s.seed_path) == "/tmp/other.json"
    assert s.log_level == "DEBUG"


def test_unknown_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError) as exc:
        Settings()
    assert "log_level" in str(exc.value)


def test_setup_logger_level_and_single_handler():
    log = setup_logger("fpcore_tests.single", level="warning")
    assert log.level == logging.WARNING
    assert not log.propagate
    assert setup_logger("fpcore_tests.single", level="debug") is log
    assert len(log.handlers) == 1
    assert log.level == logging.WARNING


def test_setup_logger_rejects_unknown_level():
    with pytest.raises(ValueError):
        setup_logger("fpcore_tests.unknown", level="verbose")


def test_setup_logger_defaults_to_settings_level():
    log = setup_logger("fpcore_tests.default")
    assert log.level == logging.getLevelName(Settings().log_level)


def test_get_logger_is_package_child():
    assert get_logger("fpcore.boundary").name == "fpcore.boundary"


def test_attempt_logs_swallowed_exception_at_debug(fpcore_log):
    attempt(lambda: 1 / 0)
    attempt_either(lambda: int("x"))
    logged = messages(fpcore_log, logging.DEBUG, "fpcore.boundary")
    assert any("ZeroDivisionError" in m for m in logged)
    assert any("ValueError" in m for m in logged)


def test_process_form_logs_outcome_at_info(fpcore_log):
    process_form({"name": "Ada", "age": "36"})
    process_form({"name": "", "age": "36"})
    logged = messages(fpcore_log, logging.INFO, "fpcore.pipeline")
    assert logged == ["form accepted: Ada", "form rejected: Name is empty."]


def test_load_seed_logs_counts_at_info(fpcore_log):
    load_seed(DEFAULT_SEED_PATH)
    logged = messages(fpcore_log, logging.INFO, "fpcore.transforms")
    assert len(logged) == 1
    assert "5 employees, 6 forms, 4 quotes" in logged[0]
