import logging

import pytest
from pydantic import ValidationError
from transreduce.app.main import main
from transreduce.logger.logger import setup_logger


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in [
        "TRANSREDUCE_SEPARATOR",
        "TRANSREDUCE_WORDS",
        "TRANSREDUCE_PERIOD_MS",
        "TRANSREDUCE_TOTAL_DURATION_S",
        "LOG_LEVEL",
    ]:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


def test_main_prints_default_summary(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == "C++-is-insane | total chars: 11\n"


def test_main_with_words_and_separator(capsys):
    assert main(["--separator", "_", "ab", "c"]) == 0
    assert capsys.readouterr().out == "ab_c | total chars: 3\n"


def test_main_uses_environment(clean_env, capsys):
    clean_env.setenv("TRANSREDUCE_WORDS", "x,yy")
    clean_env.setenv("TRANSREDUCE_SEPARATOR", "/")
    assert main([]) == 0
    assert capsys.readouterr().out == "x/yy | total chars: 3\n"


def test_main_empty_words_fails(clean_env, capsys):
    clean_env.setenv("TRANSREDUCE_WORDS", " , ")
    assert main([]) == 1
    assert capsys.readouterr().out == ""


def test_setup_logger_configures_once():
    log = setup_logger("transreduce.test", level="WARNING")
    again = setup_logger("transreduce.test", level="DEBUG")
    assert log is again
    assert len(log.handlers) == 1
    assert log.level == logging.WARNING
    assert log.propagate is False


def test_main_rejects_unknown_log_level(clean_env, capsys):
    clean_env.setenv("LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        main([])
    assert capsys.readouterr().out == ""


def test_setup_logger_unknown_env_level_falls_back(clean_env):
    clean_env.setenv("LOG_LEVEL", "verbose")
    log = setup_logger("transreduce.test_env_fallback")
    assert log.level == logging.INFO


def test_setup_logger_rejects_unknown_explicit_level():
    with pytest.raises(ValueError):
        setup_logger("transreduce.test_bad_level", level="verbose")
