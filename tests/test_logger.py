import logging

from dirac import log


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv("DIRAC_LOGLVL", "DEBUG")
    log.set_default_level("WARNING")
    try:
        assert log.logger.level == logging.DEBUG
    finally:
        monkeypatch.delenv("DIRAC_LOGLVL")
        log.set_default_level("WARNING")
    assert log.logger.level == logging.WARNING


def test_invalid_level_falls_back(monkeypatch):
    monkeypatch.setenv("DIRAC_LOGLVL", "CHATTY")
    log.set_default_level("ERROR")
    try:
        assert log.logger.level == logging.ERROR
    finally:
        monkeypatch.delenv("DIRAC_LOGLVL")
        log.set_default_level("WARNING")


def test_no_output_handler_installed():
    assert not any(type(handler) is logging.StreamHandler for handler in log.logger.handlers)
    assert any(isinstance(handler, logging.NullHandler) for handler in log.logger.handlers)
