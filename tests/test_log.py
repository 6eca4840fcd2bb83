import logging

import pytest

from birdlens_log import setup_logging, LOGGER_NAMES


@pytest.fixture(autouse=True)
def reset_loggers():
    yield
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        for h in list(logger.handlers):
            logger.removeHandler(h)
            h.close()
        logger.setLevel(logging.NOTSET)


def test_repeated_setup_does_not_duplicate_handlers():
    setup_logging(logging.INFO)
    setup_logging(logging.INFO)
    for name in LOGGER_NAMES:
        assert len(logging.getLogger(name).handlers) == 1


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv("BIRDLENS_LOG_LEVEL", "debug")
    setup_logging()
    assert logging.getLogger("birdlens_calc").level == logging.DEBUG


def test_bad_environment_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("BIRDLENS_LOG_LEVEL", "chatty")
    setup_logging()
    assert logging.getLogger("birdlens").level == logging.INFO


def test_log_file(tmp_path):
    log_file = tmp_path / "birdlens.log"
    setup_logging(logging.DEBUG, str(log_file))
    logging.getLogger("birdlens_calc").debug("frame fill check")
    for h in logging.getLogger("birdlens_calc").handlers:
        h.flush()
    assert "frame fill check" in log_file.read_text(encoding="utf-8")
