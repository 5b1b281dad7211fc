# tests/test_logging_setup.py
from __future__ import annotations

import io
import logging

import pytest

from ibkr_flex import logging_setup


@pytest.fixture(name="pkg_logger")
def pkg_logger_fixture(monkeypatch):
    """Package root logger, restored after the test."""
    logger = logging.getLogger("ibkr_flex")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    monkeypatch.setattr(logging_setup, "_CONFIGURED", False)
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


@pytest.mark.parametrize(
    "level, expected",
    [(logging.DEBUG, logging.DEBUG), ("warning", logging.WARNING), (" error ", logging.ERROR), ("15", 15), ("bogus", logging.INFO)],
)
def test_parse_level(level, expected):
    assert logging_setup._parse_level(level) == expected


def test_get_logger_keeps_library_silent(pkg_logger):
    pkg_logger.handlers[:] = []
    logger = logging_setup.get_logger("ibkr_flex.io.decoders")
    assert logger.name == "ibkr_flex.io.decoders"
    assert any(isinstance(h, logging.NullHandler) for h in pkg_logger.handlers)


def test_configure_logging_once(pkg_logger):
    stream = io.StringIO()
    logging_setup.configure_logging("DEBUG", fmt="%(name)s:%(message)s", stream=stream)
    logging_setup.configure_logging("ERROR", stream=io.StringIO())

    logging_setup.get_logger("ibkr_flex.io.sections").debug("hello")
    assert stream.getvalue().strip() == "ibkr_flex.io.sections:hello"
    assert not any(isinstance(h, logging.NullHandler) for h in pkg_logger.handlers)
    assert pkg_logger.propagate is False
