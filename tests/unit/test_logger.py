"""Tests for the package logging helpers."""

import logging

from triplestore.engine import TripleStore
from triplestore.utils.logger import ROOT_LOGGER_NAME, get_logger, set_global_log_level


def test_get_logger_is_package_child():
    logger = get_logger("TripleStore")

    assert logger.name == f"{ROOT_LOGGER_NAME}.TripleStore"


def test_set_global_log_level_accepts_names():
    try:
        set_global_log_level("debug")
        assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.DEBUG
    finally:
        set_global_log_level(logging.WARNING)


def test_engine_logs_at_debug(caplog):
    """Verify that duplicate inserts are visible in DEBUG output."""
    store = TripleStore()

    with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER_NAME):
        store.insert("a", "knows", "b")
        store.insert("a", "knows", "b")

    assert any("Duplicate fact skipped" in r.getMessage() for r in caplog.records)
