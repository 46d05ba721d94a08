"""Shared fixtures for answer_checker tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers the CLI attaches so each test starts clean."""
    yield
    logger = logging.getLogger("answer_checker")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("ANSWER_CHECKER_LOG_LEVEL",
                 "ANSWER_CHECKER_SEMANTIC_THRESHOLD",
                 "ANSWER_CHECKER_SEMANTIC_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
