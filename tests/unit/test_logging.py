"""Unit tests for logging setup."""

import logging

import pytest

from seqmcts.utils.logging import level_for_verbosity, setup_logging


@pytest.fixture
def restore_logging():
    """Put root and seqmcts logger state back after the test."""
    root = logging.getLogger()
    package = logging.getLogger("seqmcts")
    handlers, level, package_level = root.handlers[:], root.level, package.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    package.setLevel(package_level)


@pytest.mark.parametrize("verbosity, level", [
    (-1, logging.WARNING),
    (0, logging.WARNING),
    (1, logging.INFO),
    (2, logging.DEBUG),
    (5, logging.DEBUG),
])
def test_level_for_verbosity(verbosity, level):
    assert level_for_verbosity(verbosity) == level


def test_verbosity_sets_package_level(tmp_path, restore_logging):
    log_file = tmp_path / "search.log"
    setup_logging(level=logging.WARNING, log_file=str(log_file), verbosity=2)

    assert logging.getLogger("seqmcts").level == logging.DEBUG
    logging.getLogger("seqmcts.mcts.search").debug("expanded node")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "seqmcts.mcts.search - DEBUG - expanded node" in log_file.read_text()


def test_without_verbosity_package_level_untouched(restore_logging):
    logging.getLogger("seqmcts").setLevel(logging.NOTSET)
    setup_logging(level=logging.INFO)
    assert logging.getLogger("seqmcts").level == logging.NOTSET
