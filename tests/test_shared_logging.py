"""Tests for the logging setup."""

import logging

import pytest

from netstats.shared.logging import NOISY_LOGGERS, configure_logging, resolve_level


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestLogging:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [("debug", logging.DEBUG), (" Warning ", logging.WARNING), ("ERROR", logging.ERROR)],
    )
    def test_resolve_level(self, name: str, expected: int) -> None:
        assert resolve_level(name) == expected

    def test_unknown_level_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="verbose"):
            resolve_level("verbose")

    def test_configure_quiets_server_and_driver(self, restore_root_logger) -> None:
        configure_logging("debug")

        assert restore_root_logger.level == logging.DEBUG
        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING
