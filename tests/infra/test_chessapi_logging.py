from __future__ import annotations

import logging

import pytest

from chessapi.infra.logging import configure_logging


def test_configure_logging_sets_root_level() -> None:
    configure_logging("debug")
    assert logging.getLogger().level == logging.DEBUG
    configure_logging(logging.WARNING)
    assert logging.getLogger().level == logging.WARNING


def test_configure_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging("chatty")
