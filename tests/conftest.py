"""Shared fixtures: isolate the process-wide quote mode, reader and logger."""

import logging
from collections.abc import Iterator

import pytest

from interviewer.core.line_reader import set_shared_reader
from interviewer.core.logging_config import ROOT_LOGGER_NAME
from interviewer.core.quoting import set_consumable_quotes


@pytest.fixture(autouse=True)
def _reset_process_state() -> Iterator[None]:
    set_consumable_quotes(False)
    yield
    set_consumable_quotes(False)
    set_shared_reader(None)
    # setup_logging() disables propagation, which would hide records from caplog
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
