"""Shared pytest fixtures."""

import logging

import pytest

from safari_ext_builder.helpers.logger import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handler and propagation changes made by CLI logging setup."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
