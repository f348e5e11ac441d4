"""Shared pytest fixtures."""
import logging

import pytest


@pytest.fixture(autouse=True)
def reset_logging_handlers():
    """Drop handlers added by configure_logging so each test gets fresh streams."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_javadoclinks_handler", False):
            root.removeHandler(handler)
            handler.close()
