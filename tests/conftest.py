"""Global pytest configuration.

Resets the package logging state around every test so handler and level
changes made by one test do not leak into the next.
"""

from __future__ import annotations

import pytest

from pathwalk.logging import reset_logging, setup_root_logger


@pytest.fixture(autouse=True)
def _clean_logging():
    reset_logging()
    setup_root_logger()
    yield
    reset_logging()
