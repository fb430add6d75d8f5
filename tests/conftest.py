"""Shared pytest fixtures.

The configuration manager is a process-wide singleton; tests that point it
at a temporary settings file must not leak that state into later tests, so
it is reset around every test.
"""

from __future__ import annotations

from datetime import date

import pytest

from config import ConfigurationManager
from src.decoder import BoletoDecoder
from src.postprocessor import DOCUMENTED_EPOCH, DueDateResolver


@pytest.fixture(autouse=True)
def _reset_config():
    ConfigurationManager.reset()
    yield
    ConfigurationManager.reset()


@pytest.fixture
def documented_resolver() -> DueDateResolver:
    return DueDateResolver([DOCUMENTED_EPOCH], reference_date=date(2020, 1, 1))


@pytest.fixture
def decoder(documented_resolver: DueDateResolver) -> BoletoDecoder:
    return BoletoDecoder(due_date_resolver=documented_resolver, strict=False)
