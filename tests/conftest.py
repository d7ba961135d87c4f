from __future__ import annotations

import logging

import numpy as np
import pytest

from relgraph.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch):
    """
    Every test starts from default settings.

    Tests that tweak settings set RELGRAPH_* env vars via monkeypatch and
    call get_settings.cache_clear(); the cache is cleared again afterwards
    so nothing leaks into the next test.
    """
    for name in ("RELGRAPH_ALGEBRA__CHECK_CONSISTENCY", "RELGRAPH_ALGEBRA__PRODUCT_LOG_THRESHOLD"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(20191)


@pytest.fixture
def package_logger():
    logger = logging.getLogger("relgraph")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for h in list(logger.handlers):
        if h not in handlers:
            logger.removeHandler(h)
    logger.setLevel(level)
