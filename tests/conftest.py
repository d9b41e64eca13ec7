"""Pytest fixtures for ndassert unit tests."""

import numpy as np
import pytest

from ndassert.core import reset_config
from ndassert.core import log


@pytest.fixture(autouse=True)
def clean_global_state():
    """每个用例前后恢复默认配置与日志级别"""
    level = log.get_level()
    reset_config()
    yield
    reset_config()
    log.set_level(level)


@pytest.fixture
def golden():
    return np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]], dtype=np.float32)


@pytest.fixture
def sparse():
    return np.array([0, 0, 3, 0, 5], dtype=np.int32)
