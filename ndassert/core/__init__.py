"""核心模块"""
from ndassert.core.config import (
    AssertConfig,
    AssertConfigError,
    get_config,
    load_config,
    reset_config,
    set_config,
)
from ndassert.core.log import logger

__all__ = [
    # config
    "AssertConfig",
    "AssertConfigError",
    "get_config",
    "set_config",
    "reset_config",
    "load_config",
    # log
    "logger",
]
