"""日志模块

级别默认 INFO，可由环境变量 NDASSERT_LOG_LEVEL 覆盖 (DEBUG/INFO/WARN/ERROR)。
断言失败统一记录在 DEBUG 级别。
"""
import os
import sys
from datetime import datetime
from enum import IntEnum

from ndassert.core.constants import ENV_LOG_LEVEL


class Level(IntEnum):
    """日志级别枚举"""
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

DEBUG, INFO, WARN, ERROR = Level.DEBUG, Level.INFO, Level.WARN, Level.ERROR

_level = INFO
_module = "ndassert"


def parse_level(name: str) -> Level:
    """解析级别名称 (大小写不敏感, WARNING 等同 WARN)"""
    key = name.strip().upper()
    if key == "WARNING":
        key = "WARN"
    try:
        return Level[key]
    except KeyError:
        raise ValueError(f"Unknown log level: {name!r}") from None

def set_level(level: Level):
    """设置日志级别"""
    global _level  # pylint: disable=global-statement
    _level = level

def get_level() -> Level:
    """获取当前日志级别"""
    return _level

def _log(level: Level, module: str, msg: str):
    if level < _level:
        return
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    out = sys.stderr if level >= WARN else sys.stdout
    print(f"[{ts}] [{level.name}] [{module}] {msg}", file=out)

def init_level_from_env() -> Level:
    """
    按环境变量设置级别

    未设置时保持当前级别；取值非法时回退到 INFO 并记录一条 WARN。

    Returns:
        生效的日志级别
    """
    value = os.environ.get(ENV_LOG_LEVEL, "")
    if not value.strip():
        return _level
    try:
        set_level(parse_level(value))
    except ValueError:
        set_level(INFO)
        _log(WARN, _module, f"ignoring {ENV_LOG_LEVEL}={value!r}, using INFO")
    return _level

class Logger:
    """日志记录器"""
    def __init__(self, module: str = ""):
        self.module = module or _module

    def debug(self, msg: str):
        """记录 DEBUG 级别日志"""
        _log(DEBUG, self.module, msg)

    def info(self, msg: str):
        """记录 INFO 级别日志"""
        _log(INFO, self.module, msg)

    def warn(self, msg: str):
        """记录 WARN 级别日志"""
        _log(WARN, self.module, msg)

    def error(self, msg: str):
        """记录 ERROR 级别日志"""
        _log(ERROR, self.module, msg)

logger = Logger()

init_level_from_env()
