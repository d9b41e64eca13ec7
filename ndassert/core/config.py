"""全局配置模块

容差默认值可在进程级别调整，或从 YAML 文件加载:

    tolerance:
      rtol: 1.0e-5
      atol: 1.0e-3
"""
import math
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import yaml

from ndassert.core.constants import DEFAULT_ATOL, DEFAULT_RTOL
from ndassert.core.log import Logger

logger = Logger("ndassert.config")


class AssertConfigError(Exception):
    """配置文件缺失或格式错误"""


@dataclass
class AssertConfig:
    """断言配置"""
    rtol: float = DEFAULT_RTOL   # 相对容差 (按 |actual| 缩放)
    atol: float = DEFAULT_ATOL   # 绝对容差

    def validate(self):
        """
        验证配置，并将容差统一转换为 float

        接受 int / float / numpy 标量以及数值字符串
        (PyYAML 把无小数点的 1e-5 解析为字符串)。
        """
        for name in ("rtol", "atol"):
            value = getattr(self, name)
            if isinstance(value, bool):
                raise ValueError(f"{name} must be a number, got bool")
            try:
                number = float(value)
            except (TypeError, ValueError):
                raise ValueError(f"{name} must be a number, got {value!r}") from None
            if not math.isfinite(number) or number < 0:
                raise ValueError(f"{name} must be a finite non-negative number, got {value!r}")
            setattr(self, name, number)


# 全局配置实例 (线程安全)
_config_lock = threading.Lock()
_global_config: Optional[AssertConfig] = None


def get_config() -> AssertConfig:
    """获取全局配置"""
    global _global_config  # pylint: disable=global-statement
    with _config_lock:
        if _global_config is None:
            _global_config = AssertConfig()
        return _global_config


def set_config(rtol: float = None, atol: float = None) -> AssertConfig:
    """
    设置全局配置

    Args:
        rtol: 相对容差
        atol: 绝对容差

    Example:
        set_config(atol=1e-4)
    """
    global _global_config  # pylint: disable=global-statement
    with _config_lock:
        # 先在副本上校验，失败时保持原配置不变
        current = _global_config or AssertConfig()
        updated = AssertConfig(
            rtol=current.rtol if rtol is None else rtol,
            atol=current.atol if atol is None else atol,
        )
        updated.validate()
        _global_config = updated
        return _global_config


def reset_config():
    """重置为默认配置"""
    global _global_config  # pylint: disable=global-statement
    with _config_lock:
        _global_config = AssertConfig()


def load_config(path: Union[str, Path]) -> AssertConfig:
    """
    从 YAML 文件加载配置并设为全局配置

    Args:
        path: 配置文件路径

    Returns:
        加载后的 AssertConfig

    Raises:
        AssertConfigError: 文件不存在、解析失败或取值非法
    """
    p = Path(path)
    if not p.exists():
        raise AssertConfigError(f"Configuration file not found: {p}")

    try:
        with open(p, encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except yaml.YAMLError as exc:
        raise AssertConfigError(f"Failed to parse {p}: {exc}") from exc

    if not isinstance(data, dict):
        raise AssertConfigError(f"Expected a YAML mapping in {p}, got {type(data).__name__}")

    tolerance = data.get("tolerance") or {}
    if not isinstance(tolerance, dict):
        raise AssertConfigError(f"'tolerance' in {p} must be a mapping")

    try:
        config = set_config(rtol=tolerance.get("rtol"), atol=tolerance.get("atol"))
    except ValueError as exc:
        raise AssertConfigError(f"Invalid tolerance in {p}: {exc}") from exc

    logger.info(f"loaded config from {p}: rtol={config.rtol}, atol={config.atol}")
    return config
