"""
断言模块

提供张量断言，失败时统一抛出 FailedAssertion。

基本使用:
    import numpy as np
    from ndassert.assertion import assert_almost_equals, assert_list_equals

    assert_almost_equals(np.array([1.0]), np.array([1.0009]))  # 默认 rtol=1e-5, atol=1e-3
    assert_list_equals([a, b], [a_copy, b_copy])

异常断言:
    from ndassert.assertion import assert_throws

    assert_throws(lambda: x.reshape(7), ValueError)
"""

from .types import FailedAssertion, FailureReason
from .engine import (
    assert_true,
    assert_false,
    assert_equals,
    assert_array_equals,
    assert_list_equals,
    assert_parameter_equals,
    assert_almost_equals,
    assert_list_almost_equals,
    assert_non_zero_number,
    assert_in_place,
    assert_throws,
)

__all__ = [
    # 类型
    "FailedAssertion",
    "FailureReason",
    # 布尔 / 标量
    "assert_true",
    "assert_false",
    "assert_equals",
    # 张量
    "assert_array_equals",
    "assert_list_equals",
    "assert_parameter_equals",
    "assert_almost_equals",
    "assert_list_almost_equals",
    # 结构
    "assert_non_zero_number",
    "assert_in_place",
    # 异常
    "assert_throws",
]
