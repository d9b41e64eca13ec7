"""ndassert - 张量断言库

断言:
    from ndassert import assert_array_equals, assert_almost_equals, FailedAssertion

    assert_array_equals(expected, actual)
    assert_almost_equals(expected, actual, rtol=1e-5, atol=1e-3)

数据模型:
    from ndassert import NDList, Parameter

配置:
    from ndassert import set_config, load_config

    set_config(atol=1e-4)
    load_config("ndassert.yaml")
"""
__version__ = "0.1.0"

from ndassert.assertion import (
    FailedAssertion,
    FailureReason,
    assert_almost_equals,
    assert_array_equals,
    assert_equals,
    assert_false,
    assert_in_place,
    assert_list_almost_equals,
    assert_list_equals,
    assert_non_zero_number,
    assert_parameter_equals,
    assert_throws,
    assert_true,
)
from ndassert.core import (
    AssertConfig,
    AssertConfigError,
    get_config,
    load_config,
    reset_config,
    set_config,
)
from ndassert.ndarray import NDList, Parameter, array_equal, count_nonzero, to_numpy

__all__ = [
    "__version__",
    # 断言
    "FailedAssertion",
    "FailureReason",
    "assert_true",
    "assert_false",
    "assert_equals",
    "assert_array_equals",
    "assert_list_equals",
    "assert_parameter_equals",
    "assert_almost_equals",
    "assert_list_almost_equals",
    "assert_non_zero_number",
    "assert_in_place",
    "assert_throws",
    # 数据模型
    "NDList",
    "Parameter",
    "array_equal",
    "count_nonzero",
    "to_numpy",
    # 配置
    "AssertConfig",
    "AssertConfigError",
    "get_config",
    "set_config",
    "reset_config",
    "load_config",
]
