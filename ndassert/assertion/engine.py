"""
断言引擎

每个断言要么静默返回，要么抛出 FailedAssertion。
所有断言只读取参数，不修改、不保存调用方数据。

按操作数类型区分函数名:
    标量          assert_equals
    张量          assert_array_equals / assert_almost_equals
    张量列表      assert_list_equals / assert_list_almost_equals
    参数          assert_parameter_equals
    结构          assert_non_zero_number / assert_in_place
    异常          assert_throws

容差失败条件 (非对称，只按 actual 缩放):
    |expected - actual| > atol + rtol * |actual|
"""

from typing import Any, Callable, Optional, Sequence, Tuple, Type, Union

import numpy as np

from ndassert.core.config import get_config
from ndassert.core.constants import (
    MSG_ARRAYS_DIFFERENT,
    MSG_ASSERTION_FAILED,
    MSG_LENGTH_DIFFERENT,
    MSG_LIST_ELEMENT,
    MSG_LIST_SIZES,
    MSG_NO_EXCEPTION,
    MSG_NOT_FALSE,
    MSG_NOT_TRUE,
    MSG_PARAMETERS_DIFFERENT,
    MSG_VALUES_DIFFERENT,
    MSG_WRONG_EXCEPTION,
)
from ndassert.core.log import Logger
from ndassert.ndarray import array_equal, count_nonzero, flatten_values

from .types import FailedAssertion, FailureReason

logger = Logger("ndassert.assertion")

ExceptionClass = Union[Type[BaseException], Tuple[Type[BaseException], ...]]


def _fail(operation: str, message: str, reason: FailureReason) -> FailedAssertion:
    logger.debug(f"{operation}: {message}")
    return FailedAssertion(message, reason)


def _prefixed(error_message: Optional[str], message: str) -> str:
    if error_message:
        return f"{error_message} - {message}"
    return message


# ============================================================
# 布尔 / 标量
# ============================================================

def assert_true(statement: Any, error_message: str = MSG_NOT_TRUE):
    """statement 为假时失败"""
    if not statement:
        raise _fail("assert_true", error_message, FailureReason.STATEMENT)


def assert_false(statement: Any, error_message: str = MSG_NOT_FALSE):
    """statement 为真时失败"""
    if statement:
        raise _fail("assert_false", error_message, FailureReason.STATEMENT)


def assert_equals(expected: Any, actual: Any, error_message: str = MSG_VALUES_DIFFERENT):
    """
    标量精确比较 (无容差)

    Args:
        expected: 期望值 (bool / int / float / numpy 标量)
        actual: 实际值
        error_message: 失败信息
    """
    if expected != actual:
        raise _fail("assert_equals", error_message, FailureReason.VALUE_MISMATCH)


# ============================================================
# 张量 / 张量列表 精确比较
# ============================================================

def assert_array_equals(expected: Any, actual: Any, error_message: str = MSG_ARRAYS_DIFFERENT):
    """
    张量结构相等: shape、dtype 相同且逐元素比特一致

    失败信息附带两侧张量的字符串表示。
    """
    if not array_equal(expected, actual):
        message = f"{error_message}\nExpected: {expected}\n Actual: {actual}"
        raise _fail("assert_array_equals", message, FailureReason.ARRAY_MISMATCH)


def assert_list_equals(
    expected: Sequence[Any],
    actual: Sequence[Any],
    error_message: Optional[str] = None,
):
    """
    张量列表精确比较

    先比较长度，再按下标逐个调用 assert_array_equals，
    遇到第一个不同的元素即失败，信息中包含该下标。
    """
    if len(expected) != len(actual):
        raise _fail(
            "assert_list_equals",
            _prefixed(error_message, MSG_LIST_SIZES),
            FailureReason.SIZE_MISMATCH,
        )
    for i in range(len(expected)):
        assert_array_equals(
            expected[i],
            actual[i],
            _prefixed(error_message, MSG_LIST_ELEMENT.format(index=i)),
        )


def assert_parameter_equals(
    expected: Any, actual: Any, error_message: str = MSG_PARAMETERS_DIFFERENT
):
    """
    参数比较，委托给参数自身的相等判定

    优先调用 expected.equals(actual)，否则使用 ==。
    """
    equals = getattr(expected, "equals", None)
    same = equals(actual) if callable(equals) else expected == actual
    if not same:
        raise _fail("assert_parameter_equals", error_message, FailureReason.PARAMETER_MISMATCH)


# ============================================================
# 容差比较
# ============================================================

def _resolve_tolerance(rtol: Optional[float], atol: Optional[float]) -> Tuple[float, float]:
    if rtol is None or atol is None:
        config = get_config()
        rtol = config.rtol if rtol is None else rtol
        atol = config.atol if atol is None else atol
    return rtol, atol


def assert_almost_equals(
    expected: Any,
    actual: Any,
    rtol: Optional[float] = None,
    atol: Optional[float] = None,
    error_message: Optional[str] = None,
):
    """
    张量容差比较

    失败条件 (逐元素，按展平顺序):
        |expected_i - actual_i| > atol + rtol * |actual_i|

    相对容差只按 actual 缩放，与 numpy.isclose 的 b 参数一致，
    交换两侧可能得到不同结论。等号边界视为通过。
    含 inf 的位置要求两侧完全相等: 同号 inf 通过，异号 inf 或 inf 对有限值/NaN 失败。
    NaN 对有限值时失败条件不成立，视为通过。
    只比较元素个数，不比较 shape。只报告第一个越界的位置。

    Args:
        expected: 期望张量
        actual: 实际张量
        rtol: 相对容差，None 时取全局配置 (默认 1e-5)
        atol: 绝对容差，None 时取全局配置 (默认 1e-3)
        error_message: 可选前缀
    """
    rtol, atol = _resolve_tolerance(rtol, atol)

    g = flatten_values(expected)
    r = flatten_values(actual)
    if g.size != r.size:
        raise _fail(
            "assert_almost_equals",
            _prefixed(error_message, MSG_LENGTH_DIFFERENT),
            FailureReason.SIZE_MISMATCH,
        )

    with np.errstate(invalid="ignore", over="ignore"):
        exceed = np.abs(g - r) > atol + rtol * np.abs(r)
    # inf - inf 为 NaN，inf 位置改为精确比较
    infinite = np.isinf(g) | np.isinf(r)
    exceed = np.where(infinite, g != r, exceed)
    if exceed.any():
        i = int(np.flatnonzero(exceed)[0])
        message = f"expect = {float(g[i])}, actual ={float(r[i])}"
        raise _fail(
            "assert_almost_equals",
            _prefixed(error_message, message),
            FailureReason.TOLERANCE_EXCEEDED,
        )


def assert_list_almost_equals(
    expected: Sequence[Any],
    actual: Sequence[Any],
    rtol: Optional[float] = None,
    atol: Optional[float] = None,
    error_message: Optional[str] = None,
):
    """张量列表容差比较: 先比较长度，再逐元素 assert_almost_equals"""
    if len(expected) != len(actual):
        raise _fail(
            "assert_list_almost_equals",
            _prefixed(error_message, MSG_LIST_SIZES),
            FailureReason.SIZE_MISMATCH,
        )
    rtol, atol = _resolve_tolerance(rtol, atol)
    for i in range(len(expected)):
        assert_almost_equals(expected[i], actual[i], rtol, atol, error_message)


# ============================================================
# 结构断言
# ============================================================

def assert_non_zero_number(array: Any, number: int, error_message: str = MSG_ASSERTION_FAILED):
    """非零元素个数不等于 number 时失败"""
    if count_nonzero(array) != number:
        raise _fail("assert_non_zero_number", error_message, FailureReason.NONZERO_MISMATCH)


def assert_in_place(expected: Any, actual: Any, error_message: str = MSG_ASSERTION_FAILED):
    """
    同一对象断言 (is，而非值相等)

    用于验证原地操作返回的是输入对象本身。
    """
    if expected is not actual:
        raise _fail("assert_in_place", error_message, FailureReason.NOT_IN_PLACE)


# ============================================================
# 异常断言
# ============================================================

def assert_throws(
    function: Callable[[], Any],
    exception_class: ExceptionClass,
    error_message: str = MSG_ASSERTION_FAILED,
) -> BaseException:
    """
    调用 function，断言其抛出 exception_class 的实例

    - 未抛异常: 失败 ("did not throw an exception")
    - 抛出其他 Exception: 失败 ("wrong exception type thrown")，原异常作为 __cause__
    - 抛出匹配的异常: 通过，返回该异常

    KeyboardInterrupt、SystemExit 等非 Exception 不拦截。

    Args:
        function: 无参可调用对象
        exception_class: 期望的异常类或异常类元组
        error_message: 失败信息前缀

    Returns:
        捕获到的异常
    """
    try:
        function()
    except Exception as exc:  # pylint: disable=broad-except
        if isinstance(exc, exception_class):
            return exc
        raise _fail(
            "assert_throws",
            f"{error_message} - {MSG_WRONG_EXCEPTION}",
            FailureReason.WRONG_EXCEPTION,
        ) from exc
    raise _fail(
        "assert_throws",
        f"{error_message} - {MSG_NO_EXCEPTION}",
        FailureReason.NO_EXCEPTION,
    )
