"""断言失败类型定义

所有断言只抛出一种异常 FailedAssertion，reason 记录失败类别，
调用方可据此分支而无需解析信息文本。
"""
from enum import Enum


class FailureReason(str, Enum):
    """失败类别"""

    STATEMENT = "statement"                  # assert_true / assert_false
    VALUE_MISMATCH = "value_mismatch"        # 标量不相等
    ARRAY_MISMATCH = "array_mismatch"        # 张量结构不相等
    SIZE_MISMATCH = "size_mismatch"          # 列表长度或元素个数不同
    PARAMETER_MISMATCH = "parameter_mismatch"
    TOLERANCE_EXCEEDED = "tolerance_exceeded"
    NONZERO_MISMATCH = "nonzero_mismatch"
    NOT_IN_PLACE = "not_in_place"            # 不是同一对象
    NO_EXCEPTION = "no_exception"            # assert_throws: 未抛异常
    WRONG_EXCEPTION = "wrong_exception"      # assert_throws: 异常类型不符


class FailedAssertion(AssertionError):
    """断言失败

    Attributes:
        message: 失败信息
        reason: 失败类别
    """

    def __init__(self, message: str, reason: FailureReason = FailureReason.STATEMENT):
        super().__init__(message)
        self.message = message
        self.reason = reason

    def __str__(self) -> str:
        return self.message
