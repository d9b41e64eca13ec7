"""全局常量定义

集中管理断言的默认容差与默认失败信息。
"""

# ============================================================
# 容差
# ============================================================

# assert_almost_equals 默认值: |expected - actual| <= atol + rtol * |actual|
DEFAULT_RTOL = 1e-5
DEFAULT_ATOL = 1e-3


# ============================================================
# 默认失败信息
# ============================================================

MSG_NOT_TRUE = "Statement is not True!"
MSG_NOT_FALSE = "Statement is not False!"
MSG_VALUES_DIFFERENT = "Two values are different!"
MSG_ARRAYS_DIFFERENT = "Two NDArrays are different!"
MSG_PARAMETERS_DIFFERENT = "Two Parameters are different!"
MSG_LIST_SIZES = "The NDLists have different sizes"
MSG_LIST_ELEMENT = "The NDLists differ on element {index}"
MSG_LENGTH_DIFFERENT = "The length of two NDArray are different!"
MSG_ASSERTION_FAILED = "Assertion failed!"
MSG_NO_EXCEPTION = "did not throw an exception"
MSG_WRONG_EXCEPTION = "wrong exception type thrown"


# ============================================================
# 环境变量
# ============================================================

ENV_LOG_LEVEL = "NDASSERT_LOG_LEVEL"
