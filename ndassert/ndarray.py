"""张量数据模型适配

断言引擎只通过本模块读取数据:
- to_numpy: numpy / torch / 带 __array__ 的对象 / 嵌套序列 -> np.ndarray
- flatten_values: 按 C 顺序展平为 float64
- array_equal: 结构相等 (shape、dtype、逐字节一致)
- count_nonzero: 非零元素个数

NDList 和 Parameter 为可选的容器类型，引擎同样接受任意序列和
任意实现了 equals / __eq__ 的参数对象。
"""
from dataclasses import dataclass
from typing import Any, Tuple

import numpy as np


def to_numpy(data: Any) -> np.ndarray:
    """
    转换为 numpy 数组 (不复制 numpy 输入)

    Args:
        data: np.ndarray、torch.Tensor、带 numpy()/__array__ 的对象或嵌套序列

    Returns:
        np.ndarray
    """
    if isinstance(data, np.ndarray):
        return data
    if hasattr(data, "detach"):
        # torch.Tensor: 脱离计算图并拷到 CPU 后才能 numpy()
        return data.detach().cpu().numpy()
    if callable(getattr(data, "numpy", None)):
        return np.asarray(data.numpy())
    return np.asarray(data)


def flatten_values(data: Any) -> np.ndarray:
    """按 C 顺序展平为 float64"""
    return to_numpy(data).astype(np.float64).flatten()


def array_equal(a: Any, b: Any) -> bool:
    """
    结构相等: shape、dtype 相同且逐字节一致

    与 np.array_equal 不同: NaN 与自身相等 (比特相同时)，
    0.0 与 -0.0 不相等，int32 与 float32 视为不同。
    """
    a_np = to_numpy(a)
    b_np = to_numpy(b)
    if a_np.shape != b_np.shape or a_np.dtype != b_np.dtype:
        return False
    return a_np.tobytes() == b_np.tobytes()


def count_nonzero(data: Any) -> int:
    """非零元素个数"""
    return int(np.count_nonzero(to_numpy(data)))


class NDList(list):
    """有序张量列表"""

    def __repr__(self) -> str:
        lines = [f"NDList(size={len(self)})"]
        for i, item in enumerate(self):
            arr = to_numpy(item)
            lines.append(f"  [{i}] shape={arr.shape} dtype={arr.dtype}")
        return "\n".join(lines)


@dataclass(eq=False)
class Parameter:
    """可学习参数

    Attributes:
        name: 参数名 (如 "fc1.weight")
        data: 参数值
        requires_grad: 是否需要梯度
    """
    name: str
    data: np.ndarray
    requires_grad: bool = True

    @property
    def shape(self) -> Tuple[int, ...]:
        return to_numpy(self.data).shape

    def numpy(self) -> np.ndarray:
        """返回底层 numpy 数组"""
        return to_numpy(self.data)

    def equals(self, other: Any) -> bool:
        """名称相同且数据结构相等"""
        if not isinstance(other, Parameter):
            return False
        return self.name == other.name and array_equal(self.data, other.data)

    def __eq__(self, other: Any) -> bool:
        return self.equals(other)

    __hash__ = None
