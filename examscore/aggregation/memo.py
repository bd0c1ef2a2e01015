"""最近一次调用的记忆化。

与 functools.lru_cache 不同，这里的输入（分数映射、回调函数）通常不可哈希，
因此按依赖项逐个比对：对象比 identity，数值/字符串比值。
依赖项全部不变时返回上一次的结果对象本身（同一引用），
供界面层据此跳过重绘。
"""

from __future__ import annotations

__all__ = ["LastCallMemo"]

import math
from collections.abc import Callable
from typing import Any, Generic, TypeVar

R = TypeVar("R")

_SENTINEL = object()


def _same(a: Any, b: Any) -> bool:
    if a is b:
        return True
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    if _is_number(a) and _is_number(b):
        if math.isnan(a) and math.isnan(b):
            return True
        return a == b
    return False


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class LastCallMemo(Generic[R]):
    """缓存最近一组依赖项对应的结果。"""

    def __init__(self) -> None:
        self._deps: tuple[Any, ...] | object = _SENTINEL
        self._value: R | None = None

    def get_or_compute(self, deps: tuple[Any, ...], compute: Callable[[], R]) -> R:
        previous = self._deps
        if (
            isinstance(previous, tuple)
            and len(previous) == len(deps)
            and all(_same(a, b) for a, b in zip(previous, deps))
        ):
            return self._value  # type: ignore[return-value]
        value = compute()
        self._deps = deps
        self._value = value
        return value

    def clear(self) -> None:
        self._deps = _SENTINEL
        self._value = None
