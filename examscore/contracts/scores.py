"""分数契约模型。

核心类型：
- BaseSubjectScore ：单科目在某一招生日程下的两项原始分（共通 / 二次）。
- SubjectScores    ：科目名 → BaseSubjectScore 的映射。
- ValidationResult ：ScoreValidator 单次校验结果，按分数对缓存复用。
- ValidationMetrics：ScoreValidator 实例私有的计数器快照。

所有模型都是按调用新建的值对象；唯一长生命周期的可变状态是
ScoreValidator 内部的缓存与计数器。
"""

from __future__ import annotations

__all__ = [
    "BaseSubjectScore",
    "SubjectScores",
    "ValidationResult",
    "ValidationMetrics",
    "parse_subject_scores",
]

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from examscore.contracts.exceptions import ScoreInputError

_COMMON_KEYS = ("commonTest", "common_test")
_SECOND_KEYS = ("secondTest", "second_test")


def _pick(raw: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in raw:
            return raw[key]
    raise ScoreInputError(f"missing field {keys[0]!r} in score payload: {dict(raw)!r}")


@dataclass(frozen=True, slots=True)
class BaseSubjectScore:
    """单科目两项原始分。

    构造时不做类型校验：非数值、负数等情况交给 ScoreValidator 判定并上报，
    这样界面可以展示具体错误而不是在入口处直接崩溃。
    """

    common_test: Any
    second_test: Any

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> BaseSubjectScore:
        """从 API / 文件载荷构建，兼容 camelCase 与 snake_case 字段名。"""
        if not isinstance(raw, Mapping):
            raise ScoreInputError(f"score payload must be a mapping, got {type(raw).__name__}")
        return cls(common_test=_pick(raw, _COMMON_KEYS), second_test=_pick(raw, _SECOND_KEYS))

    def to_dict(self) -> dict[str, Any]:
        return {"commonTest": self.common_test, "secondTest": self.second_test}


SubjectScores = Mapping[str, BaseSubjectScore]


def parse_subject_scores(raw: Mapping[str, Any]) -> dict[str, BaseSubjectScore]:
    """将 ``{科目名: {commonTest, secondTest}}`` 载荷转为 SubjectScores。

    已经是 BaseSubjectScore 的值原样保留；载荷结构不合法时抛 ScoreInputError。
    """
    if not isinstance(raw, Mapping):
        raise ScoreInputError(f"subject scores must be a mapping, got {type(raw).__name__}")
    subjects: dict[str, BaseSubjectScore] = {}
    for name, value in raw.items():
        if isinstance(value, BaseSubjectScore):
            subjects[str(name)] = value
        else:
            subjects[str(name)] = BaseSubjectScore.from_dict(value)
    return subjects


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """单次校验结果。

    timestamp 为创建时刻（毫秒）；命中缓存时原样返回，不会刷新。
    """

    is_valid: bool
    errors: tuple[str, ...]
    timestamp: float


@dataclass(slots=True)
class ValidationMetrics:
    """ScoreValidator 的运行计数器，时间单位均为毫秒。"""

    total_validations: int = 0
    cache_hits: int = 0
    cache_misses: int = 0
    errors: int = 0
    average_validation_time: float = 0.0
    total_validation_time: float = 0.0
