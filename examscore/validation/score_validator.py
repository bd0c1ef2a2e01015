"""单科目分数校验器：带缓存与运行计数。

职责：
1. validate_score()  ：校验一对原始分，结果按分数对缓存（见 cache.py）
2. calculate_total() ：两项都合法时返回合计，否则返回 0
3. get_metrics() / reset_metrics() ：命中/未命中/错误计数与耗时

字段合法 ⇔ 是有限实数且 ≥ 0（bool 不算数值）。上限不在本层检查，
由外环聚合器对照全体总分判定。

每个非法字段在一次实际校验中通过注入的 ErrorLogger 记录一次；
命中缓存时不重新校验，因此也不会重复记录。

实例之间完全独立：缓存与计数器都归实例私有，没有全局单例。
"""

from __future__ import annotations

__all__ = ["ScoreValidator", "COMMON_TEST_INVALID", "SECOND_TEST_INVALID"]

import dataclasses
import math
import numbers
import time
from collections.abc import Callable
from typing import Any

from examscore.contracts.error import now_ms
from examscore.contracts.scores import BaseSubjectScore, ValidationMetrics, ValidationResult
from examscore.validation.cache import DEFAULT_MAX_SIZE, DEFAULT_TTL_MS, ValidationCache
from examscore.validation.error_logger import ErrorLogger, LoggingErrorLogger

COMMON_TEST_INVALID = "共通テストのスコアが無効です"
SECOND_TEST_INVALID = "個別試験のスコアが無効です"

_NOT_A_NUMBER = "スコアは数値である必要があります"
_NEGATIVE = "スコアは0以上である必要があります"


class ScoreValidator:
    """校验 BaseSubjectScore 并计算合计。

    Parameters
    ----------
    max_size : int
        缓存条目上限，默认 1000。
    ttl : float
        缓存有效期（毫秒），默认 5 分钟。
    error_logger : ErrorLogger | None
        非法字段的记录器，默认写标准 logging。
    clock : Callable[[], float] | None
        返回当前毫秒时刻的函数，测试中可替换。
    """

    def __init__(
        self,
        max_size: int = DEFAULT_MAX_SIZE,
        ttl: float = DEFAULT_TTL_MS,
        *,
        error_logger: ErrorLogger | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._clock = clock or now_ms
        self._cache = ValidationCache(max_size, ttl, clock=self._clock)
        self._error_logger: ErrorLogger = error_logger or LoggingErrorLogger()
        self._metrics = ValidationMetrics()

    @property
    def max_size(self) -> int:
        return self._cache.max_size

    @property
    def ttl(self) -> float:
        return self._cache.ttl

    def validate_score(self, score: BaseSubjectScore) -> ValidationResult:
        """校验一对原始分；命中缓存时原样返回缓存结果（timestamp 不刷新）。"""
        start = time.perf_counter()
        self._metrics.total_validations += 1
        try:
            key = ValidationCache.make_key(score)
            cached = self._cache.get(key)
            if cached is not None:
                self._metrics.cache_hits += 1
                return cached

            self._metrics.cache_misses += 1
            errors: list[str] = []
            if not self._is_valid_score(score.common_test):
                errors.append(COMMON_TEST_INVALID)
            if not self._is_valid_score(score.second_test):
                errors.append(SECOND_TEST_INVALID)
            if errors:
                self._metrics.errors += 1

            result = ValidationResult(
                is_valid=not errors,
                errors=tuple(errors),
                timestamp=self._clock(),
            )
            self._cache.set(key, result)
            return result
        finally:
            self._metrics.total_validation_time += (time.perf_counter() - start) * 1000

    def calculate_total(self, score: BaseSubjectScore) -> float:
        """两项均合法时返回 common + second，否则静默返回 0。

        按 共通 → 二次 顺序检查，遇到第一个非法字段即返回，只记录这一项。
        """
        if not self._is_valid_score(score.common_test) or not self._is_valid_score(score.second_test):
            return 0
        return score.common_test + score.second_test

    def clear_cache(self) -> None:
        """清空缓存，不影响计数器。"""
        self._cache.clear()

    def get_metrics(self) -> ValidationMetrics:
        """返回计数器快照，average_validation_time 按当前累计值重算。"""
        total = self._metrics.total_validations
        average = self._metrics.total_validation_time / total if total else 0.0
        return dataclasses.replace(self._metrics, average_validation_time=average)

    def reset_metrics(self) -> None:
        self._metrics = ValidationMetrics()

    def _is_valid_score(self, score: Any) -> bool:
        if isinstance(score, bool) or not isinstance(score, numbers.Real) or not math.isfinite(score):
            self._error_logger.error(_NOT_A_NUMBER, {"score": score})
            return False
        if score < 0:
            self._error_logger.error(_NEGATIVE, {"score": score})
            return False
        return True
