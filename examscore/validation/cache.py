"""内存校验缓存：按分数对复用 ValidationResult。

缓存策略：
- 缓存键 = ``"<commonTest>-<secondTest>"``，按字面值匹配。
- TTL 从结果创建时刻起算（ValidationResult.timestamp），读取不续期；
  过期条目在读取时删除并按未命中处理。
- 容量满时线性扫描，淘汰 timestamp 最小的一条（并列时取迭代顺序靠前者），
  即按插入时间近似 LRU，而非按访问。O(n) 淘汰在默认容量 1000 下可接受。

仅供单个 ScoreValidator 私有使用；单线程调用，不加锁。
"""

from __future__ import annotations

__all__ = ["ValidationCache", "DEFAULT_MAX_SIZE", "DEFAULT_TTL_MS"]

import logging
from collections.abc import Callable

from examscore.contracts.error import now_ms
from examscore.contracts.scores import BaseSubjectScore, ValidationResult

logger = logging.getLogger(__name__)

DEFAULT_MAX_SIZE = 1000
DEFAULT_TTL_MS = 5 * 60 * 1000


class ValidationCache:
    """带 TTL 与容量上限的内存缓存。"""

    def __init__(
        self,
        max_size: int = DEFAULT_MAX_SIZE,
        ttl: float = DEFAULT_TTL_MS,
        *,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.max_size = max_size
        self.ttl = ttl
        self._clock = clock or now_ms
        self._entries: dict[str, ValidationResult] = {}

    @staticmethod
    def make_key(score: BaseSubjectScore) -> str:
        """由两项原始分拼接缓存键。"""
        return f"{score.common_test}-{score.second_test}"

    def get(self, key: str) -> ValidationResult | None:
        """读取未过期的结果；未命中或已过期返回 None。"""
        result = self._entries.get(key)
        if result is None:
            return None
        if self._clock() - result.timestamp > self.ttl:
            del self._entries[key]
            logger.debug("validation cache entry expired: %s", key)
            return None
        return result

    def set(self, key: str, result: ValidationResult) -> None:
        """写入结果；容量已满时先淘汰最旧条目。"""
        if key not in self._entries and len(self._entries) >= self.max_size:
            oldest = self._find_oldest_key()
            if oldest is not None:
                del self._entries[oldest]
                logger.debug("validation cache evicted oldest entry: %s", oldest)
        self._entries[key] = result

    def _find_oldest_key(self) -> str | None:
        oldest_key: str | None = None
        oldest_timestamp = float("inf")
        for key, value in self._entries.items():
            if value.timestamp < oldest_timestamp:
                oldest_timestamp = value.timestamp
                oldest_key = key
        return oldest_key

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
