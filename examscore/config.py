"""引擎配置加载。

职责：
1. 从 YAML 加载 EngineConfig（lru_cache 缓存）
2. 缺省字段回退到 examscore.contracts.constants 中的默认枚举
3. 加载时校验 validator 参数与 test_types 键名
"""

from __future__ import annotations

__all__ = ["ValidatorSettings", "EngineConfig", "load_config", "DEFAULT_CONFIG_PATH"]

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from examscore.contracts.constants import (
    SUBJECT_CATEGORIES,
    SUBJECT_DISPLAY_NAMES,
    SUBJECTS,
    TEST_TYPES,
)
from examscore.contracts.exceptions import ConfigError
from examscore.validation.cache import DEFAULT_MAX_SIZE, DEFAULT_TTL_MS
from examscore.validation.error_logger import ErrorLogger
from examscore.validation.score_validator import ScoreValidator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "configs" / "score_engine.yaml"

# YAML 中 test_types 的键 → BaseSubjectScore 字段
_TEST_TYPE_FIELDS = {"common": "common_test", "secondary": "second_test"}


@dataclass(frozen=True, slots=True)
class ValidatorSettings:
    max_size: int = DEFAULT_MAX_SIZE
    ttl_ms: float = DEFAULT_TTL_MS

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ValidatorSettings:
        max_size = int(data.get("max_size", DEFAULT_MAX_SIZE))
        ttl_ms = float(data.get("ttl_ms", DEFAULT_TTL_MS))
        if max_size <= 0:
            raise ConfigError(f"validator.max_size must be positive, got {max_size}")
        if ttl_ms < 0:
            raise ConfigError(f"validator.ttl_ms must not be negative, got {ttl_ms}")
        return cls(max_size=max_size, ttl_ms=ttl_ms)


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """引擎配置完整模型。"""

    version: str = "v1"
    validator: ValidatorSettings = field(default_factory=ValidatorSettings)
    subjects: tuple[str, ...] = SUBJECTS
    categories: tuple[str, ...] = SUBJECT_CATEGORIES
    test_types: tuple[tuple[str, str], ...] = TEST_TYPES
    display_names: dict[str, str] = field(default_factory=lambda: dict(SUBJECT_DISPLAY_NAMES))

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> EngineConfig:
        """从 YAML 解析结果构建（纯函数，不修改原始 dict）。"""
        test_types = TEST_TYPES
        raw_types = raw.get("test_types")
        if raw_types:
            unknown = set(raw_types) - set(_TEST_TYPE_FIELDS)
            if unknown:
                raise ConfigError(f"unknown test_types keys: {sorted(unknown)}")
            test_types = tuple((_TEST_TYPE_FIELDS[k], str(v)) for k, v in raw_types.items())
        return cls(
            version=str(raw.get("version", "v1")),
            validator=ValidatorSettings.from_dict(raw.get("validator") or {}),
            subjects=tuple(raw.get("subjects") or SUBJECTS),
            categories=tuple(raw.get("categories") or SUBJECT_CATEGORIES),
            test_types=test_types,
            display_names={**SUBJECT_DISPLAY_NAMES, **(raw.get("display_names") or {})},
        )

    def build_validator(
        self,
        error_logger: ErrorLogger | None = None,
        clock: Callable[[], float] | None = None,
    ) -> ScoreValidator:
        """按配置新建一个独立的 ScoreValidator。"""
        return ScoreValidator(
            self.validator.max_size,
            self.validator.ttl_ms,
            error_logger=error_logger,
            clock=clock,
        )


@lru_cache(maxsize=4)
def load_config(path: str | None = None) -> EngineConfig:
    """加载并缓存 EngineConfig。

    path 为 None 且仓库内默认文件不存在时（例如非 editable 安装）回退到内置默认值；
    显式给出的 path 不存在则抛 ConfigError。可用 load_config.cache_clear() 在测试中重置。
    """
    if path is None and not DEFAULT_CONFIG_PATH.exists():
        logger.debug("default config %s not found, using built-in defaults", DEFAULT_CONFIG_PATH)
        return EngineConfig()
    resolved = Path(path) if path else DEFAULT_CONFIG_PATH
    if not resolved.exists():
        raise ConfigError(f"config file not found: {resolved}")
    with resolved.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if not isinstance(raw, dict):
        raise ConfigError(f"config root must be a mapping: {resolved}")
    config = EngineConfig.from_dict(raw)
    logger.debug("loaded engine config %s (version=%s)", resolved, config.version)
    return config
