"""分数校验层。

- score_validator.py : ScoreValidator（校验 + 合计 + 计数器）
- cache.py           : ValidationCache（TTL + 容量淘汰）
- error_logger.py    : ErrorLogger 协议与 LoggingErrorLogger 默认实现
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from examscore_utils.lazy_import import make_lazy_module_dir, make_lazy_module_getattr

if TYPE_CHECKING:
    from examscore.validation.cache import ValidationCache
    from examscore.validation.error_logger import ErrorLogger, LoggingErrorLogger
    from examscore.validation.score_validator import ScoreValidator

__all__ = ["ScoreValidator", "ValidationCache", "ErrorLogger", "LoggingErrorLogger"]

_SYMBOLS: dict[str, tuple[str, str]] = {
    "ScoreValidator": ("examscore.validation.score_validator", "ScoreValidator"),
    "ValidationCache": ("examscore.validation.cache", "ValidationCache"),
    "ErrorLogger": ("examscore.validation.error_logger", "ErrorLogger"),
    "LoggingErrorLogger": ("examscore.validation.error_logger", "LoggingErrorLogger"),
}
__getattr__ = make_lazy_module_getattr(_SYMBOLS, __name__)
__dir__ = make_lazy_module_dir(_SYMBOLS, globals())
