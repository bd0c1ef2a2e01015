"""ScoreValidator 注入的错误记录器。

ErrorLogger 是一个同步、只产生副作用的协议：每个非法字段调用一次
error(message, {"score": value})。记录器自身抛出的异常不会被校验器捕获，
坏掉的记录器按编程错误处理。
"""

from __future__ import annotations

__all__ = ["ErrorLogger", "LoggingErrorLogger"]

import logging
from collections.abc import Mapping
from typing import Any, Protocol

logger = logging.getLogger("examscore.validation")


class ErrorLogger(Protocol):
    def error(self, message: str, context: Mapping[str, Any]) -> None: ...


class LoggingErrorLogger:
    """默认实现：写入 examscore.validation logger（ERROR 级别）。"""

    def __init__(self, target: logging.Logger | None = None) -> None:
        self._logger = target or logger

    def error(self, message: str, context: Mapping[str, Any]) -> None:
        self._logger.error("%s (score=%r)", message, context.get("score"))
