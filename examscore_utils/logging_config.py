"""
统一日志配置模块。

==============
职责
==============
1. 为分数引擎 CLI 提供统一的日志格式与级别。
2. 支持可选的文件日志输出（例如报告目录下的 engine.log）。
3. 重复调用 setup_logging() 是幂等的（不会叠加 handler）。

==============
使用方式
==============
仅在 CLI 入口（examscore/cli/runner.py）的 main() 中调用：

    from examscore_utils.logging_config import setup_logging
    setup_logging()                              # 仅 stderr
    setup_logging(log_file="out/engine.log")     # stderr + 文件

库代码只使用标准 logging：

    import logging
    logger = logging.getLogger(__name__)

库本身从不配置 handler，嵌入方自行决定日志去向。
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

__all__ = ["setup_logging", "LOG_FORMAT", "LOG_LEVELS"]

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# 防止重复调用时叠加 handler
_INITIALIZED = False


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    name = level.upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"unknown log level: {level!r}")
    return getattr(logging, name)


def setup_logging(
    level: int | str = logging.INFO,
    *,
    log_file: str | Path | None = None,
) -> None:
    """初始化全局日志配置（幂等）。

    Parameters
    ----------
    level : int | str
        全局日志级别，默认 INFO；也接受 "DEBUG" 等级别名（CLI --log-level）。
        重复调用时只更新级别，不新增 stderr handler。
    log_file : str | Path | None
        可选的日志文件路径，传入后额外添加 UTF-8 文件 handler。
    """
    global _INITIALIZED

    level = _resolve_level(level)
    root = logging.getLogger()
    root.setLevel(level)

    if not _INITIALIZED:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(console)

        _INITIALIZED = True

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # 同一文件只挂一个 handler
        existing = [
            h for h in root.handlers
            if isinstance(h, logging.FileHandler) and Path(h.baseFilename) == log_path.resolve()
        ]
        if not existing:
            fh = logging.FileHandler(str(log_path), encoding="utf-8")
            fh.setLevel(level)
            fh.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(fh)
