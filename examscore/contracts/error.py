"""ChartError 工厂与信封构建辅助。

统一的 ChartError 工厂，界面层各处共用这一组函数：
- create_chart_error()         ：按 code 补默认 message / severity，生成 ChartError
- create_chart_metadata()      ：由起始时刻与 data/errors 计数生成元数据
- create_chart_error_result()  ：整批失败时的空数据信封
- chart_error_from_exception() ：ScoreEngineError → CALCULATION_ERROR 包装
"""

from __future__ import annotations

__all__ = [
    "create_chart_error",
    "create_chart_metadata",
    "create_chart_error_result",
    "chart_error_from_exception",
    "now_ms",
]

import time
from collections.abc import Sequence
from typing import Any

from examscore.contracts.chart import (
    CHART_ERROR_MESSAGES,
    CHART_ERROR_SEVERITY,
    ChartError,
    ChartErrorCode,
    ChartErrorSeverity,
    ChartMetadata,
    ChartResult,
)
from examscore.contracts.exceptions import ScoreEngineError


def now_ms() -> float:
    """当前时刻（毫秒，epoch）。"""
    return time.time() * 1000


def create_chart_error(
    code: ChartErrorCode,
    field: str,
    message: str | None = None,
    *,
    severity: ChartErrorSeverity | None = None,
    details: dict[str, Any] | None = None,
    category: str = "validation",
    timestamp: float | None = None,
) -> ChartError:
    """生成 ChartError，message / severity 缺省时取 code 对应的默认值。"""
    return ChartError(
        code=code,
        message=message if message is not None else CHART_ERROR_MESSAGES[code],
        field=field,
        severity=severity if severity is not None else CHART_ERROR_SEVERITY[code],
        details=details,
        context={
            "source": "system",
            "category": category,
            "timestamp": timestamp if timestamp is not None else now_ms(),
            "fieldName": field,
        },
    )


def create_chart_metadata(
    start_time: float,
    total_items: int,
    data: Sequence[Any],
    errors: Sequence[ChartError],
) -> ChartMetadata:
    return ChartMetadata(
        processed_at=start_time,
        total_items=total_items,
        success_count=len(data),
        error_count=len(errors),
    )


def create_chart_error_result(errors: list[ChartError]) -> ChartResult[Any]:
    """整批失败信封：data 为空，有错误时 status="error"。"""
    return ChartResult(
        data=[],
        errors=list(errors),
        has_errors=bool(errors),
        status="error" if errors else "success",
    )


def chart_error_from_exception(
    exc: ScoreEngineError,
    field: str,
    *,
    extra_details: dict[str, Any] | None = None,
) -> ChartError:
    """将引擎异常包装为一条 CALCULATION_ERROR。

    message 形如 ``計算中にエラーが発生しました: <原始消息>``，
    原始消息与原始 code 同时保留在 details 中。
    """
    base = CHART_ERROR_MESSAGES["CALCULATION_ERROR"]
    return create_chart_error(
        "CALCULATION_ERROR",
        field,
        f"{base}: {exc.message}",
        severity="error",
        details={
            "original_message": exc.message,
            "original_code": exc.error_code,
            "error_stage": exc.error_stage,
            **(extra_details or {}),
        },
        category="calculation",
    )
