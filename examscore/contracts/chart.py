"""图表结果契约：明细/外环聚合器的统一返回信封。

核心类型：
- PieData         ：外环一行（大类或考试区分）
- DetailedPieData ：明细环一行（科目 × 考试区分）
- ChartError      ：行级失败的统一形态，code 为判别字段
- ChartMetadata   ：处理时刻与成功/失败计数
- ChartResult[T]  ：{data, errors, has_errors, status, metadata}
- ChartData       ：明细 + 外环 + 考试区分环 的组合包

不变量（由 ChartResult.validate() 检查）：
- has_errors == bool(errors)
- status ∈ {"success", "error"}

注意 status 与 errors 不是严格对应：明细聚合存在行级错误时
status 仍为 "success"，只有整批计算失败才是 "error"。
"""

from __future__ import annotations

__all__ = [
    "ValidationErrorCode",
    "CalculationErrorCode",
    "RenderErrorCode",
    "ChartErrorCode",
    "ChartErrorSeverity",
    "ChartStatus",
    "CHART_ERROR_MESSAGES",
    "CHART_ERROR_SEVERITY",
    "PieData",
    "DetailedPieData",
    "ChartError",
    "ChartMetadata",
    "ChartResult",
    "ChartData",
]

from dataclasses import dataclass, field
from typing import Any, Generic, Literal, TypeVar

ValidationErrorCode = Literal[
    "INVALID_SCORE",
    "MISSING_SCORE",
    "NEGATIVE_SCORE",
    "TRANSFORM_ERROR",
    "INVALID_DATA_FORMAT",
    "MISSING_REQUIRED_FIELD",
]
CalculationErrorCode = Literal["CALCULATION_ERROR", "INVALID_PERCENTAGE", "TOTAL_EXCEEDED"]
RenderErrorCode = Literal["RENDER_ERROR", "INVALID_DIMENSIONS", "OVERFLOW_ERROR"]
ChartErrorCode = ValidationErrorCode | CalculationErrorCode | RenderErrorCode

ChartErrorSeverity = Literal["error", "warning", "info"]
ChartStatus = Literal["success", "error"]

CHART_ERROR_MESSAGES: dict[str, str] = {
    # validation
    "INVALID_SCORE": "無効なスコアです",
    "MISSING_SCORE": "スコアが見つかりません",
    "NEGATIVE_SCORE": "負の値のスコアは無効です",
    "TRANSFORM_ERROR": "データの変換中にエラーが発生しました",
    "INVALID_DATA_FORMAT": "データの形式が不正です",
    "MISSING_REQUIRED_FIELD": "必須フィールドが不足しています",
    # calculation
    "CALCULATION_ERROR": "計算中にエラーが発生しました",
    "INVALID_PERCENTAGE": "パーセンテージの値が不正です（0-100の範囲）",
    "TOTAL_EXCEEDED": "合計値が上限を超えています",
    # render
    "RENDER_ERROR": "チャートの描画中にエラーが発生しました",
    "INVALID_DIMENSIONS": "チャートのサイズが不正です",
    "OVERFLOW_ERROR": "データが表示可能な範囲を超えています",
}

CHART_ERROR_SEVERITY: dict[str, ChartErrorSeverity] = {
    code: ("warning" if code in ("RENDER_ERROR", "INVALID_DIMENSIONS", "OVERFLOW_ERROR") else "error")
    for code in CHART_ERROR_MESSAGES
}

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class PieData:
    """外环一行。percentage 为 0-100。"""

    name: str
    value: float
    percentage: float

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "value": self.value, "percentage": self.percentage}


@dataclass(frozen=True, slots=True)
class DetailedPieData:
    """明细环一行：某科目某考试区分的得分。"""

    subject_name: str
    value: float
    percentage: float
    type: str
    name: str = ""
    category: str = ""
    display_name: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "subjectName": self.subject_name,
            "name": self.name,
            "value": self.value,
            "percentage": self.percentage,
            "type": self.type,
            "category": self.category,
            "displayName": self.display_name,
        }


@dataclass(frozen=True, slots=True)
class ChartError:
    """行级失败。field 为科目名或字段名（外环整批失败时为 "category-data"）。"""

    code: ChartErrorCode
    message: str
    field: str
    severity: ChartErrorSeverity = "error"
    details: dict[str, Any] | None = None
    context: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "field": self.field,
            "severity": self.severity,
        }
        if self.details is not None:
            d["details"] = dict(self.details)
        if self.context is not None:
            d["context"] = dict(self.context)
        return d


@dataclass(frozen=True, slots=True)
class ChartMetadata:
    processed_at: float
    total_items: int
    success_count: int
    error_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "processedAt": self.processed_at,
            "totalItems": self.total_items,
            "successCount": self.success_count,
            "errorCount": self.error_count,
        }


@dataclass
class ChartResult(Generic[T]):
    """聚合器的统一返回信封；任何输入下都会返回，不向调用方抛出。"""

    data: list[T] = field(default_factory=list)
    errors: list[ChartError] = field(default_factory=list)
    has_errors: bool = False
    status: ChartStatus = "success"
    metadata: ChartMetadata | None = None

    def __post_init__(self) -> None:
        """构造后自动校验不变量。"""
        self.validate()

    def validate(self) -> None:
        """检查信封不变量，违反时抛出 ValueError。"""
        if self.has_errors != bool(self.errors):
            raise ValueError(
                f"ChartResult 不变量违反：has_errors={self.has_errors} 与 "
                f"errors 数量 {len(self.errors)} 不一致"
            )
        if self.status not in ("success", "error"):
            raise ValueError(f"ChartResult 不变量违反：未知 status {self.status!r}")

    def to_dict(self) -> dict[str, Any]:
        """转为前端消费的 camelCase 结构。"""
        d: dict[str, Any] = {
            "data": [item.to_dict() if hasattr(item, "to_dict") else item for item in self.data],
            "errors": [e.to_dict() for e in self.errors],
            "hasErrors": self.has_errors,
            "status": self.status,
        }
        if self.metadata is not None:
            d["metadata"] = self.metadata.to_dict()
        return d


@dataclass
class ChartData:
    """一个科目组合的完整图表数据。

    errors 为 detailed 与 outer 错误的拼接（先明细后外环）。
    """

    detailed: ChartResult[DetailedPieData]
    outer: ChartResult[PieData]
    test_types: list[PieData]
    grand_total: float
    errors: list[ChartError] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "detailedData": self.detailed.to_dict(),
            "outerData": self.outer.to_dict(),
            "testTypeData": [p.to_dict() for p in self.test_types],
            "grandTotal": self.grand_total,
            "errors": [e.to_dict() for e in self.errors],
        }
