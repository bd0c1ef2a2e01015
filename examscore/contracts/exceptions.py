"""分数引擎结构化异常层级。

所有引擎异常继承自 ScoreEngineError，自带
error_type / error_stage / error_code 三个元数据字段，
便于转换为 ChartError 时保留原始分类。

异常层级：
  ScoreEngineError (base)
  ├── CategoryDataError → 外环聚合阶段：大类合计为负 / 超过总分
  ├── ScoreInputError   → 输入边界：分数载荷结构不合法
  └── ConfigError       → 配置加载：YAML 缺失或取值非法

CategoryDataError 只作为值在聚合器内部返回，不会被抛出到调用方。
"""

from __future__ import annotations

__all__ = [
    "ScoreEngineError",
    "CategoryDataError",
    "ScoreInputError",
    "ConfigError",
    "NEGATIVE_TOTAL",
    "EXCEEDS_TOTAL",
]

from typing import Literal

NEGATIVE_TOTAL = "NEGATIVE_TOTAL"
EXCEEDS_TOTAL = "EXCEEDS_TOTAL"

CategoryErrorCode = Literal["NEGATIVE_TOTAL", "EXCEEDS_TOTAL"]


class ScoreEngineError(Exception):
    """引擎基础异常，携带稳定的错误元数据 (type/stage/code)。"""

    def __init__(
        self,
        message: str,
        *,
        error_type: str,
        error_stage: str,
        error_code: str,
    ) -> None:
        super().__init__(message)
        self.error_type = error_type
        self.error_stage = error_stage
        self.error_code = error_code

    @property
    def message(self) -> str:
        return str(self)


class CategoryDataError(ScoreEngineError):
    """大类合计越界：负值或超过全体总分。"""

    def __init__(
        self,
        code: CategoryErrorCode,
        *,
        category: str,
        value: float,
        grand_total: float | None = None,
    ) -> None:
        if code == NEGATIVE_TOTAL:
            message = f"カテゴリ「{category}」の合計点が負の値です: {value}"
        else:
            message = (
                f"カテゴリ「{category}」の合計点 {value} が"
                f"全体の合計点 {grand_total} を超えています"
            )
        super().__init__(
            message,
            error_type="category_bound_violation",
            error_stage="aggregate",
            error_code=code,
        )
        self.code = code
        self.category = category
        self.value = value
        self.grand_total = grand_total


class ScoreInputError(ScoreEngineError):
    """输入载荷异常：缺少 commonTest/secondTest、结构不是映射等。"""

    def __init__(self, message: str) -> None:
        super().__init__(
            message,
            error_type="input_failure",
            error_stage="input",
            error_code="INVALID_DATA_FORMAT",
        )


class ConfigError(ScoreEngineError):
    """引擎配置异常：文件缺失、顶层不是映射、validator 参数越界。"""

    def __init__(self, message: str) -> None:
        super().__init__(
            message,
            error_type="config_failure",
            error_stage="config",
            error_code="config_error",
        )
