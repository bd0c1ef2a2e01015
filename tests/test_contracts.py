import pytest

from examscore.contracts.chart import ChartMetadata, ChartResult, DetailedPieData, PieData
from examscore.contracts.error import (
    chart_error_from_exception,
    create_chart_error,
    create_chart_error_result,
    create_chart_metadata,
)
from examscore.contracts.exceptions import (
    EXCEEDS_TOTAL,
    NEGATIVE_TOTAL,
    CategoryDataError,
    ScoreEngineError,
    ScoreInputError,
)
from examscore.contracts.scores import BaseSubjectScore, parse_subject_scores


def test_subject_score_from_camel_and_snake_case() -> None:
    assert BaseSubjectScore.from_dict({"commonTest": 80, "secondTest": 70}) == BaseSubjectScore(80, 70)
    assert BaseSubjectScore.from_dict({"common_test": 1, "second_test": 2}) == BaseSubjectScore(1, 2)
    assert BaseSubjectScore(80, 70).to_dict() == {"commonTest": 80, "secondTest": 70}


def test_subject_score_keeps_raw_values() -> None:
    score = BaseSubjectScore.from_dict({"commonTest": "abc", "secondTest": None})
    assert score.common_test == "abc"
    assert score.second_test is None


def test_subject_score_missing_field() -> None:
    with pytest.raises(ScoreInputError, match="secondTest"):
        BaseSubjectScore.from_dict({"commonTest": 80})


def test_parse_subject_scores() -> None:
    existing = BaseSubjectScore(1, 2)
    subjects = parse_subject_scores({"数学": {"commonTest": 80, "secondTest": 70}, "国語": existing})
    assert subjects["数学"] == BaseSubjectScore(80, 70)
    assert subjects["国語"] is existing

    with pytest.raises(ScoreInputError):
        parse_subject_scores([1, 2])
    with pytest.raises(ScoreInputError):
        parse_subject_scores({"数学": 80})


def test_chart_result_invariants() -> None:
    with pytest.raises(ValueError, match="has_errors"):
        ChartResult(data=[], errors=[], has_errors=True)

    error = create_chart_error("INVALID_SCORE", "数学")
    with pytest.raises(ValueError):
        ChartResult(data=[], errors=[error], has_errors=False)
    with pytest.raises(ValueError, match="status"):
        ChartResult(status="pending")


def test_create_chart_error_defaults() -> None:
    error = create_chart_error("MISSING_SCORE", "地歴公", timestamp=123.0)
    assert error.message == "スコアが見つかりません"
    assert error.severity == "error"
    assert error.context == {
        "source": "system",
        "category": "validation",
        "timestamp": 123.0,
        "fieldName": "地歴公",
    }

    render = create_chart_error("RENDER_ERROR", "chart")
    assert render.severity == "warning"


def test_error_result_envelope() -> None:
    error = create_chart_error("CALCULATION_ERROR", "category-data")
    result = create_chart_error_result([error])
    assert result.status == "error"
    assert result.has_errors is True
    assert result.data == []
    assert result.metadata is None

    empty = create_chart_error_result([])
    assert empty.status == "success"
    assert empty.has_errors is False


def test_category_data_error_messages() -> None:
    negative = CategoryDataError(NEGATIVE_TOTAL, category="数学", value=-10)
    assert isinstance(negative, ScoreEngineError)
    assert negative.error_code == NEGATIVE_TOTAL
    assert negative.error_stage == "aggregate"
    assert "-10" in negative.message

    exceeds = CategoryDataError(EXCEEDS_TOTAL, category="国語", value=300, grand_total=240)
    assert "300" in exceeds.message and "240" in exceeds.message


def test_chart_error_from_exception_wraps_message() -> None:
    exc = CategoryDataError(NEGATIVE_TOTAL, category="数学", value=-10)
    error = chart_error_from_exception(exc, "category-data", extra_details={"category": "数学"})

    assert error.code == "CALCULATION_ERROR"
    assert error.message == f"計算中にエラーが発生しました: {exc.message}"
    assert error.details == {
        "original_message": exc.message,
        "original_code": NEGATIVE_TOTAL,
        "error_stage": "aggregate",
        "category": "数学",
    }
    assert error.context["category"] == "calculation"


def test_to_dict_uses_camel_case() -> None:
    row = DetailedPieData(subject_name="数学", value=80, percentage=50.0, type="共通", name="数学(共通)")
    assert row.to_dict()["subjectName"] == "数学"
    assert row.to_dict()["displayName"] == ""

    result = ChartResult(
        data=[PieData(name="数学", value=80, percentage=50.0)],
        metadata=create_chart_metadata(1.0, 5, [1], []),
    )
    d = result.to_dict()
    assert d["hasErrors"] is False
    assert d["data"] == [{"name": "数学", "value": 80, "percentage": 50.0}]
    assert d["metadata"] == ChartMetadata(1.0, 5, 1, 0).to_dict()
    assert d["metadata"]["totalItems"] == 5
