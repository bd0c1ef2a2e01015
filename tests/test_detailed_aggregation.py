import pytest

from examscore.aggregation.detailed import DetailedAggregator, aggregate_detailed_data
from examscore.contracts.scores import BaseSubjectScore


def test_partial_success_with_missing_subject(sample_subjects) -> None:
    result = aggregate_detailed_data(sample_subjects, 480)

    assert result.has_errors is True
    assert result.status == "success"
    assert len(result.data) == 9
    assert len(result.errors) == 1
    error = result.errors[0]
    assert error.field == "地歴公"
    assert error.code == "MISSING_SCORE"
    assert "地歴公" in error.message
    assert result.metadata.total_items == 6
    assert result.metadata.success_count == 9
    assert result.metadata.error_count == 1


def test_rows_follow_subject_order_and_test_types(sample_subjects) -> None:
    result = aggregate_detailed_data(sample_subjects, 480)

    assert [(row.subject_name, row.type) for row in result.data[:4]] == [
        ("英語R", "共通"),
        ("英語R", "二次"),
        ("英語L", "共通"),
        ("数学", "共通"),
    ]
    first = result.data[0]
    assert first.value == 70
    assert first.percentage == pytest.approx(70 / 480 * 100)
    assert first.name == "英語R(共通)"
    assert first.category == "英語"
    assert first.display_name == "英語（リーディング）(共通)"


def test_zero_and_negative_fields_dropped_silently() -> None:
    subjects = {"数学": BaseSubjectScore(0, 60), "国語": BaseSubjectScore(-10, 50)}
    result = aggregate_detailed_data(subjects, 110, subject_order=("数学", "国語"))

    assert [(row.subject_name, row.type, row.value) for row in result.data] == [
        ("数学", "二次", 60),
        ("国語", "二次", 50),
    ]
    assert result.has_errors is False
    assert result.errors == []


def test_subject_without_valid_scores() -> None:
    subjects = {"数学": BaseSubjectScore(80, 0), "理科": BaseSubjectScore(0, -5)}
    result = aggregate_detailed_data(subjects, 80, subject_order=("数学", "理科"))

    assert len(result.data) == 1
    assert [(e.field, e.code) for e in result.errors] == [("理科", "INVALID_SCORE")]


def test_zero_grand_total() -> None:
    result = aggregate_detailed_data({"数学": BaseSubjectScore(10, 0)}, 0, subject_order=("数学",))
    assert result.data[0].percentage == 0.0


def test_memoized_on_subjects_and_grand_total(sample_subjects) -> None:
    aggregator = DetailedAggregator()
    first = aggregator(sample_subjects, 480)

    assert aggregator(sample_subjects, 480) is first
    assert aggregator(sample_subjects, 500) is not first
