import pytest

from examscore.aggregation.chart_data import (
    aggregate_test_type_data,
    build_chart_data,
    sort_detailed_for_chart,
)
from examscore.config import EngineConfig
from examscore.contracts.chart import DetailedPieData


def test_build_chart_data_computes_grand_total(sample_subjects) -> None:
    chart = build_chart_data(sample_subjects)

    assert chart.grand_total == 480
    assert chart.outer.status == "success"
    assert [(row.name, row.value) for row in chart.outer.data] == [
        ("英語", 120),
        ("数学", 140),
        ("国語", 140),
        ("理科", 80),
        ("地歴公", 0),
    ]
    assert chart.outer.data[0].percentage == 25.0
    assert [e.field for e in chart.errors] == ["地歴公"]


def test_build_chart_data_combines_errors(sample_subjects) -> None:
    chart = build_chart_data(sample_subjects, grand_total=100)

    assert chart.outer.status == "error"
    assert chart.outer.data == []
    assert chart.detailed.status == "success"
    assert [e.code for e in chart.errors] == ["MISSING_SCORE", "CALCULATION_ERROR"]


def test_build_chart_data_uses_config_order(sample_subjects) -> None:
    config = EngineConfig(subjects=("数学", "国語"), categories=("数学",))
    chart = build_chart_data(sample_subjects, config=config)

    assert {row.subject_name for row in chart.detailed.data} == {"数学", "国語"}
    assert [row.name for row in chart.outer.data] == ["数学"]
    assert chart.errors == []


def test_test_type_rows(sample_subjects) -> None:
    rows = aggregate_test_type_data(sample_subjects, 480)

    assert [(row.name, row.value) for row in rows] == [("共通", 300), ("二次", 180)]
    assert [row.percentage for row in rows] == [pytest.approx(62.5), pytest.approx(37.5)]


def test_sort_places_english_rows_clockwise(sample_subjects) -> None:
    chart = build_chart_data(sample_subjects)
    rows = sort_detailed_for_chart(chart.detailed.data)

    assert [row.name for row in rows[:3]] == ["英語L(共通)", "英語R(共通)", "英語R(二次)"]
    assert [row.name for row in rows[3:5]] == ["数学(共通)", "数学(二次)"]
    assert len(rows) == len(chart.detailed.data)


def test_build_chart_data_orders_detailed_rows(sample_subjects) -> None:
    chart = build_chart_data(sample_subjects)
    assert [row.name for row in chart.detailed.data[:3]] == ["英語L(共通)", "英語R(共通)", "英語R(二次)"]


def _row(subject: str, test_type: str) -> DetailedPieData:
    return DetailedPieData(subject_name=subject, value=1, percentage=1.0, type=test_type)


def test_sort_ignores_combined_and_non_english_rows() -> None:
    rows = [
        _row("ゼミL", "共通"),
        _row("英語R + L", "共通"),
        _row("英語R", "二次"),
        _row("英語L", "二次"),
        _row("英語R", "共通"),
    ]
    ordered = sort_detailed_for_chart(rows)

    assert [(r.subject_name, r.type) for r in ordered] == [
        ("英語R", "共通"),
        ("英語L", "二次"),
        ("英語R", "二次"),
        ("ゼミL", "共通"),
        ("英語R + L", "共通"),
    ]
