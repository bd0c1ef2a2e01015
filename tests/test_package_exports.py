import pytest

import examscore
import examscore.aggregation
import examscore.validation
from examscore.validation.score_validator import ScoreValidator


def test_lazy_symbols_resolve_to_module_objects() -> None:
    assert examscore.ScoreValidator is ScoreValidator
    assert examscore.validation.ScoreValidator is ScoreValidator
    # 解析后写回包命名空间
    assert "ScoreValidator" in vars(examscore)


def test_dir_lists_lazy_symbols() -> None:
    assert "build_chart_data" in dir(examscore.aggregation)
    assert set(examscore.__all__) <= set(dir(examscore))


def test_unknown_attribute() -> None:
    with pytest.raises(AttributeError, match="no attribute"):
        examscore.does_not_exist  # noqa: B018
