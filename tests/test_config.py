import pytest

from examscore.config import EngineConfig, load_config
from examscore.contracts.constants import SUBJECT_CATEGORIES, SUBJECTS, TEST_TYPES
from examscore.contracts.exceptions import ConfigError


def test_load_repository_config(engine_config_path) -> None:
    config = load_config(str(engine_config_path))

    assert config.version == "v1"
    assert config.validator.max_size == 1000
    assert config.validator.ttl_ms == 300_000
    assert config.subjects == SUBJECTS
    assert config.categories == SUBJECT_CATEGORIES
    assert config.test_types == TEST_TYPES
    assert config.display_names["地歴公"] == "地理歴史・公民"


def test_default_path_is_cached() -> None:
    assert load_config() is load_config()


def test_build_validator_uses_settings(tmp_path) -> None:
    path = tmp_path / "engine.yaml"
    path.write_text("validator:\n  max_size: 2\n  ttl_ms: 500\n", encoding="utf-8")
    validator = load_config(str(path)).build_validator()

    assert validator.max_size == 2
    assert validator.ttl == 500


def test_partial_config_falls_back_to_defaults(tmp_path) -> None:
    path = tmp_path / "engine.yaml"
    path.write_text("subjects: [数学, 国語]\n", encoding="utf-8")
    config = load_config(str(path))

    assert config.subjects == ("数学", "国語")
    assert config.categories == SUBJECT_CATEGORIES
    assert config.validator.max_size == 1000


def test_custom_test_type_labels() -> None:
    config = EngineConfig.from_dict({"test_types": {"secondary": "個別", "common": "共テ"}})
    assert config.test_types == (("second_test", "個別"), ("common_test", "共テ"))


@pytest.mark.parametrize(
    "text",
    [
        "validator:\n  max_size: 0\n",
        "validator:\n  ttl_ms: -1\n",
        "test_types:\n  final: 三次\n",
        "- just\n- a list\n",
    ],
)
def test_invalid_config_rejected(tmp_path, text) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(str(path))


def test_missing_explicit_path(tmp_path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(str(tmp_path / "nope.yaml"))
