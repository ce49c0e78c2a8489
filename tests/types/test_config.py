import pytest
from pydantic import ValidationError

from diff_object_comparer.types import ComparerConfig


def test_defaults():
    config = ComparerConfig()

    assert config.root_name == "Root"
    assert config.null_placeholder == "NULL"
    assert config.log_level == "WARNING"


def test_log_level_is_normalized():
    assert ComparerConfig(log_level="debug").log_level == "DEBUG"


@pytest.mark.parametrize(
    ("overrides", "error"),
    [
        ({"log_level": "LOUD"}, "log_level must be a logging level name"),
        ({"root_name": ""}, "root_name"),
        ({"null_placeholder": ""}, "null_placeholder"),
    ],
    ids=["bad_log_level", "empty_root_name", "empty_null_placeholder"],
)
def test_invalid_config(overrides, error):
    with pytest.raises(ValidationError, match=error):
        ComparerConfig(**overrides)


def test_config_is_frozen():
    config = ComparerConfig()

    with pytest.raises(ValidationError):
        config.root_name = "Other"


def test_from_env_defaults(clean_env):
    assert ComparerConfig.from_env() == ComparerConfig()


def test_from_env_reads_variables(clean_env):
    clean_env.setenv("DIFF_COMPARER_ROOT_NAME", "Snapshot")
    clean_env.setenv("DIFF_COMPARER_NULL_PLACEHOLDER", "null")
    clean_env.setenv("DIFF_COMPARER_LOG_LEVEL", "info")

    config = ComparerConfig.from_env()

    assert config.root_name == "Snapshot"
    assert config.null_placeholder == "null"
    assert config.log_level == "INFO"
