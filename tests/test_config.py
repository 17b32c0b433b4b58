from __future__ import annotations

from pathlib import Path

import pytest

from gtrends_csv.config import GtrendsConfig, load_config
from gtrends_csv.errors import ConfigurationError
from gtrends_csv.parser import SectionedCsvParser


def write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "gtrends.yaml"
    path.write_text(text)
    return path


def test_packaged_defaults():
    config = load_config()
    assert config.csv.separator == ","
    assert config.logging.logger_name == "gtrends_csv"
    assert config.logging.level == "INFO"


def test_yaml_overrides_separator(tmp_path: Path) -> None:
    path = write_config(tmp_path, 'csv:\n  separator: ";"\nlogging:\n  level: debug\n')
    config = load_config(path)
    assert config.csv.separator == ";"
    assert config.logging.numeric_level == 10
    parser = SectionedCsvParser("Top searches for\nfoo;1\n", config=config)
    assert parser.get_top_searches(1) == ["foo"]


def test_legacy_separator_key(tmp_path: Path) -> None:
    path = write_config(tmp_path, 'google.csv.separator: "\\t"\n')
    assert load_config(path).csv.separator == "\t"


def test_overrides_take_precedence(tmp_path: Path) -> None:
    path = write_config(tmp_path, 'csv:\n  separator: ";"\n')
    config = load_config(path, overrides={"csv": {"separator": r"\|"}, "logging": {"logger_name": "trends"}})
    assert config.csv.separator == r"\|"
    assert config.logging.logger_name == "trends"


def test_round_trip_through_dict():
    config = GtrendsConfig()
    assert GtrendsConfig.from_dict(config.to_dict()) == config


def test_missing_file_is_a_configuration_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        load_config(tmp_path / "absent.yaml")


@pytest.mark.parametrize(
    "text",
    [
        "- one\n- two\n",
        'csv:\n  separator: ""\n',
        "csv:\n  separator: null\n",
        'csv:\n  separator: "("\n',
        "csv:\n  delimiter: ','\n",
        "csv: [1, 2]\n",
        "logging:\n  level: LOUD\n",
        "csv: {separator: ','\n",
    ],
)
def test_invalid_configuration(tmp_path: Path, text: str) -> None:
    path = write_config(tmp_path, text)
    with pytest.raises(ConfigurationError):
        load_config(path)


def test_configuration_error_is_a_value_error():
    assert issubclass(ConfigurationError, ValueError)
