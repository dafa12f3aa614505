"""YAML configuration loading and validation."""

import textwrap

import pytest
import yaml

from crandom import ConfigManager, contract_checks_enabled, new_from_seed, source_from_config


def write_config(tmp_path, **overrides):
    config = {
        "source": {"engine": "mt19937", "seed": 7, "seed_array": None, "buffer_size": 64},
        "contracts": {"enabled": True},
        "histogram": {"lower": -5.0, "upper": 5.0, "bins": 100, "draws": 1000},
    }
    for section, values in overrides.items():
        if values is None:
            del config[section]
        else:
            config[section].update(values)
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(config))
    return path


def test_default_config_loads():
    config = ConfigManager()
    assert config.source["engine"] == "mt19937"
    assert config.get("histogram.bins") == 1000
    assert config.get("histogram.draws") == 10_000_000
    assert config.get("histogram.lower") == -5.0
    assert config.contracts["enabled"] is True


def test_dot_lookup_default():
    config = ConfigManager()
    assert config.get("source.missing", "fallback") == "fallback"
    assert config.get("nope.nothing") is None
    assert config.get_section("absent") == {}


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigManager(tmp_path / "absent.yaml")


def test_missing_section(tmp_path):
    with pytest.raises(ValueError, match="Missing required config section: contracts"):
        ConfigManager(write_config(tmp_path, contracts=None))


@pytest.mark.parametrize("section, values, message", [
    ("source", {"engine": "lcg"}, "source.engine"),
    ("source", {"buffer_size": 0}, "buffer_size"),
    ("source", {"seed_array": []}, "seed_array"),
    ("histogram", {"lower": 5.0}, "histogram.lower"),
    ("histogram", {"bins": 0}, "histogram.bins"),
    ("histogram", {"draws": -1}, "histogram.draws"),
])
def test_invalid_values(tmp_path, section, values, message):
    with pytest.raises(ValueError, match=message):
        ConfigManager(write_config(tmp_path, **{section: values}))


def test_missing_histogram_value(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(textwrap.dedent("""
        source: {engine: mt19937}
        contracts: {enabled: true}
        histogram: {lower: 0, upper: 1, bins: 10}
    """))
    with pytest.raises(ValueError, match="histogram.draws"):
        ConfigManager(path)


def test_source_from_config_uses_seed(tmp_path):
    config = ConfigManager(write_config(tmp_path))
    with source_from_config(config) as a, new_from_seed(7) as b:
        assert a.buffer_size == 64
        assert a.fill(100) == b.fill(100)


def test_source_from_config_prefers_seed_array(tmp_path):
    config = ConfigManager(write_config(tmp_path, source={"seed_array": [1, 2, 3]}))
    with source_from_config(config) as src:
        assert src.seed == [1, 2, 3]


def test_apply_contracts(tmp_path):
    config = ConfigManager(write_config(tmp_path, contracts={"enabled": False}))
    config.apply_contracts()
    assert not contract_checks_enabled()


@pytest.mark.parametrize("seed", ["42", 3.5, True, [1, 2]])
def test_seed_must_be_an_integer(tmp_path, seed):
    with pytest.raises(ValueError, match="source.seed must be an integer"):
        ConfigManager(write_config(tmp_path, source={"seed": seed}))


@pytest.mark.parametrize("seed_array", ["42", 7, [1, "2"], [1.5, 2], {"a": 1}])
def test_seed_array_must_be_a_list_of_integers(tmp_path, seed_array):
    with pytest.raises(ValueError, match="source.seed_array must be a list of integers"):
        ConfigManager(write_config(tmp_path, source={"seed_array": seed_array}))


def test_quoted_seed_is_not_split_into_keys(tmp_path, capsys):
    from crandom.cli import main

    path = write_config(tmp_path, source={"seed": "42"})
    assert main(["-c", str(path), "sample", "normal", "0", "1"]) == 1
    assert capsys.readouterr().out == ""


def test_float_seed_exits_with_one(tmp_path, capsys):
    from crandom.cli import main

    path = write_config(tmp_path, source={"seed": 3.5})
    assert main(["-c", str(path), "sample", "normal", "0", "1"]) == 1
    assert capsys.readouterr().out == ""
