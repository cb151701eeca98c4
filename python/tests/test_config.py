import pytest
import yaml

from pickles.config import ShellConfig, parse_bool
from pickles.errors import ConfigError


def test_defaults(config):
    assert config.object_sort == "insertion"
    assert config.results_sort is None
    assert config.copy_last_property_only is False
    assert config.notification_seconds == 2.0
    assert config.state_dir == "~/.pickles/state"


def test_reads_yaml(tmp_path, monkeypatch):
    monkeypatch.delenv("PICKLES_STATE_DIR", raising=False)
    path = tmp_path / "config.yaml"
    path.write_text(yaml.dump({
        "object_sort": "key-smart",
        "results_sort": {"column": "value", "direction": "desc"},
        "copy_last_property_only": True,
        "notification_seconds": 5,
        "state_dir": str(tmp_path / "state"),
    }))
    config = ShellConfig(config_path=str(path))
    assert config.object_sort == "key-smart"
    assert config.results_sort == ("value", "desc")
    assert config.copy_last_property_only is True
    assert config.notification_seconds == 5.0
    assert config.state_dir == str(tmp_path / "state")


def test_invalid_values_fall_back_to_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.dump({
        "object_sort": "random",
        "results_sort": {"column": "size"},
        "notification_seconds": "soon",
    }))
    config = ShellConfig(config_path=str(path))
    assert config.object_sort == "insertion"
    assert config.results_sort is None
    assert config.notification_seconds == 2.0


def test_unparseable_yaml_uses_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("object_sort: [unclosed")
    assert ShellConfig(config_path=str(path)).object_sort == "insertion"


def test_env_overrides_state_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("PICKLES_STATE_DIR", "/tmp/pickles-state")
    assert ShellConfig(config_path=str(tmp_path / "c.yaml")).state_dir == "/tmp/pickles-state"


def test_env_state_dir_is_not_saved(tmp_path, monkeypatch):
    path = tmp_path / "c.yaml"
    monkeypatch.setenv("PICKLES_STATE_DIR", "/tmp/pickles-state")
    ShellConfig(config_path=str(path)).set_config("object_sort", "value-desc")
    assert "state_dir" not in yaml.safe_load(path.read_text())

    monkeypatch.delenv("PICKLES_STATE_DIR")
    reloaded = ShellConfig(config_path=str(path))
    assert reloaded.state_dir == "~/.pickles/state"
    assert reloaded.object_sort == "value-desc"


def test_set_config_persists(config):
    config.set_config("object_sort", "value-desc")
    config.set_config("results_sort.column", "path")
    config.set_config("results_sort.direction", "desc")
    config.set_config("copy_last_property_only", "on")

    reloaded = ShellConfig(config_path=config.config_path)
    assert reloaded.object_sort == "value-desc"
    assert reloaded.results_sort == ("path", "desc")
    assert reloaded.copy_last_property_only is True


def test_set_config_rejects_bad_values(config):
    with pytest.raises(ConfigError):
        config.set_config("object_sort", "sideways")
    with pytest.raises(ConfigError):
        config.set_config("results_sort.direction", "desc")
    with pytest.raises(ConfigError):
        config.set_config("notification_seconds", "-1")
    with pytest.raises(ConfigError):
        config.set_config("nonsense", "1")
    with pytest.raises(ConfigError):
        config.set_results_sort("path", "sideways")


def test_parse_bool():
    assert parse_bool("ON") is True
    assert parse_bool("no") is False
    assert parse_bool(True) is True
    with pytest.raises(ConfigError):
        parse_bool("maybe")
