"""Tests for the persisted configuration."""

import json

import pytest

from config.store import (
    MacChangerConfig,
    load_config,
    merge_config,
    read_config_file,
    save_config,
)
from core.errors import ConfigError, ConfigNotFoundError


def _write(path, data):
    path.write_text(json.dumps(data))
    return str(path)


def test_missing_keys_take_defaults(tmp_path):
    config = load_config(_write(tmp_path / "config.json", {"interfaces": ["eth0"]}))

    assert config.interval == 300
    assert config.interfaces == ("eth0",)
    assert config.enabled is True
    assert config.randomize is True


def test_load_full_record(tmp_path):
    path = _write(tmp_path / "config.json", {
        "interval": 90, "interfaces": ["wlan0", "eth0"], "enabled": False, "randomize": False,
    })
    config = load_config(path)
    assert config == MacChangerConfig(interval=90, interfaces=("wlan0", "eth0"),
                                      enabled=False, randomize=False)


def test_missing_file_raises_not_found(tmp_path):
    with pytest.raises(ConfigNotFoundError):
        load_config(str(tmp_path / "absent.json"))


def test_invalid_json_raises_config_error(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with pytest.raises(ConfigError):
        read_config_file(str(path))


@pytest.mark.parametrize("data", [
    {"interval": 0},
    {"interval": -5},
    {"interval": "300"},
    {"interval": 12.5},
    {"interval": True},
    {"interfaces": "eth0"},
    {"interfaces": ["eth0", "lo"]},
    {"interfaces": [""]},
    {"enabled": "yes"},
    {"randomize": 1},
])
def test_invalid_values_are_rejected(data):
    with pytest.raises(ConfigError):
        MacChangerConfig.from_dict(data)


def test_non_object_is_rejected(tmp_path):
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path / "config.json", ["eth0"]))


def test_configuration_is_immutable():
    config = MacChangerConfig()
    with pytest.raises(AttributeError):
        config.interval = 10


def test_unknown_keys_survive_save_and_load(tmp_path):
    path = str(tmp_path / "config.json")
    save_config({"interval": 120, "interfaces": ["eth0"], "comment": "office laptop"}, path)

    config = load_config(path)

    assert config.extra == {"comment": "office laptop"}
    with open(path) as fh:
        on_disk = json.load(fh)
    assert on_disk["comment"] == "office laptop"
    assert on_disk["randomize"] is True


def test_save_writes_indented_json(tmp_path):
    path = tmp_path / "nested" / "config.json"
    save_config({"interval": 300, "interfaces": ["eth0"]}, str(path))
    assert '\n  "interval": 300' in path.read_text()


def test_save_refuses_invalid_record(tmp_path):
    path = tmp_path / "config.json"
    with pytest.raises(ConfigError):
        save_config({"interval": 0}, str(path))
    assert not path.exists()


def test_merge_keeps_existing_and_unknown_keys():
    current = {"interval": 300, "interfaces": ["eth0"], "randomize": True,
               "enabled": True, "owner": "ops"}
    merged = merge_config(current, {"interval": 60, "interfaces": ["wlan0"], "enabled": False})

    assert merged == {"interval": 60, "interfaces": ["wlan0"], "randomize": True,
                      "enabled": False, "owner": "ops"}
    assert current["interval"] == 300
