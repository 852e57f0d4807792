from __future__ import annotations

import json

import pytest

from bikeshare.config.loader import load_config


def test_load_config_reads_station_settings(write_config, tmp_path) -> None:
    path = write_config(default_capacity=12, release_order="fifo")

    cfg = load_config(path, base_dir=tmp_path)
    assert cfg.app.name == "Test"
    assert cfg.station.default_capacity == 12
    assert cfg.station.release_order == "fifo"
    assert cfg.logging.file is None


def test_missing_sections_fall_back_to_defaults(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{}", encoding="utf-8")

    cfg = load_config(path, base_dir=tmp_path)
    assert cfg.station.default_capacity == 20
    assert cfg.station.release_order == "lifo"
    assert cfg.api.port == 8000
    assert cfg.logging.level == "INFO"


def test_env_overrides_default_capacity(monkeypatch, write_config, tmp_path) -> None:
    path = write_config(default_capacity=20)
    monkeypatch.setenv("BIKESHARE_DEFAULT_CAPACITY", "5")

    cfg = load_config(path, base_dir=tmp_path)
    assert cfg.station.default_capacity == 5


def test_invalid_capacity_env_does_not_override(monkeypatch, write_config, tmp_path) -> None:
    path = write_config(default_capacity=9)
    monkeypatch.setenv("BIKESHARE_DEFAULT_CAPACITY", "lots")

    cfg = load_config(path, base_dir=tmp_path)
    assert cfg.station.default_capacity == 9


def test_env_overrides_release_order(monkeypatch, write_config, tmp_path) -> None:
    path = write_config(release_order="lifo")
    monkeypatch.setenv("BIKESHARE_RELEASE_ORDER", "FIFO")

    cfg = load_config(path, base_dir=tmp_path)
    assert cfg.station.release_order == "fifo"


def test_invalid_release_order_env_does_not_override(monkeypatch, write_config, tmp_path) -> None:
    path = write_config(release_order="fifo")
    monkeypatch.setenv("BIKESHARE_RELEASE_ORDER", "random")

    cfg = load_config(path, base_dir=tmp_path)
    assert cfg.station.release_order == "fifo"


def test_env_overrides_log_level(monkeypatch, write_config, tmp_path) -> None:
    path = write_config()
    monkeypatch.setenv("BIKESHARE_LOG_LEVEL", "DEBUG")

    cfg = load_config(path, base_dir=tmp_path)
    assert cfg.logging.level == "DEBUG"


@pytest.mark.parametrize(
    "station",
    [{"default_capacity": 0}, {"release_order": "random"}],
)
def test_invalid_station_settings_raise(write_config, tmp_path, station) -> None:
    path = write_config(**station)
    with pytest.raises(ValueError):
        load_config(path, base_dir=tmp_path)


def test_config_path_from_env(monkeypatch, write_config, tmp_path) -> None:
    path = write_config(default_capacity=3)
    monkeypatch.setenv("BIKESHARE_CONFIG_PATH", path)

    cfg = load_config(base_dir=tmp_path)
    assert cfg.station.default_capacity == 3


def test_log_file_is_resolved_against_base_dir(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"logging": {"file": "logs/bikeshare.log"}}), encoding="utf-8")

    cfg = load_config(path, base_dir=tmp_path)
    assert cfg.logging.file == tmp_path.resolve() / "logs" / "bikeshare.log"


@pytest.mark.parametrize("capacity", [2.9, True, None, "12"])
def test_non_integer_default_capacity_raises(write_config, tmp_path, capacity) -> None:
    path = write_config(default_capacity=capacity)
    with pytest.raises(ValueError):
        load_config(path, base_dir=tmp_path)


def test_env_capacity_is_validated(monkeypatch, write_config, tmp_path) -> None:
    path = write_config(default_capacity=9)
    monkeypatch.setenv("BIKESHARE_DEFAULT_CAPACITY", "0")
    with pytest.raises(ValueError):
        load_config(path, base_dir=tmp_path)
