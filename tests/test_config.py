from __future__ import annotations

import os
from pathlib import Path

import pytest

from prefix_launcher import config


@pytest.fixture
def tmp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "home"
    home.mkdir(parents=True, exist_ok=True)
    monkeypatch.setenv("HOME", str(home))
    return home


def test_get_data_root_prefers_launcher_data_home(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """
    LAUNCHER_DATA_HOME wins when present and is created on demand.
    """
    data = tmp_path / "data"
    monkeypatch.setenv("LAUNCHER_DATA_HOME", str(data))

    assert config.get_data_root() == data
    assert data.is_dir()


def test_get_data_root_defaults_to_local_share_and_ignores_xdg(
    tmp_home: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv("LAUNCHER_DATA_HOME", raising=False)
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_home / "xdg_should_be_ignored"))

    expected = Path(os.path.expanduser("~")) / ".local" / "share"
    assert config.get_data_root() == expected


def test_crash_log_path_is_under_data_root(tmp_path: Path) -> None:
    assert config.crash_log_path(tmp_path) == (
        tmp_path / "prefix-launcher" / "logs" / "crash.log"
    )


# ----------------------------------------------------------------
# Packaged defaults
# ----------------------------------------------------------------


def test_load_system_config_reads_packaged_defaults() -> None:
    cfg = config.load_system_config()

    assert cfg.system["name"] == "Prefix Launcher"
    assert cfg.browser["command"] == "zen-browser"
    assert cfg.picker["separator"] == " --> "
    assert cfg.picker["query_mode"] == "prompt"
    assert "{title}" in cfg.picker["menu_command"]
    assert "{workspace}" in cfg.workspace["switch_command"]
    assert cfg.workspace["switch_before_output"] is True
    assert cfg.workspace["switch_on_failure"] is False
    assert cfg.registry["duplicate_prefixes"] == "last"
    assert cfg.execution["timeout"] is None


def test_load_defaults_yaml_missing_file_raises() -> None:
    with pytest.raises(FileNotFoundError, match="Missing defaults YAML"):
        config.load_defaults_yaml("nope.yaml")


def test_load_defaults_yaml_rejects_non_mapping(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "list.yaml").write_text("- a\n- b\n", encoding="utf-8")
    monkeypatch.setattr(config, "_defaults_dir", lambda: tmp_path)

    with pytest.raises(ValueError, match="must load to a mapping"):
        config.load_defaults_yaml("list.yaml")


def test_load_defaults_yaml_empty_file_is_empty_mapping(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "empty.yaml").write_text("", encoding="utf-8")
    monkeypatch.setattr(config, "_defaults_dir", lambda: tmp_path)

    assert config.load_defaults_yaml("empty.yaml") == {}


# ----------------------------------------------------------------
# YAMLConfig
# ----------------------------------------------------------------


def test_yaml_config_get_path_nested_lookup() -> None:
    cfg = config.YAMLConfig({"ui": {"theme": {"style": {"a": "b"}}}})

    assert cfg.get_path("ui.theme.style") == {"a": "b"}
    assert cfg.get_path("ui.theme.missing", "dflt") == "dflt"
    assert cfg.get_path("ui.theme.style.a.b", "dflt") == "dflt"
    assert cfg.get_path("", "dflt") == "dflt"


def test_yaml_config_sections_default_to_empty_dict() -> None:
    cfg = config.YAMLConfig({"browser": "not-a-mapping"})

    assert cfg.browser == {}
    assert cfg.picker == {}
    assert cfg.workspace == {}


def test_tag_wraps_name_in_color_codes() -> None:
    t = config.tag("ERR")

    assert t.startswith(config.ANSI_COLORS["red"])
    assert t.endswith(config.ANSI_COLORS["reset"])
    assert "[ERR]" in t


def test_every_tag_color_is_defined() -> None:
    assert set(config.TAG_COLORS) == {"RUN", "EXIT", "ERR", "WS", "ERROR"}
    for color in config.TAG_COLORS.values():
        assert color in config.ANSI_COLORS
