# Prefix Launcher — Rofi Prefix Command Launcher
# Copyright (c) 2025
# TriFactoria (Andrew Blankfield)
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Configuration and data root resolution for the launcher.

Handles:
- Data root resolution (LAUNCHER_DATA_HOME, ~/.local/share)
- Crash log location
- Packaged YAML defaults loading (prefix_launcher/defaults/*.yaml)
- ANSI coloring constants for console reporting
"""

from __future__ import annotations

import os
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml

APP_DIR = "prefix-launcher"


# -----------------------
# Console coloring constants
# -----------------------

ANSI_COLORS: dict[str, str] = {
    "cyan": "\033[38;5;69;1m",
    "magenta": "\033[38;5;126;1m",
    "reset": "\033[0m",
    "dim": "\033[2m",
    "green": "\033[32m",
    "red": "\033[31m",
}

TAG_COLORS: dict[str, str] = {
    "RUN": "green",
    "EXIT": "magenta",
    "ERR": "red",
    "WS": "cyan",
    "ERROR": "red",
}


def tag(name: str) -> str:
    """Colored "[NAME]" tag for console output."""
    color = ANSI_COLORS[TAG_COLORS.get(name, "dim")]
    return f"{color}[{name}]{ANSI_COLORS['reset']}"


# -----------------------
# Config model wrapper
# -----------------------


class YAMLConfig:
    """Simple config wrapper that implements ConfigModel protocol."""

    def __init__(self, config_dict: dict[str, Any]):
        self._config = config_dict

    def _section(self, name: str) -> dict[str, Any]:
        section = self._config.get(name, {})
        return section if isinstance(section, dict) else {}

    @property
    def system(self) -> dict[str, Any]:
        return self._section("system")

    @property
    def picker(self) -> dict[str, Any]:
        return self._section("picker")

    @property
    def browser(self) -> dict[str, Any]:
        return self._section("browser")

    @property
    def workspace(self) -> dict[str, Any]:
        return self._section("workspace")

    @property
    def registry(self) -> dict[str, Any]:
        return self._section("registry")

    @property
    def execution(self) -> dict[str, Any]:
        return self._section("execution")

    def get_path(self, path: str, default: Any = None) -> Any:
        """
        Nested lookup using dot-separated path.
        Example: get_path("workspace.switch_command", "") -> str
        """
        if not path:
            return default

        cur: Any = self._config
        for part in path.split("."):
            if not isinstance(cur, dict):
                return default
            if part not in cur:
                return default
            cur = cur[part]
        return cur


# -----------------------
# Data root
# -----------------------


def get_data_root() -> Path:
    """Get the data root directory.

    Resolution order:
    1. LAUNCHER_DATA_HOME environment variable (if set)
    2. ~/.local/share (default, XDG_DATA_HOME is ignored)
    """
    launcher_data_home = os.getenv("LAUNCHER_DATA_HOME")
    if launcher_data_home:
        root = Path(launcher_data_home)
    else:
        root = Path.home() / ".local" / "share"

    root.mkdir(parents=True, exist_ok=True)
    return root


def crash_log_path(data_root: Path) -> Path:
    """<data_root>/prefix-launcher/logs/crash.log"""
    return data_root / APP_DIR / "logs" / "crash.log"


# -----------------------
# Packaged defaults loading
# -----------------------


def _defaults_dir() -> Path:
    """Return the installed path to the packaged defaults directory."""
    return Path(
        importlib_resources.files("prefix_launcher.defaults")
    )  # type: ignore[arg-type]


def load_defaults_yaml(filename: str) -> dict[str, Any]:
    """
    Load a YAML file from prefix_launcher/defaults/.
    """
    defaults_dir = _defaults_dir()
    path = defaults_dir / filename
    if not path.exists():
        raise FileNotFoundError(
            f"Missing defaults YAML: {filename} "
            f"(looked in {defaults_dir})"
        )

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(
            f"Defaults YAML {filename} must load to a mapping/dict."
        )
    return data


def load_system_config() -> YAMLConfig:
    """
    Load system.yaml from packaged defaults and return a YAMLConfig wrapper.
    """
    return YAMLConfig(load_defaults_yaml("system.yaml"))
