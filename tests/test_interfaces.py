"""
Tests that verify Protocol definitions are valid and implementations comply.
These tests don't test behavior - just that contracts exist.
"""

from __future__ import annotations

import inspect

from prefix_launcher import interfaces


def test_executor_protocol_exists():
    """Executor Protocol must define run method."""
    assert hasattr(interfaces, "Executor")
    assert hasattr(interfaces.Executor, "run")


def test_picker_protocol_exists():
    assert hasattr(interfaces, "Picker")

    for method in ("pick", "ask"):
        assert hasattr(interfaces.Picker, method), f"Picker missing {method}"


def test_config_model_protocol_exists():
    """ConfigModel Protocol must define required attributes."""
    protocol = interfaces.ConfigModel

    required_attrs = [
        "system", "picker", "browser", "workspace", "registry",
        "execution", "get_path",
    ]
    for attr in required_attrs:
        assert hasattr(protocol, attr), f"ConfigModel missing {attr}"


def test_subprocess_executor_conforms_to_executor_protocol():
    from prefix_launcher.executor import SubprocessExecutor

    executor = SubprocessExecutor()
    result = executor.run("echo test")

    assert isinstance(result, tuple)
    assert len(result) == 5  # (exit_code, stdout, stderr, started_at, duration_ms)

    params = inspect.signature(executor.run).parameters
    assert list(params) == ["command", "input_text"]


def test_rofi_picker_conforms_to_picker_protocol():
    from prefix_launcher.config import YAMLConfig
    from prefix_launcher.executor import SubprocessExecutor
    from prefix_launcher.picker import RofiPicker

    picker = RofiPicker(SubprocessExecutor(), YAMLConfig({}))

    assert callable(picker.pick)
    assert callable(picker.ask)


def test_system_config_conforms_to_config_model_protocol():
    from prefix_launcher.config import load_system_config

    cfg = load_system_config()

    for attr in ("system", "picker", "browser", "workspace", "registry", "execution"):
        assert isinstance(getattr(cfg, attr), dict)
    assert callable(cfg.get_path)
