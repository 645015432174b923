# Prefix Launcher — Rofi Prefix Command Launcher
# Copyright (c) 2025
# TriFactoria (Andrew Blankfield)
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Rofi-backed implementation of the Picker protocol.
"""

from __future__ import annotations

from .errors import PickerFailed, PromptFailed
from .interfaces import ConfigModel, Executor
from .utils import fill_command

DEFAULT_MENU_COMMAND = "rofi -sep '\\n' -dmenu -p 'Prefix:' -i -mesg {title}"
DEFAULT_TITLE = "Select a command"
DEFAULT_PROMPT_COMMAND = "rofi -dmenu -p {label}"


class RofiPicker:
    """Runs the configured dmenu-style commands through an executor."""

    def __init__(self, executor: Executor, config: ConfigModel) -> None:
        self.executor = executor
        # system.name is shown as the menu message.
        self.title = str(config.system.get("name") or DEFAULT_TITLE)
        picker_cfg = config.picker
        self.menu_command = str(
            picker_cfg.get("menu_command") or DEFAULT_MENU_COMMAND
        )
        self.prompt_command = str(
            picker_cfg.get("prompt_command") or DEFAULT_PROMPT_COMMAND
        )

    def pick(self, menu: str) -> str:
        exit_code, stdout, stderr, _, _ = self.executor.run(
            fill_command(self.menu_command, title=self.title), input_text=menu
        )
        if exit_code != 0:
            raise PickerFailed(
                f"Failed to run menu picker (exit {exit_code})"
                + (f": {stderr.strip()}" if stderr.strip() else "")
            )
        # Only the line terminator is dropped; a typed "g " keeps its space.
        return stdout.rstrip("\r\n")

    def ask(self, label: str) -> str:
        command = fill_command(self.prompt_command, label=label)
        exit_code, stdout, stderr, _, _ = self.executor.run(command)
        if exit_code != 0:
            raise PromptFailed(
                f"Failed to run query prompt (exit {exit_code})"
                + (f": {stderr.strip()}" if stderr.strip() else "")
            )
        return stdout.strip()
