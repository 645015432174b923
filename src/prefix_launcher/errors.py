# Prefix Launcher — Rofi Prefix Command Launcher
# Copyright (c) 2025
# TriFactoria (Andrew Blankfield)
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Failure kinds of a launcher run.

Each error carries the process exit code the CLI should return when it
ends the run. Only UnknownPrefix ends the run "normally" (exit 0).
"""

from __future__ import annotations


class LauncherError(Exception):
    """Base class for every reportable launcher failure."""

    exit_code: int = 1


class PickerFailed(LauncherError):
    """The menu picker exited non-zero (e.g. the user cancelled)."""


class UnknownPrefix(LauncherError):
    """The selection does not match any registered prefix."""

    exit_code = 0

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        super().__init__(f"No matching command for prefix: '{prefix}'")


class PromptFailed(LauncherError):
    """The interactive query prompt exited non-zero."""


class CommandFailed(LauncherError):
    """The target command exited non-zero or could not be launched."""

    def __init__(
        self, name: str, returncode: int = 1, stderr: str = ""
    ) -> None:
        self.name = name
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"Command '{name}' failed (exit {returncode})")


class WorkspaceSwitchFailed(LauncherError):
    """The workspace switcher failed after the command already ran."""

    def __init__(self, workspace: int, detail: str = "") -> None:
        self.workspace = workspace
        self.detail = detail
        msg = f"Failed to switch to workspace {workspace}"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)
