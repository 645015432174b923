# Prefix Launcher — Rofi Prefix Command Launcher
# Copyright (c) 2025
# TriFactoria (Andrew Blankfield)
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Protocol definitions for dependency injection.

These interfaces keep the launcher's decision logic apart from the
external processes it drives, so tests can swap in canned fakes.
"""

from __future__ import annotations

from typing import Any, Protocol


class Executor(Protocol):
    """Protocol for command execution."""

    def run(
        self, command: str, input_text: str | None = None
    ) -> tuple[int, str, str, str, int]:
        """Run a shell command and return results.

        Args:
            command: Shell command line
            input_text: Optional text fed to the command's stdin

        Returns:
            (exit_code, stdout, stderr, started_at, duration_ms)
        """
        ...


class Picker(Protocol):
    """Protocol for the interactive menu and query prompt."""

    def pick(self, menu: str) -> str:
        """Show the newline-separated menu and return the selection.

        Raises:
            PickerFailed: If the picker was cancelled or failed
        """
        ...

    def ask(self, label: str) -> str:
        """Ask for free text and return it, trimmed.

        Raises:
            PromptFailed: If the prompt was cancelled or failed
        """
        ...


class ConfigModel(Protocol):
    """Protocol for configuration access."""

    @property
    def system(self) -> dict[str, Any]:
        """System configuration."""
        ...

    @property
    def picker(self) -> dict[str, Any]:
        """Menu picker and query prompt commands."""
        ...

    @property
    def browser(self) -> dict[str, Any]:
        """Browser launcher configuration."""
        ...

    @property
    def workspace(self) -> dict[str, Any]:
        """Workspace switcher configuration."""
        ...

    @property
    def registry(self) -> dict[str, Any]:
        """Registry build options."""
        ...

    @property
    def execution(self) -> dict[str, Any]:
        """Shell execution options."""
        ...

    def get_path(self, path: str, default: Any = None) -> Any:
        """Nested lookup using a dot-separated path."""
        ...
