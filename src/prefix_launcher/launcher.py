# Prefix Launcher — Rofi Prefix Command Launcher
# Copyright (c) 2025
# TriFactoria (Andrew Blankfield)
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Launcher run engine.

One run is strictly sequential:
- show the menu through the picker (or take a typed selection)
- resolve the prefix against the registry
- ask for a query when the template needs one and none was typed
- materialize the template and run it through the shell
- switch workspace after a successful command

Important boundary:
- Launcher does not load YAML or build the registry.
- Launcher consumes the injected Registry, Executor, Picker and
  ConfigModel.
"""

from __future__ import annotations

import sys
import traceback
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from . import config as cfg_module
from .config import tag
from .errors import (
    CommandFailed,
    LauncherError,
    UnknownPrefix,
    WorkspaceSwitchFailed,
)
from .interfaces import ConfigModel, Executor, Picker
from .registry import MENU_SEPARATOR, CommandEntry, Registry
from .picker import DEFAULT_PROMPT_COMMAND
from .resolver import TYPED_MODE, Resolution, resolve
from .utils import fill_command, materialize

DEFAULT_PROMPT_LABEL = "Enter Search Query:"
DEFAULT_SWITCH_COMMAND = "hyprctl dispatch workspace {workspace}"

# picker.query_mode values
PROMPT_QUERY = "prompt"
SUBSHELL_QUERY = "subshell"
QUERY_MODES = (PROMPT_QUERY, SUBSHELL_QUERY)


def write_crash_log(
    error: Exception,
    selection: str = "",
    command: str = "",
) -> None:
    """Write an entry to the crash log.

    Logs unhandled exceptions. Only creates the log directory when
    actually needed. Appends to crash.log (never overwrites).
    """
    try:
        crash_log = cfg_module.crash_log_path(cfg_module.get_data_root())
        crash_log.parent.mkdir(parents=True, exist_ok=True)

        lines = [datetime.now().isoformat()]
        if selection:
            lines.append(f"selection={selection}")
        if command:
            lines.append(f"command={command}")
        lines.append(f"error={type(error).__name__}: {error}")
        lines.append("traceback:")
        lines.append(traceback.format_exc())
        lines.append("----")

        with crash_log.open("a", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")

    except Exception:
        # Already in an error state; the console report still happens.
        pass


@dataclass
class Launcher:
    """Single-run command launcher."""

    registry: Registry
    executor: Executor
    picker: Picker
    config: ConfigModel

    # Print "[RUN] <name> => <command>" before and "[EXIT] ..." after.
    show_run: bool = False

    # Derived from config
    separator: str = MENU_SEPARATOR
    prompt_label: str = DEFAULT_PROMPT_LABEL
    prompt_command: str = DEFAULT_PROMPT_COMMAND
    query_mode: str = PROMPT_QUERY
    browser_command: str = ""
    switch_command: str = DEFAULT_SWITCH_COMMAND
    switch_before_output: bool = True
    switch_on_failure: bool = False

    # Console hooks (wired by CLI/UI); stdout/stderr when unset.
    output_fn: Callable[[str], None] | None = None
    error_fn: Callable[[str], None] | None = None

    def __post_init__(self) -> None:
        picker_cfg = self.config.picker
        self.separator = str(picker_cfg.get("separator") or self.separator)
        self.prompt_label = str(
            picker_cfg.get("prompt_label") or self.prompt_label
        )
        self.prompt_command = str(
            picker_cfg.get("prompt_command") or self.prompt_command
        )
        self.query_mode = str(picker_cfg.get("query_mode") or self.query_mode)
        if self.query_mode not in QUERY_MODES:
            raise ValueError(
                f"Unknown picker.query_mode: {self.query_mode!r} "
                f"(expected one of {QUERY_MODES})"
            )

        self.browser_command = str(
            self.config.browser.get("command") or self.browser_command
        )

        ws_cfg = self.config.workspace
        self.switch_command = str(
            ws_cfg.get("switch_command") or self.switch_command
        )
        self.switch_before_output = bool(
            ws_cfg.get("switch_before_output", self.switch_before_output)
        )
        self.switch_on_failure = bool(
            ws_cfg.get("switch_on_failure", self.switch_on_failure)
        )

    # -----------------------
    # Pipeline steps
    # -----------------------

    def menu(self) -> str:
        return self.registry.render_menu(self.separator)

    def choose(self) -> str:
        """Show the menu and return the raw selection."""
        return self.picker.pick(self.menu())

    def resolve(self, raw: str, mode: str | None = None) -> Resolution:
        return resolve(raw, self.registry, self.separator, mode)

    def defers_query(self, resolution: Resolution) -> bool:
        """True when the shell, not the launcher, will ask for the query."""
        return (
            self.query_mode == SUBSHELL_QUERY
            and resolution.entry.needs_query
            and not resolution.query_present
        )

    def acquire_query(self, resolution: Resolution) -> str:
        """Return the query to substitute into the entry's template.

        The prompt only runs when the template needs a query and the
        selection carried no query segment at all. An explicitly empty
        segment ("g ") is used as-is. In subshell query mode the prompt
        command is returned as "$(...)" for the shell to run instead.

        Raises:
            PromptFailed: If the prompt was cancelled or failed
        """
        if not resolution.entry.needs_query:
            return resolution.query
        if resolution.query_present:
            return resolution.query
        if self.query_mode == SUBSHELL_QUERY:
            prompt = fill_command(self.prompt_command, label=self.prompt_label)
            return f"$({prompt})"
        return self.picker.ask(self.prompt_label)

    def materialize(
        self, entry: CommandEntry, query: str, deferred: bool = False
    ) -> str:
        # A deferred "$(...)" query is neither encoded nor single-quoted.
        return materialize(
            entry.template,
            query,
            encode_for_browser=entry.browser and not deferred,
            browser_command=self.browser_command if entry.browser else None,
            expand=deferred,
        )

    def execute(self, entry: CommandEntry, command: str) -> str:
        """Run the final command line and return its stdout.

        Raises:
            CommandFailed: On non-zero exit or launch failure; stdout
                is discarded
        """
        if self.show_run:
            self._out(f"{tag('RUN')} {entry.name} => {command}\n")

        exit_code, stdout, stderr, started_at, duration_ms = (
            self.executor.run(command)
        )
        if self.show_run:
            self._out(
                f"{tag('EXIT')} {exit_code} "
                f"(started {started_at}, {duration_ms} ms)\n"
            )
        if exit_code != 0:
            raise CommandFailed(entry.name, exit_code, stderr)
        return stdout

    def switch_workspace(self, entry: CommandEntry) -> bool:
        """Switch to the entry's workspace, if it has one.

        Returns:
            True if a switch was issued, False if the entry has none

        Raises:
            WorkspaceSwitchFailed: If the switcher exits non-zero
        """
        if not entry.switches_workspace:
            return False

        command = self.switch_command.replace(
            "{workspace}", str(entry.workspace)
        )
        exit_code, _stdout, stderr, _, _ = self.executor.run(command)
        if exit_code != 0:
            raise WorkspaceSwitchFailed(entry.workspace, stderr.strip())
        return True

    # -----------------------
    # Run
    # -----------------------

    def run(self, selection: str | None = None) -> int:
        """Run the launcher once.

        Args:
            selection: Typed input ("g hello world"); when None the
                menu picker is shown instead

        Returns:
            Process exit code
        """
        try:
            if selection is None:
                resolution = self.resolve(self.choose())
            else:
                # Command-line selections are always typed input.
                resolution = self.resolve(selection, TYPED_MODE)
            entry = resolution.entry

            query = self.acquire_query(resolution)
            command = self.materialize(
                entry, query, deferred=self.defers_query(resolution)
            )

            try:
                output = self.execute(entry, command)
            except CommandFailed:
                if self.switch_on_failure:
                    self._switch_after_failure(entry)
                raise

            if self.switch_before_output:
                try:
                    self.switch_workspace(entry)
                finally:
                    self._write_output(output)
            else:
                self._write_output(output)
                self.switch_workspace(entry)

            return 0

        except LauncherError as e:
            self.report(e)
            return e.exit_code

    def report(self, error: LauncherError) -> None:
        """Write a human-readable line for a failure."""
        if isinstance(error, UnknownPrefix):
            self._err(f"{error}\n")
            return

        if isinstance(error, WorkspaceSwitchFailed):
            self._err(f"{tag('WS')} {error}\n")
            return

        self._err(f"{tag('ERR')} {error}\n")
        if isinstance(error, CommandFailed) and error.stderr.strip():
            self._err(error.stderr.rstrip() + "\n")

    def _switch_after_failure(self, entry: CommandEntry) -> None:
        try:
            self.switch_workspace(entry)
        except WorkspaceSwitchFailed as e:
            self.report(e)

    def _write_output(self, output: str) -> None:
        if output:
            self._out(output)

    def _out(self, text: str) -> None:
        (self.output_fn or sys.stdout.write)(text)

    def _err(self, text: str) -> None:
        (self.error_fn or sys.stderr.write)(text)
