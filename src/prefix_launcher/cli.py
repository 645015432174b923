# Prefix Launcher — Rofi Prefix Command Launcher
# Copyright (c) 2025
# TriFactoria (Andrew Blankfield)
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Prefix Launcher CLI entry point.

Design:
- CLI owns process startup, config loading and registry construction.
- Launcher is the run engine (registry+executor+picker+config injected).
- Rofi is the default picker; --tty (or LAUNCHER_TTY=1) uses the
  prompt_toolkit terminal UI instead.

Usage:
    prefix-launcher                  show the menu
    prefix-launcher g hello world    run a typed selection directly
    prefix-launcher --tty            pick in the terminal
    prefix-launcher --list           print the command table
    prefix-launcher --menu           print the menu lines
    prefix-launcher -v ...           print the command and its exit status
    prefix-launcher -- -v            "--" ends the flags

Flags are only read before the first selection word.
"""

from __future__ import annotations

import os
import sys

from . import config
from .config import tag
from .executor import SubprocessExecutor
from .interfaces import ConfigModel, Picker
from .launcher import Launcher, write_crash_log
from .picker import RofiPicker
from .registry import DEFAULT_COMMANDS, Registry, build
from .ui import PromptToolkitUI
from .utils import format_table

FLAGS = {"--tty", "--list", "--menu", "-v", "--verbose"}


def build_registry(cfg: ConfigModel) -> Registry:
    duplicates = str(cfg.registry.get("duplicate_prefixes") or "last")
    return build(DEFAULT_COMMANDS, duplicates=duplicates)


def build_executor(cfg: ConfigModel) -> SubprocessExecutor:
    execution = cfg.execution
    return SubprocessExecutor(
        timeout=execution.get("timeout"),
        shell=execution.get("shell"),
    )


def format_command_table(registry: Registry) -> str:
    rows = [
        [
            e.prefix,
            e.name,
            e.template,
            e.workspace or "-",
            "yes" if e.browser else "no",
        ]
        for e in sorted(registry.entries, key=lambda e: e.prefix)
    ]
    return format_table(
        ["PREFIX", "NAME", "TEMPLATE", "WORKSPACE", "BROWSER"], rows
    )


def split_args(args: list[str]) -> tuple[set[str], list[str]]:
    """Split argv into leading flags and the typed selection words.

    Flags are only read before the first word; "--" ends them
    explicitly, so "g what does -v mean" keeps its "-v".
    """
    flags: set[str] = set()
    for i, arg in enumerate(args):
        if arg == "--":
            return flags, args[i + 1 :]
        if arg not in FLAGS:
            return flags, args[i:]
        flags.add(arg)
    return flags, []


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the launcher CLI."""
    args = list(sys.argv[1:] if argv is None else argv)
    flags, words = split_args(args)
    selection = " ".join(words) if words else None

    try:
        cfg = config.load_system_config()
        registry = build_registry(cfg)

        if "--list" in flags:
            print(format_command_table(registry))
            return 0

        executor = build_executor(cfg)
        use_tty = "--tty" in flags or os.environ.get("LAUNCHER_TTY") == "1"

        ui: PromptToolkitUI | None = None
        picker: Picker
        if use_tty:
            ui = PromptToolkitUI(cfg)
            picker = ui
        else:
            picker = RofiPicker(executor, cfg)

        launcher = Launcher(
            registry=registry,
            executor=executor,
            picker=picker,
            config=cfg,
            show_run=bool(flags & {"-v", "--verbose"}),
        )

        if ui is not None:
            launcher.output_fn = ui.write
            launcher.error_fn = ui.write

        if "--menu" in flags:
            print(launcher.menu())
            return 0

        return launcher.run(selection)
    except Exception as e:
        write_crash_log(e, selection=selection or "")
        sys.stderr.write(
            f"{tag('ERROR')} Unhandled exception: {type(e).__name__}: {e}\n"
        )
        return 1


def run() -> None:
    sys.exit(main())
