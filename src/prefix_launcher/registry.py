# Prefix Launcher — Rofi Prefix Command Launcher
# Copyright (c) 2025
# TriFactoria (Andrew Blankfield)
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Command registry.

The registry is built once at startup from a literal list of
CommandEntry values and is read-only afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .utils import needs_query

MENU_SEPARATOR = " --> "

DUPLICATE_POLICIES = ("last", "first", "error")


@dataclass(frozen=True)
class CommandEntry:
    prefix: str
    name: str
    template: str
    workspace: int = 0
    browser: bool = False

    @property
    def needs_query(self) -> bool:
        return needs_query(self.template)

    @property
    def switches_workspace(self) -> bool:
        return bool(self.workspace)

    def menu_line(self, separator: str = MENU_SEPARATOR) -> str:
        return f"{self.prefix}{separator}{self.name}"


DEFAULT_COMMANDS: tuple[CommandEntry, ...] = (
    CommandEntry(
        prefix="a",
        name="Applications",
        template="rofi -show drun",
    ),
    CommandEntry(
        prefix="g",
        name="Google",
        template="https://www.google.com/search?q=%s",
        workspace=2,
        browser=True,
    ),
    CommandEntry(
        prefix="=",
        name="Calculator",
        template="rofi -show calc",
    ),
    CommandEntry(
        prefix="gpt",
        name="Chatgpt.com",
        template="https://chat.openai.com/?q=%s",
        workspace=2,
        browser=True,
    ),
    CommandEntry(
        prefix="claude",
        name="Claude ai",
        template="https://claude.ai/new/?q=%s",
        workspace=2,
        browser=True,
    ),
    CommandEntry(
        prefix="ai",
        name="Perplexity.ai",
        template="https://www.perplexity.ai/search?q=%s",
        workspace=2,
        browser=True,
    ),
    CommandEntry(
        prefix="w",
        name="window",
        template="rofi -show window",
    ),
)


class Registry:
    """Read-only prefix -> CommandEntry lookup."""

    def __init__(self, commands: Mapping[str, CommandEntry]) -> None:
        self._commands = MappingProxyType(dict(commands))

    @property
    def commands(self) -> Mapping[str, CommandEntry]:
        return self._commands

    @property
    def entries(self) -> list[CommandEntry]:
        return list(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, prefix: object) -> bool:
        return prefix in self._commands

    def lookup(self, prefix: str) -> CommandEntry | None:
        """Find an entry by prefix, or None if not registered."""
        return self._commands.get(prefix)

    def render_menu(self, separator: str = MENU_SEPARATOR) -> str:
        """Render one "<prefix> --> <name>" line per entry.

        Lines are sorted and deduplicated, matching what the picker
        displays.
        """
        lines = {e.menu_line(separator) for e in self._commands.values()}
        return "\n".join(sorted(lines))


def build(
    entries: Iterable[CommandEntry], duplicates: str = "last"
) -> Registry:
    """Build a Registry from an ordered list of entries.

    Args:
        entries: Command entries in registration order
        duplicates: What to do when a prefix repeats:
            "last" (later entry wins), "first" (earlier entry wins)
            or "error" (raise)

    Raises:
        ValueError: On an unknown policy, or a repeated prefix under
            the "error" policy
    """
    if duplicates not in DUPLICATE_POLICIES:
        raise ValueError(
            f"Unknown duplicate prefix policy: {duplicates!r} "
            f"(expected one of {', '.join(DUPLICATE_POLICIES)})"
        )

    commands: dict[str, CommandEntry] = {}
    for entry in entries:
        if entry.prefix in commands:
            if duplicates == "error":
                raise ValueError(f"Duplicate command prefix: {entry.prefix!r}")
            if duplicates == "first":
                continue
        commands[entry.prefix] = entry
    return Registry(commands)
