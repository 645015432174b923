# Prefix Launcher — Rofi Prefix Command Launcher
# Copyright (c) 2025
# TriFactoria (Andrew Blankfield)
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Prefix resolution.

The picker returns either a menu line ("g --> Google") or whatever the
user typed ("g hello world"). Menu lines never carry a query; typed
input carries one after the first space.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import UnknownPrefix
from .registry import MENU_SEPARATOR, CommandEntry, Registry

MENU_MODE = "menu"
TYPED_MODE = "typed"


@dataclass(frozen=True)
class Resolution:
    entry: CommandEntry
    query: str
    # False when the input had no query segment at all, which is
    # different from an empty one ("g " vs "g").
    query_present: bool
    mode: str


def split_selection(
    raw: str, separator: str = MENU_SEPARATOR, mode: str | None = None
) -> tuple[str, str, bool, str]:
    """Split a picker selection into its prefix and query.

    Args:
        raw: Selection as returned by the picker or typed by the user
        separator: Menu line separator
        mode: MENU_MODE or TYPED_MODE to force a mode; None detects it
            from the presence of the separator

    Returns:
        (prefix, query, query_present, mode)
    """
    if mode not in (None, MENU_MODE, TYPED_MODE):
        raise ValueError(f"Unknown selection mode: {mode!r}")

    # Keep trailing spaces: "g " carries an explicitly empty query.
    selection = (raw or "").rstrip("\r\n").lstrip()

    if mode is None:
        mode = MENU_MODE if separator in selection else TYPED_MODE

    if mode == MENU_MODE:
        prefix, _, _name = selection.partition(separator)
        return prefix.strip(), "", False, MENU_MODE

    prefix, space, query = selection.partition(" ")
    return prefix, query, bool(space), TYPED_MODE


def resolve(
    raw: str,
    registry: Registry,
    separator: str = MENU_SEPARATOR,
    mode: str | None = None,
) -> Resolution:
    """Resolve a selection to its registry entry.

    Raises:
        UnknownPrefix: If the prefix is not registered
    """
    prefix, query, query_present, mode = split_selection(
        raw, separator, mode
    )

    entry = registry.lookup(prefix)
    if entry is None:
        raise UnknownPrefix(prefix)

    return Resolution(
        entry=entry, query=query, query_present=query_present, mode=mode
    )
