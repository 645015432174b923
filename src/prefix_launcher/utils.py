# Prefix Launcher — Rofi Prefix Command Launcher
# Copyright (c) 2025
# TriFactoria (Andrew Blankfield)
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Utility functions for the launcher.

Command templates use a two-token grammar:

- ``%s``  -- placeholder, replaced by the query
- ``\\%s`` -- escaped placeholder, emitted as a literal ``%s``

Substitution order is fixed (see ``materialize``) so that escaped tokens
never receive the query.
"""

import re
import shlex
from typing import Any

PLACEHOLDER = "%s"
ESCAPED_PLACEHOLDER = "\\%s"

# Must not occur in templates or queries.
_SENTINEL = "\x00__ESCAPED_PERCENT_S__\x00"

_UNESCAPED_RE = re.compile(r"(^|[^\\])%s")


def format_table(
    headers: list[str],
    rows: list[list[Any]],
    title: str = ""
) -> str:
    """
    Format data as a simple text table without external dependencies.

    Args:
        headers: List of column header names
        rows: List of rows, where each row is a list of values
        title: Optional title to display above the table

    Returns:
        Formatted table as a string
    """
    if not rows:
        return ""

    str_headers = [str(h) for h in headers]
    str_rows = [[str(val) for val in row] for row in rows]

    col_widths = []
    for i, header in enumerate(str_headers):
        max_width = len(header)
        for row in str_rows:
            if i < len(row):
                max_width = max(max_width, len(row[i]))
        col_widths.append(max_width)

    lines = []
    if title:
        lines.append(title)

    lines.append(
        "  ".join(h.ljust(col_widths[i]) for i, h in enumerate(str_headers))
    )
    for row in str_rows:
        lines.append(
            "  ".join(val.ljust(col_widths[i]) for i, val in enumerate(row))
        )

    return "\n".join(line.rstrip() for line in lines)


def shell_quote(s: str) -> str:
    """Shell-escape string for safe substitution in shell commands."""
    return shlex.quote(s)


def needs_query(template: str) -> bool:
    """Return True if the template has at least one unescaped ``%s``."""
    if PLACEHOLDER not in template:
        return False
    return bool(_UNESCAPED_RE.search(template))


def browser_encode(query: str) -> str:
    """Replace every space with ``+`` ("best pizza" -> "best+pizza")."""
    return query.replace(" ", "+")


def substitute_placeholder(template: str, query: str) -> str:
    """Replace unescaped ``%s`` with query; ``\\%s`` becomes literal ``%s``.

    Args:
        template: Command template
        query: Value for every unescaped placeholder

    Returns:
        The template with placeholders expanded
    """
    result = template.replace(ESCAPED_PLACEHOLDER, _SENTINEL)
    result = result.replace(PLACEHOLDER, query)
    return result.replace(_SENTINEL, PLACEHOLDER)


def wrap_browser(
    target: str, browser_command: str, expand: bool = False
) -> str:
    """Build the browser invocation that opens target.

    With expand=True the target is double-quoted so a "$(...)" inside it
    is run by the shell; only backslash, double quote and backtick are
    escaped.
    """
    if not expand:
        return f"{browser_command} {shell_quote(target)}"
    escaped = re.sub(r'([\\"`])', r"\\\1", target)
    return f'{browser_command} "{escaped}"'


def materialize(
    template: str,
    query: str,
    encode_for_browser: bool = False,
    browser_command: str | None = None,
    expand: bool = False,
) -> str:
    """Expand a command template into the final shell line.

    Steps, in order:
    1. protect ``\\%s`` behind a sentinel
    2. browser-encode the query (spaces -> ``+``) if requested
    3. replace remaining ``%s`` with the query
    4. restore the sentinel as literal ``%s``
    5. wrap in the browser launcher if one is given

    Templates that bake the browser call in themselves (e.g. a nested
    ``$(rofi -dmenu ...)`` sub-shell) pass ``browser_command=None`` and
    are returned after steps 1-4. expand=True keeps shell expansions
    in the query live inside the browser wrap.
    """
    if encode_for_browser:
        query = browser_encode(query)

    command = substitute_placeholder(template, query)

    if browser_command:
        command = wrap_browser(command, browser_command, expand=expand)
    return command


def fill_command(template: str, **values: Any) -> str:
    """Replace ``{key}`` fields in a configured command line.

    Values are shell-quoted ("{label}" -> "'Enter Search Query:'").
    """
    command = template
    for key, value in values.items():
        command = command.replace(f"{{{key}}}", shell_quote(str(value)))
    return command
