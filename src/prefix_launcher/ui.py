# Prefix Launcher — Rofi Prefix Command Launcher
# Copyright (c) 2025
# TriFactoria (Andrew Blankfield)
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.shortcuts import print_formatted_text
from prompt_toolkit.styles import Style

from .errors import PickerFailed, PromptFailed
from .interfaces import ConfigModel
from .registry import MENU_SEPARATOR


@dataclass(frozen=True)
class MenuItem:
    prefix: str
    name: str


# ----------------------------
# Config helpers
# ----------------------------


def _cfg_get_path(config: ConfigModel | None, path: str, default):
    if config is None or not hasattr(config, "get_path"):
        return default
    try:
        return config.get_path(path, default)
    except Exception:
        return default


def _cfg_dict(config: ConfigModel | None, path: str, default: dict) -> dict:
    val = _cfg_get_path(config, path, default)
    return val if isinstance(val, dict) else default


def _cfg_str(config: ConfigModel | None, path: str, default: str) -> str:
    val = _cfg_get_path(config, path, default)
    return str(val) if val is not None else default


# ----------------------------
# Theme / Style
# ----------------------------


def _default_style_dict() -> dict[str, str]:
    return {
        "completion-menu": "bg:#111111 #d0d0d0",
        "completion-menu.completion": "bg:#111111 #d0d0d0",
        "completion-menu.completion.current": "bg:#303030 #ffffff bold",
        "completion-menu.meta.completion": "bg:#111111 #808080",
        "completion-menu.meta.completion.current": "bg:#303030 #a0a0a0",
        "scrollbar.background": "bg:#202020",
        "scrollbar.button": "bg:#505050",
    }


def _build_style(config: ConfigModel | None) -> Style:
    base = _default_style_dict()
    overrides = _cfg_dict(config, "ui.theme.style", {})
    # only keep string->string
    for k, v in list(overrides.items()):
        if isinstance(k, str) and isinstance(v, str):
            base[k] = v
    return Style.from_dict(base)


def parse_menu(menu: str, separator: str = MENU_SEPARATOR) -> list[MenuItem]:
    """Turn rendered "<prefix> --> <name>" lines back into items."""
    items: list[MenuItem] = []
    for line in (menu or "").splitlines():
        prefix, sep, name = line.partition(separator)
        prefix = prefix.strip()
        if prefix:
            items.append(
                MenuItem(prefix=prefix, name=name.strip() if sep else "")
            )
    return items


# ----------------------------
# Completion
# ----------------------------


class PrefixCompleter(Completer):
    """Completes command prefixes on the first token only."""

    def __init__(self, items: list[MenuItem] | None = None) -> None:
        self.items = items or []

    def get_completions(
        self, document, complete_event
    ) -> Iterable[Completion]:
        s = (document.text_before_cursor or "").lstrip()

        # Past the prefix: the rest is the query.
        if " " in s:
            return

        for it in self.items:
            if it.prefix.startswith(s):
                yield Completion(
                    it.prefix,
                    start_position=-len(s),
                    display_meta=it.name,
                )


# ----------------------------
# PromptSession picker
# ----------------------------


class PromptToolkitUI:
    """
    Terminal implementation of the Picker protocol.

    The menu is offered as prefix completions (friendly name as meta);
    whatever the user types is returned, so "g hello world" resolves in
    typed-input mode. Ctrl+C / Ctrl+D cancel like closing rofi.
    """

    def __init__(self, config: ConfigModel | None = None) -> None:
        self.config = config
        self.session: PromptSession[str] | None = None
        self._completer = PrefixCompleter()
        self._style = _build_style(config)
        self._separator = _cfg_str(config, "picker.separator", MENU_SEPARATOR)

    def _ensure_session(self) -> None:
        if self.session is not None:
            return

        self.session = PromptSession(
            completer=self._completer,
            complete_while_typing=True,
            style=self._style,
        )

    # ---------- Picker protocol ----------

    def pick(self, menu: str) -> str:
        self._completer.items = parse_menu(menu, self._separator)
        self._ensure_session()
        assert self.session is not None

        try:
            return self.session.prompt("Prefix: ")
        except (KeyboardInterrupt, EOFError) as e:
            raise PickerFailed("Menu selection cancelled") from e

    def ask(self, label: str) -> str:
        self._ensure_session()
        assert self.session is not None

        # No prefix completion while typing a query.
        self._completer.items = []
        try:
            answer = self.session.prompt(f"{label} ")
        except (KeyboardInterrupt, EOFError) as e:
            raise PromptFailed("Query prompt cancelled") from e
        return answer.strip()

    # ---------- output ----------

    def write(self, text: str) -> None:
        """Write EXACTLY what we receive (no extra newline)."""
        if not text:
            return
        print_formatted_text(ANSI(text), style=self._style, end="")
