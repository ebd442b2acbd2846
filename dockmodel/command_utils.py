"""Helpers for working with launcher command lines."""

from __future__ import annotations

import os
from collections.abc import Iterable


def filter_field_codes(command: str) -> str:
    """Strip desktop-entry field codes (``%u``, ``%F``...) and a leading ``env VAR=...``."""
    filtered = command
    if "%" in command:
        cut = command.index("%") - 1
        if cut >= 0:
            filtered = command[:cut]

    if filtered.startswith("env"):
        last_assign = filtered.rfind("=")
        start = last_assign if last_assign >= 0 else max(len(filtered) - 1, 0)
        space = filtered.find(" ", start)
        filtered = filtered[space + 1:]

    return filtered


def command_exists(commands: Iterable[str]) -> str:
    """Return the first of ``commands`` found on ``PATH``, or an empty string."""
    candidates = list(commands)
    search_dirs = [d for d in os.environ.get("PATH", "").split(":") if d]
    for directory in search_dirs:
        for command in candidates:
            if os.path.exists(os.path.join(directory, command)):
                return command
    return ""