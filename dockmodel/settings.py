"""An INI-file backed key/value store with ``group/key`` style keys."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any
from urllib.parse import quote, unquote

_GENERAL = "General"
_FALSE_WORDS = ("", "0", "false")
_ESCAPES = {"n": "\n", "t": "\t", "\\": "\\", '"': '"'}


def _split_key(key: str) -> tuple[str, str]:
    group, _, name = key.rpartition("/")
    return group, name


def _escape_name(name: str) -> str:
    return quote(name, safe="")


def _encode_value(value: str) -> str:
    if value == value.strip() and not value.startswith('"') and "\n" not in value:
        return value
    body = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{body}"'


def _decode_value(text: str) -> str:
    if len(text) < 2 or not (text.startswith('"') and text.endswith('"')):
        return text
    body = text[1:-1]
    chars: list[str] = []
    escaped = False
    for char in body:
        if escaped:
            chars.append(_ESCAPES.get(char, char))
            escaped = False
        elif char == "\\":
            escaped = True
        else:
            chars.append(char)
    return "".join(chars)


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _convert(raw: str, default: Any) -> Any:
    if isinstance(default, bool):
        return raw.strip().lower() not in _FALSE_WORDS
    if isinstance(default, int):
        try:
            return int(raw.strip())
        except ValueError:
            return 0
    if isinstance(default, float):
        try:
            return float(raw.strip())
        except ValueError:
            return 0.0
    return raw


class IniSettings:
    """Settings kept in memory and written to an INI file on :meth:`sync`.

    Keys without a slash live in the ``[General]`` section; ``"Group/key"``
    lives in section ``[Group]``. Values read back are converted to the type
    of the default passed to :meth:`value`.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self._groups: dict[str, dict[str, str]] = {}
        if self.path.is_file():
            self._read()

    def _read(self) -> None:
        group = ""
        text = self.path.read_text(encoding="utf-8", errors="replace")
        for raw in text.splitlines():
            line = raw.strip()
            if not line or line[0] in ";#":
                continue
            if line.startswith("[") and line.endswith("]"):
                name = unquote(line[1:-1])
                group = "" if name == _GENERAL else name
                continue
            key, sep, value = line.partition("=")
            if not sep:
                continue
            self._groups.setdefault(group, {})[unquote(key.strip())] = _decode_value(
                value.strip()
            )

    def __contains__(self, key: str) -> bool:
        group, name = _split_key(key)
        return name in self._groups.get(group, {})

    def value(self, key: str, default: Any = None) -> Any:
        """Return the value of ``key`` converted to the type of ``default``."""
        group, name = _split_key(key)
        raw = self._groups.get(group, {}).get(name)
        if raw is None:
            return default
        return _convert(raw, default)

    def set_value(self, key: str, value: Any) -> None:
        group, name = _split_key(key)
        self._groups.setdefault(group, {})[name] = _to_text(value)

    def sync(self) -> None:
        """Write all settings to the file, creating its directory if needed."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        lines: list[str] = []
        for group in sorted(self._groups, key=lambda g: (g != "", g)):
            values = self._groups[group]
            if not values:
                continue
            if lines:
                lines.append("")
            lines.append(f"[{_escape_name(group or _GENERAL)}]")
            lines.extend(
                f"{_escape_name(key)}={_encode_value(values[key])}" for key in sorted(values)
            )
        self.path.write_text("\n".join(lines) + ("\n" if lines else ""), encoding="utf-8")