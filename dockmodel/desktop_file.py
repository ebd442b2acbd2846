"""Reading and writing of freedesktop ``.desktop`` entry files."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

_SECTION = "[Desktop Entry]"


def _split_list(value: str) -> list[str]:
    return [part for part in value.split(";") if part]


def _join_list(value: str | Iterable[str]) -> str:
    return value if isinstance(value, str) else ";".join(value)


class DesktopFile:
    """Key/value contents of the ``[Desktop Entry]`` section of a desktop file."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.app_id = ""
        self._values: dict[str, str] = {}
        if path is None:
            return
        try:
            with open(path, encoding="utf-8", errors="replace") as handle:
                lines = handle.read().splitlines()
        except OSError:
            return
        self.app_id = Path(path).stem.lower()
        parsing = False
        for raw in lines:
            line = raw.strip()
            if not parsing:
                parsing = line == _SECTION
                continue
            index = line.find("=")
            if 0 <= index < len(line) - 1:
                self._values[line[:index]] = line[index + 1:]
            elif line.startswith("["):
                break

    def write(self, path: str | os.PathLike[str]) -> None:
        """Write the entry to ``path``; raises ``OSError`` on failure."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(_SECTION + "\n")
            for key in sorted(self._values):
                handle.write(f"{key}={self._values[key]}\n")

    def get(self, key: str) -> str:
        return self._values.get(key, "")

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    @property
    def name(self) -> str:
        return self.get("Name")

    @name.setter
    def name(self, value: str) -> None:
        self.set("Name", value)

    @property
    def wm_class(self) -> str:
        return self.get("StartupWMClass")

    @wm_class.setter
    def wm_class(self, value: str) -> None:
        self.set("StartupWMClass", value)

    @property
    def generic_name(self) -> str:
        return self.get("GenericName")

    @generic_name.setter
    def generic_name(self, value: str) -> None:
        self.set("GenericName", value)

    @property
    def icon(self) -> str:
        return self.get("Icon")

    @icon.setter
    def icon(self, value: str) -> None:
        self.set("Icon", value)

    @property
    def exec_line(self) -> str:
        return self.get("Exec")

    @exec_line.setter
    def exec_line(self, value: str) -> None:
        self.set("Exec", value)

    @property
    def type(self) -> str:
        return self.get("Type")

    @type.setter
    def type(self, value: str) -> None:
        self.set("Type", value)

    @property
    def categories(self) -> list[str]:
        return _split_list(self.get("Categories"))

    @categories.setter
    def categories(self, value: str | Iterable[str]) -> None:
        self.set("Categories", _join_list(value))

    @property
    def only_show_in(self) -> list[str]:
        return _split_list(self.get("OnlyShowIn"))

    @only_show_in.setter
    def only_show_in(self, value: str | Iterable[str]) -> None:
        self.set("OnlyShowIn", _join_list(value))

    @property
    def not_show_in(self) -> list[str]:
        return _split_list(self.get("NotShowIn"))

    @not_show_in.setter
    def not_show_in(self, value: str | Iterable[str]) -> None:
        self.set("NotShowIn", _join_list(value))

    @property
    def no_display(self) -> bool:
        return self.get("NoDisplay").lower() == "true"

    @no_display.setter
    def no_display(self, value: bool) -> None:
        self.set("NoDisplay", "true" if value else "false")

    @property
    def hidden(self) -> bool:
        return self.get("Hidden").lower() == "true"

    @hidden.setter
    def hidden(self, value: bool) -> None:
        self.set("Hidden", "true" if value else "false")