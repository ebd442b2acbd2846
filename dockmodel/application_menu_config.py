"""The application menu: desktop entries found on the system, grouped by category."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from dockmodel.command_utils import filter_field_codes
from dockmodel.desktop_file import DesktopFile
from dockmodel.entries import ApplicationEntry, Category

# Main categories of the freedesktop menu specification:
# (name, display name, icon), sorted by display name.
_MAIN_CATEGORIES = (
    ("Development", "Development", "applications-development"),
    ("Education", "Education", "applications-science"),
    ("Game", "Games", "applications-games"),
    ("Graphics", "Graphics", "applications-graphics"),
    ("Network", "Internet", "applications-internet"),
    ("AudioVideo", "Multimedia", "applications-multimedia"),
    ("Office", "Office", "applications-office"),
    ("Science", "Science", "applications-science"),
    ("Settings", "Settings", "preferences-system"),
    ("System", "System", "applications-system"),
    ("Utility", "Utilities", "applications-utilities"),
)

_CINNAMON_NAMES = ("X-Cinnamon", "Cinnamon")
_VIRTUALBOX_IDS = ("virtualboxvm", "virtualboxmachine", "virtualboxmanager")


def get_entry_dirs() -> list[str]:
    """Directories that hold application desktop files, most specific first."""
    entry_dirs = [str(Path.home()) + "/.local/share/applications"]
    data_dirs = [d for d in os.environ.get("XDG_DATA_DIRS", "").split(":") if d]
    if not data_dirs:
        data_dirs = ["/usr/share/", "/usr/local/share/"]
    entry_dirs.extend(directory + "/applications" for directory in data_dirs)
    return entry_dirs


class ApplicationMenuConfig:
    """Application entries loaded from desktop files, organised by category."""

    def __init__(
        self,
        entry_dirs: Iterable[str | os.PathLike[str]] | None = None,
        desktop_env_name: str = "",
        system_categories: Sequence[Category] = (),
    ) -> None:
        self.entry_dirs = [
            os.fspath(d) for d in (get_entry_dirs() if entry_dirs is None else entry_dirs)
        ]
        self.desktop_env_name = desktop_env_name
        self._categories = [Category(*spec) for spec in _MAIN_CATEGORIES]
        self._category_index = {c.name: i for i, c in enumerate(self._categories)}
        self._system_categories = list(system_categories)
        self._entries: dict[str, ApplicationEntry] = {}
        self._wm_classes: dict[str, ApplicationEntry] = {}
        self._names: dict[str, ApplicationEntry] = {}
        self._listeners: list[Callable[[], None]] = []
        self._load_entries()

    @property
    def categories(self) -> list[Category]:
        return self._categories

    @property
    def system_categories(self) -> list[Category]:
        return self._system_categories

    def add_listener(self, callback: Callable[[], None]) -> None:
        """Register a callback run after every reload."""
        self._listeners.append(callback)

    def reload(self) -> None:
        """Reload all entries from disk and notify listeners."""
        self._clear_entries()
        self._load_entries()
        for callback in list(self._listeners):
            callback()

    def _clear_entries(self) -> None:
        for category in self._categories:
            category.entries.clear()
        self._entries.clear()
        self._wm_classes.clear()
        self._names.clear()

    def _load_entries(self) -> None:
        for entry_dir in self.entry_dirs:
            directory = Path(entry_dir)
            if not directory.is_dir():
                continue
            files = sorted(
                child.name
                for child in directory.iterdir()
                if child.is_file() and child.name.endswith(".desktop")
            )
            for name in files:
                self._load_entry(entry_dir + "/" + name)

    def _is_shown(self, desktop_file: DesktopFile) -> bool:
        if desktop_file.no_display or desktop_file.hidden:
            return False
        if desktop_file.type != "Application":
            return False
        env = self.desktop_env_name
        only_show_in = desktop_file.only_show_in
        if only_show_in and env not in only_show_in:
            if env not in _CINNAMON_NAMES or "GNOME" not in only_show_in:
                return False
        return env not in desktop_file.not_show_in

    def _load_entry(self, path: str) -> bool:
        desktop_file = DesktopFile(path)
        if not self._is_shown(desktop_file):
            return False
        categories = desktop_file.categories
        if not categories:
            return False

        app_id = desktop_file.app_id
        for category_name in categories:
            index = self._category_index.get(category_name)
            if index is None or app_id in self._entries:
                continue
            entry = ApplicationEntry(
                app_id=app_id,
                name=desktop_file.name,
                generic_name=desktop_file.generic_name,
                icon=desktop_file.icon,
                command=filter_field_codes(desktop_file.exec_line),
                desktop_file=path,
            )
            self._categories[index].insert_sorted(entry)
            self._entries[app_id] = entry
            wm_class = desktop_file.wm_class.lower()
            if wm_class:
                self._wm_classes[wm_class] = entry
            lowered_name = desktop_file.name.lower()
            if lowered_name:
                self._names[lowered_name] = entry
        return True

    def find_application(self, app_id: str) -> ApplicationEntry | None:
        """Find an entry by app id, then by WM class, then by lower-cased name."""
        for category in self._system_categories:
            for entry in category.entries:
                if entry.app_id == app_id:
                    return entry
        for table in (self._entries, self._wm_classes, self._names):
            if app_id in table:
                return table[app_id]
        return None

    def is_app_menu_entry(self, app_id: str) -> bool:
        return app_id in self._entries

    def try_matching_application_id(self, app_id: str) -> str:
        """Guess the menu's id for ``app_id``; an empty string if nothing matches."""
        normalized = "".join(app_id.lower().split())
        if self.find_application(normalized) is not None:
            return normalized

        if normalized == "qdbusviewer":
            candidate = "org.qt.qdbusviewer6"
            if self.find_application(candidate) is not None:
                return candidate

        if normalized in _VIRTUALBOX_IDS:
            candidate = "virtualbox"
            if self.find_application(candidate) is not None:
                return candidate

        return ""

    def search_applications(self, text: str, max_results: int) -> list[ApplicationEntry]:
        """Entries whose name (or generic name) matches ``text``, sorted by name."""
        needle = text.casefold()
        results: list[ApplicationEntry] = []
        for category in self._categories:
            for entry in category.entries:
                if len(text) == 1:
                    matched = entry.name.casefold().startswith(needle)
                else:
                    matched = (
                        needle in entry.name.casefold()
                        or needle in entry.generic_name.casefold()
                    )
                if matched:
                    results.append(entry)
                if len(results) == max_results:
                    return sorted(results, key=lambda e: e.sort_key)
        return sorted(results, key=lambda e: e.sort_key)