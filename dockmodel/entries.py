"""Application menu entries and categories."""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field


@dataclass
class ApplicationEntry:
    """An application entry in the application menu."""

    app_id: str
    name: str
    generic_name: str = ""
    icon: str = ""
    command: str = ""
    desktop_file: str = ""

    @property
    def sort_key(self) -> str:
        return self.name.lower()

    def __lt__(self, other: ApplicationEntry) -> bool:
        return self.sort_key < other.sort_key


@dataclass
class Category:
    """A category of the application menu, holding entries sorted by name."""

    name: str
    display_name: str
    icon: str
    entries: list[ApplicationEntry] = field(default_factory=list)

    def insert_sorted(self, entry: ApplicationEntry) -> ApplicationEntry:
        """Insert ``entry`` before the first entry not ordered before it."""
        index = bisect.bisect_left(
            [existing.sort_key for existing in self.entries], entry.sort_key
        )
        self.entries.insert(index, entry)
        return entry