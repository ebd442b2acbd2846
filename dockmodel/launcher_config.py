"""Configuration of a single dock launcher."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dockmodel.command_utils import filter_field_codes
from dockmodel.desktop_file import DesktopFile


@dataclass
class LauncherConfig:
    """A launcher: application id, display name, icon and command."""

    app_id: str = ""
    name: str = ""
    icon: str = ""
    command: str = ""

    @classmethod
    def from_desktop_file(cls, path: str | os.PathLike[str]) -> LauncherConfig:
        """Build a launcher from a desktop entry file."""
        entry = DesktopFile(path)
        return cls(
            app_id=Path(path).stem,
            name=entry.name,
            icon=entry.icon,
            command=filter_field_codes(entry.exec_line),
        )

    def save_to_file(self, directory: str | os.PathLike[str]) -> None:
        """Save as ``<directory>/<app_id>.desktop`` in desktop file format."""
        entry = DesktopFile()
        entry.name = self.name
        entry.icon = self.icon
        entry.exec_line = self.command
        entry.type = "Application"
        entry.write(Path(directory) / f"{self.app_id}.desktop")