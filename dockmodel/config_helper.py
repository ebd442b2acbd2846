"""Locating the dock and appearance configuration files."""

from __future__ import annotations

import fnmatch
import os
from pathlib import Path


class ConfigHelper:
    """Finds config files in a per-desktop-environment config directory."""

    CONFIG_PATTERN = "panel_*.conf"
    APPEARANCE_CONFIG = "appearance.conf"

    def __init__(self, config_dir: str | os.PathLike[str], desktop_env_name: str) -> None:
        self.config_dir = Path(config_dir) / desktop_env_name
        self.config_dir.mkdir(parents=True, exist_ok=True)

    @property
    def appearance_config_path(self) -> str:
        return str(self.config_dir / self.APPEARANCE_CONFIG)

    @staticmethod
    def wallpaper_config_key(desktop_id: str, screen: int) -> str:
        """Key of the wallpaper setting for a desktop on a 0-based screen."""
        suffix = "" if screen == 0 else f"_{screen + 1}"
        return f"wallpaper{desktop_id}{suffix}"

    @staticmethod
    def dock_config_file(file_id: int) -> str:
        return f"panel_{file_id}.conf"

    def _dock_config_path(self, file_name: str) -> str:
        return str(self.config_dir / file_name)

    def find_all_dock_configs(self) -> list[str]:
        """Paths of all existing dock configs, sorted by file name."""
        pattern = self.CONFIG_PATTERN.lower()
        names = sorted(
            child.name
            for child in self.config_dir.iterdir()
            if child.is_file() and fnmatch.fnmatchcase(child.name.lower(), pattern)
        )
        return [self._dock_config_path(name) for name in names]

    def find_next_dock_config(self) -> str:
        """Path of the first unused dock config file name."""
        file_id = 1
        while (self.config_dir / self.dock_config_file(file_id)).exists():
            file_id += 1
        return self._dock_config_path(self.dock_config_file(file_id))