"""The dock model: all dock configs plus the shared appearance config."""

from __future__ import annotations

import os
import shutil
import subprocess
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from dockmodel.appearance import (
    DEFAULT_ACTIVE_INDICATOR_COLOR,
    DEFAULT_APPLICATION_MENU_BACKGROUND_ALPHA,
    DEFAULT_APPLICATION_MENU_FONT_SIZE,
    DEFAULT_APPLICATION_MENU_NAME,
    DEFAULT_AUTO_HIDE,
    DEFAULT_BACKGROUND_ALPHA,
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_BORDER_COLOR,
    DEFAULT_CLOCK_FONT_SCALE_FACTOR,
    DEFAULT_INACTIVE_INDICATOR_COLOR,
    DEFAULT_MAX_SIZE,
    DEFAULT_MIN_SIZE,
    DEFAULT_SHOW_APPLICATION_MENU,
    DEFAULT_SHOW_CLOCK,
    DEFAULT_SHOW_PAGER,
    DEFAULT_SHOW_TASK_MANAGER,
    DEFAULT_SPACING_FACTOR,
    DEFAULT_TOOLTIP_FONT_SIZE,
    DEFAULT_USE_24_HOUR_CLOCK,
    DEFAULT_VISIBILITY,
    LOCK_SCREEN_ID,
    SEPARATOR_ID,
    AppearanceConfig,
    Color,
    PanelPosition,
    PanelVisibility,
)
from dockmodel.application_menu_config import ApplicationMenuConfig
from dockmodel.config_helper import ConfigHelper
from dockmodel.entries import ApplicationEntry, Category
from dockmodel.launcher_config import LauncherConfig
from dockmodel.settings import IniSettings

# Signals that listeners can connect to.
APPEARANCE_OUTDATED = "appearance_outdated"
APPEARANCE_CHANGED = "appearance_changed"
DOCK_ADDED = "dock_added"
DOCK_LAUNCHERS_CHANGED = "dock_launchers_changed"
WALLPAPER_CHANGED = "wallpaper_changed"
APPLICATION_MENU_CONFIG_CHANGED = "application_menu_config_changed"

SIGNALS = frozenset(
    {
        APPEARANCE_OUTDATED,
        APPEARANCE_CHANGED,
        DOCK_ADDED,
        DOCK_LAUNCHERS_CHANGED,
        WALLPAPER_CHANGED,
        APPLICATION_MENU_CONFIG_CHANGED,
    }
)

_AUTO_HIDE = "autoHide"
_VISIBILITY = "visibility"
_POSITION = "position"
_SCREEN = "screen"
_SHOW_APPLICATION_MENU = "showApplicationMenu"
_SHOW_CLOCK = "showClock"
_SHOW_PAGER = "showPager"
_SHOW_TASK_MANAGER = "showTaskManager"
_LAUNCHERS = "launchers"


class MultiDockModel:
    """Holds the configs of all docks and the global appearance config."""

    def __init__(
        self,
        config_dir: str | os.PathLike[str],
        desktop_env_name: str = "",
        screen_count: int = 1,
        menu_config: ApplicationMenuConfig | None = None,
        default_launcher_ids: Iterable[str] = (),
    ) -> None:
        self.screen_count = screen_count
        self.default_launcher_ids = list(default_launcher_ids)
        self.config_helper = ConfigHelper(config_dir, desktop_env_name)
        self.appearance = AppearanceConfig(self.config_helper.appearance_config_path)
        self.menu_config = (
            menu_config
            if menu_config is not None
            else ApplicationMenuConfig(desktop_env_name=desktop_env_name)
        )
        self._listeners: dict[str, list[Callable[..., None]]] = {s: [] for s in SIGNALS}
        self._docks: dict[int, tuple[str, IniSettings]] = {}
        self._next_dock_id = 1

        self._load_docks()
        self.menu_config.add_listener(lambda: self._emit(APPLICATION_MENU_CONFIG_CHANGED))
        if self.appearance.max_icon_size < self.appearance.min_icon_size:
            self.appearance.max_icon_size = self.appearance.min_icon_size
        if self.appearance.first_run_window_count_indicator():
            self.appearance.active_indicator_color = Color.parse(DEFAULT_ACTIVE_INDICATOR_COLOR)
            self.appearance.inactive_indicator_color = Color.parse(
                DEFAULT_INACTIVE_INDICATOR_COLOR
            )

    # Signals.

    def connect(self, signal: str, callback: Callable[..., None]) -> None:
        """Register ``callback`` for one of the names in ``SIGNALS``."""
        if signal not in self._listeners:
            raise ValueError(f"unknown signal: {signal!r}")
        self._listeners[signal].append(callback)

    def _emit(self, signal: str, *args: Any) -> None:
        for callback in list(self._listeners[signal]):
            callback(*args)

    def notify_wallpaper_changed(self, screen: int) -> None:
        """Tell listeners the wallpaper of the current desktop on ``screen`` changed."""
        self._emit(WALLPAPER_CHANGED, screen)

    # Docks.

    def _load_docks(self) -> None:
        dock_id = 1
        self._docks.clear()
        for config_path in self.config_helper.find_all_dock_configs():
            self._docks[dock_id] = (config_path, IniSettings(config_path))
            if self.screen(dock_id) < self.screen_count:
                dock_id += 1
            else:
                del self._docks[dock_id]
        self._next_dock_id = dock_id
        self.maybe_add_dock_for_multi_screen()

    def dock_count(self) -> int:
        return len(self._docks)

    def dock_ids(self) -> list[int]:
        return sorted(self._docks)

    def _dock(self, dock_id: int) -> tuple[str, IniSettings]:
        try:
            return self._docks[dock_id]
        except KeyError:
            raise KeyError(f"no dock with id {dock_id}") from None

    def _dock_config_path(self, dock_id: int) -> str:
        return self._dock(dock_id)[0]

    def _register_dock(self, config_path: str, position: PanelPosition, screen: int) -> int:
        dock_id = self._next_dock_id
        self._next_dock_id += 1
        self._docks[dock_id] = (config_path, IniSettings(config_path))
        self.set_panel_position(dock_id, position)
        self.set_screen(dock_id, screen)
        return dock_id

    def add_dock(
        self,
        position: PanelPosition = PanelPosition.BOTTOM,
        screen: int = 0,
        show_application_menu: bool = True,
        show_pager: bool = True,
        show_task_manager: bool = True,
        show_clock: bool = True,
    ) -> int:
        """Add a new dock and return its id."""
        config_path = self.config_helper.find_next_dock_config()
        dock_id = self._register_dock(config_path, position, screen)
        self.set_visibility(dock_id, DEFAULT_VISIBILITY)
        self.set_launchers(dock_id, self.default_launchers())
        self.set_show_application_menu(dock_id, show_application_menu)
        self.set_show_pager(dock_id, show_pager)
        self.set_show_task_manager(dock_id, show_task_manager)
        self.set_show_clock(dock_id, show_clock)
        self._emit(DOCK_ADDED, dock_id)

        if self.dock_count() == 1:
            appearance = self.appearance
            appearance.min_icon_size = DEFAULT_MIN_SIZE
            appearance.max_icon_size = DEFAULT_MAX_SIZE
            appearance.spacing_factor = DEFAULT_SPACING_FACTOR
            appearance.background_color = Color.parse(DEFAULT_BACKGROUND_COLOR).with_alpha(
                DEFAULT_BACKGROUND_ALPHA
            )
            appearance.border_color = Color.parse(DEFAULT_BORDER_COLOR)
            appearance.tooltip_font_size = DEFAULT_TOOLTIP_FONT_SIZE
            appearance.application_menu_name = DEFAULT_APPLICATION_MENU_NAME
            appearance.application_menu_font_size = DEFAULT_APPLICATION_MENU_FONT_SIZE
            appearance.application_menu_background_alpha = (
                DEFAULT_APPLICATION_MENU_BACKGROUND_ALPHA
            )
            appearance.use_24_hour_clock = DEFAULT_USE_24_HOUR_CLOCK
            appearance.clock_font_scale_factor = DEFAULT_CLOCK_FONT_SCALE_FACTOR
            appearance.sync()
        self._sync_dock_config(dock_id)
        return dock_id

    def clone_dock(self, src_dock_id: int, position: PanelPosition, screen: int) -> int:
        """Add a copy of an existing dock at ``position`` on ``screen``; return its id."""
        config_path = self.config_helper.find_next_dock_config()
        src_path = self._dock_config_path(src_dock_id)
        if os.path.exists(src_path) and not os.path.exists(config_path):
            shutil.copyfile(src_path, config_path)
        dock_id = self._register_dock(config_path, position, screen)
        self._emit(DOCK_ADDED, dock_id)
        self._sync_dock_config(dock_id)
        return dock_id

    def remove_dock(self, dock_id: int) -> None:
        Path(self._dock_config_path(dock_id)).unlink(missing_ok=True)
        del self._docks[dock_id]

    def maybe_add_dock_for_multi_screen(self) -> None:
        """On first run with several screens, clone the only dock to every other screen."""
        if (
            self.screen_count > 1
            and self.dock_count() == 1
            and self.appearance.first_run_multi_screen()
        ):
            dock_id = next(iter(self._docks))
            position = self.panel_position(dock_id)
            dock_screen = self.screen(dock_id)
            for screen in range(self.screen_count):
                if screen != dock_screen:
                    self.clone_dock(dock_id, position, screen)

    def _sync_dock_config(self, dock_id: int) -> None:
        self._dock(dock_id)[1].sync()

    # Dock properties.

    def dock_property(self, dock_id: int, key: str, default: Any) -> Any:
        return self._dock(dock_id)[1].value(key, default)

    def set_dock_property(self, dock_id: int, key: str, value: Any) -> None:
        self._dock(dock_id)[1].set_value(key, value)

    def panel_position(self, dock_id: int) -> PanelPosition:
        return PanelPosition(
            self.dock_property(dock_id, _POSITION, int(PanelPosition.BOTTOM))
        )

    def set_panel_position(self, dock_id: int, value: PanelPosition) -> None:
        self.set_dock_property(dock_id, _POSITION, int(value))

    def screen(self, dock_id: int) -> int:
        return self.dock_property(dock_id, _SCREEN, 0)

    def set_screen(self, dock_id: int, value: int) -> None:
        self.set_dock_property(dock_id, _SCREEN, value)

    def visibility(self, dock_id: int) -> PanelVisibility:
        if self.auto_hide(dock_id):  # Older configs only have autoHide.
            return PanelVisibility.AUTO_HIDE
        return PanelVisibility(
            self.dock_property(dock_id, _VISIBILITY, int(DEFAULT_VISIBILITY))
        )

    def set_visibility(self, dock_id: int, value: PanelVisibility) -> None:
        self.set_dock_property(dock_id, _VISIBILITY, int(value))
        self.set_auto_hide(dock_id, value == PanelVisibility.AUTO_HIDE)

    def auto_hide(self, dock_id: int) -> bool:
        return self.dock_property(dock_id, _AUTO_HIDE, DEFAULT_AUTO_HIDE)

    def set_auto_hide(self, dock_id: int, value: bool) -> None:
        self.set_dock_property(dock_id, _AUTO_HIDE, value)

    def show_application_menu(self, dock_id: int) -> bool:
        return self.dock_property(dock_id, _SHOW_APPLICATION_MENU, DEFAULT_SHOW_APPLICATION_MENU)

    def set_show_application_menu(self, dock_id: int, value: bool) -> None:
        self.set_dock_property(dock_id, _SHOW_APPLICATION_MENU, value)

    def show_pager(self, dock_id: int) -> bool:
        return self.dock_property(dock_id, _SHOW_PAGER, DEFAULT_SHOW_PAGER)

    def set_show_pager(self, dock_id: int, value: bool) -> None:
        self.set_dock_property(dock_id, _SHOW_PAGER, value)

    def show_task_manager(self, dock_id: int) -> bool:
        return self.dock_property(dock_id, _SHOW_TASK_MANAGER, DEFAULT_SHOW_TASK_MANAGER)

    def set_show_task_manager(self, dock_id: int, value: bool) -> None:
        self.set_dock_property(dock_id, _SHOW_TASK_MANAGER, value)

    def show_clock(self, dock_id: int) -> bool:
        return self.dock_property(dock_id, _SHOW_CLOCK, DEFAULT_SHOW_CLOCK)

    def set_show_clock(self, dock_id: int, value: bool) -> None:
        self.set_dock_property(dock_id, _SHOW_CLOCK, value)

    def launchers(self, dock_id: int) -> list[str]:
        return [part for part in self.dock_property(dock_id, _LAUNCHERS, "").split(";") if part]

    def set_launchers(self, dock_id: int, value: Iterable[str]) -> None:
        self.set_dock_property(dock_id, _LAUNCHERS, ";".join(value))

    def save_dock_config(self, dock_id: int) -> None:
        self._sync_dock_config(dock_id)
        self._emit(DOCK_LAUNCHERS_CHANGED, dock_id)

    def save_appearance_config(self, repaint_only: bool = False) -> None:
        self.appearance.sync()
        self._emit(APPEARANCE_OUTDATED if repaint_only else APPEARANCE_CHANGED)

    # Launchers.

    def launcher_configs(self, dock_id: int) -> list[LauncherConfig]:
        """Launchers of a dock; ids not found in the menu are dropped."""
        configs: list[LauncherConfig] = []
        for app_id in self.launchers(dock_id):
            if app_id == SEPARATOR_ID:
                configs.append(LauncherConfig(SEPARATOR_ID, "", "", ""))
                continue
            entry = self.menu_config.find_application(app_id)
            if entry is not None:
                configs.append(LauncherConfig(entry.app_id, entry.name, entry.icon, entry.command))
        return configs

    def add_launcher(self, dock_id: int, launcher: LauncherConfig) -> None:
        """Insert a launcher just before the first separator (or at the end)."""
        entries = self.launchers(dock_id)
        index = entries.index(SEPARATOR_ID) if SEPARATOR_ID in entries else len(entries)
        entries.insert(index, launcher.app_id)
        self.set_launchers(dock_id, entries)
        self._sync_dock_config(dock_id)

    def remove_launcher(self, dock_id: int, app_id: str) -> None:
        """Remove the first launcher with ``app_id``, if any."""
        entries = self.launchers(dock_id)
        if app_id in entries:
            entries.remove(app_id)
            self.set_launchers(dock_id, entries)
            self._sync_dock_config(dock_id)

    def has_pager(self) -> bool:
        return any(self.show_pager(dock_id) for dock_id in self._docks)

    def default_launchers(self) -> list[str]:
        launchers: list[str] = []
        browser = self.default_browser()
        if browser is not None:
            launchers.append(browser.app_id)
        elif self.menu_config.find_application("firefox") is not None:
            launchers.append("firefox")

        launchers.extend(
            app_id
            for app_id in self.default_launcher_ids
            if self.menu_config.find_application(app_id) is not None
        )
        launchers.append(SEPARATOR_ID)
        launchers.append(LOCK_SCREEN_ID)
        return launchers

    def default_browser(self) -> ApplicationEntry | None:
        """The menu entry of the system's default web browser, if known."""
        try:
            result = subprocess.run(
                ["xdg-settings", "get", "default-web-browser"],
                capture_output=True,
                text=True,
                timeout=1,
                check=False,
            )
            output = result.stdout or ""
        except (OSError, subprocess.TimeoutExpired):
            output = ""
        app_id = output.strip().rpartition(".")[0]
        if not app_id:
            return None
        return self.menu_config.find_application(app_id)

    # Application menu.

    @property
    def application_menu_categories(self) -> list[Category]:
        return self.menu_config.categories

    @property
    def application_menu_system_categories(self) -> list[Category]:
        return self.menu_config.system_categories

    def find_application(self, app_id: str) -> ApplicationEntry | None:
        return self.menu_config.find_application(app_id)

    def is_app_menu_entry(self, app_id: str) -> bool:
        return self.menu_config.is_app_menu_entry(app_id)

    def search_applications(self, text: str, max_results: int) -> list[ApplicationEntry]:
        return self.menu_config.search_applications(text, max_results)