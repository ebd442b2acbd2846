"""Dock panel enums, colours and the global appearance configuration."""

from __future__ import annotations

import enum
import os
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from dockmodel.config_helper import ConfigHelper
from dockmodel.settings import IniSettings


class PanelPosition(enum.IntEnum):
    TOP = 0
    BOTTOM = 1
    LEFT = 2
    RIGHT = 3


class PanelVisibility(enum.IntEnum):
    ALWAYS_VISIBLE = 0
    AUTO_HIDE = 1
    ALWAYS_ON_TOP = 2
    INTELLIGENT_AUTO_HIDE = 3


class PanelStyle(enum.IntEnum):
    """Glass 3D only makes bottom docks truly 3D; others look like Glass 2D."""

    GLASS_3D_FLOATING = 0
    GLASS_3D_NON_FLOATING = 1
    FLAT_2D_FLOATING = 2
    FLAT_2D_NON_FLOATING = 3
    METAL_2D_FLOATING = 4
    METAL_2D_NON_FLOATING = 5


DEFAULT_MIN_SIZE = 48
DEFAULT_MAX_SIZE = 128
DEFAULT_SPACING_FACTOR = 0.5
DEFAULT_TOOLTIP_FONT_SIZE = 24
DEFAULT_BACKGROUND_ALPHA = 0.42
DEFAULT_BACKGROUND_ALPHA_METAL_2D = 0.68
DEFAULT_BACKGROUND_COLOR = "#638abd"
DEFAULT_BACKGROUND_COLOR_2D = "#86baff"
DEFAULT_BACKGROUND_COLOR_METAL_2D = "#7381a6"
DEFAULT_BORDER_COLOR = "#b1c4de"
DEFAULT_BORDER_COLOR_METAL_2D = "#99addd"
DEFAULT_ACTIVE_INDICATOR_COLOR = "darkorange"
DEFAULT_ACTIVE_INDICATOR_COLOR_2D = "#ffbf00"
DEFAULT_ACTIVE_INDICATOR_COLOR_METAL_2D = "#ffbf00"
DEFAULT_INACTIVE_INDICATOR_COLOR = "darkcyan"
DEFAULT_INACTIVE_INDICATOR_COLOR_2D = "cyan"
DEFAULT_INACTIVE_INDICATOR_COLOR_METAL_2D = "cyan"
DEFAULT_FLOATING_MARGIN = 6
DEFAULT_BOUNCING_LAUNCHER_ICON = True

LARGE_CLOCK_FONT_SCALE_FACTOR = 1.0
MEDIUM_CLOCK_FONT_SCALE_FACTOR = 0.8
SMALL_CLOCK_FONT_SCALE_FACTOR = 0.6

DEFAULT_VISIBILITY = PanelVisibility.ALWAYS_VISIBLE
DEFAULT_AUTO_HIDE = False
DEFAULT_SHOW_APPLICATION_MENU = True
DEFAULT_SHOW_PAGER = False
DEFAULT_SHOW_TASK_MANAGER = True
DEFAULT_SHOW_CLOCK = False
DEFAULT_PANEL_STYLE = PanelStyle.GLASS_3D_FLOATING

DEFAULT_APPLICATION_MENU_NAME = "Applications"
DEFAULT_APPLICATION_MENU_ICON_SIZE = 40
DEFAULT_APPLICATION_MENU_FONT_SIZE = 14
DEFAULT_APPLICATION_MENU_BACKGROUND_ALPHA = 0.8
DEFAULT_SHOW_DESKTOP_NUMBER = True
DEFAULT_CURRENT_DESKTOP_TASKS_ONLY = True
DEFAULT_CURRENT_SCREEN_TASKS_ONLY = False
DEFAULT_USE_24_HOUR_CLOCK = True
DEFAULT_CLOCK_FONT_SCALE_FACTOR = LARGE_CLOCK_FONT_SCALE_FACTOR

SEPARATOR_ID = "separator"
LOCK_SCREEN_ID = "lock-screen"

_NAMED_COLORS = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": (255, 0, 0),
    "green": (0, 128, 0),
    "lime": (0, 255, 0),
    "blue": (0, 0, 255),
    "yellow": (255, 255, 0),
    "cyan": (0, 255, 255),
    "aqua": (0, 255, 255),
    "magenta": (255, 0, 255),
    "fuchsia": (255, 0, 255),
    "gray": (128, 128, 128),
    "grey": (128, 128, 128),
    "darkgray": (169, 169, 169),
    "lightgray": (211, 211, 211),
    "orange": (255, 165, 0),
    "darkorange": (255, 140, 0),
    "darkcyan": (0, 139, 139),
    "darkblue": (0, 0, 139),
    "darkred": (139, 0, 0),
    "darkgreen": (0, 100, 0),
    "navy": (0, 0, 128),
    "purple": (128, 0, 128),
    "silver": (192, 192, 192),
    "gold": (255, 215, 0),
}


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGBA colour."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue, self.alpha):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    @classmethod
    def parse(cls, text: str) -> Color:
        """Parse ``#rgb``, ``#rrggbb``, ``#aarrggbb`` or a colour name."""
        spec = text.strip().lower()
        if spec == "transparent":
            return cls(0, 0, 0, 0)
        if spec in _NAMED_COLORS:
            return cls(*_NAMED_COLORS[spec])
        digits = spec[1:]
        if not spec.startswith("#") or any(c not in "0123456789abcdef" for c in digits):
            raise ValueError(f"invalid colour: {text!r}")
        if len(digits) == 3:
            return cls(*(int(c * 2, 16) for c in digits))
        if len(digits) == 6:
            return cls(*(int(digits[i:i + 2], 16) for i in (0, 2, 4)))
        if len(digits) == 8:
            alpha, red, green, blue = (int(digits[i:i + 2], 16) for i in (0, 2, 4, 6))
            return cls(red, green, blue, alpha)
        raise ValueError(f"invalid colour: {text!r}")

    @property
    def alpha_f(self) -> float:
        return self.alpha / 255

    def with_alpha(self, alpha: float) -> Color:
        """Return this colour with alpha set from a fraction in [0, 1]."""
        if not 0.0 <= alpha <= 1.0:
            raise ValueError(f"alpha must be between 0 and 1: {alpha}")
        return Color(self.red, self.green, self.blue, int(alpha * 65535 + 0.5) >> 8)

    def hex_rgb(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def hex_argb(self) -> str:
        return f"#{self.alpha:02x}{self.red:02x}{self.green:02x}{self.blue:02x}"


def _number(value: float) -> str:
    """Human-readable float text, as stored in the config file."""
    return format(float(value), ".6g")


def _to_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


class _Setting:
    """A typed appearance setting stored under ``key``."""

    def __init__(
        self,
        key: str,
        default: Any,
        load: Callable[[Any], Any] | None = None,
        dump: Callable[[Any], Any] | None = None,
    ) -> None:
        self.key = key
        self.default = default
        self._load = load
        self._dump = dump

    def __get__(self, instance: AppearanceConfig | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        value = instance.settings.value(self.key, self.default)
        return self._load(value) if self._load else value

    def __set__(self, instance: AppearanceConfig, value: Any) -> None:
        instance.settings.set_value(self.key, self._dump(value) if self._dump else value)


def _float_setting(key: str, default: float) -> _Setting:
    return _Setting(key, _number(default), load=_to_float, dump=_number)


def _argb_setting(key: str, color: str, alpha: float) -> _Setting:
    default = Color.parse(color).with_alpha(alpha).hex_argb()
    return _Setting(key, default, load=Color.parse, dump=Color.hex_argb)


def _rgb_setting(key: str, default: str) -> _Setting:
    return _Setting(key, default, load=Color.parse, dump=Color.hex_rgb)


_MIN_ICON_SIZE = "minimumIconSize"
_MAX_ICON_SIZE = "maximumIconSize"
_FIRST_RUN_MULTI_SCREEN = "firstRunMultiScreen"
_FIRST_RUN_WINDOW_COUNT_INDICATOR = "firstRunWindowCountIndicator"
_PAGER = "Pager"

_3D_STYLES = (PanelStyle.GLASS_3D_FLOATING, PanelStyle.GLASS_3D_NON_FLOATING)
_FLAT_2D_STYLES = (PanelStyle.FLAT_2D_FLOATING, PanelStyle.FLAT_2D_NON_FLOATING)
_METAL_2D_STYLES = (PanelStyle.METAL_2D_FLOATING, PanelStyle.METAL_2D_NON_FLOATING)


class AppearanceConfig:
    """Global appearance settings shared by all docks."""

    spacing_factor = _float_setting("spacingFactor", DEFAULT_SPACING_FACTOR)
    background_color = _argb_setting(
        "backgroundColor", DEFAULT_BACKGROUND_COLOR, DEFAULT_BACKGROUND_ALPHA
    )
    background_color_2d = _argb_setting(
        "backgroundColor2D", DEFAULT_BACKGROUND_COLOR_2D, DEFAULT_BACKGROUND_ALPHA
    )
    background_color_metal_2d = _argb_setting(
        "backgroundColorMetal2D",
        DEFAULT_BACKGROUND_COLOR_METAL_2D,
        DEFAULT_BACKGROUND_ALPHA_METAL_2D,
    )
    border_color = _rgb_setting("borderColor", DEFAULT_BORDER_COLOR)
    border_color_metal_2d = _rgb_setting("borderColorMetal2D", DEFAULT_BORDER_COLOR_METAL_2D)
    active_indicator_color = _rgb_setting(
        "activeIndicatorColor", DEFAULT_ACTIVE_INDICATOR_COLOR
    )
    active_indicator_color_2d = _rgb_setting(
        "activeIndicatorColor2D", DEFAULT_ACTIVE_INDICATOR_COLOR_2D
    )
    active_indicator_color_metal_2d = _rgb_setting(
        "activeIndicatorColorMetal2D", DEFAULT_ACTIVE_INDICATOR_COLOR_METAL_2D
    )
    inactive_indicator_color = _rgb_setting(
        "inactiveIndicatorColor", DEFAULT_INACTIVE_INDICATOR_COLOR
    )
    inactive_indicator_color_2d = _rgb_setting(
        "inactiveIndicatorColor2D", DEFAULT_INACTIVE_INDICATOR_COLOR_2D
    )
    inactive_indicator_color_metal_2d = _rgb_setting(
        "inactiveIndicatorColorMetal2D", DEFAULT_INACTIVE_INDICATOR_COLOR_METAL_2D
    )
    tooltip_font_size = _Setting("tooltipFontSize", DEFAULT_TOOLTIP_FONT_SIZE)
    panel_style = _Setting("panelStyle", int(DEFAULT_PANEL_STYLE), load=PanelStyle, dump=int)
    floating_margin = _Setting("floatingMargin", DEFAULT_FLOATING_MARGIN)
    bouncing_launcher_icon = _Setting("bouncingLauncherIcon", DEFAULT_BOUNCING_LAUNCHER_ICON)

    application_menu_name = _Setting("Application Menu/label", DEFAULT_APPLICATION_MENU_NAME)
    application_menu_icon_size = _Setting(
        "Application Menu/iconSize", DEFAULT_APPLICATION_MENU_ICON_SIZE
    )
    application_menu_font_size = _Setting(
        "Application Menu/fontSize", DEFAULT_APPLICATION_MENU_FONT_SIZE
    )
    application_menu_background_alpha = _float_setting(
        "Application Menu/backgroundAlpha", DEFAULT_APPLICATION_MENU_BACKGROUND_ALPHA
    )

    show_desktop_number = _Setting("Pager/showDesktopNumber", DEFAULT_SHOW_DESKTOP_NUMBER)
    current_desktop_tasks_only = _Setting(
        "TaskManager/currentDesktopTasksOnly", DEFAULT_CURRENT_DESKTOP_TASKS_ONLY
    )
    current_screen_tasks_only = _Setting(
        "TaskManager/currentScreenTasksOnly", DEFAULT_CURRENT_SCREEN_TASKS_ONLY
    )

    use_24_hour_clock = _Setting("Clock/use24HourClock", DEFAULT_USE_24_HOUR_CLOCK)
    clock_font_scale_factor = _float_setting(
        "Clock/fontScaleFactor", DEFAULT_CLOCK_FONT_SCALE_FACTOR
    )
    clock_font_family = _Setting("Clock/clockFontFamily", "")

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.settings = IniSettings(path)

    @property
    def path(self) -> str:
        return str(self.settings.path)

    def sync(self) -> None:
        self.settings.sync()

    @property
    def min_icon_size(self) -> int:
        return self.settings.value(_MIN_ICON_SIZE, DEFAULT_MIN_SIZE)

    @min_icon_size.setter
    def min_icon_size(self, value: int) -> None:
        if value > self.max_icon_size:
            self.max_icon_size = value
        self.settings.set_value(_MIN_ICON_SIZE, value)

    @property
    def max_icon_size(self) -> int:
        return self.settings.value(_MAX_ICON_SIZE, DEFAULT_MAX_SIZE)

    @max_icon_size.setter
    def max_icon_size(self, value: int) -> None:
        if value < self.min_icon_size:
            self.min_icon_size = value
        self.settings.set_value(_MAX_ICON_SIZE, value)

    def is_3d(self) -> bool:
        return self.panel_style in _3D_STYLES

    def is_flat_2d(self) -> bool:
        return self.panel_style in _FLAT_2D_STYLES

    def is_metal_2d(self) -> bool:
        return self.panel_style in _METAL_2D_STYLES

    def _first_run(self, key: str) -> bool:
        value = self.settings.value(key, True)
        self.settings.set_value(key, False)
        return value

    def first_run_multi_screen(self) -> bool:
        """True the first time it is asked, False from then on."""
        return self._first_run(_FIRST_RUN_MULTI_SCREEN)

    def first_run_window_count_indicator(self) -> bool:
        """True the first time it is asked, False from then on."""
        return self._first_run(_FIRST_RUN_WINDOW_COUNT_INDICATOR)

    def wallpaper(self, desktop_id: str, screen: int) -> str:
        key = ConfigHelper.wallpaper_config_key(desktop_id, screen)
        return self.settings.value(f"{_PAGER}/{key}", "")

    def set_wallpaper(self, desktop_id: str, screen: int, value: str) -> None:
        key = ConfigHelper.wallpaper_config_key(desktop_id, screen)
        self.settings.set_value(f"{_PAGER}/{key}", value)