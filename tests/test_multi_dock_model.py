import subprocess
from pathlib import Path

import pytest

from dockmodel.appearance import (
    DEFAULT_MAX_SIZE,
    DEFAULT_MIN_SIZE,
    Color,
    PanelPosition,
    PanelVisibility,
)
from dockmodel.application_menu_config import ApplicationMenuConfig
from dockmodel.desktop_file import DesktopFile
from dockmodel.launcher_config import LauncherConfig
from dockmodel.multi_dock_model import MultiDockModel

ENV = "TEST"


def write_entry(directory, stem, name, categories):
    entry = DesktopFile()
    entry.name = name
    entry.icon = stem
    entry.exec_line = stem
    entry.type = "Application"
    entry.categories = categories
    entry.write(Path(directory) / f"{stem}.desktop")


@pytest.fixture
def apps_dir(tmp_path):
    directory = tmp_path / "apps"
    directory.mkdir()
    write_entry(directory, "firefox", "Firefox", "Network")
    write_entry(directory, "google-chrome", "Chrome", "Network")
    write_entry(directory, "org.kde.konsole", "Konsole", "System")
    return directory


@pytest.fixture
def menu(apps_dir):
    return ApplicationMenuConfig([str(apps_dir)], ENV)


@pytest.fixture
def config_dir(tmp_path):
    directory = tmp_path / "config"
    directory.mkdir()
    return directory


@pytest.fixture
def no_browser(monkeypatch):
    def fake_run(args, **kwargs):
        raise FileNotFoundError(args[0])

    monkeypatch.setattr(subprocess, "run", fake_run)


def set_browser(monkeypatch, output):
    def fake_run(args, **kwargs):
        return subprocess.CompletedProcess(args, 0, stdout=output, stderr="")

    monkeypatch.setattr(subprocess, "run", fake_run)


def write_dock_config(config_dir, file_id, content=""):
    directory = Path(config_dir) / ENV
    directory.mkdir(parents=True, exist_ok=True)
    (directory / f"panel_{file_id}.conf").write_text(content)


def test_load_no_dock(config_dir, menu, no_browser):
    model = MultiDockModel(config_dir, ENV, 1, menu)
    assert model.dock_count() == 0


def test_load_single_dock(config_dir, menu, no_browser):
    write_dock_config(config_dir, 1)
    model = MultiDockModel(config_dir, ENV, 1, menu)
    assert model.dock_count() == 1


def test_load_multiple_docks(config_dir, menu, no_browser):
    for file_id in (1, 2, 4):
        write_dock_config(config_dir, file_id)
    model = MultiDockModel(config_dir, ENV, 1, menu)
    assert model.dock_count() == 3
    assert model.dock_ids() == [1, 2, 3]


def test_dock_on_invalid_screen_is_skipped(config_dir, menu, no_browser):
    write_dock_config(config_dir, 1, "[General]\nscreen=5\n")
    write_dock_config(config_dir, 2, "[General]\nscreen=0\nposition=0\n")
    model = MultiDockModel(config_dir, ENV, 1, menu)
    assert model.dock_ids() == [1]
    assert model.panel_position(1) == PanelPosition.TOP


def test_add_dock_defaults(config_dir, menu, monkeypatch):
    set_browser(monkeypatch, "firefox.desktop\n")
    model = MultiDockModel(config_dir, ENV, 1, menu)
    added = []
    model.connect("dock_added", added.append)
    dock_id = model.add_dock()
    assert dock_id == 1
    assert added == [1]
    assert model.dock_count() == 1
    assert model.launchers(1) == ["firefox", "separator", "lock-screen"]
    assert model.visibility(1) == PanelVisibility.ALWAYS_VISIBLE
    assert model.auto_hide(1) is False
    assert model.panel_position(1) == PanelPosition.BOTTOM
    assert model.show_clock(1) is True
    assert (config_dir / ENV / "panel_1.conf").is_file()
    assert model.appearance.min_icon_size == DEFAULT_MIN_SIZE
    assert model.appearance.max_icon_size == DEFAULT_MAX_SIZE


def test_added_dock_persists(config_dir, menu, monkeypatch):
    set_browser(monkeypatch, "google-chrome.desktop\n")
    model = MultiDockModel(config_dir, ENV, 1, menu)
    model.add_dock(PanelPosition.LEFT, 0, True, False, True, False)
    reloaded = MultiDockModel(config_dir, ENV, 1, menu)
    assert reloaded.dock_count() == 1
    assert reloaded.panel_position(1) == PanelPosition.LEFT
    assert reloaded.show_pager(1) is False
    assert reloaded.launchers(1) == ["google-chrome", "separator", "lock-screen"]


def test_default_launchers_without_browser(config_dir, menu, no_browser):
    model = MultiDockModel(
        config_dir, ENV, 1, menu, default_launcher_ids=["org.kde.konsole", "missing"]
    )
    assert model.default_launchers() == ["firefox", "org.kde.konsole", "separator", "lock-screen"]


def test_default_launchers_nothing_found(config_dir, tmp_path, no_browser):
    empty_menu = ApplicationMenuConfig([], ENV)
    model = MultiDockModel(config_dir, ENV, 1, empty_menu)
    assert model.default_launchers() == ["separator", "lock-screen"]


def test_default_browser(config_dir, menu, monkeypatch):
    set_browser(monkeypatch, "google-chrome.desktop\n")
    model = MultiDockModel(config_dir, ENV, 1, menu)
    browser = model.default_browser()
    assert browser.app_id == "google-chrome"
    assert browser.name == "Chrome"


def test_default_browser_unknown(config_dir, menu, monkeypatch):
    set_browser(monkeypatch, "")
    model = MultiDockModel(config_dir, ENV, 1, menu)
    assert model.default_browser() is None


def test_add_launcher_before_separator(config_dir, menu, no_browser):
    model = MultiDockModel(config_dir, ENV, 1, menu)
    model.add_dock()
    model.add_launcher(1, LauncherConfig("org.kde.konsole", "Konsole", "konsole", "konsole"))
    assert model.launchers(1) == ["firefox", "org.kde.konsole", "separator", "lock-screen"]


def test_add_launcher_without_separator_appends(config_dir, menu, no_browser):
    model = MultiDockModel(config_dir, ENV, 1, menu)
    model.add_dock()
    model.set_launchers(1, ["firefox"])
    model.add_launcher(1, LauncherConfig("google-chrome"))
    assert model.launchers(1) == ["firefox", "google-chrome"]


def test_remove_launcher(config_dir, menu, no_browser):
    model = MultiDockModel(config_dir, ENV, 1, menu)
    model.add_dock()
    model.remove_launcher(1, "firefox")
    assert model.launchers(1) == ["separator", "lock-screen"]
    model.remove_launcher(1, "not-there")
    assert model.launchers(1) == ["separator", "lock-screen"]


def test_launcher_configs(config_dir, menu, no_browser):
    model = MultiDockModel(config_dir, ENV, 1, menu)
    model.add_dock()
    model.set_launchers(1, ["firefox", "unknown", "separator"])
    assert model.launcher_configs(1) == [
        LauncherConfig("firefox", "Firefox", "firefox", "firefox"),
        LauncherConfig("separator", "", "", ""),
    ]


def test_visibility_and_auto_hide(config_dir, menu, no_browser):
    model = MultiDockModel(config_dir, ENV, 1, menu)
    model.add_dock()
    model.set_visibility(1, PanelVisibility.AUTO_HIDE)
    assert model.auto_hide(1) is True
    assert model.visibility(1) == PanelVisibility.AUTO_HIDE
    model.set_visibility(1, PanelVisibility.ALWAYS_ON_TOP)
    assert model.auto_hide(1) is False
    assert model.visibility(1) == PanelVisibility.ALWAYS_ON_TOP
    model.set_auto_hide(1, True)
    assert model.visibility(1) == PanelVisibility.AUTO_HIDE


def test_clone_dock(config_dir, menu, no_browser):
    model = MultiDockModel(config_dir, ENV, 1, menu)
    model.add_dock()
    new_id = model.clone_dock(1, PanelPosition.TOP, 0)
    assert new_id == 2
    assert model.dock_count() == 2
    assert model.panel_position(2) == PanelPosition.TOP
    assert model.launchers(2) == model.launchers(1)
    assert (config_dir / ENV / "panel_2.conf").is_file()


def test_remove_dock(config_dir, menu, no_browser):
    model = MultiDockModel(config_dir, ENV, 1, menu)
    model.add_dock()
    model.remove_dock(1)
    assert model.dock_count() == 0
    assert not (config_dir / ENV / "panel_1.conf").exists()
    with pytest.raises(KeyError):
        model.screen(1)


def test_has_pager(config_dir, menu, no_browser):
    model = MultiDockModel(config_dir, ENV, 1, menu)
    model.add_dock(PanelPosition.BOTTOM, 0, True, False, True, False)
    assert model.has_pager() is False
    model.set_show_pager(1, True)
    assert model.has_pager() is True


def test_multi_screen_first_run_clones_dock(config_dir, menu, no_browser):
    write_dock_config(config_dir, 1, "[General]\nscreen=0\nposition=1\nlaunchers=firefox;separator\n")
    model = MultiDockModel(config_dir, ENV, 3, menu)
    assert model.dock_ids() == [1, 2, 3]
    assert sorted(model.screen(d) for d in model.dock_ids()) == [0, 1, 2]
    assert all(model.launchers(d) == ["firefox", "separator"] for d in model.dock_ids())


def test_max_icon_size_fixed_at_startup(config_dir, menu, no_browser):
    (config_dir / ENV).mkdir()
    (config_dir / ENV / "appearance.conf").write_text(
        "[General]\nminimumIconSize=100\nmaximumIconSize=50\n"
    )
    model = MultiDockModel(config_dir, ENV, 1, menu)
    assert model.appearance.max_icon_size == 100


def test_first_run_resets_indicator_colors(config_dir, menu, no_browser):
    (config_dir / ENV).mkdir()
    (config_dir / ENV / "appearance.conf").write_text("[General]\nactiveIndicatorColor=#ff0000\n")
    model = MultiDockModel(config_dir, ENV, 1, menu)
    assert model.appearance.active_indicator_color == Color.parse("darkorange")
    assert model.appearance.inactive_indicator_color == Color.parse("darkcyan")


def test_later_run_keeps_indicator_colors(config_dir, menu, no_browser):
    (config_dir / ENV).mkdir()
    (config_dir / ENV / "appearance.conf").write_text(
        "[General]\nactiveIndicatorColor=#ff0000\nfirstRunWindowCountIndicator=false\n"
    )
    model = MultiDockModel(config_dir, ENV, 1, menu)
    assert model.appearance.active_indicator_color == Color(255, 0, 0)


def test_save_appearance_config_signals(config_dir, menu, no_browser):
    model = MultiDockModel(config_dir, ENV, 1, menu)
    events = []
    model.connect("appearance_changed", lambda: events.append("changed"))
    model.connect("appearance_outdated", lambda: events.append("outdated"))
    model.save_appearance_config()
    model.save_appearance_config(True)
    assert events == ["changed", "outdated"]
    assert (config_dir / ENV / "appearance.conf").is_file()


def test_save_dock_config_signal(config_dir, menu, no_browser):
    model = MultiDockModel(config_dir, ENV, 1, menu)
    model.add_dock()
    changed = []
    model.connect("dock_launchers_changed", changed.append)
    model.save_dock_config(1)
    assert changed == [1]


def test_menu_reload_signal(config_dir, menu, no_browser):
    model = MultiDockModel(config_dir, ENV, 1, menu)
    events = []
    model.connect("application_menu_config_changed", lambda: events.append(True))
    menu.reload()
    assert events == [True]


def test_unknown_signal(config_dir, menu, no_browser):
    model = MultiDockModel(config_dir, ENV, 1, menu)
    with pytest.raises(ValueError):
        model.connect("no_such_signal", lambda: None)


def test_application_lookup_delegates(config_dir, menu, no_browser):
    model = MultiDockModel(config_dir, ENV, 1, menu)
    assert model.find_application("firefox").name == "Firefox"
    assert model.is_app_menu_entry("org.kde.konsole") is True
    assert model.is_app_menu_entry("konsole") is False
    assert [e.name for e in model.search_applications("c", 10)] == ["Chrome"]