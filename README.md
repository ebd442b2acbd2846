# dockmodel

`dockmodel` is the configuration model behind a desktop dock. It reads
freedesktop `.desktop` entries into an application menu. It keeps one INI
file per dock panel and a shared appearance file. It answers the questions a
dock asks: which launchers go on this panel, where the panel sits, which
application a window belongs to.

It has no runtime dependencies beyond the standard library.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Desktop entries

`dockmodel.desktop_file.DesktopFile` reads the `[Desktop Entry]` section of a
`.desktop` file. It exposes the common keys as properties: `name`,
`generic_name`, `icon`, `exec_line`, `type`, `wm_class`, `categories`,
`only_show_in`, `not_show_in`, `no_display` and `hidden`. Its `write` method
saves the entry again, with the keys sorted.

```python
from dockmodel.desktop_file import DesktopFile

entry = DesktopFile("/usr/share/applications/firefox.desktop")
print(entry.app_id, entry.name, entry.get("Exec"))
```

`dockmodel.command_utils` has two helpers:

- `filter_field_codes` strips `%u`, `%F` and similar field codes from an
  `Exec` line, along with an `env VAR=value` prefix.
- `command_exists` returns the first of several command names that is found
  on `PATH`, or an empty string if none is.

`dockmodel.launcher_config.LauncherConfig` holds an app ID, a name, an icon
and a command. It can be built from a desktop file with `from_desktop_file`
and saved as `<app_id>.desktop` with `save_to_file`.

## The application menu

`dockmodel.application_menu_config.ApplicationMenuConfig` scans directories of
`.desktop` files. It sorts the applications into the main freedesktop
categories (Development, Games, Internet, Office, and so on) and keeps each
category ordered by name. Entries are left out when they are:

- hidden or marked NoDisplay;
- of a type other than `Application`;
- excluded for the desktop environment name you pass in.

`get_entry_dirs()` builds the usual list of directories from
`~/.local/share/applications` and `XDG_DATA_DIRS`.

```python
from dockmodel.application_menu_config import ApplicationMenuConfig, get_entry_dirs

menu = ApplicationMenuConfig(get_entry_dirs(), "KDE", [])
menu.find_application("firefox")
menu.try_matching_application_id("Google-chrome")   # -> "google-chrome"
menu.search_applications("web", 10)
```

- `find_application` searches the system categories you passed in first.
  Then it tries the application ID, then the window class, then the
  lower-cased name.
- `try_matching_application_id` lower-cases the ID and removes its
  whitespace before looking it up. It also knows a few aliases, such as
  `qdbusviewer` and `virtualboxvm`.
- `search_applications` matches a single character against the start of an
  application's name. Longer text is matched anywhere in the name or the
  generic name. At most `max_results` entries are returned, sorted by name.

Call `add_listener` to be told when `reload` rebuilds the menu.

## Docks and appearance

`dockmodel.multi_dock_model.MultiDockModel` holds every dock. It keeps these
files under `<config_dir>/<desktop env name>/`:

- one `panel_<n>.conf` file for each dock;
- `appearance.conf`, holding the settings all docks share.

```python
from dockmodel.appearance import PanelPosition
from dockmodel.multi_dock_model import MultiDockModel

model = MultiDockModel(config_dir, "KDE", 1, menu, ["org.kde.dolphin"])
dock_id = model.add_dock(PanelPosition.BOTTOM, 0, True, False, True, False)
for dock_id in model.dock_ids():
    print(dock_id, model.panel_position(dock_id), model.launchers(dock_id))
```

The model can add, clone and remove docks, and can add and remove launchers.

- Docks whose screen number is not below `screen_count` are ignored when
  loading.
- The first time the model runs with more than one screen, if there is only
  one dock, it clones that dock onto every other screen.
- A new dock gets a set of default launchers:
  - the default web browser, found by running
    `xdg-settings get default-web-browser`, or else `firefox`;
  - those of the `default_launcher_ids` you passed in that are in the menu;
  - a separator and `lock-screen`.

Call `connect` to subscribe to the model's signals. Their names are listed in
`dockmodel.multi_dock_model.SIGNALS`:

- `dock_added`
- `dock_launchers_changed`
- `appearance_changed`
- `appearance_outdated`
- `wallpaper_changed`
- `application_menu_config_changed`

`dockmodel.appearance.AppearanceConfig` (available as `model.appearance`)
exposes the shared settings as attributes:

- icon sizes;
- colours, as `Color` values;
- the panel style, as a `PanelStyle`;
- application menu options;
- clock options;
- per-desktop, per-screen wallpapers.

`PanelPosition` and `PanelVisibility` are the other panel enums.
`dockmodel.settings.IniSettings` is the small INI store that sits underneath
both kinds of file. Changes are written to disk when `sync` is called.

## What it does not do

This package is only the model. It does not:

- draw a dock or any menus and dialogs;
- detect the desktop environment or count the screens; you pass the
  environment name and `screen_count` in;
- provide the desktop environment's system menu entries or default
  launchers; you pass those in too;
- watch the application directories for changes; call `reload` yourself;
- provide a command-line program.