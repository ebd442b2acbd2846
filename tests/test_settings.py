from pathlib import Path

from dockmodel.settings import IniSettings


def test_missing_key_returns_default(tmp_path: Path) -> None:
    settings = IniSettings(tmp_path / "a.conf")
    assert settings.value("missing", 7) == 7
    assert settings.value("group/missing", "x") == "x"
    assert settings.value("missing") is None


def test_round_trip_through_file(tmp_path: Path) -> None:
    path = tmp_path / "a.conf"
    settings = IniSettings(path)
    settings.set_value("size", 48)
    settings.set_value("flag", True)
    settings.set_value("Clock/use24HourClock", False)
    settings.set_value("Pager/name", "hello")
    settings.sync()

    reopened = IniSettings(path)
    assert reopened.value("size", 0) == 48
    assert reopened.value("flag", False) is True
    assert reopened.value("Clock/use24HourClock", True) is False
    assert reopened.value("Pager/name", "") == "hello"


def test_grouped_key_written_to_escaped_section(tmp_path: Path) -> None:
    path = tmp_path / "a.conf"
    settings = IniSettings(path)
    settings.set_value("Application Menu/label", "Apps")
    settings.sync()
    text = path.read_text()
    assert "[Application%20Menu]" in text
    assert "label=Apps" in text
    assert IniSettings(path).value("Application Menu/label", "") == "Apps"


def test_top_level_keys_go_to_general_section(tmp_path: Path) -> None:
    path = tmp_path / "a.conf"
    settings = IniSettings(path)
    settings.set_value("Clock/x", 1)
    settings.set_value("screen", 2)
    settings.sync()
    assert path.read_text().splitlines()[0] == "[General]"


def test_bool_parsing(tmp_path: Path) -> None:
    path = tmp_path / "a.conf"
    path.write_text("[General]\na=false\nb=0\nc=yes\nd=TRUE\n")
    settings = IniSettings(path)
    assert settings.value("a", True) is False
    assert settings.value("b", True) is False
    assert settings.value("c", False) is True
    assert settings.value("d", False) is True


def test_invalid_numbers_give_zero(tmp_path: Path) -> None:
    path = tmp_path / "a.conf"
    path.write_text("[General]\nn=abc\nf=xyz\n")
    settings = IniSettings(path)
    assert settings.value("n", 5) == 0
    assert settings.value("f", 1.5) == 0.0


def test_value_without_default_is_raw_text(tmp_path: Path) -> None:
    path = tmp_path / "a.conf"
    path.write_text("[General]\nn=12\n")
    assert IniSettings(path).value("n") == "12"


def test_whitespace_and_quotes_preserved(tmp_path: Path) -> None:
    path = tmp_path / "a.conf"
    settings = IniSettings(path)
    settings.set_value("padded", "  padded  ")
    settings.set_value("quoted", '"q" and \\')
    settings.sync()
    reopened = IniSettings(path)
    assert reopened.value("padded", "") == "  padded  "
    assert reopened.value("quoted", "") == '"q" and \\'


def test_comments_and_junk_lines_ignored(tmp_path: Path) -> None:
    path = tmp_path / "a.conf"
    path.write_text("; comment\n# other\n[General]\njunk\nkey=#638abd\n")
    settings = IniSettings(path)
    assert settings.value("key", "") == "#638abd"
    assert "junk" not in settings


def test_contains_and_override(tmp_path: Path) -> None:
    settings = IniSettings(tmp_path / "a.conf")
    assert "Pager/x" not in settings
    settings.set_value("Pager/x", 1)
    settings.set_value("Pager/x", 2)
    assert "Pager/x" in settings
    assert settings.value("Pager/x", 0) == 2


def test_sync_creates_parent_directories(tmp_path: Path) -> None:
    path = tmp_path / "deep" / "dir" / "a.conf"
    settings = IniSettings(path)
    settings.set_value("k", "v")
    settings.sync()
    assert path.is_file()
    assert IniSettings(path).value("k", "") == "v"