import pytest

from desktopentry import autostart_dirs, find_autostart_entries, find_autostart_files
from desktopentry.core.config import config_dirs, current_desktop


def _write(directory, name, body):
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(body, encoding="utf-8")
    return path


@pytest.fixture
def xdg_dirs(tmp_path, monkeypatch):
    home = tmp_path / "config"
    system = tmp_path / "xdg"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_DIRS", str(system))
    return home / "autostart", system / "autostart"


def test_autostart_dirs(xdg_dirs):
    user_dir, system_dir = xdg_dirs
    assert autostart_dirs() == [user_dir, system_dir]


def test_config_dirs_default(monkeypatch):
    monkeypatch.delenv("XDG_CONFIG_DIRS", raising=False)
    assert [str(p) for p in config_dirs()] == ["/etc/xdg"]


def test_config_dirs_skips_empty_and_relative():
    assert [str(p) for p in config_dirs({"XDG_CONFIG_DIRS": "/a::relative:/b"})] == ["/a", "/b"]


def test_current_desktop():
    assert current_desktop({"XDG_CURRENT_DESKTOP": "ubuntu:GNOME"}) == ["ubuntu", "GNOME"]
    assert current_desktop({}) == []


def test_user_file_shadows_system_file(xdg_dirs):
    user_dir, system_dir = xdg_dirs
    _write(system_dir, "b.desktop", "[Desktop Entry]\nExec=b\n")
    _write(system_dir, "a.desktop", "[Desktop Entry]\nExec=system-a\n")
    user_a = _write(user_dir, "a.desktop", "[Desktop Entry]\nExec=user-a\n")
    _write(user_dir, "notes.txt", "not a desktop file")

    files = find_autostart_files()
    assert files == [user_a, system_dir / "b.desktop"]


def test_find_autostart_entries_filters(xdg_dirs):
    user_dir, system_dir = xdg_dirs
    _write(system_dir, "gnome-only.desktop", "[Desktop Entry]\nExec=g\nOnlyShowIn=GNOME;\n")
    _write(system_dir, "kde-only.desktop", "[Desktop Entry]\nExec=k\nOnlyShowIn=KDE;\n")
    _write(system_dir, "disabled.desktop", "[Desktop Entry]\nExec=d\n")
    _write(user_dir, "disabled.desktop", "[Desktop Entry]\nExec=d\nHidden=true\n")

    entries = find_autostart_entries(["GNOME"])
    assert [e.exec_cmd for e in entries] == ["g"]


def test_find_autostart_entries_skips_broken_files(xdg_dirs, caplog):
    user_dir, _ = xdg_dirs
    _write(user_dir, "broken.desktop", "[Desktop Entry]\nno separator here\n")
    _write(user_dir, "good.desktop", "[Desktop Entry]\nExec=good\n")

    entries = find_autostart_entries(["KDE"])
    assert [e.exec_cmd for e in entries] == ["good"]
    assert "broken.desktop" in caplog.text


def test_find_autostart_entries_explicit_dirs(tmp_path):
    _write(tmp_path, "x.desktop", "[Desktop Entry]\nExec=x\n")
    assert [e.exec_cmd for e in find_autostart_entries([], dirs=[tmp_path])] == ["x"]
    assert find_autostart_entries([], dirs=[tmp_path / "missing"]) == []
