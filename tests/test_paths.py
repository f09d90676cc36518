import os
from pathlib import Path

import pytest

from jsonconfig.errors import HomeDirError
from jsonconfig.paths import ConfigPathBuilder, default_home_dir


def test_config_path_builder():
    builder = ConfigPathBuilder(Path("/test/dir"))
    path = builder.build("config.json")
    assert path == Path("/test/dir") / "config.json"
    if os.name != "nt":
        assert str(path) == "/test/dir/config.json"


def test_builder_accepts_str_and_keeps_base_dir():
    builder = ConfigPathBuilder("relative/base")
    assert builder.base_dir == Path("relative/base")
    assert builder.build("a.json") == Path("relative/base/a.json")
    assert builder.base_dir == Path("relative/base")


def test_base_dir_is_read_only():
    builder = ConfigPathBuilder("/x")
    with pytest.raises(AttributeError):
        builder.base_dir = Path("/y")


def test_from_home_subdir_uses_resolved_home():
    builder = ConfigPathBuilder.from_home_subdir(".claude")
    assert builder.build("settings.json") == Path.home() / ".claude" / "settings.json"


def test_from_home_subdir_with_injected_resolver(tmp_path):
    builder = ConfigPathBuilder.from_home_subdir(".codex", home_resolver=lambda: tmp_path)
    assert builder.build("config.json") == tmp_path / ".codex" / "config.json"


def test_from_home_subdir_without_home_raises():
    with pytest.raises(HomeDirError):
        ConfigPathBuilder.from_home_subdir(".claude", home_resolver=lambda: None)


def test_default_home_dir_returns_none_when_unresolvable(monkeypatch):
    def boom():
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", staticmethod(boom))
    assert default_home_dir() is None
