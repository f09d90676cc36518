from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Optional, Union

from jsonconfig.errors import HomeDirError

HomeResolver = Callable[[], Optional[Path]]


def default_home_dir() -> Optional[Path]:
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return None


class ConfigPathBuilder:
    """Joins config filenames onto a fixed base directory.

    builder = ConfigPathBuilder.from_home_subdir(".claude")
    builder.build("settings.json")  # ~/.claude/settings.json
    """

    __slots__ = ("_base_dir",)

    def __init__(self, base_dir: Union[str, "os.PathLike[str]"]) -> None:
        self._base_dir = Path(base_dir)

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    @classmethod
    def from_home_subdir(cls, subdir: str, home_resolver: HomeResolver = default_home_dir) -> "ConfigPathBuilder":
        home = home_resolver()
        if home is None:
            raise HomeDirError("Failed to get home directory")
        return cls(Path(home) / subdir)

    def build(self, filename: str) -> Path:
        return self._base_dir / filename

    def __repr__(self) -> str:
        return f"ConfigPathBuilder({str(self._base_dir)!r})"
