"""One JSON config file bound to its value type."""
from __future__ import annotations

import dataclasses, logging, os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Callable, Generic, Optional, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from jsonconfig.errors import ParseError
from jsonconfig.json_store import load_json_config, save_json_config
from jsonconfig.paths import ConfigPathBuilder, HomeResolver, default_home_dir

log = logging.getLogger(__name__)

T = TypeVar("T")


class ConfigFile(Generic[T]):
    def __init__(
        self,
        path: Union[str, "os.PathLike[str]"],
        model: Type[T] = dict,  # type: ignore[assignment]
        *,
        default_factory: Optional[Callable[[], T]] = None,
    ) -> None:
        self._path = Path(path)
        self.model = model
        self.default_factory = default_factory

    @classmethod
    def in_home(
        cls,
        subdir: str,
        filename: str,
        model: Type[T] = dict,  # type: ignore[assignment]
        *,
        default_factory: Optional[Callable[[], T]] = None,
        home_resolver: HomeResolver = default_home_dir,
    ) -> "ConfigFile[T]":
        path = ConfigPathBuilder.from_home_subdir(subdir, home_resolver).build(filename)
        return cls(path, model, default_factory=default_factory)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def load(self) -> T:
        return load_json_config(self._path, self.model, default_factory=self.default_factory)

    def save(self, value: T) -> None:
        save_json_config(value, self._path)

    def update(self, **changes: Any) -> T:
        """Load, apply ``changes``, re-validate and save. Returns the saved value."""
        current = self.load()
        try:
            updated = self._apply(current, changes)
        except (ValidationError, TypeError) as e:
            raise ParseError(f"Invalid update for config {self._path}: {e}", self._path) from e
        self.save(updated)
        log.info("Config %s updated (%s)", self._path, ", ".join(sorted(changes)) or "no changes")
        return updated

    def _apply(self, current: Any, changes: dict) -> Any:
        if isinstance(current, BaseModel):
            cls = type(current)
            unknown = set(changes) - set(cls.model_fields)
            if unknown:
                raise TypeError(f"unknown field(s): {', '.join(sorted(unknown))}")
            merged = current.model_copy(update=changes)
            return cls.model_validate(merged.model_dump(by_alias=True))
        if dataclasses.is_dataclass(current) and not isinstance(current, type):
            merged = dataclasses.replace(current, **changes)
            return TypeAdapter(type(current)).validate_python(dataclasses.asdict(merged))
        if isinstance(current, Mapping):
            return TypeAdapter(self.model).validate_python({**current, **changes})
        raise TypeError(f"cannot update a value of type {type(current).__name__}")
