"""Generic JSON config load/save.

- load_json_config: missing file -> default value, otherwise read + validate
- save_json_config: mkdir parents, pretty JSON (indent=2, UTF-8), overwrite
"""
from __future__ import annotations

import json, logging, os
from pathlib import Path
from typing import Any, Callable, Optional, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from jsonconfig.errors import DirectoryError, ParseError, ReadError, SerializeError, WriteError

log = logging.getLogger(__name__)

T = TypeVar("T")
PathLike = Union[str, "os.PathLike[str]"]


def load_json_config(
    path: PathLike,
    model: Type[T] = dict,  # type: ignore[assignment]
    *,
    default_factory: Optional[Callable[[], T]] = None,
) -> T:
    """Load ``path`` into ``model``; a missing file yields the model's default.

    The default is ``model()``. Types that cannot be called without arguments
    (``typing.Dict[str, int]``, models with required fields) need a
    ``default_factory``, otherwise a missing file raises their own ``TypeError``
    or ``ValidationError``.
    """
    p = Path(path)
    if not p.exists():
        log.debug("Config file not found at %s, using default", p)
        return default_factory() if default_factory is not None else model()

    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(f"Failed to read config from {p}: {e}", p) from e

    try:
        return TypeAdapter(model).validate_json(text)
    except ValidationError as e:
        raise ParseError(f"Failed to parse config from {p}: {e}", p) from e


def dumps_pretty(value: Any, indent: int = 2) -> str:
    try:
        if isinstance(value, BaseModel):
            data = value.model_dump(mode="json", by_alias=True)
        else:
            data = to_jsonable_python(value, by_alias=True)
        return json.dumps(data, ensure_ascii=False, indent=indent, allow_nan=False)
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise SerializeError(f"Failed to serialize config: {e}") from e


def save_json_config(value: Any, path: PathLike, *, indent: int = 2) -> None:
    """Write ``value`` as pretty JSON to ``path``, creating parent directories.

    The file holds exactly the ``json.dumps(indent=2)`` text, no trailing newline.
    """
    p = Path(path)
    parent = p.parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryError(f"Failed to create config directory {parent}: {e}", parent) from e

    # serialize first; a SerializeError must not truncate the existing file
    content = dumps_pretty(value, indent=indent)

    try:
        p.write_text(content, encoding="utf-8")
    except OSError as e:
        raise WriteError(f"Failed to write config to {p}: {e}", p) from e
    log.debug("Config saved successfully to %s", p)
