"""JSON helpers: compact serialization and typed deserialization of records."""

from __future__ import annotations

import json
import logging
from dataclasses import MISSING, asdict, fields, is_dataclass
from typing import Any, TypeVar

from cssbuilder.errors import SchemaMismatch

logger = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = ["from_json", "to_json"]


def _default(obj: Any) -> Any:
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: Any, *, indent: int | None = None, sort_keys: bool = False) -> str:
    """Return the JSON representation of *obj*.

    Without *indent* the output is compact (``[1,2,3]``). Dataclass instances
    serialize as their field mapping.

    Raises:
        TypeError: *obj* contains a value JSON cannot represent.
        ValueError: *obj* contains NaN or an infinity, which have no JSON form.
    """
    separators = (",", ":") if indent is None else (",", ": ")
    return json.dumps(
        obj,
        indent=indent,
        sort_keys=sort_keys,
        separators=separators,
        allow_nan=False,
        default=_default,
    )


def from_json(cls: type[T], text: str) -> T:
    """Build an instance of the dataclass *cls* from JSON *text*.

    Named init fields are copied from the parsed object. Fields without a
    default must be present; unknown keys are ignored.

    Raises:
        TypeError: *cls* is not a dataclass type.
        SchemaMismatch: The payload is not an object or lacks required fields.
        json.JSONDecodeError: *text* is not valid JSON.
    """
    if not (is_dataclass(cls) and isinstance(cls, type)):
        raise TypeError(f"{cls!r} is not a dataclass type")

    data = json.loads(text)
    if not isinstance(data, dict):
        raise SchemaMismatch(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )

    init_fields = [f for f in fields(cls) if f.init]
    missing = tuple(
        f.name
        for f in init_fields
        if f.name not in data
        and f.default is MISSING
        and f.default_factory is MISSING
    )
    if missing:
        raise SchemaMismatch(
            f"{cls.__name__} is missing required field(s): {', '.join(missing)}",
            missing=missing,
        )

    names = {f.name for f in init_fields}
    extra = sorted(set(data) - names)
    if extra:
        logger.debug("Ignoring unknown %s field(s): %s", cls.__name__, extra)

    return cls(**{k: v for k, v in data.items() if k in names})
