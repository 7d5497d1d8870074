import re
from enum import Enum
from typing import Any, TypeVar

from .errors import MalformedWireDataError

_E = TypeVar("_E", bound=Enum)

_DECIMAL = re.compile(r"-?[0-9]+")


def parse_enum(enum_cls: type[_E], value: Any, field: str) -> _E:
    """Looks up an enum member by its exact (case-sensitive) name."""
    try:
        return enum_cls[value]
    except (KeyError, TypeError) as e:
        raise MalformedWireDataError(
            f"Unknown {field} {value!r}, expected one of "
            f"{', '.join(m.name for m in enum_cls)}"
        ) from e


def parse_int(value: Any, field: str) -> int:
    """Reads an integer sent either as a JSON number or a decimal string."""
    if isinstance(value, bool):
        raise MalformedWireDataError(f"{field} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _DECIMAL.fullmatch(value):
        return int(value)
    raise MalformedWireDataError(f"{field} must be an integer, got {value!r}")
