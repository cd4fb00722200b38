"""
Normalizers for settings read from the environment or a .env file.

Both run in `mode="before"` validators, ahead of the Literal checks. A value that
is blank after trimming (e.g. `LOG_LEVEL=` left empty in .env) falls back to the
field default instead of failing validation.
"""

from typing import Callable

from pydantic_core import PydanticUseDefault


def _normalize(value, transform: Callable[[str], str]):
    if value is None:
        return None
    if not isinstance(value, str):
        return value
    value = value.strip()
    if not value:
        raise PydanticUseDefault()
    return transform(value)


def to_uppercase(value: str | None) -> str | None:
    return _normalize(value, str.upper)


def to_lowercase(value: str | None) -> str | None:
    return _normalize(value, str.lower)
