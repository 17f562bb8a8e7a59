"""Helpers turning decoded JSON into typed results."""

from typing import Any, TypeVar

import pydantic

from .errors import DecodeError, MissingResultsError

T = TypeVar("T")


def decode(type_: type[T], data: Any) -> T:
    """Validate JSON data into ``type_`` (a model or e.g. ``list[Lint]``).

    Raises:
        DecodeError: If the data does not match the expected shape.
    """
    try:
        return pydantic.TypeAdapter(type_).validate_python(data)
    except pydantic.ValidationError as exc:
        msg = f"Response does not match {type_!r}: {exc.error_count()} error(s)"
        raise DecodeError(msg) from exc


def extract_text(data: Any, key: str) -> str:
    """Return the string stored under ``key`` in a JSON object.

    Absent, null and non-string values are all reported the same way.

    Raises:
        MissingResultsError: If ``data`` has no string under ``key``.
    """
    value = data.get(key) if isinstance(data, dict) else None
    if not isinstance(value, str):
        msg = f"Response has no string field {key!r}"
        raise MissingResultsError(msg)
    return value
