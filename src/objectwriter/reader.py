"""Readers for files produced by ObjectWriter."""

from __future__ import annotations

import os
from datetime import datetime
from typing import Any, List, Union

from objectwriter.codec.stream import ObjectInputStream
from objectwriter.core.exceptions import DecodingError, IOFailure

PathLike = Union[str, "os.PathLike[str]"]


def read_objects(path: PathLike) -> List[Any]:
    """Decode every value stored in ``path``, in order."""
    try:
        with open(path, "rb") as f:
            return list(ObjectInputStream(f))
    except OSError as exc:
        raise IOFailure(os.fspath(path), exc.strerror or str(exc)) from exc


def read_integers(path: PathLike) -> List[int]:
    values = read_objects(path)
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int):
            raise DecodingError(f"{os.fspath(path)}: expected integers, found {type(value).__name__}")
    return values


def read_string(path: PathLike) -> str:
    value = _read_single(path)
    if not isinstance(value, str):
        raise DecodingError(f"{os.fspath(path)}: expected a string, found {type(value).__name__}")
    return value


def read_timestamp(path: PathLike) -> datetime:
    value = _read_single(path)
    if not isinstance(value, datetime):
        raise DecodingError(f"{os.fspath(path)}: expected a timestamp, found {type(value).__name__}")
    return value


def _read_single(path: PathLike) -> Any:
    values = read_objects(path)
    if len(values) != 1:
        raise DecodingError(f"{os.fspath(path)}: expected exactly one value, found {len(values)}")
    return values[0]
