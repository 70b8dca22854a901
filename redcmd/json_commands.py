"""Commands of the RedisJSON module."""

from __future__ import annotations

import json
from typing import Any

from redcmd.command import Command, cmd, is_single_arg


def _encode(value: Any) -> str:
    """Serialise a value as compact JSON.

    Raises TypeError for values JSON cannot hold and ValueError for
    non-finite floats.
    """
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


def json_arr_append(key: Any, path: Any, value: Any) -> Command:
    """Append a JSON value to the array at path."""
    return cmd("JSON.ARRAPPEND").arg(key).arg(path).arg(_encode(value))


def json_arr_index(key: Any, path: Any, value: Any) -> Command:
    """Return the first index of a JSON value in the array at path."""
    return cmd("JSON.ARRINDEX").arg(key).arg(path).arg(_encode(value))


def json_arr_index_ss(
    key: Any, path: Any, value: Any, start: int = 0, stop: int = 0
) -> Command:
    """Like json_arr_index, searching between start and stop; 0 means no bound."""
    return (
        cmd("JSON.ARRINDEX")
        .arg(key)
        .arg(path)
        .arg(_encode(value))
        .arg(int(start))
        .arg(int(stop))
    )


def json_arr_insert(key: Any, path: Any, index: int, value: Any) -> Command:
    """Insert a JSON value into the array at path before index."""
    return cmd("JSON.ARRINSERT").arg(key).arg(path).arg(int(index)).arg(_encode(value))


def json_arr_len(key: Any, path: Any) -> Command:
    """Report the length of the array at path."""
    return cmd("JSON.ARRLEN").arg(key).arg(path)


def json_arr_pop(key: Any, path: Any, index: int = -1) -> Command:
    """Remove and return the element at index of the array; -1 is the last."""
    return cmd("JSON.ARRPOP").arg(key).arg(path).arg(int(index))


def json_arr_trim(key: Any, path: Any, start: int, stop: int) -> Command:
    """Trim the array at path to the inclusive range start..stop."""
    return cmd("JSON.ARRTRIM").arg(key).arg(path).arg(int(start)).arg(int(stop))


def json_clear(key: Any, path: Any) -> Command:
    """Clear containers and zero numbers at path."""
    return cmd("JSON.CLEAR").arg(key).arg(path)


def json_del(key: Any, path: Any) -> Command:
    """Delete the value at path."""
    return cmd("JSON.DEL").arg(key).arg(path)


def json_get(key: Any, path: Any) -> Command:
    """Get the value at path; several keys make it a JSON.MGET."""
    name = "JSON.GET" if is_single_arg(key) else "JSON.MGET"
    return cmd(name).arg(key).arg(path)


def json_num_incr_by(key: Any, path: Any, value: int) -> Command:
    """Increment the number at path by value."""
    return cmd("JSON.NUMINCRBY").arg(key).arg(path).arg(int(value))


def json_obj_keys(key: Any, path: Any) -> Command:
    """Return the keys of the object at path."""
    return cmd("JSON.OBJKEYS").arg(key).arg(path)


def json_obj_len(key: Any, path: Any) -> Command:
    """Report the number of keys of the object at path."""
    return cmd("JSON.OBJLEN").arg(key).arg(path)


def json_set(key: Any, path: Any, value: Any) -> Command:
    """Set the JSON value at path."""
    return cmd("JSON.SET").arg(key).arg(path).arg(_encode(value))


def json_str_append(key: Any, path: Any, value: Any) -> Command:
    """Append a JSON string to the string at path."""
    return cmd("JSON.STRAPPEND").arg(key).arg(path).arg(value)


def json_str_len(key: Any, path: Any) -> Command:
    """Report the length of the string at path."""
    return cmd("JSON.STRLEN").arg(key).arg(path)


def json_toggle(key: Any, path: Any) -> Command:
    """Toggle the boolean at path."""
    return cmd("JSON.TOGGLE").arg(key).arg(path)


def json_type(key: Any, path: Any) -> Command:
    """Report the type of the value at path."""
    return cmd("JSON.TYPE").arg(key).arg(path)