"""Commands on hashes."""

from __future__ import annotations

from typing import Any

from redcmd.command import Command, cmd, is_float, is_single_arg


def hget(key: Any, field: Any) -> Command:
    """Get one field of a hash; several fields make it an HMGET."""
    return cmd("HGET" if is_single_arg(field) else "HMGET").arg(key).arg(field)


def hdel(key: Any, field: Any) -> Command:
    """Delete one or more fields from a hash."""
    return cmd("HDEL").arg(key).arg(field)


def hset(key: Any, field: Any, value: Any) -> Command:
    """Set a single field in a hash."""
    return cmd("HSET").arg(key).arg(field).arg(value)


def hset_nx(key: Any, field: Any, value: Any) -> Command:
    """Set a single field in a hash if it does not exist."""
    return cmd("HSETNX").arg(key).arg(field).arg(value)


def hset_multiple(key: Any, items: Any) -> Command:
    """Set several fields in a hash from (field, value) pairs."""
    return cmd("HMSET").arg(key).arg(items)


def hincr(key: Any, field: Any, delta: Any) -> Command:
    """Increment a hash field; a float delta issues HINCRBYFLOAT."""
    name = "HINCRBYFLOAT" if is_float(delta) else "HINCRBY"
    return cmd(name).arg(key).arg(field).arg(delta)


def hexists(key: Any, field: Any) -> Command:
    """Check whether a field exists in a hash."""
    return cmd("HEXISTS").arg(key).arg(field)


def hkeys(key: Any) -> Command:
    """Get all field names of a hash."""
    return cmd("HKEYS").arg(key)


def hvals(key: Any) -> Command:
    """Get all values of a hash."""
    return cmd("HVALS").arg(key)


def hgetall(key: Any) -> Command:
    """Get all fields and values of a hash."""
    return cmd("HGETALL").arg(key)


def hlen(key: Any) -> Command:
    """Get the number of fields in a hash."""
    return cmd("HLEN").arg(key)


def hscan(key: Any) -> Command:
    """Incrementally iterate the fields and values of a hash."""
    return cmd("HSCAN").arg(key).cursor_arg(0)


def hscan_match(key: Any, pattern: Any) -> Command:
    """Incrementally iterate hash fields whose names match a pattern."""
    return cmd("HSCAN").arg(key).cursor_arg(0).arg("MATCH").arg(pattern)