"""Commands on keys and plain string values."""

from __future__ import annotations

import enum
import warnings
from dataclasses import dataclass
from typing import Any

from redcmd.command import Command, cmd, is_single_arg


class ExpiryKind(enum.Enum):
    """How GETEX sets the expiration of a key."""

    EX = "EX"
    PX = "PX"
    EXAT = "EXAT"
    PXAT = "PXAT"
    PERSIST = "PERSIST"


@dataclass(frozen=True)
class Expiry:
    """An expiration option: seconds, milliseconds, timestamps or persist."""

    kind: ExpiryKind
    value: int | None = None

    def __post_init__(self) -> None:
        if self.kind is ExpiryKind.PERSIST:
            if self.value is not None:
                raise ValueError("PERSIST takes no time value")
        elif self.value is None:
            raise ValueError(f"{self.kind.value} needs a time value")

    @classmethod
    def ex(cls, seconds: int) -> Expiry:
        return cls(ExpiryKind.EX, seconds)

    @classmethod
    def px(cls, milliseconds: int) -> Expiry:
        return cls(ExpiryKind.PX, milliseconds)

    @classmethod
    def exat(cls, timestamp: int) -> Expiry:
        return cls(ExpiryKind.EXAT, timestamp)

    @classmethod
    def pxat(cls, timestamp_ms: int) -> Expiry:
        return cls(ExpiryKind.PXAT, timestamp_ms)

    @classmethod
    def persist(cls) -> Expiry:
        return cls(ExpiryKind.PERSIST)

    def to_redis_args(self) -> list[bytes]:
        args = [self.kind.value.encode()]
        if self.value is not None:
            args.append(str(self.value).encode())
        return args

    def is_single_arg(self) -> bool:
        return self.value is None


def get(key: Any) -> Command:
    """Get the value of a key; several keys make it an MGET."""
    return cmd("GET" if is_single_arg(key) else "MGET").arg(key)


def mget(key: Any) -> Command:
    """Get the values of keys."""
    return cmd("MGET").arg(key)


def keys(pattern: Any) -> Command:
    """Get all keys matching a pattern."""
    return cmd("KEYS").arg(pattern)


def set(key: Any, value: Any) -> Command:  # noqa: A001
    """Set the string value of a key."""
    return cmd("SET").arg(key).arg(value)


def set_multiple(items: Any) -> Command:
    """Set multiple keys to their values (deprecated name of mset)."""
    warnings.warn(
        "set_multiple() is renamed to mset()", DeprecationWarning, stacklevel=2
    )
    return mset(items)


def mset(items: Any) -> Command:
    """Set multiple keys to their values."""
    return cmd("MSET").arg(items)


def set_ex(key: Any, value: Any, seconds: int) -> Command:
    """Set the value and expiration in seconds of a key."""
    return cmd("SETEX").arg(key).arg(seconds).arg(value)


def pset_ex(key: Any, value: Any, milliseconds: int) -> Command:
    """Set the value and expiration in milliseconds of a key."""
    return cmd("PSETEX").arg(key).arg(milliseconds).arg(value)


def set_nx(key: Any, value: Any) -> Command:
    """Set the value of a key only if it does not exist."""
    return cmd("SETNX").arg(key).arg(value)


def mset_nx(items: Any) -> Command:
    """Set multiple keys, failing if at least one already exists."""
    return cmd("MSETNX").arg(items)


def getset(key: Any, value: Any) -> Command:
    """Set the string value of a key and return its old value."""
    return cmd("GETSET").arg(key).arg(value)


def getrange(key: Any, start: int, end: int) -> Command:
    """Get a substring of the value of a key; negative offsets count from the end."""
    return cmd("GETRANGE").arg(key).arg(start).arg(end)


def setrange(key: Any, offset: int, value: Any) -> Command:
    """Overwrite part of the value stored at a key from an offset."""
    return cmd("SETRANGE").arg(key).arg(offset).arg(value)


def delete(key: Any) -> Command:
    """Delete one or more keys."""
    return cmd("DEL").arg(key)


def exists(key: Any) -> Command:
    """Determine if a key exists."""
    return cmd("EXISTS").arg(key)


def expire(key: Any, seconds: int) -> Command:
    """Set a key's time to live in seconds."""
    return cmd("EXPIRE").arg(key).arg(seconds)


def expire_at(key: Any, ts: int) -> Command:
    """Set the expiration of a key as a UNIX timestamp."""
    return cmd("EXPIREAT").arg(key).arg(ts)


def pexpire(key: Any, ms: int) -> Command:
    """Set a key's time to live in milliseconds."""
    return cmd("PEXPIRE").arg(key).arg(ms)


def pexpire_at(key: Any, ts: int) -> Command:
    """Set the expiration of a key as a UNIX timestamp in milliseconds."""
    return cmd("PEXPIREAT").arg(key).arg(ts)


def persist(key: Any) -> Command:
    """Remove the expiration from a key."""
    return cmd("PERSIST").arg(key)


def ttl(key: Any) -> Command:
    """Get the time to live of a key."""
    return cmd("TTL").arg(key)


def pttl(key: Any) -> Command:
    """Get the time to live of a key in milliseconds."""
    return cmd("PTTL").arg(key)


def get_ex(key: Any, expire_at: Expiry) -> Command:
    """Get the value of a key and set its expiration."""
    return cmd("GETEX").arg(key).arg(expire_at)


def get_del(key: Any) -> Command:
    """Get the value of a key and delete it."""
    return cmd("GETDEL").arg(key)


def rename(key: Any, new_key: Any) -> Command:
    """Rename a key."""
    return cmd("RENAME").arg(key).arg(new_key)


def rename_nx(key: Any, new_key: Any) -> Command:
    """Rename a key only if the new key does not exist."""
    return cmd("RENAMENX").arg(key).arg(new_key)


def unlink(key: Any) -> Command:
    """Unlink one or more keys."""
    return cmd("UNLINK").arg(key)


def object_encoding(key: Any) -> Command:
    """Return the encoding of a key."""
    return cmd("OBJECT").arg("ENCODING").arg(key)


def object_idletime(key: Any) -> Command:
    """Return the seconds since the last access of a key."""
    return cmd("OBJECT").arg("IDLETIME").arg(key)


def object_freq(key: Any) -> Command:
    """Return the logarithmic access frequency counter of a key."""
    return cmd("OBJECT").arg("FREQ").arg(key)


def object_refcount(key: Any) -> Command:
    """Return the reference count of a key."""
    return cmd("OBJECT").arg("REFCOUNT").arg(key)


def scan() -> Command:
    """Incrementally iterate the key space."""
    return cmd("SCAN").cursor_arg(0)


def scan_match(pattern: Any) -> Command:
    """Incrementally iterate the keys matching a pattern."""
    return cmd("SCAN").cursor_arg(0).arg("MATCH").arg(pattern)