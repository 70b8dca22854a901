"""Building Redis commands as lists of byte-string arguments."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

_READONLY_COMMANDS = frozenset(
    name.encode()
    for name in (
        # @admin
        "LASTSAVE",
        # @bitmap
        "BITCOUNT", "BITFIELD_RO", "BITPOS", "GETBIT",
        # @connection
        "CLIENT", "ECHO",
        # @geo
        "GEODIST", "GEOHASH", "GEOPOS", "GEORADIUSBYMEMBER_RO", "GEORADIUS_RO",
        "GEOSEARCH",
        # @hash
        "HEXISTS", "HGET", "HGETALL", "HKEYS", "HLEN", "HMGET", "HRANDFIELD",
        "HSCAN", "HSTRLEN", "HVALS",
        # @hyperloglog
        "PFCOUNT",
        # @keyspace
        "DBSIZE", "DUMP", "EXISTS", "EXPIRETIME", "KEYS", "OBJECT", "PEXPIRETIME",
        "PTTL", "RANDOMKEY", "SCAN", "TOUCH", "TTL", "TYPE",
        # @list
        "LINDEX", "LLEN", "LPOS", "LRANGE", "SORT_RO",
        # @scripting
        "EVALSHA_RO", "EVAL_RO", "FCALL_RO",
        # @set
        "SCARD", "SDIFF", "SINTER", "SINTERCARD", "SISMEMBER", "SMEMBERS",
        "SMISMEMBER", "SRANDMEMBER", "SSCAN", "SUNION",
        # @sortedset
        "ZCARD", "ZCOUNT", "ZDIFF", "ZINTER", "ZINTERCARD", "ZLEXCOUNT",
        "ZMSCORE", "ZRANDMEMBER", "ZRANGE", "ZRANGEBYLEX", "ZRANGEBYSCORE",
        "ZRANK", "ZREVRANGE", "ZREVRANGEBYLEX", "ZREVRANGEBYSCORE", "ZREVRANK",
        "ZSCAN", "ZSCORE", "ZUNION",
        # @stream
        "XINFO", "XLEN", "XPENDING", "XRANGE", "XREAD", "XREVRANGE",
        # @string
        "GET", "GETRANGE", "LCS", "MGET", "STRALGO", "STRLEN", "SUBSTR",
    )
)


def _as_bytes(name: str | bytes) -> bytes:
    return name.encode() if isinstance(name, str) else bytes(name)


def to_redis_args(value: Any) -> list[bytes]:
    """Convert a value into the list of byte-string arguments it stands for.

    ``None`` contributes nothing; tuples, lists, sets and dictionaries are
    flattened; objects with a ``to_redis_args`` method supply their own.
    """
    if value is None:
        return []
    if isinstance(value, bool):
        return [b"1" if value else b"0"]
    if isinstance(value, (bytes, bytearray, memoryview)):
        return [bytes(value)]
    if isinstance(value, str):
        return [value.encode()]
    if isinstance(value, int):
        return [str(value).encode()]
    if isinstance(value, float):
        return [repr(value).encode()]
    if hasattr(value, "to_redis_args"):
        return list(value.to_redis_args())
    if isinstance(value, dict):
        out: list[bytes] = []
        for key, item in value.items():
            out.extend(to_redis_args(key))
            out.extend(to_redis_args(item))
        return out
    if isinstance(value, (tuple, list, set, frozenset)):
        return [arg for item in value for arg in to_redis_args(item)]
    raise TypeError(f"cannot use {type(value).__name__} as a redis argument")


def is_single_arg(value: Any) -> bool:
    """Tell whether a value stands for exactly one argument, as a key does."""
    if value is None:
        return False
    if isinstance(value, (bool, bytes, bytearray, memoryview, str, int, float)):
        return True
    checker = getattr(value, "is_single_arg", None)
    if callable(checker):
        return bool(checker())
    if hasattr(value, "to_redis_args"):
        return len(value.to_redis_args()) == 1
    if isinstance(value, (dict, set, frozenset)):
        return len(value) <= 1
    if isinstance(value, tuple):
        return len(value) == 1
    if isinstance(value, list):
        return len(value) == 1 and is_single_arg(value[0])
    raise TypeError(f"cannot use {type(value).__name__} as a redis argument")


def is_float(value: Any) -> bool:
    """Tell whether a numeric argument should use the float variant of a command."""
    return isinstance(value, float)


def is_readonly_command(name: str | bytes) -> bool:
    """Tell whether the named command only reads data."""
    return _as_bytes(name) in _READONLY_COMMANDS


class Command:
    """A Redis command with its arguments, built up by chained calls."""

    def __init__(self, name: str | bytes) -> None:
        self.name = _as_bytes(name)
        self._args: list[bytes] = [self.name]
        self._cursor_index: int | None = None

    def arg(self, value: Any) -> Command:
        """Append the arguments a value stands for and return the command."""
        self._args.extend(to_redis_args(value))
        return self

    def cursor_arg(self, cursor: int) -> Command:
        """Append a scan cursor and remember its position."""
        if self._cursor_index is not None:
            raise ValueError("command already has a cursor argument")
        self._cursor_index = len(self._args)
        self._args.append(str(cursor).encode())
        return self

    @property
    def cursor(self) -> int | None:
        """The scan cursor, or None when the command does not iterate."""
        if self._cursor_index is None:
            return None
        return int(self._args[self._cursor_index])

    @property
    def args(self) -> list[bytes]:
        """All arguments, the command name first."""
        return list(self._args)

    def to_redis_args(self) -> list[bytes]:
        return list(self._args)

    def __iter__(self) -> Iterable[bytes]:
        return iter(list(self._args))

    def __len__(self) -> int:
        return len(self._args)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Command):
            return NotImplemented
        return self._args == other._args and self._cursor_index == other._cursor_index

    def __repr__(self) -> str:
        return f"Command({b' '.join(self._args)!r})"


def cmd(name: str | bytes) -> Command:
    """Start a new command with the given name."""
    return Command(name)