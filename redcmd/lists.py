"""Commands on lists."""

from __future__ import annotations

import enum
from typing import Any

from redcmd.command import Command, cmd


class Direction(enum.Enum):
    """The end of a list a command works on."""

    LEFT = "LEFT"
    RIGHT = "RIGHT"

    def to_redis_args(self) -> list[bytes]:
        return [self.value.encode()]


class LposOptions:
    """Options for LPOS; each setter returns a new set of options."""

    __slots__ = ("_count", "_rank", "_maxlen")

    def __init__(self) -> None:
        self._count: int | None = None
        self._rank: int | None = None
        self._maxlen: int | None = None

    def _with(self, **changes: int) -> LposOptions:
        copy = LposOptions()
        copy._count = changes.get("count", self._count)
        copy._rank = changes.get("rank", self._rank)
        copy._maxlen = changes.get("maxlen", self._maxlen)
        return copy

    def count(self, n: int) -> LposOptions:
        """Limit the results to the first n matching items."""
        if n < 0:
            raise ValueError("count must not be negative")
        return self._with(count=n)

    def rank(self, n: int) -> LposOptions:
        """Return the n-th of the matching items."""
        return self._with(rank=n)

    def maxlen(self, n: int) -> LposOptions:
        """Limit the search to n items of the list."""
        if n < 0:
            raise ValueError("maxlen must not be negative")
        return self._with(maxlen=n)

    def to_redis_args(self) -> list[bytes]:
        args: list[bytes] = []
        for name, value in (
            (b"COUNT", self._count),
            (b"RANK", self._rank),
            (b"MAXLEN", self._maxlen),
        ):
            if value is not None:
                args.extend((name, str(value).encode()))
        return args

    def is_single_arg(self) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LposOptions):
            return NotImplemented
        return self.to_redis_args() == other.to_redis_args()

    def __repr__(self) -> str:
        return (
            f"LposOptions(count={self._count!r}, rank={self._rank!r}, "
            f"maxlen={self._maxlen!r})"
        )


def _pop_count(count: int | None) -> int | None:
    if count is not None and count <= 0:
        raise ValueError("count must be a positive number")
    return count


def blmove(
    srckey: Any, dstkey: Any, src_dir: Direction, dst_dir: Direction, timeout: int
) -> Command:
    """Move an element between lists, blocking until one is available."""
    return (
        cmd("BLMOVE").arg(srckey).arg(dstkey).arg(src_dir).arg(dst_dir).arg(timeout)
    )


def blmpop(
    timeout: int, numkeys: int, key: Any, direction: Direction, count: int
) -> Command:
    """Pop elements from the first non-empty list, blocking until one is available."""
    return (
        cmd("BLMPOP")
        .arg(timeout)
        .arg(numkeys)
        .arg(key)
        .arg(direction)
        .arg("COUNT")
        .arg(count)
    )


def blpop(key: Any, timeout: int) -> Command:
    """Remove and get the first element of a list, blocking until one is available."""
    return cmd("BLPOP").arg(key).arg(timeout)


def brpop(key: Any, timeout: int) -> Command:
    """Remove and get the last element of a list, blocking until one is available."""
    return cmd("BRPOP").arg(key).arg(timeout)


def brpoplpush(srckey: Any, dstkey: Any, timeout: int) -> Command:
    """Pop from one list and push to another, blocking until one is available."""
    return cmd("BRPOPLPUSH").arg(srckey).arg(dstkey).arg(timeout)


def lindex(key: Any, index: int) -> Command:
    """Get an element of a list by its index."""
    return cmd("LINDEX").arg(key).arg(index)


def linsert_before(key: Any, pivot: Any, value: Any) -> Command:
    """Insert an element before another element of a list."""
    return cmd("LINSERT").arg(key).arg("BEFORE").arg(pivot).arg(value)


def linsert_after(key: Any, pivot: Any, value: Any) -> Command:
    """Insert an element after another element of a list."""
    return cmd("LINSERT").arg(key).arg("AFTER").arg(pivot).arg(value)


def llen(key: Any) -> Command:
    """Return the length of a list."""
    return cmd("LLEN").arg(key)


def lmove(srckey: Any, dstkey: Any, src_dir: Direction, dst_dir: Direction) -> Command:
    """Pop an element from one list, push it to another and return it."""
    return cmd("LMOVE").arg(srckey).arg(dstkey).arg(src_dir).arg(dst_dir)


def lmpop(numkeys: int, key: Any, direction: Direction, count: int) -> Command:
    """Pop up to count elements from the first non-empty list."""
    return (
        cmd("LMPOP").arg(numkeys).arg(key).arg(direction).arg("COUNT").arg(count)
    )


def lpop(key: Any, count: int | None = None) -> Command:
    """Remove and return up to count first elements; one when count is None."""
    return cmd("LPOP").arg(key).arg(_pop_count(count))


def lpos(key: Any, value: Any, options: LposOptions) -> Command:
    """Return the index of matching elements of a list."""
    return cmd("LPOS").arg(key).arg(value).arg(options)


def lpush(key: Any, value: Any) -> Command:
    """Insert values at the head of a list."""
    return cmd("LPUSH").arg(key).arg(value)


def lpush_exists(key: Any, value: Any) -> Command:
    """Insert a value at the head of a list only if the list exists."""
    return cmd("LPUSHX").arg(key).arg(value)


def lrange(key: Any, start: int, stop: int) -> Command:
    """Return a range of elements of a list."""
    return cmd("LRANGE").arg(key).arg(start).arg(stop)


def lrem(key: Any, count: int, value: Any) -> Command:
    """Remove the first count occurrences of a value from a list."""
    return cmd("LREM").arg(key).arg(count).arg(value)


def ltrim(key: Any, start: int, stop: int) -> Command:
    """Trim a list to the given range."""
    return cmd("LTRIM").arg(key).arg(start).arg(stop)


def lset(key: Any, index: int, value: Any) -> Command:
    """Set the list element at an index."""
    return cmd("LSET").arg(key).arg(index).arg(value)


def rpop(key: Any, count: int | None = None) -> Command:
    """Remove and return up to count last elements; one when count is None."""
    return cmd("RPOP").arg(key).arg(_pop_count(count))


def rpoplpush(key: Any, dstkey: Any) -> Command:
    """Pop a value from one list, push it to another and return it."""
    return cmd("RPOPLPUSH").arg(key).arg(dstkey)


def rpush(key: Any, value: Any) -> Command:
    """Insert values at the tail of a list."""
    return cmd("RPUSH").arg(key).arg(value)


def rpush_exists(key: Any, value: Any) -> Command:
    """Insert a value at the tail of a list only if the list exists."""
    return cmd("RPUSHX").arg(key).arg(value)