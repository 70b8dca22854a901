"""Commands on sets."""

from __future__ import annotations

from typing import Any

from redcmd.command import Command, cmd


def sadd(key: Any, member: Any) -> Command:
    """Add one or more members to a set."""
    return cmd("SADD").arg(key).arg(member)


def scard(key: Any) -> Command:
    """Get the number of members of a set."""
    return cmd("SCARD").arg(key)


def sdiff(keys: Any) -> Command:
    """Subtract multiple sets."""
    return cmd("SDIFF").arg(keys)


def sdiffstore(dstkey: Any, keys: Any) -> Command:
    """Subtract multiple sets and store the result in a key."""
    return cmd("SDIFFSTORE").arg(dstkey).arg(keys)


def sinter(keys: Any) -> Command:
    """Intersect multiple sets."""
    return cmd("SINTER").arg(keys)


def sinterstore(dstkey: Any, keys: Any) -> Command:
    """Intersect multiple sets and store the result in a key."""
    return cmd("SINTERSTORE").arg(dstkey).arg(keys)


def sismember(key: Any, member: Any) -> Command:
    """Determine whether a value is a member of a set."""
    return cmd("SISMEMBER").arg(key).arg(member)


def smembers(key: Any) -> Command:
    """Get all members of a set."""
    return cmd("SMEMBERS").arg(key)


def smove(srckey: Any, dstkey: Any, member: Any) -> Command:
    """Move a member from one set to another."""
    return cmd("SMOVE").arg(srckey).arg(dstkey).arg(member)


def spop(key: Any) -> Command:
    """Remove and return a random member of a set."""
    return cmd("SPOP").arg(key)


def srandmember(key: Any) -> Command:
    """Get one random member of a set."""
    return cmd("SRANDMEMBER").arg(key)


def srandmember_multiple(key: Any, count: int) -> Command:
    """Get several random members of a set."""
    return cmd("SRANDMEMBER").arg(key).arg(count)


def srem(key: Any, member: Any) -> Command:
    """Remove one or more members from a set."""
    return cmd("SREM").arg(key).arg(member)


def sunion(keys: Any) -> Command:
    """Add multiple sets."""
    return cmd("SUNION").arg(keys)


def sunionstore(dstkey: Any, keys: Any) -> Command:
    """Add multiple sets and store the result in a key."""
    return cmd("SUNIONSTORE").arg(dstkey).arg(keys)


def sscan(key: Any) -> Command:
    """Incrementally iterate the members of a set."""
    return cmd("SSCAN").arg(key).cursor_arg(0)


def sscan_match(key: Any, pattern: Any) -> Command:
    """Incrementally iterate the members of a set matching a pattern."""
    return cmd("SSCAN").arg(key).cursor_arg(0).arg("MATCH").arg(pattern)