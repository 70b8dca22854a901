"""Commands on string values, bitmaps, HyperLogLogs and publishing."""

from __future__ import annotations

from typing import Any

from redcmd.command import Command, cmd, is_float


def append(key: Any, value: Any) -> Command:
    """Append a value to a key."""
    return cmd("APPEND").arg(key).arg(value)


def incr(key: Any, delta: Any) -> Command:
    """Increment the numeric value of a key.

    A float delta issues INCRBYFLOAT, any other delta INCRBY.
    """
    name = "INCRBYFLOAT" if is_float(delta) else "INCRBY"
    return cmd(name).arg(key).arg(delta)


def decr(key: Any, delta: Any) -> Command:
    """Decrement the numeric value of a key by the given amount."""
    return cmd("DECRBY").arg(key).arg(delta)


def setbit(key: Any, offset: int, value: bool) -> Command:
    """Set or clear the bit at an offset in the string stored at a key."""
    return cmd("SETBIT").arg(key).arg(offset).arg(int(bool(value)))


def getbit(key: Any, offset: int) -> Command:
    """Return the bit value at an offset in the string stored at a key."""
    return cmd("GETBIT").arg(key).arg(offset)


def bitcount(key: Any) -> Command:
    """Count the set bits in a string."""
    return cmd("BITCOUNT").arg(key)


def bitcount_range(key: Any, start: int, end: int) -> Command:
    """Count the set bits in a string within a range."""
    return cmd("BITCOUNT").arg(key).arg(start).arg(end)


def bit_and(dstkey: Any, srckeys: Any) -> Command:
    """Bitwise AND of several keys, stored in the destination key."""
    return cmd("BITOP").arg("AND").arg(dstkey).arg(srckeys)


def bit_or(dstkey: Any, srckeys: Any) -> Command:
    """Bitwise OR of several keys, stored in the destination key."""
    return cmd("BITOP").arg("OR").arg(dstkey).arg(srckeys)


def bit_xor(dstkey: Any, srckeys: Any) -> Command:
    """Bitwise XOR of several keys, stored in the destination key."""
    return cmd("BITOP").arg("XOR").arg(dstkey).arg(srckeys)


def bit_not(dstkey: Any, srckey: Any) -> Command:
    """Bitwise NOT of a key, stored in the destination key."""
    return cmd("BITOP").arg("NOT").arg(dstkey).arg(srckey)


def strlen(key: Any) -> Command:
    """Get the length of the value stored at a key."""
    return cmd("STRLEN").arg(key)


def pfadd(key: Any, element: Any) -> Command:
    """Add elements to a HyperLogLog."""
    return cmd("PFADD").arg(key).arg(element)


def pfcount(key: Any) -> Command:
    """Return the approximate cardinality of the HyperLogLog(s) at key(s)."""
    return cmd("PFCOUNT").arg(key)


def pfmerge(dstkey: Any, srckeys: Any) -> Command:
    """Merge several HyperLogLogs into one."""
    return cmd("PFMERGE").arg(dstkey).arg(srckeys)


def publish(channel: Any, message: Any) -> Command:
    """Post a message to a channel."""
    return cmd("PUBLISH").arg(channel).arg(message)