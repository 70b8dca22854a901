"""Commands on streams and consumer groups."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from redcmd.command import Command, cmd


def _sequence(values: Iterable[Any], what: str) -> list[Any]:
    if isinstance(values, (str, bytes, bytearray, memoryview)):
        raise TypeError(f"{what} must be a sequence, not a single value")
    return list(values)


def xack(key: Any, group: Any, ids: Iterable[Any]) -> Command:
    """Acknowledge pending messages checked out by a consumer."""
    return cmd("XACK").arg(key).arg(group).arg(_sequence(ids, "ids"))


def xadd(key: Any, entry_id: Any, items: Iterable[Any]) -> Command:
    """Add a message of (field, value) pairs; use ``*`` as id for the current time."""
    return cmd("XADD").arg(key).arg(entry_id).arg(_sequence(items, "items"))


def xadd_map(key: Any, entry_id: Any, mapping: Any) -> Command:
    """Add a message whose fields and values come from a mapping."""
    return cmd("XADD").arg(key).arg(entry_id).arg(mapping)


def xclaim(
    key: Any, group: Any, consumer: Any, min_idle_time: Any, ids: Iterable[Any]
) -> Command:
    """Claim pending messages that have been idle for some time."""
    return (
        cmd("XCLAIM")
        .arg(key)
        .arg(group)
        .arg(consumer)
        .arg(min_idle_time)
        .arg(_sequence(ids, "ids"))
    )


def xdel(key: Any, ids: Iterable[Any]) -> Command:
    """Delete messages from a stream by id."""
    return cmd("XDEL").arg(key).arg(_sequence(ids, "ids"))


def xgroup_create(key: Any, group: Any, entry_id: Any) -> Command:
    """Create a consumer group on an existing stream."""
    return cmd("XGROUP").arg("CREATE").arg(key).arg(group).arg(entry_id)


def xgroup_create_mkstream(key: Any, group: Any, entry_id: Any) -> Command:
    """Create a consumer group, making the stream when it does not exist."""
    return (
        cmd("XGROUP").arg("CREATE").arg(key).arg(group).arg(entry_id).arg("MKSTREAM")
    )


def xgroup_setid(key: Any, group: Any, entry_id: Any) -> Command:
    """Set the id a consumer group reads from next."""
    return cmd("XGROUP").arg("SETID").arg(key).arg(group).arg(entry_id)


def xgroup_destroy(key: Any, group: Any) -> Command:
    """Destroy a consumer group."""
    return cmd("XGROUP").arg("DESTROY").arg(key).arg(group)


def xgroup_delconsumer(key: Any, group: Any, consumer: Any) -> Command:
    """Delete a consumer from a consumer group."""
    return cmd("XGROUP").arg("DELCONSUMER").arg(key).arg(group).arg(consumer)


def xinfo_consumers(key: Any, group: Any) -> Command:
    """Return details about the consumers of a group."""
    return cmd("XINFO").arg("CONSUMERS").arg(key).arg(group)


def xinfo_groups(key: Any) -> Command:
    """Return the consumer groups of a stream."""
    return cmd("XINFO").arg("GROUPS").arg(key)


def xinfo_stream(key: Any) -> Command:
    """Return high-level details about a stream."""
    return cmd("XINFO").arg("STREAM").arg(key)


def xlen(key: Any) -> Command:
    """Return the number of messages in a stream."""
    return cmd("XLEN").arg(key)


def xpending(key: Any, group: Any) -> Command:
    """Summarise the pending messages of a consumer group."""
    return cmd("XPENDING").arg(key).arg(group)


def xpending_count(key: Any, group: Any, start: Any, end: Any, count: Any) -> Command:
    """List pending messages over a range of ids."""
    return cmd("XPENDING").arg(key).arg(group).arg(start).arg(end).arg(count)


def xpending_consumer_count(
    key: Any, group: Any, start: Any, end: Any, count: Any, consumer: Any
) -> Command:
    """List pending messages of one consumer over a range of ids."""
    return (
        cmd("XPENDING")
        .arg(key)
        .arg(group)
        .arg(start)
        .arg(end)
        .arg(count)
        .arg(consumer)
    )


def xrange(key: Any, start: Any, end: Any) -> Command:
    """Return the messages of a stream between two ids."""
    return cmd("XRANGE").arg(key).arg(start).arg(end)


def xrange_all(key: Any) -> Command:
    """Return every message of a stream."""
    return cmd("XRANGE").arg(key).arg("-").arg("+")


def xrange_count(key: Any, start: Any, end: Any, count: Any) -> Command:
    """Return at most count messages between two ids."""
    return cmd("XRANGE").arg(key).arg(start).arg(end).arg("COUNT").arg(count)


def xread(keys: Iterable[Any], ids: Iterable[Any]) -> Command:
    """Read messages after the given id from each stream."""
    return (
        cmd("XREAD")
        .arg("STREAMS")
        .arg(_sequence(keys, "keys"))
        .arg(_sequence(ids, "ids"))
    )


def xrevrange(key: Any, end: Any, start: Any) -> Command:
    """Return the messages between two ids, newest first."""
    return cmd("XREVRANGE").arg(key).arg(end).arg(start)


def xrevrange_all(key: Any) -> Command:
    """Return every message of a stream, newest first."""
    return cmd("XREVRANGE").arg(key).arg("+").arg("-")


def xrevrange_count(key: Any, end: Any, start: Any, count: Any) -> Command:
    """Return at most count messages between two ids, newest first."""
    return cmd("XREVRANGE").arg(key).arg(end).arg(start).arg("COUNT").arg(count)