"""Commands on sorted sets."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from redcmd.command import Command, cmd


def _key_list(keys: Iterable[Any]) -> list[Any]:
    if isinstance(keys, (str, bytes, bytearray, memoryview)):
        raise TypeError("keys must be a sequence of keys, not a single key")
    return list(keys)


def _split_weights(pairs: Iterable[Sequence[Any]]) -> tuple[list[Any], list[Any]]:
    keys: list[Any] = []
    weights: list[Any] = []
    for key, weight in _key_list(pairs):
        keys.append(key)
        weights.append(weight)
    return keys, weights


def _store(name: str, dstkey: Any, keys: Iterable[Any], aggregate: str | None) -> Command:
    key_list = _key_list(keys)
    command = cmd(name).arg(dstkey).arg(len(key_list)).arg(key_list)
    if aggregate is not None:
        command.arg("AGGREGATE").arg(aggregate)
    return command


def _store_weighted(
    name: str, dstkey: Any, pairs: Iterable[Sequence[Any]], aggregate: str | None
) -> Command:
    key_list, weights = _split_weights(pairs)
    return _store(name, dstkey, key_list, aggregate).arg("WEIGHTS").arg(weights)


def zadd(key: Any, member: Any, score: Any) -> Command:
    """Add a member to a sorted set, or update its score."""
    return cmd("ZADD").arg(key).arg(score).arg(member)


def zadd_multiple(key: Any, items: Any) -> Command:
    """Add several (score, member) pairs to a sorted set."""
    return cmd("ZADD").arg(key).arg(items)


def zcard(key: Any) -> Command:
    """Get the number of members of a sorted set."""
    return cmd("ZCARD").arg(key)


def zcount(key: Any, low: Any, high: Any) -> Command:
    """Count the members with scores within the given bounds."""
    return cmd("ZCOUNT").arg(key).arg(low).arg(high)


def zincr(key: Any, member: Any, delta: Any) -> Command:
    """Increment the score of a member, adding it when missing."""
    return cmd("ZINCRBY").arg(key).arg(delta).arg(member)


def zinterstore(dstkey: Any, keys: Iterable[Any]) -> Command:
    """Intersect sorted sets into a key, summing scores."""
    return _store("ZINTERSTORE", dstkey, keys, None)


def zinterstore_min(dstkey: Any, keys: Iterable[Any]) -> Command:
    """Intersect sorted sets into a key, keeping the lowest score."""
    return _store("ZINTERSTORE", dstkey, keys, "MIN")


def zinterstore_max(dstkey: Any, keys: Iterable[Any]) -> Command:
    """Intersect sorted sets into a key, keeping the highest score."""
    return _store("ZINTERSTORE", dstkey, keys, "MAX")


def zinterstore_weights(dstkey: Any, keys: Iterable[Sequence[Any]]) -> Command:
    """Like zinterstore, with a weight paired to each key."""
    return _store_weighted("ZINTERSTORE", dstkey, keys, None)


def zinterstore_min_weights(dstkey: Any, keys: Iterable[Sequence[Any]]) -> Command:
    """Like zinterstore_min, with a weight paired to each key."""
    return _store_weighted("ZINTERSTORE", dstkey, keys, "MIN")


def zinterstore_max_weights(dstkey: Any, keys: Iterable[Sequence[Any]]) -> Command:
    """Like zinterstore_max, with a weight paired to each key."""
    return _store_weighted("ZINTERSTORE", dstkey, keys, "MAX")


def zlexcount(key: Any, low: Any, high: Any) -> Command:
    """Count the members within a lexicographical range."""
    return cmd("ZLEXCOUNT").arg(key).arg(low).arg(high)


def zpopmax(key: Any, count: int) -> Command:
    """Remove and return up to count members with the highest scores."""
    return cmd("ZPOPMAX").arg(key).arg(count)


def zpopmin(key: Any, count: int) -> Command:
    """Remove and return up to count members with the lowest scores."""
    return cmd("ZPOPMIN").arg(key).arg(count)


def zmpop_max(keys: Iterable[Any], count: int) -> Command:
    """Pop the highest-scored members from the first non-empty sorted set."""
    key_list = _key_list(keys)
    return cmd("ZMPOP").arg(len(key_list)).arg(key_list).arg("MAX").arg("COUNT").arg(count)


def zmpop_min(keys: Iterable[Any], count: int) -> Command:
    """Pop the lowest-scored members from the first non-empty sorted set."""
    key_list = _key_list(keys)
    return cmd("ZMPOP").arg(len(key_list)).arg(key_list).arg("MIN").arg("COUNT").arg(count)


def zrandmember(key: Any, count: int | None = None) -> Command:
    """Return up to count random members, or one when count is None."""
    return cmd("ZRANDMEMBER").arg(key).arg(count)


def zrandmember_withscores(key: Any, count: int) -> Command:
    """Return up to count random members with their scores."""
    return cmd("ZRANDMEMBER").arg(key).arg(count).arg("WITHSCORES")


def zrange(key: Any, start: int, stop: int) -> Command:
    """Return a range of members by index."""
    return cmd("ZRANGE").arg(key).arg(start).arg(stop)


def zrange_withscores(key: Any, start: int, stop: int) -> Command:
    """Return a range of members by index, with scores."""
    return cmd("ZRANGE").arg(key).arg(start).arg(stop).arg("WITHSCORES")


def zrangebylex(key: Any, low: Any, high: Any) -> Command:
    """Return members within a lexicographical range."""
    return cmd("ZRANGEBYLEX").arg(key).arg(low).arg(high)


def zrangebylex_limit(key: Any, low: Any, high: Any, offset: int, count: int) -> Command:
    """Return members within a lexicographical range, with offset and limit."""
    return (
        cmd("ZRANGEBYLEX").arg(key).arg(low).arg(high)
        .arg("LIMIT").arg(offset).arg(count)
    )


def zrevrangebylex(key: Any, high: Any, low: Any) -> Command:
    """Return members within a lexicographical range, high to low."""
    return cmd("ZREVRANGEBYLEX").arg(key).arg(high).arg(low)


def zrevrangebylex_limit(
    key: Any, high: Any, low: Any, offset: int, count: int
) -> Command:
    """Return members within a lexicographical range, high to low, with limit."""
    return (
        cmd("ZREVRANGEBYLEX").arg(key).arg(high).arg(low)
        .arg("LIMIT").arg(offset).arg(count)
    )


def zrangebyscore(key: Any, low: Any, high: Any) -> Command:
    """Return members within a score range."""
    return cmd("ZRANGEBYSCORE").arg(key).arg(low).arg(high)


def zrangebyscore_withscores(key: Any, low: Any, high: Any) -> Command:
    """Return members within a score range, with scores."""
    return cmd("ZRANGEBYSCORE").arg(key).arg(low).arg(high).arg("WITHSCORES")


def zrangebyscore_limit(key: Any, low: Any, high: Any, offset: int, count: int) -> Command:
    """Return members within a score range, with offset and limit."""
    return (
        cmd("ZRANGEBYSCORE").arg(key).arg(low).arg(high)
        .arg("LIMIT").arg(offset).arg(count)
    )


def zrangebyscore_limit_withscores(
    key: Any, low: Any, high: Any, offset: int, count: int
) -> Command:
    """Return members within a score range, with scores, offset and limit."""
    return (
        cmd("ZRANGEBYSCORE").arg(key).arg(low).arg(high).arg("WITHSCORES")
        .arg("LIMIT").arg(offset).arg(count)
    )


def zrank(key: Any, member: Any) -> Command:
    """Determine the index of a member."""
    return cmd("ZRANK").arg(key).arg(member)


def zrem(key: Any, members: Any) -> Command:
    """Remove one or more members."""
    return cmd("ZREM").arg(key).arg(members)


def zrembylex(key: Any, low: Any, high: Any) -> Command:
    """Remove all members within a lexicographical range."""
    return cmd("ZREMRANGEBYLEX").arg(key).arg(low).arg(high)


def zremrangebyrank(key: Any, start: int, stop: int) -> Command:
    """Remove all members within a range of indexes."""
    return cmd("ZREMRANGEBYRANK").arg(key).arg(start).arg(stop)


def zrembyscore(key: Any, low: Any, high: Any) -> Command:
    """Remove all members within a score range."""
    return cmd("ZREMRANGEBYSCORE").arg(key).arg(low).arg(high)


def zrevrange(key: Any, start: int, stop: int) -> Command:
    """Return a range of members by index, high scores first."""
    return cmd("ZREVRANGE").arg(key).arg(start).arg(stop)


def zrevrange_withscores(key: Any, start: int, stop: int) -> Command:
    """Return a range of members by index, high scores first, with scores."""
    return cmd("ZREVRANGE").arg(key).arg(start).arg(stop).arg("WITHSCORES")


def zrevrangebyscore(key: Any, high: Any, low: Any) -> Command:
    """Return members within a score range, high to low."""
    return cmd("ZREVRANGEBYSCORE").arg(key).arg(high).arg(low)


def zrevrangebyscore_withscores(key: Any, high: Any, low: Any) -> Command:
    """Return members within a score range, high to low, with scores."""
    return cmd("ZREVRANGEBYSCORE").arg(key).arg(high).arg(low).arg("WITHSCORES")


def zrevrangebyscore_limit(
    key: Any, high: Any, low: Any, offset: int, count: int
) -> Command:
    """Return members within a score range, high to low, with limit."""
    return (
        cmd("ZREVRANGEBYSCORE").arg(key).arg(high).arg(low)
        .arg("LIMIT").arg(offset).arg(count)
    )


def zrevrangebyscore_limit_withscores(
    key: Any, high: Any, low: Any, offset: int, count: int
) -> Command:
    """Return members within a score range, high to low, with scores and limit."""
    return (
        cmd("ZREVRANGEBYSCORE").arg(key).arg(high).arg(low).arg("WITHSCORES")
        .arg("LIMIT").arg(offset).arg(count)
    )


def zrevrank(key: Any, member: Any) -> Command:
    """Determine the index of a member, high scores first."""
    return cmd("ZREVRANK").arg(key).arg(member)


def zscore(key: Any, member: Any) -> Command:
    """Get the score of a member."""
    return cmd("ZSCORE").arg(key).arg(member)


def zscore_multiple(key: Any, members: Iterable[Any]) -> Command:
    """Get the scores of several members."""
    return cmd("ZMSCORE").arg(key).arg(_key_list(members))


def zunionstore(dstkey: Any, keys: Iterable[Any]) -> Command:
    """Union sorted sets into a key, summing scores."""
    return _store("ZUNIONSTORE", dstkey, keys, None)


def zunionstore_min(dstkey: Any, keys: Iterable[Any]) -> Command:
    """Union sorted sets into a key, keeping the lowest score."""
    return _store("ZUNIONSTORE", dstkey, keys, "MIN")


def zunionstore_max(dstkey: Any, keys: Iterable[Any]) -> Command:
    """Union sorted sets into a key, keeping the highest score."""
    return _store("ZUNIONSTORE", dstkey, keys, "MAX")


def zunionstore_weights(dstkey: Any, keys: Iterable[Sequence[Any]]) -> Command:
    """Like zunionstore, with a weight paired to each key."""
    return _store_weighted("ZUNIONSTORE", dstkey, keys, None)


def zunionstore_min_weights(dstkey: Any, keys: Iterable[Sequence[Any]]) -> Command:
    """Like zunionstore_min, with a weight paired to each key."""
    return _store_weighted("ZUNIONSTORE", dstkey, keys, "MIN")


def zunionstore_max_weights(dstkey: Any, keys: Iterable[Sequence[Any]]) -> Command:
    """Like zunionstore_max, with a weight paired to each key."""
    return _store_weighted("ZUNIONSTORE", dstkey, keys, "MAX")


def zscan(key: Any) -> Command:
    """Incrementally iterate the members of a sorted set."""
    return cmd("ZSCAN").arg(key).cursor_arg(0)


def zscan_match(key: Any, pattern: Any) -> Command:
    """Incrementally iterate the members of a sorted set matching a pattern."""
    return cmd("ZSCAN").arg(key).cursor_arg(0).arg("MATCH").arg(pattern)