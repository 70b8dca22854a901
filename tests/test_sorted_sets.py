import pytest

from redcmd import sorted_sets as z
from redcmd.command import is_readonly_command


def _n(value):
    return str(value).encode()


def test_zadd_puts_score_before_member():
    assert z.zadd("k", "m", 3).args == [b"ZADD", b"k", b"3", b"m"]


def test_zadd_multiple_flattens_pairs():
    items = [(1, "a"), (2, "b")]
    assert z.zadd_multiple("k", items).args == [b"ZADD", b"k", b"1", b"a", b"2", b"b"]


def test_zincr_puts_delta_before_member():
    assert z.zincr("k", "m", 2.5).args == [b"ZINCRBY", b"k", b"2.5", b"m"]


def test_zcount_and_zlexcount():
    assert z.zcount("k", "-inf", "+inf").args == [b"ZCOUNT", b"k", b"-inf", b"+inf"]
    assert z.zlexcount("k", "[a", "[z").args == [b"ZLEXCOUNT", b"k", b"[a", b"[z"]


@pytest.mark.parametrize(
    "func,name,aggregate",
    [
        (z.zinterstore, b"ZINTERSTORE", []),
        (z.zinterstore_min, b"ZINTERSTORE", [b"AGGREGATE", b"MIN"]),
        (z.zinterstore_max, b"ZINTERSTORE", [b"AGGREGATE", b"MAX"]),
        (z.zunionstore, b"ZUNIONSTORE", []),
        (z.zunionstore_min, b"ZUNIONSTORE", [b"AGGREGATE", b"MIN"]),
        (z.zunionstore_max, b"ZUNIONSTORE", [b"AGGREGATE", b"MAX"]),
    ],
)
def test_store_commands_count_keys(func, name, aggregate):
    keys = ["a", "b", "c"]
    expected = [name, b"dst", _n(len(keys)), b"a", b"b", b"c", *aggregate]
    assert func("dst", keys).args == expected


@pytest.mark.parametrize(
    "func,name,aggregate",
    [
        (z.zinterstore_weights, b"ZINTERSTORE", []),
        (z.zinterstore_min_weights, b"ZINTERSTORE", [b"AGGREGATE", b"MIN"]),
        (z.zinterstore_max_weights, b"ZINTERSTORE", [b"AGGREGATE", b"MAX"]),
        (z.zunionstore_weights, b"ZUNIONSTORE", []),
        (z.zunionstore_min_weights, b"ZUNIONSTORE", [b"AGGREGATE", b"MIN"]),
        (z.zunionstore_max_weights, b"ZUNIONSTORE", [b"AGGREGATE", b"MAX"]),
    ],
)
def test_weighted_store_commands_split_pairs(func, name, aggregate):
    pairs = [("a", 1), ("b", 2)]
    expected = [
        name, b"dst", _n(len(pairs)), b"a", b"b", *aggregate, b"WEIGHTS", b"1", b"2",
    ]
    assert func("dst", pairs).args == expected


def test_store_rejects_single_string_keys():
    with pytest.raises(TypeError):
        z.zunionstore("dst", "abc")


def test_weighted_store_rejects_bad_pairs():
    with pytest.raises(ValueError):
        z.zinterstore_weights("dst", [("a", 1, 2)])


def test_pop_commands():
    assert z.zpopmax("k", 2).args == [b"ZPOPMAX", b"k", b"2"]
    assert z.zpopmin("k", 2).args == [b"ZPOPMIN", b"k", b"2"]


def test_zmpop_counts_keys():
    keys = ["a", "b"]
    assert z.zmpop_max(keys, 4).args == [
        b"ZMPOP", _n(len(keys)), b"a", b"b", b"MAX", b"COUNT", b"4",
    ]
    assert z.zmpop_min(keys, 4).args == [
        b"ZMPOP", _n(len(keys)), b"a", b"b", b"MIN", b"COUNT", b"4",
    ]


def test_zrandmember_count_is_optional():
    assert z.zrandmember("k").args == [b"ZRANDMEMBER", b"k"]
    assert z.zrandmember("k", None).args == [b"ZRANDMEMBER", b"k"]
    assert z.zrandmember("k", -3).args == [b"ZRANDMEMBER", b"k", b"-3"]
    assert z.zrandmember_withscores("k", 5).args == [
        b"ZRANDMEMBER", b"k", b"5", b"WITHSCORES",
    ]


def test_range_by_index():
    assert z.zrange("k", 0, -1).args == [b"ZRANGE", b"k", b"0", b"-1"]
    assert z.zrange_withscores("k", 0, -1).args[-1] == b"WITHSCORES"
    assert z.zrevrange("k", 0, -1).args == [b"ZREVRANGE", b"k", b"0", b"-1"]
    assert z.zrevrange_withscores("k", 0, -1).args[-1] == b"WITHSCORES"


def test_range_by_lex():
    assert z.zrangebylex("k", "-", "+").args == [b"ZRANGEBYLEX", b"k", b"-", b"+"]
    assert z.zrangebylex_limit("k", "-", "+", 1, 5).args == [
        b"ZRANGEBYLEX", b"k", b"-", b"+", b"LIMIT", b"1", b"5",
    ]
    assert z.zrevrangebylex("k", "+", "-").args == [b"ZREVRANGEBYLEX", b"k", b"+", b"-"]
    assert z.zrevrangebylex_limit("k", "+", "-", 1, 5).args == [
        b"ZREVRANGEBYLEX", b"k", b"+", b"-", b"LIMIT", b"1", b"5",
    ]


def test_range_by_score():
    assert z.zrangebyscore("k", 1, 9).args == [b"ZRANGEBYSCORE", b"k", b"1", b"9"]
    assert z.zrangebyscore_withscores("k", 1, 9).args == [
        b"ZRANGEBYSCORE", b"k", b"1", b"9", b"WITHSCORES",
    ]
    assert z.zrangebyscore_limit("k", 1, 9, 0, 3).args == [
        b"ZRANGEBYSCORE", b"k", b"1", b"9", b"LIMIT", b"0", b"3",
    ]
    assert z.zrangebyscore_limit_withscores("k", 1, 9, 0, 3).args == [
        b"ZRANGEBYSCORE", b"k", b"1", b"9", b"WITHSCORES", b"LIMIT", b"0", b"3",
    ]


def test_rev_range_by_score():
    assert z.zrevrangebyscore("k", 9, 1).args == [b"ZREVRANGEBYSCORE", b"k", b"9", b"1"]
    assert z.zrevrangebyscore_withscores("k", 9, 1).args == [
        b"ZREVRANGEBYSCORE", b"k", b"9", b"1", b"WITHSCORES",
    ]
    assert z.zrevrangebyscore_limit("k", 9, 1, 0, 3).args == [
        b"ZREVRANGEBYSCORE", b"k", b"9", b"1", b"LIMIT", b"0", b"3",
    ]
    assert z.zrevrangebyscore_limit_withscores("k", 9, 1, 0, 3).args == [
        b"ZREVRANGEBYSCORE", b"k", b"9", b"1", b"WITHSCORES", b"LIMIT", b"0", b"3",
    ]


def test_member_lookups():
    assert z.zrank("k", "m").args == [b"ZRANK", b"k", b"m"]
    assert z.zrevrank("k", "m").args == [b"ZREVRANK", b"k", b"m"]
    assert z.zscore("k", "m").args == [b"ZSCORE", b"k", b"m"]
    assert z.zscore_multiple("k", ["a", "b"]).args == [b"ZMSCORE", b"k", b"a", b"b"]


def test_removal_commands():
    assert z.zrem("k", ["a", "b"]).args == [b"ZREM", b"k", b"a", b"b"]
    assert z.zrembylex("k", "[a", "[c").args == [b"ZREMRANGEBYLEX", b"k", b"[a", b"[c"]
    assert z.zremrangebyrank("k", 0, 1).args == [b"ZREMRANGEBYRANK", b"k", b"0", b"1"]
    assert z.zrembyscore("k", 1, 2).args == [b"ZREMRANGEBYSCORE", b"k", b"1", b"2"]


def test_zcard():
    assert z.zcard("k").args == [b"ZCARD", b"k"]


def test_zscan_commands_carry_cursor():
    plain = z.zscan("k")
    matching = z.zscan_match("k", "a*")
    assert plain.args == [b"ZSCAN", b"k", b"0"]
    assert matching.args == [b"ZSCAN", b"k", b"0", b"MATCH", b"a*"]
    assert plain.cursor == 0
    assert matching.cursor == 0


def test_read_and_write_commands_are_classified():
    assert is_readonly_command(z.zrange("k", 0, 1).name)
    assert is_readonly_command(z.zscore("k", "m").name)
    assert not is_readonly_command(z.zadd("k", "m", 1).name)
    assert not is_readonly_command(z.zunionstore("d", ["a"]).name)