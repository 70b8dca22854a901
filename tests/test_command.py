import pytest

from redcmd.command import (
    Command,
    cmd,
    is_float,
    is_readonly_command,
    is_single_arg,
    to_redis_args,
)


def test_cmd_starts_with_name():
    assert cmd("GET").to_redis_args() == [b"GET"]


def test_arg_chains_and_appends():
    command = cmd("SET")
    assert command.arg("my_key") is command
    command.arg(42)
    assert command.args == [b"SET", b"my_key", b"42"]


def test_arg_none_adds_nothing():
    assert cmd("LPOP").arg("k").arg(None).args == [b"LPOP", b"k"]


def test_arg_flattens_pairs():
    command = cmd("MSET").arg([("a", 1), ("b", 2)])
    assert command.args == [b"MSET", b"a", b"1", b"b", b"2"]


def test_arg_flattens_dict():
    assert to_redis_args({"f": "v", "g": "w"}) == [b"f", b"v", b"g", b"w"]


def test_bytes_pass_through():
    assert to_redis_args(b"\x00\xff") == [b"\x00\xff"]
    assert to_redis_args(bytearray(b"ab")) == [b"ab"]


def test_bool_arguments():
    assert to_redis_args(True) == [b"1"]
    assert to_redis_args(False) == [b"0"]


def test_float_round_trips():
    (encoded,) = to_redis_args(2.25)
    assert float(encoded) == 2.25


def test_object_with_own_args():
    class Pair:
        def to_redis_args(self):
            return [b"X", b"Y"]

    assert cmd("Z").arg(Pair()).args == [b"Z", b"X", b"Y"]


def test_unsupported_type_raises():
    with pytest.raises(TypeError):
        to_redis_args(object())


def test_cursor_arg():
    command = cmd("SCAN").cursor_arg(0)
    assert command.args == [b"SCAN", b"0"]
    assert command.cursor == 0
    assert cmd("GET").cursor is None


def test_cursor_arg_twice_raises():
    command = cmd("SCAN").cursor_arg(0)
    with pytest.raises(ValueError):
        command.cursor_arg(0)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("key", True),
        (b"key", True),
        (5, True),
        (["a"], True),
        (["a", "b"], False),
        ([], False),
        (("a", "b"), False),
        (None, False),
        ({"a": 1}, True),
        ({"a": 1, "b": 2}, False),
    ],
)
def test_is_single_arg(value, expected):
    assert is_single_arg(value) is expected


def test_is_float():
    assert is_float(1.5) is True
    assert is_float(1) is False
    assert is_float("1.5") is False


@pytest.mark.parametrize("name", ["GET", b"ZRANGE", "XREAD", "SCAN"])
def test_readonly(name):
    assert is_readonly_command(name) is True


@pytest.mark.parametrize("name", ["SET", b"DEL", "XADD", "get"])
def test_not_readonly(name):
    assert is_readonly_command(name) is False


def test_equality():
    assert cmd("GET").arg("a") == Command("GET").arg("a")
    assert not (cmd("GET").arg("a") == cmd("GET").arg("b"))
    assert len(cmd("GET").arg("a")) == 2