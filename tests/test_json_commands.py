import json

import pytest

from redcmd import json_commands as jc


def test_json_set_serialises_compactly():
    command = jc.json_set("my_key", "$", {"item": 42})
    assert command.args == [b"JSON.SET", b"my_key", b"$", b'{"item":42}']


@pytest.mark.parametrize(
    "value",
    [{"a": [1, 2, {"b": None}]}, [True, False], "caf\u00e9", 3.5, None],
)
def test_json_set_round_trips(value):
    encoded = jc.json_set("k", "$", value).args[-1]
    assert json.loads(encoded.decode("utf-8")) == value


def test_unserialisable_value_raises():
    with pytest.raises(TypeError):
        jc.json_set("k", "$", object())


def test_non_finite_float_raises():
    with pytest.raises(ValueError):
        jc.json_arr_append("k", "$", float("nan"))


def test_json_arr_append_and_index():
    assert jc.json_arr_append("k", "$.a", "x").args == [
        b"JSON.ARRAPPEND", b"k", b"$.a", b'"x"',
    ]
    assert jc.json_arr_index("k", "$.a", "x").args == [
        b"JSON.ARRINDEX", b"k", b"$.a", b'"x"',
    ]


def test_json_arr_index_ss_defaults_to_zero_bounds():
    command = jc.json_arr_index_ss("k", "$", 1)
    assert command.args == [b"JSON.ARRINDEX", b"k", b"$", b"1", b"0", b"0"]
    assert jc.json_arr_index_ss("k", "$", 1, 2, 5).args[-2:] == [b"2", b"5"]


def test_json_arr_insert():
    assert jc.json_arr_insert("k", "$", 3, [1]).args == [
        b"JSON.ARRINSERT", b"k", b"$", b"3", b"[1]",
    ]


def test_json_arr_pop_defaults_to_last_element():
    assert jc.json_arr_pop("k", "$").args == jc.json_arr_pop("k", "$", -1).args
    assert jc.json_arr_pop("k", "$", 2).args == [b"JSON.ARRPOP", b"k", b"$", b"2"]


def test_json_arr_trim():
    assert jc.json_arr_trim("k", "$", 1, 4).args == [
        b"JSON.ARRTRIM", b"k", b"$", b"1", b"4",
    ]


def test_json_get_single_and_multiple_keys():
    assert jc.json_get("k", "$").args == [b"JSON.GET", b"k", b"$"]
    assert jc.json_get(["k1", "k2"], "$").args == [b"JSON.MGET", b"k1", b"k2", b"$"]


def test_json_num_incr_by():
    assert jc.json_num_incr_by("k", "$.n", 5).args == [
        b"JSON.NUMINCRBY", b"k", b"$.n", b"5",
    ]


def test_json_str_append_passes_value_raw():
    assert jc.json_str_append("k", "$", '"abc"').args == [
        b"JSON.STRAPPEND", b"k", b"$", b'"abc"',
    ]


@pytest.mark.parametrize(
    "func, name",
    [
        (jc.json_arr_len, b"JSON.ARRLEN"),
        (jc.json_clear, b"JSON.CLEAR"),
        (jc.json_del, b"JSON.DEL"),
        (jc.json_obj_keys, b"JSON.OBJKEYS"),
        (jc.json_obj_len, b"JSON.OBJLEN"),
        (jc.json_str_len, b"JSON.STRLEN"),
        (jc.json_toggle, b"JSON.TOGGLE"),
        (jc.json_type, b"JSON.TYPE"),
    ],
)
def test_key_path_commands(func, name):
    assert func("k", "$.x").args == [name, b"k", b"$.x"]