import pytest

from bitchest import protocol
from bitchest.list_commands import (
    LIndexCommand,
    LLenCommand,
    LPopCommand,
    LPushCommand,
    LRangeCommand,
    LRemCommand,
    LSetCommand,
    RPopCommand,
    RPushCommand,
)
from bitchest.queue import Queue
from bitchest.registry import CommandError, extract_command
from bitchest.store import InMemoryDB
from bitchest.values import ListValue, StringValue


def _store_with_list(*items):
    store = InMemoryDB()
    lst = ListValue(Queue(items))
    store.set("key", lst)
    return store, lst


def _string_store():
    store = InMemoryDB()
    store.set("key", StringValue("value"))
    return store


# LINDEX


def test_lindex_missing_key_is_null():
    assert LIndexCommand().execute(["key", "0"], InMemoryDB()) == protocol.null_bulk()


def test_lindex_wrong_type():
    with pytest.raises(CommandError) as exc:
        LIndexCommand().execute(["key", "0"], _string_store())
    assert str(exc.value) == "wrong type for 'LINDEX'"


def test_lindex_invalid_index():
    store, _ = _store_with_list()
    with pytest.raises(CommandError) as exc:
        LIndexCommand().execute(["key", "not-an-integer"], store)
    assert str(exc.value) == "invalid index for 'LINDEX'"


def test_lindex_out_of_range_is_null():
    store, _ = _store_with_list()
    assert LIndexCommand().execute(["key", "1"], store) == protocol.null_bulk()


@pytest.mark.parametrize(
    "index, expected",
    [("0", "value1"), ("1", "value2"), ("2", "value3"), ("-1", "value3")],
)
def test_lindex_in_range(index, expected):
    store, _ = _store_with_list("value1", "value2", "value3")
    assert LIndexCommand().execute(["key", index], store) == protocol.bulk(expected)


def test_lindex_wrong_arg_count():
    with pytest.raises(CommandError):
        LIndexCommand().execute(["key"], InMemoryDB())


# LLEN


def test_llen_missing_key_is_zero():
    assert LLenCommand().execute(["key"], InMemoryDB()) == protocol.integer(0)


def test_llen_returns_length():
    store, _ = _store_with_list("value1", "value2", "value3")
    assert LLenCommand().execute(["key"], store) == protocol.integer(3)


def test_llen_wrong_type():
    with pytest.raises(CommandError) as exc:
        LLenCommand().execute(["key"], _string_store())
    assert str(exc.value) == "wrong type for 'LLEN'"


# LPOP


def test_lpop_missing_key_is_null():
    assert LPopCommand().execute(["key"], InMemoryDB()) == protocol.null_bulk()


def test_lpop_empty_list_is_null():
    store, _ = _store_with_list()
    assert LPopCommand().execute(["key"], store) == protocol.null_bulk()


def test_lpop_single_returns_bulk():
    store, lst = _store_with_list("value1")
    assert LPopCommand().execute(["key"], store) == protocol.bulk("value1")
    assert len(lst.items) == 0


def test_lpop_with_count_returns_array():
    store, _ = _store_with_list("value1", "value2")
    assert LPopCommand().execute(["key", "2"], store) == protocol.array(
        ["value1", "value2"]
    )


def test_lpop_count_larger_than_list():
    store, lst = _store_with_list("a", "b")
    assert LPopCommand().execute(["key", "5"], store) == protocol.array(["a", "b"])
    assert lst.items.items() == []


def test_lpop_invalid_count():
    store, _ = _store_with_list("a")
    with pytest.raises(CommandError) as exc:
        LPopCommand().execute(["key", "x"], store)
    assert str(exc.value) == "invalid count for 'LPOP'"


def test_lpop_wrong_arg_count():
    with pytest.raises(CommandError):
        LPopCommand().execute([], InMemoryDB())
    with pytest.raises(CommandError):
        LPopCommand().execute(["a", "1", "2"], InMemoryDB())


def test_lpop_wrong_type():
    with pytest.raises(CommandError) as exc:
        LPopCommand().execute(["key"], _string_store())
    assert str(exc.value) == "wrong type for 'LPOP'"


# LPUSH


def test_lpush_no_arguments():
    with pytest.raises(CommandError) as exc:
        LPushCommand().execute([], InMemoryDB())
    assert str(exc.value) == "wrong number of arguments for 'LPUSH'"


def test_lpush_wrong_type():
    with pytest.raises(CommandError) as exc:
        LPushCommand().execute(["key", "value1"], _string_store())
    assert str(exc.value) == "wrong type for 'LPUSH'"


def test_lpush_creates_list():
    store = InMemoryDB()
    assert LPushCommand().execute(["key", "value1"], store) == ":1\r\n"
    value = store.get("key")
    assert isinstance(value, ListValue)
    assert value.items.items() == ["value1"]


def test_lpush_existing_list():
    store, _ = _store_with_list("value1")
    assert LPushCommand().execute(["key", "value2"], store) == ":2\r\n"
    assert store.get("key").items.items() == ["value2", "value1"]


def test_lpush_multiple_values():
    store = InMemoryDB()
    result = LPushCommand().execute(["key", "value1", "value2", "value3"], store)
    assert result == ":3\r\n"
    assert store.get("key").items.items() == ["value3", "value2", "value1"]


# LRANGE


def test_lrange_missing_key_is_empty():
    assert LRangeCommand().execute(["key", "0", "1"], InMemoryDB()) == protocol.array(
        []
    )


def test_lrange_wrong_type():
    with pytest.raises(CommandError) as exc:
        LRangeCommand().execute(["key", "0", "1"], _string_store())
    assert str(exc.value) == "wrong type for 'LRANGE'"


@pytest.mark.parametrize(
    "start, stop, expected",
    [
        ("3", "4", []),
        ("0", "4", ["value1", "value2", "value3"]),
        ("2", "1", []),
        ("0", "2", ["value1", "value2", "value3"]),
        ("-2", "-1", ["value2", "value3"]),
    ],
)
def test_lrange_ranges(start, stop, expected):
    store, _ = _store_with_list("value1", "value2", "value3")
    assert LRangeCommand().execute(["key", start, stop], store) == protocol.array(
        expected
    )


def test_lrange_invalid_indexes():
    store, _ = _store_with_list("a")
    with pytest.raises(CommandError) as exc:
        LRangeCommand().execute(["key", "x", "1"], store)
    assert str(exc.value) == "invalid start index for 'LRANGE'"
    with pytest.raises(CommandError) as exc:
        LRangeCommand().execute(["key", "0", "y"], store)
    assert str(exc.value) == "invalid stop index for 'LRANGE'"


# LREM


@pytest.mark.parametrize(
    "count, removed, expected",
    [
        ("0", 3, ["b", "c"]),
        ("2", 2, ["b", "c", "a"]),
        ("-2", 2, ["a", "b", "c"]),
    ],
)
def test_lrem_counts(count, removed, expected):
    store, lst = _store_with_list("a", "b", "a", "c", "a")
    assert LRemCommand().execute(["key", count, "a"], store) == protocol.integer(
        removed
    )
    assert lst.items.items() == expected


def test_lrem_value_not_present():
    store, lst = _store_with_list("a", "b", "c")
    assert LRemCommand().execute(["key", "0", "x"], store) == protocol.integer(0)
    assert lst.items.items() == ["a", "b", "c"]


def test_lrem_missing_key():
    assert LRemCommand().execute(["nokey", "0", "a"], InMemoryDB()) == protocol.integer(
        0
    )


def test_lrem_wrong_type():
    with pytest.raises(CommandError) as exc:
        LRemCommand().execute(["key", "0", "a"], _string_store())
    assert str(exc.value) == "wrong type for 'LREM'"


def test_lrem_invalid_count():
    store, _ = _store_with_list("a")
    with pytest.raises(CommandError) as exc:
        LRemCommand().execute(["key", "notanint", "a"], store)
    assert str(exc.value) == "invalid count for 'LREM'"


def test_lrem_wrong_arg_count():
    with pytest.raises(CommandError) as exc:
        LRemCommand().execute(["key", "1"], InMemoryDB())
    assert str(exc.value) == "wrong number of arguments for 'LREM'"


# LSET


def test_lset_missing_key_is_null():
    assert LSetCommand().execute(["key", "0", "value"], InMemoryDB()) == (
        protocol.null_bulk()
    )


def test_lset_wrong_type():
    with pytest.raises(CommandError) as exc:
        LSetCommand().execute(["key", "0", "value"], _string_store())
    assert str(exc.value) == "wrong type for 'LSET'"


def test_lset_invalid_index():
    store, _ = _store_with_list()
    with pytest.raises(CommandError) as exc:
        LSetCommand().execute(["key", "not-an-integer", "value"], store)
    assert str(exc.value) == "invalid index for 'LSET'"


def test_lset_wrong_arg_count():
    with pytest.raises(CommandError):
        LSetCommand().execute(["key", "0"], InMemoryDB())
    with pytest.raises(CommandError):
        LSetCommand().execute(["key", "0", "value", "extra"], InMemoryDB())


@pytest.mark.parametrize("index", ["1", "-2"])
def test_lset_out_of_range(index):
    store, _ = _store_with_list("a")
    with pytest.raises(CommandError) as exc:
        LSetCommand().execute(["key", index, "b"], store)
    assert str(exc.value) == "index out of range"


def test_lset_positive_index():
    store, _ = _store_with_list("a", "b", "c")
    assert LSetCommand().execute(["key", "1", "x"], store) == protocol.bulk("OK")
    assert store.get("key").items.items() == ["a", "x", "c"]


def test_lset_negative_index():
    store, _ = _store_with_list("a", "b", "c")
    assert LSetCommand().execute(["key", "-1", "z"], store) == protocol.bulk("OK")
    assert store.get("key").items.items() == ["a", "b", "z"]


# RPOP


def test_rpop_missing_key_is_null():
    assert RPopCommand().execute(["key"], InMemoryDB()) == protocol.null_bulk()


def test_rpop_empty_list_is_null():
    store, _ = _store_with_list()
    assert RPopCommand().execute(["key"], store) == protocol.null_bulk()


def test_rpop_single_returns_bulk():
    store, _ = _store_with_list("value1")
    assert RPopCommand().execute(["key"], store) == protocol.bulk("value1")


def test_rpop_with_count_returns_array():
    store, _ = _store_with_list("value1", "value2")
    assert RPopCommand().execute(["key", "2"], store) == protocol.array(
        ["value2", "value1"]
    )


def test_rpop_wrong_type():
    with pytest.raises(CommandError) as exc:
        RPopCommand().execute(["key"], _string_store())
    assert str(exc.value) == "wrong type for 'RPOP'"


# RPUSH


def test_rpush_no_arguments():
    with pytest.raises(CommandError) as exc:
        RPushCommand().execute([], InMemoryDB())
    assert str(exc.value) == "wrong number of arguments for 'RPUSH'"


def test_rpush_wrong_type():
    with pytest.raises(CommandError) as exc:
        RPushCommand().execute(["key", "value1"], _string_store())
    assert str(exc.value) == "wrong type for 'RPUSH'"


def test_rpush_creates_list():
    store = InMemoryDB()
    assert RPushCommand().execute(["key", "value1"], store) == ":1\r\n"
    assert store.get("key").items.items() == ["value1"]


def test_rpush_existing_list():
    store, _ = _store_with_list("value1")
    assert RPushCommand().execute(["key", "value2"], store) == ":2\r\n"
    assert store.get("key").items.items() == ["value1", "value2"]


def test_rpush_multiple_values():
    store = InMemoryDB()
    result = RPushCommand().execute(["key", "value1", "value2", "value3"], store)
    assert result == ":3\r\n"
    assert store.get("key").items.items() == ["value1", "value2", "value3"]


# Registration


@pytest.mark.parametrize(
    "name, args, expected",
    [
        ("lindex", ["key", "0"], protocol.bulk("a")),
        ("LLEN", ["key"], protocol.integer(3)),
        ("lpop", ["key"], protocol.bulk("a")),
        ("LPUSH", ["key", "x"], protocol.integer(4)),
        ("lrange", ["key", "0", "-1"], protocol.array(["a", "b", "c"])),
        ("LREM", ["key", "0", "b"], protocol.integer(1)),
        ("lset", ["key", "0", "z"], protocol.bulk("OK")),
        ("RPOP", ["key"], protocol.bulk("c")),
        ("rpush", ["key", "d"], protocol.integer(4)),
    ],
)
def test_commands_are_registered(name, args, expected):
    store, _ = _store_with_list("a", "b", "c")
    assert extract_command(name).execute(args, store) == expected