import pytest

from rmsgateway.symbols import SymbolTable


def test_lookup_missing_returns_none():
    assert SymbolTable().lookup("absent") is None


def test_add_and_lookup():
    table = SymbolTable()
    table.add("call", "N0CALL")
    assert table.lookup("call") == "N0CALL"
    assert len(table) == 1


def test_add_none_value_becomes_empty():
    table = SymbolTable()
    table.add("empty", None)
    assert table.lookup("empty") == ""


def test_add_empty_name_raises():
    with pytest.raises(ValueError):
        SymbolTable().add("", "value")


def test_newest_first_iteration():
    table = SymbolTable()
    table.add("first", "1")
    table.add("second", "2")
    assert list(table) == [("second", "2"), ("first", "1")]


def test_assign_trims_and_replaces():
    table = SymbolTable()
    table.assign("  port \t", " 8772 ")
    table.assign("port", "9000")
    assert table.lookup("port") == "9000"
    assert len(table) == 1


def test_assign_empty_name_raises():
    with pytest.raises(ValueError):
        SymbolTable().assign("   ", "x")


def test_assign_text_splits_at_last_equal():
    table = SymbolTable()
    table.assign_text("a=b=c")
    assert table.lookup("a=b") == "c"


def test_assign_text_without_equal_gives_empty_value():
    table = SymbolTable()
    table.assign_text(" flag ")
    assert table.lookup("flag") == ""


def test_substitute_variable():
    table = SymbolTable()
    table.assign("name", "world")
    assert table.substitute("hello $name!") == "hello world!"


def test_substitute_at_end_of_text():
    table = SymbolTable()
    table.assign("dir", "/etc/rmsgw")
    assert table.substitute("path=$dir") == "path=/etc/rmsgw"


def test_substitute_undefined_is_removed():
    table = SymbolTable()
    assert table.substitute("a$nothing b") == "a b"


def test_substitute_escape_keeps_dollar():
    table = SymbolTable()
    table.assign("x", "value")
    assert table.substitute("\\$x") == "$x"


def test_substitute_plain_text_unchanged():
    text = "no variables here"
    assert SymbolTable().substitute(text) == text