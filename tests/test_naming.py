import re
from dataclasses import dataclass

from wasmkit.naming import (
    CXX_NAME_FILTER,
    DataSegment,
    index_to_alpha_name,
    rename_to_contents,
    rename_to_identifier,
    rename_to_identifiers,
)

IDENT = re.compile(r"^[A-Za-z0-9]+(_[A-Za-z0-9]+)*$")


@dataclass
class Item:
    name: str


def test_alpha_name_first_values():
    assert index_to_alpha_name(0) == "a"
    assert index_to_alpha_name(26) == "aa"


def test_alpha_names_are_unique_and_lowercase():
    names = [index_to_alpha_name(i) for i in range(3000)]
    assert len(set(names)) == len(names)
    assert all(n.isalpha() and n.islower() for n in names)


def test_alpha_single_letters_cover_alphabet():
    letters = "".join(index_to_alpha_name(i) for i in range(26))
    assert letters == "abcdefghijklmnopqrstuvwxyz"


def test_parameter_list_is_dropped():
    bindings = {"foo(int, char)": 3}
    result = rename_to_identifier("foo(int, char)", 3, bindings, None)
    assert result == "foo"
    assert bindings == {"foo": 3}


def test_result_is_identifier():
    bindings = {}
    result = rename_to_identifier("::weird--name!!here", 0, bindings, None)
    assert IDENT.match(result)
    assert bindings[result] == 0


def test_empty_name_becomes_placeholder():
    bindings = {}
    assert rename_to_identifier("()", 0, bindings, None) == "__empty"
    assert "__empty" in bindings


def test_long_name_is_truncated():
    result = rename_to_identifier("a" * 300, 0, {}, None)
    assert result == "a" * 100


def test_clash_is_disambiguated():
    bindings = {"foo": 0}
    result = rename_to_identifier("foo!", 1, bindings, None)
    assert result == "foo_1"
    assert bindings == {"foo": 0, "foo_1": 1}


def test_filter_removes_words():
    bindings = {}
    assert rename_to_identifier("std::basic_string", 0, bindings, {"std", "basic"}) == "string"
    assert rename_to_identifier("foo_const", 1, bindings, CXX_NAME_FILTER) == "foo"


def test_rename_to_identifiers_updates_items():
    items = [Item("a b"), Item("a-b"), Item("x(y)")]
    bindings = {"a b": 0, "a-b": 1, "x(y)": 2}
    rename_to_identifiers(items, bindings, None)
    names = [item.name for item in items]
    assert all(IDENT.match(n) for n in names)
    assert len(set(names)) == 3
    assert {bindings[n] for n in names} == {0, 1, 2}


def test_rename_to_contents_uses_text():
    segs = [DataSegment("d_0", b"hello world!!")]
    bindings = {"d_0": 0}
    rename_to_contents(segs, bindings)
    assert segs[0].name == "d_" + "hello" + "world"
    assert bindings == {segs[0].name: 0}


def test_rename_to_contents_skips_explicit_and_short():
    segs = [DataSegment("explicit", b"plenty of text here"), DataSegment("d_1", b"ab")]
    bindings = {"explicit": 0, "d_1": 1}
    rename_to_contents(segs, bindings)
    assert [s.name for s in segs] == ["explicit", "d_1"]
    assert bindings == {"explicit": 0, "d_1": 1}


def test_rename_to_contents_truncates_long_data():
    segs = [DataSegment("d_0", b"a" * 100)]
    rename_to_contents(segs, {"d_0": 0})
    assert segs[0].name == "d_" + "a" * 28


def test_rename_to_contents_keeps_name_on_clash():
    segs = [DataSegment("d_0", b"abcdefgh"), DataSegment("d_1", b"abcdefgh")]
    bindings = {"d_0": 0, "d_1": 1}
    rename_to_contents(segs, bindings)
    assert segs[0].name == "d_" + "abcdefgh"
    assert segs[1].name == "d_1"
    assert bindings["d_1"] == 1