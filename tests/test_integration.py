"""End-to-end behaviour of parsing plus querying."""

import pytest

from vcfg_core import Document, Invalid, Missing


SAMPLE = """
// Sample configuration
key = value
"weird key" = "value with spaces"

[SectionName]
key = other
obj = { a = 1, b = "x" }
arr = [ 1, 2, 3 ]

[Section With Spaces]
/* block
   comment */
nested = { object = { an = { object = deep } }, array = [ 10, [20, 21], { k = v } ] }
"""


@pytest.fixture
def doc():
    return Document.from_buffer(SAMPLE)


def test_sample_file(doc):
    assert doc.get_string(None, "key") == "value"
    assert doc.get_string(None, "weird key") == "value with spaces"
    assert doc.get_string("SectionName", "key") == "other"
    obj = doc.get_node("SectionName", "obj")
    assert doc.get_int_from_node(obj, "a") == 1
    assert doc.get_string_from_node(obj, "b") == "x"
    arr = doc.get_node("SectionName", "arr")
    assert [c.value for c in arr.children] == ["1", "2", "3"]


def test_deep_nesting(doc):
    nested = doc.get_node("Section With Spaces", "nested")
    an = doc.get_node_from_node(doc.get_node_from_node(nested, "object"), "an")
    assert doc.get_string_from_node(an, "object") == "deep"
    array = doc.get_node_from_node(nested, "array")
    assert doc.get_string_from_node(array, "0") == "10"
    inner = doc.get_node_from_node(array, "1")
    assert [c.value for c in inner.children] == ["20", "21"]
    assert doc.get_string_from_node(doc.get_node_from_node(array, "2"), "k") == "v"


@pytest.mark.parametrize("value", ["plain", "a.b-c", "42", "/path/to/file", "x=y"])
def test_unquoted_scalar_round_trip(value):
    doc = Document.from_buffer(f"[S]\nk = {value}\n")
    assert doc.get_string("S", "k") == value


def test_quoted_value_preserves_whitespace_and_commas():
    doc = Document.from_buffer('k = "a, b c"')
    assert doc.get_string(None, "k") == "a, b c"


def test_sections_isolated():
    doc = Document.from_buffer("k = root\n[S]\nk = named\n")
    assert doc.get_string(None, "k") == "root"
    assert doc.get_string("S", "k") == "named"


def test_array_indexing():
    doc = Document.from_buffer("arr = [10, 20, 30]")
    arr = doc.get_node(None, "arr")
    assert [(c.name, c.value) for c in arr.children] == [("0", "10"), ("1", "20"), ("2", "30")]


def test_object_nesting():
    doc = Document.from_buffer("obj = { a = 1, b = { c = 2 } }")
    obj = doc.get_node(None, "obj")
    assert doc.get_string_from_node(obj, "a") == "1"
    b = doc.get_node_from_node(obj, "b")
    assert b.is_container
    assert doc.get_string_from_node(b, "c") == "2"


@pytest.mark.parametrize("text", [
    "// comment\nk = v\n",
    "k = v // comment\n",
    "/* comment */ k = v",
    "k = v /* comment */",
    "/* a */\n// b\nk = v\n/* c */",
])
def test_comment_transparency(text):
    doc = Document.from_buffer(text)
    plain = Document.from_buffer("k = v")
    assert doc.to_dict() == plain.to_dict()


def test_numeric_coercion():
    doc = Document.from_buffer("i = 42\nn = -7\nf = 66.99\ns = hello\n")
    assert doc.get_int(None, "i") == 42
    assert doc.get_int(None, "n") == -7
    assert doc.get_float(None, "f") == pytest.approx(66.99)
    assert doc.get_int(None, "s") is Invalid
    assert doc.get_float(None, "s") is Invalid


@pytest.mark.parametrize("value, expected", [
    ("true", True),
    ("false", False),
    ("True", False),
    ("1", False),
    ('"true"', True),
])
def test_bool_coercion(value, expected):
    doc = Document.from_buffer(f"b = {value}")
    assert doc.get_bool(None, "b") is expected


def test_bool_absent_is_false():
    assert Document.from_buffer("a = 1").get_bool(None, "b") is False


def test_idempotent_clear():
    doc = Document.from_buffer("a = 1")
    doc.clear()
    doc.clear()
    Document().clear()


def test_missing_comma_truncation():
    doc = Document.from_buffer("arr = [1 2, 3]\nnext = ok\n")
    arr = doc.get_node(None, "arr")
    assert [(c.name, c.value) for c in arr.children] == [("0", "1")]
    assert doc.get_string(None, "next") == "ok"


def test_unknown_lookups():
    doc = Document.from_buffer("[section]\nk = v\n")
    assert doc.get_node("nosuchsection", "k") is Missing
    assert doc.get_string("section", "nosuchkey") is Missing
    assert doc.get_int("nosuchsection", "k") is Missing


def test_duplicate_section_first_wins():
    doc = Document.from_buffer("[S]\nk = first\n[S]\nk = second\n")
    assert doc.get_string("S", "k") == "first"


def test_empty_key_is_dropped():
    doc = Document.from_buffer('"" = 1\n')
    assert doc.get_section().keys == []


def test_value_less_key():
    doc = Document.from_buffer('k = ""\n[S]\n')
    assert doc.get_node(None, "k").value is None
    assert doc.get_string(None, "k") is Missing
    assert doc.get_section("S") is not Missing


def test_unterminated_block_comment_swallows_rest():
    doc = Document.from_buffer("a = 1\n/* open\nb = 2\n")
    assert doc.get_string(None, "a") == "1"
    assert doc.get_node(None, "b") is Missing


def test_value_search_crosses_newlines():
    # Whitespace after '=' includes newlines, so the next line becomes the value.
    doc = Document.from_buffer("k =\n[S]\n")
    assert doc.get_string(None, "k") == "[array]"
    assert doc.get_section("S") is Missing
