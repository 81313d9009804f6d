"""Tests for the tree model."""

from vcfg_core.model import ARRAY_VALUE, OBJECT_VALUE, KeyNode, Section


def test_scalar_node_flags():
    node = KeyNode("k", "v")
    assert not node.is_container
    assert node.to_python() == "v"


def test_array_node_to_python():
    node = KeyNode("a", ARRAY_VALUE, [KeyNode("0", "x"), KeyNode("1", "y")])
    assert node.is_array and node.is_container
    assert node.to_python() == ["x", "y"]


def test_object_node_to_python_keeps_first_duplicate():
    node = KeyNode("o", OBJECT_VALUE, [KeyNode("a", "1"), KeyNode("a", "2")])
    assert node.is_object
    assert node.to_python() == {"a": "1"}


def test_child_lookup():
    node = KeyNode("o", OBJECT_VALUE, [KeyNode("a", "1"), KeyNode("b", "2")])
    assert node.child("b").value == "2"
    assert node.child("c") is None
    assert [c.name for c in node] == ["a", "b"]


def test_childless_container_is_truthy():
    assert KeyNode("a", ARRAY_VALUE)


def test_section_root_and_key():
    root = Section()
    named = Section("S", [KeyNode("k", "v")])
    assert root.is_root
    assert not named.is_root
    assert named.key("k").value == "v"
    assert named.key("missing") is None
    assert named.to_python() == {"k": "v"}
