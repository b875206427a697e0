"""Tests for list nodes."""

import weakref

import pytest

from ownedlist import Node


def test_node_creation() -> None:
    """Test creating a node."""
    node = Node("value1")
    assert node.value == "value1"
    assert node.prev is None
    assert node.next is None


def test_node_copies_value() -> None:
    """Test that a node stores a copy of its value."""
    value = {"a": 1}
    node = Node(value)
    value["b"] = 2
    assert node.value == {"a": 1}


def test_node_has_no_instance_dict() -> None:
    """Test that nodes only carry their slots."""
    node = Node(1)
    with pytest.raises(AttributeError):
        node.extra = True  # type: ignore[attr-defined]


def test_back_link_resolves() -> None:
    """Test that a back-link resolves to the node it was taken from."""
    first = Node(1)
    second = Node(2)
    first.next = second
    second.prev = weakref.ref(first)

    assert second.prev() is first


def test_back_link_does_not_keep_node_alive() -> None:
    """Test that a back-link resolves to None once its target is gone."""
    first = Node(1)
    second = Node(2)
    second.prev = weakref.ref(first)

    del first
    assert second.prev() is None


def test_forward_link_keeps_node_alive() -> None:
    """Test that a forward link owns the following node."""
    first = Node(1)
    second = Node(2)
    first.next = second
    second_ref = weakref.ref(second)

    del second
    assert second_ref() is first.next
    assert first.next is not None and first.next.value == 2


def test_node_repr() -> None:
    """Test the node representation."""
    assert repr(Node("a")) == "Node('a')"
