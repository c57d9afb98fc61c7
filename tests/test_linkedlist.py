"""Tests for the intrusive circular linked list primitives."""

from strqueue.linkedlist import (
    ListNode,
    add,
    add_tail,
    is_empty,
    is_linked,
    iter_nodes,
    link,
    unlink,
)


def _assert_consistent(head: ListNode) -> None:
    node = head
    while True:
        assert node.next.prev is node
        assert node.prev.next is node
        node = node.next
        if node is head:
            break


def test_node_creation() -> None:
    """Test that a fresh node links to itself."""
    node = ListNode()
    assert node.next is node
    assert node.prev is node
    assert is_empty(node)
    assert not is_linked(node)


def test_add_and_add_tail() -> None:
    """Test inserting after and before the sentinel."""
    head = ListNode()
    a, b, c = ListNode(), ListNode(), ListNode()

    add_tail(a, head)
    add_tail(b, head)
    add(c, head)

    assert list(iter_nodes(head)) == [c, a, b]
    assert head.next is c
    assert head.prev is b
    assert not is_empty(head)
    _assert_consistent(head)


def test_link_between_members() -> None:
    """Test linking a node between two adjacent members."""
    head = ListNode()
    a, b, c = ListNode(), ListNode(), ListNode()
    add_tail(a, head)
    add_tail(c, head)

    link(b, a, c)

    assert list(iter_nodes(head)) == [a, b, c]
    _assert_consistent(head)


def test_unlink() -> None:
    """Test splicing nodes out of the chain."""
    head = ListNode()
    nodes = [ListNode() for _ in range(3)]
    for node in nodes:
        add_tail(node, head)

    unlink(nodes[1])
    assert list(iter_nodes(head)) == [nodes[0], nodes[2]]
    assert not is_linked(nodes[1])
    _assert_consistent(head)

    unlink(nodes[0])
    unlink(nodes[2])
    assert is_empty(head)
    _assert_consistent(head)


def test_iter_nodes_allows_unlinking() -> None:
    """Test that the yielded node may be unlinked during iteration."""
    head = ListNode()
    nodes = [ListNode() for _ in range(4)]
    for node in nodes:
        add_tail(node, head)

    seen = []
    for node in iter_nodes(head):
        seen.append(node)
        unlink(node)

    assert seen == nodes
    assert is_empty(head)


def test_iter_empty() -> None:
    """Test iterating an empty sentinel."""
    assert list(iter_nodes(ListNode())) == []
