"""Intrusive circular doubly-linked list primitives."""

from collections.abc import Iterator


class ListNode:
    """Linkage record embedded in every queue element.

    A fresh node links to itself, which is also the empty sentinel state.
    """

    __slots__ = ("prev", "next")

    def __init__(self) -> None:
        self.prev: ListNode = self
        self.next: ListNode = self


def link(node: ListNode, prev: ListNode, next: ListNode) -> None:
    """Install node between two adjacent chain members. O(1)."""
    next.prev = node
    node.next = next
    node.prev = prev
    prev.next = node


def add(node: ListNode, head: ListNode) -> None:
    """Insert node right after head. O(1)."""
    link(node, head, head.next)


def add_tail(node: ListNode, head: ListNode) -> None:
    """Insert node right before head. O(1)."""
    link(node, head.prev, head)


def unlink(node: ListNode) -> None:
    """Splice node out of its chain and point it back at itself. O(1)."""
    node.prev.next = node.next
    node.next.prev = node.prev
    node.prev = node
    node.next = node


def is_empty(head: ListNode) -> bool:
    """Return True if the sentinel has no members."""
    return head.next is head


def is_linked(node: ListNode) -> bool:
    """Return True if node currently shares a chain with another node."""
    return node.next is not node


def iter_nodes(head: ListNode) -> Iterator[ListNode]:
    """Yield every member after head in forward order.

    The successor is read before yielding, so the caller may unlink the
    yielded node.
    """
    node = head.next
    while node is not head:
        following = node.next
        yield node
        node = following
