"""In-place algorithms over a sentinel-rooted circular chain of elements.

Every function relinks existing nodes. Payloads are read only to compare
them, and nothing is allocated. Functions that destroy nodes hand each
unlinked element to the supplied release callback.
"""

from typing import cast

from strqueue.element import Element
from strqueue.linkedlist import ListNode, is_empty, unlink
from strqueue.types import ReleaseFn


def _value(node: ListNode) -> str:
    return cast(str, cast(Element, node).value)


def _discard(node: ListNode, release: ReleaseFn) -> None:
    unlink(node)
    release(cast(Element, node))


def delete_mid(head: ListNode, release: ReleaseFn) -> bool:
    """
    Delete the element at zero-based index n // 2.

    The fast pointer moves two steps per one step of the slow pointer, so
    a six-element queue loses its fourth element.

    Returns:
        False if the queue is empty, True otherwise
    """
    if is_empty(head):
        return False
    slow = fast = head.next
    while fast is not head and fast.next is not head:
        slow = slow.next
        fast = fast.next.next
    _discard(slow, release)
    return True


def delete_dup(head: ListNode, release: ReleaseFn) -> bool:
    """
    Delete every element whose value occurs more than once.

    The queue must already be sorted ascending. No copy of a repeated value
    survives; values that occur exactly once keep their order.
    """
    if is_empty(head):
        return True
    candidate = head.next
    duplicated = False
    ahead = candidate.next
    while ahead is not head:
        if _value(candidate) == _value(ahead):
            _discard(ahead, release)
            duplicated = True
        else:
            if duplicated:
                _discard(candidate, release)
                duplicated = False
            candidate = ahead
        ahead = candidate.next
    if duplicated:
        _discard(candidate, release)
    return True


def swap(head: ListNode) -> None:
    """Swap every two adjacent elements. An odd last element stays put."""
    prev = head
    while prev.next is not head and prev.next.next is not head:
        first = prev.next
        second = first.next
        after = second.next

        prev.next = second
        second.prev = prev
        second.next = first
        first.prev = second
        first.next = after
        after.prev = first

        prev = first


def reverse(head: ListNode) -> None:
    """Reverse the queue by exchanging next and prev on every node."""
    node = head
    while True:
        node.next, node.prev = node.prev, node.next
        node = node.prev
        if node is head:
            break


def _merge(left: ListNode | None, right: ListNode | None) -> ListNode | None:
    """Merge two sorted None-terminated chains, preferring left on ties."""
    if left is None:
        return right
    if right is None:
        return left
    if _value(left) <= _value(right):
        first, left = left, left.next
    else:
        first, right = right, right.next
    tail = first
    while left is not None and right is not None:
        if _value(left) <= _value(right):
            tail.next, left = left, left.next
        else:
            tail.next, right = right, right.next
        tail = tail.next
    tail.next = left if left is not None else right  # type: ignore[assignment]
    return first


def _mergesort(first: ListNode | None) -> ListNode | None:
    if first is None or first.next is None:
        return first
    slow = first
    fast: ListNode | None = first.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    mid = slow.next
    slow.next = None  # type: ignore[assignment]
    return _merge(_mergesort(first), _mergesort(mid))


def sort(head: ListNode) -> None:
    """
    Stable ascending merge sort by string value.

    The chain is opened into a forward-only list for the recursive sort, and
    prev links and the sentinel are restored in a single pass afterwards.
    """
    if is_empty(head):
        return
    head.prev.next = None  # type: ignore[assignment]
    head.next = _mergesort(head.next)  # type: ignore[assignment]

    node = head
    while node.next is not None:
        node.next.prev = node
        node = node.next
    node.next = head
    head.prev = node
