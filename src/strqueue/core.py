"""Main StringQueue implementation."""

import logging
from collections.abc import Iterator
from typing import cast

from strqueue import algorithms
from strqueue.alloc import Allocator, Block
from strqueue.element import Element
from strqueue.errors import AllocationError, QueueFreedError
from strqueue.linkedlist import ListNode, add, add_tail, is_empty, iter_nodes, unlink
from strqueue.types import End

logger = logging.getLogger(__name__)


class StringQueue:
    """
    String-keyed queue on an intrusive circular doubly-linked list.

    The queue is a sentinel node; head.next is the first element and
    head.prev the last. Every reordering operation relinks existing elements
    instead of copying payloads.
    """

    def __init__(self, *, allocator: Allocator | None = None) -> None:
        """
        Initialize an empty queue.

        Args:
            allocator: Source of element and string allocations. Defaults to
                a fresh Allocator that never refuses a request.

        Raises:
            AllocationError: If the allocator refuses the queue itself
        """
        self._allocator = allocator if allocator is not None else Allocator()
        self._block: Block | None = self._allocator.allocate("queue")
        self.head = ListNode()

    @property
    def allocator(self) -> Allocator:
        """The allocator backing this queue."""
        return self._allocator

    @property
    def freed(self) -> bool:
        """True once free() has run."""
        return self._block is None

    def _check_alive(self) -> None:
        if self._block is None:
            raise QueueFreedError("Queue has been freed")

    def free(self) -> None:
        """Release every remaining element, then the queue itself."""
        if self._block is None:
            return
        count = 0
        for node in iter_nodes(self.head):
            unlink(node)
            self.release_element(cast(Element, node))
            count += 1
        self._allocator.free(self._block)
        self._block = None
        logger.debug("Freed queue with %d elements", count)

    def __enter__(self) -> "StringQueue":
        """Context manager entry."""
        return self

    def __exit__(self, *args: object) -> None:
        """Context manager exit."""
        self.free()

    def _insert(self, s: str, end: End) -> bool:
        self._check_alive()
        try:
            element = Element(s, allocator=self._allocator)
        except UnicodeEncodeError:
            logger.debug("Insert at %s rejected %r: not encodable as UTF-8", end, s)
            return False
        except AllocationError:
            logger.debug("Insert at %s failed for %r", end, s)
            return False
        if end == "head":
            add(element, self.head)
        else:
            add_tail(element, self.head)
        return True

    def insert_head(self, s: str) -> bool:
        """
        Insert a copy of s at the front of the queue.

        Returns:
            True on success, False if allocation failed or s cannot be
            encoded as UTF-8 (nothing is linked)

        Raises:
            QueueFreedError: If the queue has been freed
        """
        return self._insert(s, "head")

    def insert_tail(self, s: str) -> bool:
        """
        Insert a copy of s at the back of the queue.

        Returns:
            True on success, False if allocation failed or s cannot be
            encoded as UTF-8 (nothing is linked)

        Raises:
            QueueFreedError: If the queue has been freed
        """
        return self._insert(s, "tail")

    def _remove(self, node: ListNode, buf: bytearray | None) -> Element | None:
        if self._block is None or is_empty(self.head):
            return None
        element = cast(Element, node)
        if buf is not None:
            element.copy_into(buf)
        unlink(element)
        return element

    def remove_head(self, buf: bytearray | None = None) -> Element | None:
        """
        Unlink the first element and hand it to the caller.

        The element keeps its value; the caller must release_element() it.

        Args:
            buf: If given, receives at most len(buf) - 1 bytes of the value
                followed by a NUL byte. Longer values are silently truncated.

        Returns:
            The removed element, or None if the queue is empty
        """
        return self._remove(self.head.next, buf)

    def remove_tail(self, buf: bytearray | None = None) -> Element | None:
        """Unlink the last element and hand it to the caller. See remove_head()."""
        return self._remove(self.head.prev, buf)

    def release_element(self, element: Element) -> None:
        """
        Free an element previously unlinked from the queue.

        Raises:
            ElementLinkedError: If the element is still linked
            ElementReleasedError: If the element was already released
        """
        element.release()

    def size(self) -> int:
        """Count elements by walking the whole queue. O(n)."""
        if self._block is None:
            return 0
        return sum(1 for _ in iter_nodes(self.head))

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[str]:
        """Iterate over values from head to tail."""
        for node in iter_nodes(self.head):
            yield cast(str, cast(Element, node).value)

    def values(self) -> list[str]:
        """Return a head-to-tail snapshot of the values."""
        return list(self)

    def delete_mid(self) -> bool:
        """Delete the element at zero-based index size() // 2."""
        if self._block is None:
            return False
        return algorithms.delete_mid(self.head, self.release_element)

    def delete_dup(self) -> bool:
        """Delete every copy of each repeated value. The queue must be sorted."""
        if self._block is None:
            return False
        return algorithms.delete_dup(self.head, self.release_element)

    def swap(self) -> None:
        """Swap every two adjacent elements."""
        if self._block is not None:
            algorithms.swap(self.head)

    def reverse(self) -> None:
        """Reverse the queue in place."""
        if self._block is not None:
            algorithms.reverse(self.head)

    def sort(self) -> None:
        """Sort ascending by value. Equal values keep their relative order."""
        if self._block is not None:
            algorithms.sort(self.head)

    def __repr__(self) -> str:
        if self._block is None:
            return "StringQueue(<freed>)"
        return f"StringQueue({self.values()!r})"
