"""Function-style queue operations that tolerate a missing queue.

Each function accepts None in place of a queue and answers with False,
None or 0, or does nothing, instead of raising.
"""

import logging

from strqueue.alloc import Allocator
from strqueue.core import StringQueue
from strqueue.element import Element
from strqueue.errors import AllocationError

logger = logging.getLogger(__name__)


def q_new(allocator: Allocator | None = None) -> StringQueue | None:
    """Create an empty queue, or return None if the allocator refuses."""
    try:
        return StringQueue(allocator=allocator)
    except AllocationError:
        logger.debug("Could not allocate a new queue")
        return None


def q_free(queue: StringQueue | None) -> None:
    """Release every element, then the queue."""
    if queue is not None:
        queue.free()


def q_insert_head(queue: StringQueue | None, s: str) -> bool:
    """Insert a copy of s at the front. False if the queue is missing or the insert fails."""
    if queue is None:
        return False
    return queue.insert_head(s)


def q_insert_tail(queue: StringQueue | None, s: str) -> bool:
    """Insert a copy of s at the back. False if the queue is missing or the insert fails."""
    if queue is None:
        return False
    return queue.insert_tail(s)


def q_remove_head(queue: StringQueue | None, buf: bytearray | None = None) -> Element | None:
    """Unlink and return the first element, or None."""
    if queue is None:
        return None
    return queue.remove_head(buf)


def q_remove_tail(queue: StringQueue | None, buf: bytearray | None = None) -> Element | None:
    """Unlink and return the last element, or None."""
    if queue is None:
        return None
    return queue.remove_tail(buf)


def q_release_element(element: Element) -> None:
    """Free an unlinked element. See Element.release()."""
    element.release()


def q_size(queue: StringQueue | None) -> int:
    """Number of elements; 0 for a missing queue."""
    if queue is None:
        return 0
    return queue.size()


def q_delete_mid(queue: StringQueue | None) -> bool:
    """Delete the element at index size // 2."""
    if queue is None:
        return False
    return queue.delete_mid()


def q_delete_dup(queue: StringQueue | None) -> bool:
    """Delete every copy of each repeated value in a sorted queue."""
    if queue is None:
        return False
    return queue.delete_dup()


def q_swap(queue: StringQueue | None) -> None:
    """Swap every two adjacent elements."""
    if queue is not None:
        queue.swap()


def q_reverse(queue: StringQueue | None) -> None:
    """Reverse the queue in place."""
    if queue is not None:
        queue.reverse()


def q_sort(queue: StringQueue | None) -> None:
    """Stable ascending sort by value."""
    if queue is not None:
        queue.sort()
