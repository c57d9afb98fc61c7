"""strqueue - String queue on an intrusive circular doubly-linked list with in-place algorithms."""

from strqueue.alloc import AllocationStats, Allocator
from strqueue.core import StringQueue
from strqueue.element import Element
from strqueue.errors import (
    AllocationError,
    DoubleFreeError,
    ElementLinkedError,
    ElementReleasedError,
    QueueFreedError,
    StrQueueError,
)
from strqueue.types import End

__version__ = "0.0.1"

__all__ = [
    "StringQueue",
    "Element",
    "Allocator",
    "AllocationStats",
    "StrQueueError",
    "AllocationError",
    "DoubleFreeError",
    "ElementLinkedError",
    "ElementReleasedError",
    "QueueFreedError",
    "End",
]
