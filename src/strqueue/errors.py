"""Exception classes for strqueue."""


class StrQueueError(Exception):
    """Base exception for all strqueue errors."""


class AllocationError(StrQueueError):
    """Raised by an allocator that refuses a request."""


class DoubleFreeError(StrQueueError):
    """Raised when a block is returned to its allocator twice."""


class ElementLinkedError(StrQueueError):
    """Raised when releasing an element that is still linked into a queue."""


class ElementReleasedError(StrQueueError):
    """Raised when releasing an element that was already released."""


class QueueFreedError(StrQueueError):
    """Raised when operations are attempted on a freed queue."""
