"""Queue elements: a linkage record carrying an owned string."""

from strqueue.alloc import Allocator, Block
from strqueue.errors import AllocationError, ElementLinkedError, ElementReleasedError
from strqueue.linkedlist import ListNode, is_linked


class Element(ListNode):
    """A queue member. The linkage is inherited, so the node is the element."""

    __slots__ = ("value", "_record", "_buffer", "_allocator")

    def __init__(self, value: str, *, allocator: Allocator) -> None:
        """
        Allocate the element record, then a buffer for the string.

        Raises:
            UnicodeEncodeError: If value has no UTF-8 encoding. Nothing is
                allocated in that case.
            AllocationError: If either allocation is refused. A refused
                string allocation frees the record first.
        """
        super().__init__()
        encoded = value.encode("utf-8")
        self._allocator = allocator
        self._record: Block | None = allocator.allocate("element")
        try:
            self._buffer: Block | None = allocator.allocate("string", len(encoded) + 1)
        except AllocationError:
            allocator.free(self._record)
            self._record = None
            raise
        self.value: str | None = value

    @property
    def released(self) -> bool:
        """True once release() has run."""
        return self._record is None

    def copy_into(self, buf: bytearray) -> None:
        """Copy at most len(buf) - 1 UTF-8 bytes of the value, then a NUL byte."""
        if not buf or self.value is None:
            return
        data = self.value.encode("utf-8")[: len(buf) - 1]
        buf[: len(data)] = data
        buf[len(data)] = 0

    def release(self) -> None:
        """
        Free the string buffer and the element record.

        Raises:
            ElementLinkedError: If the element is still part of a chain
            ElementReleasedError: If the element was already released
        """
        if self._record is None:
            raise ElementReleasedError("Element already released")
        if is_linked(self):
            raise ElementLinkedError(f"Element {self.value!r} is still linked")
        if self._buffer is not None:
            self._allocator.free(self._buffer)
            self._buffer = None
        self._allocator.free(self._record)
        self._record = None
        self.value = None

    def __repr__(self) -> str:
        return f"Element({self.value!r})"
