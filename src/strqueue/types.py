"""Type definitions for strqueue."""

from collections.abc import Callable
from typing import TYPE_CHECKING, Literal, TypeAlias

if TYPE_CHECKING:
    from strqueue.element import Element

# What an allocation request is for
BlockKind: TypeAlias = Literal["queue", "element", "string"]

# Which end of the queue an insertion or removal targets
End: TypeAlias = Literal["head", "tail"]

# Callback used by the algorithms to dispose of unlinked elements
ReleaseFn: TypeAlias = Callable[["Element"], None]
