"""Allocation accounting with optional failure injection."""

import itertools
import logging
import random
from dataclasses import dataclass, field

from strqueue.errors import AllocationError, DoubleFreeError
from strqueue.types import BlockKind

logger = logging.getLogger(__name__)


@dataclass
class Block:
    """A single allocation handed out by an Allocator."""

    id: int
    kind: BlockKind
    size: int = 0
    freed: bool = False


@dataclass(frozen=True)
class AllocationStats:
    """Immutable snapshot of an allocator's counters."""

    allocated: int
    freed: int
    failed: int

    @property
    def live(self) -> int:
        """Blocks handed out and not yet returned."""
        return self.allocated - self.freed


@dataclass(kw_only=True, eq=False)
class Allocator:
    """
    Hands out blocks for queues, elements and their strings.

    Every request is counted so that tests can check that each allocation is
    matched by exactly one free. With a non-zero fail_probability, requests
    are refused at random to exercise the out-of-memory paths.
    """

    fail_probability: float = 0.0
    seed: int | None = None
    _allocated: int = field(default=0, init=False, repr=False)
    _freed: int = field(default=0, init=False, repr=False)
    _failed: int = field(default=0, init=False, repr=False)
    _ids: "itertools.count[int]" = field(default_factory=itertools.count, init=False, repr=False)
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate the failure rate and seed the private RNG."""
        if not 0.0 <= self.fail_probability <= 1.0:
            raise ValueError(f"fail_probability must be in [0, 1], got {self.fail_probability!r}")
        self._rng = random.Random(self.seed)

    def allocate(self, kind: BlockKind, size: int = 0) -> Block:
        """
        Allocate a block.

        Args:
            kind: What the block will hold
            size: Payload size in bytes (informational)

        Returns:
            The new block

        Raises:
            AllocationError: If the request is refused
        """
        if self.fail_probability and self._rng.random() < self.fail_probability:
            self._failed += 1
            logger.debug("Refused %s allocation of %d bytes", kind, size)
            raise AllocationError(f"Could not allocate {kind} block")
        self._allocated += 1
        return Block(id=next(self._ids), kind=kind, size=size)

    def free(self, block: Block) -> None:
        """
        Return a block to the allocator.

        Raises:
            DoubleFreeError: If the block was already freed
        """
        if block.freed:
            raise DoubleFreeError(f"Block {block.id} ({block.kind}) freed twice")
        block.freed = True
        self._freed += 1

    @property
    def stats(self) -> AllocationStats:
        """Current counters."""
        return AllocationStats(allocated=self._allocated, freed=self._freed, failed=self._failed)
