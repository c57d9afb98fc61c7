"""Basic usage example for strqueue."""

import logging

from strqueue import Allocator, StringQueue


def main() -> None:
    """Demonstrate queue operations and the in-place algorithms."""
    logging.basicConfig(level=logging.DEBUG)
    allocator = Allocator()

    with StringQueue(allocator=allocator) as queue:
        print("=== Insertion ===\n")
        for word in ["gerbil", "bear", "dolphin", "bear", "aardvark", "gerbil", "cat"]:
            queue.insert_tail(word)
        queue.insert_head("zebra")
        print(f"Queue: {queue.values()} (size {queue.size()})\n")

        print("=== Reordering ===\n")
        queue.reverse()
        print(f"Reversed:  {queue.values()}")
        queue.swap()
        print(f"Swapped:   {queue.values()}")
        queue.sort()
        print(f"Sorted:    {queue.values()}")
        queue.delete_dup()
        print(f"Deduped:   {queue.values()}")
        queue.delete_mid()
        print(f"No middle: {queue.values()}\n")

        print("=== Removal ===\n")
        buf = bytearray(4)
        element = queue.remove_head(buf)
        if element is not None:
            print(f"Removed {element.value!r}, buffer holds {bytes(buf)!r}")
            queue.release_element(element)

    print(f"\nLive allocations after teardown: {allocator.stats.live}")


if __name__ == "__main__":
    main()
