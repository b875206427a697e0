"""Basic usage example for ownedlist."""

import weakref

from ownedlist import DoublyLinkedList


def main() -> None:
    """Demonstrate pushing and popping at both ends."""
    lst = DoublyLinkedList[int]()

    print("=== Basic Deque Example ===\n")

    # Build [0, 1, 2] from both ends
    lst.push_back(1)
    lst.push_back(2)
    lst.push_front(0)
    print(f"List: {lst!r}")
    print(f"Head: {lst.head!r}, tail: {lst.tail!r}\n")

    # Back-links are weak: following one resolves to the node or None
    assert lst.tail is not None and lst.tail.prev is not None
    print(f"Tail's predecessor: {lst.tail.prev()!r}\n")

    # A popped node is reclaimed as soon as the list lets go of it
    head_ref = weakref.ref(lst.head)  # type: ignore[arg-type]
    print(f"pop_front() -> {lst.pop_front()}")
    print(f"  popped node alive: {head_ref() is not None}")
    print(f"pop_back()  -> {lst.pop_back()}")
    print(f"pop_front() -> {lst.pop_front()}")
    print(f"pop_back()  -> {lst.pop_back()}  (empty)\n")

    print(f"Final size: {len(lst)}")


if __name__ == "__main__":
    main()
