"""Doubly-linked list with owning forward links and weak back-links."""

import copy
import logging
import weakref
from typing import Generic

from ownedlist.errors import CorruptedListError, DanglingLinkError
from ownedlist.types import BackLink, T

logger = logging.getLogger(__name__)


class Node(Generic[T]):
    """
    A node in the doubly-linked list.

    ``next`` is a strong reference and keeps the following node alive.
    ``prev`` is a ``weakref.ref``; call it to get the preceding node, or None
    once that node has been reclaimed.
    """

    __slots__ = ("value", "next", "prev", "__weakref__")

    def __init__(self, value: T) -> None:
        self.value = copy.copy(value)
        self.next: Node[T] | None = None
        self.prev: BackLink | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class DoublyLinkedList(Generic[T]):
    """
    Doubly-linked list with O(1) push and pop at both ends.

    Only ``head``, ``tail`` and each node's ``next`` hold strong references, so
    a node popped off either end is reclaimed as soon as the caller drops the
    returned value. The list is not thread-safe; guard every call with a
    single external lock if it is shared between threads.
    """

    def __init__(self, *, validate: bool = False) -> None:
        """
        Initialize an empty list.

        Args:
            validate: If True, check the structural invariants after every
                push and pop. Turns each operation into an O(n) walk, so it is
                meant for tests and debugging.
        """
        self._head: Node[T] | None = None
        self._tail: Node[T] | None = None
        self._size = 0
        self._validate = validate

    @property
    def head(self) -> Node[T] | None:
        """The first node, or None if the list is empty."""
        return self._head

    @property
    def tail(self) -> Node[T] | None:
        """The last node, or None if the list is empty."""
        return self._tail

    def push_front(self, value: T) -> None:
        """Insert value as the new first element. O(1)."""
        node = Node(value)
        if self._head is None:
            self._head = node
            self._tail = node
        else:
            node.next = self._head
            self._head.prev = weakref.ref(node)
            self._head = node
        self._size += 1
        if self._validate:
            self.check_invariants()

    def push_back(self, value: T) -> None:
        """Insert value as the new last element. O(1)."""
        node = Node(value)
        if self._tail is None:
            self._head = node
            self._tail = node
        else:
            node.prev = weakref.ref(self._tail)
            self._tail.next = node
            self._tail = node
        self._size += 1
        if self._validate:
            self.check_invariants()

    def pop_front(self) -> T | None:
        """Remove and return the first element, or None if the list is empty. O(1)."""
        node = self._head
        if node is None:
            return None
        successor = node.next
        node.next = None
        if successor is None:
            self._head = None
            self._tail = None
        else:
            successor.prev = None
            self._head = successor
        self._size -= 1
        if self._validate:
            self.check_invariants()
        return copy.copy(node.value)

    def pop_back(self) -> T | None:
        """
        Remove and return the last element, or None if the list is empty. O(1).

        Raises:
            DanglingLinkError: If the tail's back-link no longer resolves. The
                list is left unchanged.
        """
        node = self._tail
        if node is None:
            return None
        if node.prev is None:
            self._head = None
            self._tail = None
        else:
            predecessor = node.prev()
            if predecessor is None:
                logger.error("Back-link of tail node %r resolved to a reclaimed node", node)
                raise DanglingLinkError(f"Predecessor of tail node {node!r} was already reclaimed")
            node.prev = None
            # Drops the only strong reference to the old tail besides ours
            predecessor.next = None
            self._tail = predecessor
        self._size -= 1
        if self._validate:
            self.check_invariants()
        return copy.copy(node.value)

    def is_empty(self) -> bool:
        """Return True if the list holds no elements."""
        return self._head is None

    def check_invariants(self) -> None:
        """
        Walk the chain in both directions and verify its structure.

        Checks that head and tail are set together, that following ``next``
        from head reaches tail in ``len(self) - 1`` steps, that every back-link
        resolves to the node's predecessor, and that following ``prev`` from
        tail reaches head in the same number of steps.

        Raises:
            CorruptedListError: Describing the first violation found.
        """
        head, tail = self._head, self._tail
        if head is None or tail is None:
            if head is not tail:
                raise self._corrupted("head and tail must both be set or both be None")
            if self._size != 0:
                raise self._corrupted(f"empty list records size {self._size}")
            return

        if head.prev is not None:
            raise self._corrupted("head node has a back-link")
        if tail.next is not None:
            raise self._corrupted("tail node has a forward link")

        steps = 0
        node = head
        while node.next is not None:
            successor = node.next
            if successor.prev is None or successor.prev() is not node:
                raise self._corrupted(f"back-link at position {steps + 1} does not resolve to its predecessor")
            node = successor
            steps += 1
            if steps >= self._size:
                raise self._corrupted(f"forward chain is longer than the recorded size {self._size}")
        if node is not tail:
            raise self._corrupted("forward chain does not end at tail")
        if steps != self._size - 1:
            raise self._corrupted(f"forward chain has {steps + 1} nodes but size is {self._size}")

        back_steps = 0
        node = tail
        while node is not head:
            predecessor = node.prev() if node.prev is not None else None
            if predecessor is None:
                raise self._corrupted(f"backward chain breaks after {back_steps} steps")
            node = predecessor
            back_steps += 1
        if back_steps != steps:
            raise self._corrupted(f"backward chain has {back_steps} steps, forward chain has {steps}")

    def _corrupted(self, message: str) -> CorruptedListError:
        logger.debug("Invariant violation in %r: %s", self, message)
        return CorruptedListError(message)

    def __len__(self) -> int:
        """Return the number of elements in the list."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self._size})"
