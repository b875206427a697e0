"""ownedlist - Doubly-linked list with owning forward links and weak back-links."""

import logging

from ownedlist.errors import CorruptedListError, DanglingLinkError, OwnedListError
from ownedlist.linkedlist import DoublyLinkedList, Node

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.0.1"

__all__ = [
    "DoublyLinkedList",
    "Node",
    "OwnedListError",
    "CorruptedListError",
    "DanglingLinkError",
]
