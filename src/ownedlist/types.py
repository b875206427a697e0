"""Type definitions for ownedlist."""

from typing import TYPE_CHECKING, Any, TypeAlias, TypeVar

if TYPE_CHECKING:
    import weakref

    from ownedlist.linkedlist import Node

# Generic type variable for stored elements
T = TypeVar("T")

# Non-owning link to a neighbouring node; calling it yields the node or None
BackLink: TypeAlias = "weakref.ref[Node[Any]]"
