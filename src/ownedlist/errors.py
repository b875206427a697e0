"""Exception classes for ownedlist."""


class OwnedListError(Exception):
    """Base exception for all ownedlist errors."""


class CorruptedListError(OwnedListError):
    """Raised when the node chain no longer satisfies the list's structural invariants."""


class DanglingLinkError(CorruptedListError):
    """Raised when a back-link is followed after the node it pointed to was reclaimed."""
