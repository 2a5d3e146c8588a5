class PstructsError(Exception):
    """Base class for errors raised by pstructs."""


class IncomparableItemsError(PstructsError, ValueError):
    """Two values that must be ordered against each other are unordered."""


class InvariantViolationError(PstructsError, RuntimeError):
    """A structure failed its own validation in invariant-checking mode."""
