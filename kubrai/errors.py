"""Exception types raised by kubrai commands."""


class KubraiError(Exception):
    """Base class for errors that abort a single command."""


class PersistenceError(KubraiError):
    """Association or dictionary data could not be read or written."""


class PuzzleError(KubraiError):
    """Command input does not describe a usable puzzle."""
