"""autohide — keep matching files and directories hidden, once or continuously."""

__version__ = "0.1.0"


class AutohideError(Exception):
    """User-facing configuration error.

    Raised for missing directories, paths that are not directories, and
    option combinations that leave nothing to do. The message is printed
    to stderr and the process exits with code 1 before any scanning or
    watching starts.
    """


class HideError(Exception):
    """Failure to evaluate or hide a single entry.

    The message always names the offending path. Callers log it and move
    on to the next entry.
    """


class EventError(Exception):
    """A notification that could not be turned into a candidate path."""


class WatchError(Exception):
    """Fatal watch-loop failure.

    Raised when the watcher cannot be set up, when the notification
    channel breaks, or when too many errors cluster in a short window.
    """
