"""Exception hierarchy for pay stub extraction."""


class PayInfoError(Exception):
    """Base exception for all payinfo errors."""


class StubReadError(PayInfoError):
    """The pay stub file is missing, unreadable, or not valid text."""

    def __init__(self, path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read file {path}: {reason}")


class TableParseError(PayInfoError, ValueError):
    """A segmented block has no rows past the table preamble."""
