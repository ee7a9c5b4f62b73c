"""Error types raised by the generation and time advance engine."""

from typing import List


class IdleGalaxyError(Exception):
    """Base class for errors raised by Idle Galaxy."""


class SystemValidationError(IdleGalaxyError, ValueError):
    """Raised when system creation parameters are out of range.

    Collects every problem found so the caller can show them all at once.
    """

    def __init__(self, errors: List[str]):
        """Initialize validation error.

        Args:
            errors: Human-readable descriptions of each invalid field
        """
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class SystemNotFoundError(IdleGalaxyError, KeyError):
    """Raised when a system id is unknown to the store."""

    def __init__(self, system_id: str):
        self.system_id = system_id
        super().__init__(system_id)

    def __str__(self) -> str:
        return f"System not found: {self.system_id}"


class VersionConflictError(IdleGalaxyError):
    """Raised when a snapshot is written over a newer stored version."""

    def __init__(self, system_id: str, expected: int, actual: int):
        """Initialize conflict error.

        Args:
            system_id: System being written
            expected: Version the writer based its snapshot on
            actual: Version currently stored
        """
        self.system_id = system_id
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Version conflict on {system_id}: based on {expected}, stored is {actual}"
        )
