"""
Exceptions raised by the feed model and serializer.

Validation failures from ``Feed.add_item`` carry every offending field so
callers can fix an item and resubmit it; write failures wrap whatever the
sink raised.
"""

from dataclasses import dataclass
from typing import List


class FeedError(Exception):
    """Base class for all podcast feed errors."""


@dataclass(frozen=True)
class FieldViolation:
    """
    A single missing or invalid field on an item.

    Attributes:
        field: Dotted field name as shown to callers (e.g. "Enclosure.URL")
        message: Human-readable description of the problem
    """

    field: str
    message: str

    def __str__(self) -> str:
        return self.message


class ItemValidationError(FeedError, ValueError):
    """Raised when an item does not meet the minimum feed requirements."""

    def __init__(self, violations: List[FieldViolation]):
        self.violations = list(violations)
        super().__init__("; ".join(str(v) for v in self.violations))

    @property
    def fields(self) -> List[str]:
        """Names of the offending fields, in the order they were checked."""
        return [v.field for v in self.violations]


class FeedWriteError(FeedError, OSError):
    """Raised when the output sink fails while the feed is being written."""
