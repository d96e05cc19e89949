"""Structured resolution problems for feedstamp."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from feedstamp.exceptions import FeedstampError


@dataclass(frozen=True)
class Problem:
    """A single named problem found while resolving a feed."""

    subject: str
    field: str
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class ProblemReport:
    """Zero or more problems collected during one resolution pass."""

    problems: list[Problem] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Check if no problems were recorded."""
        return not self.problems

    def add(self, subject: str, field_name: str, message: str) -> None:
        """Record a problem."""
        self.problems.append(Problem(subject=subject, field=field_name, message=message))

    def extend(self, other: ProblemReport) -> None:
        """Append all problems of another report."""
        self.problems.extend(other.problems)

    def raise_if_failed(self, error_cls: type[FeedstampError], headline: str) -> None:
        """Raise ``error_cls`` carrying every problem, if any were recorded.

        Args:
            error_cls: Exception class to raise.
            headline: First line of the combined message.

        Raises:
            FeedstampError: Subclass given by ``error_cls``.
        """
        if self.ok:
            return
        lines = "\n".join(p.message for p in self.problems)
        raise error_cls(f"{headline}\n{lines}", self.problems)
