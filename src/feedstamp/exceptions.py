"""Custom exceptions for feedstamp."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from feedstamp.core.problems import Problem


class FeedstampError(Exception):
    """Base exception for all feedstamp errors."""

    exit_code: int = 1

    def __init__(self, message: str, problems: list[Problem] | None = None) -> None:
        super().__init__(message)
        self.problems: list[Problem] = list(problems or [])


class ConfigError(FeedstampError):
    """Configuration file errors."""


class ConfigurationError(FeedstampError):
    """Missing mandatory channel value or invalid channel link."""


class StructuralError(FeedstampError):
    """Required feed elements missing, empty or malformed after resolution."""


class ItemResolutionError(FeedstampError):
    """One or more item placeholders could not be resolved."""


class ParseError(FeedstampError):
    """Frontmatter/content parsing errors."""


class ValidationError(FeedstampError):
    """Input validation errors."""


class TemplateNotFoundError(FeedstampError):
    """An explicitly requested template file does not exist."""


class TemplateCreatedError(FeedstampError):
    """The default template was missing and has been written to disk."""
