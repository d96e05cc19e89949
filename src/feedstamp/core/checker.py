"""Dry-run checks of a feed template without writing anything."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from feedstamp.core.channel import resolve_channel
from feedstamp.core.items import find_items_block, parse_max_items
from feedstamp.core.structure import REQUIRED_ELEMENTS, check_element
from feedstamp.core.tokens import item_fields, scan_tokens
from feedstamp.exceptions import ConfigurationError

if TYPE_CHECKING:
    from datetime import datetime


@dataclass
class CheckResult:
    """Result of a single check."""

    passed: bool
    message: str
    details: str | None = None


@dataclass
class CheckReport:
    """Complete check report."""

    checks: list[CheckResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        """Check if all checks passed."""
        return all(c.passed for c in self.checks)

    @property
    def warnings(self) -> list[CheckResult]:
        """Get checks that passed but have warnings."""
        return [c for c in self.checks if c.passed and c.details]

    @property
    def failures(self) -> list[CheckResult]:
        """Get failed checks."""
        return [c for c in self.checks if not c.passed]


def check_items_block(content: str, overrides: Mapping[str, str]) -> CheckResult:
    """Describe the item block of a template."""
    block = find_items_block(content)
    if block is None:
        return CheckResult(
            passed=True,
            message="No <Items> block",
            details="The feed will contain no items",
        )
    if not block.stamp:
        return CheckResult(
            passed=True,
            message="Empty <Items> block",
            details="The block will be removed",
        )

    names = sorted(f"Item.{name}" for name in item_fields(scan_tokens(block.stamp)).values())
    return CheckResult(
        passed=True,
        message=f"Item stamp uses {len(names)} placeholder(s), up to "
        f"{parse_max_items(overrides)} item(s)",
        details=", ".join(names) if names else None,
    )


def run_checks(
    template: str,
    overrides: Mapping[str, str],
    now: datetime | None = None,
) -> CheckReport:
    """Check channel resolution and required elements of a template.

    Args:
        template: Template text.
        overrides: Override set.
        now: Build time.

    Returns:
        CheckReport with one result per check.
    """
    report = CheckReport()

    try:
        channel = resolve_channel(template, overrides, now=now)
    except ConfigurationError as e:
        report.checks.append(
            CheckResult(passed=False, message="Channel placeholders unresolved", details=str(e))
        )
        return report

    report.checks.append(CheckResult(passed=True, message="Channel placeholders resolved"))

    if channel.base_url:
        report.checks.append(CheckResult(passed=True, message=f"Base URL: {channel.base_url}"))
    else:
        report.checks.append(
            CheckResult(
                passed=True,
                message="Base URL unknown",
                details="{{Item.Link}} and {{Item.Guid}} cannot be generated",
            )
        )

    for element in REQUIRED_ELEMENTS:
        status = check_element(channel.content, element)
        if status is None:
            report.checks.append(CheckResult(passed=True, message=f"<{element}> present"))
        else:
            report.checks.append(
                CheckResult(passed=False, message=f"<{element}> {status}")
            )

    report.checks.append(check_items_block(channel.content, overrides))
    return report
