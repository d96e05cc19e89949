"""Post-resolution structural checks of a feed document."""

from __future__ import annotations

import re

from feedstamp.core.problems import ProblemReport
from feedstamp.exceptions import StructuralError

REQUIRED_ELEMENTS = ("title", "link", "description")


def check_element(content: str, element: str) -> str | None:
    """Check that an element exists and has text.

    The start tag may carry attributes (``<link href="...">``); the end tag
    must follow it.

    Args:
        content: Feed document.
        element: Element name.

    Returns:
        None if the element is fine, else ``"missing"``, ``"malformed"`` or
        ``"empty"``.
    """
    start_match = re.search(f"<{element}", content, re.IGNORECASE)
    if start_match is None:
        return "missing"
    start = start_match.start()

    end_match = re.compile(f"</{element}>", re.IGNORECASE).search(content, start)
    if end_match is None:
        return "missing"
    end = end_match.start()

    tag_close = content.find(">", start)
    if tag_close == -1 or tag_close >= end:
        return "malformed"

    if not content[tag_close + 1 : end].strip():
        return "empty"
    return None


def collect_structure_problems(content: str) -> ProblemReport:
    """Check every required channel element, without raising."""
    report = ProblemReport()
    for element in REQUIRED_ELEMENTS:
        status = check_element(content, element)
        if status == "missing":
            report.add("channel", element, element)
        elif status is not None:
            report.add("channel", element, f"{element} ({status})")
    return report


def validate_structure(content: str) -> None:
    """Validate that ``<title>``, ``<link>`` and ``<description>`` have content.

    Args:
        content: Feed document after channel resolution.

    Raises:
        StructuralError: Listing every missing, empty or malformed element.
    """
    report = collect_structure_problems(content)
    if report.ok:
        return

    listed = ", ".join(p.message for p in report.problems)
    raise StructuralError(
        f"Required RSS elements are missing or empty in the template: {listed}.\n"
        "Each RSS feed must have <title>, <link>, and <description> elements in the <channel>.\n"
        "Either add these elements directly to your template or use placeholders like "
        "{{Title}}, {{Link}}, {{Description}} with corresponding CLI arguments.",
        report.problems,
    )
