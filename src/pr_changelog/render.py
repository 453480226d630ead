from datetime import date
from typing import Dict, List, Optional, Sequence

from .categorizer import Category, ChangeRecord, categorize


def format_entry(change: ChangeRecord) -> str:
    """One changelog line: title, linked PR number and author."""
    return f"- {change.title} ([#{change.number}]({change.url})) by @{change.author}"


def group_changes(changes: Sequence[ChangeRecord], categorize_changes: bool) -> Dict[Category, List[ChangeRecord]]:
    """Bucket PRs by category, keeping the order they came in."""
    if not categorize_changes:
        return {Category.CHANGES: list(changes)}

    grouped: Dict[Category, List[ChangeRecord]] = {}
    for change in changes:
        grouped.setdefault(categorize(change.labels), []).append(change)
    return grouped


def render_header(version: Optional[str], current_date: date) -> str:
    """Version heading with the release date, or the Unreleased heading."""
    if version:
        return f"## [{version}] - {current_date.isoformat()}"
    return "## [Unreleased]"


#Turn grouped PRs into a Markdown changelog section
def render_section(
    version: Optional[str],
    changes: Sequence[ChangeRecord],
    categorize_changes: bool,
    current_date: date,
) -> str:
    grouped = group_changes(changes, categorize_changes)

    lines: List[str] = [render_header(version, current_date), ""]
    for cat in Category:
        items = grouped.get(cat, [])
        if not items:
            continue
        lines.append(f"### {cat.label}")
        lines.append("")
        lines.extend(format_entry(item) for item in items)
        lines.append("")
    return "\n".join(lines) + "\n"
