"""Read, merge and write the changelog document.

A changelog looks like::

    # Changelog

    All notable changes ...

    ## [1.0.0] - 2024-01-01
    ...

New sections go right below the top-level heading, above the newest
existing version section.
"""
from pathlib import Path
from typing import List, Optional

DEFAULT_DOCUMENT = (
    "# Changelog\n\n"
    "All notable changes to this project will be documented in this file.\n\n"
)

TOP_HEADING = "# "
SECTION_HEADING = "## "


def read_changelog(path: Path) -> Optional[str]:
    """Return the document text, or None when the file cannot be opened.

    Line endings and undecodable bytes are kept as they are so that
    write_changelog puts them back unchanged.
    """
    try:
        with path.open("r", encoding="utf-8", errors="surrogateescape", newline="") as fh:
            return fh.read()
    except OSError:
        return None


def write_changelog(path: Path, text: str) -> None:
    with path.open("w", encoding="utf-8", errors="surrogateescape", newline="") as fh:
        fh.write(text)


def find_insertion_index(lines: List[str]) -> Optional[int]:
    """Index of the first version heading that follows the top-level heading.

    Any line starting with "# " counts as the top-level heading, even one
    that appears further down the body.
    """
    seen_top_heading = False
    for i, line in enumerate(lines):
        if line.startswith(TOP_HEADING):
            seen_top_heading = True
            continue
        if seen_top_heading and line.startswith(SECTION_HEADING):
            return i
    return None


def merge_section(existing: Optional[str], section: str) -> str:
    """Splice a rendered section into the changelog text."""
    if existing is None:
        existing = DEFAULT_DOCUMENT

    lines = existing.split("\n")
    index = find_insertion_index(lines)
    if index is None:
        # no version sections yet → append
        return existing.rstrip() + "\n\n" + section

    lines.insert(index, section)
    return "\n".join(lines)
