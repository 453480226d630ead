"""
Shared fixtures for pr_changelog tests.

Path setup is handled by pyproject.toml [tool.pytest.ini_options] pythonpath.
"""

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from pr_changelog.categorizer import ChangeRecord


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

@pytest.fixture
def make_change():
    """Build a ChangeRecord with sensible defaults; override any field."""
    def _make(number=1, labels=(), title=None, author="alice", url=None):
        return ChangeRecord(
            title=title or f"Change {number}",
            number=number,
            author=author,
            url=url or f"https://github.com/acme/widgets/pull/{number}",
            labels=tuple(labels),
        )
    return _make


@pytest.fixture
def make_pr():
    """Build an object shaped like a PyGithub PullRequest."""
    def _make(number=1, labels=(), merged=True, title=None, login="alice"):
        return SimpleNamespace(
            number=number,
            title=title or f"PR {number}",
            user=SimpleNamespace(login=login) if login else None,
            html_url=f"https://github.com/acme/widgets/pull/{number}",
            labels=[SimpleNamespace(name=name) for name in labels],
            merged_at=datetime(2024, 3, 1, tzinfo=timezone.utc) if merged else None,
        )
    return _make


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Remove Actions inputs from the environment and capture step outputs in a file."""
    for name in (
        "INPUT_GITHUB_TOKEN", "INPUT_CHANGELOG_PATH", "INPUT_VERSION",
        "INPUT_INCLUDE_LABELS", "INPUT_EXCLUDE_LABELS", "INPUT_CATEGORIZE",
    ):
        monkeypatch.delenv(name, raising=False)
    output_file = tmp_path / "github_output"
    monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))
    monkeypatch.setenv("GITHUB_REPOSITORY", "acme/widgets")
    return output_file
