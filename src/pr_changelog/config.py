import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from dotenv import load_dotenv, find_dotenv

# Load values from .env (local runs); inside Actions they come from INPUT_* vars
load_dotenv(find_dotenv(usecwd=True))

DEFAULT_CHANGELOG_PATH = "CHANGELOG.md"


def parse_label_list(raw: Optional[str]) -> List[str]:
    """'bug, feature,,docs ' → ['bug', 'feature', 'docs']"""
    if not raw:
        return []
    return [l.strip() for l in raw.split(",") if l.strip()]


def parse_bool(raw: Optional[str]) -> bool:
    # only the literal "true" switches an option on, like the Actions toolkit
    return raw == "true"


def resolve_categorize(categorize: Optional[str]) -> bool:
    # click drops an empty INPUT_CATEGORIZE, but an empty Actions input still means off
    if categorize is None:
        categorize = os.getenv("INPUT_CATEGORIZE", "true")
    return parse_bool(categorize)


def resolve_repo(repo: Optional[str]) -> str:
    repo = repo or os.getenv("GITHUB_REPOSITORY")
    if not repo or repo.count("/") != 1 or not all(repo.split("/")):
        raise ValueError("Repository must be given as 'owner/name' (set --repo or GITHUB_REPOSITORY)")
    return repo


@dataclass(frozen=True)
class Settings:
    github_token: str
    repo: str
    changelog_path: Path
    version: Optional[str]
    include_labels: Tuple[str, ...]
    exclude_labels: Tuple[str, ...]
    categorize: bool


def load_settings(
    github_token: Optional[str],
    repo: Optional[str] = None,
    changelog_path: Optional[str] = None,
    version: Optional[str] = None,
    include_labels: Optional[str] = None,
    exclude_labels: Optional[str] = None,
    categorize: Optional[str] = None,
) -> Settings:
    """Validate raw string inputs and turn them into Settings."""
    if not github_token:
        raise ValueError("Input required and not supplied: github_token")

    return Settings(
        github_token=github_token,
        repo=resolve_repo(repo),
        changelog_path=Path.cwd() / (changelog_path or DEFAULT_CHANGELOG_PATH),
        version=version or None,
        include_labels=tuple(parse_label_list(include_labels)),
        exclude_labels=tuple(parse_label_list(exclude_labels)),
        categorize=resolve_categorize(categorize),
    )
