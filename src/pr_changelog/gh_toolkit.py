from typing import Any, Iterable, List, Sequence

from github import Auth, Github

from .categorizer import ChangeRecord

PER_PAGE = 100


#Create a GitHub client for the REST API (one page of 100 results per call)
def make_github_client(token: str) -> Github:
    return Github(auth=Auth.Token(token), per_page=PER_PAGE)


def _label_names(pr: Any) -> List[str]:
    return [l.name.lower() for l in pr.labels]


def filter_by_labels(prs: Iterable[Any], include_labels: Sequence[str], exclude_labels: Sequence[str]) -> List[Any]:
    """Drop PRs carrying an excluded label, then keep those with an included one."""
    result = list(prs)

    if exclude_labels:
        exclude = {l.lower() for l in exclude_labels}
        result = [pr for pr in result if not exclude.intersection(_label_names(pr))]

    if include_labels:
        include = {l.lower() for l in include_labels}
        result = [pr for pr in result if include.intersection(_label_names(pr))]

    return result


def to_change_record(pr: Any) -> ChangeRecord:
    """Convert a PyGithub PullRequest into a ChangeRecord (raises on missing fields)."""
    user = pr.user
    if user is None:
        raise ValueError(f"PR #{pr.number} has no author")
    return ChangeRecord(
        title=pr.title,
        number=pr.number,
        author=user.login,
        url=pr.html_url,
        labels=tuple(l.name for l in pr.labels),
    )


def fetch_merged_changes(
    client: Github,
    repo: str,
    include_labels: Sequence[str] = (),
    exclude_labels: Sequence[str] = (),
) -> List[ChangeRecord]:
    """Download the most recently updated merged PRs of a repository."""
    pulls = client.get_repo(repo).get_pulls(state="closed", sort="updated", direction="desc")
    merged = [pr for pr in pulls.get_page(0) if pr.merged_at]
    return [to_change_record(pr) for pr in filter_by_labels(merged, include_labels, exclude_labels)]
