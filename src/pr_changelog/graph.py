from __future__ import annotations
from typing import Callable, List, Optional, TypedDict
from datetime import date, datetime, timezone

from langgraph.graph import StateGraph, END

from .categorizer import ChangeRecord
from .changelog import merge_section, read_changelog, write_changelog
from .config import Settings
from .gh_toolkit import fetch_merged_changes, make_github_client
from .outputs import set_output, warning
from .render import render_section

ChangeSource = Callable[[Settings], List[ChangeRecord]]


#"state" shared between steps
class State(TypedDict):
    settings: Settings
    dry_run: bool
    changes: List[ChangeRecord]
    section: str
    document: str
    updated: bool


def github_change_source(settings: Settings) -> List[ChangeRecord]:
    """Merged PRs from the GitHub REST API, filtered by the configured labels."""
    client = make_github_client(settings.github_token)
    return fetch_merged_changes(client, settings.repo, settings.include_labels, settings.exclude_labels)


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


def skip(state: State) -> State:
    """Nothing to add: warn and leave the changelog alone."""
    print("→ skip")
    warning("No merged pull requests found to add to changelog.")
    state["updated"] = False
    return state


def merge(state: State) -> State:
    """Insert the new section into the existing (or a fresh) changelog."""
    print("→ merge")
    path = state["settings"].changelog_path
    existing = read_changelog(path)
    if existing is None:
        print(f"  {path.name} not found, starting a new changelog")
    state["document"] = merge_section(existing, state["section"])
    return state


def write(state: State) -> State:
    print("→ write")
    if state.get("dry_run"):
        print(state["section"])
        state["updated"] = False
        return state
    write_changelog(state["settings"].changelog_path, state["document"])
    state["updated"] = True
    return state


def report(state: State) -> State:
    """Publish step outputs."""
    print("→ report")
    set_output("updated", "true" if state["updated"] else "false")
    set_output("changes_count", str(len(state["changes"])))
    return state


def _route_after_fetch(state: State) -> str:
    return "render" if state["changes"] else "skip"


def build_graph(change_source: Optional[ChangeSource] = None, today: Optional[Callable[[], date]] = None):
    """Assemble the workflow graph."""
    source = change_source or github_change_source
    clock = today or _utc_today

    def fetch_changes(state: State) -> State:
        """Download merged PRs."""
        print("→ fetch_changes")
        settings = state["settings"]
        print(f"  repository={settings.repo}")
        state["changes"] = source(settings)
        print(f"  found {len(state['changes'])} merged PR(s)")
        return state

    def render(state: State) -> State:
        """Generate the Markdown section."""
        print("→ render")
        settings = state["settings"]
        state["section"] = render_section(
            settings.version, state["changes"], settings.categorize, clock()
        )
        return state

    g = StateGraph(State)
    g.add_node("fetch_changes", fetch_changes)
    g.add_node("skip", skip)
    g.add_node("render", render)
    g.add_node("merge", merge)
    g.add_node("write", write)
    g.add_node("report", report)

    g.set_entry_point("fetch_changes")
    g.add_conditional_edges("fetch_changes", _route_after_fetch, {"render": "render", "skip": "skip"})
    g.add_edge("skip", "report")
    g.add_edge("render", "merge")
    g.add_edge("merge", "write")
    g.add_edge("write", "report")
    g.add_edge("report", END)
    return g.compile()


def initial_state(settings: Settings, dry_run: bool = False) -> State:
    return {
        "settings": settings,
        "dry_run": dry_run,
        "changes": [],
        "section": "",
        "document": "",
        "updated": False,
    }
