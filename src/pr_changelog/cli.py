import typer
from typing import Optional

from .config import DEFAULT_CHANGELOG_PATH, load_settings
from .graph import build_graph, initial_state
from .outputs import error

# ✅ create a Typer application
app = typer.Typer(help="Changelog generator for merged pull requests")


@app.callback()
def main():
    """Keep CHANGELOG.md up to date from merged pull requests."""


# ✅ register "generate" as a subcommand; every option falls back to the Actions input
@app.command("generate")
def generate(
    github_token: Optional[str] = typer.Option(None, envvar="INPUT_GITHUB_TOKEN", help="Token used to read pull requests"),
    repo: Optional[str] = typer.Option(None, "--repo", "-r", help="Repository in owner/name format (default: $GITHUB_REPOSITORY)"),
    changelog_path: str = typer.Option(DEFAULT_CHANGELOG_PATH, envvar="INPUT_CHANGELOG_PATH", help="Changelog file to update"),
    version: Optional[str] = typer.Option(None, envvar="INPUT_VERSION", help="Version for the new section (blank for Unreleased)"),
    include_labels: Optional[str] = typer.Option(None, envvar="INPUT_INCLUDE_LABELS", help="Comma-separated labels; a PR needs one of them"),
    exclude_labels: Optional[str] = typer.Option(None, envvar="INPUT_EXCLUDE_LABELS", help="Comma-separated labels; a PR must have none of them"),
    categorize: Optional[str] = typer.Option(None, envvar="INPUT_CATEGORIZE", help="'true' groups entries by label category (default: true)"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the new section instead of saving it"),
):
    """Add a section for the merged pull requests to the changelog."""
    try:
        settings = load_settings(
            github_token=github_token,
            repo=repo,
            changelog_path=changelog_path,
            version=version,
            include_labels=include_labels,
            exclude_labels=exclude_labels,
            categorize=categorize,
        )
        typer.echo(f"Changelog path: {changelog_path}")
        typer.echo(f"Version: {settings.version or 'Unreleased'}")
        typer.echo(f"Categorize: {str(settings.categorize).lower()}")

        agent = build_graph()
        out = agent.invoke(initial_state(settings, dry_run=dry_run))
    except Exception as e:
        error(f"Action failed: {e}")
        raise typer.Exit(code=1)

    if out["updated"]:
        typer.echo(f"✅ Successfully updated {changelog_path}")


if __name__ == "__main__":
    app()
