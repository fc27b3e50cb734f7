"""jira-check CLI — all commands."""

from pathlib import Path
from typing import Annotated

import typer
from rich import print as rprint
from rich.markup import escape
from rich.table import Table

from jira_check.checker import check_event
from jira_check.errors import JiraCheckError
from jira_check.events import load_event
from jira_check.keys import extract_keys
from jira_check.models import CheckReport, LookupStatus, TrackerVerificationResult, Verdict
from jira_check.settings import JiraCheckSettings, get_settings
from jira_check.trackers.base import IssueTracker
from jira_check.trackers.jira import JiraTracker

app = typer.Typer(help="jira-check: fail CI when commits or pull requests lack valid Jira keys", no_args_is_help=True)

ConfigOpt = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="TOML config file (default: .jira-check.toml)"),
]


# ---------------------------------------------------------------------------
# Tracker factory
# ---------------------------------------------------------------------------


def get_tracker(settings: JiraCheckSettings) -> IssueTracker:
    return JiraTracker(settings)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

_LOOKUP_LABEL = {
    LookupStatus.OK: "found",
    LookupStatus.NOT_FOUND: "not found",
    LookupStatus.OTHER: "error",
    LookupStatus.PLACEHOLDER: "placeholder",
}


def _mark(ok: bool) -> str:
    return "[green]✓[/green]" if ok else "[red]✗[/red]"


def _results_table(results: list[TrackerVerificationResult]) -> Table:
    table = Table(title="Jira Issues")
    table.add_column("Key", style="cyan")
    table.add_column("Lookup")
    table.add_column("HTTP", style="dim")
    table.add_column("Status")
    table.add_column("Type")
    table.add_column("Assignee")
    table.add_column("OK")

    for r in results:
        table.add_row(
            r.key,
            _LOOKUP_LABEL[r.lookup],
            str(r.http_status) if r.http_status is not None else "—",
            r.remote_status or "—",
            r.issue_type or "—",
            r.assignee or "—",
            _mark(r.valid),
        )
    return table


def render_report(report: CheckReport) -> None:
    if report.verdict is Verdict.SKIPPED:
        rprint(f"[yellow]Nothing to do:[/yellow] {escape(report.reason or '')}")
        return

    if report.outcomes:
        title = "Commits" if report.event == "push" else "Pull Request"
        table = Table(title=title)
        table.add_column("Subject", style="cyan")
        table.add_column("Keys")
        table.add_column("OK")
        for outcome in report.outcomes:
            table.add_row(outcome.subject_id, ", ".join(outcome.keys) or "—", _mark(outcome.is_valid))
        rprint(table)

    if report.results:
        rprint(_results_table(report.results))

    for outcome in report.failing_outcomes:
        rprint(f"[red]✗[/red] {outcome.subject_id} does not reference a Jira issue")
    for result in report.failing_results:
        if result.lookup is LookupStatus.NOT_FOUND:
            rprint(f"[red]✗[/red] {result.key} does not exist")
        elif result.lookup is LookupStatus.OTHER:
            rprint(f"[red]✗[/red] {result.key} lookup failed with HTTP {result.http_status}")
        else:
            rprint(f"[red]✗[/red] {result.key} is '{escape(result.remote_status or 'unknown')}'")

    if report.verdict is Verdict.PASSED:
        rprint(f"[green]✓ {report.event} check passed[/green]")
    else:
        reason = f": {escape(report.reason)}" if report.reason else ""
        rprint(f"[red]✗ {report.event} check failed{reason}[/red]")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command("check")
def check(
    event_name: Annotated[
        str,
        typer.Option("--event-name", "-e", envvar="GITHUB_EVENT_NAME", help="push or pull_request"),
    ],
    event_path: Annotated[
        Path,
        typer.Option("--event-path", "-p", envvar="GITHUB_EVENT_PATH", help="Path to the event JSON payload"),
    ],
    config: ConfigOpt = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Print the parsed event")] = False,
) -> None:
    """Check a push or pull_request event and exit non-zero on failure."""
    settings = get_settings(config_path=config)
    tracker = get_tracker(settings)

    try:
        event = load_event(event_name, event_path)
        if verbose:
            rprint(event.model_dump())
        report = check_event(event, tracker)
    except JiraCheckError as exc:
        rprint(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1)

    render_report(report)
    raise typer.Exit(report.exit_code)


@app.command("verify")
def verify(
    keys: Annotated[list[str], typer.Argument(help="Issue keys, e.g. ABC-123")],
    config: ConfigOpt = None,
) -> None:
    """Look up issue keys in Jira and check their status."""
    settings = get_settings(config_path=config)
    tracker = get_tracker(settings)

    try:
        results = tracker.verify(keys)
    except JiraCheckError as exc:
        rprint(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1)

    rprint(_results_table(results))
    if any(not r.valid for r in results):
        raise typer.Exit(1)


@app.command("extract")
def extract(
    text: Annotated[str, typer.Argument(help="Commit message or pull request title")],
) -> None:
    """Print the issue keys found in TEXT, one per line."""
    keys = extract_keys(text)
    if not keys:
        typer.echo("no issue keys found", err=True)
        raise typer.Exit(1)
    for key in keys:
        typer.echo(key)


@app.command("config-show")
def config_show(config: ConfigOpt = None) -> None:
    """Show resolved configuration (masks credentials)."""
    settings = get_settings(config_path=config, require_credentials=False)

    def mask(val: str | None) -> str:
        if not val:
            return "[dim](not set)[/dim]"
        if len(val) <= 5:
            return "***"
        return f"...{val[-5:]}"

    table = Table(title="jira-check Configuration")
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("org", settings.org or "[dim](not set)[/dim]")
    table.add_row("username", settings.username or "[dim](not set)[/dim]")
    table.add_row("api_token", mask(settings.api_token.get_secret_value() if settings.api_token else None))
    table.add_row("allowed_statuses", ", ".join(settings.allowed_statuses))
    table.add_row("timeout", f"{settings.timeout:g}s")
    table.add_row("dedupe_keys", str(settings.dedupe_keys).lower())

    rprint(table)
