"""CLI commands for the student records dashboard."""

from __future__ import annotations

import click

from shophub.application.list_students import ListStudentsHandler
from shophub.application.summarize_students import SummarizeStudentsHandler
from shophub.domain.exceptions import DomainException
from shophub.domain.model.student import StudentTab
from shophub.infrastructure.bootstrap import student_directory
from shophub.infrastructure.config import load_settings
from shophub.infrastructure.http.student_proxy import fetch_student_records


@click.command("proxy")
@click.pass_context
def students_proxy(ctx: click.Context) -> None:
    """Relay the raw student feed as JSON."""
    settings = load_settings()
    response = fetch_student_records(settings.students_url, timeout=settings.http_timeout)
    click.echo(response.text)
    if response.status_code != 200:
        ctx.exit(1)


@click.command("list")
@click.option("--search", default="", help="Match name, NIM or class.")
@click.option(
    "--tab",
    type=click.Choice([t.value for t in StudentTab]),
    default=StudentTab.ALL.value,
    show_default=True,
    help="high: points > 80, low: points <= 80.",
)
def students_list(search: str, tab: str) -> None:
    """List students, optionally filtered."""
    handler = ListStudentsHandler(directory=student_directory())

    try:
        rows = handler.handle(search=search, tab=StudentTab(tab))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not rows:
        click.echo("No students found.")
        return

    click.echo(f"{'NIM':<14} {'Name':<30} {'Class':<10} {'Points':>7}  Tier")
    click.echo("-" * 75)
    for row in rows:
        points = "-" if row.points is None else str(row.points)
        click.echo(
            f"{row.nim:<14} {row.name[:30]:<30} {row.class_name:<10} {points:>7}  {row.tier}"
        )


@click.command("stats")
def students_stats() -> None:
    """Show totals for the whole student feed."""
    handler = SummarizeStudentsHandler(directory=student_directory())

    try:
        summary = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    average = "-" if summary.average_points is None else str(summary.average_points)
    click.echo(f"Total Mahasiswa:  {summary.total}")
    click.echo(f"Performa Baik:    {summary.high_performers}")
    click.echo(f"Rata-rata Poin:   {average}")
