"""Utilities for rendering conversion summaries."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape

from maniaconv.features.chart import ChartSummary
from maniaconv.features.conversion import ContainerResult

RULE_WIDTH = 80


def render_chart_summary(console: Console, summary: ChartSummary) -> None:
    """Print one chart's summary block."""

    console.print()
    for line in str(summary).splitlines():
        console.print(escape(line))


def render_container_summaries(
    console: Console,
    results: Sequence[ContainerResult],
    header_label: str,
    path_label: str,
    total_label: str,
) -> None:
    """Render each container's charts followed by run totals.

    Args:
        console: Rich console instance used to render output.
        results: Container results to summarize.
        header_label: Label rendered in the summary header.
        path_label: Label in front of each container path.
        total_label: Label describing the count of containers.
    """
    succeeded = [result for result in results if result.success]

    console.print(f"\n[bold]{header_label}:[/bold]")
    console.print("-" * RULE_WIDTH, markup=False)
    for result in succeeded:
        path = result.output_path or result.source_path
        console.print(f"{path_label}: {escape(str(path))}")
        console.print(f"Contains {len(result.summaries)} beatmaps:")
        for summary in result.summaries:
            render_chart_summary(console, summary)
        console.print("-" * RULE_WIDTH + "\n", markup=False)

    total_charts = sum(len(result.summaries) for result in succeeded)
    console.print(f"{total_label}: {len(succeeded)}")
    console.print(f"[green]Total converted beatmaps: {total_charts}[/green]")

    failures = [result for result in results if not result.success]
    if not failures:
        return

    console.print(f"[red]Failed: {len(failures)}[/red]")
    for failed in failures:
        console.print(f"[red]  • {escape(str(failed.source_path))}: {escape(failed.error_message or '')}[/red]")
