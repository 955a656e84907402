"""Rich terminal output: dry-run plan and rule listing."""

from __future__ import annotations

import shlex
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from sshwrap.rules.models import Rule


def render_plan(
    original_host: str,
    rewritten: Optional[str],
    command: Sequence[str],
    *,
    console: Optional[Console] = None,
) -> None:
    """Print what a real run would execute, without running it."""
    console = console or Console()
    if rewritten is None:
        console.print(f"[dim]No rule matched[/dim] [cyan]{escape(original_host)}[/cyan]")
    else:
        console.print(
            f"[cyan]{escape(original_host)}[/cyan] [dim]→[/dim] [bold green]{escape(rewritten)}[/bold green]"
        )
    console.print(Text(shlex.join(command)), soft_wrap=True)


def render_rules(rules: Sequence[Rule], *, console: Optional[Console] = None) -> None:
    """Print the rule set in evaluation order."""
    console = console or Console()
    if not rules:
        console.print("[yellow]No rules configured.[/yellow]")
        return

    table = Table(title="sshwrap rules", title_style="bold", border_style="dim")
    table.add_column("#", justify="right", style="green")
    table.add_column("Pattern", style="cyan", no_wrap=True)
    table.add_column("Template", style="magenta", no_wrap=True)
    table.add_column("Source", style="dim", overflow="fold")

    for i, rule in enumerate(rules, start=1):
        table.add_row(str(i), Text(rule.pattern), Text(rule.template), Text(rule.source or "-"))

    console.print(table)
