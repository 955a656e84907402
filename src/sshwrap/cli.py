"""sshwrap CLI: rewrite the target host, then hand over to ssh."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from sshwrap import __version__

app = typer.Typer(
    name="sshwrap",
    help="Rewrite ssh target hosts with regex rules, then run ssh.",
    add_completion=False,
)

console = Console(stderr=True)
logger = logging.getLogger("sshwrap.cli")

USAGE = "Usage: sshwrap [--debug] <host> [ssh-args...]"


def _version_callback(value: bool) -> None:
    if value:
        print(f"sshwrap {__version__}")
        raise typer.Exit()


def _init_config(config_path: Path) -> None:
    from sshwrap.config.defaults import DEFAULT_TOML

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  Config already exists at {config_path}")
        raise typer.Exit(code=1)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    },
)
def main(
    host: Optional[str] = typer.Argument(None, help="Host (or alias) to connect to", show_default=False),
    ssh_args: Optional[List[str]] = typer.Argument(None, help="Arguments passed to ssh verbatim", show_default=False),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to wrapper.toml"),
    debug: bool = typer.Option(False, "--debug", help="Trace rule matching on stderr"),
    dry_run: bool = typer.Option(False, "--dry-run", "-n", help="Show the ssh command without running it"),
    list_rules: bool = typer.Option(False, "--list-rules", help="Show the loaded rules and exit"),
    init: bool = typer.Option(False, "--init", help="Write a starter config and exit"),
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """Rewrite HOST with the first matching rule and run ssh with it."""
    from sshwrap.config.defaults import DROPIN_RELPATH
    from sshwrap.config.loader import (
        ConfigError,
        apply_env_overrides,
        home_dir,
        load_config,
        resolve_config_path,
    )
    from sshwrap.config.logging import configure_logging
    from sshwrap.config.schema import WrapperConfig
    from sshwrap.output import terminal
    from sshwrap.rules.engine import rewrite
    from sshwrap.rules.models import InvalidPatternError
    from sshwrap.rules.registry import build_ruleset
    from sshwrap.ssh.launcher import SSHError, build_command, run_ssh

    configure_logging(debug=debug)
    config_path = resolve_config_path(override=config)

    if init:
        _init_config(config_path)
        raise typer.Exit(code=0)

    if host is None and not list_rules:
        console.print(USAGE, markup=False, highlight=False)
        raise typer.Exit(code=1)

    # --- Load config (degrade to no rules on failure) ---
    try:
        cfg = load_config(config_override=config)
    except ConfigError as exc:
        console.print(f"[bold yellow]Failed to load config:[/bold yellow] {escape(str(exc))}")
        cfg = WrapperConfig()
        apply_env_overrides(cfg)

    if cfg.output.debug and not debug:
        configure_logging(debug=True)

    logger.debug("Config path: %s", config_path)
    if host is not None:
        logger.debug("Original host: %s", host)

    # --- Build rules ---
    try:
        rules = build_ruleset(cfg, home_dir() / DROPIN_RELPATH, source=str(config_path))
    except (InvalidPatternError, ConfigError) as exc:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    if list_rules:
        terminal.render_rules(rules)
        raise typer.Exit(code=0)

    assert host is not None

    # --- Rewrite ---
    rewritten = rewrite(host, rules)
    if rewritten is None:
        logger.debug("No matching pattern found. Passing original host to ssh.")
    target = rewritten if rewritten is not None else host

    command = build_command(target, ssh_args or [], binary=cfg.ssh.binary)

    if dry_run:
        terminal.render_plan(host, rewritten, command)
        raise typer.Exit(code=0)

    # --- Delegate to ssh ---
    try:
        code = run_ssh(command)
    except SSHError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    raise typer.Exit(code=code)
