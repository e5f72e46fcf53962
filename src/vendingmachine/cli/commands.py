"""CLI commands for vendingmachine.

Provides commands for creating and seeding the machine database and
inspecting its stock.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
import structlog
from rich.console import Console
from rich.table import Table

from vendingmachine.config.settings import get_settings
from vendingmachine.core.exceptions import (
    ConfigurationError,
    StoreNotInitializedError,
    UniqueConstraintViolation,
)
from vendingmachine.db.store import MachineStore

console = Console()


def _stderr_logger_factory(*args: object) -> structlog.PrintLogger:
    # sys.stderr is looked up per logger, not at configure time
    return structlog.PrintLogger(sys.stderr)


def _configure_logging(log_level: str) -> None:
    """Send log lines to stderr so stdout carries only command output."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(log_level)
        ),
        logger_factory=_stderr_logger_factory,
    )


def _open_store(ctx: click.Context) -> MachineStore:
    """Open the store or exit with a message if the file is missing."""
    db_path = ctx.obj["db_path"]
    try:
        return MachineStore(db_path, settings=ctx.obj["settings"])
    except StoreNotInitializedError:
        console.print(f"[red]Database not found at {db_path}[/red]")
        console.print("Run 'vendingmachine init-db' first.")
        ctx.exit(1)


@click.group()
@click.option(
    "--db",
    default=None,
    help="Path to SQLite database (defaults to VENDING_DB_PATH or machine-db.db)",
    type=click.Path(path_type=Path),
)
@click.pass_context
def cli(ctx: click.Context, db: Path | None) -> None:
    """VendingMachine - change and stock store for a vending machine."""
    try:
        settings = get_settings()
    except ConfigurationError as e:
        console.print(f"[red]Invalid configuration:[/red] {e}")
        ctx.exit(1)

    _configure_logging(settings.log_level)

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["db_path"] = db if db is not None else settings.db_path


@cli.command("init-db")
@click.option("--seed/--no-seed", default=False, help="Seed default rows after creating")
@click.pass_context
def init_db(ctx: click.Context, seed: bool) -> None:
    """Create an empty database file.

    Does nothing to an existing file. With --seed, also inserts the
    default change and item rows.
    """
    from vendingmachine.db.connection import create_database_file

    db_path = ctx.obj["db_path"]

    if create_database_file(db_path):
        console.print(f"[green]Database initialized at {db_path}[/green]")
    else:
        console.print(f"[yellow]Database already exists at {db_path}[/yellow]")

    if seed:
        ctx.invoke(seed_command, skip_existing=False)


@cli.command("seed")
@click.option(
    "--skip-existing",
    is_flag=True,
    help="Skip rows that already exist instead of failing",
)
@click.pass_context
def seed_command(ctx: click.Context, skip_existing: bool) -> None:
    """Insert the default change and item rows.

    Fails if the rows are already present unless --skip-existing is given.
    """
    with _open_store(ctx) as store:
        try:
            result = store.seed_store(skip_existing=skip_existing or None)
        except UniqueConstraintViolation as e:
            console.print(f"[red]Already seeded:[/red] {e}")
            console.print("Use --skip-existing to fill in missing rows only.")
            ctx.exit(1)

    console.print(
        f"[green]Seeded {result.change_inserted} denominations "
        f"and {result.items_inserted} items[/green]"
    )


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show database statistics."""
    with _open_store(ctx) as store:
        counts = store.table_counts()

    table = Table(title="Database Statistics")
    table.add_column("Table", style="cyan")
    table.add_column("Rows", justify="right", style="green")

    for name, count in counts.items():
        table.add_row(name, str(count))

    console.print(table)


@cli.command()
@click.pass_context
def change(ctx: click.Context) -> None:
    """List coin and note stock by denomination."""
    with _open_store(ctx) as store:
        handle = store.change()
        rows = handle.get_all()
        total = handle.total_coins()

    if not rows:
        console.print("[yellow]No change loaded. Run 'vendingmachine seed'.[/yellow]")
        return

    table = Table(title="Change", caption=f"{total} coins and notes in total")
    table.add_column("Denomination", style="cyan")
    table.add_column("Quantity", justify="right", style="green")

    for row in rows:
        table.add_row(row.denomination, str(row.quantity))

    console.print(table)


@cli.command()
@click.option("--in-stock", is_flag=True, help="Only show items with a positive quantity")
@click.pass_context
def items(ctx: click.Context, in_stock: bool) -> None:
    """List item stock."""
    with _open_store(ctx) as store:
        handle = store.items()
        rows = handle.in_stock() if in_stock else handle.get_all()

    if not rows:
        console.print("[yellow]No items found.[/yellow]")
        return

    table = Table(title="Items")
    table.add_column("Name", style="cyan")
    table.add_column("Quantity", justify="right")

    for row in rows:
        style = "green" if row.quantity > 0 else "red"
        table.add_row(row.name, f"[{style}]{row.quantity}[/{style}]")

    console.print(table)
