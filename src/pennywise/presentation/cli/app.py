"""Pennywise CLI application using Typer.

Command-line utilities for the Pennywise backend: secret generation,
database maintenance and running the API server.
"""

import asyncio
import json
import secrets
from pathlib import Path
from typing import Annotated, Optional

import typer
import uvicorn
from rich.console import Console
from rich.table import Table
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from pennywise.infrastructure.persistence.sqlalchemy import (
    create_engine,
    create_tables,
    drop_tables,
)
from pennywise.infrastructure.persistence.sqlalchemy.maintenance import (
    BackupData,
    backup_data,
    restore_data,
    seed_categories,
)
from pennywise_config.settings import get_settings

app = typer.Typer(
    name="pennywise",
    help="Pennywise - personal finance tracking backend CLI",
    no_args_is_help=True,
)
console = Console()


# Create secrets subcommand group
secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

db_app = typer.Typer(
    name="db",
    help="Database maintenance",
    no_args_is_help=True,
)
app.add_typer(db_app)

DatabaseUrlOption = Annotated[
    Optional[str],
    typer.Option(
        "--database-url",
        help="SQLAlchemy async URL (defaults to the configured database)",
    ),
]
BackupFileOption = Annotated[
    Path,
    typer.Option("--file", "-f", help="Backup JSON file"),
]
DEFAULT_BACKUP_FILE = Path("backups/pennywise-backup.json")


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for Pennywise configuration.

    Generates three required secrets:
    - JWT_ACCESS_SECRET_KEY: Secret for signing access tokens
    - JWT_REFRESH_SECRET_KEY: Secret for signing refresh tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Pennywise Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes of entropy each for HS256 signing
    console.print(f"[cyan]JWT_ACCESS_SECRET_KEY[/cyan]={secrets.token_urlsafe(64)}")
    console.print(f"[cyan]JWT_REFRESH_SECRET_KEY[/cyan]={secrets.token_urlsafe(64)}")
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={secrets.token_urlsafe(32)}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


def _engine(database_url: Optional[str]) -> AsyncEngine:
    return create_engine(database_url or get_settings().database_url)


async def _in_session(engine: AsyncEngine, work):
    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        result = await work(session)
        await session.commit()
        return result


def _write_backup(data: BackupData, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def _print_counts(title: str, counts: dict[str, int]) -> None:
    table = Table(title=title)
    table.add_column("Table", style="cyan")
    table.add_column("Rows", justify="right")
    for name, count in counts.items():
        table.add_row(name, str(count))
    console.print(table)


@db_app.command("create")
def db_create(database_url: DatabaseUrlOption = None) -> None:
    """Drop and recreate every table, then seed the default categories.

    All existing data is lost.
    """

    async def run() -> int:
        engine = _engine(database_url)
        try:
            await drop_tables(engine)
            await create_tables(engine)
            return await _in_session(engine, seed_categories)
        finally:
            await engine.dispose()

    seeded = asyncio.run(run())
    console.print(f"[green]Tables created, {seeded} categories seeded.[/green]")


@db_app.command("seed")
def db_seed(database_url: DatabaseUrlOption = None) -> None:
    """Insert the default categories that are missing."""

    async def run() -> int:
        engine = _engine(database_url)
        try:
            await create_tables(engine)
            return await _in_session(engine, seed_categories)
        finally:
            await engine.dispose()

    seeded = asyncio.run(run())
    console.print(f"[green]{seeded} categories seeded.[/green]")


@db_app.command("backup")
def db_backup(
    database_url: DatabaseUrlOption = None,
    file: BackupFileOption = DEFAULT_BACKUP_FILE,
) -> None:
    """Export every table to a JSON file."""

    async def run() -> BackupData:
        engine = _engine(database_url)
        try:
            await create_tables(engine)
            return await _in_session(engine, backup_data)
        finally:
            await engine.dispose()

    data = asyncio.run(run())
    _write_backup(data, file)
    _print_counts("Backup", {name: len(rows) for name, rows in data.items()})
    console.print(f"[green]Backup written to {file}[/green]")


@db_app.command("restore")
def db_restore(
    database_url: DatabaseUrlOption = None,
    file: BackupFileOption = DEFAULT_BACKUP_FILE,
) -> None:
    """Load a JSON backup into empty tables."""
    if not file.is_file():
        console.print(f"[red]Backup file not found: {file}[/red]")
        raise typer.Exit(code=1)

    data: BackupData = json.loads(file.read_text(encoding="utf-8"))

    async def run() -> dict[str, int]:
        engine = _engine(database_url)
        try:
            await create_tables(engine)
            return await _in_session(engine, lambda session: restore_data(session, data))
        finally:
            await engine.dispose()

    _print_counts("Restore", asyncio.run(run()))
    console.print("[green]Restore complete.[/green]")


@db_app.command("restart")
def db_restart(
    database_url: DatabaseUrlOption = None,
    file: BackupFileOption = DEFAULT_BACKUP_FILE,
) -> None:
    """Back up all data, recreate the schema and restore the data."""

    async def run() -> dict[str, int]:
        engine = _engine(database_url)
        try:
            await create_tables(engine)
            data = await _in_session(engine, backup_data)
            _write_backup(data, file)
            await drop_tables(engine)
            await create_tables(engine)
            return await _in_session(engine, lambda session: restore_data(session, data))
        finally:
            await engine.dispose()

    _print_counts("Restart", asyncio.run(run()))
    console.print(f"[green]Schema rebuilt, data restored (backup kept at {file}).[/green]")


@app.command("serve")
def serve(
    host: Annotated[Optional[str], typer.Option(help="Bind address")] = None,
    port: Annotated[Optional[int], typer.Option(help="Bind port")] = None,
    reload: Annotated[bool, typer.Option(help="Reload on code changes")] = False,
) -> None:
    """Run the HTTP API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "pennywise.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
