"""budgetbook CLI application using Typer.

Command-line utilities for running the API and managing its database.
"""

import asyncio
import secrets
from typing import Optional

import typer
import uvicorn
from rich.console import Console

from budgetbook.infrastructure.persistence.sqlalchemy import (
    create_engine,
    create_tables,
    drop_tables,
)
from budgetbook_config.settings import Settings, get_settings

app = typer.Typer(
    name="budgetbook",
    help="budgetbook - personal finance tracker CLI",
    no_args_is_help=True,
)
console = Console()


secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

db_app = typer.Typer(
    name="db",
    help="Database schema management",
    no_args_is_help=True,
)
app.add_typer(db_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for budgetbook configuration.

    Copy the output to your .env file.
    """
    console.print("\n[bold green]budgetbook Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes for a strong HS256 key
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env or "
        "config/.env.dev file.[/dim]\n"
    )


async def _init_database(settings: Settings) -> None:
    engine = create_engine(settings.database_url, echo=settings.database_echo)
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()


async def _reset_database(settings: Settings) -> None:
    engine = create_engine(settings.database_url, echo=settings.database_echo)
    try:
        await drop_tables(engine)
        await create_tables(engine)
    finally:
        await engine.dispose()


@db_app.command("init")
def init_database() -> None:
    """Create missing tables. Existing data is left untouched."""
    settings = get_settings()
    asyncio.run(_init_database(settings))
    console.print(
        f"[green]Database ready[/green] ({settings.database_type})",
    )


@db_app.command("reset")
def reset_database(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Skip the confirmation prompt",
    ),
) -> None:
    """Drop and recreate all tables. ALL DATA IS LOST."""
    settings = get_settings()
    if not force:
        typer.confirm(
            f"This deletes every account, transaction and budget in "
            f"{settings.database_type}. Continue?",
            abort=True,
        )
    asyncio.run(_reset_database(settings))
    console.print("[yellow]Database reset[/yellow]")


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: Optional[int] = typer.Option(None, help="Port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "budgetbook.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
