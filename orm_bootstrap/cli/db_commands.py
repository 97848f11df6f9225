"""Database bootstrap CLI commands."""

from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from orm_bootstrap.api.utils.app_startup import configure_logging
from orm_bootstrap.core.services import (
    DatabaseBootstrap,
    DbManageService,
    DbSessionService,
)
from orm_bootstrap.entities import SCHEMAS, UserRepository
from orm_bootstrap.runtime.config.config_data import DatabaseConfig
from orm_bootstrap.runtime.context import get_config

console = Console()

db_app = typer.Typer(help="Bootstrap and inspect the database")

_dialect_option = typer.Option(None, "--dialect", "-d", help="Database dialect (sqlite, postgresql)")
_storage_option = typer.Option(None, "--storage", "-s", help="Storage location, e.g. a sqlite file path")
_url_option = typer.Option(None, "--url", help="Full database URL; overrides dialect and storage")


def resolve_database_config(
    dialect: str | None = None,
    storage: str | None = None,
    url: str | None = None,
) -> DatabaseConfig:
    """Apply command-line overrides on top of the configured database section."""
    updates: dict[str, Any] = {}
    if dialect:
        updates["dialect"] = dialect
    if storage:
        updates["storage"] = storage
    if url:
        updates["url"] = url
    return DatabaseConfig.model_validate(
        {**get_config().database.model_dump(), **updates}
    )


def _open(dialect: str | None, storage: str | None, url: str | None) -> DbSessionService:
    configure_logging()
    try:
        return DbSessionService(resolve_database_config(dialect, storage, url))
    except ValueError as e:
        # pydantic's ValidationError is a ValueError too
        console.print(f"[red]❌ Invalid database settings: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


@db_app.command("bootstrap")
def bootstrap(
    dialect: str | None = _dialect_option,
    storage: str | None = _storage_option,
    url: str | None = _url_option,
    seed: bool = typer.Option(True, "--seed/--no-seed", help="Insert the seed records"),
) -> None:
    """Drop, recreate and seed every declared table."""
    database_service = _open(dialect, storage, url)

    try:
        result = DatabaseBootstrap(database_service, seed=seed).run()
        if not result.ok:
            console.print(
                f"[red]❌ Bootstrap failed at step '{result.failed_step}': "
                f"{escape(str(result.error))}[/red]"
            )
            raise typer.Exit(code=1)

        console.print(f"[green]✅ Bootstrap completed: {' → '.join(result.completed)}[/green]")

        with database_service.session_scope() as session:
            users = UserRepository(session).list_all()

        table = Table(title="Seeded users")
        table.add_column("ID", style="cyan")
        table.add_column("First Name", style="magenta")
        table.add_column("Last Name", style="magenta")
        table.add_column("Email", style="blue")
        for user in users:
            table.add_row(user.id, user.first_name or "", user.last_name or "", user.email or "")
        console.print(table)
    finally:
        database_service.dispose()


@db_app.command("check")
def check(
    dialect: str | None = _dialect_option,
    storage: str | None = _storage_option,
    url: str | None = _url_option,
) -> None:
    """Verify that the database can be reached."""
    database_service = _open(dialect, storage, url)

    try:
        database_service.verify_connection()
    except Exception as e:
        console.print(f"[red]❌ Unable to connect to the database: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        database_service.dispose()

    console.print("[green]✅ Connection has been established successfully.[/green]")


@db_app.command("tables")
def tables(
    dialect: str | None = _dialect_option,
    storage: str | None = _storage_option,
    url: str | None = _url_option,
) -> None:
    """List the declared schemas and whether their tables exist."""
    database_service = _open(dialect, storage, url)

    try:
        existing = DbManageService(database_service).table_names()
    except Exception as e:
        console.print(f"[red]❌ Failed to inspect the database: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        database_service.dispose()

    table = Table(title="Declared schemas")
    table.add_column("Entity", style="cyan")
    table.add_column("Table", style="green")
    table.add_column("Exists", style="yellow")
    for name, schema in SCHEMAS.items():
        table_name = schema.__tablename__  # type: ignore[attr-defined]
        table.add_row(name, table_name, "✅" if table_name in existing else "❌")
    console.print(table)


def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address"),
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    app_config = get_config().app
    uvicorn.run(
        "orm_bootstrap.api.http.app:app",
        host=host or app_config.host,
        port=port or app_config.port,
        reload=reload,
    )
