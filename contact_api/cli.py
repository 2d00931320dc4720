"""Command-line interface for operating the contact API."""

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from contact_api.core.errors import ContactApiError
from contact_api.core.services.database import DbSessionService
from contact_api.core.services.user import UserService
from contact_api.entities.role import RoleName
from contact_api.entities.user import UserCredentials
from contact_api.runtime.context import get_config
from contact_api.runtime.init_db import init_db

console = Console()

app = typer.Typer(
    name="contact-api",
    help="Contact API - database setup, user administration and server startup",
    rich_markup_mode="rich",
)


def _db_service() -> DbSessionService:
    config = get_config()
    return DbSessionService(config.database, config.app.environment)


@app.command("init-db")
def init_db_command() -> None:
    """Create all tables and seed the USER and ADMIN roles."""
    init_db(get_config(), _db_service())
    console.print("[green]✅ Database initialized[/green]")


@app.command("create-admin")
def create_admin(
    username: str = typer.Argument(..., help="Username for the new administrator"),
    password: str = typer.Option(
        ..., "--password", "-p", prompt=True, hide_input=True, help="Password"
    ),
) -> None:
    """Register a user holding the ADMIN role."""
    config = get_config()
    db_service = _db_service()
    init_db(config, db_service)

    try:
        with db_service.session_scope() as session:
            users = UserService(session, bcrypt_rounds=config.security.bcrypt_rounds)
            user = users.register(
                UserCredentials(username=username, password=password), RoleName.ADMIN
            )
    except ContactApiError as e:
        console.print(f"[red]❌ Failed to create admin: {e.message}[/red]")
        raise typer.Exit(code=1) from e

    console.print(f"[green]✅ Created admin '{user.username}' (id {user.id})[/green]")


@app.command("list-users")
def list_users() -> None:
    """List registered users and their roles."""
    db_service = _db_service()
    with db_service.session_scope() as session:
        users = UserService(session).list_users()

    if not users:
        console.print("[yellow]No users found[/yellow]")
        return

    table = Table(title="Users")
    table.add_column("ID", style="cyan")
    table.add_column("Username", style="green")
    table.add_column("Roles", style="magenta")
    for user in users:
        table.add_row(str(user.id), user.username, ", ".join(sorted(user.roles)))
    console.print(table)


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Host to bind (defaults to config)"),
    port: int | None = typer.Option(None, help="Port to bind (defaults to config)"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """Start the HTTP server."""
    import uvicorn

    config = get_config()
    host = host or config.app.host
    port = port or config.app.port

    console.print(
        Panel.fit(
            f"[bold green]Starting Contact API on {host}:{port}[/bold green]",
            border_style="green",
        )
    )
    uvicorn.run(
        "contact_api.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        access_log=False,  # request logging middleware covers access logs
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
