"""User CLI commands."""

from datetime import datetime

import typer
from rich.console import Console
from rich.table import Table
from sqlalchemy.exc import SQLAlchemyError

from user_lookup.core.entities.user import User
from user_lookup.core.repositories.user_repo import UserRepository
from user_lookup.core.services import DbSessionService

console = Console()

users_app = typer.Typer(help="Look up and seed users")


def _format(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


@users_app.command("show")
def show_user(
    user_id: int = typer.Argument(..., help="ID of the user to look up"),
) -> None:
    """Show a single user."""
    database_service = DbSessionService()
    try:
        with database_service.session_scope() as session:
            user = UserRepository(session).find_by_id(user_id)
    except SQLAlchemyError as e:
        console.print(f"[red]❌ Failed to look up user: {e}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        database_service.dispose()

    if user is None:
        console.print(f"[yellow]No user with id {user_id}[/yellow]")
        return

    table = Table(title=f"User {user_id}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    for field_name, value in user.model_dump().items():
        table.add_row(field_name, _format(value))
    console.print(table)


@users_app.command("add")
def add_user(
    email: str = typer.Option(..., "--email", "-e", help="Email address"),
    name: str = typer.Option(..., "--name", "-n", help="Name"),
    instant: datetime | None = typer.Option(
        None,
        "--instant",
        "-i",
        help="Point in time for the user (ISO 8601, UTC assumed); defaults to now",
        formats=["%Y-%m-%dT%H:%M:%S%z", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d"],
    ),
) -> None:
    """Add a user to the local database."""
    user = User(email=email, name=name, instant=instant or datetime.now().astimezone())

    database_service = DbSessionService()
    try:
        with database_service.session_scope() as session:
            created = UserRepository(session).create(user)
    except SQLAlchemyError as e:
        console.print(f"[red]❌ Failed to create user: {e}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        database_service.dispose()

    console.print(f"[green]✅ Created user {created.id}[/green]")
