"""Main CLI application module."""

import typer

from .db_commands import db_app
from .user_commands import users_app

app = typer.Typer(
    help="User lookup service CLI",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(db_app, name="db")
app.add_typer(users_app, name="users")


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address (defaults to app.host)"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port (defaults to app.port)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the HTTP server."""
    import uvicorn

    from user_lookup.runtime.context import get_config

    config = get_config()
    uvicorn.run(
        "user_lookup.api.http.app:app",
        host=host or config.app.host,
        port=port or config.app.port,
        reload=reload,
        access_log=False,
    )


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
