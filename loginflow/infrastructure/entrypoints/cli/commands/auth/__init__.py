from pathlib import Path

import typer

from loginflow.domain.entities.login import LoginFailure
from loginflow.domain.exceptions import UsersFileError
from loginflow.infrastructure.config.settings.app import app_settings
from loginflow.infrastructure.entrypoints.cli.commands.auth.login import login_logic
from loginflow.infrastructure.entrypoints.cli.parsers import parse_username

app = typer.Typer()


@app.command("login", help="Log a user in against the registered accounts.")
def login(
    username: str = typer.Option(..., help="Account username", parser=parse_username),
    password: str = typer.Option(..., prompt=True, hide_input=True, help="Account password"),
    users_file: Path | None = typer.Option(
        app_settings.USERS_FILE,
        "--users-file",
        help="CSV file with a 'username,password' header listing the registered users.",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
):
    """
    Checks the credentials against the users loaded from the users file.

    Exits with code 1 when the account does not exist or the password does not match.
    """
    try:
        outcome = login_logic(username, password, users_file)
    except UsersFileError as e:
        typer.secho(f"Error: invalid users file: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e
    except Exception as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

    if isinstance(outcome, LoginFailure):
        raise typer.Exit(code=1)
