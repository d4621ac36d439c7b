import typer

from loginflow import __version__
from loginflow.infrastructure.config.loggers import configure_loggers
from loginflow.infrastructure.config.settings.app import app_settings
from loginflow.infrastructure.entrypoints.cli.commands.auth import app as auth_app
from loginflow.infrastructure.types import LogHandler
from loginflow.infrastructure.types import LogLevel

app = typer.Typer(name="loginflow", no_args_is_help=True)
app.add_typer(auth_app, name="auth", help="Authentication commands.")


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"Loginflow Version: {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show the application version and exit.",
    ),
    log_level: LogLevel = typer.Option(
        app_settings.LOG_LEVEL,
        "--log-level",
        help="Minimum level of the emitted logs.",
    ),
    log_handler: list[LogHandler] | None = typer.Option(
        None,
        "--log-handler",
        help="Log handlers to use, repeat the option for several. Default to the LOG_HANDLERS setting.",
    ),
) -> None:
    handlers = log_handler or app_settings.LOG_HANDLERS
    configure_loggers(
        level=log_level.value,
        handlers=[handler.value for handler in handlers],
    )
