from pathlib import Path

import typer

from loginflow.domain.entities.login import LoginOutcome
from loginflow.domain.schemas.login import LoginCredentials
from loginflow.infrastructure.adapters.presenters.login import LoginViewModel
from loginflow.infrastructure.adapters.seed.users_file import load_users_file
from loginflow.infrastructure.entrypoints.cli.dependencies import get_login_interactor
from loginflow.infrastructure.entrypoints.cli.dependencies import get_login_presenter
from loginflow.infrastructure.entrypoints.cli.dependencies import get_user_repository


def login_logic(username: str, password: str, users_file: Path | None = None) -> LoginOutcome:
    user_repository = get_user_repository()

    if users_file is not None:
        load_users_file(users_file, user_repository)

    view_model = LoginViewModel()
    interactor = get_login_interactor(
        user_repository=user_repository,
        session_repository=user_repository,
        output_port=get_login_presenter(view_model),
    )
    outcome = interactor.execute(LoginCredentials(username=username, password=password))

    state = view_model.state
    if state.is_logged_in:
        typer.secho(f'Welcome "{state.username}"!', fg=typer.colors.GREEN)
    else:
        typer.secho(state.login_error, fg=typer.colors.RED, err=True)

    return outcome
