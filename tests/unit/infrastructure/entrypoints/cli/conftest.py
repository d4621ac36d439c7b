import re
from collections.abc import Callable
from collections.abc import Iterable
from typing import TypeAlias
from unittest import mock

import pytest
from typer.testing import CliRunner

TextCleaner: TypeAlias = Callable[[str], str]


@pytest.fixture(autouse=True)
def force_rich_terminal_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Force Rich/Typer to use a standard terminal width and no colors
    ONLY for CLI unit tests to ensure consistent output assertions.
    """
    monkeypatch.setenv("COLUMNS", "100")
    monkeypatch.setenv("TERM", "dumb")
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setenv("CI", "true")


@pytest.fixture
def block_cli_configure_loggers() -> Iterable[mock.Mock]:
    """Prevent the CLI 'main' callback from re-configuring logging during tests."""
    with mock.patch("loginflow.infrastructure.entrypoints.cli.main.configure_loggers") as patched:
        yield patched


@pytest.fixture
def runner(block_cli_configure_loggers: mock.Mock) -> CliRunner:
    return CliRunner()


@pytest.fixture
def users_file(tmp_path_factory: pytest.TempPathFactory) -> str:
    path = tmp_path_factory.mktemp("cli") / "users.csv"
    path.write_text("username,password\nPaul,password\n", encoding="utf-8")
    return str(path)


# --- Helpers ---


@pytest.fixture
def clean_typer_text() -> TextCleaner:
    """
    Typer still wraps errors in a rich box even with NO_COLOR and TERM=dumb,
    so strip the box drawing characters and collapse the whitespace instead.
    """

    def _cleaner(text: str) -> str:
        clean_text = re.sub(r"[│╭╰─╮╯]", "", text)
        return " ".join(clean_text.split())

    return _cleaner
