from __future__ import annotations

import pytest
import typer
from typer.testing import CliRunner

from batch7z.confirm import ConsoleConfirmation, confirm_items
from batch7z.errors import UserAbortedError

from fakes import ScriptedConfirmation

runner = CliRunner()


def _prompt_app() -> typer.Typer:
    app = typer.Typer()

    @app.command()
    def ask() -> None:
        answer = ConsoleConfirmation().ask_yes_no("Proceed?")
        typer.echo(f"answer={answer}")

    return app


def test_console_reprompts_on_invalid_input() -> None:
    result = runner.invoke(_prompt_app(), [], input="x\nn\n")

    assert result.exit_code == 0
    assert result.output.count("Error: invalid input") == 1
    assert "answer=False" in result.output


@pytest.mark.parametrize("reply", ["y", "Y", "yes"])
def test_console_accepts_affirmative(reply: str) -> None:
    result = runner.invoke(_prompt_app(), [], input=f"{reply}\n")

    assert "answer=True" in result.output
    assert "Error" not in result.output


def test_console_retries_without_limit() -> None:
    result = runner.invoke(_prompt_app(), [], input="maybe\n\n?\nq\nN\n")

    assert result.output.count("Error: invalid input") == 4
    assert "answer=False" in result.output


def test_confirm_items_mentions_count_and_action() -> None:
    provider = ScriptedConfirmation(True)

    confirm_items(provider, 3, action="archive")

    assert provider.prompts == ["Proceed to archive 3 item(s)?"]


def test_confirm_items_raises_on_decline() -> None:
    with pytest.raises(UserAbortedError):
        confirm_items(ScriptedConfirmation(False), 1, action="verify")
