"""Main CLI entry point for actionbind"""

import typer

from actionbind.__version__ import __version__
from actionbind.cli.commands import actions as actions_module
from actionbind.cli.commands import chat as chat_module

app = typer.Typer(
    name="actionbind",
    help="actionbind - bind NLU intents to actions and fill their parameters",
    add_completion=False,
)

app.add_typer(chat_module.app, name="chat", help="Start interactive chat")
app.add_typer(actions_module.app, name="actions", help="List registered actions")


def version_callback(value: bool) -> None:
    """Print version and exit"""
    if value:
        typer.echo(f"actionbind version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """actionbind - bind NLU intents to actions and fill their parameters"""
    pass


def cli() -> None:
    """Entry point for CLI"""
    app()


if __name__ == "__main__":
    cli()
