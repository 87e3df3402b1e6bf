"""Chat command for interactive sessions."""

import asyncio
from pathlib import Path

import typer

app = typer.Typer(help="Start interactive chat")


@app.callback(invoke_without_command=True)
def run_chat(
    config: Path = typer.Option(
        "actionbind.yaml", "--config", "-c", help="Path to actionbind.yaml or config directory"
    ),
    module: str | None = typer.Option(
        None, "--module", "-m", help="Python module registering actions (e.g. 'app.actions')"
    ),
    conversation_id: str | None = typer.Option(
        None, "--conversation", "-u", help="Conversation ID"
    ),
    debug: bool = typer.Option(False, "--debug", help="Debug mode"),
    ctx: typer.Context = typer.Option(None, hidden=True),
) -> None:
    """Start interactive chat session."""
    if ctx and ctx.invoked_subcommand:
        return

    from actionbind.cli.chat_runner import ChatConfig, run_chat_session

    chat_config = ChatConfig(
        config_path=config,
        module=module,
        conversation_id=conversation_id,
        debug=debug,
    )

    try:
        asyncio.run(run_chat_session(chat_config))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        typer.echo(f"Fatal error: {e}", err=True)
        raise typer.Exit(1)
