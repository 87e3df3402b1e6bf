"""List the actions and handlers a module registers."""

import typer
from rich.console import Console
from rich.table import Table

from actionbind.actions.registry import ActionRegistry
from actionbind.cli.chat_runner import load_module
from actionbind.handlers.table import HandlerTable

app = typer.Typer(help="List registered actions")


@app.callback(invoke_without_command=True)
def list_actions(
    module: str = typer.Option(
        ..., "--module", "-m", help="Python module registering actions (e.g. 'app.actions')"
    ),
) -> None:
    """Show every registered intent with its action and parameters."""
    try:
        load_module(module)
    except Exception as e:
        typer.echo(f"Failed to load module {module}: {e}", err=True)
        raise typer.Exit(1)

    registry = ActionRegistry.get_default()
    handlers = HandlerTable.get_default()

    table = Table(title="Registered actions")
    table.add_column("Intent", style="cyan", no_wrap=True)
    table.add_column("Action")
    table.add_column("Context")
    table.add_column("Parameters")
    table.add_column("Handler")

    for intent in sorted(registry.intents()):
        descriptor = registry.descriptor_for(intent)
        if descriptor is None:
            continue
        context = descriptor.context_type.__name__ if descriptor.context_type else "-"
        parameters = ", ".join(
            f"{p.name}{'' if p.required else '?'}" for p in descriptor.parameters
        )
        table.add_row(
            intent,
            descriptor.friendly_name,
            context,
            parameters or "-",
            "yes" if intent in handlers else "default" if "" in handlers else "-",
        )

    Console().print(table)
