"""Interactive chat runner for the actionbind CLI."""

import importlib
import os
import sys
import uuid
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.prompt import Prompt

from actionbind.actions.registry import ActionRegistry
from actionbind.config.loader import ConfigLoader
from actionbind.core.errors import ConfigError
from actionbind.core.message_sink import MessageSink
from actionbind.dialogs.action_dialog import ActionDialog
from actionbind.handlers.table import HandlerTable
from actionbind.nlu.dspy_service import DSPyBootstrapper, DSPyNLUService
from actionbind.nlu.selector import WinnerSelector
from actionbind.observability.logging import setup_logging
from actionbind.runtime.runtime import ConversationRuntime
from actionbind.runtime.store import SessionStore


class ConsoleMessageSink(MessageSink):
    """Sink that prints to rich console."""

    def __init__(self, console: Console):
        self.console = console

    async def send(self, message: str) -> None:
        self.console.print(f"[bold blue]Bot > [/]{message}\n")


def load_module(module: str) -> None:
    """Import the module that registers actions and handlers."""
    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)
    importlib.import_module(module)


@dataclass
class ChatConfig:
    """Configuration for chat runner."""

    config_path: Path
    module: str | None = None
    conversation_id: str | None = None
    debug: bool = False


class ChatRunner:
    """Interactive chat session runner.

    Loads the actions module and configuration, configures DSPy and drives
    a ``ConversationRuntime`` from console input.
    """

    def __init__(self, config: ChatConfig):
        self.config = config
        self.console = Console()
        self.runtime: ConversationRuntime | None = None
        self.conversation_id = config.conversation_id or f"cli_{uuid.uuid4().hex[:6]}"
        self._running = False

    def setup(self) -> None:
        """Initialize runtime and prepare for chat.

        Raises:
            ConfigError: If config is invalid
        """
        from dotenv import load_dotenv

        load_dotenv()

        if self.config.module:
            try:
                load_module(self.config.module)
            except Exception as e:
                self.console.print(f"[red]Failed to load module {self.config.module}: {e}[/]")
                raise

        try:
            app_config = ConfigLoader.load(self.config.config_path)
        except ConfigError as e:
            self.console.print(f"[red]Invalid config: {e}[/]")
            raise

        settings = app_config.settings
        level = "DEBUG" if self.config.debug else settings.logging.level
        setup_logging(level, settings.logging.file)

        try:
            DSPyBootstrapper.bootstrap(settings.nlu)
        except Exception as e:
            self.console.print(f"[red]DSPy config failed: {e}[/]")
            raise

        # Decorated actions and handlers live in the default registries
        registry = ActionRegistry.get_default()
        services = [
            DSPyNLUService(registry, name=name, use_cot=settings.nlu.use_reasoning)
            for name in settings.nlu_services
        ]
        dialog = ActionDialog(
            services,
            registry,
            handlers=HandlerTable.get_default(),
            selector=WinnerSelector(settings.nlu.min_score, settings.nlu.none_intent),
        )
        self.runtime = ConversationRuntime(
            dialog,
            ConsoleMessageSink(self.console),
            SessionStore(settings.sessions),
        )

    async def start(self) -> None:
        """Start the interactive session."""
        if not self.runtime:
            self.setup()

        self.console.print(f"Conversation ID: [green]{self.conversation_id}[/]")
        self.console.print("Type 'exit' or 'quit' to end session.\n")

        self._running = True
        while self._running:
            try:
                user_input = Prompt.ask("[bold green]You[/]")

                if self._is_exit_command(user_input):
                    self.console.print("\n[yellow]Goodbye![/]")
                    break

                if not user_input.strip():
                    continue

                # Replies are printed by ConsoleMessageSink
                if self.runtime is not None:
                    with self.console.status("[bold blue]Thinking...[/]"):
                        await self.runtime.process_message(user_input, self.conversation_id)

            except KeyboardInterrupt:
                self.console.print("\n[yellow]Goodbye![/]")
                break
            except Exception as e:
                if self.config.debug:
                    self.console.print_exception()
                else:
                    self.console.print(f"[red]Error: {e}[/]")

    def _is_exit_command(self, user_input: str) -> bool:
        return user_input.strip().lower() in ("quit", "exit", "q", "/quit", "/exit")

    def cleanup(self) -> None:
        self._running = False
        self.runtime = None


async def run_chat_session(config: ChatConfig) -> None:
    """Run an interactive chat session.

    Args:
        config: Chat configuration
    """
    runner = ChatRunner(config)
    try:
        runner.setup()
        await runner.start()
    finally:
        runner.cleanup()
