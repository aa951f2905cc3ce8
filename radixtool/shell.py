import logging
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Protocol

import pyperclip
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from radixtool.codec import CodecError, InvalidDigit, digit_pattern, parse_base
from radixtool.config import Settings
from radixtool.effects import fade_out_effect, typewriter_effect
from radixtool.history import HistoryEntry, HistoryStore
from radixtool.text import (
    base_to_text,
    convert_groups,
    numbers_to_base,
    split_groups,
    text_to_base,
)


logger = logging.getLogger(__name__)


class State(Enum):
    SELECT_OPERATION = auto()
    AWAIT_INPUT = auto()
    SHOW_RESULT = auto()
    AWAIT_NEXT_ACTION = auto()
    VIEW_HISTORY = auto()
    EXIT = auto()


STRING_TO_BASE = "String -> Base N"
BASE_TO_STRING = "Base N -> String"
DECIMAL_TO_BASE = "Decimal -> Base N"
BASE_TO_BASE = "Base A -> Base B"
VIEW_HISTORY = "View History"
EXIT = "Exit the application"

MAIN_MENU = [STRING_TO_BASE, BASE_TO_STRING, DECIMAL_TO_BASE, BASE_TO_BASE, VIEW_HISTORY, EXIT]

CONVERT_AGAIN = "Convert again"
COPY_RESULT = "Copy result to clipboard"
MAIN_MENU_RETURN = "Return to main menu"
NEXT_ACTIONS = [CONVERT_AGAIN, COPY_RESULT, MAIN_MENU_RETURN, EXIT]

DELETE_ENTRY = "Delete an entry"
CLEAR_HISTORY = "Clear history"
HISTORY_ACTIONS = [DELETE_ENTRY, CLEAR_HISTORY, MAIN_MENU_RETURN]


class Prompter(Protocol):
    def select(self, message: str, choices: list[str]) -> str: ...

    def ask(self, message: str) -> str: ...


class RichPrompter:
    def __init__(self, console: Console):
        self.console = console

    def select(self, message: str, choices: list[str]) -> str:
        self.console.print(f"\n[bold cyan]{message}[/bold cyan]")
        for number, choice in enumerate(choices, start=1):
            self.console.print(f"  {number}) {choice}", markup=False)
        answer = Prompt.ask(
            "Your choice",
            choices=[str(n) for n in range(1, len(choices) + 1)],
            show_choices=False,
            console=self.console,
        )
        return choices[int(answer) - 1]

    def ask(self, message: str) -> str:
        return Prompt.ask(message, console=self.console)


@dataclass
class Operation:
    name: str
    from_base: int | None = None
    to_base: int | None = None

    @property
    def label(self) -> str:
        source = "String" if self.name == STRING_TO_BASE else f"Base {self.from_base}"
        target = "String" if self.name == BASE_TO_STRING else f"Base {self.to_base}"
        return f"{source} -> {target}"


def _check_groups(groups: list[str], base: int) -> None:
    pattern = digit_pattern(base)
    for group in groups:
        if pattern.match(group):
            continue
        for position, char in enumerate(group):
            if not pattern.match(char):
                raise InvalidDigit(char, position, base)


def run_operation(operation: Operation, raw: str) -> str:
    """Apply ``operation`` to one line of user input and return the output text."""
    if operation.name == STRING_TO_BASE:
        text = raw.strip()
        return " ".join(text_to_base(text, operation.to_base))

    groups = split_groups(raw)
    if operation.name == BASE_TO_STRING:
        _check_groups(groups, operation.from_base)
        return base_to_text(groups, operation.from_base)
    if operation.name == DECIMAL_TO_BASE:
        return " ".join(numbers_to_base(groups, operation.to_base))
    if operation.name == BASE_TO_BASE:
        _check_groups(groups, operation.from_base)
        return " ".join(convert_groups(groups, operation.from_base, operation.to_base))

    raise ValueError(f"Unknown operation: {operation.name}")


class Shell:
    """Interactive conversion loop driven by an explicit state machine."""

    def __init__(
        self,
        prompter: Prompter,
        console: Console,
        store: HistoryStore,
        settings: Settings,
        sleep: Callable[[float], None] = time.sleep,
        copy: Callable[[str], None] = pyperclip.copy,
    ):
        self.prompter = prompter
        self.console = console
        self.store = store
        self.settings = settings
        self.sleep = sleep
        self.copy = copy

        self.state = State.SELECT_OPERATION
        self.operation: Operation | None = None
        self.last_input = ""
        self.last_output = ""

        self._handlers = {
            State.SELECT_OPERATION: self.select_operation,
            State.AWAIT_INPUT: self.await_input,
            State.SHOW_RESULT: self.show_result,
            State.AWAIT_NEXT_ACTION: self.await_next_action,
            State.VIEW_HISTORY: self.view_history,
        }

    def run(self) -> None:
        self.console.print("[bold cyan]=== Base Converter (1 - 64) ===[/bold cyan]")
        try:
            while self.state is not State.EXIT:
                logger.debug("Entering state %s", self.state.name)
                self.state = self._handlers[self.state]()
        except (EOFError, KeyboardInterrupt):
            self.console.print("\nExiting.")
            return
        self.farewell()

    def _ask_base(self, message: str) -> int:
        while True:
            try:
                return parse_base(self.prompter.ask(message))
            except CodecError as e:
                self.console.print(f"[red]Error: {escape(str(e))}[/red]")

    def select_operation(self) -> State:
        choice = self.prompter.select(
            "Welcome! What kind of conversion would you like to do?", MAIN_MENU
        )
        if choice == VIEW_HISTORY:
            return State.VIEW_HISTORY
        if choice == EXIT:
            return State.EXIT

        operation = Operation(choice)
        if choice in (BASE_TO_STRING, BASE_TO_BASE):
            operation.from_base = self._ask_base("Source base (1-64)")
        elif choice == DECIMAL_TO_BASE:
            operation.from_base = 10
        if choice != BASE_TO_STRING:
            operation.to_base = self._ask_base("Target base (1-64)")

        self.operation = operation
        return State.AWAIT_INPUT

    def await_input(self) -> State:
        operation = self.operation
        if operation.name == STRING_TO_BASE:
            message = f"Enter the string to convert to Base {operation.to_base}"
        elif operation.name == BASE_TO_STRING:
            message = f"Enter Base {operation.from_base} values (space-separated) to convert back to text"
        else:
            message = (
                f"Enter Base {operation.from_base} numbers (space-separated) "
                f"to convert to Base {operation.to_base}"
            )

        raw = self.prompter.ask(message)
        try:
            output = run_operation(operation, raw)
        except CodecError as e:
            logger.info("Rejected input %r for %s: %s", raw, operation.label, e)
            self.console.print(f"[red]Error: {escape(str(e))}[/red]")
            return State.AWAIT_INPUT

        self.last_input = raw.strip()
        self.last_output = output
        return State.SHOW_RESULT

    def show_result(self) -> State:
        self.console.print(Text.assemble((f"{self.operation.label}: ", "green"), self.last_output))
        try:
            self.store.append(
                HistoryEntry.create(self.operation.label, self.last_input, self.last_output)
            )
        except OSError as e:
            logger.error("Cannot write history to %s: %s", self.store.path, e)
            self.console.print(f"[yellow]History not saved: {escape(str(e))}[/yellow]")
        return State.AWAIT_NEXT_ACTION

    def await_next_action(self) -> State:
        choice = self.prompter.select("What would you like to do next?", NEXT_ACTIONS)
        if choice == CONVERT_AGAIN:
            return State.AWAIT_INPUT
        if choice == COPY_RESULT:
            try:
                self.copy(self.last_output)
            except pyperclip.PyperclipException as e:
                self.console.print(f"[red]Cannot access the clipboard: {escape(str(e))}[/red]")
            else:
                self.console.print("[green]Result copied to clipboard.[/green]")
            return State.AWAIT_NEXT_ACTION
        if choice == EXIT:
            return State.EXIT
        return State.SELECT_OPERATION

    def view_history(self) -> State:
        entries = self.store.load()
        if not entries:
            self.console.print("[yellow]No conversion history available.[/yellow]")
            return State.SELECT_OPERATION

        self.console.print(history_table(entries))
        choice = self.prompter.select("What would you like to do?", HISTORY_ACTIONS)
        if choice == CLEAR_HISTORY:
            try:
                self.store.clear()
            except OSError as e:
                return self._history_write_failed(e)
            self.console.print("[red]History cleared successfully![/red]")
        elif choice == DELETE_ENTRY:
            answer = self.prompter.ask(f"Entry number to delete (1-{len(entries)})")
            try:
                removed = self.store.delete(int(answer) - 1)
            except (ValueError, IndexError):
                self.console.print(f"[red]Error: no history entry '{escape(answer)}'.[/red]")
                return State.VIEW_HISTORY
            except OSError as e:
                return self._history_write_failed(e)
            self.console.print(f"[red]Deleted entry from {removed.date}.[/red]")
            return State.VIEW_HISTORY
        return State.SELECT_OPERATION

    def _history_write_failed(self, error: OSError) -> State:
        logger.error("Cannot write history to %s: %s", self.store.path, error)
        self.console.print(f"[red]Error: history not updated: {escape(str(error))}[/red]")
        return State.SELECT_OPERATION

    def farewell(self) -> None:
        typewriter_effect(
            self.console,
            "Thanks for using the app. Goodbye!",
            self.settings.typing_delay,
            sleep=self.sleep,
        )
        fade_out_effect(
            self.console,
            "Closing the application...",
            self.settings.fade_steps,
            self.settings.fade_delay,
            sleep=self.sleep,
        )


def history_table(entries: list[HistoryEntry]) -> Table:
    table = Table(title="[bold]Conversion History[/bold]", box=box.ROUNDED, border_style="blue")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Date", style="dim")
    table.add_column("Type", style="magenta")
    table.add_column("Input")
    table.add_column("Output", style="green")
    for number, entry in enumerate(entries, start=1):
        table.add_row(str(number), entry.date, entry.type, Text(entry.input), Text(entry.output))
    return table
