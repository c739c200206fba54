"""Command pattern: editor operations as undoable objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class EmptyHistoryError(LookupError):
    """Raised when popping from an empty command history."""


@dataclass
class Editor:
    """A text editor whose selection is the whole text."""

    text: str = ""
    clipboard: str = ""

    def get_selection(self) -> str:
        return self.text

    def delete_selection(self) -> None:
        self.text = ""

    def replace_selection(self, text: str) -> None:
        self.text = text


class Command(ABC):
    """A request on an editor that can back up and restore its text."""

    def __init__(self, editor: Editor) -> None:
        self.editor = editor
        self._backup = ""

    def backup(self) -> None:
        self._backup = self.editor.text

    def undo(self) -> None:
        self.editor.text = self._backup

    @abstractmethod
    def execute(self) -> bool:
        """Run the command; return True if it should be kept in history."""


class CopyCommand(Command):
    def execute(self) -> bool:
        self.editor.clipboard = self.editor.get_selection()
        return False


class CutCommand(Command):
    def execute(self) -> bool:
        self.backup()
        self.editor.clipboard = self.editor.get_selection()
        self.editor.delete_selection()
        return True


class PasteCommand(Command):
    def execute(self) -> bool:
        self.backup()
        self.editor.replace_selection(self.editor.clipboard)
        return False


@dataclass
class CommandHistory:
    """A stack of executed commands."""

    _history: list[Command] = field(default_factory=list)

    def push(self, command: Command) -> None:
        self._history.append(command)

    def pop(self) -> Command:
        if not self._history:
            raise EmptyHistoryError("No history found")
        return self._history.pop()

    def __len__(self) -> int:
        return len(self._history)


class Application:
    """Runs commands and keeps those that changed the editor."""

    def __init__(self, history: CommandHistory) -> None:
        self.history = history

    def execute_command(self, command: Command) -> None:
        if command.execute():
            self.history.push(command)

    def undo(self) -> bool:
        """Undo the last recorded command; return False if there was none."""
        try:
            command = self.history.pop()
        except EmptyHistoryError:
            return False
        command.undo()
        return True