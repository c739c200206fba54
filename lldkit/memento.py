"""Memento pattern: snapshots with undo and redo."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


class Originator(ABC):
    """An object that can take and restore snapshots of its state."""

    @abstractmethod
    def take_snapshot(self) -> Any:
        """Return an opaque snapshot of the current state."""

    @abstractmethod
    def restore(self, memento: Any) -> None:
        """Return to the state held by a snapshot."""


@dataclass(frozen=True)
class BankAccountMemento:
    balance: int


class BankAccount(Originator):
    """An account with a balance."""

    def __init__(self, initial_balance: int = 0) -> None:
        self._balance = initial_balance

    @property
    def balance(self) -> int:
        return self._balance

    def deposit(self, amount: int) -> None:
        self._balance += amount

    def withdraw(self, amount: int) -> None:
        self._balance -= amount

    def take_snapshot(self) -> BankAccountMemento:
        return BankAccountMemento(self._balance)

    def restore(self, memento: Any) -> None:
        if isinstance(memento, BankAccountMemento):
            self._balance = memento.balance


@dataclass(frozen=True)
class DocumentEditorMemento:
    content: str


class DocumentEditor(Originator):
    """A document that text is appended to."""

    def __init__(self) -> None:
        self._content = ""

    @property
    def content(self) -> str:
        return self._content

    def write(self, text: str) -> None:
        self._content += text

    def take_snapshot(self) -> DocumentEditorMemento:
        return DocumentEditorMemento(self._content)

    def restore(self, memento: Any) -> None:
        if isinstance(memento, DocumentEditorMemento):
            self._content = memento.content


@dataclass
class History:
    """Caretaker holding undo and redo stacks of snapshots."""

    undos: list[Any] = field(default_factory=list)
    redos: list[Any] = field(default_factory=list)

    def save(self, originator: Originator) -> None:
        self.undos.append(originator.take_snapshot())
        self.redos.clear()

    def undo(self, originator: Originator) -> bool:
        if not self.undos:
            return False
        last = self.undos.pop()
        self.redos.append(originator.take_snapshot())
        originator.restore(last)
        return True

    def redo(self, originator: Originator) -> bool:
        if not self.redos:
            return False
        last = self.redos.pop()
        self.undos.append(originator.take_snapshot())
        originator.restore(last)
        return True