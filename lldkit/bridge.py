"""Bridge pattern: computers and printers vary independently."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Printer(ABC):
    """The implementation side of the bridge."""

    @abstractmethod
    def print_file(self) -> str:
        """Print a file and return the printed message."""


class Hp(Printer):
    def print_file(self) -> str:
        message = "Printing by a HP Printer"
        print(message)
        return message


class Epson(Printer):
    def print_file(self) -> str:
        message = "Printing by a EPSON Printer"
        print(message)
        return message


class Computer:
    """The abstraction side of the bridge; delegates printing to a printer."""

    label = "computer"

    def __init__(self, printer: Printer | None = None) -> None:
        self.printer = printer

    def set_printer(self, printer: Printer) -> None:
        self.printer = printer

    def print(self) -> str:
        """Send a print request to the current printer and return its message."""
        print(f"Print request for {self.label}")
        if self.printer is None:
            raise RuntimeError(f"no printer set for {self.label}")
        return self.printer.print_file()


class Mac(Computer):
    label = "mac"


class Windows(Computer):
    label = "windows"