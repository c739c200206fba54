"""Adapter pattern: plug a USB-only machine into a Lightning client."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Computer(ABC):
    """A machine with a Lightning port."""

    @abstractmethod
    def insert_into_lightning_port(self) -> None:
        """Accept a Lightning connector."""


class Mac(Computer):
    def insert_into_lightning_port(self) -> None:
        print("Lightning connector is plugged into mac machine.")


class Windows:
    """A machine that only has a USB port."""

    def insert_into_usb_port(self) -> None:
        print("USB connector is plugged into windows machine.")


@dataclass
class WindowsAdapter(Computer):
    """Lets a Windows machine take a Lightning connector."""

    windows_machine: Windows

    def insert_into_lightning_port(self) -> None:
        print("Adapter converts Lightning signal to USB.")
        self.windows_machine.insert_into_usb_port()


class Client:
    """Knows only how to plug into a Lightning port."""

    def insert_lightning_port_into_computer(self, computer: Computer) -> None:
        print("Client inserts Lightning connector into computer.")
        computer.insert_into_lightning_port()