"""Builder pattern: a director builds houses step by step."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import ClassVar


class WindowType(str, Enum):
    WOODEN = "Wooden Window"
    SNOW = "Snow Window"


class DoorType(str, Enum):
    WOODEN = "Wooden Door"
    SNOW = "Snow Door"


def _text(kind: Enum | None) -> str:
    return "" if kind is None else kind.value


@dataclass
class House:
    """A finished house."""

    window_type: WindowType | None = None
    door_type: DoorType | None = None
    num_floor: int = 0

    def print_details(self) -> str:
        """Print the house's details and return the printed text."""
        text = "\n".join(
            [
                f"Window Type: {_text(self.window_type)}",
                f"DoorType Type: {_text(self.door_type)}",
                f"Number of Floor: {self.num_floor}",
            ]
        )
        print(text)
        return text


class BuilderType(IntEnum):
    NORMAL = 1
    IGLOO = 2


class HouseBuilder:
    """Builds a house one part at a time; subclasses choose the parts."""

    window: ClassVar[WindowType]
    door: ClassVar[DoorType]
    floors: ClassVar[int]

    def __init__(self) -> None:
        self._window_type: WindowType | None = None
        self._door_type: DoorType | None = None
        self._num_floor = 0

    def set_window_type(self) -> None:
        self._window_type = self.window

    def set_door_type(self) -> None:
        self._door_type = self.door

    def set_num_floor(self) -> None:
        self._num_floor = self.floors

    def get_house(self) -> House:
        return House(self._window_type, self._door_type, self._num_floor)


class NormalBuilder(HouseBuilder):
    window = WindowType.WOODEN
    door = DoorType.WOODEN
    floors = 2


class IglooBuilder(HouseBuilder):
    window = WindowType.SNOW
    door = DoorType.SNOW
    floors = 1


def get_builder(builder_type: BuilderType | int) -> HouseBuilder:
    """Return an igloo builder for IGLOO and a normal builder otherwise."""
    if builder_type == BuilderType.IGLOO:
        return IglooBuilder()
    return NormalBuilder()


@dataclass
class Director:
    """Runs the building steps in order with the current builder."""

    builder: HouseBuilder

    def build_house(self) -> House:
        self.builder.set_window_type()
        self.builder.set_door_type()
        self.builder.set_num_floor()
        return self.builder.get_house()