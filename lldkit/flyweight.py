"""Flyweight pattern: players share dress objects by type."""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass, field
from enum import IntEnum


class DressType(IntEnum):
    TERRORIST = 1
    COUNTER_TERRORIST = 2


class Dress(ABC):
    """Shared, intrinsic state of a player."""

    color: str


@dataclass(frozen=True)
class TerroristDress(Dress):
    color: str = "red"


@dataclass(frozen=True)
class CounterTerroristDress(Dress):
    color: str = "red"


_DRESS_CLASSES: dict[DressType, type[Dress]] = {
    DressType.TERRORIST: TerroristDress,
    DressType.COUNTER_TERRORIST: CounterTerroristDress,
}


class DressFactory:
    """Creates each kind of dress once and hands out the same object after."""

    def __init__(self) -> None:
        self.dress_map: dict[DressType, Dress] = {}

    def get_dress_by_type(self, dress_type: DressType | int) -> Dress:
        try:
            dress_type = DressType(dress_type)
        except ValueError:
            raise ValueError("dress type not supported") from None
        if dress_type in self.dress_map:
            print("Dress found with dressType:", int(dress_type))
            return self.dress_map[dress_type]
        dress = _DRESS_CLASSES[dress_type]()
        self.dress_map[dress_type] = dress
        print("New Dress created with dressType:", int(dress_type))
        return dress


_factory = DressFactory()


def get_dress_factory() -> DressFactory:
    """Return the shared dress factory."""
    return _factory


class PlayerType(IntEnum):
    TERRORIST = 1
    COUNTER_TERRORIST = 2


@dataclass
class Player:
    """A player: a shared dress plus a position of their own."""

    player_type: PlayerType
    dress: Dress
    lat: int = 0
    long: int = 0

    def new_location(self, lat: int, long: int) -> None:
        self.lat = lat
        self.long = long


@dataclass
class Game:
    """Holds the players of one game."""

    factory: DressFactory = field(default_factory=get_dress_factory)
    terrorists: list[Player] = field(default_factory=list)
    counter_terrorists: list[Player] = field(default_factory=list)

    def _new_player(self, player_type: PlayerType, dress_type: DressType | int) -> Player:
        return Player(player_type, self.factory.get_dress_by_type(dress_type))

    def add_terrorist(self, dress_type: DressType | int) -> Player:
        player = self._new_player(PlayerType.TERRORIST, dress_type)
        self.terrorists.append(player)
        return player

    def add_counter_terrorist(self, dress_type: DressType | int) -> Player:
        player = self._new_player(PlayerType.COUNTER_TERRORIST, dress_type)
        # Counter-terrorists are kept on the same roster as terrorists.
        self.terrorists.append(player)
        return player