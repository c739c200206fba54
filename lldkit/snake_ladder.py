"""Snakes and ladders: a board, a die and players taking turns."""

from __future__ import annotations

import argparse
import random
import sys
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import ClassVar, NamedTuple

DEFAULT_CELL_COUNT = 100
DEFAULT_SNAKES = [
    [62, 5], [33, 6], [49, 9], [88, 16], [41, 20],
    [56, 53], [98, 64], [93, 73], [95, 75],
]
DEFAULT_LADDERS = [
    [2, 37], [27, 46], [10, 32], [51, 68],
    [61, 79], [65, 84], [71, 91], [81, 100],
]
DEFAULT_PLAYERS = ["Alice", "Bob", "Carol"]


class GameError(Exception):
    """Raised when a board or game cannot be set up or played."""


class InvalidPositionError(GameError):
    """Raised for a position that is not on the board."""


@dataclass(frozen=True)
class SnakeOrLadder(ABC):
    """Something that moves a piece from one cell to another."""

    start: int
    end: int
    kind: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @abstractmethod
    def _validate(self) -> None:
        """Raise GameError if the ends are the wrong way round."""


@dataclass(frozen=True)
class Snake(SnakeOrLadder):
    kind: ClassVar[str] = "Snake"

    def _validate(self) -> None:
        if self.end >= self.start:
            raise GameError("invalid snake: tail >= head")


@dataclass(frozen=True)
class Ladder(SnakeOrLadder):
    kind: ClassVar[str] = "Ladder"

    def _validate(self) -> None:
        if self.end <= self.start:
            raise GameError("invalid ladder: top <= base")


class Cell:
    """A numbered square, perhaps holding a snake or a ladder."""

    def __init__(self, number: int) -> None:
        self.number = number
        self.snake_or_ladder: SnakeOrLadder | None = None

    def has_snake_or_ladder(self) -> bool:
        return self.snake_or_ladder is not None

    def set_snake_or_ladder(self, snake_or_ladder: SnakeOrLadder) -> None:
        if self.snake_or_ladder is not None:
            raise GameError(
                f"already has {self.snake_or_ladder.kind} at cell {self.number}"
            )
        self.snake_or_ladder = snake_or_ladder

    def destination(self) -> int:
        """Where a piece landing here ends up."""
        if self.snake_or_ladder is not None:
            return self.snake_or_ladder.end
        return self.number


class MoveResult(NamedTuple):
    position: int
    moved: bool
    won: bool


class Board:
    """Cells numbered from 1 to size, with snakes and ladders placed on them."""

    def __init__(
        self,
        size: int,
        snakes: Iterable[Sequence[int]] = (),
        ladders: Iterable[Sequence[int]] = (),
    ) -> None:
        self.size = size
        self.cells = [Cell(number) for number in range(1, size + 1)]
        for entry in snakes:
            self._place(Snake, entry)
        for entry in ladders:
            self._place(Ladder, entry)

    def _place(self, kind: type[SnakeOrLadder], entry: Sequence[int]) -> None:
        name = kind.kind.lower()
        try:
            values = list(entry)
            if len(values) != 2:
                raise GameError(f"invalid {name} entry: length should be 2")
            start, end = values
            if not self.is_valid_position(start) or not self.is_valid_position(end):
                raise InvalidPositionError(f"invalid position: {start}, {end}")
            self.get_cell(start).set_snake_or_ladder(kind(start, end))
        except GameError as err:
            raise type(err)(f"create {name} failed: {err}") from err

    def is_valid_position(self, position: int) -> bool:
        return 1 <= position <= len(self.cells)

    def get_cell(self, position: int) -> Cell:
        if not self.is_valid_position(position):
            raise InvalidPositionError("invalid position")
        return self.cells[position - 1]

    def move(self, current_position: int, roll: int) -> MoveResult:
        """Move by the roll, following snakes and ladders to where the piece rests."""
        position = current_position + roll
        if not self.is_valid_position(position):
            return MoveResult(current_position, False, False)
        seen = {position}
        cell = self.get_cell(position)
        while cell.has_snake_or_ladder():
            position = cell.destination()
            if position in seen:
                raise GameError(f"snakes and ladders form a loop at cell {position}")
            seen.add(position)
            cell = self.get_cell(position)
        return MoveResult(position, True, position == len(self.cells))


class Dice:
    """A die giving whole numbers from low to high inclusive."""

    def __init__(self, low: int = 1, high: int = 6, rng: random.Random | None = None) -> None:
        self.low = low
        self.high = high
        self._rng = rng if rng is not None else random.Random()

    def roll(self) -> int:
        return self._rng.randint(self.low, self.high)


@dataclass
class Player:
    name: str
    position: int = 0


class Game:
    """Players take turns rolling until one lands on the last cell."""

    def __init__(
        self,
        count_of_cells: int,
        snakes: Iterable[Sequence[int]],
        ladders: Iterable[Sequence[int]],
        player_names: Iterable[str],
        dice: Dice | None = None,
    ) -> None:
        names = list(player_names)
        if len(names) < 2:
            raise GameError("at least 2 players should be there")
        self.dice = dice if dice is not None else Dice()
        self.board = Board(count_of_cells, snakes, ladders)
        self.players = [Player(name) for name in names]
        self.turn = 0
        self._over = False

    @property
    def current_player(self) -> Player:
        return self.players[self.turn]

    def is_over(self) -> bool:
        return self._over

    def play_turn(self) -> MoveResult:
        """Roll for the current player and move them; return the outcome."""
        if self._over:
            raise GameError("game is already over")
        player = self.current_player
        roll = self.dice.roll()
        current = player.position
        result = self.board.move(current, roll)
        if not result.moved:
            print(
                f"{player.name} rolled a {roll} but cannot move from {current} "
                f"as it exceeds board limit, total gain: 0"
            )
        else:
            player.position = result.position
            print(
                f"{player.name} rolled a {roll} and moved from {current} to "
                f"{result.position}, total gain: {result.position - current}"
            )
        if result.won:
            print(f"{player.name} has won the game!")
            self._over = True
            return result
        self.turn = (self.turn + 1) % len(self.players)
        return result


def main(argv: Sequence[str] | None = None) -> int:
    """Play a full game on the standard board."""
    parser = argparse.ArgumentParser(description="Play snakes and ladders.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the die")
    args = parser.parse_args(argv)
    try:
        game = Game(
            DEFAULT_CELL_COUNT,
            DEFAULT_SNAKES,
            DEFAULT_LADDERS,
            DEFAULT_PLAYERS,
            dice=Dice(rng=random.Random(args.seed)),
        )
        while not game.is_over():
            game.play_turn()
    except GameError as err:
        print(f"game failed: {err}", file=sys.stderr)
        return 1
    return 0