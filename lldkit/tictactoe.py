"""Tic-tac-toe on a square grid of any size."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

_INTEGER = re.compile(r"[+-]?\d+")


class TicTacToeError(Exception):
    """Raised for bad set-up or moves that cannot be understood."""


class PieceType(str, Enum):
    O = "O"
    X = "X"
    EMPTY = "-"

    def __str__(self) -> str:
        return self.value


def get_piece(symbol: str) -> PieceType:
    """Return the piece for "X" or "O"."""
    if symbol == "X":
        return PieceType.X
    if symbol == "O":
        return PieceType.O
    raise TicTacToeError("invalid pieceType")


@dataclass
class Cell:
    piece: PieceType = PieceType.EMPTY

    def has_piece(self) -> bool:
        return self.piece is not PieceType.EMPTY


class Grid:
    """A square grid addressed from (1, 1) to (dimension, dimension)."""

    def __init__(self, dimension: int) -> None:
        self.dimension = dimension
        self.cells = [[Cell() for _ in range(dimension)] for _ in range(dimension)]
        self.print_grid()

    def render(self) -> str:
        return "\n".join("".join(f"{cell.piece} " for cell in row) for row in self.cells)

    def print_grid(self) -> str:
        """Print the grid followed by a blank line and return the grid text."""
        text = self.render()
        print(text)
        print()
        return text

    def get_cell(self, pos_x: int, pos_y: int) -> Cell:
        if not self.is_valid_position(pos_x, pos_y):
            raise IndexError(f"position {pos_x}, {pos_y} is off the grid")
        return self.cells[pos_x - 1][pos_y - 1]

    def is_valid_position(self, pos_x: int, pos_y: int) -> bool:
        return 1 <= pos_x <= self.dimension and 1 <= pos_y <= self.dimension

    def has_piece(self, pos_x: int, pos_y: int) -> bool:
        return self.get_cell(pos_x, pos_y).has_piece()

    def place_piece(self, piece_type: PieceType, pos_x: int, pos_y: int) -> tuple[bool, bool]:
        """Place a piece; return (game over, this move won)."""
        self.get_cell(pos_x, pos_y).piece = piece_type
        if self._winner_found(pos_x, pos_y):
            return True, True
        if self._all_occupied():
            return True, False
        return False, False

    def _line_matches(self, positions, piece: PieceType) -> bool:
        return all(self.get_cell(x, y).piece == piece for x, y in positions)

    def _winner_found(self, pos_x: int, pos_y: int) -> bool:
        piece = self.get_cell(pos_x, pos_y).piece
        span = range(1, self.dimension + 1)
        if self._line_matches(((pos_x, j) for j in span), piece):
            return True
        if self._line_matches(((i, pos_y) for i in span), piece):
            return True
        if pos_x == pos_y and self._line_matches(((i, i) for i in span), piece):
            return True
        if pos_x + pos_y == self.dimension + 1 and self._line_matches(
            ((i, self.dimension + 1 - i) for i in span), piece
        ):
            return True
        return False

    def _all_occupied(self) -> bool:
        return all(cell.has_piece() for row in self.cells for cell in row)


@dataclass(frozen=True)
class Player:
    name: str
    piece_type: PieceType


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise TicTacToeError("invalid move")
    return int(text)


class Game:
    """Two players alternate placing pieces; X moves first."""

    def __init__(self, dimension: int) -> None:
        self.grid = Grid(dimension)
        self.players: list[Player] = []
        self.turn = 0
        self.over = False
        self.winner: Player | None = None

    def set_players(self, players: Sequence[Sequence[str]]) -> None:
        """Take two [symbol, name] pairs."""
        if len(players) != 2:
            raise TicTacToeError("only 2 players are allowed")
        for index, entry in enumerate(players):
            if len(entry) != 2:
                raise TicTacToeError("invalid input")
            piece_type = get_piece(entry[0])
            if piece_type is PieceType.X:
                self.turn = index
            self.players.append(Player(entry[1], piece_type))

    def set_next_turn(self) -> None:
        self.turn = (self.turn + 1) % len(self.players)

    def play_turn(self, move: str) -> None:
        """Play a move given as "row column", or end the game with "exit"."""
        if self.over:
            raise TicTacToeError("game is already over")
        if move == "exit":
            self.over = True
            return
        parts = move.split(" ")
        if len(parts) != 2:
            raise TicTacToeError("invalid move")
        pos_x, pos_y = (_parse_int(part) for part in parts)
        self._play(pos_x, pos_y)

    def _play(self, pos_x: int, pos_y: int) -> None:
        if not self.grid.is_valid_position(pos_x, pos_y) or self.grid.has_piece(pos_x, pos_y):
            print("Invalid Move, Play again...\n")
            return
        player = self.players[self.turn]
        over, won = self.grid.place_piece(player.piece_type, pos_x, pos_y)
        self.grid.print_grid()
        self.over = over
        if won:
            self.winner = player
            print(f"{player.name} won the game with pieceType {player.piece_type}")
            return
        if over:
            print("Game Over")
            return
        self.set_next_turn()