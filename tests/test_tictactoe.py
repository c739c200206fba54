import pytest

from lldkit.tictactoe import Game, Grid, PieceType, TicTacToeError, get_piece


def new_game(players=(("X", "Ann"), ("O", "Ben"))):
    game = Game(3)
    game.set_players([list(p) for p in players])
    return game


def test_get_piece():
    assert get_piece("X") is PieceType.X
    assert get_piece("O") is PieceType.O
    with pytest.raises(TicTacToeError, match="invalid pieceType"):
        get_piece("Z")


def test_empty_grid_render():
    assert Grid(2).render() == "- - \n- - "


def test_grid_row_win():
    grid = Grid(3)
    assert grid.place_piece(PieceType.O, 2, 1) == (False, False)
    assert grid.place_piece(PieceType.O, 2, 2) == (False, False)
    assert grid.place_piece(PieceType.O, 2, 3) == (True, True)


def test_grid_get_cell_off_grid():
    grid = Grid(3)
    assert not grid.is_valid_position(0, 1)
    with pytest.raises(IndexError):
        grid.get_cell(0, 1)


def test_diagonal_win_with_invalid_repeat():
    game = new_game()
    for move in ["2 2", "1 3", "1 1", "1 2", "2 2", "3 3"]:
        game.play_turn(move)
    assert game.over
    assert game.winner is not None and game.winner.name == "Ann"
    assert game.winner.piece_type is PieceType.X
    with pytest.raises(TicTacToeError, match="already over"):
        game.play_turn("exit")


def test_draw_fills_board_without_winner():
    game = new_game()
    for move in ["2 3", "1 2", "2 2", "2 1", "1 1", "3 3", "3 2", "3 1", "1 3"]:
        game.play_turn(move)
    assert game.over
    assert game.winner is None
    assert all(cell.has_piece() for row in game.grid.cells for cell in row)


def test_x_moves_first_whatever_the_order():
    game = new_game(players=(("O", "Ben"), ("X", "Ann")))
    game.play_turn("1 1")
    assert game.grid.get_cell(1, 1).piece is PieceType.X
    game.play_turn("1 2")
    assert game.grid.get_cell(1, 2).piece is PieceType.O


def test_off_grid_move_keeps_turn():
    game = new_game()
    game.play_turn("4 4")
    game.play_turn("1 1")
    assert game.grid.get_cell(1, 1).piece is PieceType.X
    assert not game.over


def test_exit_ends_game():
    game = new_game()
    game.play_turn("exit")
    assert game.over
    assert game.winner is None


@pytest.mark.parametrize("move", ["1", "a b", "1 2 3", "1  2", "1 x"])
def test_unparseable_moves(move):
    game = new_game()
    with pytest.raises(TicTacToeError, match="invalid move"):
        game.play_turn(move)


def test_set_players_validation():
    with pytest.raises(TicTacToeError, match="only 2 players"):
        Game(3).set_players([["X", "a"], ["O", "b"], ["X", "c"]])
    with pytest.raises(TicTacToeError, match="invalid input"):
        Game(3).set_players([["X"], ["O", "b"]])
    with pytest.raises(TicTacToeError, match="invalid pieceType"):
        Game(3).set_players([["Q", "a"], ["O", "b"]])