"""Omokgame history, cursor, and time-travel behaviour."""

import random

import pytest

from Omok_Time_Travel.Board import EMPTY, O, X
from Omok_Time_Travel.Omokgame import Omokgame
from Omok_Time_Travel.utils.logger import silent


def play_all(game, moves):
    for index in moves:
        assert game.play(index)


@pytest.fixture
def game():
    return Omokgame(logger=silent)


def test_initial_state(game):
    assert len(game.history) == 1
    assert game.current_move == 0
    assert game.active_player == X
    assert game.winner is None
    assert game.last_move is None
    assert game.status_text == "Next player: X"
    assert game.move_list() == [(0, "game start")]


def test_x_wins_with_five_on_top_row(game):
    # X on row 0, O on row 1
    play_all(game, [0, 15, 1, 16, 2, 17, 3, 18])
    assert game.winner is None
    assert game.active_player == X
    assert game.play(4)
    assert game.winner == X
    assert game.status_text == "Winner: X"
    assert game.winning_line == (0, 1, 2, 3, 4)
    assert game.is_over


def test_moves_ignored_after_win(game):
    play_all(game, [0, 15, 1, 16, 2, 17, 3, 18, 4])
    history = game.history
    assert game.play(100) is False
    assert game.history == history
    assert game.current_move == 9


def test_occupied_cell_leaves_state_unchanged(game):
    play_all(game, [0, 1])
    assert game.current_board[1] == O
    history, cursor = game.history, game.current_move
    assert game.play(1) is False
    assert game.history == history
    assert game.current_move == cursor


def test_repeat_click_changes_state_once(game):
    game.play(7)
    game.play(7)
    assert len(game.history) == 2
    assert game.current_move == 1
    assert game.active_player == O


def test_successful_move_appends_exactly_one_snapshot(game):
    for n, index in enumerate([112, 113, 127], start=1):
        before = len(game.history)
        game.play(index)
        assert len(game.history) == before + 1
        assert game.current_move == len(game.history) - 1 == n


def test_each_snapshot_differs_by_one_new_stone(game):
    play_all(game, [112, 113, 127, 0, 224])
    history = game.history
    for m in range(1, len(history)):
        changed = [i for i, (a, b) in enumerate(zip(history[m - 1], history[m])) if a != b]
        assert len(changed) == 1
        assert history[m - 1][changed[0]] is EMPTY
        assert history[m][changed[0]] == (X if m % 2 == 1 else O)


def test_jump_only_moves_cursor(game):
    play_all(game, range(10))
    history = game.history
    game.jump_to(5)
    assert game.history == history
    assert game.current_move == 5
    assert game.active_player == O
    assert game.current_board == history[5]
    assert game.last_move == 4


def test_new_move_after_jump_discards_future(game):
    play_all(game, range(10))
    kept = game.history[:6]
    game.jump_to(5)
    assert game.play(100)
    assert len(game.history) == 7
    assert game.history[:6] == kept
    assert game.current_move == 6
    assert game.current_board[100] == O
    assert game.current_board[9] is EMPTY


def test_winner_follows_cursor(game):
    play_all(game, [0, 15, 1, 16, 2, 17, 3, 18, 4])
    game.jump_to(8)
    assert game.winner is None
    assert game.status_text == "Next player: X"
    # a different continuation from the same point
    assert game.play(200)
    assert game.winner is None
    assert len(game.history) == 10


def test_jump_back_to_start_then_forward(game):
    play_all(game, [10, 20, 30])
    game.jump_to(0)
    assert game.current_board.stone_count() == 0
    assert game.active_player == X
    game.jump_to(3)
    assert game.last_move == 30


@pytest.mark.parametrize("move", [-1, 3, 2.0, None])
def test_out_of_range_jump_rejected(game, move):
    play_all(game, [10, 20])
    history = game.history
    with pytest.raises(IndexError):
        game.jump_to(move)
    assert game.history == history
    assert game.current_move == 2


def test_out_of_range_move_rejected(game):
    with pytest.raises(ValueError):
        game.play(225)
    assert len(game.history) == 1


def test_move_list_labels(game):
    play_all(game, [10, 20])
    assert game.move_list() == [(0, "game start"), (1, "move #1"), (2, "move #2")]


def test_reset(game):
    play_all(game, [10, 20])
    game.reset()
    assert len(game.history) == 1
    assert game.current_move == 0


def test_events_are_logged():
    lines = []
    game = Omokgame(logger=lines.append)
    game.cell_clicked(5)
    game.cell_clicked(5)
    game.history_entry_clicked(0)
    assert lines[0] == "Move 1: X 5"
    assert lines[1].startswith("Ignored move at 5")
    assert lines[2] == "Jumped to game start"


def no_five_fill_order():
    """All 225 cells, alternating X/O, forming a full board with no five in a row."""
    groups = {0: [], 1: []}
    for r in range(15):
        for c in range(15):
            groups[((c + 2 * (r % 2) + (r // 2) % 2) // 2) % 2].append(r * 15 + c)
    xs, os = sorted(groups.values(), key=len, reverse=True)
    assert (len(xs), len(os)) == (113, 112)
    order = [cell for pair in zip(xs, os) for cell in pair]
    order.append(xs[-1])
    return order


def test_full_board_without_winner_stays_in_progress(game):
    play_all(game, no_five_fill_order())
    assert game.current_board.is_full()
    assert game.winner is None
    assert not game.is_over
    assert game.status_text == "Next player: O"

    history, cursor = game.history, game.current_move
    assert game.play(112) is False
    assert game.history == history
    assert game.current_move == cursor == 225


def test_winning_move_is_logged():
    lines = []
    game = Omokgame(logger=lines.append)
    play_all(game, [0, 15, 1, 16, 2, 17, 3, 18])
    assert not any(line.startswith("Winner") for line in lines)
    game.play(4)
    assert lines[-1] == "Winner: X"


@pytest.mark.parametrize("seed", range(20))
def test_random_games_with_time_travel(seed, five_in_a_row):
    rng = random.Random(seed)
    lines = []
    game = Omokgame(logger=lines.append)
    cells = list(range(225))
    rng.shuffle(cells)
    for index in cells:
        if game.is_over:
            # only the tail of the history can hold a win
            game.jump_to(rng.randrange(len(game.history) - 1))
        if not game.current_board.is_empty(index):
            continue
        before = len(game.history)
        assert game.play(index)
        assert len(game.history) == game.current_move + 1 <= before + 1
        winner = five_in_a_row(game.current_board)
        assert game.winner == winner
        assert (lines[-1] == f"Winner: {winner}") == (winner is not None)
    for snapshot in game.history:
        assert snapshot.winner() == five_in_a_row(snapshot)
