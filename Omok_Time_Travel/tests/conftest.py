"""Shared helpers for the test modules."""

import pytest

from Omok_Time_Travel.Board import BOARD_SIZE, EMPTY


def _five_in_a_row(board):
    """Walk every cell in all four directions by coordinates, independent of the run table."""
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            stone = board.cell(r, c)
            if stone is EMPTY:
                continue
            for dr, dc in ((0, 1), (1, 0), (1, 1), (-1, 1)):
                end_r, end_c = r + 4 * dr, c + 4 * dc
                if not (0 <= end_r < BOARD_SIZE and 0 <= end_c < BOARD_SIZE):
                    continue
                if all(board.cell(r + k * dr, c + k * dc) == stone for k in range(5)):
                    return stone
    return None


@pytest.fixture
def five_in_a_row():
    return _five_in_a_row
