"""Move validation: bounds, occupancy, and finished games."""

from ..Board import Board


def is_legal(board, index):
    """True when the cell is empty and nobody has five in a row yet."""
    return board.is_empty(index) and board.winner() is None


def check_move(board, index):
    """
    Validate a cell index against the board.
    Raises ValueError on an index outside the grid; returns whether the move applies.
    """
    if not Board.in_bounds(index):
        raise ValueError(f"Move out of bounds: {index!r}")
    return is_legal(board, index)
