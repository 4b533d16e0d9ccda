"""Omok_Time_Travel package exports."""

from .Board import Board, BOARD_SIZE, WIN_LENGTH, EMPTY, X, O
from .Omokgame import Omokgame

# Subpackages for move checks, front ends, and helpers
from . import engine, gui, utils

__all__ = [
    "Board",
    "BOARD_SIZE",
    "WIN_LENGTH",
    "EMPTY",
    "X",
    "O",
    "Omokgame",
    "engine",
    "gui",
    "utils",
]
