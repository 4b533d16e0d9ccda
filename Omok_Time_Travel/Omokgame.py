"""Game session: snapshot history, a cursor into it, and time travel."""

from .Board import Board, X, O
from .engine import referee
from .utils.logger import log_event


class Omokgame:
    def __init__(self, logger=log_event):
        self.logger = logger
        self._history = [Board.empty()]
        self._current_move = 0

    @property
    def history(self):
        return tuple(self._history)

    @property
    def current_move(self):
        return self._current_move

    @property
    def current_board(self):
        return self._history[self._current_move]

    @property
    def active_player(self):
        return X if self._current_move % 2 == 0 else O

    @property
    def winner(self):
        return self.current_board.winner()

    @property
    def winning_line(self):
        return self.current_board.winning_line()

    @property
    def is_over(self):
        return self.winner is not None

    @property
    def status_text(self):
        winner = self.winner
        if winner:
            return f"Winner: {winner}"
        return f"Next player: {self.active_player}"

    @property
    def last_move(self):
        """Index placed to reach the current snapshot (None at game start)."""
        if self._current_move == 0:
            return None
        before = self._history[self._current_move - 1]
        after = self.current_board
        for index, (a, b) in enumerate(zip(before, after)):
            if a != b:
                return index
        return None

    def move_list(self):
        return [(move, f"move #{move}" if move > 0 else "game start") for move in range(len(self._history))]

    def play(self, index):
        """Place the active player's stone at `index`. Returns False if the move is ignored."""
        board = self.current_board
        if not referee.check_move(board, index):
            self.logger(f"Ignored move at {index}: cell taken or game over")
            return False

        player = self.active_player
        next_history = self._history[:self._current_move + 1]
        next_history.append(board.place(index, player))
        # history and cursor change together
        self._history, self._current_move = next_history, len(next_history) - 1

        self.logger(f"Move {self._current_move}: {player} {index}")
        # a new five can only pass through the stone just placed
        if self.current_board.has_five_through(index):
            self.logger(f"Winner: {player}")
        return True

    def jump_to(self, move):
        if isinstance(move, bool) or not isinstance(move, int) or not 0 <= move < len(self._history):
            raise IndexError(f"no history entry {move!r} (have {len(self._history)})")
        self._current_move = move
        self.logger(f"Jumped to {'game start' if move == 0 else f'move #{move}'}")

    def reset(self):
        self._history, self._current_move = [Board.empty()], 0
        self.logger("New game")

    # front-end event names
    cell_clicked = play
    history_entry_clicked = jump_to
