"""Immutable board snapshots and five-in-a-row detection."""

BOARD_SIZE = 15
WIN_LENGTH = 5

EMPTY = None
X = "X"
O = "O"


def to_index(row, col):
    return row * BOARD_SIZE + col


def to_coords(index):
    return divmod(index, BOARD_SIZE)


def _build_lines(size=BOARD_SIZE, length=WIN_LENGTH):
    """Enumerate every run of `length` cells: horizontal, vertical, down-right, up-right."""
    lines = []
    span = size - length + 1
    for row in range(size):
        for col in range(span):
            lines.append(tuple(row * size + col + i for i in range(length)))
    for col in range(size):
        for row in range(span):
            lines.append(tuple((row + i) * size + col for i in range(length)))
    for row in range(span):
        for col in range(span):
            lines.append(tuple((row + i) * size + col + i for i in range(length)))
    for row in range(length - 1, size):
        for col in range(span):
            lines.append(tuple((row - i) * size + col + i for i in range(length)))
    return tuple(lines)


WIN_LINES = _build_lines()

# cell index -> runs passing through it, in enumeration order
LINES_THROUGH = tuple(
    tuple(line for line in WIN_LINES if index in line) for index in range(BOARD_SIZE * BOARD_SIZE)
)


class Board:
    """One snapshot of the grid. Never mutated; `place` returns a new Board."""

    __slots__ = ("cells",)

    def __init__(self, cells=None):
        if cells is None:
            cells = (EMPTY,) * (BOARD_SIZE * BOARD_SIZE)
        cells = tuple(cells)
        if len(cells) != BOARD_SIZE * BOARD_SIZE:
            raise ValueError(f"board needs {BOARD_SIZE * BOARD_SIZE} cells, got {len(cells)}")
        self.cells = cells

    @classmethod
    def empty(cls):
        return cls()

    def __getitem__(self, index):
        return self.cells[index]

    def __len__(self):
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.cells == other.cells

    def __hash__(self):
        return hash(self.cells)

    def __repr__(self):
        return f"Board(stones={self.stone_count()}, winner={self.winner()!r})"

    @staticmethod
    def in_bounds(index):
        return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < BOARD_SIZE * BOARD_SIZE

    def is_empty(self, index):
        return self.in_bounds(index) and self.cells[index] is EMPTY

    def cell(self, row, col):
        return self.cells[to_index(row, col)]

    def rows(self):
        return [self.cells[r * BOARD_SIZE:(r + 1) * BOARD_SIZE] for r in range(BOARD_SIZE)]

    def stone_count(self):
        return sum(1 for c in self.cells if c is not EMPTY)

    def is_full(self):
        return all(c is not EMPTY for c in self.cells)

    def place(self, index, player):
        """Return a copy with `player` at `index`. Occupancy is the caller's concern."""
        if player not in (X, O):
            raise ValueError("player must be 'X' or 'O'")
        if not self.in_bounds(index):
            raise ValueError("move out of bounds")
        cells = list(self.cells)
        cells[index] = player
        return Board(cells)

    def winning_line(self):
        """First run of five identical stones in scan order, or None."""
        cells = self.cells
        for line in WIN_LINES:
            first = cells[line[0]]
            if first is EMPTY:
                continue
            if all(cells[i] == first for i in line[1:]):
                return line
        return None

    def winner(self):
        line = self.winning_line()
        return self.cells[line[0]] if line else None

    def has_five_through(self, index):
        """Check only the runs containing `index` (enough right after a move there)."""
        color = self.cells[index]
        if color is EMPTY:
            return False
        return any(all(self.cells[i] == color for i in line) for line in LINES_THROUGH[index])
