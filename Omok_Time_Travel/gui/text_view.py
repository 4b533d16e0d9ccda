"""Console renderer and command-line input for the game session."""

from ..Board import BOARD_SIZE, EMPTY, to_index

HELP = (
    "Commands:\n"
    "  r c          place a stone at row r, column c (0-indexed)\n"
    "  jump N       go to move N (0 is game start)\n"
    "  reset        start a new game\n"
    "  quit         leave"
)


def render_board(board, last_move=None, highlight=None):
    """Grid with row/column headers; '*' marks the winning run, '>' the last stone."""
    highlight = set(highlight or ())
    lines = ["    " + " ".join(f"{c:>2}" for c in range(BOARD_SIZE))]
    for r, row in enumerate(board.rows()):
        cells = []
        for c, value in enumerate(row):
            index = to_index(r, c)
            if index in highlight:
                prefix = "*"
            elif index == last_move:
                prefix = ">"
            else:
                prefix = " "
            cells.append(prefix + ("." if value is EMPTY else value))
        lines.append(f"{r:>2}  " + " ".join(cells))
    return "\n".join(lines)


def render_moves(session):
    lines = []
    for move, label in session.move_list():
        pointer = ">" if move == session.current_move else " "
        lines.append(f"{pointer} {move:>3}. Go to {label}")
    return "\n".join(lines)


def parse_command(raw):
    """Translate one input line into (action, value). Raises ValueError on bad input."""
    parts = raw.strip().lower().split()
    if not parts:
        raise ValueError("Empty command")

    head, args = parts[0], parts[1:]
    if head in ("q", "quit", "exit"):
        return "quit", None
    if head in ("h", "help", "?"):
        return "help", None
    if head == "reset":
        return "reset", None
    if head in ("j", "jump"):
        if len(args) != 1:
            raise ValueError("Usage: jump N")
        try:
            return "jump", int(args[0])
        except ValueError as exc:
            raise ValueError("Move number must be an integer") from exc

    if head == "play":
        parts = args
    try:
        r_str, c_str = parts
        row, col = int(r_str), int(c_str)
    except ValueError as exc:
        raise ValueError("Invalid input format; expected two integers 'row col'") from exc
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise ValueError(f"Row and column must be in 0..{BOARD_SIZE - 1}")
    return "play", to_index(row, col)


class TextView:
    def __init__(self, input_fn=input, output=print):
        self.input_fn = input_fn
        self.output = output

    def render(self, session):
        self.output(render_board(session.current_board, session.last_move, session.winning_line))
        self.output(session.status_text)
        self.output(render_moves(session))

    def run(self, session):
        """Read commands until 'quit' or end of input."""
        self.output(HELP)
        self.render(session)
        while True:
            try:
                raw = self.input_fn("> ")
            except EOFError:
                return
            try:
                action, value = parse_command(raw)
                if action == "quit":
                    return
                if action == "help":
                    self.output(HELP)
                    continue
                if action == "reset":
                    session.reset()
                elif action == "jump":
                    session.history_entry_clicked(value)
                else:
                    session.cell_clicked(value)
            except (ValueError, IndexError) as exc:
                self.output(f"Error: {exc}")
                continue
            self.render(session)
