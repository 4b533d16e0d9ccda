"""Pygame board renderer with a clickable move history."""

from ..Board import BOARD_SIZE, O, X, to_coords, to_index

ASSET_BOARD_SIZE = 540
ASSET_MARGIN = 23


def cell_from_pixel(pos, grid_origin, tile_size, board_size=BOARD_SIZE):
    """Map a mouse position to the nearest intersection index, or None when off the grid."""
    mx, my = pos
    gx, gy = grid_origin

    board_min_x = gx - tile_size / 2
    board_max_x = gx + tile_size * (board_size - 1) + tile_size / 2
    board_min_y = gy - tile_size / 2
    board_max_y = gy + tile_size * (board_size - 1) + tile_size / 2

    if not (board_min_x <= mx <= board_max_x and board_min_y <= my <= board_max_y):
        return None

    col = int(round((mx - gx) / tile_size))
    row = int(round((my - gy) / tile_size))

    if 0 <= col < board_size and 0 <= row < board_size:
        return to_index(row, col)
    return None


def history_entry_from_pixel(pos, panel_rect, row_height, scroll, entry_count):
    """Map a click inside the history panel to a move number, or None."""
    mx, my = pos
    left, top, width, height = panel_rect
    if not (left <= mx < left + width and top <= my < top + height):
        return None
    move = scroll + int((my - top) // row_height)
    if 0 <= move < entry_count:
        return move
    return None


def scroll_to_show(move, scroll, visible_rows, entry_count):
    """Smallest change to `scroll` that keeps row `move` inside the visible window."""
    if move < scroll:
        scroll = move
    elif move >= scroll + visible_rows:
        scroll = move - visible_rows + 1
    max_scroll = max(0, entry_count - visible_rows)
    return min(max(scroll, 0), max_scroll)


class PygameView:
    # --- Constants ---
    COLOR_BACKGROUND = (40, 30, 20)
    COLOR_WOOD = (209, 179, 135)
    COLOR_GRID = (60, 40, 20)
    COLOR_TEXT = (230, 230, 230)
    COLOR_RED = (200, 0, 0)
    COLOR_BLACK_STONE = (20, 20, 20)
    COLOR_WHITE_STONE = (240, 240, 235)
    COLOR_HIGHLIGHT = (90, 70, 40)

    PANEL_HEIGHT = 80
    HISTORY_WIDTH = 220
    HISTORY_ROW = 24

    def __init__(self, window_size=800):
        import pygame

        self.window_size = window_size
        self._pygame = pygame
        self.scroll = 0

        pygame.init()
        self.screen = pygame.display.set_mode((window_size + self.HISTORY_WIDTH, window_size))
        pygame.display.set_caption("Omok Time Travel")

        # Fonts
        self.font_large = pygame.font.Font(None, 48)
        self.font_medium = pygame.font.Font(None, 36)
        self.font_small = pygame.font.Font(None, 24)

        # The board surface is smaller than the window to leave room for the status panel
        self.board_display_size = window_size - self.PANEL_HEIGHT
        self.margin_px = self.board_display_size * (ASSET_MARGIN / ASSET_BOARD_SIZE)
        self.board_surface = self._build_board_surface(self.board_display_size)
        self.tile_size = (self.board_display_size - 2 * self.margin_px) / (BOARD_SIZE - 1)
        self.stone_radius = self.tile_size * 0.45

        self.board_origin = (0, self.PANEL_HEIGHT)
        self.history_rect = (window_size, 0, self.HISTORY_WIDTH, window_size)

    def _grid_origin(self):
        ox, oy = self.board_origin
        return ox + self.margin_px, oy + self.margin_px

    def _build_board_surface(self, size_px):
        pygame = self._pygame
        surf = pygame.Surface((size_px, size_px)).convert()
        surf.fill(self.COLOR_WOOD)
        grid_start = self.margin_px
        grid_end = size_px - self.margin_px
        tile = (grid_end - grid_start) / (BOARD_SIZE - 1)
        for i in range(BOARD_SIZE):
            offset = grid_start + i * tile
            pygame.draw.line(surf, self.COLOR_GRID, (grid_start, offset), (grid_end, offset), 1)
            pygame.draw.line(surf, self.COLOR_GRID, (offset, grid_start), (offset, grid_end), 1)
        return surf

    def _cell_center(self, index):
        gx, gy = self._grid_origin()
        row, col = to_coords(index)
        return gx + col * self.tile_size, gy + row * self.tile_size

    def _draw_text(self, text, font, color, center_pos):
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=center_pos)
        self.screen.blit(text_surface, text_rect)

    def _draw_stones(self, board):
        pygame = self._pygame
        for index, value in enumerate(board):
            if value not in (X, O):
                continue
            center = self._cell_center(index)
            fill = self.COLOR_BLACK_STONE if value == X else self.COLOR_WHITE_STONE
            pygame.draw.circle(self.screen, fill, center, self.stone_radius)
            pygame.draw.circle(self.screen, self.COLOR_GRID, center, self.stone_radius, 1)

    def _draw_last_move_marker(self, last_move):
        if last_move is None:
            return
        # A simple red dot in the center of the stone
        self._pygame.draw.circle(self.screen, self.COLOR_RED, self._cell_center(last_move), self.tile_size * 0.2)

    def _draw_winning_line(self, line):
        if not line:
            return
        start = self._cell_center(line[0])
        end = self._cell_center(line[-1])
        self._pygame.draw.line(self.screen, self.COLOR_RED, start, end, 4)

    def _draw_info_panel(self, status_text):
        panel_rect = self._pygame.Rect(0, 0, self.window_size, self.PANEL_HEIGHT)
        self._pygame.draw.rect(self.screen, self.COLOR_GRID, panel_rect)
        font = self.font_large if status_text.startswith("Winner") else self.font_medium
        self._draw_text(status_text, font, self.COLOR_TEXT, (self.window_size / 2, self.PANEL_HEIGHT / 2))

    def _visible_rows(self):
        return int(self.history_rect[3] // self.HISTORY_ROW)

    def _draw_history(self, session):
        pygame = self._pygame
        left, top, width, height = self.history_rect
        pygame.draw.rect(self.screen, self.COLOR_BACKGROUND, pygame.Rect(left, top, width, height))

        entries = session.move_list()
        for slot, (move, label) in enumerate(entries[self.scroll:self.scroll + self._visible_rows()]):
            y = top + slot * self.HISTORY_ROW
            if move == session.current_move:
                pygame.draw.rect(self.screen, self.COLOR_HIGHLIGHT, pygame.Rect(left, y, width, self.HISTORY_ROW))
            text_surface = self.font_small.render(f"Go to {label}", True, self.COLOR_TEXT)
            self.screen.blit(text_surface, (left + 10, y + 4))

    def _scroll_by(self, delta, entry_count):
        max_scroll = max(0, entry_count - self._visible_rows())
        self.scroll = min(max(self.scroll + delta, 0), max_scroll)

    def render(self, session):
        self.screen.fill(self.COLOR_BACKGROUND)
        self.screen.blit(self.board_surface, self.board_origin)

        self._draw_stones(session.current_board)
        self._draw_last_move_marker(session.last_move)
        self._draw_winning_line(session.winning_line)
        self._draw_info_panel(session.status_text)
        self._draw_history(session)

        self._pygame.display.flip()

    def handle_click(self, session, pos):
        """Forward a click to the session as a cell or history event."""
        index = cell_from_pixel(pos, self._grid_origin(), self.tile_size)
        if index is not None:
            if session.cell_clicked(index):
                self.scroll = scroll_to_show(
                    session.current_move, self.scroll, self._visible_rows(), len(session.history)
                )
            return
        move = history_entry_from_pixel(
            pos, self.history_rect, self.HISTORY_ROW, self.scroll, len(session.history)
        )
        if move is not None:
            session.history_entry_clicked(move)

    def run(self, session):
        pygame = self._pygame
        clock = pygame.time.Clock()
        try:
            while True:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return
                    if event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                        session.reset()
                        self.scroll = 0
                    elif event.type == pygame.MOUSEWHEEL:
                        self._scroll_by(-event.y, len(session.history))
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        self.handle_click(session, event.pos)
                self.render(session)
                clock.tick(30)
        finally:
            self.close()

    def close(self):
        self._pygame.quit()
