from typing import List, Optional, Set, Tuple

import pygame

from checkers.engine.board import Board
from checkers.engine.errors import MoveRejected
from checkers.engine.move import Move, Pos
from checkers.engine.piece import Piece, BLACK, WHITE
from checkers.engine.rules import all_legal_moves, count_pieces
from checkers.engine.state import GameState

# (border, fill) per color; kings get a gold crown on top
PIECE_COLORS = {
    BLACK: ((20, 20, 20), (40, 40, 40)),
    WHITE: ((230, 230, 230), (255, 255, 255)),
}
CROWN_COLOR = (212, 175, 55)


def piece_palette(piece: Piece) -> Tuple[tuple, tuple, Optional[tuple]]:
    border, fill = PIECE_COLORS[piece.color]
    return border, fill, CROWN_COLOR if piece.king else None


class PygameUI:
    """Hot-seat pygame board: both players click on the same window.

    Click a piece of the side to move to show its destinations, then click a
    destination. The move is animated and applied when the animation ends.
    """

    def __init__(self, state: GameState, square_size: int = 64, margin: int = 20, sidebar_width: int = 220, anim_seconds: float = 0.3):
        self.state = state
        self.start_layout = state.board.to_layout()
        self.square_size = square_size
        self.margin = margin
        self.sidebar_width = sidebar_width
        self.anim_seconds = anim_seconds

        # Interaction state
        self.selected: Optional[Pos] = None
        self.legal_moves: List[Move] = []

        # Animation state
        self.animating = False
        self.anim_move: Optional[Move] = None
        self.anim_elapsed = 0.0

        self.message = ""
        self._reset_rect: Optional[pygame.Rect] = None

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def board_px(self) -> int:
        return self.margin * 2 + self.square_size * self.board.size

    def _mouse_to_board(self, mouse_pos: tuple) -> Optional[Pos]:
        rel_x = mouse_pos[0] - self.margin
        rel_y = mouse_pos[1] - self.margin
        if rel_x < 0 or rel_y < 0:
            return None
        # screen rows are board x, screen columns are board y
        pos = (int(rel_y // self.square_size), int(rel_x // self.square_size))
        return pos if self.board.in_bounds(pos) else None

    def _cell_center(self, pos: Pos) -> tuple:
        x, y = pos
        return (self.margin + y * self.square_size + self.square_size // 2,
                self.margin + x * self.square_size + self.square_size // 2)

    def _movable_pieces(self) -> Set[Pos]:
        return {pos for pos, _ in all_legal_moves(self.board, self.state.turn)}

    def _move_to(self, pos: Pos) -> Optional[Move]:
        # several chains can end on the same cell; play the longest
        candidates = [m for m in self.legal_moves if m.to == pos]
        if not candidates:
            return None
        return max(candidates, key=lambda m: len(m) if m.is_capture() else 0)

    def _select(self, pos: Pos) -> None:
        piece = self.board.get_piece(pos)
        if piece is not None and piece.color == self.state.turn:
            self.selected = pos
            self.legal_moves = self.state.get_legal_moves(piece, *pos)
        else:
            self.selected = None
            self.legal_moves = []

    def _handle_board_click(self, pos: Pos) -> None:
        if self.animating or self.state.over:
            return
        if self.selected is not None:
            move = self._move_to(pos)
            if move is not None:
                self.animating = True
                self.anim_move = move
                self.anim_elapsed = 0.0
                return
        self._select(pos)

    def _finish_move_animation(self) -> None:
        """Apply the animated move to the game and clear the interaction state."""
        if not self.animating or self.anim_move is None:
            return
        try:
            winner = self.state.apply_move(self.selected[0], self.selected[1], self.anim_move)
            self.message = f"{winner} wins!" if winner else ""
        except MoveRejected as e:
            self.message = str(e)
            print("Move rejected:", e)
        self.animating = False
        self.anim_move = None
        self.anim_elapsed = 0.0
        self.selected = None
        self.legal_moves = []

    def _do_reset(self) -> None:
        self.state = GameState(Board.from_layout(self.start_layout), turn=BLACK)
        self.selected = None
        self.legal_moves = []
        self.animating = False
        self.anim_move = None
        self.message = ""
        print("Board reset")

    def run(self) -> None:
        try:
            pygame.init()
        except Exception as e:
            raise RuntimeError("Failed to initialize pygame") from e

        board_px = self.board_px
        screen = pygame.display.set_mode((board_px + self.sidebar_width, board_px))
        pygame.display.set_caption("Checkers")
        clock = pygame.time.Clock()
        font = pygame.font.SysFont(None, 20)
        large_font = pygame.font.SysFont(None, 26)

        running = True
        while running:
            dt = clock.tick(60) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    if event.pos[0] >= board_px:
                        if self._reset_rect is not None and self._reset_rect.collidepoint(event.pos):
                            self._do_reset()
                        continue
                    board_pos = self._mouse_to_board(event.pos)
                    if board_pos is not None:
                        self._handle_board_click(board_pos)

            if self.animating:
                self.anim_elapsed += dt
                if self.anim_elapsed >= self.anim_seconds:
                    self._finish_move_animation()

            screen.fill((40, 40, 40))
            self._draw_board(screen)
            self._draw_highlights(screen)
            self._draw_pieces(screen)
            self._draw_sidebar(screen, pygame.Rect(board_px, 0, self.sidebar_width, board_px), font, large_font)
            pygame.display.flip()

        pygame.quit()

    def _draw_board(self, surface: pygame.Surface) -> None:
        light = (240, 217, 181)
        dark = (181, 136, 99)
        for x in range(self.board.size):
            for y in range(self.board.size):
                color = light if (x + y) % 2 == 0 else dark
                pygame.draw.rect(surface, color, (self.margin + y * self.square_size, self.margin + x * self.square_size, self.square_size, self.square_size))

    def _draw_pieces(self, surface: pygame.Surface) -> None:
        moving_from = self.selected if self.animating else None
        for pos, p in self.board.pieces():
            if pos == moving_from:
                continue
            self._draw_piece_at(surface, self._cell_center(pos), p)
        if moving_from is not None:
            # interpolate the moving piece between origin and final landing
            t = min(1.0, self.anim_elapsed / max(1e-6, self.anim_seconds))
            sx, sy = self._cell_center(moving_from)
            ex, ey = self._cell_center(self.anim_move.to)
            p = self.board.get_piece(moving_from)
            self._draw_piece_at(surface, (int(sx + (ex - sx) * t), int(sy + (ey - sy) * t)), p)

    def _draw_piece_at(self, surface: pygame.Surface, center: tuple, piece: Piece) -> None:
        border, fill, crown = piece_palette(piece)
        radius = int(self.square_size * 0.4)
        pygame.draw.circle(surface, border, center, radius)
        pygame.draw.circle(surface, fill, center, max(1, radius - 6))
        if crown is not None:
            pygame.draw.circle(surface, crown, center, radius // 3)

    def _draw_highlights(self, surface: pygame.Surface) -> None:
        if self.selected is None:
            if not self.state.over:
                for x, y in self._movable_pieces():
                    rect = (self.margin + y * self.square_size, self.margin + x * self.square_size, self.square_size, self.square_size)
                    pygame.draw.rect(surface, (90, 160, 90), rect, width=2)
            return
        x, y = self.selected
        pygame.draw.rect(surface, (30, 144, 255), (self.margin + y * self.square_size, self.margin + x * self.square_size, self.square_size, self.square_size), width=4)
        for m in self.legal_moves:
            pygame.draw.circle(surface, (34, 139, 34), self._cell_center(m.to), max(6, self.square_size // 8))

    def _draw_sidebar(self, screen: pygame.Surface, rect: pygame.Rect, font: pygame.font.Font, large_font: pygame.font.Font) -> None:
        pygame.draw.rect(screen, (60, 60, 60), rect)
        x0 = rect.x + 8
        y = 8
        screen.blit(large_font.render("Game Info", True, (255, 255, 255)), (x0, y))
        y += 32
        screen.blit(font.render(f"To move: {self.state.turn}", True, (255, 255, 255)), (x0, y))
        y += 24
        for color in (WHITE, BLACK):
            screen.blit(font.render(f"{color.title()} pieces: {count_pieces(self.board, color)}", True, (255, 255, 255)), (x0, y))
            y += 20
        y += 8
        if self.state.over:
            screen.blit(large_font.render(f"Winner: {self.state.winner}", True, (255, 215, 0)), (x0, y))
            y += 32
        elif self.message:
            screen.blit(font.render(self.message[:30], True, (255, 160, 160)), (x0, y))
            y += 24

        self._reset_rect = pygame.Rect(x0, y, self.sidebar_width - 16, 28)
        pygame.draw.rect(screen, (100, 80, 80), self._reset_rect)
        screen.blit(font.render("Reset", True, (255, 255, 255)), (x0 + 8, y + 6))
