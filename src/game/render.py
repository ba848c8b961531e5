"""
Text rendering for Minesweeper.

Turns a board or session into plain strings for terminal front ends.
"""
from typing import List

from .board import Board
from .cell import Cell
from .session import GameSession


CLOSED_GLYPH = "."
FLAG_GLYPH = "F"
MINE_GLYPH = "*"
EMPTY_GLYPH = " "


def format_time(seconds: float) -> str:
    """Format elapsed seconds as MM:SS, dropping fractions."""
    total = int(seconds)
    minutes, secs = divmod(total, 60)
    return f"{minutes:02d}:{secs:02d}"


def status_text(session: GameSession) -> str:
    """Banner for a finished game, or an empty string while playing."""
    if session.win:
        return "YOU WIN!"
    if session.game_over:
        return "YOU LOSE!"
    return ""


def cell_glyph(cell: Cell) -> str:
    """Single character shown for a cell."""
    if cell.is_flagged:
        return FLAG_GLYPH
    if not cell.is_open:
        return CLOSED_GLYPH
    if cell.is_mine:
        return MINE_GLYPH
    if cell.is_empty:
        return EMPTY_GLYPH
    return str(cell.number)


def render_board(board: Board, show_coordinates: bool = False) -> str:
    """
    Render board as ASCII string.

    Args:
        board: Board to draw.
        show_coordinates: Prefix rows and columns with their indices.

    Returns:
        One line per row, cells separated by spaces.
    """
    width, height = board.config.width, board.config.height
    label_width = len(str(max(width, height) - 1))
    lines: List[str] = []

    if show_coordinates:
        header = " ".join(f"{x:>{label_width}}" for x in range(width))
        lines.append(" " * (label_width + 1) + header)

    for y in range(height):
        glyphs = [
            f"{cell_glyph(board.get_cell(x, y)):>{label_width}}"
            for x in range(width)
        ]
        row = " ".join(glyphs)
        if show_coordinates:
            row = f"{y:>{label_width}} {row}"
        lines.append(row)

    return "\n".join(lines)


def render_hud(session: GameSession) -> str:
    """Status banner, remaining mines and the game clock."""
    lines = []
    status = status_text(session)
    if status:
        lines.append(status)
    lines.append(f"Mines: {session.remaining_mines}")
    lines.append(f"Time: {format_time(session.elapsed_time)}")
    return "\n".join(lines)


def render_session(session: GameSession, show_coordinates: bool = True) -> str:
    """HUD followed by the board."""
    return render_hud(session) + "\n\n" + render_board(
        session.board, show_coordinates
    )
