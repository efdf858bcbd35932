"""Draw Sudoku boards with Pillow."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont

from .grid import EMPTY, GRID_SIZE, SUBGRID_SIZE

BBox = Tuple[int, int, int, int]

_FONT_NAMES = ["arial.ttf", "LiberationSans-Regular.ttf", "DejaVuSans.ttf"]


def compute_cell_bboxes(cell_size: int, *, left: int = 0, top: int = 0) -> List[List[BBox]]:
    bboxes: List[List[BBox]] = []
    for r in range(GRID_SIZE):
        row_boxes: List[BBox] = []
        for c in range(GRID_SIZE):
            x0 = left + c * cell_size
            y0 = top + r * cell_size
            row_boxes.append((x0, y0, x0 + cell_size, y0 + cell_size))
        bboxes.append(row_boxes)
    return bboxes


def resolve_font(cell_size: int) -> Tuple[ImageFont.ImageFont, Dict[str, Optional[object]]]:
    """Pick a TrueType font sized for ``cell_size``, falling back to Pillow's default."""

    target_size = max(12, int(cell_size * 0.7))
    for font_name in _FONT_NAMES:
        try:
            font = ImageFont.truetype(font_name, target_size)
            return font, {"type": "truetype", "name": font_name, "size": target_size}
        except OSError:
            continue
    font = ImageFont.load_default()
    size_attr = getattr(font, "size", target_size)
    return font, {"type": "default", "name": None, "size": int(size_attr)}


def render_board(
    grid: Sequence[Sequence[int]],
    *,
    canvas_size: int = 360,
    puzzle_grid: Optional[Sequence[Sequence[int]]] = None,
    highlight_solution: bool = False,
    font: Optional[ImageFont.ImageFont] = None,
) -> Image.Image:
    """Render a 9x9 matrix; blank cells stay empty.

    With ``highlight_solution`` digits that are blank in ``puzzle_grid`` are
    drawn in blue so filled-in answers stand out from the clues.
    """

    cell_size = canvas_size // GRID_SIZE
    if cell_size <= 0:
        raise ValueError("canvas_size must be at least the grid size")
    if font is None:
        font, _ = resolve_font(cell_size)

    board_size = cell_size * GRID_SIZE
    canvas = Image.new("RGB", (canvas_size, canvas_size), color="white")
    draw = ImageDraw.Draw(canvas)

    for i in range(GRID_SIZE + 1):
        line_width = 4 if i % SUBGRID_SIZE == 0 else 1
        offset = i * cell_size
        draw.line((0, offset, board_size, offset), fill="black", width=line_width)
        draw.line((offset, 0, offset, board_size), fill="black", width=line_width)

    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            value = grid[r][c]
            if value == EMPTY:
                continue
            text = str(value)
            bbox = draw.textbbox((0, 0), text, font=font)
            text_width = bbox[2] - bbox[0]
            text_height = bbox[3] - bbox[1]
            x_text = c * cell_size + (cell_size - text_width) / 2 - bbox[0]
            y_text = r * cell_size + (cell_size - text_height) / 2 - bbox[1]
            is_clue = puzzle_grid is None or puzzle_grid[r][c] != EMPTY
            fill = "blue" if highlight_solution and not is_clue else "black"
            draw.text((x_text, y_text), text, fill=fill, font=font)
    return canvas


__all__ = ["compute_cell_bboxes", "render_board", "resolve_font"]
