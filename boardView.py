"""
Geometry and drawing for the board, kept free of pygame so it can be reused
and tested on its own:
  - layout of the board inside a window
  - board coordinates -> pixels
  - pixels -> clicked edge
  - game state -> ordered draw instructions
"""
from collections import namedtuple

from gameLogic import Edge, EdgeType, Outcome
from settings import Settings

BoardLayout = namedtuple("BoardLayout", ["origin_x", "origin_y", "board_size", "cell_size", "padding"])

# kind is "box", "line" or "dot"
# box:  points = (top_left,),   size = side length
# line: points = (start, end),  size = line width
# dot:  points = (center,),     size = radius
DrawInstruction = namedtuple("DrawInstruction", ["kind", "color", "points", "size"])


# --------------------------
# LAYOUT
# --------------------------

def compute_layout(container_width, container_height, grid_size=Settings.GRID_SIZE):
    """
    Fits a square board into the area below the HUD, up to MAX_BOARD_SIZE.
    Called again whenever the window is resized.
    """
    board_size = min(
        container_width - Settings.BOARD_MARGIN,
        container_height - Settings.HUD_HEIGHT - Settings.BOARD_MARGIN,
        Settings.MAX_BOARD_SIZE,
    )
    board_size = max(board_size, Settings.MIN_BOARD_SIZE)

    padding = Settings.DOT_RADIUS
    cell_size = (board_size - 2 * padding) / (grid_size - 1)

    origin_x = (container_width - board_size) / 2
    origin_y = Settings.HUD_HEIGHT + max(0, (container_height - Settings.HUD_HEIGHT - board_size) / 2)
    return BoardLayout(origin_x, origin_y, board_size, cell_size, padding)


def to_pixel(layout, row, col):
    """Convert the dot at (row, col) to pixel coordinates."""
    return (
        layout.origin_x + layout.padding + col * layout.cell_size,
        layout.origin_y + layout.padding + row * layout.cell_size,
    )


# --------------------
# MOUSE DETECTION
# --------------------

def get_clicked_line(layout, grid_size, x, y, tolerance=Settings.CLICK_TOLERANCE):
    """
    Returns the Edge under (x, y) or None.
    Each edge accepts clicks within `tolerance` pixels of its line, between
    the two dots it joins (the dots themselves are excluded).
    """
    inset = Settings.DOT_RADIUS

    for r in range(grid_size):
        for c in range(grid_size - 1):
            line_x, line_y = to_pixel(layout, r, c)
            if (abs(y - line_y) <= tolerance
                    and line_x + inset <= x <= line_x + layout.cell_size - inset):
                return Edge(EdgeType.HORIZONTAL, r, c)

    for r in range(grid_size - 1):
        for c in range(grid_size):
            line_x, line_y = to_pixel(layout, r, c)
            if (abs(x - line_x) <= tolerance
                    and line_y + inset <= y <= line_y + layout.cell_size - inset):
                return Edge(EdgeType.VERTICAL, r, c)

    return None


# --------------------
# DRAWING
# --------------------

def build_draw_instructions(state, layout, hovered=None):
    """
    Turns a GameState into the list of shapes to paint, in order:
    owned boxes, claimed edges, the hovered edge, then dots on top.
    """
    n = state.grid_size
    instructions = []

    # Filled boxes, slightly inset so the lines stay visible
    box_side = layout.cell_size - Settings.LINE_THICKNESS
    for r, row in enumerate(state.boxes):
        for c, owner in enumerate(row):
            if owner is None:
                continue
            x, y = to_pixel(layout, r, c)
            top_left = (x + Settings.LINE_THICKNESS / 2, y + Settings.LINE_THICKNESS / 2)
            instructions.append(DrawInstruction("box", Settings.BOX_FILL_COLORS[owner], (top_left,), box_side))

    # Claimed edges in the owner's color
    for edge_type, lines in ((EdgeType.HORIZONTAL, state.horizontal), (EdgeType.VERTICAL, state.vertical)):
        for r, row in enumerate(lines):
            for c, owner in enumerate(row):
                if owner is not None:
                    instructions.append(DrawInstruction(
                        "line", Settings.PLAYERS_LINE_COLORS[owner],
                        _edge_endpoints(layout, edge_type, r, c), Settings.LINE_THICKNESS))

    if hovered is not None and not state.is_over:
        edge_type, r, c = hovered
        lines = state.horizontal if edge_type is EdgeType.HORIZONTAL else state.vertical
        if lines[r][c] is None:
            instructions.append(DrawInstruction(
                "line", Settings.PLAYER_MOUSE_ON_OBJECT_COLOR[state.current_player],
                _edge_endpoints(layout, edge_type, r, c), Settings.LINE_THICKNESS))

    for r in range(n):
        for c in range(n):
            instructions.append(DrawInstruction(
                "dot", Settings.DOT_COLOR, (to_pixel(layout, r, c),), Settings.DOT_RADIUS))

    return instructions


def _edge_endpoints(layout, edge_type, row, col):
    start = to_pixel(layout, row, col)
    if edge_type is EdgeType.HORIZONTAL:
        end = to_pixel(layout, row, col + 1)
    else:
        end = to_pixel(layout, row + 1, col)
    return start, end


# --------------------
# LABELS
# --------------------

def player_name(player):
    return f"Player {player + 1}"


def score_label(player, score):
    return f"{player_name(player)}: {score}"


def turn_label(player):
    return f"{player_name(player)}'s Turn"


def outcome_message(outcome):
    if outcome is Outcome.PLAYER0_WINS:
        return f"{player_name(Settings.PLAYER1)} Wins!"
    if outcome is Outcome.PLAYER1_WINS:
        return f"{player_name(Settings.PLAYER2)} Wins!"
    return "It's a Draw!"
