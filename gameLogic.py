import logging
from collections import namedtuple
from dataclasses import dataclass
from enum import Enum

from settings import Settings

logger = logging.getLogger(__name__)


class EdgeType(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class GamePhase(Enum):
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


class Outcome(Enum):
    PLAYER0_WINS = "player0_wins"
    PLAYER1_WINS = "player1_wins"
    DRAW = "draw"


Edge = namedtuple("Edge", ["edge_type", "row", "col"])
BoxClaim = namedtuple("BoxClaim", ["row", "col", "owner"])


@dataclass(frozen=True)
class MoveOutcome:
    edge: Edge
    boxes_closed: tuple
    scores: tuple
    next_player: object  # player id, or None once the game is finished
    phase: GamePhase
    outcome: object = None


@dataclass(frozen=True)
class GameState:
    """Read-only snapshot of the engine, safe to hand to the renderer."""
    grid_size: int
    horizontal: tuple
    vertical: tuple
    boxes: tuple
    scores: tuple
    current_player: object
    phase: GamePhase
    outcome: object = None

    @property
    def is_over(self):
        return self.phase is GamePhase.FINISHED


# --------------------------
# MOVE ERRORS
# --------------------------

class MoveError(Exception):
    """Base class for a rejected move. The engine state is left untouched."""

    def __init__(self, edge_type, row, col, message=None):
        self.edge_type = edge_type
        self.row = row
        self.col = col
        super().__init__(message or f"{self.__class__.__name__}: {edge_type} ({row}, {col})")


class OutOfBounds(MoveError):
    pass


class AlreadyClaimed(MoveError):
    pass


class GameAlreadyFinished(MoveError):
    pass


class Board:
    """
    The Board class represents the underlying game structure.
    It stores:
      - the horizontal edges (N rows x N-1 cols)
      - the vertical edges (N-1 rows x N cols)
      - the box owners (N-1 x N-1)
    Every cell holds None (unclaimed / unowned) or the id of a player.
    """

    def __init__(self, grid_size):
        if grid_size < 2:
            raise ValueError(f"grid size must be at least 2, got {grid_size}")
        self.grid_size = grid_size
        self.clear()

    def clear(self):
        n = self.grid_size
        self.horizontal = [[None] * (n - 1) for _ in range(n)]
        self.vertical = [[None] * n for _ in range(n - 1)]
        self.boxes = [[None] * (n - 1) for _ in range(n - 1)]

    # --------------------------
    # EDGE ACCESS
    # --------------------------

    def edge_lines(self, edge_type):
        """Returns the 2D list holding edges of the given type."""
        if edge_type is EdgeType.HORIZONTAL:
            return self.horizontal
        return self.vertical

    def in_bounds(self, edge_type, row, col):
        n = self.grid_size
        if edge_type is EdgeType.HORIZONTAL:
            return 0 <= row < n and 0 <= col < n - 1
        return 0 <= row < n - 1 and 0 <= col < n

    def adjacent_boxes(self, edge_type, row, col):
        """
        Boxes touching an edge (at most two):
          - horizontal: the box above (row-1, col) and the box below (row, col)
          - vertical: the box to the left (row, col-1) and to the right (row, col)
        """
        n = self.grid_size
        boxes = []
        if edge_type is EdgeType.HORIZONTAL:
            if row > 0:
                boxes.append((row - 1, col))
            if row < n - 1:
                boxes.append((row, col))
        else:
            if col > 0:
                boxes.append((row, col - 1))
            if col < n - 1:
                boxes.append((row, col))
        return boxes

    def is_box_complete(self, row, col):
        """True when the top, bottom, left and right edges of the box are all claimed."""
        return (
            self.horizontal[row][col] is not None
            and self.horizontal[row + 1][col] is not None
            and self.vertical[row][col] is not None
            and self.vertical[row][col + 1] is not None
        )

    def owned_box_count(self):
        return sum(1 for row in self.boxes for owner in row if owner is not None)

    # --------------------------
    # DEBUG PRINTING
    # --------------------------

    def print_board(self):
        """Prints a readable debug view of the board's state."""
        print("\n=== BOARD STATE ===")
        print(f"Board size: {self.grid_size} x {self.grid_size} dots\n")

        def mark(owner):
            return " " if owner is None else str(owner + 1)

        for r in range(self.grid_size):
            line = ""
            for c in range(self.grid_size - 1):
                owner = self.horizontal[r][c]
                line += "o" + ("---" if owner is not None else "   ")
            print(line + "o")
            if r == self.grid_size - 1:
                break
            line = ""
            for c in range(self.grid_size):
                line += "|" if self.vertical[r][c] is not None else " "
                if c < self.grid_size - 1:
                    line += f" {mark(self.boxes[r][c])} "
            print(line)
        print("\n====================\n")


# -------------------------------------------------
# GAME LOGIC: RULE ENFORCEMENT & TURN MANAGEMENT
# -------------------------------------------------
class GameLogic:
    def __init__(self, grid_size=Settings.GRID_SIZE):
        self.board_obj = Board(grid_size)
        self.reset()

    def reset(self):
        """Throws away the current game and starts a new one. Player 1 (id 0) starts."""
        self.board_obj.clear()
        self._scores = [0, 0]
        self.turn = Settings.PLAYER1
        self._phase = GamePhase.IN_PROGRESS
        self._outcome = None
        logger.debug("new game on a %dx%d grid", self.grid_size, self.grid_size)
        return self.get_state()

    # --------------------------
    # QUERIES
    # --------------------------

    @property
    def grid_size(self):
        return self.board_obj.grid_size

    @property
    def total_boxes(self):
        return (self.grid_size - 1) ** 2

    @property
    def scores(self):
        return tuple(self._scores)

    @property
    def current_player(self):
        """Player to move, None once the game is over."""
        if self.is_over:
            return None
        return self.turn

    @property
    def phase(self):
        return self._phase

    @property
    def outcome(self):
        return self._outcome

    @property
    def is_over(self):
        return self._phase is GamePhase.FINISHED

    def get_state(self):
        b = self.board_obj
        return GameState(
            grid_size=self.grid_size,
            horizontal=tuple(tuple(row) for row in b.horizontal),
            vertical=tuple(tuple(row) for row in b.vertical),
            boxes=tuple(tuple(row) for row in b.boxes),
            scores=self.scores,
            current_player=self.current_player,
            phase=self._phase,
            outcome=self._outcome,
        )

    def available_moves(self):
        """Lists every unclaimed edge, horizontal edges first."""
        b = self.board_obj
        moves = []
        for edge_type in (EdgeType.HORIZONTAL, EdgeType.VERTICAL):
            for r, row in enumerate(b.edge_lines(edge_type)):
                for c, owner in enumerate(row):
                    if owner is None:
                        moves.append(Edge(edge_type, r, c))
        return moves

    # --------------------------
    # TURN MANAGEMENT
    # --------------------------

    def next_turn(self):
        """Returns the next player's ID."""
        return Settings.PLAYER2 if self.turn == Settings.PLAYER1 else Settings.PLAYER1

    # --------------------------
    # MOVE VALIDATION
    # --------------------------

    def check_edge_input(self, edge_type, row, col):
        """
        Validates a move and returns the normalized EdgeType.
        Raises:
          - GameAlreadyFinished if the game is over
          - OutOfBounds if the edge type or indices are invalid
          - AlreadyClaimed if the edge is taken
        """
        if self.is_over:
            raise GameAlreadyFinished(edge_type, row, col)

        try:
            edge_type = EdgeType(edge_type)
        except ValueError:
            raise OutOfBounds(edge_type, row, col, f"unknown edge type {edge_type!r}") from None

        for index in (row, col):
            if not isinstance(index, int) or isinstance(index, bool):
                raise OutOfBounds(edge_type, row, col, f"grid indices must be integers, got {index!r}")

        b = self.board_obj
        if not b.in_bounds(edge_type, row, col):
            raise OutOfBounds(edge_type, row, col)
        if b.edge_lines(edge_type)[row][col] is not None:
            raise AlreadyClaimed(edge_type, row, col)
        return edge_type

    # --------------------------
    # MOVE EXECUTION
    # --------------------------

    def apply_move(self, edge_type, row, col):
        """
        Claims an edge for the current player and resolves the consequences:
        closed boxes are awarded to the mover, the turn passes only when
        nothing was closed, and the game ends once every box is owned.
        """
        edge_type = self.check_edge_input(edge_type, row, col)
        b = self.board_obj
        player = self.turn

        b.edge_lines(edge_type)[row][col] = player

        # both neighbours are checked against the same committed edge state
        closed = []
        for br, bc in b.adjacent_boxes(edge_type, row, col):
            if b.boxes[br][bc] is None and b.is_box_complete(br, bc):
                b.boxes[br][bc] = player
                self._scores[player] += 1
                closed.append(BoxClaim(br, bc, player))

        logger.debug("player %d claimed %s (%d, %d), closed %d box(es)",
                     player, edge_type.value, row, col, len(closed))

        if not closed:
            self.turn = self.next_turn()

        self.check_win()

        return MoveOutcome(
            edge=Edge(edge_type, row, col),
            boxes_closed=tuple(closed),
            scores=self.scores,
            next_player=self.current_player,
            phase=self._phase,
            outcome=self._outcome,
        )

    # --------------------------
    # WIN CONDITION
    # --------------------------

    def check_win(self):
        """Finishes the game when every box is owned. Returns the outcome or None."""
        if self.board_obj.owned_box_count() < self.total_boxes:
            return None

        score0, score1 = self._scores
        if score0 > score1:
            self._outcome = Outcome.PLAYER0_WINS
        elif score1 > score0:
            self._outcome = Outcome.PLAYER1_WINS
        else:
            self._outcome = Outcome.DRAW
        self._phase = GamePhase.FINISHED
        logger.info("game over: %s (%d - %d)", self._outcome.value, score0, score1)
        return self._outcome
