import random

import pytest

from gameLogic import (
    AlreadyClaimed,
    Board,
    BoxClaim,
    Edge,
    EdgeType,
    GameAlreadyFinished,
    GameLogic,
    GamePhase,
    MoveError,
    Outcome,
    OutOfBounds,
)

H = EdgeType.HORIZONTAL
V = EdgeType.VERTICAL


def play(game, moves):
    return [game.apply_move(*move) for move in moves]


def complete_boxes(state):
    """Boxes whose four edges are claimed, computed straight from a snapshot."""
    n = state.grid_size
    return {
        (r, c)
        for r in range(n - 1)
        for c in range(n - 1)
        if None not in (state.horizontal[r][c], state.horizontal[r + 1][c],
                        state.vertical[r][c], state.vertical[r][c + 1])
    }


def owned_boxes(state):
    return {(r, c) for r, row in enumerate(state.boxes) for c, owner in enumerate(row) if owner is not None}


# --------------------------
# LIFECYCLE
# --------------------------

class TestLifecycle:
    def test_initial_state(self):
        game = GameLogic()
        state = game.get_state()

        assert state.grid_size == 5
        assert len(state.horizontal) == 5 and all(len(row) == 4 for row in state.horizontal)
        assert len(state.vertical) == 4 and all(len(row) == 5 for row in state.vertical)
        assert len(state.boxes) == 4 and all(len(row) == 4 for row in state.boxes)
        assert all(cell is None for grid in (state.horizontal, state.vertical, state.boxes)
                   for row in grid for cell in row)
        assert state.scores == (0, 0)
        assert state.current_player == 0
        assert state.phase is GamePhase.IN_PROGRESS
        assert state.outcome is None
        assert game.total_boxes == 16

    def test_reset_discards_everything(self):
        game = GameLogic()
        play(game, [(H, 0, 0), (H, 1, 0), (V, 0, 0), (V, 0, 1)])
        assert game.scores == (0, 1)

        state = game.reset()

        assert state == GameLogic().get_state()
        assert game.current_player == 0
        assert len(game.available_moves()) == 40

    def test_reset_leaves_finished_phase(self):
        game = GameLogic(2)
        play(game, [(H, 0, 0), (H, 1, 0), (V, 0, 0), (V, 0, 1)])
        assert game.is_over

        game.reset()

        assert game.phase is GamePhase.IN_PROGRESS
        assert game.outcome is None
        game.apply_move(H, 0, 0)

    @pytest.mark.parametrize("size", [0, 1, -3])
    def test_grid_too_small(self, size):
        with pytest.raises(ValueError):
            GameLogic(size)

    def test_snapshot_is_detached(self):
        game = GameLogic()
        before = game.get_state()
        game.apply_move(H, 0, 0)

        assert before.horizontal[0][0] is None
        assert isinstance(before.horizontal, tuple)
        assert isinstance(before.horizontal[0], tuple)
        assert game.get_state().horizontal[0][0] == 0


# --------------------------
# ADJACENCY
# --------------------------

class TestBoard:
    def test_adjacent_boxes_horizontal(self):
        b = Board(5)
        assert b.adjacent_boxes(H, 0, 2) == [(0, 2)]
        assert b.adjacent_boxes(H, 2, 1) == [(1, 1), (2, 1)]
        assert b.adjacent_boxes(H, 4, 3) == [(3, 3)]

    def test_adjacent_boxes_vertical(self):
        b = Board(5)
        assert b.adjacent_boxes(V, 1, 0) == [(1, 0)]
        assert b.adjacent_boxes(V, 1, 2) == [(1, 1), (1, 2)]
        assert b.adjacent_boxes(V, 3, 4) == [(3, 3)]

    def test_in_bounds(self):
        b = Board(3)
        assert b.in_bounds(H, 2, 1)
        assert not b.in_bounds(H, 2, 2)
        assert b.in_bounds(V, 1, 2)
        assert not b.in_bounds(V, 2, 2)

    def test_print_board(self, capsys):
        game = GameLogic(2)
        play(game, [(H, 0, 0), (H, 1, 0), (V, 0, 0), (V, 0, 1)])
        game.board_obj.print_board()

        out = capsys.readouterr().out
        assert "o---o" in out
        assert "| 2 |" in out


# --------------------------
# MOVES AND TURNS
# --------------------------

class TestApplyMove:
    def test_move_claims_edge_and_passes_turn(self):
        game = GameLogic()
        outcome = game.apply_move(H, 2, 3)

        assert outcome.edge == Edge(H, 2, 3)
        assert outcome.boxes_closed == ()
        assert outcome.scores == (0, 0)
        assert outcome.next_player == 1
        assert outcome.phase is GamePhase.IN_PROGRESS
        assert game.board_obj.horizontal[2][3] == 0

    def test_string_edge_type(self):
        game = GameLogic()
        outcome = game.apply_move("vertical", 0, 4)

        assert outcome.edge == Edge(V, 0, 4)
        assert game.board_obj.vertical[0][4] == 0

    def test_box_goes_to_player_placing_fourth_edge(self):
        game = GameLogic()
        outcomes = play(game, [(H, 0, 0), (H, 1, 0), (V, 0, 0)])
        assert [o.next_player for o in outcomes] == [1, 0, 1]

        last = game.apply_move(V, 0, 1)

        assert last.boxes_closed == (BoxClaim(0, 0, 1),)
        assert game.board_obj.boxes[0][0] == 1
        assert last.scores == (0, 1)
        # extra turn
        assert last.next_player == 1

    def test_shared_edge_closes_two_boxes(self):
        game = GameLogic()
        play(game, [(H, 0, 0), (H, 1, 0), (V, 0, 0), (H, 0, 1), (H, 1, 1), (V, 0, 2)])
        assert game.current_player == 0
        assert game.scores == (0, 0)

        outcome = game.apply_move(V, 0, 1)

        assert len(outcome.boxes_closed) == 2
        assert set(outcome.boxes_closed) == {BoxClaim(0, 0, 0), BoxClaim(0, 1, 0)}
        assert outcome.scores == (2, 0)
        assert outcome.next_player == 0

    def test_one_side_closed_other_side_open(self):
        game = GameLogic()
        play(game, [(H, 1, 0), (H, 2, 0), (V, 1, 0), (H, 1, 1)])

        outcome = game.apply_move(V, 1, 1)

        assert outcome.boxes_closed == (BoxClaim(1, 0, 0),)
        assert game.board_obj.boxes[1][1] is None

    def test_available_moves(self):
        game = GameLogic(3)
        assert len(game.available_moves()) == 12
        assert game.available_moves()[0] == Edge(H, 0, 0)

        game.apply_move(H, 0, 0)

        moves = game.available_moves()
        assert Edge(H, 0, 0) not in moves
        assert len(moves) == 11
        assert moves[-1] == Edge(V, 1, 2)


# --------------------------
# ERRORS
# --------------------------

class TestMoveErrors:
    @pytest.mark.parametrize("edge_type, row, col", [
        (H, 5, 0),
        (H, 0, 4),
        (H, -1, 0),
        (V, 4, 0),
        (V, 0, 5),
        (V, 0, -1),
        ("diagonal", 0, 0),
        (H, 0.5, 0),
        (H, None, 0),
        (H, "1", 0),
        (V, 0, 1.0),
        (V, True, 0),
    ])
    def test_out_of_bounds(self, edge_type, row, col):
        game = GameLogic()
        before = game.get_state()

        with pytest.raises(OutOfBounds):
            game.apply_move(edge_type, row, col)
        assert game.get_state() == before

    def test_already_claimed_leaves_state_unchanged(self):
        game = GameLogic()
        play(game, [(H, 0, 0), (H, 1, 0), (V, 0, 0), (V, 0, 1)])
        before = game.get_state()

        with pytest.raises(AlreadyClaimed) as excinfo:
            game.apply_move(V, 0, 1)

        assert game.get_state() == before
        assert (excinfo.value.row, excinfo.value.col) == (0, 1)

    def test_errors_share_base_class(self):
        game = GameLogic()
        game.apply_move(H, 0, 0)
        with pytest.raises(MoveError):
            game.apply_move(H, 0, 0)

    def test_two_dot_grid_single_winner(self):
        game = GameLogic(2)
        outcomes = play(game, [(H, 0, 0), (H, 1, 0), (V, 0, 0)])
        assert all(o.phase is GamePhase.IN_PROGRESS for o in outcomes)

        last = game.apply_move(V, 0, 1)

        assert last.phase is GamePhase.FINISHED
        assert last.outcome is Outcome.PLAYER1_WINS
        assert last.next_player is None
        assert last.scores == (0, 1)
        assert game.current_player is None

    def test_finished_game_rejects_moves(self):
        game = GameLogic(2)
        play(game, [(H, 0, 0), (H, 1, 0), (V, 0, 0), (V, 0, 1)])
        before = game.get_state()

        with pytest.raises(GameAlreadyFinished):
            game.apply_move(H, 0, 0)
        with pytest.raises(GameAlreadyFinished):
            game.apply_move(V, 9, 9)
        assert game.get_state() == before


# --------------------------
# WIN CONDITION
# --------------------------

class TestOutcome:
    def test_player0_takes_everything(self):
        # 3x3 dots: all outer edges and both middle verticals, then the middle row
        game = GameLogic(3)
        play(game, [
            (H, 0, 0), (H, 2, 0), (H, 0, 1), (H, 2, 1),
            (V, 0, 0), (V, 1, 0), (V, 0, 2), (V, 1, 2),
            (V, 0, 1), (V, 1, 1),
        ])
        assert game.current_player == 0

        first = game.apply_move(H, 1, 0)
        assert first.boxes_closed == (BoxClaim(0, 0, 0), BoxClaim(1, 0, 0))
        assert first.next_player == 0

        last = game.apply_move(H, 1, 1)
        assert last.scores == (4, 0)
        assert last.phase is GamePhase.FINISHED
        assert last.outcome is Outcome.PLAYER0_WINS

    def test_draw(self):
        game = GameLogic(3)
        moves = [
            (H, 0, 0), (V, 0, 0), (H, 1, 0),
            (V, 0, 1),  # player 1 closes (0, 0)
            (H, 2, 0), (V, 1, 0), (H, 0, 1),
            (V, 1, 1),  # player 0 closes (1, 0)
            (V, 0, 2),
            (H, 1, 1),  # player 1 closes (0, 1)
            (H, 2, 1),
        ]
        play(game, moves)
        assert game.scores == (1, 2)
        assert game.current_player == 0

        last = game.apply_move(V, 1, 2)

        assert last.boxes_closed == (BoxClaim(1, 1, 0),)
        assert last.scores == (2, 2)
        assert last.outcome is Outcome.DRAW
        assert game.get_state().boxes == ((1, 1), (0, 0))


# --------------------------
# INVARIANTS OVER WHOLE GAMES
# --------------------------

@pytest.mark.parametrize("seed", range(10))
@pytest.mark.parametrize("size", [2, 3, 5])
def test_random_game_invariants(seed, size):
    rng = random.Random(seed)
    game = GameLogic(size)
    total_edges = 2 * size * (size - 1)
    claimed = set()

    for turn in range(total_edges):
        assert not game.is_over
        player = game.current_player
        move = rng.choice(game.available_moves())
        before_owned = owned_boxes(game.get_state())

        outcome = game.apply_move(*move)
        state = game.get_state()
        claimed.add(move)

        # edges never revert
        for edge_type, r, c in claimed:
            lines = state.horizontal if edge_type is H else state.vertical
            assert lines[r][c] is not None

        # exactly the completed boxes are owned, and the new ones went to the mover
        assert owned_boxes(state) == complete_boxes(state)
        new_boxes = owned_boxes(state) - before_owned
        assert {(b.row, b.col) for b in outcome.boxes_closed} == new_boxes
        assert all(b.owner == player for b in outcome.boxes_closed)
        assert len(outcome.boxes_closed) <= 2

        assert sum(state.scores) == len(owned_boxes(state))

        if state.is_over:
            assert turn == total_edges - 1
        elif outcome.boxes_closed:
            assert outcome.next_player == player
        else:
            assert outcome.next_player == 1 - player

    assert game.is_over
    assert len(owned_boxes(game.get_state())) == (size - 1) ** 2
    assert game.available_moves() == []
