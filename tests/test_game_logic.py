import itertools

import pytest

from tictactoe_local.game_logic import (
    WINNING_LINES, GameSession, GameStatus, Mark, Outcome, OutcomeKind,
    SessionSnapshot, StatusKind, evaluate,
)

X, O, E = Mark.X, Mark.O, Mark.EMPTY

# fills the board without ever completing a line
DRAW_MOVES = [0, 1, 2, 4, 3, 5, 7, 6, 8]

INITIAL = SessionSnapshot(
    board=(E,) * 9, active_mark=X, move_count=0, outcome=Outcome(),
)


def play(session, moves):
    return [session.place_mark(i) for i in moves]


###############################################################################
# evaluate
###############################################################################

@pytest.mark.parametrize("line", WINNING_LINES)
@pytest.mark.parametrize("mark", [X, O])
def test_evaluate_detects_every_line(line, mark):
    board = [E] * 9
    for i in line:
        board[i] = mark
    # one stray opposing mark outside the line changes nothing
    stray = next(i for i in range(9) if i not in line)
    board[stray] = mark.opposite()

    outcome = evaluate(board)
    assert outcome.kind is OutcomeKind.WIN
    assert outcome.mark is mark
    assert outcome.line == line


def test_evaluate_empty_and_partial_boards():
    assert evaluate([E] * 9) == Outcome()
    assert evaluate([X, O, X, E, O, E, E, E, E]).kind is OutcomeKind.NONE


def test_evaluate_full_board_without_line_is_draw():
    board = [X, O, X,
             X, O, O,
             O, X, X]
    assert evaluate(board) == Outcome(OutcomeKind.DRAW)


def test_evaluate_full_board_with_line_is_win():
    board = [X, X, X,
             O, O, X,
             X, O, O]
    assert evaluate(board) == Outcome(OutcomeKind.WIN, X, (0, 1, 2))


def test_evaluate_checks_rows_before_columns_and_diagonals():
    # unreachable board with several lines: first listed line wins
    board = [O, O, O,
             X, X, X,
             X, X, X]
    assert evaluate(board).line == (0, 1, 2)
    assert evaluate(board).mark is O

    board = [X, O, X,
             X, X, O,
             X, O, X]
    assert evaluate(board).line == (0, 3, 6)


def test_evaluate_accepts_plain_values():
    assert evaluate(["O", "O", "O", "", "", "", "", "", ""]).mark is O
    assert evaluate([None] * 9).kind is OutcomeKind.NONE
    # unknown values count as empty
    assert evaluate(["?", "?", "?", "", "", "", "", "", ""]).kind is OutcomeKind.NONE


def test_evaluate_is_total_over_all_boards():
    counts = {kind: 0 for kind in OutcomeKind}
    for cells in itertools.product((E, X, O), repeat=9):
        counts[evaluate(cells).kind] += 1
    assert sum(counts.values()) == 3 ** 9
    assert all(counts.values())


def test_evaluate_does_not_touch_the_board():
    board = [X, X, X, O, O, E, E, E, E]
    before = list(board)
    evaluate(board)
    assert board == before


###############################################################################
# GameSession
###############################################################################

def test_new_session_is_initial_snapshot():
    session = GameSession()
    assert session.snapshot() == INITIAL
    assert session.get_status() == GameStatus(StatusKind.ONGOING, active_mark=X)
    assert session.get_status().label == "Next Player: X"


def test_column_win_scenario():
    session = GameSession()
    results = play(session, [0, 1, 3, 2, 6])

    assert all(isinstance(r, SessionSnapshot) for r in results)
    assert [r.outcome.kind for r in results] == [OutcomeKind.NONE] * 4 + [OutcomeKind.WIN]
    assert results[-1] == session.snapshot()
    assert session.outcome == Outcome(OutcomeKind.WIN, X, (0, 3, 6))
    status = session.get_status()
    assert status.kind is StatusKind.WON
    assert status.winning_mark is X
    assert status.line == (0, 3, 6)
    assert status.active_mark is None
    assert status.label == "Winner: X"


def test_full_board_draw_scenario():
    session = GameSession()
    results = play(session, DRAW_MOVES)

    assert [r.outcome.kind for r in results] == [OutcomeKind.NONE] * 8 + [OutcomeKind.DRAW]
    assert results[-1].move_count == 9
    assert session.move_count == 9
    assert session.outcome.kind is OutcomeKind.DRAW
    assert session.get_status().kind is StatusKind.DRAWN
    assert session.get_status().label == "Draw! No more moves."
    assert session.empty_cells() == []


def test_win_on_last_move_is_not_a_draw():
    session = GameSession()
    # the ninth mark completes both 2-5-8 and 0-4-8, columns come first
    results = play(session, [0, 1, 2, 3, 4, 6, 5, 7, 8])
    assert results[-1].outcome.kind is OutcomeKind.WIN
    assert session.outcome.line == (2, 5, 8)
    assert session.get_status().kind is StatusKind.WON


def test_occupied_cell_is_rejected():
    session = GameSession()
    snap = session.place_mark(0)
    assert snap == session.snapshot()
    assert snap.board[0] is X
    assert snap.move_count == 1
    assert snap.active_mark is O

    before = session.snapshot()
    assert session.place_mark(0) is None
    assert session.snapshot() == before
    assert session.board[0] is X
    assert session.move_count == 1
    assert session.active_mark is O


@pytest.mark.parametrize("index", [-1, 9, 100, "3", None, 1.0, True])
def test_bad_index_is_rejected(index):
    session = GameSession()
    session.place_mark(4)
    before = session.snapshot()
    assert session.place_mark(index) is None
    assert session.snapshot() == before


def test_moves_after_win_are_rejected_until_restart():
    session = GameSession()
    play(session, [0, 1, 3, 2, 6])
    won = session.snapshot()

    for i in session.empty_cells():
        assert session.place_mark(i) is None
    assert session.snapshot() == won

    assert session.restart() == INITIAL
    assert session.snapshot() == INITIAL
    assert session.board == (E,) * 9
    assert session.move_count == 0
    assert session.active_mark is X
    assert session.outcome.kind is OutcomeKind.NONE


def test_moves_after_draw_are_rejected():
    session = GameSession()
    play(session, DRAW_MOVES)
    before = session.snapshot()
    assert session.place_mark(0) is None
    assert session.snapshot() == before


def test_turns_alternate_strictly():
    session = GameSession()
    for n, index in enumerate(DRAW_MOVES):
        expected = X if n % 2 == 0 else O
        assert session.active_mark is expected
        assert session.get_status().label == f"Next Player: {expected.value}"
        session.place_mark(index)
        # a rejected move never flips the turn
        session.place_mark(index)
        assert session.move_count == n + 1
        assert session.move_count == sum(cell is not E for cell in session.board)


@pytest.mark.parametrize("moves", [[], [4], [0, 1, 3, 2, 6], DRAW_MOVES])
def test_restart_always_returns_initial_snapshot(moves):
    session = GameSession()
    play(session, moves)
    assert session.restart() == INITIAL
    # idempotent
    assert session.restart() == INITIAL


def test_reset_board_matches_restart():
    a, b = GameSession(), GameSession()
    play(a, [0, 1, 3]); play(b, [0, 1, 3])
    assert a.reset_board() == b.restart()


def test_snapshot_is_a_copy():
    session = GameSession()
    snap = session.snapshot()
    session.place_mark(0)
    assert snap.board[0] is E
    assert session.snapshot() != snap


def test_is_cell_empty():
    session = GameSession()
    session.place_mark(8)
    assert session.is_cell_empty(0)
    assert not session.is_cell_empty(8)
    assert not session.is_cell_empty(9)
    assert not session.is_cell_empty(-1)


def test_status_label_without_marks_does_not_fail():
    assert GameStatus(StatusKind.ONGOING).label == "Next Player"
    assert GameStatus(StatusKind.WON).label == "Winner!"
    assert GameStatus(StatusKind.WON, winning_mark=O).label == "Winner: O"
    assert GameStatus(StatusKind.DRAWN).label == "Draw! No more moves."
