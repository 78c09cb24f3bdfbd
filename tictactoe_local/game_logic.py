import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

BOARD_CELLS = 9  # fixed 3x3 grid, row-major

# rows, then cols, then diags; first match wins
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Mark(str, Enum):
    """
    cell contents; X and O are also the player marks
    """
    EMPTY = ''
    X = 'X'
    O = 'O'

    def opposite(self):
        # other player, EMPTY stays EMPTY
        if self is Mark.X: return Mark.O
        if self is Mark.O: return Mark.X
        return Mark.EMPTY


class OutcomeKind(Enum):
    NONE = "none"
    WIN = "win"
    DRAW = "draw"


class StatusKind(Enum):
    ONGOING = "ongoing"
    WON = "won"
    DRAWN = "drawn"


@dataclass(frozen=True)
class Outcome:
    """
    result of evaluating a board: nothing yet, a win on a line, or a draw
    """
    kind: OutcomeKind = OutcomeKind.NONE
    mark: Optional[Mark] = None
    line: Tuple[int, ...] = ()


NO_OUTCOME = Outcome()
DRAW = Outcome(OutcomeKind.DRAW)


@dataclass(frozen=True)
class SessionSnapshot:
    board: Tuple[Mark, ...]
    active_mark: Mark
    move_count: int
    outcome: Outcome


@dataclass(frozen=True)
class GameStatus:
    """
    read-only projection of a session for display
    """
    kind: StatusKind
    active_mark: Optional[Mark] = None    # only while ongoing
    winning_mark: Optional[Mark] = None   # only when won
    line: Tuple[int, ...] = ()

    @property
    def label(self):
        if self.kind is StatusKind.WON:
            if self.winning_mark is None:
                return "Winner!"
            return f"Winner: {self.winning_mark.value}"
        if self.kind is StatusKind.DRAWN:
            return "Draw! No more moves."
        if self.active_mark is None:
            return "Next Player"
        return f"Next Player: {self.active_mark.value}"


def _player_mark(cell):
    # anything that is not X or O counts as empty
    for mark in (Mark.X, Mark.O):
        if cell == mark:
            return mark
    return None


def evaluate(board):
    """
    scan the 8 fixed lines for three equal marks
    returns: Outcome (win with mark + line, draw on a full board, or none)
    """
    for line in WINNING_LINES:
        a, b, c = line
        mark = _player_mark(board[a])
        if mark is not None and mark == _player_mark(board[b]) == _player_mark(board[c]):
            return Outcome(OutcomeKind.WIN, mark, line)
    if all(_player_mark(cell) is not None for cell in board):
        return DRAW
    return NO_OUTCOME


class GameSession:
    """
    tic-tac-toe rules and state for one local two-player game
    """
    def __init__(self):
        """
        init board and counters
        """
        self._board = [Mark.EMPTY] * BOARD_CELLS
        self._active_mark = Mark.X       # X always starts
        self._move_count = 0             # how many moves done
        self._outcome = NO_OUTCOME

    @property
    def board(self):
        return tuple(self._board)

    @property
    def active_mark(self):
        return self._active_mark

    @property
    def move_count(self):
        return self._move_count

    @property
    def outcome(self):
        return self._outcome

    @property
    def is_game_over(self):
        return self._outcome.kind is not OutcomeKind.NONE

    def is_cell_empty(self, index):
        """
        true if index valid and cell blank
        """
        if _valid_index(index):
            return self._board[index] is Mark.EMPTY
        return False

    def empty_cells(self):
        return [i for i, cell in enumerate(self._board) if cell is Mark.EMPTY]

    def place_mark(self, index):
        """
        place the active player's mark and recompute the outcome
        returns: the new SessionSnapshot, or None if the move was rejected
        """
        # only if game not over and cell valid + empty
        if self.is_game_over or not self.is_cell_empty(index):
            logger.debug("rejected move at %r (move %d)", index, self._move_count)
            return None

        mark = self._active_mark
        self._board[index] = mark
        self._move_count += 1
        self._active_mark = mark.opposite()

        result = evaluate(self._board)
        if result.kind is OutcomeKind.WIN:
            self._outcome = result
        elif self._move_count == BOARD_CELLS:
            self._outcome = DRAW
        else:
            self._outcome = NO_OUTCOME
        logger.debug("%s placed at %d, outcome %s", mark.value, index, self._outcome.kind.value)
        return self.snapshot()

    def restart(self):
        """
        clear board and reset flags, always allowed
        """
        self._board = [Mark.EMPTY] * BOARD_CELLS
        self._active_mark = Mark.X
        self._move_count = 0
        self._outcome = NO_OUTCOME
        logger.debug("session restarted")
        return self.snapshot()

    # same operation, kept under both names for the two buttons
    reset_board = restart

    def snapshot(self):
        return SessionSnapshot(
            board=tuple(self._board),
            active_mark=self._active_mark,
            move_count=self._move_count,
            outcome=self._outcome,
        )

    def get_status(self):
        outcome = self._outcome
        if outcome.kind is OutcomeKind.WIN:
            return GameStatus(StatusKind.WON, winning_mark=outcome.mark, line=outcome.line)
        if outcome.kind is OutcomeKind.DRAW:
            return GameStatus(StatusKind.DRAWN)
        return GameStatus(StatusKind.ONGOING, active_mark=self._active_mark)


def _valid_index(index):
    # bool is an int subclass; not a cell
    return isinstance(index, int) and not isinstance(index, bool) \
        and 0 <= index < BOARD_CELLS
