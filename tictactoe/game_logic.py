from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

BOARD_CELLS = 9  # fixed 3x3 grid, row-major

# rows, columns, diagonals; scanned in this order
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Cell(Enum):
    EMPTY = ''
    X = 'X'
    O = 'O'


class Player(Enum):
    X = 'X'
    O = 'O'

    @property
    def mark(self):
        # cell value this player places
        return Cell(self.value)

    def opposite(self):
        return Player.O if self is Player.X else Player.X


class StatusKind(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class Status:
    """
    in progress, won by a player, or draw
    """
    kind: StatusKind
    winner: Optional[Player] = None

    @property
    def is_terminal(self):
        return self.kind is not StatusKind.IN_PROGRESS

    def __str__(self):
        if self.kind is StatusKind.WON:
            return f"won({self.winner.value})"
        return self.kind.value


IN_PROGRESS = Status(StatusKind.IN_PROGRESS)
DRAW = Status(StatusKind.DRAW)


def won(player):
    return Status(StatusKind.WON, player)


@dataclass(frozen=True)
class GameState:
    """
    read-only snapshot of the game
    """
    board: Tuple[Cell, ...]
    current_player: Player
    status: Status
    winning_line: Optional[Tuple[int, int, int]] = None


@dataclass(frozen=True)
class StateChange:
    """
    what one accepted move changed
    """
    index: int
    mark: Cell
    status: Status
    current_player: Player  # whose turn it is now
    winning_line: Optional[Tuple[int, int, int]] = None


class MoveError(Exception):
    """rejected move, state left untouched"""


class CellOccupiedError(MoveError):
    def __init__(self, index, mark):
        super().__init__(f"cell {index} already holds {mark.value}")
        self.index = index
        self.mark = mark


class GameOverError(MoveError):
    def __init__(self, status):
        super().__init__(f"game is over ({status})")
        self.status = status


class GameEngine:
    """
    tic-tac-toe rules and state
    """
    def __init__(self):
        """
        fresh game, x to move
        """
        self.reset()

    def reset(self):
        """
        clear board and flags, returns the new state
        """
        self._board = [Cell.EMPTY] * BOARD_CELLS
        self._current_player = Player.X
        self._status = IN_PROGRESS
        self._winning_line = None
        return self.current_state()

    def current_state(self):
        return GameState(
            board=tuple(self._board),
            current_player=self._current_player,
            status=self._status,
            winning_line=self._winning_line,
        )

    @property
    def move_count(self):
        # how many marks are on the board
        return sum(1 for cell in self._board if cell is not Cell.EMPTY)

    def is_cell_empty(self, index):
        """
        true if index valid and cell blank
        """
        if isinstance(index, int) and 0 <= index < BOARD_CELLS:
            return self._board[index] is Cell.EMPTY
        return False

    def empty_cells(self):
        return [i for i, cell in enumerate(self._board) if cell is Cell.EMPTY]

    def apply_move(self, index):
        """
        place current player's mark at index, then check win before draw.

        raises GameOverError once the game has ended and CellOccupiedError
        for a taken cell; both leave the state as it was.
        """
        if isinstance(index, bool) or not isinstance(index, int) \
           or not 0 <= index < BOARD_CELLS:
            raise ValueError(f"cell index must be 0-{BOARD_CELLS - 1}, got {index!r}")
        if self._status.is_terminal:
            raise GameOverError(self._status)
        if self._board[index] is not Cell.EMPTY:
            raise CellOccupiedError(index, self._board[index])

        mark = self._current_player.mark
        self._board[index] = mark
        self._evaluate()
        return StateChange(
            index=index,
            mark=mark,
            status=self._status,
            current_player=self._current_player,
            winning_line=self._winning_line,
        )

    def _evaluate(self):
        # first completed line wins, no further lines checked
        line = find_winning_line(self._board)
        if line is not None:
            self._status = won(Player(self._board[line[0]].value))
            self._winning_line = line
            return
        if Cell.EMPTY not in self._board:
            self._status = DRAW
            return
        self._current_player = self._current_player.opposite()


def find_winning_line(board):
    """
    first line of WIN_LINES holding three equal marks, or None
    """
    for a, b, c in WIN_LINES:
        if board[a] is not Cell.EMPTY and board[a] == board[b] == board[c]:
            return (a, b, c)
    return None


def result_message(status):
    """
    modal (title, text) for a finished game
    """
    if status.kind is StatusKind.WON:
        return f"Player {status.winner.value} Wins!", "Congratulations!"
    if status.kind is StatusKind.DRAW:
        return "Game Draw!", "It's a tie!"
    raise ValueError("game still in progress")


def turn_message(player):
    return f"It's {player.value}'s turn"
