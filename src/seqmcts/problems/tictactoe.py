"""Tic-tac-toe lookahead as a sequence search problem.

Moves are board positions 0-8, row-major. Players are 1 (X) and 2 (O);
0 is an empty cell.
"""

import copy
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..types import INVALID_FITNESS, MoveSequence

WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),  # diagonals
)
CENTER = 4
CORNERS = (0, 2, 6, 8)

WIN_SCORE = -10000.0
LOSS_SCORE = 10000.0
BLOCK_SCORE = -5000.0
OPENING_SCORE = 1000.0


def opponent(player: int) -> int:
    return 3 - player


def has_line(board: Sequence[int], player: int) -> bool:
    return any(all(board[pos] == player for pos in line) for line in WIN_LINES)


@dataclass
class TicTacToeState:
    """Board position with the player to move.

    Attributes:
        board: 9 cells, 0 empty, 1 X, 2 O
        next_player: Player to move (1 or 2)
        moves: Positions played from this state onwards
        game_over: Whether the game has ended
        winner: 0 for a draw or game in progress, else the winning player
    """
    board: List[int] = field(default_factory=lambda: [0] * 9)
    next_player: int = 1
    moves: List[int] = field(default_factory=list)
    game_over: bool = False
    winner: int = 0

    def __post_init__(self):
        self.board = list(self.board)
        if len(self.board) != 9:
            raise ValueError(f"Board must have 9 cells, got {len(self.board)}")
        self._check_game_over()

    def copy(self) -> "TicTacToeState":
        return copy.deepcopy(self)

    def empty_cells(self) -> List[int]:
        return [pos for pos, cell in enumerate(self.board) if cell == 0]

    def is_empty(self) -> bool:
        return all(cell == 0 for cell in self.board)

    def make_move(self, pos: int) -> bool:
        """Play pos for the player to move.

        Returns:
            False (state unchanged) if the move is illegal
        """
        if not isinstance(pos, int) or pos < 0 or pos > 8:
            return False
        if self.board[pos] != 0 or self.game_over:
            return False

        self.board[pos] = self.next_player
        self.moves.append(pos)
        self.next_player = opponent(self.next_player)
        self._check_game_over()
        return True

    def _check_game_over(self) -> None:
        for player in (1, 2):
            if has_line(self.board, player):
                self.game_over = True
                self.winner = player
                return

        if all(cell != 0 for cell in self.board):
            self.game_over = True
            self.winner = 0

    def __str__(self) -> str:
        symbols = {0: ".", 1: "X", 2: "O"}
        rows = []
        for i in range(0, 9, 3):
            rows.append(" " + " ".join(symbols[c] for c in self.board[i:i + 3]))
        return "\n" + "\n".join(rows) + "\n"


class TicTacToeProblem:
    """Search for good moves for `player` from an initial position.

    Args:
        initial_state: Position to search from
        player: Player we optimize for (1 or 2)
        forced_replies: Offer only an immediate win, or failing that a
            forced block, when one exists. The empty board offers only the
            center.
        excluded_moves: Positions never offered by the move generator
    """

    def __init__(
        self,
        initial_state: TicTacToeState,
        player: int,
        forced_replies: bool = True,
        excluded_moves: Sequence[int] = ()
    ):
        self.initial_state = initial_state
        self.player = player
        self.forced_replies = forced_replies
        self.excluded_moves = frozenset(excluded_moves)

    def replay(self, sequence: MoveSequence) -> Optional[TicTacToeState]:
        """Apply sequence to a copy of the initial state (None if illegal)."""
        state = self.initial_state.copy()
        for move in sequence:
            if not state.make_move(move):
                return None
        return state

    def find_immediate_win(self, state: TicTacToeState, player: int) -> int:
        """First empty position completing a line for player, else -1."""
        for pos in state.empty_cells():
            board = list(state.board)
            board[pos] = player
            if has_line(board, player):
                return pos
        return -1

    def next_moves(self, sequence: MoveSequence) -> List[int]:
        state = self.replay(sequence)
        if state is None or state.game_over:
            return []

        candidates = [pos for pos in state.empty_cells() if pos not in self.excluded_moves]

        if self.forced_replies:
            if not sequence and state.is_empty() and CENTER in candidates:
                return [CENTER]

            winning = self.find_immediate_win(state, state.next_player)
            if winning in candidates:
                return [winning]

            blocking = self.find_immediate_win(state, opponent(state.next_player))
            if blocking in candidates:
                return [blocking]

        return candidates

    def fitness(self, sequence: MoveSequence) -> float:
        """Score a line of play for self.player, lower is better."""
        if not sequence:
            return INVALID_FITNESS

        state = self.replay(sequence)
        if state is None:
            return INVALID_FITNESS

        if state.game_over:
            if state.winner == self.player:
                return WIN_SCORE
            if state.winner == 0:
                return 0.0
            return LOSS_SCORE

        if len(sequence) == 1 and self.initial_state.is_empty():
            return -OPENING_SCORE if sequence[0] == CENTER else OPENING_SCORE

        # A move that blocks the opponent's immediate win
        last_move = sequence[-1]
        before = self.replay(sequence[:-1])
        mover = before.next_player
        if self.find_immediate_win(before, opponent(mover)) == last_move:
            return BLOCK_SCORE if mover == self.player else -BLOCK_SCORE

        return self.evaluate_position(state)

    def evaluate_position(self, state: TicTacToeState) -> float:
        """Heuristic score of an unfinished position for self.player."""
        me = self.player
        them = opponent(me)
        score = 0.0

        if state.board[CENTER] == me:
            score -= 100.0
        score -= 50.0 * sum(1 for corner in CORNERS if state.board[corner] == me)

        for line in WIN_LINES:
            cells = [state.board[pos] for pos in line]
            mine = cells.count(me)
            theirs = cells.count(them)
            empty = cells.count(0)

            if theirs == 0:
                if mine == 2 and empty == 1:
                    score -= 300.0
                elif mine == 1 and empty == 2:
                    score -= 30.0
            elif mine == 0 and theirs == 2 and empty == 1:
                score += 250.0

        return score
