from __future__ import annotations
import logging
from typing import List, Optional

from gomoku.core.board import Board
from gomoku.core.rules import winning_line
from gomoku.game.actions import Confirm, GameEvent, Move, Timeout, WinCheckDue
from gomoku.game.state import DisplayState, line_tuple
from gomoku.game.timer import TurnTimer
from gomoku.types import Coord, Direction, GameOutcome, LastMove, Player, PlacementResult

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Turn state machine for one game.

    Owns the board, the turn timer, the cursor and the outcome. Events are
    processed one at a time; ``dispatch`` also runs whatever follow-up an
    event produces (the win check after a placement) before returning.
    """

    def __init__(self) -> None:
        self.board = Board()
        self.timer = TurnTimer()
        self.current: Player = Player.ONE
        self.cursor: Coord = (0, 0)
        self.awaiting_win_check = False
        self.last_move: Optional[LastMove] = None
        self.placement = PlacementResult.NONE
        self.outcome = GameOutcome()
        self.winning_line: Optional[List[Coord]] = None
        self.timer.reset()

    @property
    def finished(self) -> bool:
        return self.outcome.finished

    def dispatch(self, event: GameEvent) -> None:
        nxt: Optional[GameEvent] = event
        while nxt is not None:
            nxt = self.handle(nxt)

    def handle(self, event: GameEvent) -> Optional[GameEvent]:
        if self.finished:
            return None

        if isinstance(event, WinCheckDue):
            if self.awaiting_win_check:
                self._check_win()
            return None

        if self.awaiting_win_check:
            # A pending result outranks anything else; the event is dropped.
            logger.debug("Dropping %r while win check is pending", event)
            return None

        if isinstance(event, Move):
            self._move(event.direction)
            return None
        if isinstance(event, Confirm):
            return self._confirm()
        if isinstance(event, Timeout):
            self._timeout()
            return None

        raise ValueError(f"Unknown event: {event!r}")

    def _move(self, d: Direction) -> None:
        dr, dc = d.value
        r, c = self.cursor
        last = self.board.size - 1
        self.cursor = (min(max(r + dr, 0), last), min(max(c + dc, 0), last))
        self.placement = PlacementResult.NONE

    def _confirm(self) -> Optional[GameEvent]:
        r, c = self.cursor
        if not self.board.place(r, c, self.current):
            self.placement = PlacementResult.FAILURE
            logger.info("Player %s: cell (%d, %d) is occupied", self.current.name, r, c)
            return None

        self.last_move = LastMove(r, c, self.current)
        self.placement = PlacementResult.SUCCESS
        self.awaiting_win_check = True
        logger.info("Player %s placed at (%d, %d)", self.current.name, r, c)
        return WinCheckDue()

    def _check_win(self) -> None:
        move = self.last_move
        if move is None:
            self.awaiting_win_check = False
            return

        line = winning_line(self.board, move)
        if line is not None:
            self.outcome = GameOutcome(winner=move.player)
            self.winning_line = line
            self.awaiting_win_check = False
            self.timer.disable()
            logger.info("Player %s wins", move.player.name)
            return

        self._next_turn()
        self.awaiting_win_check = False

    def _timeout(self) -> None:
        logger.info("Player %s ran out of time", self.current.name)
        self._next_turn()

    def _next_turn(self) -> None:
        self.current = self.current.other()
        self.timer.reset()

    def tick(self) -> None:
        """One second of real time. Expiry is fed back in as a Timeout."""
        if self.finished:
            return
        if self.timer.tick():
            self.dispatch(Timeout())

    def display(self) -> DisplayState:
        return DisplayState(
            board=self.board.snapshot(),
            cursor=self.cursor,
            current=self.current,
            placement=self.placement,
            outcome=self.outcome,
            seconds_left=self.timer.seconds_left,
            winning_line=line_tuple(self.winning_line),
        )
