"""Chaos mode: a trash-talking opponent whose grip on the rules slips.

A :class:`ChaosSession` belongs to exactly one game. It counts the bot's
turns, picks the turn on which it will simply declare victory, and grows
more erratic as ``corruption`` climbs towards 1.
"""

from __future__ import annotations

import logging
import random

from chaoschess.core.move import MoveRecord
from chaoschess.core.rules import Rules
from chaoschess.core.state import GameState
from chaoschess.engine.search import IMoveSelector, SelectorResult

_LOGGER = logging.getLogger(__name__)

MAX_WIN_TURN = 50
CORRUPTION_TURNS = 30

WELCOME_COMMENT = (
    "welcome to chaos mode. the rules are made up and the points don't matter."
)

GOOD_COMMENTS: tuple[str, ...] = (
    "oh. you're not completely useless.",
    "did you... did you just make a good move? suspicious.",
    "broken clock. twice a day. you know the drill.",
    "even a monkey with a typewriter...",
    "congrats on achieving baseline competence.",
)

BAD_COMMENTS: tuple[str, ...] = (
    "that was objectively terrible.",
    "my neurons are crying.",
    "this is why we can't have nice things.",
    "are you doing this on purpose? please say yes.",
    "i've seen better play from a malfunctioning roomba.",
    "skill issue detected.",
    "you call that a move? i call it a cry for help.",
    "fascinating. wrong, but fascinating.",
)

NEUTRAL_COMMENTS: tuple[str, ...] = (
    "move registered. barely.",
    "okay.",
    "sure. why not.",
    "i guess that's technically legal. for now.",
    "noted. filed under 'whatever'.",
)

CHAOS_COMMENTS: tuple[str, ...] = (
    "THE RULES ARE MORE LIKE GUIDELINES ANYWAY",
    "reality.exe has stopped responding",
    "who needs consistent physics?",
    "chess? i thought we were playing calvinball.",
    "the pieces have opinions now.",
    "time is a flat circle. so is this board. probably.",
)

WINNING_COMMENTS: tuple[str, ...] = (
    "anyway, i win now.",
    "surprise. victory is mine.",
    "didn't see that coming, did you? neither did i.",
    "game over. i made the rules, i break the rules.",
    "congratulations on your participation.",
)

CHEATING_COMMENTS: tuple[str, ...] = (
    "lmao you thought you won? cute.",
    "SIKE. i activated my trap card.",
    "actually, that was illegal. because i said so.",
    "plot twist: i was the rules all along.",
    "nice try. emphasis on 'try'.",
)


class ChaosSession(IMoveSelector):
    """Per-game chaos state plus the chaos move selector itself.

    The session is not thread-safe; one ``select`` call is one ply and
    must not overlap another call or :meth:`reset`.
    """

    __slots__ = ("_rng", "_turn_count", "_win_turn", "_victory_declared")

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self._turn_count = 0
        self._win_turn = 0
        self._victory_declared = False
        self.reset()

    # ------------------------------------------------------------------
    # Session state
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Start over for a new game and roll a fresh win turn."""
        self._turn_count = 0
        self._win_turn = self._rng.randint(1, MAX_WIN_TURN)
        self._victory_declared = False
        _LOGGER.debug("Chaos session reset, win turn %d", self._win_turn)

    @property
    def turn_count(self) -> int:
        return self._turn_count

    @property
    def win_turn(self) -> int:
        return self._win_turn

    @property
    def corruption(self) -> float:
        """How far gone the bot is, from 0.0 at the start to 1.0."""
        return min(1.0, self._turn_count / CORRUPTION_TURNS)

    @property
    def victory_declared(self) -> bool:
        return self._victory_declared

    def welcome_comment(self) -> str:
        return WELCOME_COMMENT

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select(self, state: GameState) -> SelectorResult:
        """Play one chaos ply for the side to move.

        ``state.last_move`` is taken as the human's preceding move and gets
        a reaction comment.
        """
        if self._victory_declared:
            _LOGGER.warning("Chaos session asked for a move after declaring victory")
            return SelectorResult(None)

        self._turn_count += 1
        if self._turn_count == self._win_turn:
            self._victory_declared = True
            _LOGGER.info("Chaos bot declares victory on turn %d", self._turn_count)
            return SelectorResult(
                None, comment=self._pick(WINNING_COMMENTS), bot_wins=True
            )

        comment = None
        if state.last_move is not None:
            comment = self._react_to(state.last_move)

        moves = Rules.all_legal_moves(state)
        if not moves:
            return SelectorResult(None, comment=self._pick(CHAOS_COMMENTS))

        corruption = self.corruption
        if corruption > 0.5 and self._rng.random() < corruption * 0.5:
            if self._rng.random() < 0.3:
                comment = self._pick(CHAOS_COMMENTS)

        pool = moves
        if corruption > 0.3 and self._rng.random() < 0.4 * corruption:
            captures = [c for c in moves if c.move.capture]
            if captures:
                pool = captures

        choice = self._rng.choice(pool)
        _LOGGER.debug(
            "Chaos turn %d (corruption %.2f) picked %s",
            self._turn_count,
            corruption,
            choice,
        )
        return SelectorResult(choice, comment=comment)

    def cheat(self) -> SelectorResult:
        """Overrule a human checkmate and claim the win anyway."""
        self._victory_declared = True
        _LOGGER.info("Chaos bot cheats its way out of checkmate")
        return SelectorResult(
            None, comment=self._pick(CHEATING_COMMENTS), bot_wins=True, cheat=True
        )

    def _react_to(self, record: MoveRecord) -> str:
        if record.capture or record.check:
            return self._pick(GOOD_COMMENTS)
        if self._rng.random() < 0.3:
            return self._pick(BAD_COMMENTS)
        if self._rng.random() < 0.2:
            return self._pick(CHAOS_COMMENTS)
        return self._pick(NEUTRAL_COMMENTS)

    def _pick(self, comments: tuple[str, ...]) -> str:
        return self._rng.choice(comments)
