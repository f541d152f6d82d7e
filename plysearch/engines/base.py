"""Selection engine protocol: given a position and a player, propose a move."""

import logging
import random
from abc import ABC, abstractmethod
from typing import List, Optional

import chess

from plysearch.core.board import Position
from plysearch.core.evaluator import legal_children
from plysearch.core.parallel import ScoredMove
from plysearch.core.pieces import Color

logger = logging.getLogger(__name__)


class Engine(ABC):
    @abstractmethod
    def select_move(self, rng: random.Random, position: Position, player: Color) -> Optional[chess.Move]:
        """Return a legal move for `player`, or None when there is none."""


def pick_best(rng: random.Random, scored: List[ScoredMove]) -> Optional[chess.Move]:
    """Uniformly random choice among the moves with the maximum score."""
    if not scored:
        return None
    best = max(s.score for s in scored)
    ties = [s.move for s in scored if s.score == best]
    return rng.choice(ties)


class ScoringEngine(Engine):
    """Engine that scores every legal root move and plays one of the best."""

    @abstractmethod
    def eval_moves(self, position: Position, player: Color) -> List[ScoredMove]:
        ...

    def select_move(self, rng, position, player):
        scored = self.eval_moves(position, player)
        move = pick_best(rng, scored)
        logger.debug("%s: %d candidates, playing %s", type(self).__name__, len(scored),
                     move.uci() if move else None)
        return move


class RandomEngine(Engine):
    """Plays a uniformly random legal move."""

    def select_move(self, rng, position, player):
        children = legal_children(position, player)
        if not children:
            return None
        return rng.choice(children)[0]
