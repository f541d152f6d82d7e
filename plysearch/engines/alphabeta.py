"""Alpha-beta engines, sequential and with a parallel root."""

import logging
import time

from plysearch.core.evaluator import LeafEvaluator, legal_children
from plysearch.core.parallel import ScoredMove, eval_root_moves
from plysearch.core.search import INF, AlphaBetaSearch, MoveOrdering
from plysearch.core.utils import format_info
from plysearch.engines.base import ScoringEngine, pick_best

logger = logging.getLogger(__name__)


def _check_depth(depth: int) -> int:
    if depth < 1:
        raise ValueError(f"engine depth must be >= 1, got {depth}")
    return depth


class AlphaBeta(ScoringEngine):
    """Plays the best move of a full-depth search from the root.

    Ties go to the later move in search order, so no randomness is used.
    """

    def __init__(self, depth: int, leaf_eval: LeafEvaluator,
                 ordering: MoveOrdering = MoveOrdering.ASCENDING):
        self.depth = _check_depth(depth)
        self.leaf_eval = leaf_eval
        self.ordering = MoveOrdering(ordering)

    def _searcher(self) -> AlphaBetaSearch:
        return AlphaBetaSearch(self.leaf_eval, self.ordering)

    def eval_moves(self, position, player):
        """Full-window score of every legal root move, one move at a time."""
        opponent = player.opposite()
        scored = []
        for move, child in legal_children(position, player):
            result = self._searcher().search(child, opponent, -INF, INF, self.depth - 1)
            scored.append(ScoredMove(move, -result.score))
        return scored

    def select_move(self, rng, position, player):
        searcher = self._searcher()
        start = time.time()
        move, score = searcher.search(position, player, -INF, INF, self.depth)
        logger.debug(format_info(self.depth, score, searcher.nodes, time.time() - start,
                                 [move] if move else []))
        return move


class ParAlphaBeta(ScoringEngine):
    """Searches root moves on a worker pool, then breaks ties with `rng`.

    Tie-breaking happens after the join, on the calling thread, so the
    random source is never touched by workers.
    """

    def __init__(self, depth: int, leaf_eval: LeafEvaluator, max_workers=None,
                 executor: str = "process", ordering: MoveOrdering = MoveOrdering.ASCENDING):
        self.depth = _check_depth(depth)
        self.leaf_eval = leaf_eval
        self.max_workers = max_workers
        self.executor = executor
        self.ordering = MoveOrdering(ordering)

    def eval_moves(self, position, player):
        return eval_root_moves(position, player, self.leaf_eval, self.depth,
                               max_workers=self.max_workers, executor=self.executor,
                               ordering=self.ordering)

    def select_move(self, rng, position, player):
        start = time.time()
        scored = self.eval_moves(position, player)
        move = pick_best(rng, scored)
        if move is not None:
            logger.debug("par depth %d: %s scores %d over %d root moves in %.3fs", self.depth,
                         move.uci(), max(s.score for s in scored), len(scored), time.time() - start)
        return move
