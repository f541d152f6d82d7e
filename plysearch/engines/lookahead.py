"""Shallow engines: static evaluation of each move, or one ply of reply."""

from plysearch.core.evaluator import LeafEvaluator, legal_children, material
from plysearch.core.parallel import ScoredMove
from plysearch.core.search import INF
from plysearch.engines.base import ScoringEngine


class Lookahead0(ScoringEngine):
    """Scores each move by `leaf_eval` on the resulting position."""

    def __init__(self, leaf_eval: LeafEvaluator):
        self.leaf_eval = leaf_eval

    def value(self, position, player) -> int:
        return self.leaf_eval(position, player)

    def eval_moves(self, position, player):
        return [ScoredMove(move, self.value(child, player))
                for move, child in legal_children(position, player)]


class Greedy(Lookahead0):
    """Greedily takes material, no lookahead or positional value."""

    def __init__(self):
        super().__init__(material)


class Lookahead1(Lookahead0):
    """Assumes the opponent answers with its best reply by `leaf_eval`."""

    def value(self, position, player) -> int:
        opponent = player.opposite()
        replies = [self.leaf_eval(child, opponent)
                   for _, child in legal_children(position, opponent)]
        # no reply at all is the best outcome for the mover
        return -max(replies, default=-INF)
