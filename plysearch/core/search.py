"""Negamax search with alpha-beta pruning.

Scores are always from the point of view of the player passed in. Terminal
nodes are scored with depth-biased sentinels:

- ``-INF + depth`` when the player has lost its king. A loss found with more
  depth left scores less badly, so a lost side still delays the loss.
- ``-INF - depth`` when the player has no legal move, checkmate and
  stalemate alike.

Recursion never goes deeper than ``depth + 1`` frames.
"""

from enum import Enum
from typing import NamedTuple, Optional

import chess

from plysearch.core.board import Position
from plysearch.core.evaluator import LeafEvaluator, legal_children
from plysearch.core.pieces import Color

INF = 1000000


class MoveOrdering(Enum):
    """Order children by their shallow leaf score before recursing."""

    ASCENDING = "ascending"
    DESCENDING = "descending"
    NONE = "none"


class SearchResult(NamedTuple):
    move: Optional[chess.Move]
    score: int


class AlphaBetaSearch:
    """One search context: evaluator, ordering policy and a node counter.

    Not shared between threads; each parallel worker builds its own.
    """

    def __init__(self, leaf_eval: LeafEvaluator,
                 ordering: MoveOrdering = MoveOrdering.ASCENDING):
        self.leaf_eval = leaf_eval
        self.ordering = MoveOrdering(ordering)
        self.nodes = 0

    def search(self, position: Position, player: Color,
               alpha: int = -INF, beta: int = INF, depth: int = 0) -> SearchResult:
        self.nodes += 1

        # must come first, so that we never trade a king for a king
        if not position.has_king(player):
            return SearchResult(None, -INF + depth)

        # a negative depth is treated as a leaf too
        if depth <= 0:
            return SearchResult(None, self.leaf_eval(position, player))

        children = legal_children(position, player)

        # ordering only pays off at least two levels above the leaves
        if depth > 1 and self.ordering is not MoveOrdering.NONE:
            children = self._order(children, player)

        opponent = player.opposite()
        best_value = -INF - depth
        best_move = None
        for move, child in children:
            value = -self.search(child, opponent, -beta, -alpha, depth - 1).score
            # >= so that ties go to the later move
            if value >= best_value:
                best_value = value
                best_move = move

            alpha = max(alpha, value)
            if alpha >= beta:
                break

        return SearchResult(best_move, best_value)

    def _order(self, children, player: Color):
        # sort is stable, equal scores keep generation order
        return sorted(
            children,
            key=lambda mc: self.leaf_eval(mc[1], player),
            reverse=self.ordering is MoveOrdering.DESCENDING,
        )


def search(position: Position, player: Color, leaf_eval: LeafEvaluator,
           alpha: int = -INF, beta: int = INF, depth: int = 0,
           ordering: MoveOrdering = MoveOrdering.ASCENDING) -> SearchResult:
    """Best move for `player` (or None) and its score."""
    return AlphaBetaSearch(leaf_eval, ordering).search(position, player, alpha, beta, depth)


def alphabeta(position: Position, player: Color, leaf_eval: LeafEvaluator, depth: int,
              ordering: MoveOrdering = MoveOrdering.ASCENDING) -> int:
    """How good is `position` for `player`, searched `depth` plies with a full window."""
    return search(position, player, leaf_eval, -INF, INF, depth, ordering).score
