"""Root fan-out: search every legal root move's subtree on a worker pool.

Workers receive only immutable inputs (a child position and a pure leaf
evaluator) and share nothing, so no locking is needed. Results come back in
root-move generation order because ``Executor.map`` preserves input order.
"""

import logging
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from typing import List, NamedTuple, Optional

import chess

from plysearch.core.board import Position
from plysearch.core.evaluator import LeafEvaluator, legal_children
from plysearch.core.pieces import Color
from plysearch.core.search import INF, AlphaBetaSearch, MoveOrdering

logger = logging.getLogger(__name__)


class ScoredMove(NamedTuple):
    move: chess.Move
    score: int


def _search_child(child: Position, opponent: Color, leaf_eval: LeafEvaluator,
                  depth: int, ordering: MoveOrdering) -> int:
    return -AlphaBetaSearch(leaf_eval, ordering).search(child, opponent, -INF, INF, depth).score


def _search_child_fen(fen: str, opponent: Color, leaf_eval: LeafEvaluator,
                      depth: int, ordering: MoveOrdering) -> int:
    # process workers get the position as FEN, like the GUI engine pool does
    return _search_child(Position.from_fen(fen), opponent, leaf_eval, depth, ordering)


def _make_executor(kind: str, max_workers: Optional[int]) -> Executor:
    if kind == "thread":
        return ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="plysearch")
    if kind == "process":
        return ProcessPoolExecutor(max_workers=max_workers)
    raise ValueError(f"unknown executor: {kind!r}")


def eval_root_moves(position: Position, player: Color, leaf_eval: LeafEvaluator, depth: int,
                    max_workers: Optional[int] = None, executor: str = "process",
                    ordering: MoveOrdering = MoveOrdering.ASCENDING) -> List[ScoredMove]:
    """Score each legal move of `player` with a full-window search of depth - 1.

    The default process pool needs a picklable `leaf_eval` (any module-level
    function or a `weighted` instance). ``executor="thread"`` accepts any
    callable but gives no speedup, since the search holds the GIL. A depth
    below 1 still looks at the root moves and evaluates the resulting
    positions directly.
    """
    children = legal_children(position, player)
    if not children:
        return []

    opponent = player.opposite()
    sub_depth = max(depth - 1, 0)
    n = len(children)
    logger.debug("fan-out: %d root moves, depth %d, %s executor", n, depth, executor)

    with _make_executor(executor, max_workers) as pool:
        if executor == "process":
            scores = pool.map(_search_child_fen, [child.fen() for _, child in children],
                              [opponent] * n, [leaf_eval] * n, [sub_depth] * n, [ordering] * n)
        else:
            scores = pool.map(_search_child, [child for _, child in children],
                              [opponent] * n, [leaf_eval] * n, [sub_depth] * n, [ordering] * n)
        return [ScoredMove(move, score) for (move, _), score in zip(children, scores)]
