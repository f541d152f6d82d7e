"""Leaf evaluators.

A leaf evaluator is any callable ``f(position, player) -> int`` that is pure
and safe to call from several workers at once. Scores are from `player`'s
point of view and zero-sum: ``f(p, WHITE) == -f(p, BLACK)``.
"""

from typing import List, Protocol, Tuple

import chess

from plysearch.core.board import Position
from plysearch.core.pieces import Color


class LeafEvaluator(Protocol):
    """Pure (position, player) -> score. Must be callable concurrently."""

    def __call__(self, position: Position, player: Color) -> int: ...


def legal_children(position: Position, player: Color) -> List[Tuple[chess.Move, Position]]:
    """Pseudo-legal moves of `player` with the positions they lead to,
    minus those that leave `player` in check."""
    children = []
    for move in position.moves_for(player):
        child = position.apply(move)
        if not child.is_in_check(player):
            children.append((move, child))
    return children


def material(position: Position, player: Color) -> int:
    value = 0
    for r in range(8):
        for c in range(8):
            value += position.piece_at((r, c)).material()
    return value * player.sign


def mobility(position: Position, player: Color) -> int:
    """Legal move count of `player` minus that of the opponent."""
    return (len(legal_children(position, player))
            - len(legal_children(position, player.opposite())))


class weighted:
    """Sum of ``weight * f(position, player)`` over `terms`. Picklable whenever its
    terms are.
    """

    def __init__(self, *terms: Tuple[int, LeafEvaluator]):
        if not terms:
            raise ValueError("weighted() needs at least one term")
        self.terms = terms

    def __call__(self, position: Position, player: Color) -> int:
        return sum(w * f(position, player) for w, f in self.terms)


# material dominates; mobility only separates equal-material positions
material_and_mobility: LeafEvaluator = weighted((100, material), (1, mobility))
