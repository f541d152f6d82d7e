"""Core components: pieces, positions, evaluators, search and root fan-out."""

from .board import ParseError, Position
from .evaluator import legal_children, material, material_and_mobility, mobility, weighted
from .parallel import ScoredMove, eval_root_moves
from .pieces import Color, Piece
from .search import INF, AlphaBetaSearch, MoveOrdering, SearchResult, alphabeta, search
