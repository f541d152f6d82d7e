"""Move selection engines and the name registry."""

from .alphabeta import AlphaBeta, ParAlphaBeta
from .base import Engine, RandomEngine, ScoringEngine, pick_best
from .lookahead import Greedy, Lookahead0, Lookahead1
from .registry import UnknownEngineError, available_engines, resolve
