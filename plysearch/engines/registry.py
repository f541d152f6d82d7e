"""Engine names as used on the command line and in config files."""

from typing import Callable, Dict, List

from plysearch.config import CONFIG
from plysearch.core.evaluator import material, material_and_mobility
from plysearch.engines.alphabeta import AlphaBeta, ParAlphaBeta
from plysearch.engines.base import Engine, RandomEngine
from plysearch.engines.lookahead import Greedy, Lookahead0, Lookahead1


class UnknownEngineError(ValueError):
    def __init__(self, name: str):
        super().__init__(f"unknown engine: {name}")
        self.name = name


def _ab(depth, leaf_eval):
    cfg = CONFIG.search
    return AlphaBeta(depth, leaf_eval, ordering=cfg.move_ordering)


def _par_ab(depth, leaf_eval):
    cfg = CONFIG.search
    return ParAlphaBeta(depth, leaf_eval, max_workers=cfg.threads,
                        executor=cfg.executor, ordering=cfg.move_ordering)


# factories, so that nothing is built for an unknown name
ENGINES: Dict[str, Callable[[], Engine]] = {
    "random": RandomEngine,
    "greedy": Greedy,
    "l0.mat": lambda: Lookahead0(material),
    "l1.mat": lambda: Lookahead1(material),
    "l1.mat+mob": lambda: Lookahead1(material_and_mobility),
    "ab2.mat": lambda: _ab(2, material),
    "ab3.mat": lambda: _ab(3, material),
    "ab4.mat": lambda: _ab(4, material),
    "ab3.mat+mob": lambda: _ab(3, material_and_mobility),
    "ab.mat": lambda: _ab(CONFIG.search.depth, material),
    "par_ab3.mat": lambda: _par_ab(3, material),
    "par_ab4.mat": lambda: _par_ab(4, material),
    "par_ab.mat": lambda: _par_ab(CONFIG.search.depth, material),
}


def resolve(name: str) -> Engine:
    try:
        factory = ENGINES[name]
    except KeyError:
        raise UnknownEngineError(name) from None
    return factory()


def available_engines() -> List[str]:
    return sorted(ENGINES)
