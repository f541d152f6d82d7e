# plysearch/config.py
from dataclasses import dataclass, field
from typing import Optional
import logging
import os
import random
import tomllib  # python >=3.11

logger = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    depth: int = 3
    threads: Optional[int] = None  # None lets the executor pick its default
    executor: str = "process"  # "thread" runs under the GIL, no speedup
    move_ordering: str = "ascending"


@dataclass
class EngineConfig:
    default: str = "ab.mat"
    seed: int = 0


@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    engine: EngineConfig = field(default_factory=EngineConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "plysearch.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        if "search" in raw:
            for k, v in raw["search"].items():
                if hasattr(cfg.search, k):
                    setattr(cfg.search, k, v)
        if "engine" in raw:
            for k, v in raw["engine"].items():
                if hasattr(cfg.engine, k):
                    setattr(cfg.engine, k, v)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"])
        return cfg


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Build the explicit random source handed to engines for tie-breaking."""
    return random.Random(CONFIG.engine.seed if seed is None else seed)


def configure_logging(level: Optional[str] = None):
    """Install a root handler at CONFIG.log_level (or the given level)."""
    logging.basicConfig(
        level=(level or CONFIG.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("PLYSEARCH_CONFIG_TOML", "plysearch.toml"))
# allow env override of depth for quick debugging
override_depth = os.environ.get("PLYSEARCH_SEARCH_DEPTH")
if override_depth:
    try:
        CONFIG.search.depth = int(override_depth)
    except ValueError:
        logger.warning("ignoring PLYSEARCH_SEARCH_DEPTH=%r: not an integer", override_depth)
