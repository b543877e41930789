"""nodeprune - remove unnecessary files from dependency trees."""

__version__ = "0.1.0"

from nodeprune.engine import (  # noqa: E402
    PruneError,
    PruneOptions,
    Pruner,
    PruneResult,
    Stats,
    prune,
)

__all__ = [
    "PruneError",
    "PruneOptions",
    "PruneResult",
    "Pruner",
    "Stats",
    "__version__",
    "prune",
]
