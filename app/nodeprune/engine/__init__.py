"""Pruning engine.

This module provides the tree walker, the concurrent deletion pipeline,
run statistics, and the first-error-wins error policy.
"""

from nodeprune.engine.errors import DeletionError, ErrorSlot, PruneError, TraversalError
from nodeprune.engine.pipeline import DeletionPipeline, WorkUnit, default_workers
from nodeprune.engine.pruner import DEFAULT_DIRECTORY, PruneOptions, Pruner, PruneResult, prune
from nodeprune.engine.stats import Stats, StatsAggregator

__all__ = [
    "DEFAULT_DIRECTORY",
    "DeletionError",
    "DeletionPipeline",
    "ErrorSlot",
    "PruneError",
    "PruneOptions",
    "PruneResult",
    "Pruner",
    "Stats",
    "StatsAggregator",
    "TraversalError",
    "WorkUnit",
    "default_workers",
    "prune",
]
