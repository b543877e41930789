"""Prune rules and classification.

This module provides the default rule tables, the immutable rule set,
rule set construction from configuration, and the keep/prune classifier.
"""

from nodeprune.rules.builder import build_rule_set
from nodeprune.rules.classifier import classify, is_excluded, is_glob, matches_any
from nodeprune.rules.defaults import DEFAULT_DIRECTORIES, DEFAULT_EXTENSIONS, DEFAULT_FILES
from nodeprune.rules.models import Entry, RuleSet, Verdict

__all__ = [
    "DEFAULT_DIRECTORIES",
    "DEFAULT_EXTENSIONS",
    "DEFAULT_FILES",
    "Entry",
    "RuleSet",
    "Verdict",
    "build_rule_set",
    "classify",
    "is_excluded",
    "is_glob",
    "matches_any",
]
