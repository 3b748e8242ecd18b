# Config Comparator v1.0.0
"""
Services package for the config comparator.
Contains file access, comparison-target suggestions and the pair watcher.
"""
from services.files import (
    read_config_text,
    read_and_compare,
    suggest_comparison_targets
)
from services.watcher import ComparisonWatcher, PairChangeHandler

__all__ = [
    "read_config_text",
    "read_and_compare",
    "suggest_comparison_targets",
    "ComparisonWatcher",
    "PairChangeHandler"
]
