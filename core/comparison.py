"""
Configuration Comparison Engine

Compares two flattened configurations key by key: which keys exist on
only one side, which are shared, and which shared keys hold different
values. Values are compared by their canonical string form (see
core.values), so 5432 and "5432" count as the same setting.
"""
import html
import logging
from dataclasses import dataclass, field, replace
from typing import Any, Optional

from core.file_parser import parse_config
from core.flatten import flatten_config
from core.formats import ConfigFormat
from core.values import Scalar, stringify_value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValueDifference:
    """A key present on both sides whose values disagree."""
    key: str
    source_value: Any
    target_value: Any

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "source_value": self.source_value,
            "target_value": self.target_value,
        }


@dataclass(frozen=True)
class ComparisonResult:
    """Result of comparing two configurations."""
    only_in_source: tuple[str, ...] = ()
    only_in_target: tuple[str, ...] = ()
    common: tuple[str, ...] = ()
    value_differences: tuple[ValueDifference, ...] = field(default_factory=tuple)

    # Filled in by compare_config_files
    source_file: Optional[str] = None
    target_file: Optional[str] = None
    source_format: Optional[ConfigFormat] = None
    target_format: Optional[ConfigFormat] = None

    @property
    def matching_count(self) -> int:
        return len(self.common) - len(self.value_differences)

    @property
    def is_identical(self) -> bool:
        return not (self.only_in_source or self.only_in_target or self.value_differences)

    def with_files(
        self,
        source_file: str,
        target_file: str,
        source_format: ConfigFormat,
        target_format: ConfigFormat,
    ) -> "ComparisonResult":
        """Return a copy stamped with file metadata."""
        return replace(
            self,
            source_file=source_file,
            target_file=target_file,
            source_format=source_format,
            target_format=target_format,
        )

    def to_dict(self) -> dict:
        return {
            "source_file": self.source_file,
            "target_file": self.target_file,
            "source_format": self.source_format.value if self.source_format else None,
            "target_format": self.target_format.value if self.target_format else None,
            "is_identical": self.is_identical,
            "only_in_source": list(self.only_in_source),
            "only_in_target": list(self.only_in_target),
            "common": list(self.common),
            "value_differences": [d.to_dict() for d in self.value_differences],
            "matching_count": self.matching_count,
        }


def compare_flat_configs(source: dict[str, Scalar], target: dict[str, Scalar]) -> ComparisonResult:
    """
    Compare two flattened configurations.

    Key lists are sorted as plain strings, so "a[10]" sorts before "a[2]".

    Args:
        source: Flattened source config (e.g. UAT)
        target: Flattened target config (e.g. production)

    Returns:
        ComparisonResult without file metadata
    """
    source_keys = set(source)
    target_keys = set(target)

    common = sorted(source_keys & target_keys)

    differences = tuple(
        ValueDifference(key=key, source_value=source[key], target_value=target[key])
        for key in common
        if stringify_value(source[key]) != stringify_value(target[key])
    )

    return ComparisonResult(
        only_in_source=tuple(sorted(source_keys - target_keys)),
        only_in_target=tuple(sorted(target_keys - source_keys)),
        common=tuple(common),
        value_differences=differences,
    )


def compare_config_files(
    source_content: str,
    source_filename: str,
    target_content: str,
    target_filename: str,
    separator: str = ".",
) -> ComparisonResult:
    """
    Main entry point for comparing two configuration documents.

    Both documents are parsed before anything is compared, so a bad
    document raises without producing a partial result.

    Raises:
        FormatUndetectedError, ConfigParseError
    """
    source_parsed = parse_config(source_content, source_filename)
    target_parsed = parse_config(target_content, target_filename)

    source_flat = flatten_config(source_parsed.tree, separator=separator)
    target_flat = flatten_config(target_parsed.tree, separator=separator)

    result = compare_flat_configs(source_flat, target_flat).with_files(
        source_file=source_filename,
        target_file=target_filename,
        source_format=source_parsed.format,
        target_format=target_parsed.format,
    )

    logger.info(
        f"Compared {source_filename} ({source_parsed.format.value}) with "
        f"{target_filename} ({target_parsed.format.value}): "
        f"{len(result.only_in_source)} missing in target, "
        f"{len(result.only_in_target)} missing in source, "
        f"{len(result.value_differences)} value differences"
    )
    return result


def create_inline_diff(old_str: Any, new_str: Any) -> dict:
    """
    Create inline diff highlighting showing what changed between two values.

    Splits both strings into a shared prefix, the differing middles and a
    shared suffix, and returns HTML versions with the middles wrapped.
    The plain fields hold raw text; the HTML fields are escaped.
    """
    old_str = stringify_value(old_str)
    new_str = stringify_value(new_str)

    # Find common prefix
    prefix_len = 0
    while (prefix_len < len(old_str) and
           prefix_len < len(new_str) and
           old_str[prefix_len] == new_str[prefix_len]):
        prefix_len += 1

    # Find common suffix, not overlapping the prefix
    suffix_len = 0
    while (suffix_len < (len(old_str) - prefix_len) and
           suffix_len < (len(new_str) - prefix_len) and
           old_str[len(old_str) - 1 - suffix_len] == new_str[len(new_str) - 1 - suffix_len]):
        suffix_len += 1

    prefix = old_str[:prefix_len]
    suffix = old_str[len(old_str) - suffix_len:] if suffix_len > 0 else ""
    old_middle = old_str[prefix_len:len(old_str) - suffix_len]
    new_middle = new_str[prefix_len:len(new_str) - suffix_len]

    safe_prefix = html.escape(prefix)
    safe_suffix = html.escape(suffix)
    safe_old = html.escape(old_middle)
    safe_new = html.escape(new_middle)

    return {
        "prefix": prefix,
        "suffix": suffix,
        "old_changed": old_middle,
        "new_changed": new_middle,
        "old_html": f"{safe_prefix}<span class='hl-removed'>{safe_old}</span>{safe_suffix}" if old_middle else f"{safe_prefix}{safe_suffix}",
        "new_html": f"{safe_prefix}<span class='hl-added'>{safe_new}</span>{safe_suffix}" if new_middle else f"{safe_prefix}{safe_suffix}"
    }


def format_value_compact(value: Any) -> str:
    """Format a value for display in a compact way."""
    if isinstance(value, str):
        return f'"{value}"'
    return stringify_value(value)
