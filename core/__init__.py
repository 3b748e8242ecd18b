# Config Comparator v1.0.0
"""
Core package for the config comparator.
Contains format detection, parsing, flattening and comparison logic.
"""
from core.comparison import (
    compare_flat_configs,
    compare_config_files,
    create_inline_diff,
    format_value_compact,
    ComparisonResult,
    ValueDifference
)
from core.detector import detect_format
from core.errors import (
    ConfigComparatorError,
    ConfigFileError,
    ConfigParseError,
    FormatUndetectedError
)
from core.file_parser import (
    parse_config,
    parse_config_file,
    resolve_format,
    ParsedConfig
)
from core.flatten import flatten_config
from core.formats import (
    ConfigFormat,
    SUPPORTED_EXTENSIONS,
    format_from_extension
)
from core.report import generate_report, generate_summary
from core.values import stringify_value

__all__ = [
    "compare_flat_configs",
    "compare_config_files",
    "create_inline_diff",
    "format_value_compact",
    "ComparisonResult",
    "ValueDifference",
    "detect_format",
    "ConfigComparatorError",
    "ConfigFileError",
    "ConfigParseError",
    "FormatUndetectedError",
    "parse_config",
    "parse_config_file",
    "resolve_format",
    "ParsedConfig",
    "flatten_config",
    "ConfigFormat",
    "SUPPORTED_EXTENSIONS",
    "format_from_extension",
    "generate_report",
    "generate_summary",
    "stringify_value"
]
