"""
Plain-text rendering of comparison results.
"""
from core.comparison import ComparisonResult, format_value_compact

# Category labels, shared by the summary and the detailed report
MISSING_IN_TARGET = "🔴 Missing in Target"
MISSING_IN_SOURCE = "🔵 Missing in Source"
VALUE_DIFFERENCES = "🟡 Value Differences"
MATCHING_KEYS = "✅ Matching Keys"


def _describe(filename, config_format) -> str:
    fmt = config_format.value if config_format is not None else "unknown"
    return f"{filename or '<memory>'} ({fmt})"


def generate_summary(result: ComparisonResult) -> str:
    """Generate a short summary of the comparison."""
    lines = [
        "📊 Config Comparison Summary",
        f"Source: {_describe(result.source_file, result.source_format)}",
        f"Target: {_describe(result.target_file, result.target_format)}",
        "",
        f"{MISSING_IN_TARGET}: {len(result.only_in_source)}",
        f"{MISSING_IN_SOURCE}: {len(result.only_in_target)}",
        f"{VALUE_DIFFERENCES}: {len(result.value_differences)}",
        f"{MATCHING_KEYS}: {result.matching_count}",
    ]
    return "\n".join(lines)


def generate_report(result: ComparisonResult, include_matching: bool = False) -> str:
    """
    Generate a detailed report listing every key per category.

    Matching keys are only listed when include_matching is set; their
    count is always shown.
    """
    lines = [
        "=" * 70,
        "CONFIG COMPARISON REPORT",
        "=" * 70,
        "",
        f"Source:           {_describe(result.source_file, result.source_format)}",
        f"Target:           {_describe(result.target_file, result.target_format)}",
        "",
    ]

    if result.is_identical:
        lines.extend([
            "-" * 40,
            "RESULT: NO DIFFERENCES FOUND",
            "-" * 40,
            "",
        ])

    lines.append(f"{MISSING_IN_TARGET} ({len(result.only_in_source)})")
    for key in result.only_in_source:
        lines.append(f"  - {key}")
    lines.append("")

    lines.append(f"{MISSING_IN_SOURCE} ({len(result.only_in_target)})")
    for key in result.only_in_target:
        lines.append(f"  + {key}")
    lines.append("")

    lines.append(f"{VALUE_DIFFERENCES} ({len(result.value_differences)})")
    for diff in result.value_differences:
        lines.append(
            f"  ~ {diff.key}: {format_value_compact(diff.source_value)}"
            f" → {format_value_compact(diff.target_value)}"
        )
    lines.append("")

    lines.append(f"{MATCHING_KEYS} ({result.matching_count})")
    if include_matching:
        differing = {d.key for d in result.value_differences}
        for key in result.common:
            if key not in differing:
                lines.append(f"  = {key}")
    lines.append("")

    lines.extend([
        "=" * 70,
        "END OF REPORT",
        "=" * 70,
    ])

    return "\n".join(lines)
