#!/usr/bin/env python3
# Config Comparator v1.0.0
"""
Config Comparator CLI

Command-line interface for comparing configuration files.
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from config import settings
from core import (
    ComparisonResult,
    ConfigComparatorError,
    flatten_config,
    format_value_compact,
    generate_report,
    generate_summary,
    parse_config_file,
)

# Exit codes for `compare`
EXIT_IDENTICAL = 0
EXIT_DIFFERENT = 1
EXIT_ERROR = 2


def _fail(error: Exception) -> int:
    print(f"Error: {error}", file=sys.stderr)
    return EXIT_ERROR


def print_result(result: ComparisonResult, report: bool = False, as_json: bool = False):
    """Print a comparison result in the requested style."""
    if as_json:
        print(json.dumps(result.to_dict(), indent=2, default=str))
    elif report:
        print(generate_report(result))
    else:
        print(generate_summary(result))


def compare_files(
    source_path: str,
    target_path: str,
    report: bool = False,
    as_json: bool = False,
    separator: str = "."
) -> int:
    """Compare two config files and print differences."""
    from services import read_and_compare

    try:
        result = read_and_compare(source_path, target_path, separator)
    except ConfigComparatorError as e:
        return _fail(e)

    print_result(result, report=report, as_json=as_json)
    return EXIT_IDENTICAL if result.is_identical else EXIT_DIFFERENT


def detect_file(file_path: str) -> int:
    """Print the detected format of a file."""
    from core import resolve_format
    from services import read_config_text

    try:
        content = read_config_text(file_path)
        config_format, source = resolve_format(content, file_path)
    except ConfigComparatorError as e:
        return _fail(e)

    print(f"{config_format.value} (from {source})")
    return 0


def flatten_file(file_path: str, separator: str = ".") -> int:
    """Print the flattened key/value pairs of a file."""
    try:
        parsed = parse_config_file(file_path)
    except ConfigComparatorError as e:
        return _fail(e)

    for key, value in flatten_config(parsed.tree, separator=separator).items():
        print(f"{key} = {format_value_compact(value)}")
    return 0


def suggest_targets(file_path: str) -> int:
    """List sibling config files to compare a file with."""
    from services import suggest_comparison_targets

    try:
        suggestions = suggest_comparison_targets(file_path, settings.SUPPORTED_EXTENSIONS)
    except ConfigComparatorError as e:
        return _fail(e)

    if not suggestions:
        print(f"No other config files next to {Path(file_path).name}.")
        return 0

    print(f"Compare {Path(file_path).name} with:")
    for path in suggestions:
        print(f"  {path.name}    {path}")
    return 0


def watch_pair(source_path: str, target_path: str, separator: str = ".") -> int:
    """Watch two files and re-compare on every change."""
    from services import ComparisonWatcher
    import time

    def on_result(result: ComparisonResult):
        print(generate_summary(result))
        print()

    def on_error(error: ConfigComparatorError):
        print(f"⚠️  {error}", file=sys.stderr)

    watcher = ComparisonWatcher(
        source_path,
        target_path,
        on_result,
        on_error=on_error,
        separator=separator,
        debounce_seconds=settings.WATCH_DEBOUNCE_SECONDS
    )

    print(f"Watching: {source_path} <-> {target_path}")
    print("Press Ctrl+C to stop\n")

    try:
        watcher.start()
    except FileNotFoundError as e:
        return _fail(e)
    watcher.run_once()

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        print("\nStopping watcher...")
        watcher.stop()
    return 0


def run_server(host: str = "127.0.0.1", port: int = 8000, reload: bool = False):
    """Run the FastAPI server."""
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=host,
        port=port,
        reload=reload
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compare configuration files across environments",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # compare
    compare_parser = subparsers.add_parser("compare", help="Compare two config files")
    compare_parser.add_argument("source", help="Source file (e.g. UAT)")
    compare_parser.add_argument("target", help="Target file (e.g. production)")
    output = compare_parser.add_mutually_exclusive_group()
    output.add_argument("--report", action="store_true", help="Print the detailed report")
    output.add_argument("--json", action="store_true", help="Print the result as JSON")
    compare_parser.add_argument("--separator", default=settings.FLATTEN_SEPARATOR, help="Key path separator")

    # detect
    detect_parser = subparsers.add_parser("detect", help="Detect the format of a file")
    detect_parser.add_argument("file", help="Config file")

    # flatten
    flatten_parser = subparsers.add_parser("flatten", help="Print flattened keys of a file")
    flatten_parser.add_argument("file", help="Config file")
    flatten_parser.add_argument("--separator", default=settings.FLATTEN_SEPARATOR, help="Key path separator")

    # suggest
    suggest_parser = subparsers.add_parser("suggest", help="Suggest files to compare with")
    suggest_parser.add_argument("file", help="Source config file")

    # watch
    watch_parser = subparsers.add_parser("watch", help="Re-compare two files whenever they change")
    watch_parser.add_argument("source", help="Source file")
    watch_parser.add_argument("target", help="Target file")
    watch_parser.add_argument("--separator", default=settings.FLATTEN_SEPARATOR, help="Key path separator")

    # serve
    serve_parser = subparsers.add_parser("serve", help="Run the API server")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if not args.command:
        parser.print_help()
        return 0

    if args.command == "compare":
        return compare_files(args.source, args.target, args.report, args.json, args.separator)
    elif args.command == "detect":
        return detect_file(args.file)
    elif args.command == "flatten":
        return flatten_file(args.file, args.separator)
    elif args.command == "suggest":
        return suggest_targets(args.file)
    elif args.command == "watch":
        return watch_pair(args.source, args.target, args.separator)
    elif args.command == "serve":
        run_server(args.host, args.port, args.reload)
    return 0


if __name__ == "__main__":
    sys.exit(main())
