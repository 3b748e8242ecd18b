"""
File access helpers for the host layer.

Reads configuration files from disk and suggests comparison partners,
the way the editor's quick-compare offered sibling files.
"""
import logging
from pathlib import Path
from typing import Iterable, Optional

from core import ComparisonResult, SUPPORTED_EXTENSIONS, compare_config_files
from core.errors import ConfigFileError

logger = logging.getLogger(__name__)


def read_config_text(file_path: str) -> str:
    """
    Read a configuration file as UTF-8 text.

    Raises:
        ConfigFileError: the file is missing, unreadable or not UTF-8
    """
    path = Path(file_path)
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileError(str(path), str(e)) from e


def read_and_compare(source_path: str, target_path: str, separator: str = ".") -> ComparisonResult:
    """
    Read both files from disk and compare them.

    Both files are read before parsing starts.

    Raises:
        ConfigFileError, FormatUndetectedError, ConfigParseError
    """
    source_content = read_config_text(source_path)
    target_content = read_config_text(target_path)

    return compare_config_files(
        source_content,
        Path(source_path).name,
        target_content,
        Path(target_path).name,
        separator=separator,
    )


def is_config_file(path: Path, extensions: Optional[Iterable[str]] = None) -> bool:
    """Check if a path has one of the supported config extensions."""
    allowed = {e.lower() for e in (extensions or SUPPORTED_EXTENSIONS)}
    return path.is_file() and path.suffix.lower() in allowed


def suggest_comparison_targets(
    source_path: str,
    extensions: Optional[Iterable[str]] = None
) -> list[Path]:
    """
    Suggest files to compare a source file with.

    Returns every config file in the source's directory except the
    source itself, sorted by name.

    Raises:
        ConfigFileError: the source's directory does not exist
    """
    source = Path(source_path).absolute()
    directory = source.parent

    if not directory.is_dir():
        raise ConfigFileError(str(directory), "directory not found")

    suggestions = sorted(
        (p for p in directory.iterdir() if p.name != source.name and is_config_file(p, extensions)),
        key=lambda p: p.name
    )
    logger.debug(f"Found {len(suggestions)} comparison candidates for {source.name}")
    return suggestions
