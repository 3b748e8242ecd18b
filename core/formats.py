"""
Configuration format tags and the extension fallback table.
"""
from enum import Enum
from pathlib import PurePath
from typing import Optional


class ConfigFormat(str, Enum):
    JSON = "json"
    YAML = "yaml"
    TOML = "toml"
    INI = "ini"
    XML = "xml"
    PROPERTIES = "properties"


EXTENSION_FORMATS: dict[str, ConfigFormat] = {
    ".json": ConfigFormat.JSON,
    ".yaml": ConfigFormat.YAML,
    ".yml": ConfigFormat.YAML,
    ".toml": ConfigFormat.TOML,
    ".ini": ConfigFormat.INI,
    ".xml": ConfigFormat.XML,
    ".properties": ConfigFormat.PROPERTIES,
}

SUPPORTED_EXTENSIONS = tuple(EXTENSION_FORMATS.keys())


def format_from_extension(filepath: str) -> Optional[ConfigFormat]:
    """
    Look up a format from the file extension (case-insensitive).

    Only used as a fallback when content sniffing gives no answer.
    """
    suffix = PurePath(filepath).suffix.lower()
    return EXTENSION_FORMATS.get(suffix)
