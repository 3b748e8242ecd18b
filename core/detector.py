"""
Content-based configuration format detection.

Detection is a cascade of rules evaluated in order. The first rule that
returns a format wins and later rules are never consulted. The filename
is never looked at here; extension lookup is the caller's fallback.
"""
import json
import logging
import re
import tomllib
from typing import Any, Callable, Optional

from core.formats import ConfigFormat

logger = logging.getLogger(__name__)

# A line holding only a bracketed section name, e.g. "[database]"
SECTION_HEADER_RE = re.compile(r"^\s*\[[^\[\]]+\]\s*$", re.MULTILINE)

# "name =" at the start of a line (no dots, TOML/INI style)
KEY_ASSIGNMENT_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_\-]*\s*=", re.MULTILINE)

# "server.port = 8080" at the start of a line, value must be non-blank
PROPERTY_ASSIGNMENT_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_.\-]*\s*=\s*\S", re.MULTILINE)

# "name:" at the start of a line
YAML_KEY_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*\s*:", re.MULTILINE)


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def strict_json_loads(text: str) -> Any:
    """json.loads that rejects the NaN, Infinity and -Infinity literals."""
    return json.loads(text, parse_constant=_reject_constant)


def _detect_json(content: str) -> Optional[ConfigFormat]:
    stripped = content.strip()
    if not (stripped.startswith("{") or stripped.startswith("[")):
        return None
    try:
        strict_json_loads(stripped)
    except ValueError:
        # "[section]" files land here; keep going
        return None
    return ConfigFormat.JSON


def _detect_xml(content: str) -> Optional[ConfigFormat]:
    if content.strip().startswith("<") or "<?xml" in content.lower():
        return ConfigFormat.XML
    return None


def _detect_toml_or_ini(content: str) -> Optional[ConfigFormat]:
    if not (SECTION_HEADER_RE.search(content) and KEY_ASSIGNMENT_RE.search(content)):
        return None
    # Prefer TOML whenever the strict grammar accepts the document
    try:
        tomllib.loads(content)
    except tomllib.TOMLDecodeError:
        return ConfigFormat.INI
    return ConfigFormat.TOML


def _detect_properties(content: str) -> Optional[ConfigFormat]:
    if PROPERTY_ASSIGNMENT_RE.search(content) and not SECTION_HEADER_RE.search(content):
        return ConfigFormat.PROPERTIES
    return None


def _detect_yaml(content: str) -> Optional[ConfigFormat]:
    if YAML_KEY_RE.search(content):
        return ConfigFormat.YAML
    return None


DETECTION_RULES: tuple[Callable[[str], Optional[ConfigFormat]], ...] = (
    _detect_json,
    _detect_xml,
    _detect_toml_or_ini,
    _detect_properties,
    _detect_yaml,
)


def detect_format(content: str) -> Optional[ConfigFormat]:
    """
    Guess the format of a configuration document from its content.

    Returns None for empty input or when no rule matches.
    """
    if not content or not content.strip():
        return None

    for rule in DETECTION_RULES:
        detected = rule(content)
        if detected is not None:
            logger.debug(f"Detected {detected.value} via {rule.__name__}")
            return detected

    return None
