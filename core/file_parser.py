"""
File parsing utilities for the config comparator.

Each supported format has a small adapter that turns raw text into a
nested tree of dicts, lists and scalars. parse_config() picks the adapter
from the content first and the file extension second.
"""
import configparser
import logging
import tomllib
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from core.detector import detect_format, strict_json_loads
from core.errors import ConfigFileError, ConfigParseError, FormatUndetectedError
from core.formats import ConfigFormat, format_from_extension

logger = logging.getLogger(__name__)

XML_ATTRIBUTE_PREFIX = "@_"
XML_TEXT_KEY = "#text"
XML_NAMESPACE_URI = "http://www.w3.org/XML/1998/namespace"

# Holds keys that appear before the first [section] of an INI file
_INI_ROOT_SECTION = "__config_comparator_root__"


@dataclass
class ParsedConfig:
    """Result of parsing a configuration document."""
    tree: Any
    format: ConfigFormat
    filename: str
    file_path: Optional[str] = None

    # "content" when sniffed, "extension" when the fallback table was used
    format_source: str = "content"


def parse_json(content: str) -> Any:
    return strict_json_loads(content)


def parse_yaml(content: str) -> Any:
    """
    Parse YAML 1.2, so `on:` stays a key and `yes`/`no` stay strings.
    """
    # An empty document loads as None; downstream expects a mapping
    loaded = YAML(typ="safe", pure=True).load(content)
    return {} if loaded is None else loaded


def parse_toml(content: str) -> dict:
    return tomllib.loads(content)


def _strip_quotes(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def parse_ini(content: str) -> dict:
    """
    Parse INI content permissively.

    Keys before the first section are kept at the top level, duplicate
    keys resolve to the last occurrence, key case is preserved and
    [DEFAULT] is treated as an ordinary section.
    """
    parser = configparser.ConfigParser(
        delimiters=("=",),
        allow_no_value=True,
        strict=False,
        interpolation=None,
        inline_comment_prefixes=(";", "#"),
        default_section=_INI_ROOT_SECTION + "defaults",
    )
    parser.optionxform = str
    parser.read_string(f"[{_INI_ROOT_SECTION}]\n{content}")

    result: dict[str, Any] = {}
    for section in parser.sections():
        values = {
            key: _strip_quotes(raw)
            for key, raw in parser.items(section, raw=True)
        }
        if section == _INI_ROOT_SECTION:
            result.update(values)
        else:
            result[section] = values
    return result


def _qualified_name(name: str, prefixes: dict[str, str]) -> str:
    """Turn ElementTree's `{uri}local` back into `prefix:local`."""
    if not name.startswith("{"):
        return name
    uri, local = name[1:].split("}", 1)
    prefix = prefixes.get(uri, "")
    return f"{prefix}:{local}" if prefix else local


def _element_to_node(
    element: ET.Element,
    prefixes: dict[str, str],
    declarations: dict[int, list[tuple[str, str]]],
) -> Any:
    """Convert an element to a dict, a list-bearing dict or its text."""
    node: dict[str, Any] = {}

    # Namespace declarations read like the attributes they are in the source
    for prefix, uri in declarations.get(id(element), ()):
        name = f"xmlns:{prefix}" if prefix else "xmlns"
        node[f"{XML_ATTRIBUTE_PREFIX}{name}"] = uri

    for name, value in element.attrib.items():
        node[f"{XML_ATTRIBUTE_PREFIX}{_qualified_name(name, prefixes)}"] = value

    text = element.text.strip() if element.text else ""
    children = list(element)

    if not children and not node:
        return text

    if text:
        node[XML_TEXT_KEY] = text

    for child in children:
        tag = _qualified_name(child.tag, prefixes)
        child_node = _element_to_node(child, prefixes, declarations)
        if tag in node:
            # Repeated tags collapse into a list
            if not isinstance(node[tag], list):
                node[tag] = [node[tag]]
            node[tag].append(child_node)
        else:
            node[tag] = child_node

    return node


def parse_xml(content: str) -> dict:
    """
    Parse XML keeping tag names as written.

    Namespaced tags keep their source prefix (or none for the default
    namespace) instead of ElementTree's `{uri}` form, and xmlns
    declarations are kept as `@_xmlns` attributes.
    """
    parser = ET.XMLPullParser(events=("start-ns", "start"))
    parser.feed(content.strip())
    parser.close()

    prefixes = {XML_NAMESPACE_URI: "xml"}
    declarations: dict[int, list[tuple[str, str]]] = {}
    pending: list[tuple[str, str]] = []
    root = None

    for event, data in parser.read_events():
        if event == "start-ns":
            prefix, uri = data
            prefixes.setdefault(uri, prefix)
            pending.append((prefix, uri))
        else:
            if root is None:
                root = data
            if pending:
                declarations[id(data)] = pending
                pending = []

    return {_qualified_name(root.tag, prefixes): _element_to_node(root, prefixes, declarations)}


def parse_properties(content: str) -> dict:
    """
    Parse Java-style properties.

    Only the first '=' splits a line. Blank lines, '#' comments and lines
    without '=' are skipped. Values stay strings.
    """
    props: dict[str, str] = {}
    for line in content.split("\n"):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#") or "=" not in trimmed:
            continue
        key, value = trimmed.split("=", 1)
        props[key.strip()] = value.strip()
    return props


PARSERS: dict[ConfigFormat, Callable[[str], Any]] = {
    ConfigFormat.JSON: parse_json,
    ConfigFormat.YAML: parse_yaml,
    ConfigFormat.TOML: parse_toml,
    ConfigFormat.INI: parse_ini,
    ConfigFormat.XML: parse_xml,
    ConfigFormat.PROPERTIES: parse_properties,
}

# Exceptions the underlying grammars raise on bad input
PARSE_FAILURES = (
    ValueError,  # json.JSONDecodeError and tomllib.TOMLDecodeError
    YAMLError,
    configparser.Error,
    ET.ParseError,
)


def resolve_format(content: str, filepath: str) -> tuple[ConfigFormat, str]:
    """
    Decide which format to parse with.

    Returns:
        (format, source) where source is "content" or "extension"

    Raises:
        FormatUndetectedError: if neither content nor extension help
    """
    detected = detect_format(content)
    if detected is not None:
        return detected, "content"

    detected = format_from_extension(filepath)
    if detected is not None:
        logger.info(f"Content of {filepath} not recognised, using extension: {detected.value}")
        return detected, "extension"

    raise FormatUndetectedError(filepath)


def parse_config(content: str, filepath: str) -> ParsedConfig:
    """
    Parse configuration content with format detection.

    Args:
        content: Raw document text
        filepath: Path or filename, used only for the extension fallback

    Returns:
        ParsedConfig with the nested tree and the format used

    Raises:
        FormatUndetectedError: no format could be determined
        ConfigParseError: the selected parser rejected the content
    """
    # A leading byte-order mark would otherwise stick to the first key
    content = content.lstrip("\ufeff")
    config_format, format_source = resolve_format(content, filepath)

    try:
        tree = PARSERS[config_format](content)
    except PARSE_FAILURES as e:
        logger.warning(f"Error parsing {filepath} as {config_format.value}: {e}")
        raise ConfigParseError(config_format, filepath, str(e)) from e

    return ParsedConfig(
        tree=tree,
        format=config_format,
        filename=Path(filepath).name,
        format_source=format_source,
    )


def parse_config_file(file_path: str) -> ParsedConfig:
    """
    Read a configuration file from disk and parse it.

    Raises:
        ConfigFileError: the file is missing or not valid UTF-8 text
    """
    path = Path(file_path)

    try:
        content = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileError(str(path), str(e)) from e

    parsed = parse_config(content, str(path))
    parsed.file_path = str(path.absolute())
    return parsed
