"""
Exceptions raised by the comparison pipeline.

Every failure is deterministic (bad content or an unreadable file),
so nothing here is retried. Callers translate these into user messages.
"""
from typing import Optional


class ConfigComparatorError(Exception):
    """Base class for all pipeline errors."""


class FormatUndetectedError(ConfigComparatorError):
    """Neither content sniffing nor the file extension identified a format."""

    def __init__(self, filepath: str):
        self.filepath = filepath
        super().__init__(f"Unable to detect format for {filepath}")


class ConfigParseError(ConfigComparatorError):
    """Content was routed to a parser whose grammar rejected it."""

    def __init__(self, config_format, filepath: Optional[str], reason: str):
        self.config_format = config_format
        self.filepath = filepath
        self.reason = reason
        fmt = getattr(config_format, "value", config_format)
        where = f" in {filepath}" if filepath else ""
        super().__init__(f"Invalid {fmt}{where}: {reason}")


class ConfigFileError(ConfigComparatorError):
    """A configuration file could not be read from disk."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")
