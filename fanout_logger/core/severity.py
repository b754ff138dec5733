"""
Severity enumeration

Ordered severity ranks used for filtering and presentation.
"""

from enum import IntEnum
from typing import Dict, Union


class Severity(IntEnum):
    """
    Severity enumeration.

    Ranks are contiguous (0..4) and ordered by declaration, so plain
    comparison drives threshold filtering.
    """

    DEBUG = 0       # Diagnostic detail
    INFO = 1        # Informational messages
    WARNING = 2     # Something unexpected, still working
    ERROR = 3       # An operation failed
    FATAL = 4       # The application cannot continue

    def __str__(self) -> str:
        """String representation of severity."""
        return self.name

    @classmethod
    def from_string(cls, name: str) -> "Severity":
        """
        Convert string to Severity.

        Args:
            name: Severity name (case-insensitive, ``WARN`` accepted)

        Returns:
            Severity enum value

        Raises:
            ValueError: If name is not valid
        """
        key = name.strip().upper()
        key = SEVERITY_ALIASES.get(key, key)
        if key in cls.__members__:
            return cls[key]
        raise ValueError(f"Invalid severity: {name}")

    @property
    def label(self) -> str:
        """Upper-case name padded for column alignment."""
        return f"{self.name:<{LABEL_WIDTH}}"

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this severity.

        Returns:
            ANSI escape sequence
        """
        return SEVERITY_COLORS.get(self, RESET_CODE)

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return RESET_CODE


def is_enabled(level: Union[Severity, int], threshold: Union[Severity, int]) -> bool:
    """Return True when ``level`` meets ``threshold``."""
    return level >= threshold


RESET_CODE = "\033[0m"

SEVERITY_COLORS: Dict[Severity, str] = {
    Severity.DEBUG: "\033[36m",     # Cyan
    Severity.INFO: "\033[32m",      # Green
    Severity.WARNING: "\033[33m",   # Yellow
    Severity.ERROR: "\033[31m",     # Red
    Severity.FATAL: "\033[35m",     # Magenta
}

SEVERITY_ALIASES: Dict[str, str] = {
    "WARN": "WARNING",
    "CRITICAL": "FATAL",
}

LABEL_WIDTH = max(len(s.name) for s in Severity)

# Above every rank; a logger with this threshold filters everything
DISABLED_THRESHOLD = max(Severity) + 1
