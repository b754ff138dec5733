"""
Logger configuration management
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any
from pathlib import Path

from fanout_logger.core.severity import Severity

DUPLICATE_POLICIES = ("warn", "raise")


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    Holds the state an external persistence layer needs to recreate a
    logger session (appender descriptors come from Logger.snapshot()).
    """

    # Basic settings
    name: str = "logger"
    min_severity: Severity = Severity.INFO

    # Session settings
    log_directory: Optional[Path] = None

    # Console settings
    default_console: bool = True  # Attach a console appender when none is set
    colored_output: bool = True

    # Registration settings
    duplicate_policy: str = "warn"

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.min_severity, str):
            self.min_severity = Severity.from_string(self.min_severity)
        elif not isinstance(self.min_severity, Severity):
            self.min_severity = Severity(self.min_severity)

        if self.duplicate_policy not in DUPLICATE_POLICIES:
            raise ValueError(
                f"duplicate_policy must be one of {DUPLICATE_POLICIES}, "
                f"got '{self.duplicate_policy}'"
            )

        # Convert log_directory to Path if it's a string
        if isinstance(self.log_directory, str):
            self.log_directory = Path(self.log_directory)

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            min_severity=Severity.DEBUG,
            colored_output=True,
            duplicate_policy="raise",
        )

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            min_severity=Severity.WARNING,
            colored_output=False,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a JSON-friendly dictionary."""
        return {
            "name": self.name,
            "min_severity": self.min_severity.name,
            "log_directory": str(self.log_directory) if self.log_directory else None,
            "default_console": self.default_console,
            "colored_output": self.colored_output,
            "duplicate_policy": self.duplicate_policy,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LoggerConfig":
        """
        Create configuration from dictionary.

        Args:
            data: Dictionary as produced by to_dict(); missing keys use defaults

        Returns:
            New LoggerConfig instance
        """
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)
