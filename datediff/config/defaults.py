"""Default configuration parameters for datediff."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DisplayParams:
    """Direction labels used when rendering an interval."""
    ahead_label: str = "Ahead"         # End date on or after start date
    behind_label: str = "Behind"       # End date before start date

    def label_for(self, positive: bool) -> str:
        return self.ahead_label if positive else self.behind_label


@dataclass(frozen=True)
class LoggingParams:
    """Logging setup applied through configure_from_params."""
    level: str = "INFO"
    format_json: bool = False
    include_timestamp: bool = True
    include_caller: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    display: DisplayParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        display=DisplayParams(),
        logging=LoggingParams(),
    )
