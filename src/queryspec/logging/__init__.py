"""queryspec Logging: structlog configuration and logger access."""

from queryspec.logging.setup import LoggingProperties, configure_logging, get_logger, set_level

__all__ = ["LoggingProperties", "configure_logging", "get_logger", "set_level"]
