# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Structured logging setup backed by structlog."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

import structlog

from queryspec.core.config import Config, config_properties


@config_properties(prefix="queryspec.logging")
@dataclass
class LoggingProperties:
    """Logging settings bound from ``queryspec.logging``.

    Attributes:
        level: Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        format: ``console`` for coloured development output, ``json`` for JSON lines.
        modules: Per-logger level overrides, e.g. ``{"queryspec.repository": "DEBUG"}``.
    """

    level: str = "INFO"
    format: str = "console"
    modules: dict[str, str] = field(default_factory=dict)


_SHARED_PROCESSORS: tuple[structlog.types.Processor, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
)


def _renderer(fmt: str) -> structlog.types.Processor:
    if fmt.lower() == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(config: Config | None = None) -> LoggingProperties:
    """Route queryspec's structured events through stdlib logging.

    Reads ``queryspec.logging`` from *config* (defaults when omitted) and
    returns the bound properties so callers can see what was applied.
    Repository events such as ``query_built`` are emitted at DEBUG.
    """
    properties = (config or Config()).bind(LoggingProperties)

    structlog.configure(
        processors=[*_SHARED_PROCESSORS, _renderer(properties.format)],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=_level(properties.level),
        force=True,
    )

    for module, level in properties.modules.items():
        set_level(module, level)
    return properties


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def set_level(name: str, level: str) -> None:
    """Set the level of one stdlib logger; unknown names fall back to INFO."""
    logging.getLogger(name).setLevel(_level(level))


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO
