"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides the utilities, constants and enums used across
every layer of the metadata service:
- Environment names and log levels
- Structured logging configuration (structlog over stdlib logging)
- Resolution of Docker-style ``*_FILE`` secrets

It must not depend on Infrastructure or Frameworks.
"""

from .consts import API_PREFIX, SERVICE_NAME, EnumEnvironment, EnumLogLevel
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "API_PREFIX",
    "SERVICE_NAME",
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
