"""
itc-reporter-client

A Python client for Apple's iTunes Connect Reporter service, supporting
status checks, account and vendor listings and sales report downloads.
"""

from .client import (
    ReporterClient,
    create_client,
    SALES_ENDPOINT,
    FINANCE_ENDPOINT,
    API_VERSION,
)
from .config import Config, MODE_NORMAL, MODE_ROBOT_XML
from .exceptions import (
    ReporterError,
    ConfigError,
    ValidationError,
    TransportError,
    RemoteError,
    NotSupportedError,
)
from . import utils

__version__ = "1.0.0"

__all__ = [
    "ReporterClient",
    "create_client",
    "Config",
    "MODE_NORMAL",
    "MODE_ROBOT_XML",
    "SALES_ENDPOINT",
    "FINANCE_ENDPOINT",
    "API_VERSION",
    "ReporterError",
    "ConfigError",
    "ValidationError",
    "TransportError",
    "RemoteError",
    "NotSupportedError",
    "utils",
]
