"""
Client configuration for itc-reporter-client.
"""

import os
from dataclasses import dataclass, field

from .exceptions import ConfigError

MODE_NORMAL = "Normal"
MODE_ROBOT_XML = "Robot.xml"
VALID_MODES = (MODE_NORMAL, MODE_ROBOT_XML)


@dataclass(frozen=True)
class Config:
    """
    Account credentials and output mode for the Reporter service.

    Args:
        user_id: Apple ID used to sign in to iTunes Connect
        password: Password for the Apple ID
        mode: Either "Normal" or "Robot.xml"
    """

    user_id: str
    password: str = field(repr=False)
    mode: str = MODE_NORMAL

    @classmethod
    def from_env(cls, prefix: str = "ITC_") -> "Config":
        """
        Load configuration from environment variables.

        Reads ``<prefix>USER_ID``, ``<prefix>PASSWORD`` and ``<prefix>MODE``.
        Missing credentials come back empty and are rejected when the
        config is validated.
        """
        return cls(
            user_id=os.getenv(f"{prefix}USER_ID", ""),
            password=os.getenv(f"{prefix}PASSWORD", ""),
            mode=os.getenv(f"{prefix}MODE", MODE_NORMAL),
        )


def validate_config(config: Config) -> Config:
    """
    Validate a Config.

    Args:
        config: The configuration to validate

    Returns:
        The same configuration

    Raises:
        ConfigError: If the mode is unknown or a credential is missing
    """
    if config.mode not in VALID_MODES:
        raise ConfigError("invalid mode")

    if not config.user_id:
        raise ConfigError("missing user id")

    if not config.password:
        raise ConfigError("missing password")

    return config
