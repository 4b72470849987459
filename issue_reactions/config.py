"""
Client configuration for the issue reactions tools.

Settings come from environment variables; the CLI loads a ``.env`` file
into the environment first.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .api_connection import DEFAULT_API_URL, DEFAULT_USER_AGENT

DEFAULT_LOG_LEVEL = 'INFO'


@dataclass
class ClientConfig:
    """Connection and logging settings."""
    token: Optional[str] = None
    base_url: str = DEFAULT_API_URL
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = DEFAULT_LOG_LEVEL
    # LOG_LEVEL as given when it named no logging level; reported once logging is configured
    invalid_log_level: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = None) -> 'ClientConfig':
        """
        Build a config from environment variables.

        Args:
            environ: Mapping to read from, defaults to ``os.environ``

        Returns:
            ClientConfig with GITHUB_TOKEN, GITHUB_API_URL and LOG_LEVEL applied
        """
        environ = os.environ if environ is None else environ

        token = environ.get('GITHUB_TOKEN', '').strip() or None
        base_url = environ.get('GITHUB_API_URL', '').strip() or DEFAULT_API_URL

        log_level = environ.get('LOG_LEVEL', DEFAULT_LOG_LEVEL).strip().upper()
        invalid_log_level = None
        if not isinstance(getattr(logging, log_level, None), int):
            invalid_log_level = log_level
            log_level = DEFAULT_LOG_LEVEL

        return cls(token=token, base_url=base_url, log_level=log_level,
                   invalid_log_level=invalid_log_level)

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level, logging.INFO)
