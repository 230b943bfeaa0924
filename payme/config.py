"""
Configuration for PayMe link rendering and the CLI.

Values come from constructor arguments or, via from_env(), from
environment variables:
- PAYME_BASE_URL   base URL of rendered links (default https://payme.sk/)
- PAYME_LOG_LEVEL  logging level name for the CLI (default WARNING)
"""
import os
from typing import Optional


DEFAULT_BASE_URL = "https://payme.sk/"
DEFAULT_LOG_LEVEL = "WARNING"


class PayMeConfig:
    """Configuration for PayMe link rendering."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        log_level: str = DEFAULT_LOG_LEVEL
    ):
        self.base_url = base_url
        self.log_level = log_level.upper()

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "PayMeConfig":
        """Build a config from PAYME_* environment variables."""
        environ = os.environ if environ is None else environ
        return cls(
            base_url=environ.get("PAYME_BASE_URL") or DEFAULT_BASE_URL,
            log_level=environ.get("PAYME_LOG_LEVEL") or DEFAULT_LOG_LEVEL,
        )

    def __repr__(self) -> str:
        return f"PayMeConfig(base_url={self.base_url!r}, log_level={self.log_level!r})"
