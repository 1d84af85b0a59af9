"""
Configuration settings for the edit service.
"""

import os
from typing import Any

from dotenv import find_dotenv, load_dotenv

from mcp_edit_service.exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.morphllm.com/v1"
DEFAULT_MODEL = "morph/morph-v3-large"
DEFAULT_LOG_LEVEL = "INFO"


class Settings:
    """Service settings loaded from environment variables."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        model: str = DEFAULT_MODEL,
        log_level: str = DEFAULT_LOG_LEVEL,
    ):
        """
        Initialize the settings.

        Args:
            api_key: Credential for the rewriting model endpoint
            base_url: Base URL of the OpenAI-compatible endpoint
            model: Model identifier sent with every completion request
            log_level: Name of the root logging level
        """
        if not api_key:
            raise ConfigurationError("API key must be a non-empty string")
        self.api_key: str = api_key
        self.base_url: str = base_url or DEFAULT_BASE_URL
        self.model: str = model or DEFAULT_MODEL
        self.log_level: str = (log_level or DEFAULT_LOG_LEVEL).upper()

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        """
        Build settings from the process environment.

        Args:
            load_env_file: Whether to load a .env file before reading variables

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If MORPH_API_KEY is not set
        """
        if load_env_file:
            # Load environment variables from a .env file in or above the working directory
            _ = load_dotenv(find_dotenv(usecwd=True))
        return cls(
            api_key=cls._get_required_env("MORPH_API_KEY"),
            base_url=cls._get_env("MORPH_BASE_URL", DEFAULT_BASE_URL),
            model=cls._get_env("MORPH_MODEL", DEFAULT_MODEL),
            log_level=cls._get_env("LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )

    @staticmethod
    def _get_required_env(key: str) -> str:
        """Get a required environment variable, raise error if missing."""
        value = os.getenv(key)
        if not value:
            raise ConfigurationError(f"{key} environment variable is required")
        return value

    @staticmethod
    def _get_env(key: str, default: str) -> str:
        """Get an environment variable, falling back to default when unset or empty."""
        return os.getenv(key) or default

    def get_model_info(self) -> dict[str, Any]:
        """
        Describe the configured rewriting model without exposing the credential.

        Returns:
            Dictionary with provider, model, base URL and masked key
        """
        return {
            "provider": "morph",
            "model": self.model,
            "base_url": self.base_url,
            "api_key": self.api_key[:6] + "...",
        }
