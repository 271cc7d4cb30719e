"""Configuration management for gravatarkit."""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


class Config:
    """Application configuration."""

    # Application
    PORT: int = int(os.getenv("PORT", "7675"))
    DEBUG: bool = _env_flag("DEBUG")

    # Preview defaults
    GRAVATAR_DEFAULT_SIZE: int = int(os.getenv("GRAVATAR_DEFAULT_SIZE", "80"))
    GRAVATAR_DEFAULT_IMAGE: str = os.getenv("GRAVATAR_DEFAULT_IMAGE", "identicon")

    # Reverse proxies terminate TLS and forward plain HTTP
    TRUST_FORWARDED_PROTO: bool = _env_flag("TRUST_FORWARDED_PROTO")


config = Config()
