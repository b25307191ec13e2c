"""
Centralized configuration for Viewlytics
All environment variables and settings are defined here
"""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Shared by the forwarding endpoint and the browser client.
    """

    # ======================
    # Upstream Provider Configuration
    # ======================
    ANTHROPIC_API_KEY: str = Field(default="", description="Anthropic API key")
    ANTHROPIC_MODEL: str = Field(
        default="claude-sonnet-4-20250514",
        description="Model identifier used for every analysis"
    )
    MAX_TOKENS: int = Field(default=2000, description="Max tokens for the model response")

    # ======================
    # API Server Configuration
    # ======================
    API_HOST: str = Field(default="0.0.0.0", description="Bind address for Uvicorn")
    API_PORT: int = Field(default=8000, description="Bind port for Uvicorn")

    # ======================
    # Client Configuration
    # ======================
    FORWARD_ENDPOINT_URL: str = Field(
        default="http://localhost:8000/api/generate",
        description="Forwarding endpoint called by the browser client"
    )
    CLIENT_TIMEOUT: Optional[float] = Field(
        default=None,
        description="Seconds to wait for the forwarding endpoint (None waits forever)"
    )
    EXPORT_FILENAME: str = Field(
        default="viewlytics-analysis.json",
        description="File name offered for the JSON download"
    )

    # ======================
    # Logging Configuration
    # ======================
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )

    @property
    def has_credential(self) -> bool:
        """Whether an upstream credential is configured"""
        return bool(self.ANTHROPIC_API_KEY.strip())

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"  # Allow extra env vars in .env file


# Global settings instance
settings = Settings()


# ======================
# Convenience Functions
# ======================

def get_anthropic_api_key() -> str:
    """Get Anthropic API key"""
    return settings.ANTHROPIC_API_KEY


def get_anthropic_model() -> str:
    """Get Anthropic model name"""
    return settings.ANTHROPIC_MODEL


def get_max_tokens() -> int:
    """Get max tokens for the model response"""
    return settings.MAX_TOKENS
