"""
Wiki.js MCP Server - Configuration

Pydantic Settings for all configuration via environment variables.
"""

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional, Literal
from pathlib import Path


class WikiJSSettings(BaseSettings):
    """Wiki.js GraphQL API configuration."""
    api_url: str = Field("http://localhost:3000/graphql", alias="WIKIJS_API_URL")
    api_token: str = Field(..., min_length=1, alias="WIKIJS_API_TOKEN")
    ssl_verify: bool = Field(True, alias="WIKIJS_SSL_VERIFY")
    ca_bundle: Optional[Path] = Field(None, alias="WIKIJS_CA_BUNDLE")
    timeout_seconds: float = Field(30.0, alias="WIKIJS_TIMEOUT_SECONDS")
    tag_search_concurrency: int = Field(
        1, ge=1, alias="WIKIJS_TAG_SEARCH_CONCURRENCY"
    )

    model_config = {"env_prefix": "", "extra": "ignore"}


class MCPSettings(BaseSettings):
    """MCP server configuration."""
    transport: Literal["sse", "stdio"] = Field("stdio", alias="MCP_TRANSPORT")
    port: int = Field(8080, alias="MCP_PORT")
    host: str = Field("127.0.0.1", alias="MCP_HOST")

    model_config = {"env_prefix": "", "extra": "ignore"}


class LogSettings(BaseSettings):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO", alias="LOG_LEVEL"
    )

    model_config = {"env_prefix": "", "extra": "ignore"}


class Settings(BaseSettings):
    """Main settings aggregating all configuration."""
    wikijs: WikiJSSettings = Field(default_factory=WikiJSSettings)
    mcp: MCPSettings = Field(default_factory=MCPSettings)
    log: LogSettings = Field(default_factory=LogSettings)

    model_config = {"env_prefix": "", "extra": "ignore"}


def get_settings() -> Settings:
    """Load settings from environment variables."""
    from dotenv import load_dotenv
    load_dotenv()
    return Settings()
