"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and the
.env file without explicit dotenv loading.
"""

from typing import Optional

from pydantic import BaseModel, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class OpenAIConfig(BaseModel):
    """OpenAI API configuration."""

    api_key: Optional[SecretStr] = Field(
        default=None, alias="OPENAI_API_KEY", description="OpenAI API key for authentication"
    )
    model: str = Field(default="gpt-4o", alias="OPENAI_MODEL", description="Default OpenAI chat model to use")
    base_url: Optional[str] = Field(
        default=None, alias="OPENAI_BASE_URL", description="Custom OpenAI API base URL (optional)"
    )
    temperature: float = Field(
        default=0.7, ge=0.0, le=2.0, alias="OPENAI_TEMPERATURE", description="Sampling temperature for chat calls"
    )
    timeout: Optional[float] = Field(
        default=None, gt=0, alias="OPENAI_TIMEOUT", description="Per-request timeout in seconds (optional)"
    )

    model_config = {"populate_by_name": True}

    @property
    def model_id(self) -> str:
        """Model identifier in Pydantic AI's ``provider:model`` form."""
        return self.model if ":" in self.model else f"openai:{self.model}"


class AgentConfig(BaseModel):
    """Agent loop configuration."""

    max_iterations: int = Field(
        default=10, ge=1, alias="AGENT_MAX_ITERATIONS", description="Planning iterations before the agent must finish"
    )
    quality_threshold: float = Field(
        default=0.75,
        ge=0.0,
        le=1.0,
        alias="AGENT_QUALITY_THRESHOLD",
        description="Quality score at or above which the agent finishes",
    )

    model_config = {"populate_by_name": True}


class CORSConfig(BaseModel):
    """CORS configuration."""

    origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS", description="Allowed CORS origins (use * for all)")
    allow_credentials: bool = Field(
        default=True, alias="CORS_ALLOW_CREDENTIALS", description="Allow credentials in CORS requests"
    )
    allow_methods: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_METHODS", description="Allowed HTTP methods (use * for all)"
    )
    allow_headers: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_HEADERS", description="Allowed HTTP headers (use * for all)"
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are bound from environment variables and the .env file.
    Grouped configurations (``openai``, ``agent``, ``cors``) are derived from
    the same flat set of variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Server Configuration
    # =====================================================================
    server_host: str = Field(
        default="0.0.0.0",
        description="Server host address to bind to",
        alias="DEEP_AGENT_SERVER_HOST",
    )
    server_port: int = Field(
        default=8080,
        description="Server port number",
        alias="DEEP_AGENT_SERVER_PORT",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="DEEP_AGENT_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log line format (simple, detailed, json)",
        alias="DEEP_AGENT_LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory for the log file when file logging is enabled",
        alias="DEEP_AGENT_LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Also write logs to <log_file_dir>/deep_agent.log",
        alias="DEEP_AGENT_ENABLE_FILE_LOGGING",
    )

    # =====================================================================
    # OpenAI Configuration
    # =====================================================================
    openai_api_key: Optional[SecretStr] = Field(default=None, alias="OPENAI_API_KEY")
    openai_model: str = Field(default="gpt-4o", alias="OPENAI_MODEL")
    openai_base_url: Optional[str] = Field(default=None, alias="OPENAI_BASE_URL")
    openai_temperature: float = Field(default=0.7, alias="OPENAI_TEMPERATURE")
    openai_timeout: Optional[float] = Field(default=None, alias="OPENAI_TIMEOUT")

    # =====================================================================
    # Agent Loop Configuration
    # =====================================================================
    agent_max_iterations: int = Field(default=10, alias="AGENT_MAX_ITERATIONS")
    agent_quality_threshold: float = Field(default=0.75, alias="AGENT_QUALITY_THRESHOLD")

    # =====================================================================
    # CORS Configuration
    # =====================================================================
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(default=["*"], alias="CORS_ALLOW_METHODS")
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def openai(self) -> OpenAIConfig:
        """Get OpenAI configuration from environment variables."""
        return OpenAIConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def agent(self) -> AgentConfig:
        """Get agent loop configuration from environment variables."""
        return AgentConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def cors(self) -> CORSConfig:
        """Get CORS configuration from environment variables."""
        return CORSConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()
