"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class LocalStorageConfig(BaseModel):
    """Local filesystem storage configuration."""

    upload_dir: str = Field(default="uploads", alias="ARTFOLIO_UPLOAD_DIR", description="Root directory for files")
    url_prefix: str = Field(
        default="/uploads", alias="ARTFOLIO_UPLOAD_URL_PREFIX", description="Public URL prefix for stored files"
    )

    model_config = {"populate_by_name": True}


class ImageKitConfig(BaseModel):
    """ImageKit media storage configuration."""

    public_key: Optional[str] = Field(default=None, alias="IMAGEKIT_PUBLIC_KEY", description="ImageKit public key")
    private_key: Optional[str] = Field(
        default=None, alias="IMAGEKIT_PRIVATE_KEY", description="ImageKit private key used for API authentication"
    )
    url_endpoint: Optional[str] = Field(
        default=None, alias="IMAGEKIT_URL_ENDPOINT", description="ImageKit URL endpoint for delivery"
    )
    upload_url: str = Field(
        default="https://upload.imagekit.io/api/v1/files/upload",
        alias="IMAGEKIT_UPLOAD_URL",
        description="ImageKit upload API URL",
    )
    api_url: str = Field(
        default="https://api.imagekit.io/v1", alias="IMAGEKIT_API_URL", description="ImageKit management API base URL"
    )

    model_config = {"populate_by_name": True}

    @property
    def is_configured(self) -> bool:
        return bool(self.public_key and self.private_key and self.url_endpoint)


class AIConfig(BaseModel):
    """Artwork description model configuration."""

    enabled: bool = Field(default=True, alias="ARTFOLIO_AI_ENABLED", description="Enable the AI description helper")
    model: str = Field(
        default="google-gla:gemini-2.0-flash",
        alias="ARTFOLIO_AI_MODEL",
        description="pydantic-ai model identifier (provider:model)",
    )
    temperature: float = Field(default=0.8, alias="ARTFOLIO_AI_TEMPERATURE", ge=0.0, le=2.0)
    timeout: float = Field(default=60.0, alias="ARTFOLIO_AI_TIMEOUT", description="Model request timeout in seconds")

    model_config = {"populate_by_name": True}


class CORSConfig(BaseModel):
    """CORS configuration."""

    origins: list[str] = Field(
        default=["*"], alias="ARTFOLIO_CORS_ORIGINS", description="Allowed CORS origins (use * for all)"
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Related values are exposed as grouped configuration objects through properties.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
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
    server_host: str = Field(default="0.0.0.0", alias="ARTFOLIO_SERVER_HOST", description="Host address to bind to")
    server_port: int = Field(default=8000, alias="ARTFOLIO_SERVER_PORT", description="Server port number")
    log_level: str = Field(
        default="INFO",
        alias="ARTFOLIO_LOG_LEVEL",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_format: str = Field(default="detailed", alias="ARTFOLIO_LOG_FORMAT", description="simple, detailed or json")
    log_file_enabled: bool = Field(
        default=True, alias="ARTFOLIO_LOG_FILE_ENABLED", description="Write DEBUG logs to logs/artfolio.log"
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: str = Field(
        default="sqlite+aiosqlite:///./artfolio.db",
        alias="ARTFOLIO_DATABASE_URL",
        description="Async SQLAlchemy connection URL",
    )

    # =====================================================================
    # Admin & Uploads
    # =====================================================================
    admin_secret_key: Optional[str] = Field(
        default=None,
        alias="ARTFOLIO_ADMIN_SECRET_KEY",
        description="Secret key unlocking admin actions; admin actions are disabled when unset",
    )
    storage_backend: Literal["local", "imagekit"] = Field(
        default="local", alias="ARTFOLIO_STORAGE_BACKEND", description="Where uploaded images are stored"
    )
    max_upload_bytes: int = Field(
        default=10 * 1024 * 1024, alias="ARTFOLIO_MAX_UPLOAD_BYTES", ge=1, description="Maximum upload size"
    )

    # =====================================================================
    # Grouped values (read through the properties below)
    # =====================================================================
    upload_dir: str = Field(default="uploads", alias="ARTFOLIO_UPLOAD_DIR")
    upload_url_prefix: str = Field(default="/uploads", alias="ARTFOLIO_UPLOAD_URL_PREFIX")

    imagekit_public_key: Optional[str] = Field(default=None, alias="IMAGEKIT_PUBLIC_KEY")
    imagekit_private_key: Optional[str] = Field(default=None, alias="IMAGEKIT_PRIVATE_KEY")
    imagekit_url_endpoint: Optional[str] = Field(default=None, alias="IMAGEKIT_URL_ENDPOINT")
    imagekit_upload_url: str = Field(
        default="https://upload.imagekit.io/api/v1/files/upload", alias="IMAGEKIT_UPLOAD_URL"
    )
    imagekit_api_url: str = Field(default="https://api.imagekit.io/v1", alias="IMAGEKIT_API_URL")

    ai_enabled: bool = Field(default=True, alias="ARTFOLIO_AI_ENABLED")
    ai_model: str = Field(default="google-gla:gemini-2.0-flash", alias="ARTFOLIO_AI_MODEL")
    ai_temperature: float = Field(default=0.8, alias="ARTFOLIO_AI_TEMPERATURE")
    ai_timeout: float = Field(default=60.0, alias="ARTFOLIO_AI_TIMEOUT")

    cors_origins: list[str] = Field(default=["*"], alias="ARTFOLIO_CORS_ORIGINS")

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def local_storage(self) -> LocalStorageConfig:
        """Get local storage configuration."""
        return LocalStorageConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def imagekit(self) -> ImageKitConfig:
        """Get ImageKit configuration."""
        return ImageKitConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def ai(self) -> AIConfig:
        """Get AI description helper configuration."""
        return AIConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def cors(self) -> CORSConfig:
        """Get CORS configuration."""
        return CORSConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def admin_enabled(self) -> bool:
        return bool(self.admin_secret_key)


settings = Settings()
