"""
Configuration management system using Pydantic Settings.
Supports environment-based configuration for different deployment environments.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from typing import Optional
from enum import Enum


class Environment(str, Enum):
    """Supported deployment environments"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Supported log levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class MatcherSettings(BaseSettings):
    """Offline phrase matching configuration"""

    offline_threshold: float = Field(default=0.8, ge=0.0, le=1.0)
    degraded_threshold: float = Field(
        default=0.6, ge=0.0, le=1.0,
        description="Threshold for the offline retry after a remote failure"
    )
    min_bucket_size: int = Field(default=5, ge=1, le=1000)

    model_config = {"env_prefix": "MATCHER_"}


class CacheSettings(BaseSettings):
    """Translation cache configuration"""

    ttl_seconds: int = Field(default=3600, ge=1, le=86400)  # 1 hour default
    sweep_interval_seconds: Optional[int] = Field(
        default=None, ge=1,
        description="Run a background purge of expired entries at this interval"
    )

    model_config = {"env_prefix": "CACHE_"}


class ProviderSettings(BaseSettings):
    """Remote translation provider (DeepSeek-compatible chat API)"""

    api_key: Optional[str] = Field(default=None)
    base_url: str = Field(default="https://api.deepseek.com")
    model: str = Field(default="deepseek-chat")
    temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    max_tokens: int = Field(default=1000, ge=1, le=8192)
    timeout_seconds: float = Field(default=30.0, ge=1.0, le=300.0)
    max_text_length: int = Field(default=5000, ge=1)

    model_config = {
        "env_prefix": "PROVIDER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


class HistorySettings(BaseSettings):
    """Translation history configuration"""

    max_size: int = Field(default=20, ge=1, le=1000)

    model_config = {"env_prefix": "HISTORY_"}


class Settings(BaseSettings):
    """Main application settings"""

    # Application Configuration
    app_name: str = Field(default="Phrase Router")
    app_version: str = Field(default="1.0.0")
    environment: Environment = Field(default=Environment.DEVELOPMENT)
    debug: bool = Field(default=False)

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)
    reload: bool = Field(default=False)
    workers: int = Field(default=1, ge=1, le=16)

    # Logging Configuration
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_format: str = Field(default="json")

    # Nested Settings
    matcher: MatcherSettings = Field(default_factory=MatcherSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    provider: ProviderSettings = Field(default_factory=ProviderSettings)
    history: HistorySettings = Field(default_factory=HistorySettings)

    @field_validator('environment', mode='before')
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment setting"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator('log_format', mode='before')
    @classmethod
    def validate_log_format(cls, v):
        if isinstance(v, str) and v.lower() in ("json", "text"):
            return v.lower()
        raise ValueError("log_format must be 'json' or 'text'")

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings instance"""
    return settings



def reload_settings() -> Settings:
    """Reload settings from environment and files"""
    global settings
    settings = Settings()
    return settings
