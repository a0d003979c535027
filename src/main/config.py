"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.shared import SERVICE_NAME, EnumEnvironment, EnumLogLevel
from src.shared.env import load_secret_file_variables  # noqa: F401


class DatabaseSettings(BaseSettings):
    """Database configuration settings."""

    mongo_uri: str = Field(
        default="mongodb://localhost:27017/metadata",
        description="MongoDB connection URI",
    )
    database_name: str = Field(
        default="metadata", description="Name of the MongoDB database"
    )

    model_config = SettingsConfigDict(
        env_prefix="DB_", case_sensitive=False, extra="ignore"
    )


class ServiceSettings(BaseSettings):
    """HTTP service configuration settings."""

    name: str = Field(default=SERVICE_NAME, description="Service name")
    title: str = Field(default="Edge Metadata", description="Service title")
    description: str = Field(
        default="Catalog of devices, device services, profiles, addressables, "
        "schedules and provision watchers",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    port: int = Field(default=48081, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )
    read_max_limit: int = Field(
        default=100,
        ge=1,
        description="Largest number of records a list request may return",
        validation_alias=AliasChoices("SERVICE_READ_MAX_LIMIT", "READ_MAX_LIMIT"),
    )

    model_config = SettingsConfigDict(
        env_prefix="SERVICE_", case_sensitive=False, extra="ignore"
    )


class CallbackSettings(BaseSettings):
    """Device service callback configuration settings."""

    timeout: float = Field(
        default=5.0, gt=0, description="Per-callback request timeout in seconds"
    )
    queue_size: int = Field(
        default=100, ge=1, description="Pending callbacks kept before dropping"
    )
    workers: int = Field(default=2, ge=1, description="Callback worker tasks")

    model_config = SettingsConfigDict(
        env_prefix="CALLBACK_", case_sensitive=False, extra="ignore"
    )


class NotificationSettings(BaseSettings):
    """Support-notifications configuration settings."""

    post_device_changes: bool = Field(
        default=False, description="Post a notification on every device change"
    )
    url: str = Field(
        default="http://localhost:48060/api/v1/notification",
        description="Notifications endpoint URL",
    )
    sender: str = Field(default=SERVICE_NAME, description="Notification sender")
    slug_prefix: str = Field(
        default="device-change-", description="Prefix of the notification slug"
    )
    content: str = Field(
        default="Device update: ", description="Prefix of the notification content"
    )
    description: str = Field(
        default="Metadata device notice", description="Notification description"
    )
    labels: List[str] = Field(
        default_factory=lambda: ["metadata"], description="Notification labels"
    )

    model_config = SettingsConfigDict(
        env_prefix="NOTIFICATION_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    service: ServiceSettings = Field(default_factory=ServiceSettings)
    callback: CallbackSettings = Field(default_factory=CallbackSettings)
    notification: NotificationSettings = Field(default_factory=NotificationSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on environment.
    """
    return AppSettings()


settings = get_settings()
