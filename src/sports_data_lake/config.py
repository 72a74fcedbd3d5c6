"""Configuration management for the sports data lake."""

import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from .exceptions import ConfigurationError

API_KEY_VAR = "SPORTS_DATA_API_KEY"
ENDPOINT_VAR = "NBA_ENDPOINT"


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name, str(default))
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(name, f"{name} must be an integer, got {value!r}") from None


class AWSConfig(BaseModel):
    """AWS configuration settings."""

    model_config = ConfigDict(frozen=True)

    region: str = Field(default_factory=lambda: os.getenv("AWS_REGION", "us-east-1"))


class S3Config(BaseModel):
    """S3 bucket configuration."""

    model_config = ConfigDict(frozen=True)

    bucket_name: str = Field(default_factory=lambda: os.getenv("S3_BUCKET_NAME", "sports-analytics-data-lake3"))
    object_key: str = Field(default_factory=lambda: os.getenv("S3_OBJECT_KEY", "nba_data.json"))
    results_prefix: str = Field(default_factory=lambda: os.getenv("ATHENA_RESULTS_PREFIX", "athena-results/"))
    ready_delay: int = Field(default_factory=lambda: _env_int("S3_READY_DELAY", 5))
    ready_max_attempts: int = Field(default_factory=lambda: _env_int("S3_READY_MAX_ATTEMPTS", 12))

    @property
    def bucket_location(self) -> str:
        """S3 URI of the bucket root."""
        return f"s3://{self.bucket_name}/"

    @property
    def results_location(self) -> str:
        """S3 URI where Athena writes query results."""
        return f"s3://{self.bucket_name}/{self.results_prefix}"


class GlueConfig(BaseModel):
    """AWS Glue Data Catalog configuration."""

    model_config = ConfigDict(frozen=True)

    database_name: str = Field(default_factory=lambda: os.getenv("GLUE_DATABASE_NAME", "glue_nba_data_lake"))
    table_name: str = Field(default_factory=lambda: os.getenv("GLUE_TABLE_NAME", "nba_data"))


class SportsDataConfig(BaseModel):
    """Sports data API credentials and endpoint."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(default_factory=lambda: os.getenv(API_KEY_VAR, ""), repr=False)
    endpoint: str = Field(default_factory=lambda: os.getenv(ENDPOINT_VAR, ""))


class LoggingConfig(BaseModel):
    """Logging settings, read independently so loggers can be built at import time."""

    model_config = ConfigDict(frozen=True)

    environment: str = Field(default_factory=lambda: os.getenv("ENVIRONMENT", "dev"))
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))


class Config(BaseModel):
    """Main configuration object, built once at startup and passed to each component."""

    model_config = ConfigDict(frozen=True)

    aws: AWSConfig = Field(default_factory=AWSConfig)
    s3: S3Config = Field(default_factory=S3Config)
    glue: GlueConfig = Field(default_factory=GlueConfig)
    sports_data: SportsDataConfig = Field(default_factory=SportsDataConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    project_name: str = "sports-data-lake"

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Config":
        """
        Build configuration from the process environment.

        Values from a ``.env`` file are loaded first but never override
        variables already present in the environment.

        Args:
            env_file: Path to a dotenv file. If None, searches for ``.env``.

        Returns:
            Validated configuration.

        Raises:
            ConfigurationError: If env_file does not exist, the API key or
                endpoint is missing, or a numeric setting is malformed.
        """
        if env_file is not None and not os.path.isfile(env_file):
            raise ConfigurationError("env_file", f"Error loading .env file: {env_file} not found")
        load_dotenv(env_file)
        config = cls()
        if not config.sports_data.api_key:
            raise ConfigurationError(API_KEY_VAR)
        if not config.sports_data.endpoint:
            raise ConfigurationError(ENDPOINT_VAR)
        return config

    def with_overrides(
        self,
        region: Optional[str] = None,
        bucket_name: Optional[str] = None,
        database_name: Optional[str] = None,
        table_name: Optional[str] = None,
    ) -> "Config":
        """Return a copy with the given values replaced; None leaves a value unchanged."""
        update: Dict[str, Any] = {}
        if region:
            update["aws"] = self.aws.model_copy(update={"region": region})
        if bucket_name:
            update["s3"] = self.s3.model_copy(update={"bucket_name": bucket_name})
        glue_update = {}
        if database_name:
            glue_update["database_name"] = database_name
        if table_name:
            glue_update["table_name"] = table_name
        if glue_update:
            update["glue"] = self.glue.model_copy(update=glue_update)
        return self.model_copy(update=update)
