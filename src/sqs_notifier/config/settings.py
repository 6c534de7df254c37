"""
Module: settings.py
Description: Channel configuration using pydantic-settings.

AwsSqsOptions is built once by the host service, either from keyword
arguments, from a JSON-style dict, or from AWS_SQS_* environment
variables, and is immutable afterwards. Empty strings mean "defer to
the default AWS provider chain".
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Delay applied to every message unless configured otherwise
DEFAULT_DELAY_SECONDS = 10


class AwsAccess(BaseModel):
    """Static access-key pair."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(default="", description="AWS access key id")
    secret: str = Field(default="", description="AWS secret access key")

    @property
    def is_set(self) -> bool:
        return bool(self.key) and bool(self.secret)


class AwsSqsOptions(BaseSettings):
    """SQS channel options loaded from arguments or the environment."""

    model_config = SettingsConfigDict(
        env_prefix="AWS_SQS_",
        env_nested_delimiter="__",
        env_file=None,
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    queue: str = Field(default="", description="Default queue name")
    account: str = Field(default="", description="Queue owner AWS account id")
    region: str = Field(default="", description="AWS region to pin")
    endpoint_url: str = Field(default="", description="Custom SQS endpoint, e.g. LocalStack")
    access: AwsAccess = Field(default_factory=AwsAccess, description="Static credentials")
    delay_seconds: int = Field(
        default=DEFAULT_DELAY_SECONDS,
        ge=0,
        le=900,
        description="Delivery delay applied to every message"
    )
    timeout_seconds: Optional[float] = Field(
        default=None,
        gt=0,
        description="Default deadline for a whole send call"
    )

    @field_validator('endpoint_url')
    @classmethod
    def validate_endpoint_url(cls, v: str) -> str:
        """Validate the endpoint is an HTTP/HTTPS URL when set."""
        if v and not v.startswith(('http://', 'https://')):
            raise ValueError("endpoint_url must be a valid HTTP/HTTPS URL")
        return v

    @field_validator('account')
    @classmethod
    def validate_account(cls, v: str) -> str:
        """Validate AWS account ids are 12 digits."""
        if v and (len(v) != 12 or not v.isdigit()):
            raise ValueError("account must be a 12-digit AWS account id")
        return v


class Settings(BaseSettings):
    """Process-level settings for the notifier."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="json or console")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(valid_levels)}")
        return v.upper()

    @field_validator('log_format')
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in ('json', 'console'):
            raise ValueError("log_format must be 'json' or 'console'")
        return v.lower()
