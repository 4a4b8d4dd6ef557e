"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class StateConfig(BaseSettings):
    """Suspended-state storage configuration."""

    model_config = {"env_prefix": "PROFILEAUTH_STATE_"}

    backend: Literal["memory", "redis", "dynamodb"] = "memory"
    ttl_seconds: int = 3600
    key_prefix: str = "profileauth:state:"


class RedisConfig(BaseSettings):
    """Redis state backend configuration."""

    model_config = {"env_prefix": "PROFILEAUTH_REDIS_"}

    host: str = "localhost"
    port: int = 6379
    db: int = 0


class DynamoDBConfig(BaseSettings):
    """DynamoDB state backend configuration."""

    model_config = {"env_prefix": "PROFILEAUTH_DYNAMO_"}

    table: str = "profileauth-state"
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override


class CookieConfig(BaseSettings):
    """Remember-choice cookie configuration."""

    model_config = {"env_prefix": "PROFILEAUTH_COOKIE_"}

    remember_enabled: bool = False
    name: str = "profileauth_last_id"
    max_age: int = 90 * 24 * 3600
    secure: bool = True
    samesite: Literal["lax", "strict", "none"] = "none"


class CandidateConfig(BaseModel):
    """A selectable profile as declared in configuration."""

    id: str
    display_name: str = ""
    attributes: dict[str, list[str]] = Field(default_factory=dict)
    enabled: bool = True


class SourceConfig(BaseModel):
    """A profile-list selection source and its candidates."""

    id: str
    candidates: list[CandidateConfig] = Field(default_factory=list)


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "PROFILEAUTH_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    base_url: str = "http://localhost:8000"
    completion_stage: str = "profileauth:completed"

    state: StateConfig = StateConfig()
    redis: RedisConfig = RedisConfig()
    dynamodb: DynamoDBConfig = DynamoDBConfig()
    cookie: CookieConfig = CookieConfig()
    sources: list[SourceConfig] = Field(default_factory=list)
