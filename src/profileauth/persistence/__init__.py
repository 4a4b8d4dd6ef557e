"""Pluggable state store backends behind the IStateStore Protocol."""

from __future__ import annotations

from profileauth.core.config import AppSettings
from profileauth.core.protocols import IStateStore
from profileauth.persistence.dynamodb_backend import DynamoDBStateStore
from profileauth.persistence.memory_backend import MemoryStateStore
from profileauth.persistence.redis_backend import RedisStateStore


def create_state_store(settings: AppSettings | None = None) -> IStateStore:
    """Create the configured state store backend from application settings."""
    if settings is None:
        settings = AppSettings()

    backend = settings.state.backend
    ttl = settings.state.ttl_seconds

    if backend == "redis":
        return RedisStateStore(
            host=settings.redis.host,
            port=settings.redis.port,
            db=settings.redis.db,
            ttl=ttl,
            key_prefix=settings.state.key_prefix,
        )

    if backend == "dynamodb":
        return DynamoDBStateStore(
            table=settings.dynamodb.table,
            region=settings.dynamodb.region,
            endpoint_url=settings.dynamodb.endpoint_url,
            ttl=ttl,
        )

    return MemoryStateStore(ttl=ttl)


__all__ = ["DynamoDBStateStore", "MemoryStateStore", "RedisStateStore", "create_state_store"]
