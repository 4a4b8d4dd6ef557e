"""Integration test fixtures: LocalStack DynamoDB and a local Redis."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import boto3
import pytest
import redis

# Default LocalStack endpoint
LOCALSTACK_URL = os.environ.get("LOCALSTACK_URL", "http://localhost:4566")
REDIS_HOST = os.environ.get("PROFILEAUTH_REDIS_HOST", "localhost")
TABLE = "profileauth-state-inttest"


def _localstack_available() -> bool:
    """Check if LocalStack is reachable."""
    try:
        client = boto3.client("dynamodb", region_name="us-east-1", endpoint_url=LOCALSTACK_URL)
        client.list_tables()
        return True
    except Exception:
        return False


def _redis_available() -> bool:
    try:
        return bool(redis.Redis(host=REDIS_HOST, socket_connect_timeout=0.5).ping())
    except Exception:
        return False


skip_no_localstack = pytest.mark.skipif(
    not _localstack_available(),
    reason="LocalStack not available",
)

skip_no_redis = pytest.mark.skipif(
    not _redis_available(),
    reason="Redis not available",
)


@pytest.fixture(scope="session")
def localstack_ddb():
    """DynamoDB resource pointing at LocalStack."""
    return boto3.resource("dynamodb", region_name="us-east-1", endpoint_url=LOCALSTACK_URL)


@pytest.fixture(scope="session")
def state_table(localstack_ddb):
    """Create the state table via the bootstrap script."""
    sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "scripts"))
    from create_state_table import create_state_table

    create_state_table(localstack_ddb, table=TABLE)
    return TABLE
