"""Unit tests for DynamoDBStateStore using moto."""

from __future__ import annotations

import json
import sys
from pathlib import Path
import boto3
import pytest
from moto import mock_aws

from profileauth.core.exceptions import StageMismatchError
from profileauth.models import SuspendedState
from profileauth.persistence.dynamodb_backend import DynamoDBStateStore

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "scripts"))

from create_state_table import create_state_table  # noqa: E402

TABLE = "profileauth-state-test"
REGION = "us-east-1"


# ---------- fixtures ----------

@pytest.fixture
def aws():
    with mock_aws():
        ddb = boto3.resource("dynamodb", region_name=REGION)
        create_state_table(ddb, table=TABLE)
        yield ddb


@pytest.fixture
def store(aws):
    return DynamoDBStateStore(table=TABLE, region=REGION, ttl=300)


# ---------- save ----------

class TestSave:
    def test_item_layout(self, store, aws):
        token = store.save(SuspendedState(source_id="src1"), "S")
        item = aws.Table(TABLE).get_item(Key={"PK": f"STATE#{token}", "SK": "STATE"})["Item"]
        assert item["stage"] == "S"
        assert json.loads(item["state"])["source_id"] == "src1"
        assert int(item["expires_at"]) > 0

    def test_each_save_is_a_new_item(self, store, aws):
        state = SuspendedState(source_id="src1")
        store.save(state, "S")
        store.save(state, "S")
        assert aws.Table(TABLE).scan()["Count"] == 2


# ---------- load ----------

class TestLoad:
    def test_round_trip(self, store):
        token = store.save(SuspendedState(source_id="src1", remembered_id="3"), "S")
        state = store.load(token, "S")
        assert state.token == token
        assert state.remembered_id == "3"

    def test_missing_is_none(self, store):
        assert store.load("_" + "b" * 40, "S") is None

    def test_stage_mismatch(self, store):
        token = store.save(SuspendedState(source_id="src1"), "A")
        with pytest.raises(StageMismatchError):
            store.load(token, "B")

    def test_expired_item_is_treated_as_missing(self, aws):
        now = [1_000.0]
        store = DynamoDBStateStore(table=TABLE, region=REGION, ttl=300, clock=lambda: now[0])
        token = store.save(SuspendedState(source_id="src1"), "S")
        now[0] += 301
        assert store.load(token, "S") is None


def test_delete_and_ping(store):
    token = store.save(SuspendedState(source_id="src1"), "S")
    store.delete(token)
    assert store.load(token, "S") is None
    assert store.ping() is True
