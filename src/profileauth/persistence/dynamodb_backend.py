"""DynamoDB state store implementing IStateStore."""

from __future__ import annotations

import json
import logging
import time
from decimal import Decimal
from typing import Any, Callable

import boto3
from botocore.exceptions import ClientError

from profileauth.core.exceptions import StageMismatchError, StateStoreError
from profileauth.core.logging import short_token
from profileauth.models import SuspendedState
from profileauth.persistence.tokens import is_valid_token, mint_token

logger = logging.getLogger(__name__)


class DynamoDBStateStore:
    """Production IStateStore backed by a DynamoDB table (PK/SK key schema).

    ``expires_at`` is the table's TTL attribute. DynamoDB removes expired
    items lazily, so reads check it as well.
    """

    SK = "STATE"

    def __init__(self, table: str = "profileauth-state", region: str = "us-east-1",
                 endpoint_url: str | None = None, ttl: int = 3600,
                 clock: Callable[[], float] = time.time) -> None:
        self._table_name = table
        self._region = region
        self._endpoint_url = endpoint_url
        self._ttl = ttl
        self._clock = clock
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._ddb = boto3.resource("dynamodb", **kwargs)
        self._table = self._ddb.Table(table)

    @staticmethod
    def _pk(token: str) -> str:
        return f"STATE#{token}"

    def validate(self, token: str) -> bool:
        return is_valid_token(token)

    def load(self, token: str, stage: str) -> SuspendedState | None:
        try:
            resp = self._table.get_item(Key={"PK": self._pk(token), "SK": self.SK})
        except ClientError as exc:
            raise StateStoreError(f"DynamoDB read failed for state {short_token(token)}: {exc}") from exc
        item: dict[str, Any] | None = resp.get("Item")
        if item is None:
            return None
        if int(item.get("expires_at", Decimal(0))) <= int(self._clock()):
            return None
        if item["stage"] != stage:
            raise StageMismatchError(token, expected=stage, actual=item["stage"])
        return SuspendedState.from_record(json.loads(item["state"]), token=token, stage=item["stage"])

    def save(self, state: SuspendedState, stage: str) -> str:
        token = mint_token()
        item = {
            "PK": self._pk(token),
            "SK": self.SK,
            "stage": stage,
            "state": json.dumps(state.to_record()),
            "expires_at": int(self._clock()) + self._ttl,
        }
        try:
            self._table.put_item(Item=item, ConditionExpression="attribute_not_exists(PK)")
        except ClientError as exc:
            raise StateStoreError(f"DynamoDB write failed for state {short_token(token)}: {exc}") from exc
        logger.debug("Saved state %s at stage %s", short_token(token), stage)
        return token

    def delete(self, token: str) -> None:
        try:
            self._table.delete_item(Key={"PK": self._pk(token), "SK": self.SK})
        except ClientError as exc:
            raise StateStoreError(f"DynamoDB delete failed for state {short_token(token)}: {exc}") from exc

    def ping(self) -> bool:
        try:
            self._table.load()
            return True
        except ClientError:
            logger.warning("DynamoDB table %s not reachable", self._table_name)
            return False
