"""Create the DynamoDB table backing the suspended-state store.

Usage:
    python scripts/create_state_table.py --endpoint-url http://localhost:4566
"""

from __future__ import annotations

import argparse
from typing import Any

import boto3

TTL_ATTRIBUTE = "expires_at"


def create_state_table(ddb: Any, table: str = "profileauth-state") -> bool:
    """Create the PK/SK state table with TTL on ``expires_at``.

    Returns False if the table already exists.
    """
    client = ddb.meta.client
    existing = client.list_tables().get("TableNames", [])
    if table in existing:
        print(f"  Table {table} already exists, skipping")
        return False

    client.create_table(
        TableName=table,
        KeySchema=[
            {"AttributeName": "PK", "KeyType": "HASH"},
            {"AttributeName": "SK", "KeyType": "RANGE"},
        ],
        AttributeDefinitions=[
            {"AttributeName": "PK", "AttributeType": "S"},
            {"AttributeName": "SK", "AttributeType": "S"},
        ],
        BillingMode="PAY_PER_REQUEST",
    )
    client.update_time_to_live(
        TableName=table,
        TimeToLiveSpecification={"Enabled": True, "AttributeName": TTL_ATTRIBUTE},
    )
    print(f"  Created table {table} (TTL on {TTL_ATTRIBUTE})")
    return True


def main() -> None:
    parser = argparse.ArgumentParser(description="Create the profileauth state table")
    parser.add_argument("--endpoint-url", default=None, help="DynamoDB endpoint (LocalStack)")
    parser.add_argument("--region", default="us-east-1")
    parser.add_argument("--table", default="profileauth-state")
    args = parser.parse_args()

    kwargs: dict = {"region_name": args.region}
    if args.endpoint_url:
        kwargs["endpoint_url"] = args.endpoint_url
    ddb = boto3.resource("dynamodb", **kwargs)

    print("Creating state table...")
    create_state_table(ddb, table=args.table)
    print("Done.")


if __name__ == "__main__":
    main()
