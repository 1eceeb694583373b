#!/usr/bin/env python3
"""Create DynamoDB tables for local development.

This script creates the movies and cast tables needed for local development and testing,
configured against DynamoDB Local. Table names come from TABLE_NAME and CAST_TABLE_NAME.

Usage:
    python scripts/create_local_tables.py
"""

import sys
from pathlib import Path

import boto3
from botocore.exceptions import ClientError

# Add src to path for config import
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from catalog.config import get_config


def create_movies_table(dynamodb, table_name):
    """Create the movies table keyed by numeric id."""
    try:
        dynamodb.create_table(
            TableName=table_name,
            KeySchema=[
                {"AttributeName": "id", "KeyType": "HASH"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "id", "AttributeType": "N"},
            ],
            BillingMode="PAY_PER_REQUEST",
        )
        print(f"✓ Created {table_name} table")
    except ClientError as e:
        if e.response["Error"]["Code"] == "ResourceInUseException":
            print(f"✓ {table_name} table already exists")
        else:
            raise


def create_cast_table(dynamodb, table_name):
    """Create the cast table partitioned by movieId."""
    try:
        dynamodb.create_table(
            TableName=table_name,
            KeySchema=[
                {"AttributeName": "movieId", "KeyType": "HASH"},
                {"AttributeName": "actorName", "KeyType": "RANGE"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "movieId", "AttributeType": "N"},
                {"AttributeName": "actorName", "AttributeType": "S"},
            ],
            BillingMode="PAY_PER_REQUEST",
        )
        print(f"✓ Created {table_name} table")
    except ClientError as e:
        if e.response["Error"]["Code"] == "ResourceInUseException":
            print(f"✓ {table_name} table already exists")
        else:
            raise


def main():
    """Create all DynamoDB tables."""
    config = get_config()

    endpoint_url = config.dynamodb_endpoint or "http://localhost:8000"

    print(f"Creating DynamoDB tables at {endpoint_url}...")
    print()

    # For DynamoDB Local, use dummy credentials
    dynamodb = boto3.client(
        "dynamodb",
        endpoint_url=endpoint_url,
        region_name=config.aws_region,
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )

    create_movies_table(dynamodb, config.movies_table)
    create_cast_table(dynamodb, config.cast_table)

    print()
    print("✅ All DynamoDB tables ready")


if __name__ == "__main__":
    main()
