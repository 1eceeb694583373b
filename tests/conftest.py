"""Shared test fixtures for the movie catalog API."""

import os
import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Unset AWS_PROFILE for local testing (DynamoDB Local doesn't need it)
if "AWS_PROFILE" in os.environ:
    del os.environ["AWS_PROFILE"]

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


# DynamoDB fixtures
@pytest.fixture
def dynamodb_resource():
    """Provide a DynamoDB resource for integration tests."""
    import boto3
    from catalog.config import get_config

    config = get_config()

    resource = boto3.resource(
        "dynamodb",
        endpoint_url=config.dynamodb_endpoint,
        region_name=config.aws_region,
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )

    return resource


@pytest.fixture
def movies_table(dynamodb_resource):
    """Provide the movies table."""
    from catalog.config import get_config

    table = dynamodb_resource.Table(get_config().movies_table)
    yield table

    # Cleanup: scan and delete all items created during test
    response = table.scan()
    with table.batch_writer() as batch:
        for item in response.get("Items", []):
            batch.delete_item(Key={"id": item["id"]})


@pytest.fixture
def cast_table(dynamodb_resource):
    """Provide the cast table."""
    from catalog.config import get_config

    table = dynamodb_resource.Table(get_config().cast_table)
    yield table

    # Cleanup: scan and delete all items created during test
    response = table.scan()
    with table.batch_writer() as batch:
        for item in response.get("Items", []):
            batch.delete_item(
                Key={
                    "movieId": item["movieId"],
                    "actorName": item["actorName"],
                }
            )
