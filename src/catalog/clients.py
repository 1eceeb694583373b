"""Lazy-initialized boto3 client — reused across warm Lambda invocations."""

from functools import lru_cache
from typing import Any

import boto3

from catalog.config import get_config


@lru_cache(maxsize=1)
def get_dynamo_client() -> Any:
    config = get_config()
    return boto3.client(
        "dynamodb",
        region_name=config.aws_region,
        endpoint_url=config.dynamodb_endpoint,
    )
