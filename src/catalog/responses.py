"""API Gateway proxy responses with DynamoDB-aware JSON encoding."""

import json
from decimal import Decimal
from typing import Any


def _json_default(value: Any) -> Any:
    # TypeDeserializer yields Decimal for N and set for SS/NS.
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def json_response(status_code: int, body: dict[str, Any]) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"content-type": "application/json"},
        "body": json.dumps(body, default=_json_default),
    }
