import json
from decimal import Decimal

import pytest

from catalog.responses import json_response


def test_json_response_shape():
    result = json_response(404, {"Message": "Movie not found"})

    assert result["statusCode"] == 404
    assert result["headers"] == {"content-type": "application/json"}
    assert json.loads(result["body"]) == {"Message": "Movie not found"}


def test_json_response_encodes_dynamodb_values():
    body = {"id": Decimal("5"), "rating": Decimal("7.5"), "genres": {"Drama", "Comedy"}}

    decoded = json.loads(json_response(200, body)["body"])

    assert decoded == {"id": 5, "rating": 7.5, "genres": ["Comedy", "Drama"]}
    assert isinstance(decoded["id"], int)


def test_json_response_rejects_unknown_types():
    with pytest.raises(TypeError):
        json_response(200, {"poster": object()})
