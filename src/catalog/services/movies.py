"""Movie lookup service backed by DynamoDB."""

import logging
from typing import Any

from boto3.dynamodb.types import TypeDeserializer
from botocore.exceptions import BotoCoreError, ClientError

from catalog.errors import MovieNotFoundError, StoreError
from catalog.models import MovieLookupRequest, MovieLookupResult

logger = logging.getLogger(__name__)

_deserializer = TypeDeserializer()


def _unmarshal(item: dict[str, Any]) -> dict[str, Any]:
    return {key: _deserializer.deserialize(value) for key, value in item.items()}


def get_movie(movie_id: int, dynamo_client: Any, movies_table: str) -> dict[str, Any] | None:
    """Point-read a movie by its `id` partition key."""
    try:
        response = dynamo_client.get_item(
            TableName=movies_table,
            Key={"id": {"N": str(movie_id)}},
        )
    except (ClientError, BotoCoreError) as e:
        raise StoreError(f"get_item on {movies_table} failed: {e}") from e

    item = response.get("Item")
    if item is None:
        return None
    return _unmarshal(item)


def get_cast_for_movie(movie_id: int, dynamo_client: Any, cast_table: str) -> list[dict[str, Any]]:
    """Query every cast record sharing `movieId`, following pagination."""
    cast: list[dict[str, Any]] = []
    last_key = None

    while True:
        query_kwargs: dict[str, Any] = {
            "TableName": cast_table,
            "KeyConditionExpression": "movieId = :m",
            "ExpressionAttributeValues": {":m": {"N": str(movie_id)}},
        }
        if last_key:
            query_kwargs["ExclusiveStartKey"] = last_key

        try:
            response = dynamo_client.query(**query_kwargs)
        except (ClientError, BotoCoreError) as e:
            raise StoreError(f"query on {cast_table} failed: {e}") from e

        cast.extend(_unmarshal(item) for item in response.get("Items", []))

        last_key = response.get("LastEvaluatedKey")
        if not last_key:
            break

    return cast


def lookup_movie(
    request: MovieLookupRequest,
    dynamo_client: Any,
    movies_table: str,
    cast_table: str,
) -> MovieLookupResult:
    movie = get_movie(request.movie_id, dynamo_client, movies_table)
    if movie is None:
        raise MovieNotFoundError(f"No movie with id {request.movie_id}")

    if not request.include_cast:
        return MovieLookupResult(movie=movie)

    cast = get_cast_for_movie(request.movie_id, dynamo_client, cast_table)
    logger.info("Found %d cast records for movie %d", len(cast), request.movie_id)
    return MovieLookupResult(movie=movie, cast=cast)
