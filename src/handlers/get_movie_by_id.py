"""GET /movies/{movieId} handler — movie lookup with optional cast enrichment."""

import json
import logging
from typing import Any

from catalog.clients import get_dynamo_client
from catalog.config import get_config
from catalog.errors import InvalidRequestError, MovieNotFoundError, error_payload
from catalog.models import MovieLookupRequest
from catalog.responses import json_response
from catalog.services.movies import lookup_movie

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    """Return the movie for `movieId`, with cast records when `?cast=true`.

    Bad or missing ids and unknown movies are both 404s; anything else is a 500.
    """
    try:
        logger.info("[EVENT] %s", json.dumps(event, default=str))

        request = MovieLookupRequest.from_event(event)
        config = get_config()
        result = lookup_movie(request, get_dynamo_client(), config.movies_table, config.cast_table)

        return json_response(200, {"data": result.to_data()})
    except (InvalidRequestError, MovieNotFoundError) as e:
        logger.info("%s: %s", e.code.value, e.message)
        return json_response(404, {"Message": e.user_message})
    except Exception as e:
        logger.exception("Movie lookup failed")
        return json_response(500, {"error": error_payload(e)})
