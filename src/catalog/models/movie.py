import re
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from catalog.errors import InvalidRequestError

NO_CAST_MESSAGE = "No cast information found"

_MOVIE_ID_PATTERN = re.compile(r"-?[0-9]+")


class MovieLookupRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    movie_id: int
    include_cast: bool = False

    @field_validator("movie_id", mode="before")
    @classmethod
    def plain_digits(cls, value: Any) -> Any:
        if isinstance(value, str) and not _MOVIE_ID_PATTERN.fullmatch(value):
            raise ValueError("movieId must be a plain integer")
        return value

    @field_validator("movie_id")
    @classmethod
    def not_zero(cls, value: int) -> int:
        # A zero id is treated the same as a missing one.
        if value == 0:
            raise ValueError("movieId must not be 0")
        return value

    @classmethod
    def from_event(cls, event: dict[str, Any]) -> "MovieLookupRequest":
        """Build a request from an API Gateway HTTP API (v2) event."""
        path_params = event.get("pathParameters") or {}
        query_params = event.get("queryStringParameters") or {}
        try:
            return cls(
                movie_id=path_params.get("movieId"),
                include_cast=query_params.get("cast") == "true",
            )
        except ValidationError as e:
            raise InvalidRequestError(f"Invalid movieId: {path_params.get('movieId')!r}") from e


class MovieLookupResult(BaseModel):
    movie: dict[str, Any]
    cast: list[dict[str, Any]] | None = None

    def to_data(self) -> dict[str, Any]:
        """Render the response `data` object; `cast` is always a list when requested."""
        data = dict(self.movie)
        if self.cast is not None:
            data["cast"] = list(self.cast)
            if not self.cast:
                data["castMessage"] = NO_CAST_MESSAGE
        return data
