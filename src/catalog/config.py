from os import environ

from pydantic import BaseModel, ConfigDict


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    movies_table: str
    cast_table: str
    dynamodb_endpoint: str | None = None


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config — for testing only."""
    global _cached_config
    _cached_config = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        aws_region=environ.get("REGION") or environ.get("AWS_REGION", "us-east-1"),
        movies_table=environ.get("TABLE_NAME", "Movies"),
        cast_table=environ.get("CAST_TABLE_NAME", "MovieCast"),
        dynamodb_endpoint=environ.get("DYNAMODB_ENDPOINT"),
    )
    return _cached_config
