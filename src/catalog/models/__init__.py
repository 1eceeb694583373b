"""
Pydantic models for the movie catalog API.
"""

from catalog.models.movie import NO_CAST_MESSAGE, MovieLookupRequest, MovieLookupResult

__all__ = ["MovieLookupRequest", "MovieLookupResult", "NO_CAST_MESSAGE"]
