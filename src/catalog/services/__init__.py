"""
Business services for the movie catalog API.

- movies.py: movie point lookup and cast enrichment against DynamoDB
"""

__all__: list[str] = []
