"""
Core package for the movie catalog API.

Configuration, DynamoDB access, error taxonomy and response building live here.
Lambda handlers in src/handlers/ are thin wrappers that call into catalog/.
"""

__all__: list[str] = []
