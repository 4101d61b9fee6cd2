"""Domain model package.

Pure Pydantic models with no ORM or infrastructure dependencies.
"""

from .query import QuerySpec

__all__ = [
    "QuerySpec",
]
