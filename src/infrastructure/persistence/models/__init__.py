"""ORM model registry — imports all model modules so every mapper class is
registered with Base.metadata before SQLAlchemy runs.

Import order follows the dependency graph (referenced tables first).
"""

from src.infrastructure.persistence.models.users import User
from src.infrastructure.persistence.models.engine_types import EngineType
from src.infrastructure.persistence.models.posts import Post

__all__ = [
    "User",
    "EngineType",
    "Post",
]
