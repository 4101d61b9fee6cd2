"""Persistence package.

Importing this package registers every ORM mapper with Base.metadata
(required for SQLAlchemy mapper configuration and create_all) and exports
all repository implementations, the DI factory, and the unit of work.
"""

from src.infrastructure.persistence.models import *  # noqa: F401, F403
from src.infrastructure.persistence.models import __all__ as _orm_all
from src.infrastructure.persistence.repositories import (
    Repositories,
    SqlEngineTypeRepository,
    SqlPostRepository,
    SqlRepository,
    SqlUserRepository,
    get_repositories,
)
from src.infrastructure.persistence.unit_of_work import UnitOfWork

__all__ = _orm_all + [
    "Repositories",
    "SqlRepository",
    "SqlUserRepository",
    "SqlEngineTypeRepository",
    "SqlPostRepository",
    "UnitOfWork",
    "get_repositories",
]
