"""Domain repository interfaces.

The abstraction is defined here with abc.ABC and @abstractmethod.
Concrete implementations live in src/infrastructure/persistence/ and are
wired at the application boundary via dependency injection.
"""

from .base import RecordLookup, Repository

__all__ = [
    "Repository",
    "RecordLookup",
]
