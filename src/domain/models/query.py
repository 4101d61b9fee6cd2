"""Query specification for generic repository reads.

QuerySpec bundles an optional row predicate with optional paging.  It is not
persisted; a fresh spec is built for every read.

filter is a boolean SQL expression over the mapped entity
(e.g. ``Post.title == "Mustang"``) and is passed through to the store
untouched.  skip and take are non-negative; skip is always applied before
take, whatever order the spec was assembled in.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class QuerySpec(BaseModel):
    """Filter + skip/take for a single get_all call."""

    model_config = ConfigDict(frozen=True)

    filter: Any = None
    skip: int | None = Field(default=None, ge=0)
    take: int | None = Field(default=None, ge=0)

    @property
    def is_paged(self) -> bool:
        return self.skip is not None or self.take is not None

    def filtered(self, predicate: Any) -> QuerySpec:
        """Return a copy whose filter is AND-combined with predicate."""
        combined = predicate if self.filter is None else (self.filter & predicate)
        return type(self)(filter=combined, skip=self.skip, take=self.take)

    def paged(self, skip: int | None = None, take: int | None = None) -> QuerySpec:
        """Return a copy with the given paging and the same filter."""
        return type(self)(filter=self.filter, skip=skip, take=take)
