"""Tests for src/domain/models/query.py."""

import pytest
from pydantic import ValidationError

from src.domain.models import QuerySpec
from src.infrastructure.persistence.models import Post


def test_query_spec_defaults_to_unfiltered_unpaged():
    spec = QuerySpec()
    assert spec.filter is None
    assert spec.skip is None
    assert spec.take is None
    assert spec.is_paged is False


def test_query_spec_is_paged_with_only_take():
    assert QuerySpec(take=5).is_paged is True


def test_query_spec_rejects_negative_skip():
    with pytest.raises(ValidationError):
        QuerySpec(skip=-1)


def test_query_spec_rejects_negative_take():
    with pytest.raises(ValidationError):
        QuerySpec(take=-1)


def test_query_spec_validation_error_is_a_value_error():
    with pytest.raises(ValueError):
        QuerySpec(skip=-3, take=1)


def test_query_spec_accepts_zero_paging():
    spec = QuerySpec(skip=0, take=0)
    assert (spec.skip, spec.take) == (0, 0)


def test_query_spec_is_frozen():
    spec = QuerySpec(skip=1)
    with pytest.raises(ValidationError):
        spec.skip = 2  # type: ignore[misc]


def test_filtered_sets_predicate_on_empty_spec():
    predicate = Post.title == "Mustang"
    assert QuerySpec().filtered(predicate).filter is predicate


def test_filtered_and_combines_with_existing_predicate():
    spec = QuerySpec(filter=Post.title == "Mustang").filtered(Post.description == "red")
    sql = str(spec.filter.compile(compile_kwargs={"literal_binds": True}))
    assert "posts.title = 'Mustang'" in sql
    assert " AND " in sql
    assert "posts.description = 'red'" in sql


def test_filtered_preserves_paging():
    spec = QuerySpec(skip=2, take=3).filtered(Post.title == "x")
    assert (spec.skip, spec.take) == (2, 3)


def test_paged_replaces_paging_and_keeps_filter():
    predicate = Post.title == "x"
    spec = QuerySpec(filter=predicate, skip=9).paged(take=4)
    assert spec.filter is predicate
    assert (spec.skip, spec.take) == (None, 4)


def test_paged_validates_values():
    with pytest.raises(ValidationError):
        QuerySpec().paged(skip=-1)
