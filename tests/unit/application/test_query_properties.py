"""Property-based tests for the paginated query engine."""

from __future__ import annotations

import math
import random
from typing import Any

from hypothesis import given, settings
from hypothesis import strategies as st

from pagequery.application.pagination import PageRequest, SortSpec
from pagequery.application.query import Exact, QueryEngine, matches
from pagequery.testing import (
    POST_SCHEMA,
    POST_STATUSES,
    page_request_strategy,
    post_records_strategy,
    sort_spec_strategy,
)

ENGINE = QueryEngine(POST_SCHEMA)

status_filters = st.one_of(
    st.none(),
    st.sampled_from(POST_STATUSES + ("nonexistent",)).map(lambda s: {"status": Exact(s)}),
)


def _ids(records: list[Any]) -> list[Any]:
    return [r["id"] for r in records]


@settings(max_examples=75, deadline=None)
@given(post_records_strategy(), status_filters, sort_spec_strategy(), page_request_strategy())
def test_records_equals_match_count(
    records: list[dict[str, Any]],
    filters: dict[str, Any] | None,
    sort: SortSpec,
    page_req: PageRequest,
) -> None:
    result = ENGINE.list(records, filters, sort, page_req)
    expected = sum(1 for r in records if matches(r, filters, POST_SCHEMA))
    assert result.pagination.records == expected


@settings(max_examples=75, deadline=None)
@given(post_records_strategy(), status_filters, page_request_strategy())
def test_page_size_and_page_count(
    records: list[dict[str, Any]],
    filters: dict[str, Any] | None,
    page_req: PageRequest,
) -> None:
    result = ENGINE.list(records, filters, None, page_req)
    total = result.pagination.records
    assert len(result.data) == min(page_req.limit, max(0, total - (page_req.page - 1) * page_req.limit))
    assert result.pagination.pages == math.ceil(total / page_req.limit)
    assert (result.pagination.pages == 0) == (total == 0)
    assert result.pagination.current == page_req.page
    assert result.pagination.limit == page_req.limit


@settings(max_examples=50, deadline=None)
@given(post_records_strategy(), sort_spec_strategy(), page_request_strategy())
def test_idempotent(records: list[dict[str, Any]], sort: SortSpec, page_req: PageRequest) -> None:
    assert ENGINE.list(records, None, sort, page_req) == ENGINE.list(records, None, sort, page_req)


@settings(max_examples=50, deadline=None)
@given(post_records_strategy(), sort_spec_strategy(), st.randoms(use_true_random=False))
def test_order_independent_of_input_order(
    records: list[dict[str, Any]], sort: SortSpec, rnd: random.Random
) -> None:
    shuffled = list(records)
    rnd.shuffle(shuffled)
    everything = PageRequest(page=1, limit=1000)
    assert _ids(ENGINE.list(records, None, sort, everything).data) == _ids(
        ENGINE.list(shuffled, None, sort, everything).data
    )


@settings(max_examples=50, deadline=None)
@given(post_records_strategy(min_size=1), sort_spec_strategy(), st.integers(min_value=1, max_value=7))
def test_pages_partition_the_full_listing(
    records: list[dict[str, Any]], sort: SortSpec, limit: int
) -> None:
    full = ENGINE.list(records, None, sort, PageRequest(page=1, limit=1000)).data
    pages = math.ceil(len(records) / limit)
    stitched: list[Any] = []
    for page in range(1, pages + 1):
        stitched.extend(ENGINE.list(records, None, sort, PageRequest(page=page, limit=limit)).data)
    assert _ids(stitched) == _ids(full)


@settings(max_examples=50, deadline=None)
@given(post_records_strategy(min_size=1), st.integers(min_value=1, max_value=5))
def test_page_beyond_last_is_empty(records: list[dict[str, Any]], limit: int) -> None:
    pages = math.ceil(len(records) / limit)
    result = ENGINE.list(records, None, None, PageRequest(page=pages + 1, limit=limit))
    assert result.data == []
    assert result.pagination.records == len(records)
    assert result.pagination.pages == pages
