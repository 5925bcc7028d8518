"""Testing generators – Hypothesis strategies for query property tests."""
from pagequery.testing.generators.strategies import (
    POST_SCHEMA,
    POST_STATUSES,
    page_request_strategy,
    post_record_strategy,
    post_records_strategy,
    sort_spec_strategy,
)

__all__ = [
    "POST_SCHEMA",
    "POST_STATUSES",
    "page_request_strategy",
    "post_record_strategy",
    "post_records_strategy",
    "sort_spec_strategy",
]
