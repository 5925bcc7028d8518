"""Testing support – Hypothesis strategies and sample schemas.

Use in property tests::

    from hypothesis import given
    from pagequery.testing import POST_SCHEMA, post_records_strategy
"""

from pagequery.testing.generators import (
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
