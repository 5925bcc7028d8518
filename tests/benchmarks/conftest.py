"""conftest.py for benchmarks.

Provides a deterministic, session-scoped record set so every benchmark
measures the same listing workload.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from pagequery.testing import POST_STATUSES

_T0 = datetime(2025, 1, 1, tzinfo=timezone.utc)


@pytest.fixture(scope="session")
def post_records() -> list[dict]:
    """10 000 post-shaped records; every 50th one is soft-deleted."""
    return [
        {
            "id": i,
            "title": f"Post {i} about {'pagination' if i % 7 == 0 else 'sorting'}",
            "status": POST_STATUSES[i % len(POST_STATUSES)],
            "score": (i * 37) % 1000,
            "pinned": i % 11 == 0,
            "created_at": _T0 + timedelta(minutes=(i * 13) % 5000),
            "deleted_at": _T0 if i % 50 == 0 else None,
        }
        for i in range(1, 10_001)
    ]
