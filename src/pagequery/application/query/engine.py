"""Application query – the query orchestrator.

``QueryEngine.list`` runs validate → filter → sort → slice over a snapshot of
records and returns a :class:`PageResult`. It keeps no state between calls,
so the same inputs over an unchanged record set always give the same page.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, NamedTuple

from pagequery.application.pagination.page import PageResult
from pagequery.application.pagination.page_request import PageRequest, SortDirection, SortSpec
from pagequery.application.pagination.slicer import slice_page
from pagequery.application.query.conditions import Condition, Keyword, parse_filter_spec
from pagequery.application.query.ordering import sort_records
from pagequery.application.query.predicate import compile_filter
from pagequery.application.query.schema import RecordSchema
from pagequery.application.query.source import RecordSource
from pagequery.application.query.validation import validate, validate_page_request
from pagequery.config.settings.query import QuerySettings
from pagequery.kernel.errors import QueryValidationError
from pagequery.observability.logging import Logger, get_logger

__all__ = ["QueryEngine", "list_records"]


class _PreparedQuery(NamedTuple):
    request: PageRequest
    conditions: dict[str, Condition]
    sort: SortSpec
    keyword: Keyword | None


class QueryEngine:
    """Paginated, filtered and sorted listing over one record kind.

    Example::

        engine = QueryEngine(POST_SCHEMA)
        page = engine.list(
            posts,
            {"status": {"exact": "public"}},
            SortSpec("created_at", SortDirection.DESC),
            PageRequest(page=2, limit=10),
        )
        page.pagination  # Pagination(current=2, limit=10, records=..., pages=...)
    """

    def __init__(
        self,
        schema: RecordSchema,
        settings: QuerySettings | None = None,
        *,
        logger: Logger | None = None,
    ) -> None:
        self._schema = schema
        self._settings = settings or QuerySettings()
        self._log: Logger = logger or get_logger(__name__)
        self._id_field = self._resolve_tie_break()
        self._default_sort = self._resolve_default_sort()

    @property
    def schema(self) -> RecordSchema:
        return self._schema

    @property
    def settings(self) -> QuerySettings:
        return self._settings

    @property
    def default_sort(self) -> SortSpec:
        return self._default_sort

    def _resolve_tie_break(self) -> str:
        name = self._settings.tie_break_field
        return name if self._schema.get(name) is not None else self._schema.id_field

    def _resolve_default_sort(self) -> SortSpec:
        spec = self._schema.get(self._settings.default_sort_field)
        if spec is not None and spec.sortable:
            return SortSpec(spec.name, SortDirection.parse(self._settings.default_sort_direction))
        return SortSpec(self._id_field, SortDirection.ASC)

    def list(
        self,
        records: Iterable[Any],
        filter_spec: Mapping[str, Any] | None = None,
        sort_spec: SortSpec | str | None = None,
        page_request: PageRequest | None = None,
        *,
        keyword: Keyword | None = None,
    ) -> PageResult[Any]:
        """Return one page of *records* matching *filter_spec*.

        Raises
        ------
        QueryValidationError
            ``InvalidLimitError``, ``InvalidPageError``,
            ``InvalidFilterFieldError`` or ``InvalidSortFieldError``; raised
            before *records* is read.
        """
        query = self._prepare(filter_spec, sort_spec, page_request, keyword)
        return self._execute(records, query)

    def list_from(
        self,
        source: RecordSource,
        filter_spec: Mapping[str, Any] | None = None,
        sort_spec: SortSpec | str | None = None,
        page_request: PageRequest | None = None,
        *,
        keyword: Keyword | None = None,
    ) -> PageResult[Any]:
        """Like :meth:`list`, reading one snapshot from *source* once the
        query has passed validation."""
        query = self._prepare(filter_spec, sort_spec, page_request, keyword)
        return self._execute(source.snapshot(), query)

    def _prepare(
        self,
        filter_spec: Mapping[str, Any] | None,
        sort_spec: SortSpec | str | None,
        page_request: PageRequest | None,
        keyword: Keyword | None,
    ) -> _PreparedQuery:
        request = page_request or PageRequest(page=1, limit=self._settings.default_limit)
        try:
            validate_page_request(request, self._settings.max_limit)
            conditions = parse_filter_spec(filter_spec)
            sort = SortSpec.parse(sort_spec) if sort_spec is not None else self._default_sort
            validate(request, conditions, sort, self._schema, self._settings.max_limit, keyword)
        except QueryValidationError as exc:
            self._log.warning("query.rejected", code=exc.code, field=exc.field, reason=exc.reason)
            raise
        return _PreparedQuery(request, conditions, sort, keyword)

    def _execute(self, records: Iterable[Any], query: _PreparedQuery) -> PageResult[Any]:
        request, conditions, sort, keyword = query
        predicate = compile_filter(conditions, self._schema, keyword)
        matched = [record for record in records if predicate(record)]
        ordered = sort_records(matched, sort, self._schema, self._id_field)
        data, pagination = slice_page(ordered, request.page, request.limit)

        if self._settings.log_queries:
            self._log.debug(
                "query.listed",
                page=pagination.current,
                limit=pagination.limit,
                records=pagination.records,
                pages=pagination.pages,
                sort=f"{sort.field}:{sort.direction.value}",
                filters=sorted(conditions),
            )
        return PageResult(data=data, pagination=pagination)


def list_records(
    records: Iterable[Any],
    schema: RecordSchema,
    filter_spec: Mapping[str, Any] | None = None,
    sort_spec: SortSpec | str | None = None,
    page_request: PageRequest | None = None,
    *,
    keyword: Keyword | None = None,
    settings: QuerySettings | None = None,
) -> PageResult[Any]:
    """One-off :meth:`QueryEngine.list` call."""
    return QueryEngine(schema, settings).list(
        records, filter_spec, sort_spec, page_request, keyword=keyword
    )
