"""
pagequery – paginated, filtered and sorted record listings.

Import path convention::

    from pagequery.application.query import QueryEngine, RecordSchema, FieldType
    from pagequery.application.pagination import PageRequest, SortSpec
    from pagequery.kernel.errors import InvalidLimitError
    from pagequery.adapters.fastapi import FastAPIExceptionMapper
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
