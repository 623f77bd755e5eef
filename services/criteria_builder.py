"""
Criteria builder — translates search criteria into ImageKit query strings.

Query forms:
    format="jpg"
    name="exact-filename.ext"
    format IN ['jpg','png']
    format NOT IN ['jpg','png']

Filenames are inserted literally. Embedded double quotes are NOT escaped;
callers must supply names that are safe inside a quoted query value.

The builder never performs I/O: it returns an inert RequestDescriptor.
"""

from __future__ import annotations

from typing import Sequence

from domain.models import FileFormat, RequestDescriptor
from domain.search_criteria import (
    FilenameEquals,
    FormatEquals,
    FormatIn,
    FormatNotIn,
    SearchCriteria,
)
from shared_utils.constants import APIEndpoints, QueryParams


def join_formats(formats: Sequence[FileFormat], separator: str = ",") -> str:
    """Single-quote each format and join them in input order."""
    return separator.join(f"'{fmt.to_query_value()}'" for fmt in formats)


def build_query(criteria: SearchCriteria) -> str:
    """Render ``criteria`` as a provider query string.

    Raises:
        TypeError: If ``criteria`` is not a known criteria type
    """
    if isinstance(criteria, FormatEquals):
        return f'format="{criteria.format.to_query_value()}"'
    if isinstance(criteria, FormatIn):
        return f"format IN [{join_formats(criteria.formats)}]"
    if isinstance(criteria, FormatNotIn):
        return f"format NOT IN [{join_formats(criteria.formats)}]"
    if isinstance(criteria, FilenameEquals):
        return f'name="{criteria.name}"'
    raise TypeError(f"Unsupported search criteria: {type(criteria).__name__}")


def build_request(criteria: SearchCriteria, base_url: str) -> RequestDescriptor:
    """Wrap the query for ``criteria`` into a GET on the files listing endpoint.

    Args:
        criteria: Search predicate
        base_url: API base URL without trailing slash

    Returns:
        RequestDescriptor carrying the single ``searchQuery`` parameter
    """
    return RequestDescriptor(
        method="GET",
        url=f"{base_url.rstrip('/')}{APIEndpoints.FILES}",
        params=((QueryParams.SEARCH_QUERY, build_query(criteria)),),
    )
