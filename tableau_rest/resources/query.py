"""
tableau_rest.resources.query - Query options for list endpoints
================================================================

A query is configured by applying option callables, in order, to a
:class:`QueryOptions`. Each option sets at most one URL parameter and only
when its value differs from the default, so options never fail on
ordinary input and new ones can be added without changing ``query()``.

Examples
--------
>>> opts = QueryOptions.apply(with_page_size(25), with_sort_expression("name:asc"))
>>> opts.encode()
'pageSize=25&sort=name%3Aasc'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict
from urllib.parse import urlencode


@dataclass
class QueryOptions:
    """URL parameters accumulated by query options."""
    params: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def apply(cls, *opts: "QueryOption") -> "QueryOptions":
        q = cls()
        for opt in opts:
            opt(q)
        return q

    def encode(self) -> str:
        """Encoded query string, keys sorted; "" when nothing is set."""
        return urlencode(sorted(self.params.items()))


QueryOption = Callable[[QueryOptions], None]


def with_page_size(page_size: int) -> QueryOption:
    """Set ``pageSize`` when ``page_size`` is positive."""
    def opt(q: QueryOptions) -> None:
        if page_size > 0:
            q.params["pageSize"] = str(page_size)
    return opt


def with_page_number(page_number: int) -> QueryOption:
    """Set ``pageNumber`` when ``page_number`` is positive."""
    def opt(q: QueryOptions) -> None:
        if page_number > 0:
            q.params["pageNumber"] = str(page_number)
    return opt


def with_filter_expression(filter_exp: str) -> QueryOption:
    """Set ``filter``, e.g. ``"name:eq:Finance"``, when non-empty."""
    def opt(q: QueryOptions) -> None:
        if filter_exp:
            q.params["filter"] = filter_exp
    return opt


def with_sort_expression(sort_exp: str) -> QueryOption:
    """Set ``sort``, e.g. ``"name:asc"``, when non-empty."""
    def opt(q: QueryOptions) -> None:
        if sort_exp:
            q.params["sort"] = sort_exp
    return opt


def with_query(path: str, *opts: QueryOption) -> str:
    """Append the encoded options to ``path``."""
    vals = QueryOptions.apply(*opts).encode()
    if vals:
        return f"{path}?{vals}"
    return path
