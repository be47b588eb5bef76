"""
tableau_rest.resources - Site-scoped resource services
=======================================================

- ProjectsService: query/create/update/delete projects
- DataSourcesService: get/query/delete published data sources
- Query options for list endpoints

"""

from tableau_rest.resources.query import (
    QueryOption,
    QueryOptions,
    with_filter_expression,
    with_page_number,
    with_page_size,
    with_sort_expression,
)
from tableau_rest.resources.projects import ProjectsService
from tableau_rest.resources.datasources import DataSourcesService

__all__ = [
    "QueryOption",
    "QueryOptions",
    "with_filter_expression",
    "with_page_number",
    "with_page_size",
    "with_sort_expression",
    "ProjectsService",
    "DataSourcesService",
]
