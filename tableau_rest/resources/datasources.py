"""
tableau_rest.resources.datasources - Data source service
=========================================================
"""

from __future__ import annotations

from typing import List, Optional

from tableau_rest.models import (
    DataSource,
    DataSourceResponse,
    DeleteDataSourceRequest,
    GetDataSourceRequest,
    QueryDataSourcesResponse,
)
from tableau_rest.resources.base import ResourceService
from tableau_rest.resources.query import QueryOption, with_query


class DataSourcesService(ResourceService):
    """Read, list and delete published data sources on the signed-in site."""

    COLLECTION = "datasources"

    def get(self, req: GetDataSourceRequest) -> Optional[DataSource]:
        resp: DataSourceResponse = self._do("GET", self._path(req.id), target=DataSourceResponse)
        return resp.datasource

    def query(self, *opts: QueryOption) -> List[DataSource]:
        path = with_query(self._path(), *opts)
        resp: QueryDataSourcesResponse = self._do("GET", path, target=QueryDataSourcesResponse)
        return resp.datasources.datasource

    def delete(self, req: DeleteDataSourceRequest) -> None:
        self._do("DELETE", self._path(req.id))
