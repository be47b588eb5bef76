"""
tableau_rest.resources.projects - Project service
==================================================
"""

from __future__ import annotations

from typing import List, Optional

from tableau_rest.models import (
    CreateProjectRequest,
    DeleteProjectRequest,
    Project,
    ProjectResponse,
    QueryProjectsResponse,
    UpdateProjectRequest,
)
from tableau_rest.resources.base import ResourceService
from tableau_rest.resources.query import QueryOption, with_query


class ProjectsService(ResourceService):
    """
    Create, update, delete and list projects on the signed-in site.

    Examples
    --------
    >>> projects = client.projects.query(with_page_size(100))
    >>> p = client.projects.create(CreateProjectRequest(name="Finance"))
    """

    COLLECTION = "projects"

    def query(self, *opts: QueryOption) -> List[Project]:
        """
        List projects, one page per call.

        Parameters
        ----------
        *opts
            Query options such as ``with_page_size(25)``

        Returns
        -------
        list of Project
        """
        path = with_query(self._path(), *opts)
        resp: QueryProjectsResponse = self._do("GET", path, target=QueryProjectsResponse)
        return resp.projects.project

    def create(self, req: CreateProjectRequest) -> Optional[Project]:
        """Create a project and return the server's representation."""
        body = {"project": req.to_wire()}
        resp: ProjectResponse = self._do("POST", self._path(), body, ProjectResponse)
        return resp.project

    def update(self, req: UpdateProjectRequest) -> Optional[Project]:
        """Update the project ``req.id`` and return the server's representation."""
        body = {"project": req.to_wire()}
        resp: ProjectResponse = self._do("PUT", self._path(req.id), body, ProjectResponse)
        return resp.project

    def delete(self, req: DeleteProjectRequest) -> Optional[Project]:
        """Delete a project. The server normally answers 204, giving None."""
        resp: Optional[ProjectResponse] = self._do("DELETE", self._path(req.id), target=ProjectResponse)
        if resp is None:
            return None
        return resp.project
