"""
tableau_rest.resources.base - Base class for site-scoped resource services
===========================================================================
"""

from __future__ import annotations

from typing import Any, Optional

from tableau_rest.core.session import TableauSession


class ResourceService:
    """
    Base class for resource services.

    Subclasses define ``COLLECTION``, the path segment below
    ``sites/{site_id}/``, and issue requests through ``self._session``.

    Parameters
    ----------
    session : TableauSession
        Signed-in session; its site id scopes every path
    """

    COLLECTION: str = ""

    def __init__(self, session: TableauSession) -> None:
        self._session = session

    @property
    def site_id(self) -> str:
        return self._session.state.site_id or ""

    def _path(self, resource_id: Optional[str] = None) -> str:
        if not self.COLLECTION:
            raise NotImplementedError(f"{self.__class__.__name__} must define COLLECTION")
        path = f"sites/{self.site_id}/{self.COLLECTION}"
        if resource_id is not None:
            path = f"{path}/{resource_id}"
        return path

    def _do(self, method: str, path: str, body: Any = None, target: Any = None) -> Any:
        return self._session.do(method, path, body, target)
