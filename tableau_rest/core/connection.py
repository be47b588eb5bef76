"""
tableau_rest.core.connection - High-level client
=================================================

Provides TableauClient: builds the session, signs in, and exposes the
resource services.
"""

from __future__ import annotations

from typing import Optional, Union

from tableau_rest.core.auth import sign_in
from tableau_rest.core.session import TableauAuth, TableauConfig, TableauSession
from tableau_rest.resources.datasources import DataSourcesService
from tableau_rest.resources.projects import ProjectsService


class TableauClient:
    """
    Signed-in client for the Tableau REST API.

    Sign-in completes inside the constructor, so the session headers are
    fully populated before the client can be shared between threads.

    Parameters
    ----------
    server : str, optional
        Server address including scheme; required unless cfg is given
    token_name : str, optional
        Personal access token name
    token_secret : str, optional
        Personal access token secret
    site : str
        Site content URL ("" for the default site)
    auth : TableauAuth, optional
        Explicit credentials; takes precedence over token_name/token_secret
    api_version : str
        REST API version
    timeout : float
        Request timeout in seconds
    verify : bool or str
        SSL verification
    cfg : TableauConfig, optional
        Full configuration; when given, the other parameters are ignored

    Examples
    --------
    >>> with TableauClient(
    ...     "https://tableau.example.com",
    ...     token_name="ci-token",
    ...     token_secret="s3cr3t",
    ...     site="marketing",
    ... ) as client:
    ...     for project in client.projects.query(with_page_size(50)):
    ...         print(project.name)
    """

    def __init__(
        self,
        server: Optional[str] = None,
        token_name: Optional[str] = None,
        token_secret: Optional[str] = None,
        site: str = "",
        *,
        auth: Optional[TableauAuth] = None,
        api_version: Optional[str] = None,
        timeout: float = 60.0,
        verify: Union[bool, str] = True,
        cfg: Optional[TableauConfig] = None,
    ) -> None:
        if cfg is None:
            cfg = self._build_config(server, token_name, token_secret, site, auth, timeout, verify)
            if api_version:
                cfg.api_version = api_version

        self.cfg = cfg
        self.session = TableauSession(cfg)
        try:
            sign_in(self.session, cfg.auth, cfg.site)
        except Exception:
            self.session.close()
            raise

        self.projects = ProjectsService(self.session)
        self.datasources = DataSourcesService(self.session)

    @classmethod
    def from_config(cls, cfg: TableauConfig) -> "TableauClient":
        """Create and sign in a client from a full configuration."""
        return cls(cfg=cfg)

    @staticmethod
    def _build_config(
        server: Optional[str],
        token_name: Optional[str],
        token_secret: Optional[str],
        site: str,
        auth: Optional[TableauAuth],
        timeout: float,
        verify: Union[bool, str],
    ) -> TableauConfig:
        if not server:
            raise ValueError("Missing server. Pass server or cfg.")
        if auth is None:
            if token_name is None or token_secret is None:
                raise ValueError(
                    "Missing credentials. Pass token_name/token_secret or auth."
                )
            auth = TableauAuth("pat", (token_name, token_secret))
        return TableauConfig(server=server, auth=auth, site=site, timeout=timeout, verify=verify)

    @property
    def site_id(self) -> str:
        """Site id resolved by sign-in."""
        return self.session.state.site_id or ""

    @property
    def token(self) -> str:
        """Session token returned by sign-in."""
        return self.session.state.token or ""

    def close(self) -> None:
        """Close the connection."""
        self.session.close()

    def __enter__(self) -> "TableauClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
