"""
tableau_rest.core.session - Tableau REST HTTP Session
======================================================

Low-level session handling for the Tableau REST API with:
- Personal access token and username/password credentials
- Base URL resolution against the versioned API prefix
- Header injection (auth token, Accept, Content-Type, User-Agent)
- JSON body encoding
- One round trip per call, no retries
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union
from urllib.parse import urljoin
import json
import logging
import time

import requests
from requests import PreparedRequest, Response, Session
from requests.adapters import HTTPAdapter

from tableau_rest import __version__
from tableau_rest.core.response import handle_response

JSON_MEDIA_TYPE = "application/json"
USER_AGENT = f"tableau-rest/{__version__}"
AUTH_HEADER = "X-Tableau-Auth"
DEFAULT_API_VERSION = "3.4"


@dataclass
class TableauAuth:
    """
    Credentials used for the sign-in exchange.

    Parameters
    ----------
    kind : str
        Either "pat" (personal access token) or "password"
    value : tuple
        For pat: (token_name, token_secret)
        For password: (username, password)

    Examples
    --------
    >>> auth = TableauAuth("pat", ("ci-token", "s3cr3t"))
    >>> auth = TableauAuth("password", ("admin", "hunter2"))
    """
    kind: str  # "pat" | "password"
    value: Tuple[str, str]

    def __repr__(self) -> str:
        return f"TableauAuth(kind={self.kind!r}, name={self.value[0]!r})"


@dataclass
class TableauConfig:
    """
    Connection configuration for a Tableau server or Tableau Cloud pod.

    Parameters
    ----------
    server : str
        Server address including scheme, e.g. "https://10ax.online.tableau.com"
    auth : TableauAuth
        Credentials for sign-in
    site : str
        Site content URL ("" for the default site)
    api_version : str
        REST API version used in the base path (default: "3.4")
    timeout : float
        Request timeout in seconds (default: 60.0)
    verify : bool or str
        SSL verification (True, False, or path to CA bundle)
    user_agent : str
        User-Agent header value
    pool_connections, pool_maxsize : int
        Connection pool sizing for the HTTP adapter

    Examples
    --------
    >>> cfg = TableauConfig(
    ...     server="https://tableau.example.com",
    ...     auth=TableauAuth("pat", ("ci-token", "s3cr3t")),
    ...     site="marketing",
    ... )
    """
    server: str
    auth: TableauAuth
    site: str = ""
    api_version: str = DEFAULT_API_VERSION
    timeout: float = 60.0
    verify: Union[bool, str] = True
    user_agent: str = USER_AGENT
    pool_connections: int = 10
    pool_maxsize: int = 10

    @property
    def base_url(self) -> str:
        return f"{self.server.rstrip('/')}/api/{self.api_version}/"


@dataclass
class TableauSessionState:
    """
    Mutable state shared by every request issued from one client.

    Written once by the sign-in exchange and only read afterwards.
    ``estimated_time_to_expiration`` is recorded as received; the client
    never refreshes the token.
    """
    base_url: str
    token: Optional[str] = None
    site_id: Optional[str] = None
    estimated_time_to_expiration: Optional[str] = None
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def signed_in(self) -> bool:
        return self.token is not None


class TableauSession:
    """
    Transport for the Tableau REST API.

    Builds requests against the versioned base URL, injects the session
    headers, and performs exactly one round trip per call. Decoding is
    left to :func:`tableau_rest.core.response.handle_response`.

    Parameters
    ----------
    cfg : TableauConfig
        Connection configuration

    Examples
    --------
    >>> with TableauSession(cfg) as sess:
    ...     req = sess.build_request("GET", "serverinfo")
    ...     res = sess.send(req)
    """

    def __init__(self, cfg: TableauConfig) -> None:
        self.cfg = cfg
        self.state = TableauSessionState(base_url=cfg.base_url)
        self.timeout = float(cfg.timeout)
        self.verify = cfg.verify
        self.user_agent = cfg.user_agent
        self.logger = logging.getLogger("tableau_rest")

        self.http = self._build_http()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        try:
            self.http.close()
        except Exception:
            pass

    def __enter__(self) -> "TableauSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ---------------- http ----------------

    def _build_http(self) -> Session:
        sess = requests.Session()
        adapter = HTTPAdapter(
            max_retries=0,
            pool_connections=self.cfg.pool_connections,
            pool_maxsize=self.cfg.pool_maxsize,
        )
        sess.mount("https://", adapter)
        sess.mount("http://", adapter)
        return sess

    # ---------------- helpers ----------------

    def _url(self, path: str) -> str:
        return urljoin(self.state.base_url, path)

    @staticmethod
    def _encode(body: Any) -> bytes:
        if body is None:
            return b""
        return json.dumps(body).encode("utf-8")

    # ---------------- public ops ----------------

    def build_request(self, method: str, path: str, body: Any = None) -> PreparedRequest:
        """
        Build a request for ``path`` relative to the API base URL.

        Parameters
        ----------
        method : str
            HTTP verb
        path : str
            Path relative to ``<server>/api/<version>/``, query string included
        body : any, optional
            JSON-serializable payload; ignored for GET

        Returns
        -------
        requests.PreparedRequest

        Raises
        ------
        requests.exceptions.MissingSchema, requests.exceptions.InvalidURL
            If the resolved URL is malformed
        TypeError, ValueError
            If ``body`` cannot be serialized to JSON
        """
        method = method.upper()
        headers: Dict[str, str] = {}
        data: Optional[bytes] = None

        if method != "GET":
            data = self._encode(body)
            headers["Content-Type"] = JSON_MEDIA_TYPE

        headers["Accept"] = JSON_MEDIA_TYPE
        headers["User-Agent"] = self.user_agent
        headers.update(self.state.headers)

        req = requests.Request(method=method, url=self._url(path), headers=headers, data=data)
        return req.prepare()

    def send(self, req: PreparedRequest) -> Response:
        """
        Perform one round trip. Connection errors and timeouts propagate
        as raised by ``requests``.
        """
        t0 = time.perf_counter()
        r = self.http.send(req, timeout=self.timeout, verify=self.verify)
        dt = (time.perf_counter() - t0) * 1000.0
        self.logger.debug("%s %s %s %sms", req.method, req.url, r.status_code, round(dt, 1))
        return r

    def do(self, method: str, path: str, body: Any = None, target: Any = None) -> Any:
        """
        Build, send and decode a request.

        Returns the value decoded into ``target``, or None when no target
        is given or the server answers 204.
        """
        req = self.build_request(method, path, body)
        res = self.send(req)
        try:
            return handle_response(res, target)
        finally:
            res.close()
