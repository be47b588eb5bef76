"""
Pytest configuration and shared fixtures.
"""

import json
import pytest
from unittest.mock import MagicMock, patch
from typing import Any, Union

import requests

from tableau_rest.core.session import TableauAuth, TableauConfig, TableauSession


SERVER = "https://tableau.example.com"
SITE_ID = "9a8b7c6d-5e4f-3a2b-1c0d-9e8f7a6b5c4d"
TOKEN = "12ab34cd56ef78ab90cd12ef34ab56cd|site-token"


def make_response(status: int, body: Union[bytes, str, Any] = b"") -> requests.Response:
    """Build a requests.Response with a fully read body."""
    r = requests.Response()
    r.status_code = status
    if isinstance(body, bytes):
        r._content = body
    elif isinstance(body, str):
        r._content = body.encode("utf-8")
    else:
        r._content = json.dumps(body).encode("utf-8")
    r._content_consumed = True
    r.url = f"{SERVER}/api/3.4/"
    return r


def sent_json(prepared: requests.PreparedRequest) -> Any:
    """Decode the JSON body of a prepared request."""
    return json.loads(prepared.body)


@pytest.fixture
def cfg():
    return TableauConfig(
        server=SERVER,
        auth=TableauAuth("pat", ("ci-token", "s3cr3t")),
        site="marketing",
    )


@pytest.fixture
def mock_http():
    """Patch requests.Session so every TableauSession gets the same mock."""
    with patch("tableau_rest.core.session.requests.Session") as mock_session_class:
        http = MagicMock()
        mock_session_class.return_value = http
        yield http


@pytest.fixture
def session(cfg, mock_http):
    """A TableauSession that looks signed in."""
    sess = TableauSession(cfg)
    sess.state.token = TOKEN
    sess.state.site_id = SITE_ID
    sess.state.headers["X-Tableau-Auth"] = TOKEN
    return sess


@pytest.fixture
def sign_in_body():
    return {
        "credentials": {
            "site": {"id": SITE_ID, "contentUrl": "marketing"},
            "user": {"id": "u-1"},
            "token": TOKEN,
            "estimatedTimeToExpiration": "361:59:59",
        }
    }


@pytest.fixture
def sample_project():
    return {
        "id": "1f2f3e4d-0000-4000-8000-000000000001",
        "parentProjectId": "1f2f3e4d-0000-4000-8000-000000000000",
        "name": "Finance",
        "description": "Quarterly reporting",
        "contentPermissions": "LockedToProject",
        "controllingPermissionsProjectId": "1f2f3e4d-0000-4000-8000-000000000001",
        "writeable": True,
        "topLevelProject": False,
        "owner": {"id": "u-1", "name": "admin", "siteRole": "SiteAdministratorCreator"},
        "contentCounts": {"projectCount": 2, "workbookCount": 5, "viewCount": 12, "datasourceCount": 3},
        "createdAt": "2024-03-01T10:00:00Z",
        "updatedAt": "2024-03-02T11:30:00Z",
    }


@pytest.fixture
def sample_datasource():
    return {
        "id": "ds-0001",
        "name": "Sales Extract",
        "contentUrl": "SalesExtract",
        "type": "hyper",
        "isCertified": True,
        "certificationNote": "Owned by finance",
        "encryptExtracts": "false",
        "useRemoteQueryAgent": False,
        "webpageUrl": "https://tableau.example.com/#/site/marketing/datasources/1",
        "tags": {"tag": [{"label": "sales"}]},
        "owner": {"id": "u-1"},
        "project": {"id": "p-1", "name": "Finance"},
        "createdAt": "2024-01-10T08:00:00Z",
        "updatedAt": "2024-02-10T08:00:00Z",
    }


@pytest.fixture
def response():
    """Factory for canned responses: ``response(200, {...})``."""
    return make_response
