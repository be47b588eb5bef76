"""
Tableau REST client (tableau_rest)
==================================

A Python client for the Tableau REST API: personal access token sign-in,
project and data source management.

Usage
-----
>>> from tableau_rest import TableauClient, CreateProjectRequest
>>> from tableau_rest.resources import with_page_size
>>>
>>> with TableauClient(
...     "https://tableau.example.com",
...     token_name="ci-token",
...     token_secret="s3cr3t",
...     site="marketing",
... ) as client:
...     projects = client.projects.query(with_page_size(100))
...     created = client.projects.create(CreateProjectRequest(name="Finance"))

Subpackages
-----------
- tableau_rest.core: Session, authentication, response handling
- tableau_rest.resources: Project and data source services
- tableau_rest.models: Pydantic request/response models

"""

__version__ = "0.1.0"

# Core exports - available at package root
from tableau_rest.core.response import ERR_CODE_INTERNAL, TableauError
from tableau_rest.core.session import TableauAuth, TableauConfig, TableauSession
from tableau_rest.core.connection import TableauClient

# Convenience re-exports
from tableau_rest.models import (
    ContentPermission,
    CreateProjectRequest,
    DataSource,
    DeleteDataSourceRequest,
    DeleteProjectRequest,
    GetDataSourceRequest,
    Project,
    UpdateProjectRequest,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "ERR_CODE_INTERNAL",
    "TableauError",
    "TableauAuth",
    "TableauConfig",
    "TableauSession",
    "TableauClient",
    # Models
    "ContentPermission",
    "CreateProjectRequest",
    "DataSource",
    "DeleteDataSourceRequest",
    "DeleteProjectRequest",
    "GetDataSourceRequest",
    "Project",
    "UpdateProjectRequest",
]
