"""
tableau_rest.models - Pydantic models for Tableau REST payloads
================================================================

Request and response bodies exchanged with the REST API. Field names are
snake_case in Python and camelCase on the wire; unknown keys are ignored.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for all payloads: camelCase aliases, population by field name."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> Dict[str, Any]:
        """Serialize for a request body, omitting unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class ErrorDetail(WireModel):
    summary: Optional[str] = None
    detail: Optional[str] = None
    code: Optional[str] = None


class ErrorResponse(WireModel):
    """Vendor error envelope: ``{"error": {"summary", "detail", "code"}}``."""

    error: Optional[ErrorDetail] = None


# ---------------------------------------------------------------------------
# Authentication
# ---------------------------------------------------------------------------

class Site(WireModel):
    id: Optional[str] = None
    content_url: str = ""
    name: Optional[str] = None


class Credentials(WireModel):
    name: Optional[str] = None
    password: Optional[str] = None
    personal_access_token_name: Optional[str] = None
    personal_access_token_secret: Optional[str] = None
    site: Site = Field(default_factory=Site)


class SignInRequest(WireModel):
    credentials: Credentials


class SignInCredentials(WireModel):
    site: Site = Field(default_factory=Site)
    token: str = ""
    estimated_time_to_expiration: Optional[str] = None


class SignInResponse(WireModel):
    credentials: SignInCredentials = Field(default_factory=SignInCredentials)


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------

class Pagination(WireModel):
    page_size: Optional[str] = None
    page_number: Optional[str] = None
    total_available: Optional[str] = None


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------

class ContentPermission(str, Enum):
    """Whether a project's permission settings are locked, or managed by the owner."""

    LOCKED_TO_PROJECT = "LockedToProject"
    MANAGED_BY_OWNER = "ManagedByOwner"
    LOCKED_TO_PROJECT_WITHOUT_NESTED = "LockedToProjectWithoutNested"


class ProjectOwner(WireModel):
    id: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
    full_name: Optional[str] = None
    site_role: Optional[str] = None
    last_login: Optional[datetime] = None


class ContentCounts(WireModel):
    project_count: int = 0
    workbook_count: int = 0
    view_count: int = 0
    datasource_count: int = 0


class Project(WireModel):
    """A Tableau project as returned by the server."""

    id: str = ""
    parent_project_id: Optional[str] = None
    name: str = ""
    description: Optional[str] = None
    content_permissions: Optional[str] = None
    controlling_permissions_project_id: Optional[str] = None
    writeable: bool = False
    top_level_project: bool = False
    owner: Optional[ProjectOwner] = None
    content_counts: Optional[ContentCounts] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CreateProjectRequest(WireModel):
    name: str
    parent_project_id: Optional[str] = None
    description: Optional[str] = None
    content_permissions: Optional[ContentPermission] = None


class UpdateProjectRequest(WireModel):
    id: str
    name: str
    parent_project_id: Optional[str] = None
    description: Optional[str] = None
    content_permissions: Optional[ContentPermission] = None


class DeleteProjectRequest(WireModel):
    id: str


class ProjectResponse(WireModel):
    project: Optional[Project] = None


class ProjectList(WireModel):
    project: List[Project] = Field(default_factory=list)


class QueryProjectsResponse(WireModel):
    pagination: Optional[Pagination] = None
    projects: ProjectList = Field(default_factory=ProjectList)


# ---------------------------------------------------------------------------
# Data sources
# ---------------------------------------------------------------------------

class DataSourceOwner(WireModel):
    id: Optional[str] = None


class DataSourceProject(WireModel):
    id: Optional[str] = None
    name: Optional[str] = None


class DataSource(WireModel):
    """A published Tableau data source."""

    id: str = ""
    name: str = ""
    certification_note: Optional[str] = None
    content_url: Optional[str] = None
    encrypt_extracts: Optional[str] = None
    description: Optional[str] = None
    webpage_url: Optional[str] = None
    is_certified: bool = False
    use_remote_query_agent: bool = False
    type: Optional[str] = None
    tags: Optional[Dict[str, Any]] = None
    owner: Optional[DataSourceOwner] = None
    project: Optional[DataSourceProject] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class GetDataSourceRequest(WireModel):
    id: str


class DeleteDataSourceRequest(WireModel):
    id: str


class DataSourceResponse(WireModel):
    datasource: Optional[DataSource] = None


class DataSourceList(WireModel):
    datasource: List[DataSource] = Field(default_factory=list)


class QueryDataSourcesResponse(WireModel):
    pagination: Optional[Pagination] = None
    datasources: DataSourceList = Field(default_factory=DataSourceList)
