"""
Tests for tableau_rest.resources and tableau_rest.models.
"""

import pytest
from datetime import datetime, timezone

from tableau_rest.core.response import TableauError
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
from tableau_rest.resources import (
    DataSourcesService,
    ProjectsService,
    QueryOptions,
    with_filter_expression,
    with_page_number,
    with_page_size,
    with_sort_expression,
)
from tableau_rest.resources.base import ResourceService
from tableau_rest.resources.query import with_query

from conftest import SERVER, SITE_ID, sent_json

BASE = f"{SERVER}/api/3.4/sites/{SITE_ID}"


class TestQueryOptions:
    """Tests for query option composition."""

    def test_zero_page_size_is_noop(self):
        assert QueryOptions.apply(with_page_size(0)).params == {}

    def test_page_size_sets_one_param(self):
        assert QueryOptions.apply(with_page_size(25)).params == {"pageSize": "25"}

    def test_defaults_are_noops(self):
        q = QueryOptions.apply(
            with_page_size(0),
            with_page_number(0),
            with_filter_expression(""),
            with_sort_expression(""),
        )
        assert q.params == {}
        assert q.encode() == ""

    def test_distinct_names_accumulate(self):
        q = QueryOptions.apply(
            with_page_size(25),
            with_page_number(3),
            with_filter_expression("name:eq:Finance"),
            with_sort_expression("createdAt:desc"),
        )
        assert q.params == {
            "pageSize": "25",
            "pageNumber": "3",
            "filter": "name:eq:Finance",
            "sort": "createdAt:desc",
        }

    def test_same_name_last_wins(self):
        q = QueryOptions.apply(with_page_size(25), with_page_size(50))
        assert q.params == {"pageSize": "50"}

    def test_with_query(self):
        assert with_query("sites/x/projects") == "sites/x/projects"
        assert with_query("sites/x/projects", with_page_size(10), with_sort_expression("name:asc")) == (
            "sites/x/projects?pageSize=10&sort=name%3Aasc"
        )


class TestResourceService:

    def test_collection_required(self, session):
        with pytest.raises(NotImplementedError):
            ResourceService(session)._path()


class TestProjectsService:
    """Tests for ProjectsService."""

    def test_query(self, session, mock_http, response, sample_project):
        mock_http.send.return_value = response(200, {
            "pagination": {"pageNumber": "1", "pageSize": "25", "totalAvailable": "1"},
            "projects": {"project": [sample_project]},
        })

        projects = ProjectsService(session).query(with_page_size(25), with_filter_expression("name:eq:Finance"))

        assert [p.name for p in projects] == ["Finance"]
        req = mock_http.send.call_args.args[0]
        assert req.method == "GET"
        assert req.url == f"{BASE}/projects?filter=name%3Aeq%3AFinance&pageSize=25"

    def test_query_empty_site(self, session, mock_http, response):
        mock_http.send.return_value = response(200, {"pagination": {"totalAvailable": "0"}, "projects": {}})
        assert ProjectsService(session).query() == []

    def test_create(self, session, mock_http, response, sample_project):
        mock_http.send.return_value = response(201, {"project": sample_project})

        created = ProjectsService(session).create(CreateProjectRequest(
            name="Finance",
            description="Quarterly reporting",
            content_permissions=ContentPermission.LOCKED_TO_PROJECT,
        ))

        assert created.id == sample_project["id"]
        req = mock_http.send.call_args.args[0]
        assert req.method == "POST"
        assert req.url == f"{BASE}/projects"
        assert sent_json(req) == {
            "project": {
                "name": "Finance",
                "description": "Quarterly reporting",
                "contentPermissions": "LockedToProject",
            }
        }

    def test_update(self, session, mock_http, response, sample_project):
        mock_http.send.return_value = response(200, {"project": sample_project})

        updated = ProjectsService(session).update(UpdateProjectRequest(id="p-1", name="Finance"))

        assert updated.name == "Finance"
        req = mock_http.send.call_args.args[0]
        assert req.method == "PUT"
        assert req.url == f"{BASE}/projects/p-1"
        assert sent_json(req) == {"project": {"id": "p-1", "name": "Finance"}}

    def test_delete_no_content(self, session, mock_http, response):
        mock_http.send.return_value = response(204)

        assert ProjectsService(session).delete(DeleteProjectRequest(id="p-1")) is None

        req = mock_http.send.call_args.args[0]
        assert req.method == "DELETE"
        assert req.url == f"{BASE}/projects/p-1"

    def test_vendor_error_propagates(self, session, mock_http, response):
        mock_http.send.return_value = response(409, {
            "error": {"summary": "Conflict", "detail": "A project named 'Finance' already exists.", "code": "409006"}
        })
        with pytest.raises(TableauError) as exc:
            ProjectsService(session).create(CreateProjectRequest(name="Finance"))
        assert exc.value.code == "409006"


class TestDataSourcesService:
    """Tests for DataSourcesService."""

    def test_get(self, session, mock_http, response, sample_datasource):
        mock_http.send.return_value = response(200, {"datasource": sample_datasource})

        ds = DataSourcesService(session).get(GetDataSourceRequest(id="ds-0001"))

        assert ds.name == "Sales Extract"
        assert ds.is_certified is True
        assert ds.project.name == "Finance"
        req = mock_http.send.call_args.args[0]
        assert req.method == "GET"
        assert req.url == f"{BASE}/datasources/ds-0001"

    def test_query(self, session, mock_http, response, sample_datasource):
        mock_http.send.return_value = response(200, {"datasources": {"datasource": [sample_datasource]}})

        sources = DataSourcesService(session).query(with_page_number(2))

        assert [d.id for d in sources] == ["ds-0001"]
        assert mock_http.send.call_args.args[0].url == f"{BASE}/datasources?pageNumber=2"

    def test_delete(self, session, mock_http, response):
        mock_http.send.return_value = response(204)

        assert DataSourcesService(session).delete(DeleteDataSourceRequest(id="ds-0001")) is None

        req = mock_http.send.call_args.args[0]
        assert req.method == "DELETE"
        assert req.url == f"{BASE}/datasources/ds-0001"


class TestModels:
    """Tests for wire models."""

    def test_create_request_omits_unset_fields(self):
        assert CreateProjectRequest(name="Finance").to_wire() == {"name": "Finance"}

    def test_create_then_echo_round_trip(self):
        req = CreateProjectRequest(
            name="Finance",
            parent_project_id="p-0",
            description="Quarterly reporting",
            content_permissions=ContentPermission.MANAGED_BY_OWNER,
        )
        echoed = dict(req.to_wire(), id="p-1", writeable=True)

        project = Project.model_validate(echoed)

        assert project.name == req.name
        assert project.parent_project_id == req.parent_project_id
        assert project.description == req.description
        assert project.content_permissions == "ManagedByOwner"

    def test_project_timestamps(self, sample_project):
        project = Project.model_validate(sample_project)
        assert project.created_at == datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc)
        assert project.owner.site_role == "SiteAdministratorCreator"

    def test_unknown_fields_ignored(self, sample_datasource):
        ds = DataSource.model_validate(dict(sample_datasource, hasExtracts=True))
        assert ds.id == "ds-0001"

    def test_populate_by_name(self):
        assert UpdateProjectRequest(id="p-1", name="n", parent_project_id="p-0").to_wire() == {
            "id": "p-1",
            "name": "n",
            "parentProjectId": "p-0",
        }
