"""
Example: Basic usage of tableau_rest
====================================

Sign in with a personal access token, list projects, create and remove one.
"""

from tableau_rest import (
    ContentPermission,
    CreateProjectRequest,
    DeleteProjectRequest,
    TableauClient,
    TableauError,
)
from tableau_rest.resources import with_page_size, with_sort_expression


def example_projects():
    """Query and manage projects."""

    with TableauClient(
        "https://tableau.example.com",
        token_name="ci-token",
        token_secret="<secret>",
        site="marketing",
    ) as client:
        for project in client.projects.query(with_page_size(100), with_sort_expression("name:asc")):
            print(project.id, project.name)

        created = client.projects.create(CreateProjectRequest(
            name="Scratch",
            description="Created by basic_usage.py",
            content_permissions=ContentPermission.MANAGED_BY_OWNER,
        ))
        print(f"Created {created.name} ({created.id})")

        client.projects.delete(DeleteProjectRequest(id=created.id))


def example_error_handling():
    """Vendor errors carry the Tableau error code."""

    with TableauClient("https://tableau.example.com", "ci-token", "<secret>") as client:
        try:
            client.projects.create(CreateProjectRequest(name="Default"))
        except TableauError as e:
            print(f"{e.code}: {e.message}")


if __name__ == "__main__":
    # Uncomment the example you want to run
    # example_projects()
    # example_error_handling()

    print("Fill in your server, token name and secret, then uncomment an example to run.")
