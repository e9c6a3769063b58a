"""
Integration tests executing GraphQL documents against the schema and a real database
"""

import uuid

import pytest

ADD_CLIENT = """
mutation AddClient($name: String!, $email: String!, $phone: String!) {
  addClient(name: $name, email: $email, phone: $phone) { id name email phone }
}
"""

ADD_PROJECT = """
mutation AddProject(
  $name: String!, $description: String, $status: ProjectStatus, $clientId: ID!
) {
  addProject(name: $name, description: $description, status: $status, clientId: $clientId) {
    id name description status clientId
  }
}
"""

ADD_PROJECT_DEFAULT_STATUS = """
mutation AddProject($name: String!, $clientId: ID!) {
  addProject(name: $name, clientId: $clientId) { id status description }
}
"""

GET_CLIENT = """
query GetClient($id: ID) { client(id: $id) { id name email phone } }
"""

GET_PROJECT = """
query GetProject($id: ID) {
  project(id: $id) { id name description status client { id name email phone } }
}
"""

LIST_ALL = """
query ListAll {
  projects { id name client { id name } }
  clients { id name }
}
"""

DELETE_CLIENT = """
mutation DeleteClient($id: ID!) { deleteClient(id: $id) { id name } }
"""

DELETE_PROJECT = """
mutation DeleteProject($id: ID!) { deleteProject(id: $id) { id name } }
"""

UPDATE_PROJECT = """
mutation UpdateProject(
  $id: ID!, $name: String, $description: String, $status: ProjectStatusUpdate
) {
  updateProject(id: $id, name: $name, description: $description, status: $status) {
    id name description status
  }
}
"""


async def create_client(execute_graphql, name="Tony Stark", email="ironman@gmail.com"):
    result = await execute_graphql(
        ADD_CLIENT, {"name": name, "email": email, "phone": "343-567-4333"}
    )
    assert result.errors is None
    return result.data["addClient"]


async def create_project(execute_graphql, client_id, name="eCommerce Website", **extra):
    variables = {"name": name, "clientId": client_id, "description": "Storefront"}
    variables.update(extra)
    result = await execute_graphql(ADD_PROJECT, variables)
    assert result.errors is None
    return result.data["addProject"]


@pytest.mark.integration
@pytest.mark.requires_db
class TestClientLifecycle:
    @pytest.mark.asyncio
    async def test_created_client_is_returned_by_id(self, execute_graphql):
        created = await create_client(execute_graphql)

        result = await execute_graphql(GET_CLIENT, {"id": created["id"]})

        assert result.errors is None
        assert result.data["client"] == {
            "id": created["id"],
            "name": "Tony Stark",
            "email": "ironman@gmail.com",
            "phone": "343-567-4333",
        }

    @pytest.mark.asyncio
    async def test_unknown_ids_resolve_to_null_without_errors(self, execute_graphql):
        for query, field in ((GET_CLIENT, "client"), (GET_PROJECT, "project")):
            for value in (str(uuid.uuid4()), "not-a-uuid", None):
                result = await execute_graphql(query, {"id": value})
                assert result.errors is None
                assert result.data == {field: None}

    @pytest.mark.asyncio
    async def test_delete_client_cascades_to_its_projects(self, execute_graphql):
        owner = await create_client(execute_graphql)
        other = await create_client(execute_graphql, name="Bruce Banner", email="hulk@gmail.com")

        owned = [
            await create_project(execute_graphql, owner["id"], name=f"Project {i}")
            for i in range(3)
        ]
        survivor = await create_project(execute_graphql, other["id"], name="SEO Project")

        result = await execute_graphql(DELETE_CLIENT, {"id": owner["id"]})

        assert result.errors is None
        assert result.data["deleteClient"] == {"id": owner["id"], "name": "Tony Stark"}

        for project in owned:
            lookup = await execute_graphql(GET_PROJECT, {"id": project["id"]})
            assert lookup.data["project"] is None

        remaining = await execute_graphql(LIST_ALL)
        assert remaining.errors is None
        assert [p["id"] for p in remaining.data["projects"]] == [survivor["id"]]
        assert [c["id"] for c in remaining.data["clients"]] == [other["id"]]

    @pytest.mark.asyncio
    async def test_delete_client_without_projects(self, execute_graphql):
        client = await create_client(execute_graphql)

        result = await execute_graphql(DELETE_CLIENT, {"id": client["id"]})

        assert result.errors is None
        assert result.data["deleteClient"]["id"] == client["id"]
        lookup = await execute_graphql(GET_CLIENT, {"id": client["id"]})
        assert lookup.data["client"] is None

    @pytest.mark.asyncio
    async def test_delete_unknown_client_returns_null(self, execute_graphql):
        result = await execute_graphql(DELETE_CLIENT, {"id": str(uuid.uuid4())})

        assert result.errors is None
        assert result.data == {"deleteClient": None}


@pytest.mark.integration
@pytest.mark.requires_db
class TestProjectLifecycle:
    @pytest.mark.asyncio
    async def test_project_resolves_its_client(self, execute_graphql):
        client = await create_client(execute_graphql)
        project = await create_project(execute_graphql, client["id"], status="progress")

        assert project["status"] == "In Progress"
        assert project["clientId"] == client["id"]

        result = await execute_graphql(GET_PROJECT, {"id": project["id"]})

        assert result.errors is None
        assert result.data["project"]["client"] == client

    @pytest.mark.asyncio
    async def test_status_defaults_to_not_started(self, execute_graphql):
        client = await create_client(execute_graphql)

        result = await execute_graphql(
            ADD_PROJECT_DEFAULT_STATUS, {"name": "Mobile App", "clientId": client["id"]}
        )

        assert result.errors is None
        assert result.data["addProject"]["status"] == "Not Started"
        assert result.data["addProject"]["description"] is None

    @pytest.mark.asyncio
    async def test_add_project_with_malformed_client_id_errors(self, execute_graphql):
        result = await execute_graphql(
            ADD_PROJECT_DEFAULT_STATUS, {"name": "Mobile App", "clientId": "bogus"}
        )

        assert result.errors is not None
        assert "Invalid client id" in result.errors[0].message

    @pytest.mark.asyncio
    async def test_update_status_only_keeps_other_fields(self, execute_graphql):
        client = await create_client(execute_graphql)
        project = await create_project(execute_graphql, client["id"])

        result = await execute_graphql(
            UPDATE_PROJECT, {"id": project["id"], "status": "completed"}
        )

        assert result.errors is None
        assert result.data["updateProject"] == {
            "id": project["id"],
            "name": "eCommerce Website",
            "description": "Storefront",
            "status": "Completed",
        }

        stored = await execute_graphql(GET_PROJECT, {"id": project["id"]})
        assert stored.data["project"]["status"] == "Completed"
        assert stored.data["project"]["name"] == "eCommerce Website"

    @pytest.mark.asyncio
    async def test_update_name_and_description(self, execute_graphql):
        client = await create_client(execute_graphql)
        project = await create_project(execute_graphql, client["id"], status="progress")

        result = await execute_graphql(
            UPDATE_PROJECT,
            {"id": project["id"], "name": "Storefront v2", "description": "Rebuild"},
        )

        assert result.errors is None
        assert result.data["updateProject"]["name"] == "Storefront v2"
        assert result.data["updateProject"]["description"] == "Rebuild"
        assert result.data["updateProject"]["status"] == "In Progress"

    @pytest.mark.asyncio
    async def test_update_with_explicit_null_clears_description(self, execute_graphql):
        client = await create_client(execute_graphql)
        project = await create_project(execute_graphql, client["id"], status="progress")

        result = await execute_graphql(UPDATE_PROJECT, {"id": project["id"], "description": None})

        assert result.errors is None
        assert result.data["updateProject"] == {
            "id": project["id"],
            "name": "eCommerce Website",
            "description": None,
            "status": "In Progress",
        }

        stored = await execute_graphql(GET_PROJECT, {"id": project["id"]})
        assert stored.data["project"]["description"] is None

    @pytest.mark.asyncio
    async def test_update_with_inline_null_literal(self, execute_graphql):
        client = await create_client(execute_graphql)
        project = await create_project(execute_graphql, client["id"])

        result = await execute_graphql(
            """
            mutation ClearDescription($id: ID!) {
              updateProject(id: $id, description: null, status: completed) {
                description status name
              }
            }
            """,
            {"id": project["id"]},
        )

        assert result.errors is None
        assert result.data["updateProject"] == {
            "description": None,
            "status": "Completed",
            "name": "eCommerce Website",
        }

    @pytest.mark.asyncio
    async def test_update_unknown_project_returns_null(self, execute_graphql):
        result = await execute_graphql(UPDATE_PROJECT, {"id": str(uuid.uuid4()), "name": "x"})

        assert result.errors is None
        assert result.data == {"updateProject": None}

    @pytest.mark.asyncio
    async def test_delete_project_returns_removed_record(self, execute_graphql):
        client = await create_client(execute_graphql)
        project = await create_project(execute_graphql, client["id"])

        result = await execute_graphql(DELETE_PROJECT, {"id": project["id"]})

        assert result.errors is None
        assert result.data["deleteProject"] == {
            "id": project["id"],
            "name": "eCommerce Website",
        }

        again = await execute_graphql(DELETE_PROJECT, {"id": project["id"]})
        assert again.errors is None
        assert again.data == {"deleteProject": None}

        # The owning client is untouched
        owner = await execute_graphql(GET_CLIENT, {"id": client["id"]})
        assert owner.data["client"]["id"] == client["id"]

    @pytest.mark.asyncio
    async def test_listing_projects_batches_client_lookups(self, execute_graphql):
        first = await create_client(execute_graphql)
        second = await create_client(execute_graphql, name="Bruce Banner", email="hulk@gmail.com")
        await create_project(execute_graphql, first["id"], name="A")
        await create_project(execute_graphql, second["id"], name="B")
        await create_project(execute_graphql, first["id"], name="C")

        result = await execute_graphql(LIST_ALL)

        assert result.errors is None
        owners = {p["name"]: p["client"]["name"] for p in result.data["projects"]}
        assert owners == {"A": "Tony Stark", "B": "Bruce Banner", "C": "Tony Stark"}
