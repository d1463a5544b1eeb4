# tests/test_github_client.py - GraphQL client tests
import pytest
import requests
from unittest.mock import Mock, patch

from add_to_project.config import Config
from add_to_project.github_client import (
    GitHubClient,
    GraphQLError,
    InvalidProjectUrlError,
    ProjectUrl,
    owner_type_query,
    parse_project_url,
)


@pytest.fixture
def config():
    return Config(
        project_url="https://github.com/orgs/acme/projects/3",
        github_token="test_token",
        _env_file=None,
    )


@pytest.fixture
def client(config):
    return GitHubClient(config)


def graphql_response(body):
    response = Mock()
    response.raise_for_status.return_value = None
    response.json.return_value = body
    return response


@pytest.mark.parametrize("url, expected", [
    ("https://github.com/orgs/acme/projects/3", ProjectUrl("orgs", "acme", 3)),
    ("github.com/users/octocat/projects/12", ProjectUrl("users", "octocat", 12)),
    ("https://github.com/orgs/acme/projects/3/views/1", ProjectUrl("orgs", "acme", 3)),
])
def test_parse_project_url(url, expected):
    """Organization and user project URLs are parsed with or without a scheme"""
    assert parse_project_url(url) == expected


@pytest.mark.parametrize("url", [
    "",
    "https://github.com/acme/projects/3",
    "https://github.com/teams/acme/projects/3",
    "https://gitlab.com/orgs/acme/projects/3",
    "https://github.com/orgs/acme/projects/x",
])
def test_parse_invalid_project_url(url):
    """URLs that are not github.com project URLs are rejected"""
    with pytest.raises(InvalidProjectUrlError, match="Invalid project URL"):
        parse_project_url(url)


def test_owner_type_query():
    """URL owner types map to GraphQL root fields"""
    assert owner_type_query("orgs") == "organization"
    assert owner_type_query("users") == "user"


def test_owner_type_query_rejects_unknown():
    """Unknown owner types are rejected"""
    with pytest.raises(ValueError, match="Unsupported ownerType: teams"):
        owner_type_query("teams")


@patch('requests.post')
def test_get_project_id(mock_post, client):
    """Resolving an organization project sends the owner and number"""
    mock_post.return_value = graphql_response(
        {"data": {"organization": {"projectV2": {"id": "PVT_123"}}}}
    )

    project_id = client.get_project_id(ProjectUrl("orgs", "acme", 3))

    assert project_id == "PVT_123"
    mock_post.assert_called_once()
    _, kwargs = mock_post.call_args
    assert "organization(login: $ownerName)" in kwargs["json"]["query"]
    assert kwargs["json"]["variables"] == {"ownerName": "acme", "projectNumber": 3}
    assert kwargs["headers"]["Authorization"] == "Bearer test_token"


@patch('requests.post')
def test_get_project_id_for_user(mock_post, client):
    """Resolving a user project queries the user root field"""
    mock_post.return_value = graphql_response(
        {"data": {"user": {"projectV2": {"id": "PVT_456"}}}}
    )

    assert client.get_project_id(ProjectUrl("users", "octocat", 1)) == "PVT_456"
    _, kwargs = mock_post.call_args
    assert "user(login: $ownerName)" in kwargs["json"]["query"]


@patch('requests.post')
def test_get_project_id_missing_project(mock_post, client):
    """A project that does not exist raises"""
    mock_post.return_value = graphql_response({"data": {"organization": {"projectV2": None}}})

    with pytest.raises(GraphQLError, match="Project 3 not found"):
        client.get_project_id(ProjectUrl("orgs", "acme", 3))


@patch('requests.post')
def test_add_item(mock_post, client):
    """Adding an item sends the project and content IDs"""
    mock_post.return_value = graphql_response(
        {"data": {"addProjectV2ItemById": {"item": {"id": "PVTI_789"}}}}
    )

    item_id = client.add_item("PVT_123", "I_kwDOabc")

    assert item_id == "PVTI_789"
    _, kwargs = mock_post.call_args
    assert kwargs["json"]["variables"] == {
        "input": {"projectId": "PVT_123", "contentId": "I_kwDOabc"}
    }


@patch('requests.post')
def test_graphql_errors_raise(mock_post, client):
    """GraphQL errors in the response body raise"""
    mock_post.return_value = graphql_response(
        {"data": None, "errors": [{"message": "Resource not accessible by integration"}]}
    )

    with pytest.raises(GraphQLError, match="Resource not accessible") as exc_info:
        client.graphql("query { viewer { login } }")
    assert exc_info.value.errors[0]["message"] == "Resource not accessible by integration"


@patch('requests.post')
def test_http_errors_raise(mock_post, client):
    """HTTP errors are propagated"""
    response = Mock()
    response.raise_for_status.side_effect = requests.HTTPError("401 Unauthorized")
    mock_post.return_value = response

    with pytest.raises(requests.HTTPError):
        client.graphql("query { viewer { login } }")
