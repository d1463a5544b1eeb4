# add_to_project/github_client.py - GitHub GraphQL calls
import re
from typing import Any, Dict, NamedTuple, Optional

import requests

from .config import Config
from .utils import setup_logger

logger = setup_logger(__name__)

# https://github.com/orgs|users/<ownerName>/projects/<projectNumber>
URL_PARSE = re.compile(
    r"^(?:https://)?github\.com/(?P<owner_type>orgs|users)/(?P<owner_name>[^/]+)/projects/(?P<project_number>\d+)"
)

GET_PROJECT_QUERY = """
query getProject($ownerName: String!, $projectNumber: Int!) {
  %s(login: $ownerName) {
    projectV2(number: $projectNumber) {
      id
    }
  }
}
"""

ADD_ITEM_MUTATION = """
mutation addIssueToProject($input: AddProjectV2ItemByIdInput!) {
  addProjectV2ItemById(input: $input) {
    item {
      id
    }
  }
}
"""


class InvalidProjectUrlError(ValueError):
    pass


class GraphQLError(RuntimeError):
    def __init__(self, errors):
        self.errors = errors
        messages = "; ".join(e.get("message", str(e)) for e in errors)
        super().__init__(f"GraphQL request failed: {messages}")


class ProjectUrl(NamedTuple):
    owner_type: str
    owner_name: str
    project_number: int


def parse_project_url(url: str) -> ProjectUrl:
    match = URL_PARSE.match(url or "")
    if not match:
        raise InvalidProjectUrlError(
            f"Invalid project URL: {url}. Project URL should match the format "
            f"https://github.com/<orgs-or-users>/<ownerName>/projects/<projectNumber>"
        )
    return ProjectUrl(
        owner_type=match.group("owner_type"),
        owner_name=match.group("owner_name"),
        project_number=int(match.group("project_number")),
    )


def owner_type_query(owner_type: Optional[str]) -> str:
    """Map the URL segment to the GraphQL root field."""
    if owner_type == "orgs":
        return "organization"
    if owner_type == "users":
        return "user"
    raise ValueError(f"Unsupported ownerType: {owner_type}. Must be one of 'orgs' or 'users'")


class GitHubClient:
    def __init__(self, config: Config):
        self.config = config
        self.headers = {
            "Authorization": f"Bearer {config.github_token}",
            "Accept": "application/vnd.github+json",
            "Content-Type": "application/json",
        }

    def graphql(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        response = requests.post(
            self.config.github_graphql_url,
            headers=self.headers,
            json={"query": query, "variables": variables or {}},
            timeout=self.config.request_timeout,
        )
        response.raise_for_status()

        body = response.json()
        if body.get("errors"):
            raise GraphQLError(body["errors"])
        return body.get("data") or {}

    def get_project_id(self, project: ProjectUrl) -> str:
        """Resolve the project's node ID."""
        root = owner_type_query(project.owner_type)
        data = self.graphql(
            GET_PROJECT_QUERY % root,
            {"ownerName": project.owner_name, "projectNumber": project.project_number},
        )
        owner = data.get(root) or {}
        project_v2 = owner.get("projectV2") or {}
        project_id = project_v2.get("id")
        if not project_id:
            raise GraphQLError([{"message": f"Project {project.project_number} not found for {project.owner_name}"}])
        return project_id

    def add_item(self, project_id: str, content_id: str) -> str:
        """Add an issue or pull request to the project; returns the item ID."""
        data = self.graphql(
            ADD_ITEM_MUTATION,
            {"input": {"projectId": project_id, "contentId": content_id}},
        )
        return data["addProjectV2ItemById"]["item"]["id"]
