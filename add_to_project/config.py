"""Configuration management using Pydantic BaseSettings."""
from __future__ import annotations

from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _input(name: str) -> AliasChoices:
    # The runner exposes input `foo-bar` as INPUT_FOO-BAR; composite steps
    # can only pass INPUT_FOO_BAR
    field_name = name.replace("-", "_")
    choices = dict.fromkeys([f"input_{name}", f"input_{field_name}", field_name])
    return AliasChoices(*choices)


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Action inputs
    project_url: str = Field("", validation_alias=_input("project-url"))
    github_token: str = Field("", validation_alias=_input("github-token"))
    assignee: str = Field("", validation_alias=_input("assignee"))
    labeled: str = Field("", validation_alias=_input("labeled"))
    assignee_operator: str = Field("", validation_alias=_input("assignee-operator"))
    label_operator: str = Field("", validation_alias=_input("label-operator"))

    # Runner environment
    github_event_path: Optional[str] = None
    github_output: Optional[str] = None
    github_graphql_url: str = "https://api.github.com/graphql"
    request_timeout: float = 30.0

    def missing_required(self) -> List[str]:
        missing = []
        if not self.project_url:
            missing.append("project-url")
        if not self.github_token:
            missing.append("github-token")
        return missing

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls()
