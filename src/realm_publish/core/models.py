"""Shared data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable


@dataclass(slots=True, frozen=True)
class License:
    name: str
    url: str


@dataclass(slots=True, frozen=True)
class IssueManagement:
    system: str
    url: str


@dataclass(slots=True, frozen=True)
class Scm:
    connection: str
    developer_connection: str
    url: str


@dataclass(slots=True, frozen=True)
class Developer:
    name: str
    email: str
    organization: str
    organization_url: str


@dataclass(slots=True, frozen=True)
class ProjectMetadata:
    """Fixed descriptive fields stamped onto every publication."""

    project_url: str
    license: License
    issue_management: IssueManagement
    scm: Scm
    developer: Developer


@dataclass(slots=True)
class PomOptions:
    name: str = ""
    description: str = ""


@dataclass(slots=True)
class PublishOptions:
    """Consumer supplied publishing options, finalized before configuration."""

    pom: PomOptions | None = None
    sign_build: bool | None = None

    def pom_options(self, action: Callable[[PomOptions], Any]) -> "PublishOptions":
        if self.pom is None:
            self.pom = PomOptions()
        action(self.pom)
        return self


@dataclass(slots=True)
class PomMetadata:
    name: str = ""
    description: str = ""
    url: str = ""
    licenses: list[License] = field(default_factory=list)
    issue_management: IssueManagement | None = None
    scm: Scm | None = None
    developers: list[Developer] = field(default_factory=list)


@dataclass(slots=True)
class Publication:
    name: str
    group_id: str = ""
    artifact_id: str = ""
    version: str = ""
    pom: PomMetadata = field(default_factory=PomMetadata)
    signatory: str | None = None


@dataclass(slots=True, frozen=True)
class Credentials:
    username: str
    password: str = field(repr=False)


@dataclass(slots=True, frozen=True)
class MavenRepository:
    name: str
    url: str
    credentials: Credentials | None = None

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": self.name, "url": self.url}
        if self.credentials is not None:
            payload["username"] = self.credentials.username
        return payload


@dataclass(slots=True, frozen=True)
class SigningMaterial:
    key_id: str
    key_ring: str = field(repr=False)
    password: str = field(repr=False)

    @property
    def has_key(self) -> bool:
        return bool(self.key_ring.strip())
