"""Repository endpoint selection for subprojects."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from realm_publish.core.constants import (
    GITHUB_ACTOR_PROPERTY,
    GITHUB_PACKAGES_REPOSITORY_NAME,
    GITHUB_TOKEN_PROPERTY,
    TEST_REPOSITORY_NAME,
    TEST_REPOSITORY_PROPERTY,
)
from realm_publish.core.logging import get_logger
from realm_publish.core.models import Credentials, MavenRepository
from realm_publish.project import Project
from realm_publish.publishing.properties import get_property_value

LOGGER = get_logger(__name__)


def resolve_test_repository(root_dir: Path, relative_path: str) -> Path:
    """Join ``relative_path`` onto the absolute root directory using the platform separator."""
    absolute_root = os.path.abspath(root_dir)
    return Path(absolute_root + os.sep + relative_path.replace("/", os.sep))


def configure_test_repository(
    project: Project,
    *,
    environ: Mapping[str, str] | None = None,
) -> MavenRepository | None:
    relative_path = get_property_value(project, TEST_REPOSITORY_PROPERTY, environ=environ)
    if not relative_path:
        return None
    location = resolve_test_repository(project.root_dir, relative_path)
    repository = project.publishing.repositories.maven(
        name=TEST_REPOSITORY_NAME,
        url=location.as_uri(),
    )
    LOGGER.info(
        "publish.repository_registered",
        project=project.path,
        repository=repository.name,
        url=repository.url,
    )
    return repository


def configure_github_packages_repository(
    project: Project,
    url: str,
    *,
    environ: Mapping[str, str] | None = None,
) -> MavenRepository | None:
    github_actor = get_property_value(project, GITHUB_ACTOR_PROPERTY, environ=environ)
    github_token = get_property_value(project, GITHUB_TOKEN_PROPERTY, environ=environ)
    if not (github_actor and github_token):
        return None
    repository = project.publishing.repositories.maven(
        name=GITHUB_PACKAGES_REPOSITORY_NAME,
        url=url,
        credentials=Credentials(username=github_actor, password=github_token),
    )
    LOGGER.info(
        "publish.repository_registered",
        project=project.path,
        repository=repository.name,
        url=repository.url,
        username=github_actor,
    )
    return repository
