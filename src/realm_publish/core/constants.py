"""Fixed project metadata and endpoints used when publishing Realm artifacts."""

from __future__ import annotations

from typing import Final

from .models import Developer, IssueManagement, License, ProjectMetadata, Scm

SIGNING_KEY_ID: Final[str] = "1F48C9B0"
GITHUB_PACKAGES_URL: Final[str] = "https://maven.pkg.github.com/Black-Bricks/realm-kotlin"

TEST_REPOSITORY_NAME: Final[str] = "Test"
GITHUB_PACKAGES_REPOSITORY_NAME: Final[str] = "GitHubPackages"

SIGN_BUILD_PROPERTY: Final[str] = "signBuild"
SIGN_KEY_RING_PROPERTY: Final[str] = "signSecretRingFileKotlin"
SIGN_PASSWORD_PROPERTY: Final[str] = "signPasswordKotlin"
TEST_REPOSITORY_PROPERTY: Final[str] = "testRepository"
GITHUB_ACTOR_PROPERTY: Final[str] = "GITHUB_ACTOR"
GITHUB_TOKEN_PROPERTY: Final[str] = "GITHUB_TOKEN"

KEY_RING_LINE_SEPARATOR: Final[str] = "#"

REALM_METADATA: Final[ProjectMetadata] = ProjectMetadata(
    project_url="https://realm.io",
    license=License(
        name="The Apache License, Version 2.0",
        url="https://www.apache.org/licenses/LICENSE-2.0.txt",
    ),
    issue_management=IssueManagement(
        system="Github",
        url="https://github.com/realm/realm-kotlin/issues",
    ),
    scm=Scm(
        connection="scm:git:git://github.com/realm/realm-kotlin.git",
        developer_connection="scm:git:ssh://github.com/realm/realm-kotlin.git",
        url="https://github.com/realm/realm-kotlin",
    ),
    developer=Developer(
        name="Realm",
        email="info@realm.io",
        organization="MongoDB",
        organization_url="https://www.mongodb.com",
    ),
)
