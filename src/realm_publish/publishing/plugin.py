"""Publish configurator: signing, POM metadata and repositories for a project tree."""

from __future__ import annotations

from typing import Mapping

from realm_publish.core.config import Settings, get_settings
from realm_publish.core.constants import (
    REALM_METADATA,
    SIGN_BUILD_PROPERTY,
    SIGN_KEY_RING_PROPERTY,
    SIGN_PASSWORD_PROPERTY,
)
from realm_publish.core.exceptions import PublishConfigurationError
from realm_publish.core.logging import get_logger
from realm_publish.core.models import ProjectMetadata, PublishOptions
from realm_publish.project import Project
from realm_publish.publishing.pom import apply_pom_metadata
from realm_publish.publishing.properties import get_property_value, has_property
from realm_publish.publishing.repositories import (
    configure_github_packages_repository,
    configure_test_repository,
)
from realm_publish.publishing.signing import SigningExtension, decode_key_ring

LOGGER = get_logger(__name__)


class PublishConfigurator:
    """Applies the publishing policy to one project at a time.

    Consumers finish their :class:`PublishOptions` first and pass them to
    :meth:`configure`; nothing is deferred past that call.
    """

    def __init__(
        self,
        *,
        metadata: ProjectMetadata = REALM_METADATA,
        settings: Settings | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._metadata = metadata
        self._settings = settings or get_settings()
        self._environ = environ

    def configure(
        self,
        project: Project,
        options: PublishOptions | None = None,
        *,
        sign_build: bool | None = None,
    ) -> None:
        if project.is_root:
            self.configure_root_project(project)
            return
        if project.signing is not None:
            raise PublishConfigurationError(f"Project {project.path} is already configured for publishing")
        resolved_options = options or PublishOptions()
        self.configure_subproject(project, self._resolve_sign_build(project, resolved_options, sign_build))
        self.configure_pom(project, resolved_options)
        configure_test_repository(project, environ=self._environ)
        configure_github_packages_repository(
            project,
            self._settings.github_packages_url,
            environ=self._environ,
        )

    def configure_all(
        self,
        root: Project,
        options_by_project: Mapping[str, PublishOptions] | None = None,
        *,
        sign_build: bool | None = None,
    ) -> list[Project]:
        """Configure ``root`` and every subproject; return the configured subprojects.

        ``options_by_project`` is keyed by project path, e.g. ``":library-base"``.
        """
        lookup = options_by_project or {}
        configured: list[Project] = []
        for project in root.walk():
            self.configure(project, lookup.get(project.path), sign_build=sign_build)
            if not project.is_root:
                configured.append(project)
        return configured

    def configure_root_project(self, project: Project) -> None:
        # Root is an aggregator; no root-level publishing policy yet.
        LOGGER.debug("publish.root_project_skipped", project=project.name)

    def configure_subproject(self, project: Project, sign_build: bool) -> SigningExtension:
        ring_file = decode_key_ring(
            get_property_value(project, SIGN_KEY_RING_PROPERTY, environ=self._environ)
        )
        password = get_property_value(project, SIGN_PASSWORD_PROPERTY, environ=self._environ)

        signing = SigningExtension(required=sign_build)
        signing.use_in_memory_pgp_keys(self._settings.signing_key_id, ring_file, password)
        signing.sign(project.publishing.publications)
        project.signing = signing
        LOGGER.info(
            "publish.signing_configured",
            project=project.path,
            required=sign_build,
            key_id=self._settings.signing_key_id,
            has_key=signing.signatory is not None,
        )
        return signing

    def configure_pom(self, project: Project, options: PublishOptions) -> None:
        pom_options = options.pom
        metadata = self._metadata
        project.publishing.publications.all(
            lambda publication: apply_pom_metadata(publication, pom_options, metadata)
        )
        if pom_options is None:
            LOGGER.info("publish.pom_options_missing", project=project.path)

    def _resolve_sign_build(
        self,
        project: Project,
        options: PublishOptions,
        sign_build: bool | None,
    ) -> bool:
        if sign_build is not None:
            return sign_build
        if options.sign_build is not None:
            return options.sign_build
        return has_property(project, SIGN_BUILD_PROPERTY, environ=self._environ)


def configure(
    project: Project,
    options: PublishOptions | None = None,
    *,
    sign_build: bool | None = None,
    metadata: ProjectMetadata = REALM_METADATA,
    settings: Settings | None = None,
    environ: Mapping[str, str] | None = None,
) -> None:
    """Configure publishing for ``project``; the root project is left untouched."""
    configurator = PublishConfigurator(metadata=metadata, settings=settings, environ=environ)
    configurator.configure(project, options, sign_build=sign_build)
