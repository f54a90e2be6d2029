"""Shared core utilities for the realm publish configurator."""

from .config import Settings, get_settings, load_property_overrides
from .constants import REALM_METADATA
from .exceptions import (
    BuildDescriptionError,
    PublishConfigurationError,
    PublishError,
    RepositoryError,
    SigningError,
)
from .logging import configure_logging
from .models import (
    Credentials,
    Developer,
    IssueManagement,
    License,
    MavenRepository,
    PomMetadata,
    PomOptions,
    ProjectMetadata,
    Publication,
    PublishOptions,
    Scm,
    SigningMaterial,
)

__all__ = [
    "Settings",
    "Credentials",
    "Developer",
    "IssueManagement",
    "License",
    "MavenRepository",
    "PomMetadata",
    "PomOptions",
    "ProjectMetadata",
    "Publication",
    "PublishOptions",
    "Scm",
    "SigningMaterial",
    "REALM_METADATA",
    "PublishError",
    "PublishConfigurationError",
    "SigningError",
    "RepositoryError",
    "BuildDescriptionError",
    "get_settings",
    "load_property_overrides",
    "configure_logging",
]
