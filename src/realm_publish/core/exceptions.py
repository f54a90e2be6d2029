"""Custom exception hierarchy for publish configuration."""

from __future__ import annotations


class PublishError(Exception):
    """Base error for the realm publish configurator."""


class PublishConfigurationError(PublishError):
    """Raised when a project cannot be configured for publishing."""


class SigningError(PublishError):
    """Raised when signing is required but the key material is unusable."""


class RepositoryError(PublishError):
    """Raised when a repository cannot be registered."""


class BuildDescriptionError(PublishError):
    """Raised when a build description file is malformed."""
