"""Publishing configuration for signing, POM metadata and repository endpoints."""

from .plugin import PublishConfigurator, configure
from .pom import apply_pom_metadata, render_pom
from .properties import get_property_value, has_property
from .repositories import configure_github_packages_repository, configure_test_repository
from .signing import SigningExtension, decode_key_ring, encode_key_ring

__all__ = [
    "PublishConfigurator",
    "SigningExtension",
    "apply_pom_metadata",
    "configure",
    "configure_github_packages_repository",
    "configure_test_repository",
    "decode_key_ring",
    "encode_key_ring",
    "get_property_value",
    "has_property",
    "render_pom",
]
