"""Configuration value lookup over project properties and the environment."""

from __future__ import annotations

import os
from typing import Mapping

from realm_publish.project import Project


def get_property_value(
    project: Project,
    property_name: str,
    default_value: str = "",
    *,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Return a project property, else the environment variable, else ``default_value``.

    An environment variable that is set but empty is returned as the empty string.
    """
    if project.has_property(property_name):
        return project.get_property(property_name)
    env = os.environ if environ is None else environ
    system_value = env.get(property_name)
    return system_value if system_value is not None else default_value


def has_property(
    project: Project,
    property_name: str,
    *,
    environ: Mapping[str, str] | None = None,
) -> bool:
    """Return whether ``property_name`` is switched on.

    Unlike :func:`get_property_value`, an empty environment variable counts as
    absent. A project property counts as present whatever its value, including
    ``""`` and ``"false"``.
    """
    env = os.environ if environ is None else environ
    system_value = env.get(property_name)
    return project.has_property(property_name) or bool(system_value)
