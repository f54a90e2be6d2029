"""Load a project tree from a TOML build description."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from realm_publish.core.config import stringify_property
from realm_publish.core.exceptions import BuildDescriptionError
from realm_publish.core.models import PomOptions, PublishOptions
from realm_publish.project import Project


@dataclass(slots=True)
class BuildDescription:
    root: Project
    # Keyed by project path, e.g. ":library-base".
    options_by_project: dict[str, PublishOptions] = field(default_factory=dict)


def load_build_description(path: Path) -> BuildDescription:
    """Read ``path`` and build the root project with its subprojects.

    The directory holding the file is the root project directory. Expected layout::

        [project]
        name = "realm-kotlin"
        group = "io.realm.kotlin"
        version = "1.0.0"

        [[subprojects]]
        name = "library-base"
        path = "packages/library-base"
        publications = ["kotlinMultiplatform", "jvm"]

        [subprojects.pom]
        name = "Realm Kotlin Library"
        description = "Library code for Realm Kotlin."
    """
    path = Path(path)
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except FileNotFoundError as exc:
        raise BuildDescriptionError(f"Build description not found: {path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise BuildDescriptionError(f"Invalid TOML in {path}: {exc}") from exc

    project_cfg = _table(data, "project", path)
    root = Project(
        name=_string(project_cfg, "name", path, default=path.resolve().parent.name),
        project_dir=path.resolve().parent,
        properties=_properties(project_cfg, path),
        group=_string(project_cfg, "group", path),
        version=_string(project_cfg, "version", path),
    )

    description = BuildDescription(root=root)
    subprojects = data.get("subprojects", [])
    if not isinstance(subprojects, list):
        raise BuildDescriptionError(f"'subprojects' must be an array of tables in {path}")
    for entry in subprojects:
        if not isinstance(entry, dict):
            raise BuildDescriptionError(f"'subprojects' must be an array of tables in {path}")
        name = _string(entry, "name", path)
        if not name:
            raise BuildDescriptionError(f"Subproject without a name in {path}")
        if any(existing.name == name for existing in root.subprojects):
            raise BuildDescriptionError(f"Duplicate subproject '{name}' in {path}")
        relative_dir = _string(entry, "path", path, default=name)
        subproject = root.child(
            name,
            project_dir=root.project_dir / relative_dir,
            properties=_properties(entry, path),
        )
        publications = entry.get("publications", [])
        if not isinstance(publications, list) or not all(isinstance(item, str) for item in publications):
            raise BuildDescriptionError(f"'publications' of {name} must be a list of strings in {path}")
        for publication in publications:
            subproject.add_publication(publication)
        description.options_by_project[subproject.path] = _publish_options(entry, path)
    return description


def _publish_options(entry: dict[str, Any], path: Path) -> PublishOptions:
    options = PublishOptions()
    if "pom" in entry:
        pom_cfg = _table(entry, "pom", path)
        options.pom = PomOptions(
            name=_string(pom_cfg, "name", path),
            description=_string(pom_cfg, "description", path),
        )
    sign_build = entry.get("sign_build")
    if sign_build is not None:
        if not isinstance(sign_build, bool):
            raise BuildDescriptionError(f"'sign_build' must be a boolean in {path}")
        options.sign_build = sign_build
    return options


def _table(data: dict[str, Any], key: str, path: Path) -> dict[str, Any]:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise BuildDescriptionError(f"'{key}' must be a table in {path}")
    return value


def _string(data: dict[str, Any], key: str, path: Path, default: str = "") -> str:
    value = data.get(key, default)
    if not isinstance(value, str):
        raise BuildDescriptionError(f"'{key}' must be a string in {path}")
    return value


def _properties(data: dict[str, Any], path: Path) -> dict[str, str]:
    table = _table(data, "properties", path)
    return {str(key): stringify_property(value) for key, value in table.items()}
