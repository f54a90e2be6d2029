from __future__ import annotations

from pathlib import Path

import pytest

from realm_publish.core.exceptions import PublishConfigurationError
from realm_publish.project import Project


def test_tree_navigation(tmp_path: Path) -> None:
    root = Project(name="realm-kotlin", project_dir=tmp_path, group="io.realm.kotlin", version="1.0.0")
    packages = root.child("packages")
    library = packages.child("library-base")

    assert root.is_root and not library.is_root
    assert library.root_project is root
    assert library.root_dir == tmp_path
    assert library.project_dir == tmp_path / "packages" / "library-base"
    assert library.path == ":packages:library-base"
    assert [project.name for project in root.walk()] == ["realm-kotlin", "packages", "library-base"]


def test_properties_are_inherited(tmp_path: Path) -> None:
    root = Project(name="root", project_dir=tmp_path, properties={"signBuild": "true"})
    library = root.child("library-base", properties={"testRepository": "repo"})

    assert library.has_property("signBuild")
    assert library.get_property("signBuild") == "true"
    assert not root.has_property("testRepository")
    with pytest.raises(KeyError):
        root.get_property("testRepository")


def test_publications_inherit_coordinates(tmp_path: Path) -> None:
    root = Project(name="root", project_dir=tmp_path, group="io.realm.kotlin", version="1.0.0")
    library = root.child("library-base")
    publication = library.add_publication("jvm", artifact_id="library-base-jvm")

    assert (publication.group_id, publication.artifact_id, publication.version) == (
        "io.realm.kotlin",
        "library-base-jvm",
        "1.0.0",
    )
    with pytest.raises(PublishConfigurationError):
        library.add_publication("jvm")
