from __future__ import annotations

from pathlib import Path

from realm_publish.project import Project
from realm_publish.publishing.properties import get_property_value, has_property


def _tree(tmp_path: Path) -> tuple[Project, Project]:
    root = Project(name="root", project_dir=tmp_path, properties={"inherited": "from-root"})
    child = root.child("library-base", properties={"local": "value"})
    return root, child


def test_project_property_wins_over_environment(tmp_path: Path) -> None:
    _, child = _tree(tmp_path)
    value = get_property_value(child, "local", environ={"local": "from-env"})
    assert value == "value"


def test_property_lookup_walks_up_to_root(tmp_path: Path) -> None:
    _, child = _tree(tmp_path)
    assert get_property_value(child, "inherited", environ={}) == "from-root"


def test_environment_fallback_and_default(tmp_path: Path) -> None:
    _, child = _tree(tmp_path)
    assert get_property_value(child, "GITHUB_ACTOR", environ={"GITHUB_ACTOR": "octocat"}) == "octocat"
    assert get_property_value(child, "missing", environ={}) == ""
    assert get_property_value(child, "missing", "fallback", environ={}) == "fallback"


def test_empty_environment_value_is_returned_not_defaulted(tmp_path: Path) -> None:
    _, child = _tree(tmp_path)
    assert get_property_value(child, "missing", "fallback", environ={"missing": ""}) == ""


def test_has_property_ignores_empty_environment_value(tmp_path: Path) -> None:
    _, child = _tree(tmp_path)
    assert has_property(child, "signBuild", environ={"signBuild": ""}) is False
    assert has_property(child, "signBuild", environ={"signBuild": "1"}) is True


def test_has_property_counts_any_project_property(tmp_path: Path) -> None:
    root, child = _tree(tmp_path)
    root.properties["signBuild"] = ""
    assert has_property(child, "signBuild", environ={}) is True


def test_lookup_reads_process_environment_by_default(tmp_path: Path, monkeypatch) -> None:
    _, child = _tree(tmp_path)
    monkeypatch.setenv("testRepository", "build/m2")
    assert get_property_value(child, "testRepository") == "build/m2"
    monkeypatch.delenv("testRepository")
    assert has_property(child, "testRepository") is False
