"""Project tree and the publishing containers attached to each project."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Iterator

from realm_publish.core.exceptions import PublishConfigurationError, RepositoryError
from realm_publish.core.models import Credentials, MavenRepository, Publication

if TYPE_CHECKING:
    from realm_publish.publishing.signing import SigningExtension


class PublicationContainer:
    """Ordered publications with live ``all`` callbacks.

    Callbacks registered through :meth:`all` run for the publications already
    present and for every publication added afterwards.
    """

    def __init__(self) -> None:
        self._items: dict[str, Publication] = {}
        self._actions: list[Callable[[Publication], None]] = []

    def add(self, publication: Publication) -> Publication:
        if publication.name in self._items:
            raise PublishConfigurationError(f"Publication already exists: {publication.name}")
        self._items[publication.name] = publication
        for action in self._actions:
            action(publication)
        return publication

    def create(self, name: str, **kwargs: str) -> Publication:
        return self.add(Publication(name=name, **kwargs))

    def all(self, action: Callable[[Publication], None]) -> None:
        self._actions.append(action)
        for publication in list(self._items.values()):
            action(publication)

    def get(self, name: str) -> Publication | None:
        return self._items.get(name)

    def names(self) -> list[str]:
        return list(self._items)

    def __iter__(self) -> Iterator[Publication]:
        return iter(list(self._items.values()))

    def __len__(self) -> int:
        return len(self._items)


class RepositoryContainer:
    def __init__(self) -> None:
        self._items: dict[str, MavenRepository] = {}

    def maven(self, name: str, url: str, credentials: Credentials | None = None) -> MavenRepository:
        if name in self._items:
            raise RepositoryError(f"Repository already registered: {name}")
        repository = MavenRepository(name=name, url=url, credentials=credentials)
        self._items[name] = repository
        return repository

    def get(self, name: str) -> MavenRepository | None:
        return self._items.get(name)

    def names(self) -> list[str]:
        return list(self._items)

    def __iter__(self) -> Iterator[MavenRepository]:
        return iter(list(self._items.values()))

    def __len__(self) -> int:
        return len(self._items)


@dataclass(slots=True)
class PublishingExtension:
    publications: PublicationContainer = field(default_factory=PublicationContainer)
    repositories: RepositoryContainer = field(default_factory=RepositoryContainer)


@dataclass(eq=False)
class Project:
    """A node of the build tree; the node without a parent is the root."""

    name: str
    project_dir: Path
    parent: Project | None = None
    properties: dict[str, str] = field(default_factory=dict)
    group: str = ""
    version: str = ""
    publishing: PublishingExtension = field(default_factory=PublishingExtension)
    signing: SigningExtension | None = None
    subprojects: list[Project] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.project_dir = Path(self.project_dir)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def root_project(self) -> Project:
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    @property
    def root_dir(self) -> Path:
        return self.root_project.project_dir

    @property
    def path(self) -> str:
        if self.is_root:
            return ":"
        parent_path = self.parent.path if self.parent is not None else ""
        return f"{parent_path.rstrip(':')}:{self.name}"

    def has_property(self, name: str) -> bool:
        """Return whether ``name`` is set on this project or any ancestor."""
        node: Project | None = self
        while node is not None:
            if name in node.properties:
                return True
            node = node.parent
        return False

    def get_property(self, name: str) -> str:
        node: Project | None = self
        while node is not None:
            if name in node.properties:
                return node.properties[name]
            node = node.parent
        raise KeyError(name)

    def child(
        self,
        name: str,
        *,
        project_dir: Path | None = None,
        properties: dict[str, str] | None = None,
    ) -> Project:
        """Create and attach a subproject; directory defaults to ``<project_dir>/<name>``."""
        subproject = Project(
            name=name,
            project_dir=project_dir if project_dir is not None else self.project_dir / name,
            parent=self,
            properties=properties or {},
            group=self.group,
            version=self.version,
        )
        self.subprojects.append(subproject)
        return subproject

    def add_publication(self, name: str, *, artifact_id: str | None = None) -> Publication:
        return self.publishing.publications.create(
            name,
            group_id=self.group,
            artifact_id=artifact_id or self.name,
            version=self.version,
        )

    def walk(self) -> Iterator[Project]:
        yield self
        for subproject in self.subprojects:
            yield from subproject.walk()
