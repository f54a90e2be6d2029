"""Publish configuration for multi-module Realm projects."""

from .core.models import PomOptions, PublishOptions
from .project import Project
from .publishing import PublishConfigurator, configure

__all__ = [
    "PomOptions",
    "Project",
    "PublishConfigurator",
    "PublishOptions",
    "configure",
]
