"""Command line entry point for inspecting publish configuration."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Iterable

from realm_publish.build_file import load_build_description
from realm_publish.core.config import get_settings, load_property_overrides
from realm_publish.core.exceptions import PublishError, SigningError
from realm_publish.core.logging import configure_logging
from realm_publish.project import Project
from realm_publish.publishing.plugin import PublishConfigurator
from realm_publish.publishing.pom import pom_as_dict, render_pom
from realm_publish.publishing.signing import encode_key_ring


def _parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--log-level", help="Override the configured log level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    describe_parser = subparsers.add_parser("describe", help="Configure the build and print a JSON summary")
    _add_build_arguments(describe_parser)

    pom_parser = subparsers.add_parser("pom", help="Print the POM of one publication")
    _add_build_arguments(pom_parser)
    pom_parser.add_argument("--project", required=True, help="Subproject name")
    pom_parser.add_argument("--publication", required=True, help="Publication name")

    encode_parser = subparsers.add_parser(
        "encode-key",
        help="Print an armored key file in the single-line form used by signSecretRingFileKotlin",
    )
    encode_parser.add_argument("key_file", type=Path, help="ASCII-armored secret key file")
    return parser.parse_args(list(argv) if argv is not None else None)


def _add_build_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("build_file", type=Path, help="TOML build description")
    parser.add_argument(
        "-P",
        dest="properties",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Project property set on every project, overriding the build description (repeatable)",
    )
    parser.add_argument("--sign-build", action="store_true", help="Require signing for every subproject")


def _parse_properties(pairs: Iterable[str]) -> dict[str, str]:
    properties: dict[str, str] = {}
    for pair in pairs:
        key, separator, value = pair.partition("=")
        if not separator or not key:
            raise SystemExit(f"Invalid property '{pair}', expected KEY=VALUE")
        properties[key] = value
    return properties


def _configure_build(args: argparse.Namespace) -> list[Project]:
    settings = get_settings()
    description = load_build_description(args.build_file)
    root = description.root
    # Overlay order: build description, then secrets, then -P.
    overlay = load_property_overrides(settings.secrets_path)
    overlay.update(_parse_properties(args.properties))
    for project in root.walk():
        project.properties.update(overlay)
    configurator = PublishConfigurator(settings=settings)
    return configurator.configure_all(
        root,
        description.options_by_project,
        sign_build=True if args.sign_build else None,
    )


def _summarize(project: Project) -> dict[str, Any]:
    return {
        "project": project.path,
        "signing": project.signing.as_dict() if project.signing else None,
        "repositories": [repository.as_dict() for repository in project.publishing.repositories],
        "publications": [
            {
                "name": publication.name,
                "coordinates": f"{publication.group_id}:{publication.artifact_id}:{publication.version}",
                "signatory": publication.signatory,
                "pom": pom_as_dict(publication.pom),
            }
            for publication in project.publishing.publications
        ],
    }


def cmd_describe(args: argparse.Namespace) -> None:
    projects = _configure_build(args)
    print(json.dumps([_summarize(project) for project in projects], indent=2, ensure_ascii=False))


def cmd_pom(args: argparse.Namespace) -> None:
    projects = _configure_build(args)
    project = next((item for item in projects if item.name == args.project), None)
    if project is None:
        raise SystemExit(f"Subproject not found: {args.project}")
    publication = project.publishing.publications.get(args.publication)
    if publication is None:
        raise SystemExit(f"Publication not found: {args.publication}")
    sys.stdout.write(render_pom(publication))


def cmd_encode_key(args: argparse.Namespace) -> None:
    try:
        armored = args.key_file.read_text(encoding="utf-8")
    except OSError as exc:
        raise SigningError(f"Cannot read key file {args.key_file}: {exc}") from exc
    print(encode_key_ring(armored.rstrip("\n")))


def main(argv: Iterable[str] | None = None) -> int:
    args = _parse_args(argv)
    handlers = {
        "describe": cmd_describe,
        "pom": cmd_pom,
        "encode-key": cmd_encode_key,
    }
    try:
        configure_logging(args.log_level)
        handlers[args.command](args)
    except PublishError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
