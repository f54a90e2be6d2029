"""POM metadata population and rendering."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from realm_publish.core.models import PomMetadata, PomOptions, ProjectMetadata, Publication

POM_NAMESPACE = "http://maven.apache.org/POM/4.0.0"
POM_SCHEMA_LOCATION = "http://maven.apache.org/POM/4.0.0 https://maven.apache.org/xsd/maven-4.0.0.xsd"
XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"


def apply_pom_metadata(
    publication: Publication,
    options: PomOptions | None,
    metadata: ProjectMetadata,
) -> None:
    """Stamp the fixed project metadata, plus the consumer's name and description, onto a publication."""
    pom = publication.pom
    if options is not None:
        pom.name = options.name
        pom.description = options.description
    pom.url = metadata.project_url
    pom.licenses = [metadata.license]
    pom.issue_management = metadata.issue_management
    pom.scm = metadata.scm
    pom.developers = [metadata.developer]


def pom_as_dict(pom: PomMetadata) -> dict[str, object]:
    return {
        "name": pom.name,
        "description": pom.description,
        "url": pom.url,
        "licenses": [{"name": item.name, "url": item.url} for item in pom.licenses],
        "issue_management": (
            {"system": pom.issue_management.system, "url": pom.issue_management.url}
            if pom.issue_management
            else None
        ),
        "scm": (
            {
                "connection": pom.scm.connection,
                "developer_connection": pom.scm.developer_connection,
                "url": pom.scm.url,
            }
            if pom.scm
            else None
        ),
        "developers": [
            {
                "name": item.name,
                "email": item.email,
                "organization": item.organization,
                "organization_url": item.organization_url,
            }
            for item in pom.developers
        ],
    }


def render_pom(publication: Publication) -> str:
    """Return the POM document of ``publication`` as XML text."""
    ET.register_namespace("", POM_NAMESPACE)
    ET.register_namespace("xsi", XSI_NAMESPACE)
    root = ET.Element(
        _tag("project"),
        {f"{{{XSI_NAMESPACE}}}schemaLocation": POM_SCHEMA_LOCATION},
    )
    _text(root, "modelVersion", "4.0.0")
    _text(root, "groupId", publication.group_id)
    _text(root, "artifactId", publication.artifact_id)
    _text(root, "version", publication.version)

    pom = publication.pom
    _text(root, "name", pom.name)
    _text(root, "description", pom.description)
    _text(root, "url", pom.url)

    if pom.licenses:
        licenses = ET.SubElement(root, _tag("licenses"))
        for item in pom.licenses:
            node = ET.SubElement(licenses, _tag("license"))
            _text(node, "name", item.name)
            _text(node, "url", item.url)

    if pom.developers:
        developers = ET.SubElement(root, _tag("developers"))
        for item in pom.developers:
            node = ET.SubElement(developers, _tag("developer"))
            _text(node, "name", item.name)
            _text(node, "email", item.email)
            _text(node, "organization", item.organization)
            _text(node, "organizationUrl", item.organization_url)

    if pom.scm is not None:
        scm = ET.SubElement(root, _tag("scm"))
        _text(scm, "connection", pom.scm.connection)
        _text(scm, "developerConnection", pom.scm.developer_connection)
        _text(scm, "url", pom.scm.url)

    if pom.issue_management is not None:
        issues = ET.SubElement(root, _tag("issueManagement"))
        _text(issues, "system", pom.issue_management.system)
        _text(issues, "url", pom.issue_management.url)

    ET.indent(root, space="  ")
    body = ET.tostring(root, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}\n'


def _tag(name: str) -> str:
    return f"{{{POM_NAMESPACE}}}{name}"


def _text(parent: ET.Element, name: str, value: str) -> None:
    # Empty values are omitted.
    if not value:
        return
    ET.SubElement(parent, _tag(name)).text = value
