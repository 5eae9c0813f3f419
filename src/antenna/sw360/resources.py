# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""SW360 resources as far as they are read or written by the updater."""

from dataclasses import dataclass, field
from typing import Any

from antenna.exceptions import AntennaExecutionException
from antenna.model.artifact import Artifact
from antenna.model.coordinates import Coordinate
from antenna.model.facts import (
    ArtifactClearingState,
    ArtifactCpe,
    ArtifactFilename,
    ArtifactHomepage,
    ArtifactModificationStatus,
    ArtifactReleaseTagUrl,
    ArtifactSoftwareHeritageId,
    ArtifactSourceUrl,
    CopyrightStatement,
    DeclaredLicenseInformation,
    ObservedLicenseInformation,
)
from antenna.utils.artifact_license_utils import get_final_licenses


def get_id_from_links(resource: dict[str, Any]) -> str | None:
    """Return the last path segment of the self link of a HAL resource."""
    href = ((resource.get("_links") or {}).get("self") or {}).get("href")
    if not href:
        return None
    return href.rstrip("/").split("/")[-1]


@dataclass
class SW360License:
    short_name: str
    full_name: str | None = None
    text: str | None = None

    @staticmethod
    def from_json(resource: dict[str, Any]) -> "SW360License":
        return SW360License(
            short_name=resource.get("shortName", ""),
            full_name=resource.get("fullName"),
            text=resource.get("text"),
        )


@dataclass
class SW360Component:
    name: str
    component_type: str = "OSS"
    homepage: str | None = None
    id: str | None = None

    @staticmethod
    def from_json(resource: dict[str, Any]) -> "SW360Component":
        return SW360Component(
            name=resource.get("name", ""),
            component_type=resource.get("componentType", "OSS"),
            homepage=resource.get("homepage"),
            id=resource.get("id") or get_id_from_links(resource),
        )


@dataclass
class SW360Release:
    name: str
    version: str
    component_id: str | None = None
    id: str | None = None
    cpe_id: str | None = None
    download_url: str | None = None
    clearing_state: str | None = None
    main_license_ids: list[str] = field(default_factory=list)
    coordinates: dict[str, str] = field(default_factory=dict)
    release_tag_url: str | None = None
    software_heritage_id: str | None = None
    hashes: list[str] = field(default_factory=list)
    final_license: str | None = None
    declared_license: str | None = None
    observed_license: str | None = None
    change_status: str | None = None
    copyrights: str | None = None

    @staticmethod
    def from_json(resource: dict[str, Any]) -> "SW360Release":
        component_id = resource.get("componentId")
        component_link = ((resource.get("_links") or {}).get("sw360:component") or {}).get("href")
        if not component_id and component_link:
            component_id = component_link.rstrip("/").split("/")[-1]
        return SW360Release(
            name=resource.get("name", ""),
            version=resource.get("version", ""),
            component_id=component_id,
            id=resource.get("id") or get_id_from_links(resource),
            cpe_id=resource.get("cpeId"),
            download_url=resource.get("downloadurl"),
            clearing_state=resource.get("clearingState"),
            main_license_ids=list(resource.get("mainLicenseIds") or []),
        )


@dataclass
class SW360Project:
    name: str
    version: str
    description: str = ""
    project_type: str = "PRODUCT"
    business_unit: str = ""
    clearing_team: str = ""
    visibility: str = "EVERYONE"
    id: str | None = None

    @staticmethod
    def from_json(resource: dict[str, Any]) -> "SW360Project":
        return SW360Project(
            name=resource.get("name", ""),
            version=resource.get("version", ""),
            description=resource.get("description", ""),
            project_type=resource.get("projectType", "PRODUCT"),
            business_unit=resource.get("businessUnit", ""),
            clearing_team=resource.get("clearingTeam", ""),
            visibility=resource.get("visibility", "EVERYONE"),
            id=resource.get("id") or get_id_from_links(resource),
        )


def _main_coordinate(artifact: Artifact) -> Coordinate:
    coordinate = artifact.get_main_coordinate()
    if coordinate is None or not coordinate.name:
        raise AntennaExecutionException(
            f"Artifact {artifact} has no coordinates, it cannot be mapped to SW360"
        )
    return coordinate


def component_name_for(artifact: Artifact) -> str:
    coordinate = _main_coordinate(artifact)
    if coordinate.namespace:
        return f"{coordinate.namespace}:{coordinate.name}"
    return str(coordinate.name)


def release_version_for(artifact: Artifact) -> str:
    return _main_coordinate(artifact).version or ""


def component_from_artifact(artifact: Artifact) -> SW360Component:
    homepage = artifact.ask_for(ArtifactHomepage)
    return SW360Component(
        name=component_name_for(artifact),
        homepage=homepage.value if homepage is not None else None,
    )


def _text(artifact: Artifact, fact_class: Any) -> str | None:
    fact = artifact.ask_for(fact_class)
    if fact is None or fact.is_empty():
        return None
    return fact.value


def release_from_artifact(
    artifact: Artifact, component: SW360Component, license_ids: list[str]
) -> SW360Release:
    coordinates = {
        f"{coordinate.type.value}-id": coordinate.to_purl_string()
        for coordinate in sorted(artifact.get_coordinates(), key=lambda c: c.type.value)
    }
    filename = artifact.ask_for(ArtifactFilename)
    declared = artifact.ask_for(DeclaredLicenseInformation)
    observed = artifact.ask_for(ObservedLicenseInformation)
    final_licenses = get_final_licenses(artifact)
    copyright = artifact.ask_for(CopyrightStatement)
    return SW360Release(
        name=component.name,
        version=release_version_for(artifact),
        component_id=component.id,
        cpe_id=_text(artifact, ArtifactCpe),
        download_url=_text(artifact, ArtifactSourceUrl),
        clearing_state=_text(artifact, ArtifactClearingState),
        main_license_ids=sorted(license_ids),
        coordinates=coordinates,
        release_tag_url=_text(artifact, ArtifactReleaseTagUrl),
        software_heritage_id=_text(artifact, ArtifactSoftwareHeritageId),
        hashes=filename.get_hashes() if filename is not None else [],
        final_license=None if final_licenses.is_empty() else final_licenses.evaluate(),
        declared_license=declared.license_information.evaluate()
        if declared is not None and not declared.is_empty()
        else None,
        observed_license=observed.license_information.evaluate()
        if observed is not None and not observed.is_empty()
        else None,
        change_status=_text(artifact, ArtifactModificationStatus),
        copyrights=copyright.statement if copyright is not None else None,
    )
