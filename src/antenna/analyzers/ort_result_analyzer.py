# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Import of OSS Review Toolkit (ORT) analyzer and scanner results.

Only the JSON serialization of an ORT result is supported. Both the older
layout (packages wrapped in ``{"package": ...}``, hashes as
``hash``/``hash_algorithm`` strings) and the current one (plain package
objects, ``hash`` objects with ``value`` and ``algorithm``) are accepted.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from antenna.adaptors.os import open_file
from antenna.config.tool_configuration import ToolConfiguration
from antenna.model.artifact import Artifact
from antenna.model.coordinates import (
    Coordinate,
    generic_coordinate,
    maven_coordinate,
    npm_coordinate,
    nuget_coordinate,
)
from antenna.model.facts import (
    ArtifactCoordinates,
    ArtifactFilename,
    ArtifactHomepage,
    ArtifactMatchingMetadata,
    ArtifactSourceUrl,
    CopyrightStatement,
    DeclaredLicenseInformation,
    MatchState,
    ObservedLicenseInformation,
)
from antenna.model.license_information import map_licenses
from antenna.workflow.workflow_step import Analyzer

logger = logging.getLogger(__name__)

ORT_RESULT_SOURCE = "OrtResult"


@dataclass
class OrtIdentifier:
    type: str
    namespace: str
    name: str
    version: str

    @staticmethod
    def parse(identifier: str) -> "OrtIdentifier":
        parts = identifier.split(":", 3)
        if len(parts) != 4:
            raise ValueError(
                f"Invalid ORT identifier: {identifier}. Expected format: 'type:namespace:name:version'"
            )
        return OrtIdentifier(*parts)


@dataclass
class OrtLicenseFindings:
    licenses: list[str] = field(default_factory=list)
    copyrights: list[str] = field(default_factory=list)


def collect_license_findings(ort_result: dict[str, Any]) -> dict[str, OrtLicenseFindings]:
    """Collect the license and copyright findings of the scanner per package id."""
    findings: dict[str, OrtLicenseFindings] = {}
    scanner = ort_result.get("scanner") or {}
    scan_results = (scanner.get("results") or {}).get("scan_results") or []
    for scan_result in scan_results:
        package_findings = findings.setdefault(scan_result["id"], OrtLicenseFindings())
        for result in scan_result.get("results") or []:
            summary = result.get("summary") or {}
            for license_finding in summary.get("license_findings") or []:
                license = license_finding.get("license")
                if license and license not in package_findings.licenses:
                    package_findings.licenses.append(license)
                for copyright in license_finding.get("copyrights") or []:
                    package_findings.copyrights.append(copyright["statement"])
            for copyright in summary.get("copyright_findings") or []:
                package_findings.copyrights.append(copyright["statement"])
    return findings


class OrtResultArtifactResolver:
    """Maps one package of an ORT result to an artifact."""

    def __init__(self, ort_result: dict[str, Any]) -> None:
        self.license_findings = collect_license_findings(ort_result)

    def resolve(self, package: dict[str, Any]) -> Artifact:
        artifact = Artifact(ORT_RESULT_SOURCE).add_fact(
            ArtifactMatchingMetadata(MatchState.EXACT)
        )
        identifier = OrtIdentifier.parse(package["id"])

        artifact.add_fact(ArtifactCoordinates(self._map_coordinate(identifier)))

        # Only the source artifact URL is taken into account, VCS clone URLs
        # have no counterpart in the artifact model.
        source_url = (package.get("source_artifact") or {}).get("url")
        if source_url:
            artifact.add_fact(ArtifactSourceUrl(source_url))

        declared_licenses = map_licenses(package.get("declared_licenses") or [])
        if not declared_licenses.is_empty():
            artifact.add_fact(DeclaredLicenseInformation(declared_licenses))

        filename = self._map_filename(package.get("binary_artifact") or {})
        if filename is not None:
            artifact.add_fact(filename)

        if package.get("homepage_url"):
            artifact.add_fact(ArtifactHomepage(package["homepage_url"]))

        findings = self.license_findings.get(package["id"])
        if findings is not None:
            observed_licenses = map_licenses(findings.licenses)
            if not observed_licenses.is_empty():
                artifact.add_fact(ObservedLicenseInformation(observed_licenses))
            for statement in findings.copyrights:
                artifact.add_fact(CopyrightStatement(statement))

        return artifact

    @staticmethod
    def _map_coordinate(identifier: OrtIdentifier) -> Coordinate:
        package_type = identifier.type.lower()
        if package_type in ("nuget", "dotnet"):
            return nuget_coordinate(identifier.name, identifier.version)
        if package_type == "maven":
            return maven_coordinate(
                identifier.namespace, identifier.name, identifier.version
            )
        if package_type == "npm":
            name = identifier.name
            if identifier.namespace:
                name = f"{identifier.namespace}/{identifier.name}"
            return npm_coordinate(name, identifier.version)
        return generic_coordinate(identifier.name, identifier.version)

    @staticmethod
    def _map_filename(binary_artifact: dict[str, Any]) -> ArtifactFilename | None:
        # filenames refer to binary artifacts, so only the binary URL is used
        url = binary_artifact.get("url")
        if not url:
            return None
        file_name = url.rstrip("/").split("/")[-1]
        hash_info = binary_artifact.get("hash")
        if isinstance(hash_info, dict):
            file_hash = hash_info.get("value") or None
            hash_algorithm = hash_info.get("algorithm") or None
        else:
            file_hash = hash_info or None
            hash_algorithm = binary_artifact.get("hash_algorithm") or None
        return ArtifactFilename.of(file_name, file_hash, hash_algorithm)


class OrtResultAnalyzer(Analyzer):
    name = "ORT Result"
    workflow_step_order = 600

    def __init__(self, context: ToolConfiguration) -> None:
        super().__init__(context)
        self.file_path: str | None = None

    def configure(self, config: dict[str, Any]) -> None:
        self.file_path = self.context.resolve_path(
            self.get_config_value("file_path", config)
        )

    def yield_artifacts(self) -> list[Artifact]:
        if self.file_path is None:
            raise ValueError("OrtResultAnalyzer has not been configured with a file_path")
        ort_result = json.loads(open_file(self.file_path, self.context.encoding))
        return self.read_artifacts(ort_result)

    @staticmethod
    def read_artifacts(ort_result: dict[str, Any]) -> list[Artifact]:
        resolver = OrtResultArtifactResolver(ort_result)
        analyzer = ort_result.get("analyzer") or {}
        packages = (analyzer.get("result") or {}).get("packages") or []
        artifacts = []
        for entry in packages:
            package = entry.get("package", entry)
            artifacts.append(resolver.resolve(package))
        logger.info(f"Resolved {len(artifacts)} artifacts from the ORT result")
        return artifacts
