# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from dataclasses import dataclass, field
from typing import Any

from antenna.model.artifact import Artifact
from antenna.model.coordinates import (
    Coordinate,
    bundle_coordinate,
    maven_coordinate,
    npm_coordinate,
    nuget_coordinate,
)
from antenna.model.facts import (
    ArtifactCoordinates,
    ArtifactFilename,
    ArtifactMatchingMetadata,
    ArtifactModificationStatus,
    ConfiguredLicenseInformation,
    CopyrightStatement,
    DeclaredLicenseInformation,
    MatchState,
)
from antenna.model.license_information import parse_license_expression

CONFIGURED_ARTIFACT_SOURCE = "from configuration"


@dataclass
class ConfiguredArtifactBuilder:
    """
    Builds an artifact from an entry of the configuration file.

    Example entry:
        {
            "maven_coordinates": {"group_id": "org.acme", "artifact_id": "lib", "version": "1.0"},
            "filename": "lib-1.0.jar",
            "declared_license": "MIT OR Apache-2.0",
            "copyright_statement": "Copyright (c) ACME",
            "match_state": "EXACT"
        }
    """

    maven_coordinates: dict[str, str] = field(default_factory=dict)
    bundle_coordinates: dict[str, str] = field(default_factory=dict)
    javascript_coordinates: dict[str, str] = field(default_factory=dict)
    dotnet_coordinates: dict[str, str] = field(default_factory=dict)
    filename: str | None = None
    hash: str | None = None
    declared_license: str | None = None
    configured_license: str | None = None
    is_proprietary: bool | None = None
    match_state: str | None = None
    copyright_statement: str | None = None
    modification_status: str | None = None

    @staticmethod
    def from_json(entry: dict[str, Any]) -> "ConfiguredArtifactBuilder":
        known_keys = set(ConfiguredArtifactBuilder.__dataclass_fields__)
        unknown_keys = set(entry) - known_keys
        if unknown_keys:
            raise ValueError(
                f"Unknown artifact configuration keys: {sorted(unknown_keys)}"
            )
        return ConfiguredArtifactBuilder(**entry)

    def _coordinates(self) -> list[Coordinate]:
        coordinates = []
        if self.maven_coordinates.get("artifact_id"):
            coordinates.append(
                maven_coordinate(
                    self.maven_coordinates.get("group_id"),
                    self.maven_coordinates.get("artifact_id"),
                    self.maven_coordinates.get("version"),
                )
            )
        if self.bundle_coordinates.get("symbolic_name"):
            coordinates.append(
                bundle_coordinate(
                    self.bundle_coordinates.get("symbolic_name"),
                    self.bundle_coordinates.get("bundle_version"),
                )
            )
        if self.javascript_coordinates.get("name"):
            coordinates.append(
                npm_coordinate(
                    self.javascript_coordinates.get("name"),
                    self.javascript_coordinates.get("version"),
                )
            )
        if self.dotnet_coordinates.get("package_id"):
            coordinates.append(
                nuget_coordinate(
                    self.dotnet_coordinates.get("package_id"),
                    self.dotnet_coordinates.get("version"),
                )
            )
        return coordinates

    def _match_state(self) -> MatchState:
        if not self.match_state:
            return MatchState.UNKNOWN
        try:
            return MatchState(self.match_state.upper())
        except ValueError:
            raise ValueError(
                f"Invalid match state: {self.match_state}. Valid states: {[s.value for s in MatchState]}"
            )

    def build(self) -> Artifact:
        artifact = (
            Artifact(CONFIGURED_ARTIFACT_SOURCE)
            .add_fact(ArtifactCoordinates(*self._coordinates()))
            .add_fact(ArtifactFilename.of(self.filename, self.hash))
            .add_fact(CopyrightStatement(self.copyright_statement))
            .add_fact(ArtifactMatchingMetadata(self._match_state()))
            .add_fact(ArtifactModificationStatus(self.modification_status))
        )
        if self.declared_license:
            artifact.add_fact(
                DeclaredLicenseInformation(
                    parse_license_expression(self.declared_license)
                )
            )
        if self.configured_license:
            artifact.add_fact(
                ConfiguredLicenseInformation(
                    parse_license_expression(self.configured_license)
                )
            )
        if self.is_proprietary is not None:
            artifact.set_proprietary(self.is_proprietary)
        return artifact
