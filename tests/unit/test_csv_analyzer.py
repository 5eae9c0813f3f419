# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from unittest.mock import Mock, patch

import pytest

from antenna.analyzers.csv_analyzer import CsvAnalyzer
from antenna.config.tool_configuration import ToolConfiguration
from antenna.model.coordinates import (
    CoordinateType,
    bundle_coordinate,
    maven_coordinate,
    npm_coordinate,
)
from antenna.model.facts import (
    ArtifactClearingState,
    ArtifactCpe,
    ArtifactFilename,
    ArtifactModificationStatus,
    ArtifactReleaseTagUrl,
    ArtifactSoftwareHeritageId,
    ArtifactSourceUrl,
    ConfiguredLicenseInformation,
    CopyrightStatement,
    DeclaredLicenseInformation,
    MatchState,
    ObservedLicenseInformation,
)
from antenna.utils.artifact_license_utils import get_final_licenses


@pytest.fixture
def analyzer() -> CsvAnalyzer:
    return CsvAnalyzer(ToolConfiguration(base_dir="/project"))


def test_configure_resolves_relative_path(analyzer: CsvAnalyzer) -> None:
    analyzer.configure({"file_path": "deps/artifacts.csv", "delimiter": ";;"})

    assert analyzer.file_path == "/project/deps/artifacts.csv"
    assert analyzer.delimiter == ";"


def test_configure_requires_file_path(analyzer: CsvAnalyzer) -> None:
    with pytest.raises(ValueError, match="file_path"):
        analyzer.configure({})


def test_read_minimal_csv(analyzer: CsvAnalyzer) -> None:
    content = "Artifact Id,Group Id,Version\ncommons-io,commons-io,2.11.0\n"

    artifacts = analyzer.read_artifacts(content)

    assert len(artifacts) == 1
    artifact = artifacts[0]
    assert artifact.analysis_source == "CSV"
    assert artifact.get_coordinates() == {
        maven_coordinate("commons-io", "commons-io", "2.11.0")
    }
    assert artifact.get_match_state() == MatchState.EXACT
    assert artifact.ask_for(CopyrightStatement) is None
    assert get_final_licenses(artifact).is_empty()


def test_column_names_are_case_insensitive(analyzer: CsvAnalyzer) -> None:
    content = "ARTIFACT ID,version,group id\ny,1,org.x\n"

    artifacts = analyzer.read_artifacts(content)

    assert artifacts[0].get_main_coordinate() == maven_coordinate("org.x", "y", "1")


def test_read_all_columns(analyzer: CsvAnalyzer) -> None:
    content = (
        "Artifact Id,Group Id,Version,Coordinate Type,Effective License,"
        "Declared License,Observed License,Copyrights,Hash,Source URL,"
        "Release Tag URL,Software Heritage ID,Clearing State,Change Status,CPE,"
        "File Name\n"
        "y,org.x,1,maven,Apache-2.0,MIT OR Apache-2.0,BSD-3-Clause,Copyright X,"
        "abc,https://x.org/y-1-src.zip,https://x.org/tags/1,swh:1:rel:1,"
        "OSM_APPROVED,unmodified,cpe:2.3:a:x:y:1,y-1.jar\n"
    )

    artifact = analyzer.read_artifacts(content)[0]

    configured = artifact.ask_for(ConfiguredLicenseInformation)
    declared = artifact.ask_for(DeclaredLicenseInformation)
    observed = artifact.ask_for(ObservedLicenseInformation)
    assert configured is not None and configured.license_information.evaluate() == "Apache-2.0"
    assert declared is not None
    assert declared.license_information.evaluate() == "MIT OR Apache-2.0"
    assert observed is not None and observed.license_information.evaluate() == "BSD-3-Clause"
    assert artifact.ask_for(CopyrightStatement) == CopyrightStatement("Copyright X")
    assert artifact.ask_for(ArtifactFilename) == ArtifactFilename.of("y-1.jar", "abc")
    assert artifact.ask_for(ArtifactSourceUrl) == ArtifactSourceUrl(
        "https://x.org/y-1-src.zip"
    )
    assert artifact.ask_for(ArtifactReleaseTagUrl) == ArtifactReleaseTagUrl(
        "https://x.org/tags/1"
    )
    assert artifact.ask_for(ArtifactSoftwareHeritageId) == ArtifactSoftwareHeritageId(
        "swh:1:rel:1"
    )
    assert artifact.ask_for(ArtifactClearingState) == ArtifactClearingState(
        "OSM_APPROVED"
    )
    assert artifact.ask_for(ArtifactModificationStatus) == ArtifactModificationStatus(
        "unmodified"
    )
    assert artifact.ask_for(ArtifactCpe) == ArtifactCpe("cpe:2.3:a:x:y:1")


def test_coordinate_types(analyzer: CsvAnalyzer) -> None:
    content = (
        "Artifact Id,Group Id,Version,Coordinate Type\n"
        "org.x.y,,1.0.0,P2\n"
        "node,@types,20.0.0,npm\n"
    )

    artifacts = analyzer.read_artifacts(content)

    assert artifacts[0].get_coordinate_for_type(CoordinateType.P2) == bundle_coordinate(
        "org.x.y", "1.0.0"
    )
    assert artifacts[1].get_coordinate_for_type(CoordinateType.NPM) == npm_coordinate(
        "@types/node", "20.0.0"
    )


def test_unknown_coordinate_type(analyzer: CsvAnalyzer) -> None:
    content = "Artifact Id,Version,Coordinate Type\ny,1,cargo\n"

    with pytest.raises(ValueError, match="Unknown coordinate type"):
        analyzer.read_artifacts(content)


def test_missing_required_column(analyzer: CsvAnalyzer) -> None:
    content = "Artifact Id,Group Id\ny,org.x\n"

    with pytest.raises(ValueError, match="CSV file must contain columns"):
        analyzer.read_artifacts(content)


def test_empty_file(analyzer: CsvAnalyzer) -> None:
    assert analyzer.read_artifacts("") == []


def test_custom_delimiter() -> None:
    analyzer = CsvAnalyzer(ToolConfiguration())
    analyzer.configure({"file_path": "a.csv", "delimiter": ";"})

    artifacts = analyzer.read_artifacts("Artifact Id;Version\ny;1\n")

    assert artifacts[0].get_main_coordinate() == maven_coordinate(None, "y", "1")


@patch("antenna.analyzers.csv_analyzer.open_file")
def test_yield_artifacts_reads_configured_file(
    mock_open_file: Mock, analyzer: CsvAnalyzer
) -> None:
    mock_open_file.return_value = "Artifact Id,Version\ny,1\n"
    analyzer.configure({"file_path": "/data/artifacts.csv", "encoding": "latin-1"})

    artifacts = analyzer.yield_artifacts()

    mock_open_file.assert_called_once_with("/data/artifacts.csv", "latin-1")
    assert len(artifacts) == 1


def test_yield_artifacts_requires_configuration(analyzer: CsvAnalyzer) -> None:
    with pytest.raises(ValueError, match="has not been configured"):
        analyzer.yield_artifacts()
