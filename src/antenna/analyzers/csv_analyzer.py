# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import csv
import logging
from io import StringIO
from typing import Any

from antenna.adaptors.os import open_file
from antenna.config.cli_configs import default_config
from antenna.config.tool_configuration import ToolConfiguration
from antenna.model.artifact import Artifact
from antenna.model.coordinates import CoordinateType, coordinate_for_type
from antenna.model.facts import (
    ArtifactClearingState,
    ArtifactCoordinates,
    ArtifactCpe,
    ArtifactFact,
    ArtifactFilename,
    ArtifactMatchingMetadata,
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
from antenna.model.license_information import parse_license_expression
from antenna.workflow.workflow_step import Analyzer

logger = logging.getLogger(__name__)

ARTIFACT_ID = "artifact id"
GROUP_ID = "group id"
VERSION = "version"
COORDINATE_TYPE = "coordinate type"
EFFECTIVE_LICENSE = "effective license"
DECLARED_LICENSE = "declared license"
OBSERVED_LICENSE = "observed license"
COPYRIGHTS = "copyrights"
HASH = "hash"
SOURCE_URL = "source url"
RELEASE_TAG_URL = "release tag url"
SOFTWARE_HERITAGE_ID = "software heritage id"
CLEARING_STATE = "clearing state"
CHANGE_STATUS = "change status"
CPE = "cpe"
FILE_NAME = "file name"

REQUIRED_COLUMNS = [ARTIFACT_ID, VERSION]


class CsvAnalyzer(Analyzer):
    """
    Reads artifacts from a CSV file with one artifact per row.

    Column names are matched case-insensitively, only the artifact id and
    the version columns are mandatory.
    """

    name = "CSV"
    workflow_step_order = 500

    def __init__(self, context: ToolConfiguration) -> None:
        super().__init__(context)
        self.file_path: str | None = None
        self.delimiter = default_config.default_csv_delimiter
        self.encoding = context.encoding

    def configure(self, config: dict[str, Any]) -> None:
        self.file_path = self.context.resolve_path(
            self.get_config_value("file_path", config)
        )
        if config.get("delimiter"):
            self.delimiter = str(config["delimiter"])[0]
        if config.get("encoding"):
            self.encoding = str(config["encoding"])

    def yield_artifacts(self) -> list[Artifact]:
        if self.file_path is None:
            raise ValueError("CsvAnalyzer has not been configured with a file_path")
        content = open_file(self.file_path, self.encoding)
        artifacts = self.read_artifacts(content)
        logger.info(f"Read {len(artifacts)} artifacts from {self.file_path}")
        return artifacts

    def read_artifacts(self, content: str) -> list[Artifact]:
        reader = csv.DictReader(StringIO(content), delimiter=self.delimiter)
        if reader.fieldnames is None:
            return []

        # Create a case-insensitive mapping of column names to actual
        # column names
        column_mapping = {
            column.strip().lower(): column for column in reader.fieldnames if column
        }
        missing_columns = [c for c in REQUIRED_COLUMNS if c not in column_mapping]
        if missing_columns:
            raise ValueError(
                f"CSV file must contain columns: {', '.join(REQUIRED_COLUMNS)}"
            )

        artifacts = []
        for row in reader:
            normalized_row = {
                column: _clean_cell(row.get(actual_column))
                for column, actual_column in column_mapping.items()
            }
            artifacts.append(self._create_artifact(normalized_row))
        return artifacts

    def _create_artifact(self, row: dict[str, str | None]) -> Artifact:
        coordinate_type = CoordinateType.MAVEN
        if row.get(COORDINATE_TYPE):
            try:
                coordinate_type = CoordinateType(str(row.get(COORDINATE_TYPE)).lower())
            except ValueError:
                raise ValueError(
                    f"Unknown coordinate type: {row.get(COORDINATE_TYPE)}. Valid types: {[t.value for t in CoordinateType]}"
                )

        artifact = Artifact(self.name).add_fact(
            ArtifactCoordinates(
                coordinate_for_type(
                    coordinate_type, row.get(GROUP_ID), row.get(ARTIFACT_ID), row.get(VERSION)
                )
            )
        )
        artifact.add_fact(ArtifactMatchingMetadata(MatchState.EXACT))

        facts: list[ArtifactFact] = [
            ConfiguredLicenseInformation(
                parse_license_expression(row.get(EFFECTIVE_LICENSE))
            ),
            DeclaredLicenseInformation(parse_license_expression(row.get(DECLARED_LICENSE))),
            ObservedLicenseInformation(parse_license_expression(row.get(OBSERVED_LICENSE))),
            CopyrightStatement(row.get(COPYRIGHTS)),
            ArtifactFilename.of(row.get(FILE_NAME), row.get(HASH)),
            ArtifactSourceUrl(row.get(SOURCE_URL)),
            ArtifactReleaseTagUrl(row.get(RELEASE_TAG_URL)),
            ArtifactSoftwareHeritageId(row.get(SOFTWARE_HERITAGE_ID)),
            ArtifactClearingState(row.get(CLEARING_STATE)),
            ArtifactModificationStatus(row.get(CHANGE_STATUS)),
            ArtifactCpe(row.get(CPE)),
        ]
        for fact in facts:
            if not fact.is_empty():
                artifact.add_fact(fact)
        return artifact


def _clean_cell(cell: str | None) -> str | None:
    if cell is None or not cell.strip():
        return None
    return cell.strip()
