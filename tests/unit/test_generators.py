# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from pathlib import Path
from unittest.mock import Mock, patch

from antenna.config.tool_configuration import ToolConfiguration
from antenna.generators.attribution_document_generator import (
    AttributionDocumentGenerator,
)
from antenna.generators.csv_generator import CSVGenerator
from antenna.model.artifact import Artifact
from antenna.model.coordinates import maven_coordinate
from antenna.model.facts import ArtifactCoordinates, DeclaredLicenseInformation
from antenna.model.license_information import License
from antenna.workflow.workflow_step import Attachable


def _artifacts() -> list[Artifact]:
    return [
        Artifact("test")
        .add_fact(ArtifactCoordinates(maven_coordinate("org.x", "y", "1.0")))
        .add_fact(DeclaredLicenseInformation(License("MIT")))
    ]


def test_csv_generator_writes_report(tmp_path: Path) -> None:
    generator = CSVGenerator(
        ToolConfiguration(base_dir=str(tmp_path), target_directory="out")
    )

    attachables = generator.produce(_artifacts())

    csv_file = tmp_path / "out" / "Antenna_artifactInformation.csv"
    assert attachables == {
        "artifact-information": Attachable("csv", "antenna-artifact-info", str(csv_file))
    }
    assert csv_file.read_text(encoding="utf-8") == (
        "artifactName;artifactId;groupId;mavenVersion;bundleVersion;license\n"
        ";y;org.x;1.0;;MIT\n"
    )


def test_csv_generator_configuration(tmp_path: Path) -> None:
    generator = CSVGenerator(ToolConfiguration(base_dir=str(tmp_path)))
    generator.configure({"file_name": "report.csv", "delimiter": ","})

    attachables = generator.produce(_artifacts())

    csv_file = tmp_path / "antenna" / "report.csv"
    assert attachables["artifact-information"].path == str(csv_file)
    assert csv_file.read_text(encoding="utf-8").splitlines()[1] == ",y,org.x,1.0,,MIT"


@patch(
    "antenna.generators.attribution_document_generator.get_utc_timestamp",
    return_value="2026-01-01 00:00:00 UTC",
)
def test_attribution_document_generator(mock_timestamp: Mock, tmp_path: Path) -> None:
    generator = AttributionDocumentGenerator(
        ToolConfiguration(
            project_name="product",
            project_version="2.0",
            base_dir=str(tmp_path),
            target_directory="out",
        )
    )

    attachables = generator.produce(_artifacts())

    document_file = tmp_path / "out" / "attribution-document.txt"
    assert attachables == {
        "attribution-doc": Attachable(
            "txt", "antenna-attribution-doc", str(document_file)
        )
    }
    document = document_file.read_text(encoding="utf-8")
    assert document.startswith(
        "Third-party notices for product 2.0\nGenerated on 2026-01-01 00:00:00 UTC\n"
    )
    assert "Licenses: MIT" in document


@patch(
    "antenna.generators.attribution_document_generator.get_utc_timestamp",
    return_value="now",
)
def test_attribution_document_generator_configuration(
    mock_timestamp: Mock, tmp_path: Path
) -> None:
    generator = AttributionDocumentGenerator(ToolConfiguration(base_dir=str(tmp_path)))
    generator.configure(
        {"file_name": "notices.txt", "product_name": "other", "product_version": "3"}
    )

    generator.produce([])

    document = (tmp_path / "antenna" / "notices.txt").read_text(encoding="utf-8")
    assert document.startswith("Third-party notices for other 3\n")
