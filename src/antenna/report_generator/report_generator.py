# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from antenna.model.artifact import Artifact
from antenna.model.artifact_and_license import (
    ArtifactAndLicense,
    sort_artifacts_and_licenses,
)
from antenna.report_generator.writers.abstract_reporting_writer import (
    ReportingWriter,
)


def sort_artifacts(artifacts: list[Artifact]) -> list[Artifact]:
    rows = [ArtifactAndLicense.from_artifact(artifact) for artifact in artifacts]
    artifact_of_row = {id(row): artifact for row, artifact in zip(rows, artifacts)}
    return [artifact_of_row[id(row)] for row in sort_artifacts_and_licenses(rows)]


class ReportGenerator:
    def __init__(self, reporting_writer: ReportingWriter):
        self.reporting_writer = reporting_writer

    def generate_report(self, artifacts: list[Artifact]) -> str:
        return self.reporting_writer.write(sort_artifacts(artifacts))
