# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import csv
import io

from antenna.model.artifact import Artifact
from antenna.model.coordinates import CoordinateType
from antenna.report_generator.writers.abstract_reporting_writer import (
    ReportingWriter,
)
from antenna.utils.artifact_license_utils import get_final_licenses

FIELD_NAMES = [
    "artifactName",
    "artifactId",
    "groupId",
    "mavenVersion",
    "bundleVersion",
    "license",
]


class CSVReportingWriter(ReportingWriter):
    """Writes one line per artifact: its file name, Maven coordinate, bundle
    version and final license."""

    def __init__(self, delimiter: str = ";") -> None:
        self.delimiter = delimiter

    def write(self, artifacts: list[Artifact]) -> str:
        output = io.StringIO()
        writer = csv.DictWriter(
            output,
            fieldnames=FIELD_NAMES,
            delimiter=self.delimiter,
            lineterminator="\n",
        )

        writer.writeheader()
        for artifact in artifacts:
            maven = artifact.get_coordinate_for_type(CoordinateType.MAVEN)
            bundle = artifact.get_coordinate_for_type(CoordinateType.P2)
            final_licenses = get_final_licenses(artifact)
            license = final_licenses.evaluate_long() or final_licenses.evaluate()
            writer.writerow(
                {
                    "artifactName": artifact.get_filename() or "",
                    "artifactId": maven.name if maven else "",
                    "groupId": maven.namespace if maven else "",
                    "mavenVersion": maven.version if maven else "",
                    "bundleVersion": bundle.version if bundle else "",
                    "license": license,
                }
            )
        csv_string = output.getvalue()
        output.close()
        return csv_string
