# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from antenna.model.artifact import Artifact
from antenna.model.artifact_and_license import ArtifactAndLicense
from antenna.model.license_information import License
from antenna.report_generator.writers.abstract_reporting_writer import (
    ReportingWriter,
)

SEPARATOR = "-" * 72


class AttributionDocumentWriter(ReportingWriter):
    """Renders the third-party notices of a product as plain text.

    Proprietary artifacts are left out. Each component lists its file name,
    coordinates, package URLs, licenses and copyright statements, followed by
    the full text of every license that carries one.
    """

    def __init__(self, product_name: str, product_version: str, timestamp: str):
        self.product_name = product_name
        self.product_version = product_version
        self.timestamp = timestamp

    def write(self, artifacts: list[Artifact]) -> str:
        entries = [
            ArtifactAndLicense.from_artifact(artifact)
            for artifact in artifacts
            if not artifact.proprietary
        ]

        title = f"Third-party notices for {self.product_name}"
        if self.product_version:
            title += f" {self.product_version}"
        lines = [title, f"Generated on {self.timestamp}", ""]
        lines.append(
            f"This product includes the following {len(entries)} third-party components:"
        )

        license_texts: dict[str, License] = {}
        for entry in entries:
            lines += ["", SEPARATOR]
            lines += self._describe_entry(entry)
            for license in entry.licenses:
                if license.text and license.license_id not in license_texts:
                    license_texts[license.license_id] = license

        if license_texts:
            lines += ["", SEPARATOR, "License texts", SEPARATOR]
            for license_id, license in license_texts.items():
                lines += ["", license.long_name or license_id, "", str(license.text)]

        return "\n".join(lines) + "\n"

    @staticmethod
    def _describe_entry(entry: ArtifactAndLicense) -> list[str]:
        lines = [entry.filename or entry.coordinates or "Unknown artifact"]
        if entry.coordinates:
            lines.append(f"Coordinates: {entry.coordinates}")
        if entry.purls:
            lines.append(f"Package URLs: {', '.join(entry.purls)}")
        if entry.licenses:
            names = [
                license.long_name or license.license_id for license in entry.licenses
            ]
            lines.append(f"Licenses: {', '.join(names)}")
        else:
            lines.append("Licenses: unknown")
        if entry.copyright_statement:
            lines.append("Copyright:")
            lines += [
                f"  {statement}"
                for statement in entry.copyright_statement.splitlines()
                if statement.strip()
            ]
        return lines
