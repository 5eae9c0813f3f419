# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Flattened artifact rows and their deterministic ordering.

Upstream analyzers collect artifacts in no particular order, reports and
attribution documents are sorted with ``ArtifactAndLicenseComparator`` so
that two runs over the same input produce the same output.
"""

from dataclasses import dataclass, field
from functools import cmp_to_key

from antenna.model.artifact import Artifact
from antenna.model.facts import CopyrightStatement
from antenna.utils.artifact_license_utils import (
    flatten_license_objects,
    get_final_licenses,
)
from antenna.model.license_information import License


@dataclass
class ArtifactAndLicense:
    filename: str | None
    coordinates: str | None  # concatenated coordinate strings
    licenses: list[License] = field(default_factory=list)
    copyright_statement: str | None = None
    purls: list[str] = field(default_factory=list)

    @staticmethod
    def from_artifact(artifact: Artifact) -> "ArtifactAndLicense":
        coordinates = sorted(artifact.get_coordinates(), key=lambda c: c.to_string())
        copyright = artifact.ask_for(CopyrightStatement)
        return ArtifactAndLicense(
            filename=artifact.get_filename(),
            coordinates=", ".join(c.to_string() for c in coordinates),
            licenses=flatten_license_objects(get_final_licenses(artifact)),
            copyright_statement=copyright.statement if copyright is not None else None,
            purls=[c.to_purl_string() for c in coordinates],
        )


def _compare_strings(first: str | None, second: str | None) -> int:
    # None and empty strings sort first
    first = first or ""
    second = second or ""
    return (first > second) - (first < second)


class ArtifactAndLicenseComparator:
    def compare(self, first: ArtifactAndLicense, second: ArtifactAndLicense) -> int:
        result = _compare_strings(first.filename, second.filename)
        if result != 0:
            return result
        return _compare_strings(first.coordinates, second.coordinates)

    def __call__(self, first: ArtifactAndLicense, second: ArtifactAndLicense) -> int:
        return self.compare(first, second)


def sort_artifacts_and_licenses(
    artifacts_and_licenses: list[ArtifactAndLicense],
) -> list[ArtifactAndLicense]:
    return sorted(
        artifacts_and_licenses, key=cmp_to_key(ArtifactAndLicenseComparator())
    )
