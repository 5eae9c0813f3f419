# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

# Utility functions to reconcile the license facts of an artifact

from antenna.model.artifact import Artifact
from antenna.model.facts import (
    ConfiguredLicenseInformation,
    DeclaredLicenseInformation,
    ObservedLicenseInformation,
)
from antenna.model.license_information import (
    EmptyLicense,
    License,
    LicenseInformation,
)

_FINAL_LICENSE_PRECEDENCE = [
    ConfiguredLicenseInformation,
    DeclaredLicenseInformation,
    ObservedLicenseInformation,
]


def get_final_licenses(artifact: Artifact) -> LicenseInformation:
    """
    Return the license that governs compliance reporting for an artifact.

    The explicitly configured license wins over the declared one, which wins
    over the observed one. Facts holding an empty license are skipped.
    """
    for fact_class in _FINAL_LICENSE_PRECEDENCE:
        fact = artifact.ask_for(fact_class)
        if fact is not None and not fact.is_empty():
            return fact.license_information
    return EmptyLicense()


def flatten_license_objects(license_information: LicenseInformation) -> list[License]:
    flattened: list[License] = []
    seen_ids: set[str] = set()
    for license in license_information.get_licenses():
        if license.is_empty() or license.license_id in seen_ids:
            continue
        seen_ids.add(license.license_id)
        flattened.append(license)
    return flattened


def flatten_licenses(license_information: LicenseInformation) -> list[str]:
    """
    Decompose an AND/OR tree into distinct license ids in first-seen order.

    Deduplication is an exact, case-sensitive match on the license id.
    """
    return [
        license.license_id for license in flatten_license_objects(license_information)
    ]


def get_flattened_final_licenses(artifact: Artifact) -> list[str]:
    return flatten_licenses(get_final_licenses(artifact))
