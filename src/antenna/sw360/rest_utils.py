# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

# Conversion of SW360 resources into REST request payloads

from typing import Any

from antenna.exceptions import AntennaExecutionException
from antenna.sw360.resources import (
    SW360Component,
    SW360License,
    SW360Project,
    SW360Release,
)

RELEASE_EXTERNAL_ID_OREPO = "orig_repo"
RELEASE_EXTERNAL_ID_SWHID = "swh"
RELEASE_EXTERNAL_ID_HASHES = "hash_"

RELEASE_ADDITIONAL_DATA_FINAL_LICENSES = "final_license"
RELEASE_ADDITIONAL_DATA_DECLARED_LICENSES = "declared_license"
RELEASE_ADDITIONAL_DATA_OBSERVED_LICENSES = "observed_license"
RELEASE_ADDITIONAL_DATA_CHANGE_STATUS = "change_status"
RELEASE_ADDITIONAL_DATA_COPYRIGHTS = "copyrights"


def project_to_payload(project: SW360Project) -> dict[str, Any]:
    return {
        "name": project.name,
        "version": project.version,
        "description": project.description,
        "projectType": project.project_type,
        "businessUnit": project.business_unit,
        "clearingTeam": project.clearing_team,
        "visibility": project.visibility,
    }


def component_to_payload(component: SW360Component) -> dict[str, Any]:
    return {
        "name": component.name,
        "componentType": component.component_type,
        "homepage": component.homepage,
    }


def release_to_payload(release: SW360Release) -> dict[str, Any]:
    if not release.component_id:
        raise AntennaExecutionException(
            f"No componentId found for release [{release.name}]"
        )
    return {
        "componentId": release.component_id,
        "name": release.name,
        "version": release.version,
        "cpeId": release.cpe_id,
        "downloadurl": release.download_url,
        "clearingState": release.clearing_state,
        "mainLicenseIds": list(release.main_license_ids),
        "externalIds": external_ids_of(release),
        "additionalData": additional_data_of(release),
    }


def license_to_payload(license: SW360License) -> dict[str, Any]:
    short_name = license.short_name or ""
    return {
        "fullName": license.full_name or short_name,
        "shortName": short_name,
        "text": license.text,
    }


def external_ids_of(release: SW360Release) -> dict[str, str]:
    external_ids = dict(release.coordinates)
    if release.release_tag_url:
        external_ids[RELEASE_EXTERNAL_ID_OREPO] = release.release_tag_url
    if release.software_heritage_id:
        external_ids[RELEASE_EXTERNAL_ID_SWHID] = release.software_heritage_id
    for index, file_hash in enumerate(release.hashes, start=1):
        external_ids[f"{RELEASE_EXTERNAL_ID_HASHES}{index}"] = file_hash
    return external_ids


def additional_data_of(release: SW360Release) -> dict[str, str]:
    values = {
        RELEASE_ADDITIONAL_DATA_FINAL_LICENSES: release.final_license,
        RELEASE_ADDITIONAL_DATA_DECLARED_LICENSES: release.declared_license,
        RELEASE_ADDITIONAL_DATA_OBSERVED_LICENSES: release.observed_license,
        RELEASE_ADDITIONAL_DATA_CHANGE_STATUS: release.change_status,
        RELEASE_ADDITIONAL_DATA_COPYRIGHTS: release.copyrights,
    }
    return {key: value for key, value in values.items() if value is not None}
