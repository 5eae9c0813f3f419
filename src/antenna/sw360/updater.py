# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging

from antenna.exceptions import AntennaExecutionException
from antenna.model.artifact import Artifact
from antenna.sw360.metadata_updater import SW360MetaDataUpdater
from antenna.sw360.resources import SW360Release
from antenna.workflow.workflow_step import Attachable

logger = logging.getLogger(__name__)


class SW360UpdaterImpl:
    def __init__(
        self,
        sw360_metadata_updater: SW360MetaDataUpdater,
        project_name: str,
        project_version: str,
    ) -> None:
        self.sw360_metadata_updater = sw360_metadata_updater
        self.project_name = project_name
        self.project_version = project_version

    def produce(self, artifacts: list[Artifact]) -> dict[str, Attachable]:
        releases: list[SW360Release] = []
        try:
            for artifact in artifacts:
                license_ids = self.sw360_metadata_updater.get_or_create_licenses(artifact)
                component = self.sw360_metadata_updater.get_or_create_component(artifact)
                releases.append(
                    self.sw360_metadata_updater.get_or_create_release(
                        artifact, license_ids, component
                    )
                )
            self.sw360_metadata_updater.create_project(
                self.project_name, self.project_version, releases
            )
        except (OSError, ValueError) as e:
            raise AntennaExecutionException(
                f"Problem occurred during updating SW360: {e}"
            ) from e
        logger.info(f"Pushed {len(releases)} releases to SW360")
        return {}
