# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

import logging
from typing import Any

from antenna.config.cli_configs import default_config
from antenna.config.tool_configuration import ToolConfiguration
from antenna.model.artifact import Artifact
from antenna.utils.artifact_license_utils import get_flattened_final_licenses
from antenna.workflow.workflow_step import Processor

# Get application-specific logger
logger = logging.getLogger("antenna")


class LicenseChecker(Processor):
    """Warns about artifacts whose final license is in the list of cautionary licenses."""

    name = "License checker"
    workflow_step_order = 1200

    def __init__(self, context: ToolConfiguration) -> None:
        super().__init__(context)
        self._cautionary_licenses = list(default_config.preset_cautionary_licenses)

    def configure(self, config: dict[str, Any]) -> None:
        cautionary_licenses = config.get("cautionary_licenses")
        if isinstance(cautionary_licenses, str):
            cautionary_licenses = cautionary_licenses.split(",")
        if cautionary_licenses:
            self._cautionary_licenses = [
                license.strip() for license in cautionary_licenses if license.strip()
            ]

    def process(self, artifacts: list[Artifact]) -> list[Artifact]:
        self.check_cautionary_licenses(artifacts)
        return artifacts

    def check_cautionary_licenses(self, artifacts: list[Artifact]) -> None:
        for artifact in artifacts:
            licenses = get_flattened_final_licenses(artifact)
            if not licenses:
                continue

            for license_id in licenses:
                if self._is_cautionary_license(license_id):
                    msg = "Artifact {} has a license ({}) that is in the list of cautionary licenses. Double check that the license is compatible with your project.".format(
                        artifact, license_id
                    )
                    logger.warning(msg)

    def _is_cautionary_license(self, license_id: str) -> bool:
        license_id_upper = license_id.upper()
        return any(
            license_id_upper.startswith(keyword.upper())
            for keyword in self._cautionary_licenses
        )
