# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from typing import Any

from antenna.config.tool_configuration import SW360Configuration, ToolConfiguration
from antenna.model.artifact import Artifact
from antenna.sw360.client import SW360Client
from antenna.sw360.metadata_updater import SW360MetaDataUpdater
from antenna.sw360.updater import SW360UpdaterImpl
from antenna.workflow.workflow_step import Attachable, Generator


class SW360Updater(Generator):
    """Pushes the artifacts as components and releases of a SW360 project."""

    name = "SW360 Updater"

    def __init__(self, context: ToolConfiguration) -> None:
        super().__init__(context)
        self.sw360_configuration = context.sw360

    def configure(self, config: dict[str, Any]) -> None:
        base = self.context.sw360
        self.sw360_configuration = SW360Configuration(
            rest_url=self.get_config_value(
                "rest_url", config, base.rest_url if base else None
            ),
            token=self.get_config_value("token", config, base.token if base else None),
            update_releases=self.get_boolean_config_value(
                "update_releases", config, base.update_releases if base else False
            ),
            upload_sources=self.get_boolean_config_value(
                "upload_sources", config, base.upload_sources if base else False
            ),
        )

    def produce(self, artifacts: list[Artifact]) -> dict[str, Attachable]:
        if self.sw360_configuration is None:
            raise ValueError("SW360 connection settings are missing")
        client = SW360Client(
            self.sw360_configuration.rest_url, self.sw360_configuration.token
        )
        metadata_updater = SW360MetaDataUpdater(
            client,
            update_releases=self.sw360_configuration.update_releases,
            upload_sources=self.sw360_configuration.upload_sources,
        )
        return SW360UpdaterImpl(
            metadata_updater, self.context.project_name, self.context.project_version
        ).produce(artifacts)
