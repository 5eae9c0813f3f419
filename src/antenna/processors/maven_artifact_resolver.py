# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging
from typing import Any

from antenna.adaptors.os import create_dirs, path_join
from antenna.config.cli_configs import default_config
from antenna.config.tool_configuration import ToolConfiguration
from antenna.maven.artifact_requester import (
    DEFAULT_JAR,
    DEFAULT_SOURCE_JAR,
    ArtifactRequester,
    HttpRequester,
    MavenInvokerRequester,
)
from antenna.model.artifact import Artifact
from antenna.model.coordinates import CoordinateType
from antenna.model.facts import ArtifactFile, ArtifactSourceFile
from antenna.workflow.workflow_step import Processor

logger = logging.getLogger(__name__)


class MavenArtifactResolver(Processor):
    """Attaches the jar and sources jar of every Maven artifact."""

    name = "Maven artifact resolver"
    workflow_step_order = 1000

    def __init__(
        self,
        context: ToolConfiguration,
        requester: ArtifactRequester | None = None,
    ) -> None:
        super().__init__(context)
        self.requester = requester or HttpRequester(
            default_config.default_maven_repository_url
        )
        self.download_directory = path_join(context.get_target_directory(), "dependencies")
        self.download_jars = True
        self.download_sources = True

    def configure(self, config: dict[str, Any]) -> None:
        requester_type = config.get("requester", "http")
        if requester_type == "invoker":
            self.requester = MavenInvokerRequester(
                self.context.base_dir, config.get("maven_executable", "mvn")
            )
        elif requester_type == "http":
            self.requester = HttpRequester(
                config.get(
                    "repository_url", default_config.default_maven_repository_url
                )
            )
        else:
            raise ValueError(
                f"Unknown requester: {requester_type}. Valid requesters: ['http', 'invoker']"
            )
        if config.get("download_directory"):
            self.download_directory = self.context.resolve_path(
                config["download_directory"]
            )
        self.download_jars = self.get_boolean_config_value("download_jars", config, True)
        self.download_sources = self.get_boolean_config_value(
            "download_sources", config, True
        )

    def process(self, artifacts: list[Artifact]) -> list[Artifact]:
        create_dirs(self.download_directory)
        for artifact in artifacts:
            coordinate = artifact.get_coordinate_for_type(CoordinateType.MAVEN)
            if coordinate is None or artifact.proprietary:
                continue
            if self.download_jars and artifact.get_file() is None:
                jar = self.requester.request_file(
                    coordinate, self.download_directory, DEFAULT_JAR
                )
                if jar is not None:
                    artifact.add_fact(ArtifactFile(jar))
            if self.download_sources and artifact.get_source_file() is None:
                source_jar = self.requester.request_file(
                    coordinate, self.download_directory, DEFAULT_SOURCE_JAR
                )
                if source_jar is not None:
                    artifact.add_fact(ArtifactSourceFile(source_jar))
                else:
                    logger.info(f"No sources found for {artifact}")
        return artifacts
