# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from typing import Any

from antenna.adaptors.os import path_join
from antenna.config.tool_configuration import ToolConfiguration
from antenna.model.artifact import Artifact
from antenna.p2.artifact_attacher import ArtifactAttacher
from antenna.workflow.workflow_step import Processor


class P2ArtifactAttacher(Processor):
    name = "P2 artifact attacher"
    workflow_step_order = 1100

    def __init__(self, context: ToolConfiguration) -> None:
        super().__init__(context)
        self.download_area: str | None = None
        self.target_directory = path_join(context.get_target_directory(), "dependencies")

    def configure(self, config: dict[str, Any]) -> None:
        self.download_area = self.context.resolve_path(
            self.get_config_value("download_area", config)
        )
        if config.get("target_directory"):
            self.target_directory = self.context.resolve_path(config["target_directory"])

    def process(self, artifacts: list[Artifact]) -> list[Artifact]:
        if self.download_area is None:
            raise ValueError("P2ArtifactAttacher has not been configured with a download_area")
        ArtifactAttacher(self.target_directory).copy_dependencies(
            self.download_area, artifacts
        )
        return artifacts
