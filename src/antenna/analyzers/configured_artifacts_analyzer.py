# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging

from antenna.model.artifact import Artifact
from antenna.model.configured_artifact_builder import ConfiguredArtifactBuilder
from antenna.workflow.workflow_step import Analyzer

logger = logging.getLogger(__name__)


class ConfiguredArtifactsAnalyzer(Analyzer):
    """Provides the artifacts listed under ``add_artifacts`` in the configuration."""

    name = "Configured artifacts"
    workflow_step_order = 400

    def yield_artifacts(self) -> list[Artifact]:
        artifacts = [
            ConfiguredArtifactBuilder.from_json(entry).build()
            for entry in self.context.add_artifacts
        ]
        logger.info(f"Added {len(artifacts)} artifacts from the configuration")
        return artifacts
