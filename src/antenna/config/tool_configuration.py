# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from dataclasses import dataclass, field
from typing import Any

from antenna.adaptors.os import is_absolute_path, path_join
from antenna.config.cli_configs import default_config


@dataclass
class WorkflowStepConfig:
    name: str
    configuration: dict[str, Any] = field(default_factory=dict)
    deactivated: bool = False


@dataclass
class WorkflowConfig:
    analyzers: list[WorkflowStepConfig] = field(default_factory=list)
    processors: list[WorkflowStepConfig] = field(default_factory=list)
    generators: list[WorkflowStepConfig] = field(default_factory=list)


@dataclass
class SW360Configuration:
    rest_url: str
    token: str
    update_releases: bool = False
    upload_sources: bool = False


@dataclass
class ToolConfiguration:
    """Everything a workflow run knows about the analyzed project."""

    project_name: str = ""
    project_version: str = ""
    base_dir: str = "."  # relative paths in the configuration resolve against it
    target_directory: str = default_config.default_target_directory
    encoding: str = default_config.default_encoding
    workflow: WorkflowConfig = field(default_factory=WorkflowConfig)
    add_artifacts: list[dict[str, Any]] = field(default_factory=list)
    overrides: list[dict[str, Any]] = field(default_factory=list)
    sw360: SW360Configuration | None = None

    def resolve_path(self, path: str) -> str:
        if is_absolute_path(path):
            return path
        return path_join(self.base_dir, path)

    def get_target_directory(self) -> str:
        return self.resolve_path(self.target_directory)
