# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from antenna.config.tool_configuration import ToolConfiguration
from antenna.model.artifact import Artifact

DEFAULT_WORKFLOW_STEP_ORDER = 10000


@dataclass
class Attachable:
    """A file produced by a generator."""

    type: str
    classifier: str
    path: str


class WorkflowStep(ABC):
    name: str = ""
    workflow_step_order: int = DEFAULT_WORKFLOW_STEP_ORDER

    def __init__(self, context: ToolConfiguration) -> None:
        self.context = context

    def configure(self, config: dict[str, Any]) -> None:
        pass

    def get_name(self) -> str:
        return self.name or type(self).__name__

    @staticmethod
    def get_config_value(key: str, config: dict[str, Any], default: Any = None) -> Any:
        value = config.get(key, default)
        if value is None:
            raise ValueError(f"Missing configuration value '{key}'")
        return value

    @staticmethod
    def get_boolean_config_value(
        key: str, config: dict[str, Any], default: bool = False
    ) -> bool:
        value = config.get(key, default)
        if isinstance(value, str):
            return value.strip().lower() == "true"
        return bool(value)


class Analyzer(WorkflowStep):
    @abstractmethod
    def yield_artifacts(self) -> list[Artifact]:
        raise NotImplementedError


class Processor(WorkflowStep):
    @abstractmethod
    def process(self, artifacts: list[Artifact]) -> list[Artifact]:
        raise NotImplementedError


class Generator(WorkflowStep):
    @abstractmethod
    def produce(self, artifacts: list[Artifact]) -> dict[str, Attachable]:
        raise NotImplementedError
