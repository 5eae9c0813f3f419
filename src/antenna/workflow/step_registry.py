# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Maps the step names used in a configuration file to workflow step classes."""

import logging
from typing import Type, TypeVar

from antenna.analyzers.configured_artifacts_analyzer import (
    ConfiguredArtifactsAnalyzer,
)
from antenna.analyzers.csv_analyzer import CsvAnalyzer
from antenna.analyzers.ort_result_analyzer import OrtResultAnalyzer
from antenna.config.tool_configuration import ToolConfiguration, WorkflowStepConfig
from antenna.generators.attribution_document_generator import (
    AttributionDocumentGenerator,
)
from antenna.generators.csv_generator import CSVGenerator
from antenna.generators.sw360_updater import SW360Updater
from antenna.processors.license_checker import LicenseChecker
from antenna.processors.maven_artifact_resolver import MavenArtifactResolver
from antenna.processors.override_processor import OverrideProcessor
from antenna.processors.p2_artifact_attacher import P2ArtifactAttacher
from antenna.workflow.workflow import Workflow
from antenna.workflow.workflow_step import Analyzer, Generator, Processor, WorkflowStep

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=WorkflowStep)

ANALYZERS: list[Type[Analyzer]] = [
    ConfiguredArtifactsAnalyzer,
    CsvAnalyzer,
    OrtResultAnalyzer,
]
PROCESSORS: list[Type[Processor]] = [
    OverrideProcessor,
    MavenArtifactResolver,
    P2ArtifactAttacher,
    LicenseChecker,
]
GENERATORS: list[Type[Generator]] = [
    CSVGenerator,
    AttributionDocumentGenerator,
    SW360Updater,
]


def find_step_class(name: str, candidates: list[Type[S]]) -> Type[S]:
    """Find a step class by its display name or its class name, ignoring case."""
    wanted = name.strip().lower()
    for candidate in candidates:
        if wanted in (candidate.name.lower(), candidate.__name__.lower()):
            return candidate
    known = [candidate.name for candidate in candidates]
    raise ValueError(f"Unknown workflow step: {name}. Known steps: {known}")


def create_steps(
    step_configs: list[WorkflowStepConfig],
    candidates: list[Type[S]],
    context: ToolConfiguration,
) -> list[S]:
    steps = []
    for step_config in step_configs:
        if step_config.deactivated:
            logger.debug(f"Skipping deactivated workflow step {step_config.name}")
            continue
        step = find_step_class(step_config.name, candidates)(context)
        step.configure(step_config.configuration)
        steps.append(step)
    return steps


def build_workflow(context: ToolConfiguration) -> Workflow:
    """Create the configured steps.

    Configured artifacts and override rules in the tool configuration are
    honored even when their steps are not listed in the workflow.
    """
    analyzers = create_steps(context.workflow.analyzers, ANALYZERS, context)
    processors = create_steps(context.workflow.processors, PROCESSORS, context)
    generators = create_steps(context.workflow.generators, GENERATORS, context)

    if context.add_artifacts and not any(
        isinstance(step, ConfiguredArtifactsAnalyzer) for step in analyzers
    ):
        analyzers.append(ConfiguredArtifactsAnalyzer(context))
    if context.overrides and not any(
        isinstance(step, OverrideProcessor) for step in processors
    ):
        processors.append(OverrideProcessor(context))

    return Workflow(analyzers, processors, generators)
