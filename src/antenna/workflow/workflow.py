# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Workflow runs the configured steps one after the other: analyzers feed
artifacts into a single collection, processors refine it and generators
turn it into attachables."""

import logging
from dataclasses import dataclass, field
from typing import Sequence, TypeVar

from antenna.exceptions import AntennaException, AntennaExecutionException
from antenna.model.artifact import Artifact
from antenna.workflow.workflow_step import (
    Analyzer,
    Attachable,
    Generator,
    Processor,
    WorkflowStep,
)

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=WorkflowStep)


@dataclass
class WorkflowResult:
    artifacts: list[Artifact]
    attachables: dict[str, Attachable] = field(default_factory=dict)


def order_steps(steps: Sequence[S]) -> list[S]:
    return sorted(steps, key=lambda step: (step.workflow_step_order, step.get_name()))


def add_to_collection(collection: list[Artifact], artifact: Artifact) -> None:
    """Add ``artifact`` to ``collection`` or merge it into the collected
    artifacts describing the same component.

    When several collected artifacts match, the later ones are folded into
    the first one before the incoming facts are applied.
    """
    matches = [known for known in collection if known.is_same_component(artifact)]
    if not matches:
        collection.append(artifact)
        return
    target = matches[0]
    for duplicate in matches[1:]:
        logger.debug(f"Merging {duplicate} into {target}")
        target.merge_with(duplicate)
        collection.remove(duplicate)
    logger.debug(f"Merging {artifact} into {target}")
    target.merge_with(artifact)


class Workflow:
    def __init__(
        self,
        analyzers: list[Analyzer],
        processors: list[Processor] | None = None,
        generators: list[Generator] | None = None,
    ) -> None:
        self.analyzers = order_steps(analyzers)
        self.processors = order_steps(processors or [])
        self.generators = order_steps(generators or [])

    def run(self) -> WorkflowResult:
        artifacts: list[Artifact] = []
        for analyzer in self.analyzers:
            for artifact in self._execute(analyzer, analyzer.yield_artifacts):
                add_to_collection(artifacts, artifact)

        for processor in self.processors:
            artifacts = self._execute(processor, processor.process, artifacts)

        attachables: dict[str, Attachable] = {}
        for generator in self.generators:
            attachables.update(self._execute(generator, generator.produce, artifacts))

        logger.info(
            f"Workflow finished with {len(artifacts)} artifacts and {len(attachables)} attachables"
        )
        return WorkflowResult(artifacts=artifacts, attachables=attachables)

    @staticmethod
    def _execute(step: WorkflowStep, action, *args):  # type: ignore[no-untyped-def]
        logger.info(f"Running workflow step {step.get_name()}")
        try:
            result = action(*args)
        except AntennaExecutionException:
            raise
        except (AntennaException, OSError, ValueError) as e:
            raise AntennaExecutionException(
                f"Workflow step {step.get_name()} failed: {e}"
            ) from e
        logger.debug(f"Workflow step {step.get_name()} done")
        return result
