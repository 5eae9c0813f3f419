# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from antenna.workflow.workflow import Workflow, WorkflowResult
from antenna.workflow.workflow_step import (
    Analyzer,
    Attachable,
    Generator,
    Processor,
    WorkflowStep,
)

__all__ = [
    "Analyzer",
    "Attachable",
    "Generator",
    "Processor",
    "Workflow",
    "WorkflowResult",
    "WorkflowStep",
]
