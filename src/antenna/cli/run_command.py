# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

# Command running the workflow described by a tool configuration file

import json
import logging
from typing import Annotated

import typer

from antenna.adaptors.os import path_exists
from antenna.config.json_config_parser import JsonConfigParser
from antenna.exceptions import AntennaException
from antenna.utils.logging import setup_logging
from antenna.workflow.step_registry import build_workflow
from antenna.workflow.workflow import WorkflowResult


def print_attachables(result: WorkflowResult) -> None:
    typer.echo(f"Processed {len(result.artifacts)} artifacts.")
    for key, attachable in sorted(result.attachables.items()):
        typer.echo(
            f"{key}: {attachable.path} ({attachable.type}, {attachable.classifier})"
        )


def run(
    config_file: Annotated[
        str,
        typer.Argument(help="Path to the JSON tool configuration file."),
    ],
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            "-X",
            help="Enable debug logging.",
        ),
    ] = False,
) -> None:
    """
    Run the analyzers, processors and generators configured in CONFIG_FILE.
    """
    setup_logging(logging.DEBUG if debug else logging.INFO)

    if not path_exists(config_file):
        typer.echo(f"Error: Cannot find {config_file}", err=True)
        raise typer.Exit(code=1)

    try:
        tool_configuration = JsonConfigParser.load_tool_configuration(config_file)
    except (json.JSONDecodeError, ValueError, OSError) as e:
        typer.echo(f"Error: Invalid configuration {config_file}: {e}", err=True)
        raise typer.Exit(code=1)

    try:
        result = build_workflow(tool_configuration).run()
    except (AntennaException, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    print_attachables(result)
