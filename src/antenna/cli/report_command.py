# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

# Command producing the reports of a CSV artifact list without a configuration file

import logging
from typing import Annotated

import typer

from antenna.adaptors.os import get_base_name, path_exists
from antenna.analyzers.csv_analyzer import CsvAnalyzer
from antenna.cli.run_command import print_attachables
from antenna.config.cli_configs import default_config
from antenna.config.tool_configuration import ToolConfiguration
from antenna.exceptions import AntennaException
from antenna.generators.attribution_document_generator import (
    AttributionDocumentGenerator,
)
from antenna.generators.csv_generator import CSVGenerator
from antenna.processors.license_checker import LicenseChecker
from antenna.utils.logging import setup_logging
from antenna.workflow.workflow import Workflow


def report(
    csv_file: Annotated[
        str,
        typer.Argument(help="Path to the CSV file listing the artifacts."),
    ],
    output_dir: Annotated[
        str,
        typer.Option(
            "--output",
            "-o",
            help="Directory the reports are written to.",
        ),
    ] = default_config.default_target_directory,
    delimiter: Annotated[
        str,
        typer.Option(
            "--delimiter",
            help="Delimiter of the input CSV file.",
        ),
    ] = default_config.default_csv_delimiter,
    project_name: Annotated[
        str,
        typer.Option(
            "--project-name",
            help="Product name printed in the attribution document. Default is the CSV file name.",
        ),
    ] = "",
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
    Read the artifacts of CSV_FILE and write the artifact information CSV and
    the attribution document.
    """
    setup_logging(logging.DEBUG if debug else logging.INFO)

    if not path_exists(csv_file):
        typer.echo(f"Error: Cannot find {csv_file}", err=True)
        raise typer.Exit(code=1)

    context = ToolConfiguration(
        project_name=project_name or get_base_name(csv_file),
        target_directory=output_dir,
    )
    analyzer = CsvAnalyzer(context)
    generators = [CSVGenerator(context), AttributionDocumentGenerator(context)]
    try:
        analyzer.configure({"file_path": csv_file, "delimiter": delimiter})
        result = Workflow([analyzer], [LicenseChecker(context)], generators).run()
    except (AntennaException, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    print_attachables(result)
