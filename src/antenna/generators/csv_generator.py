# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging
from typing import Any

from antenna.adaptors.os import create_dirs, path_join, write_file
from antenna.config.tool_configuration import ToolConfiguration
from antenna.model.artifact import Artifact
from antenna.report_generator.report_generator import ReportGenerator
from antenna.report_generator.writers.csv_reporting_writer import (
    CSVReportingWriter,
)
from antenna.workflow.workflow_step import Attachable, Generator

logger = logging.getLogger(__name__)

CSV_FILE_NAME = "Antenna_artifactInformation.csv"
CSV_ATTACHABLE_KEY = "artifact-information"
CSV_TYPE = "csv"
CSV_CLASSIFIER = "antenna-artifact-info"


class CSVGenerator(Generator):
    name = "CSV Generator"

    def __init__(self, context: ToolConfiguration) -> None:
        super().__init__(context)
        self.file_name = CSV_FILE_NAME
        self.delimiter = ";"

    def configure(self, config: dict[str, Any]) -> None:
        self.file_name = config.get("file_name", CSV_FILE_NAME)
        delimiter = config.get("delimiter")
        if delimiter:
            self.delimiter = delimiter[0]

    def produce(self, artifacts: list[Artifact]) -> dict[str, Attachable]:
        target_directory = self.context.get_target_directory()
        create_dirs(target_directory)
        csv_file = path_join(target_directory, self.file_name)

        report = ReportGenerator(CSVReportingWriter(self.delimiter)).generate_report(
            artifacts
        )
        write_file(csv_file, report, self.context.encoding)
        logger.info(f"Wrote {len(artifacts)} artifacts to {csv_file}")
        return {CSV_ATTACHABLE_KEY: Attachable(CSV_TYPE, CSV_CLASSIFIER, csv_file)}
