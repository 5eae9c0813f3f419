# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging
from typing import Any

from antenna.adaptors.datetime import get_utc_timestamp
from antenna.adaptors.os import create_dirs, path_join, write_file
from antenna.config.tool_configuration import ToolConfiguration
from antenna.model.artifact import Artifact
from antenna.report_generator.report_generator import ReportGenerator
from antenna.report_generator.writers.attribution_document_writer import (
    AttributionDocumentWriter,
)
from antenna.workflow.workflow_step import Attachable, Generator

logger = logging.getLogger(__name__)

ATTRIBUTION_DOC_FILE_NAME = "attribution-document.txt"
ATTRIBUTION_DOC_ATTACHABLE_KEY = "attribution-doc"
ATTRIBUTION_DOC_TYPE = "txt"
ATTRIBUTION_DOC_CLASSIFIER = "antenna-attribution-doc"


class AttributionDocumentGenerator(Generator):
    """Writes the third-party notices of the product into the target directory."""

    name = "Attribution Document"

    def __init__(self, context: ToolConfiguration) -> None:
        super().__init__(context)
        self.file_name = ATTRIBUTION_DOC_FILE_NAME
        self.product_name = context.project_name
        self.product_version = context.project_version

    def configure(self, config: dict[str, Any]) -> None:
        self.file_name = config.get("file_name", ATTRIBUTION_DOC_FILE_NAME)
        self.product_name = config.get("product_name", self.product_name)
        self.product_version = config.get("product_version", self.product_version)

    def produce(self, artifacts: list[Artifact]) -> dict[str, Attachable]:
        target_directory = self.context.get_target_directory()
        create_dirs(target_directory)
        document_file = path_join(target_directory, self.file_name)

        writer = AttributionDocumentWriter(
            self.product_name, self.product_version, get_utc_timestamp()
        )
        document = ReportGenerator(writer).generate_report(artifacts)
        write_file(document_file, document, self.context.encoding)
        logger.info(f"Wrote attribution document to {document_file}")
        return {
            ATTRIBUTION_DOC_ATTACHABLE_KEY: Attachable(
                ATTRIBUTION_DOC_TYPE, ATTRIBUTION_DOC_CLASSIFIER, document_file
            )
        }
