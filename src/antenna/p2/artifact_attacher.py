# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging

from antenna.adaptors.os import copy_file, create_dirs, path_exists, path_join
from antenna.model.artifact import Artifact
from antenna.model.coordinates import Coordinate, CoordinateType
from antenna.model.facts import ArtifactFile, ArtifactSourceFile

logger = logging.getLogger(__name__)


def get_bundle_jar_name(bundle: Coordinate) -> str:
    return f"{bundle.name}_{bundle.version}.jar"


def get_bundle_source_name(bundle: Coordinate) -> str:
    return f"{bundle.name}.source_{bundle.version}.jar"


class ArtifactAttacher:
    """Copies the bundle jars found in a P2 download area next to the other
    dependencies and attaches them to their artifacts."""

    def __init__(self, target_directory: str) -> None:
        self.target_directory = target_directory

    def copy_dependencies(self, artifact_download_area: str, artifacts: list[Artifact]) -> None:
        create_dirs(self.target_directory)
        for artifact in artifacts:
            self._attach_artifacts(artifact, artifact_download_area)

    def _attach_artifacts(self, artifact: Artifact, artifact_download_area: str) -> None:
        bundle = artifact.get_coordinate_for_type(CoordinateType.P2)
        if bundle is None:
            return
        if artifact.get_file() is None:
            attached = self._copy(artifact_download_area, get_bundle_jar_name(bundle))
            if attached is not None:
                artifact.add_fact(ArtifactFile(attached))
                logger.info(f"Attached artifact for {artifact}.")
        if artifact.get_source_file() is None:
            attached = self._copy(artifact_download_area, get_bundle_source_name(bundle))
            if attached is not None:
                artifact.add_fact(ArtifactSourceFile(attached))
                logger.info(f"Attached source artifact for {artifact}.")

    def _copy(self, artifact_download_area: str, file_name: str) -> str | None:
        source = path_join(artifact_download_area, file_name)
        if not path_exists(source):
            return None
        target = path_join(self.target_directory, file_name)
        copy_file(source, target)
        return target
