# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Requesters fetch the jar or the sources jar of a Maven coordinate into a
local directory."""

import logging
import shlex
from abc import ABC, abstractmethod
from dataclasses import dataclass

import requests

from antenna.adaptors.os import (
    path_exists,
    path_join,
    run_command,
    write_binary_file,
)
from antenna.model.coordinates import Coordinate

logger = logging.getLogger(__name__)

JAR_EXTENSION = ".jar"
POM_FILENAME = "pom.xml"


@dataclass(frozen=True)
class ClassifierInformation:
    classifier: str
    is_source: bool


DEFAULT_JAR = ClassifierInformation("", False)
DEFAULT_SOURCE_JAR = ClassifierInformation("sources", True)


class ArtifactRequester(ABC):
    @abstractmethod
    def request_file(
        self,
        coordinate: Coordinate,
        target_directory: str,
        classifier_information: ClassifierInformation,
    ) -> str | None:
        raise NotImplementedError

    @staticmethod
    def get_expected_jar_base_name(
        coordinate: Coordinate, classifier_information: ClassifierInformation
    ) -> str:
        base_name = f"{coordinate.name}-{coordinate.version}"
        if classifier_information.classifier:
            base_name += f"-{classifier_information.classifier}"
        return base_name + JAR_EXTENSION


class MavenInvokerRequester(ArtifactRequester):
    """Lets a local Maven installation copy the artifact into the target directory."""

    def __init__(self, base_dir: str, maven_executable: str = "mvn") -> None:
        self.base_dir = base_dir
        self.maven_executable = maven_executable

    def get_pom_file_from_context(self) -> str:
        return path_join(self.base_dir, POM_FILENAME)

    def build_command(
        self,
        coordinate: Coordinate,
        target_directory: str,
        classifier_information: ClassifierInformation,
    ) -> str:
        artifact = f"{coordinate.namespace}:{coordinate.name}:{coordinate.version}:jar"
        if classifier_information.classifier:
            artifact += f":{classifier_information.classifier}"
        command = [self.maven_executable, "--batch-mode"]
        pom_file = self.get_pom_file_from_context()
        if path_exists(pom_file):
            command += ["-f", pom_file]
        command += [
            "dependency:copy",
            f"-Dartifact={artifact}",
            f"-DoutputDirectory={target_directory}",
        ]
        return " ".join(shlex.quote(part) for part in command)

    def request_file(
        self,
        coordinate: Coordinate,
        target_directory: str,
        classifier_information: ClassifierInformation,
    ) -> str | None:
        expected_file = path_join(
            target_directory,
            self.get_expected_jar_base_name(coordinate, classifier_information),
        )
        command = self.build_command(coordinate, target_directory, classifier_information)
        logger.debug(f"Running {command}")
        return_code = run_command(command)
        if return_code != 0:
            logger.warning(
                f"Maven could not fetch {coordinate} (exit code {return_code})"
            )
            return None
        if not path_exists(expected_file):
            logger.warning(f"Maven did not produce the expected file {expected_file}")
            return None
        return expected_file


class HttpRequester(ArtifactRequester):
    """Downloads the artifact from a Maven repository over HTTP."""

    def __init__(self, repository_url: str, timeout: int = 60) -> None:
        self.repository_url = repository_url.rstrip("/")
        self.timeout = timeout

    def get_artifact_url(
        self, coordinate: Coordinate, classifier_information: ClassifierInformation
    ) -> str:
        group_path = (coordinate.namespace or "").replace(".", "/")
        return "/".join(
            [
                self.repository_url,
                group_path,
                coordinate.name or "",
                coordinate.version or "",
                self.get_expected_jar_base_name(coordinate, classifier_information),
            ]
        )

    def request_file(
        self,
        coordinate: Coordinate,
        target_directory: str,
        classifier_information: ClassifierInformation,
    ) -> str | None:
        expected_file = path_join(
            target_directory,
            self.get_expected_jar_base_name(coordinate, classifier_information),
        )
        if path_exists(expected_file):
            return expected_file

        url = self.get_artifact_url(coordinate, classifier_information)
        logger.debug(f"Downloading {url}")
        try:
            response = requests.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"Failed to download {url}: {e}")
            return None
        if response.status_code != 200:
            logger.warning(
                f"Failed to download {url}: status code {response.status_code}"
            )
            return None
        write_binary_file(expected_file, response.content)
        return expected_file
