# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging

from antenna.adaptors.os import get_base_name, path_exists, read_binary_file
from antenna.model.artifact import Artifact
from antenna.sw360.client import SW360Client
from antenna.sw360.resources import (
    SW360Component,
    SW360License,
    SW360Project,
    SW360Release,
    component_from_artifact,
    release_from_artifact,
    release_version_for,
)
from antenna.utils.artifact_license_utils import (
    flatten_license_objects,
    get_final_licenses,
)

logger = logging.getLogger(__name__)

SOURCE_ATTACHMENT_TYPE = "SOURCE"


class SW360MetaDataUpdater:
    """Looks up the SW360 counterpart of artifacts and creates what is missing.

    Every lookup happens before the corresponding create, so running the
    updater twice against the same server state creates nothing new.
    """

    def __init__(
        self,
        client: SW360Client,
        update_releases: bool = False,
        upload_sources: bool = False,
    ) -> None:
        self.client = client
        self.update_releases = update_releases
        self.upload_sources = upload_sources

    def get_or_create_licenses(self, artifact: Artifact) -> list[str]:
        license_ids = []
        for license in flatten_license_objects(get_final_licenses(artifact)):
            sw360_license = self.client.get_license(license.license_id)
            if sw360_license is None:
                logger.debug(f"Creating license [{license.license_id}] in SW360")
                sw360_license = self.client.create_license(
                    SW360License(
                        short_name=license.license_id,
                        full_name=license.long_name,
                        text=license.text,
                    )
                )
            else:
                logger.debug(f"License [{license.license_id}] already exists in SW360.")
            license_ids.append(sw360_license.short_name)
        return license_ids

    def get_or_create_component(self, artifact: Artifact) -> SW360Component:
        wanted = component_from_artifact(artifact)
        for component in self.client.search_components(wanted.name):
            if component.name == wanted.name:
                return component
        logger.debug(f"Creating component [{wanted.name}] in SW360")
        return self.client.create_component(wanted)

    def get_or_create_release(
        self, artifact: Artifact, license_ids: list[str], component: SW360Component
    ) -> SW360Release:
        wanted = release_from_artifact(artifact, component, license_ids)
        existing = self._find_release(component, release_version_for(artifact))
        if existing is None:
            logger.debug(f"Creating release [{wanted.name} {wanted.version}] in SW360")
            release = self.client.create_release(wanted)
            self._upload_sources(artifact, release)
            return release
        if not self.update_releases:
            return existing
        wanted.id = existing.id
        logger.debug(f"Updating release [{wanted.name} {wanted.version}] in SW360")
        return self.client.update_release(wanted)

    def create_project(
        self, project_name: str, project_version: str, releases: list[SW360Release]
    ) -> str:
        project_id = self._find_project_id(project_name, project_version)
        if project_id is None:
            project = self.client.create_project(
                SW360Project(name=project_name, version=project_version)
            )
            project_id = project.id
        else:
            # SW360 offers no endpoint to update an existing project
            logger.debug(f"Reusing existing project {project_id}")
        if project_id is None:
            raise ValueError(f"SW360 did not return an id for project {project_name}")
        self.client.link_releases(
            project_id, [release.id for release in releases if release.id]
        )
        return project_id

    def _find_release(
        self, component: SW360Component, version: str
    ) -> SW360Release | None:
        if not component.id:
            return None
        for release in self.client.get_releases_of_component(component.id):
            if release.version == version:
                return release
        return None

    def _find_project_id(self, project_name: str, project_version: str) -> str | None:
        for project in self.client.search_projects(project_name):
            if project.name == project_name and project.version == project_version:
                return project.id
        return None

    def _upload_sources(self, artifact: Artifact, release: SW360Release) -> None:
        source_file = artifact.get_source_file()
        if not self.upload_sources or not release.id or source_file is None:
            return
        if not path_exists(source_file):
            logger.warning(f"Source file {source_file} of {artifact} does not exist")
            return
        self.client.upload_attachment(
            release.id,
            get_base_name(source_file),
            read_binary_file(source_file),
            SOURCE_ATTACHMENT_TYPE,
        )
