# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import json
import logging
from typing import Any

import requests

from antenna.exceptions import AntennaExecutionException
from antenna.sw360 import rest_utils
from antenna.sw360.resources import (
    SW360Component,
    SW360License,
    SW360Project,
    SW360Release,
)

logger = logging.getLogger(__name__)

LICENSES_ENDPOINT = "licenses"
COMPONENTS_ENDPOINT = "components"
RELEASES_ENDPOINT = "releases"
PROJECTS_ENDPOINT = "projects"


def get_embedded(body: Any, key: str) -> list[dict[str, Any]]:
    """Unpack a HAL collection, e.g. ``{"_embedded": {"sw360:components": [...]}}``."""
    if not isinstance(body, dict):
        return []
    return list((body.get("_embedded") or {}).get(key) or [])


class SW360Client:
    """Synchronous client of the SW360 REST API authenticated by a bearer token."""

    def __init__(self, rest_url: str, token: str, timeout: int = 60) -> None:
        self.rest_url = rest_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": "application/hal+json",
            }
        )

    def _request(
        self,
        method: str,
        path: str,
        allow_not_found: bool = False,
        **kwargs: Any,
    ) -> Any:
        url = f"{self.rest_url}/{path}"
        logger.debug(f"{method} {url}")
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise AntennaExecutionException(f"Request {method} {url} failed: {e}") from e
        if allow_not_found and response.status_code == 404:
            return None
        if not 200 <= response.status_code < 300:
            raise AntennaExecutionException(
                f"Request {method} {url} failed with status code {response.status_code}: {response.text}"
            )
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    def get_license(self, short_name: str) -> SW360License | None:
        body = self._request("GET", f"{LICENSES_ENDPOINT}/{short_name}", allow_not_found=True)
        if body is None:
            return None
        return SW360License.from_json(body)

    def create_license(self, license: SW360License) -> SW360License:
        body = self._request(
            "POST", LICENSES_ENDPOINT, json=rest_utils.license_to_payload(license)
        )
        return SW360License.from_json(body)

    def search_components(self, name: str) -> list[SW360Component]:
        body = self._request("GET", COMPONENTS_ENDPOINT, params={"name": name})
        return [
            SW360Component.from_json(resource)
            for resource in get_embedded(body, "sw360:components")
        ]

    def create_component(self, component: SW360Component) -> SW360Component:
        body = self._request(
            "POST", COMPONENTS_ENDPOINT, json=rest_utils.component_to_payload(component)
        )
        return SW360Component.from_json(body)

    def get_releases_of_component(self, component_id: str) -> list[SW360Release]:
        body = self._request("GET", f"{COMPONENTS_ENDPOINT}/{component_id}")
        releases = []
        for resource in get_embedded(body, "sw360:releases"):
            release = SW360Release.from_json(resource)
            if release.component_id is None:
                release.component_id = component_id
            releases.append(release)
        return releases

    def create_release(self, release: SW360Release) -> SW360Release:
        body = self._request(
            "POST", RELEASES_ENDPOINT, json=rest_utils.release_to_payload(release)
        )
        return SW360Release.from_json(body)

    def update_release(self, release: SW360Release) -> SW360Release:
        if not release.id:
            raise AntennaExecutionException(
                f"Release [{release.name}] has no id and cannot be updated"
            )
        body = self._request(
            "PATCH",
            f"{RELEASES_ENDPOINT}/{release.id}",
            json=rest_utils.release_to_payload(release),
        )
        return SW360Release.from_json(body)

    def upload_attachment(
        self, release_id: str, file_name: str, content: bytes, attachment_type: str
    ) -> None:
        attachment = {"filename": file_name, "attachmentType": attachment_type}
        self._request(
            "POST",
            f"{RELEASES_ENDPOINT}/{release_id}/attachments",
            files={
                "file": (file_name, content),
                "attachment": (None, json.dumps(attachment), "application/json"),
            },
        )

    def search_projects(self, name: str) -> list[SW360Project]:
        body = self._request("GET", PROJECTS_ENDPOINT, params={"name": name})
        return [
            SW360Project.from_json(resource)
            for resource in get_embedded(body, "sw360:projects")
        ]

    def create_project(self, project: SW360Project) -> SW360Project:
        body = self._request(
            "POST", PROJECTS_ENDPOINT, json=rest_utils.project_to_payload(project)
        )
        return SW360Project.from_json(body)

    def link_releases(self, project_id: str, release_ids: list[str]) -> None:
        release_urls = [
            f"{self.rest_url}/{RELEASES_ENDPOINT}/{release_id}" for release_id in release_ids
        ]
        self._request(
            "POST", f"{PROJECTS_ENDPOINT}/{project_id}/releases", json=release_urls
        )
