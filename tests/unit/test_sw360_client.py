# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from typing import Any

import pytest
import requests
from pytest_mock import MockerFixture

from antenna.exceptions import AntennaExecutionException
from antenna.sw360.client import SW360Client, get_embedded
from antenna.sw360.resources import SW360Component, SW360License, SW360Release


def _response(mocker: MockerFixture, status_code: int, body: Any = None) -> Any:
    response = mocker.Mock()
    response.status_code = status_code
    response.content = b"{}" if body is not None else b""
    response.json.return_value = body
    response.text = str(body)
    return response


@pytest.fixture
def client() -> SW360Client:
    return SW360Client("https://sw360.example.com/resource/api/", "secret")


def test_client_sends_bearer_token(client: SW360Client) -> None:
    assert client.session.headers["Authorization"] == "Bearer secret"
    assert client.rest_url == "https://sw360.example.com/resource/api"


def test_get_embedded() -> None:
    body = {"_embedded": {"sw360:components": [{"name": "a"}]}}

    assert get_embedded(body, "sw360:components") == [{"name": "a"}]
    assert get_embedded(body, "sw360:releases") == []
    assert get_embedded(None, "sw360:releases") == []


def test_get_license(client: SW360Client, mocker: MockerFixture) -> None:
    request = mocker.patch.object(
        client.session,
        "request",
        return_value=_response(mocker, 200, {"shortName": "MIT", "fullName": "MIT License"}),
    )

    license = client.get_license("MIT")

    assert license == SW360License("MIT", "MIT License")
    request.assert_called_once_with(
        "GET", "https://sw360.example.com/resource/api/licenses/MIT", timeout=60
    )


def test_get_missing_license(client: SW360Client, mocker: MockerFixture) -> None:
    mocker.patch.object(client.session, "request", return_value=_response(mocker, 404))

    assert client.get_license("Unknown") is None


def test_search_components(client: SW360Client, mocker: MockerFixture) -> None:
    body = {
        "_embedded": {
            "sw360:components": [
                {
                    "name": "org.x:y",
                    "_links": {"self": {"href": "https://sw360/api/components/c1"}},
                }
            ]
        }
    }
    request = mocker.patch.object(
        client.session, "request", return_value=_response(mocker, 200, body)
    )

    components = client.search_components("org.x:y")

    assert components == [SW360Component(name="org.x:y", id="c1")]
    request.assert_called_once_with(
        "GET",
        "https://sw360.example.com/resource/api/components",
        timeout=60,
        params={"name": "org.x:y"},
    )


def test_get_releases_of_component(client: SW360Client, mocker: MockerFixture) -> None:
    body = {
        "_embedded": {
            "sw360:releases": [
                {
                    "name": "org.x:y",
                    "version": "1.0",
                    "_links": {"self": {"href": "https://sw360/api/releases/r1"}},
                }
            ]
        }
    }
    mocker.patch.object(client.session, "request", return_value=_response(mocker, 200, body))

    releases = client.get_releases_of_component("c1")

    assert releases == [
        SW360Release(name="org.x:y", version="1.0", component_id="c1", id="r1")
    ]


def test_create_release_posts_payload(client: SW360Client, mocker: MockerFixture) -> None:
    request = mocker.patch.object(
        client.session,
        "request",
        return_value=_response(mocker, 201, {"name": "org.x:y", "version": "1.0", "id": "r1"}),
    )

    release = client.create_release(
        SW360Release(name="org.x:y", version="1.0", component_id="c1")
    )

    assert release.id == "r1"
    method, url = request.call_args.args
    assert (method, url) == ("POST", "https://sw360.example.com/resource/api/releases")
    assert request.call_args.kwargs["json"]["componentId"] == "c1"


def test_update_release_requires_id(client: SW360Client) -> None:
    with pytest.raises(AntennaExecutionException, match="has no id"):
        client.update_release(SW360Release(name="org.x:y", version="1.0"))


def test_link_releases(client: SW360Client, mocker: MockerFixture) -> None:
    request = mocker.patch.object(client.session, "request", return_value=_response(mocker, 201))

    client.link_releases("p1", ["r1", "r2"])

    request.assert_called_once_with(
        "POST",
        "https://sw360.example.com/resource/api/projects/p1/releases",
        timeout=60,
        json=[
            "https://sw360.example.com/resource/api/releases/r1",
            "https://sw360.example.com/resource/api/releases/r2",
        ],
    )


def test_error_status_raises(client: SW360Client, mocker: MockerFixture) -> None:
    mocker.patch.object(
        client.session, "request", return_value=_response(mocker, 500, {"error": "boom"})
    )

    with pytest.raises(AntennaExecutionException, match="status code 500"):
        client.search_projects("product")


def test_connection_error_raises(client: SW360Client, mocker: MockerFixture) -> None:
    mocker.patch.object(
        client.session, "request", side_effect=requests.ConnectionError("offline")
    )

    with pytest.raises(AntennaExecutionException, match="offline"):
        client.search_projects("product")
