# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import json
import logging

import pytest

from antenna.config.tool_configuration import ToolConfiguration
from antenna.model.artifact import Artifact
from antenna.model.configured_artifact_builder import ConfiguredArtifactBuilder
from antenna.model.coordinates import maven_coordinate
from antenna.model.facts import ArtifactCoordinates, ArtifactFilename
from antenna.processors.override_processor import (
    OverrideProcessor,
    OverrideRule,
    OverrideTargetField,
    OverrideType,
)


def _artifact(artifact_id: str, filename: str | None = None) -> Artifact:
    artifact = Artifact("test").add_fact(
        ArtifactCoordinates(maven_coordinate("org.x", artifact_id, "1"))
    )
    if filename:
        artifact.add_fact(ArtifactFilename.of(filename))
    return artifact


def test_override_processor_json_to_rules() -> None:
    test_json = """[
        {
            "override_type": "add",
            "target": {"coordinates": "org.x:y:1", "filename": "y-1.jar"},
            "replacement": {
                "maven_coordinates": {"group_id": "org.x", "artifact_id": "z", "version": "1"},
                "declared_license": "MIT"
            }
        },
        {
            "override_type": "remove",
            "target": {"filename": "internal.jar"}
        },
        {
            "override_type": "replace",
            "target": {"coordinates": "pkg:maven/org.x/old@1"},
            "replacement": {"filename": "new.jar"}
        }
    ]"""

    rules = OverrideProcessor.json_to_override_rules(json.loads(test_json))

    assert rules == [
        OverrideRule(
            override_type=OverrideType.ADD,
            target={
                OverrideTargetField.COORDINATES: "org.x:y:1",
                OverrideTargetField.FILENAME: "y-1.jar",
            },
            replacement=ConfiguredArtifactBuilder(
                maven_coordinates={"group_id": "org.x", "artifact_id": "z", "version": "1"},
                declared_license="MIT",
            ),
        ),
        OverrideRule(
            override_type=OverrideType.REMOVE,
            target={OverrideTargetField.FILENAME: "internal.jar"},
            replacement=None,
        ),
        OverrideRule(
            override_type=OverrideType.REPLACE,
            target={OverrideTargetField.COORDINATES: "pkg:maven/org.x/old@1"},
            replacement=ConfiguredArtifactBuilder(filename="new.jar"),
        ),
    ]


@pytest.mark.parametrize(
    "rule, message",
    [
        ({"override_type": "merge", "target": {}}, "Override type must be one of"),
        (
            {"override_type": "remove", "target": {"origin": "x"}},
            "Target field must be coordinates or filename",
        ),
        (
            {"override_type": "remove", "target": {"filename": "x"}, "replacement": {"filename": "y"}},
            "Replacement for remove should always be empty",
        ),
        (
            {"override_type": "add", "target": {"filename": "x"}},
            "Replacement must be a dictionary",
        ),
    ],
)
def test_json_to_rules_rejects_invalid_rules(rule: dict, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        OverrideProcessor.json_to_override_rules([rule])


def test_rule_matches_on_every_target_field() -> None:
    rule = OverrideRule(
        override_type=OverrideType.REMOVE,
        target={
            OverrideTargetField.COORDINATES: "org.x:y:1",
            OverrideTargetField.FILENAME: "y-1.jar",
        },
        replacement=None,
    )

    assert rule.matches(_artifact("y", "y-1.jar"))
    assert not rule.matches(_artifact("y", "other.jar"))
    assert not rule.matches(_artifact("z", "y-1.jar"))


def test_rule_without_target_never_matches() -> None:
    rule = OverrideRule(OverrideType.REMOVE, target={}, replacement=None)

    assert not rule.matches(_artifact("y"))


def test_process_applies_rules() -> None:
    context = ToolConfiguration(
        overrides=[
            {"override_type": "remove", "target": {"coordinates": "org.x:a:1"}},
            {
                "override_type": "replace",
                "target": {"coordinates": "pkg:maven/org.x/b@1"},
                "replacement": {
                    "maven_coordinates": {"group_id": "org.x", "artifact_id": "b", "version": "2"}
                },
            },
            {
                "override_type": "add",
                "target": {"filename": "c.jar"},
                "replacement": {"filename": "c-extra.jar"},
            },
        ]
    )
    processor = OverrideProcessor(context)

    result = processor.process([_artifact("a"), _artifact("b"), _artifact("c", "c.jar")])

    assert [str(artifact) for artifact in result] == [
        "Artifact(org.x:c:1, source=test)",
        "Artifact(org.x:b:2, source=from configuration)",
        "Artifact(c-extra.jar, source=from configuration)",
    ]
    assert processor.unused_targets() == []


def test_process_reports_unused_rules(caplog: pytest.LogCaptureFixture) -> None:
    context = ToolConfiguration(
        overrides=[{"override_type": "remove", "target": {"filename": "missing.jar"}}]
    )
    processor = OverrideProcessor(context)

    with caplog.at_level(logging.WARNING):
        result = processor.process([_artifact("a")])

    assert len(result) == 1
    assert processor.unused_targets() == [{OverrideTargetField.FILENAME: "missing.jar"}]
    assert "filename=missing.jar did not match any artifact" in caplog.text
