# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from antenna.config.tool_configuration import ToolConfiguration
from antenna.model.artifact import Artifact
from antenna.model.configured_artifact_builder import ConfiguredArtifactBuilder
from antenna.workflow.workflow_step import Processor

logger = logging.getLogger(__name__)


class OverrideType(Enum):
    """
    Enum for different types of overrides.
    """

    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"


class OverrideTargetField(Enum):
    """
    Enum for different fields that can be matched for overrides.
    """

    COORDINATES = "coordinates"
    FILENAME = "filename"


@dataclass
class OverrideRule:
    """
    A class representing a rule for overriding artifacts.
    """

    override_type: OverrideType
    target: Dict[OverrideTargetField, str]
    replacement: ConfiguredArtifactBuilder | None

    def matches(self, artifact: Artifact) -> bool:
        if not self.target:
            return False
        return all(
            _target_value_matches(artifact, field, value)
            for field, value in self.target.items()
        )


def _target_value_matches(
    artifact: Artifact, field: OverrideTargetField, value: str
) -> bool:
    if field == OverrideTargetField.FILENAME:
        return artifact.get_filename() == value
    return any(
        coordinate.to_string() == value or coordinate.to_purl_string() == value
        for coordinate in artifact.get_coordinates()
    )


class OverrideProcessor(Processor):
    """
    A processor that adds, removes or replaces artifacts according to the
    override rules of the configuration.
    """

    name = "Overrides"
    workflow_step_order = 700

    def __init__(self, context: ToolConfiguration) -> None:
        super().__init__(context)
        self.override_rules = OverrideProcessor.json_to_override_rules(
            context.overrides
        )
        self.unused_rules = list(self.override_rules)

    def process(self, artifacts: list[Artifact]) -> list[Artifact]:
        updated_artifacts: list[Artifact] = []
        added_artifacts: list[Artifact] = []
        for artifact in artifacts:
            keep = True
            for rule in self.override_rules:
                if not rule.matches(artifact):
                    continue
                if rule in self.unused_rules:
                    self.unused_rules.remove(rule)
                logger.debug(f"Applying {rule.override_type.value} override on {artifact}")
                # apply the override based on the rule type
                if rule.override_type == OverrideType.ADD:
                    added_artifacts.append(self._replacement(rule).build())
                elif rule.override_type == OverrideType.REMOVE:
                    keep = False
                elif rule.override_type == OverrideType.REPLACE:
                    keep = False
                    added_artifacts.append(self._replacement(rule).build())
            if keep:
                updated_artifacts.append(artifact)

        for target in self.unused_targets():
            logger.warning(
                f"Override rule with target {_describe_target(target)} did not match any artifact"
            )
        return updated_artifacts + added_artifacts

    @staticmethod
    def _replacement(rule: OverrideRule) -> ConfiguredArtifactBuilder:
        if rule.replacement is None:
            raise ValueError(
                f"Replacement for {rule.override_type.value} should always be a dictionary."
            )
        return rule.replacement

    def unused_targets(self) -> list[dict[OverrideTargetField, str]]:
        return [rule.target for rule in self.unused_rules]

    @staticmethod
    def json_to_override_rules(json_obj: list[dict[str, Any]]) -> list[OverrideRule]:
        """
        Convert a JSON object to a list of OverrideRule objects.
        """
        override_rules = []
        for rule in json_obj:
            try:
                override_type = OverrideType(rule["override_type"])
            except (KeyError, ValueError):
                raise ValueError(
                    f"Override type must be one of {[t.value for t in OverrideType]}: {rule.get('override_type')}"
                )
            targets: Dict[OverrideTargetField, str] = {}
            for target in rule.get("target", {}):
                try:
                    match_field = OverrideTargetField(target)
                except ValueError:
                    raise ValueError(
                        f"Target field must be coordinates or filename: {target}"
                    )
                targets[match_field] = rule["target"][target]

            replacement_data = rule.get("replacement")
            # a REMOVE rule never carries a replacement
            if override_type == OverrideType.REMOVE and replacement_data:
                raise ValueError("Replacement for remove should always be empty.")
            if override_type != OverrideType.REMOVE and not replacement_data:
                raise ValueError(
                    "Replacement must be a dictionary for add or replace rules."
                )

            replacement = None
            if override_type != OverrideType.REMOVE:
                replacement = ConfiguredArtifactBuilder.from_json(replacement_data)
            override_rules.append(
                OverrideRule(
                    override_type=override_type,
                    target=targets,
                    replacement=replacement,
                )
            )
        return override_rules


def _describe_target(target: dict[OverrideTargetField, str]) -> str:
    return ", ".join(f"{field.value}={value}" for field, value in target.items())
