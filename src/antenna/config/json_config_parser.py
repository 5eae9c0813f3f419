# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

import json
import logging
from typing import Any

from antenna.adaptors.os import get_directory_name, open_file
from antenna.config.cli_configs import default_config
from antenna.config.tool_configuration import (
    SW360Configuration,
    ToolConfiguration,
    WorkflowConfig,
    WorkflowStepConfig,
)

KNOWN_KEYS = {
    "project_name",
    "project_version",
    "target_directory",
    "encoding",
    "workflow",
    "add_artifacts",
    "overrides",
    "sw360",
}
WORKFLOW_STEP_GROUPS = ("analyzers", "processors", "generators")


class JsonConfigParser:
    """Parser for the JSON tool configuration files used by antenna."""

    @staticmethod
    def parse_workflow_steps(steps_json: Any, group: str) -> list[WorkflowStepConfig]:
        """Parse the steps of one workflow group.

        JSON format: [{"name": "CSV", "configuration": {"file_path": "a.csv"}, "deactivated": false}]

        Raises:
            ValueError: If a step is not an object, has no name or its configuration is not an object
        """
        if not isinstance(steps_json, list):
            raise ValueError(f"Workflow {group} must be a list of steps")
        steps = []
        for step in steps_json:
            if not isinstance(step, dict) or not step.get("name"):
                raise ValueError(f"Every workflow step in {group} needs a name: {step}")
            configuration = step.get("configuration") or {}
            if not isinstance(configuration, dict):
                raise ValueError(
                    f"Configuration of workflow step {step['name']} must be an object"
                )
            steps.append(
                WorkflowStepConfig(
                    name=step["name"],
                    configuration=configuration,
                    deactivated=bool(step.get("deactivated", False)),
                )
            )
        return steps

    @staticmethod
    def parse_workflow(workflow_json: Any) -> WorkflowConfig:
        if not isinstance(workflow_json, dict):
            raise ValueError("Workflow must be an object")
        unknown_groups = set(workflow_json) - set(WORKFLOW_STEP_GROUPS)
        if unknown_groups:
            raise ValueError(
                f"Unknown workflow groups: {sorted(unknown_groups)}. Valid groups: {list(WORKFLOW_STEP_GROUPS)}"
            )
        return WorkflowConfig(
            **{
                group: JsonConfigParser.parse_workflow_steps(
                    workflow_json.get(group, []), group
                )
                for group in WORKFLOW_STEP_GROUPS
            }
        )

    @staticmethod
    def parse_sw360(sw360_json: Any) -> SW360Configuration:
        if not isinstance(sw360_json, dict):
            raise ValueError("SW360 configuration must be an object")
        for key in ("rest_url", "token"):
            if not sw360_json.get(key):
                raise ValueError(f"SW360 configuration is missing '{key}'")
        return SW360Configuration(
            rest_url=sw360_json["rest_url"],
            token=sw360_json["token"],
            update_releases=bool(sw360_json.get("update_releases", False)),
            upload_sources=bool(sw360_json.get("upload_sources", False)),
        )

    @staticmethod
    def parse_tool_configuration(
        config_json: Any, base_dir: str = "."
    ) -> ToolConfiguration:
        if not isinstance(config_json, dict):
            raise ValueError("Tool configuration must be a JSON object")
        unknown_keys = set(config_json) - KNOWN_KEYS
        if unknown_keys:
            raise ValueError(
                f"Unknown configuration keys: {sorted(unknown_keys)}. Valid keys: {sorted(KNOWN_KEYS)}"
            )
        for key in ("add_artifacts", "overrides"):
            if not isinstance(config_json.get(key, []), list):
                raise ValueError(f"'{key}' must be a list")

        sw360 = None
        if config_json.get("sw360") is not None:
            sw360 = JsonConfigParser.parse_sw360(config_json["sw360"])
        return ToolConfiguration(
            project_name=config_json.get("project_name", ""),
            project_version=config_json.get("project_version", ""),
            base_dir=base_dir,
            target_directory=config_json.get(
                "target_directory", default_config.default_target_directory
            ),
            encoding=config_json.get("encoding", default_config.default_encoding),
            workflow=JsonConfigParser.parse_workflow(config_json.get("workflow", {})),
            add_artifacts=config_json.get("add_artifacts", []),
            overrides=config_json.get("overrides", []),
            sw360=sw360,
        )

    @staticmethod
    def load_tool_configuration(config_file_path: str) -> ToolConfiguration:
        """Load the tool configuration from a JSON file.

        Relative paths inside the configuration resolve against the directory
        of the configuration file.

        Args:
            config_file_path: Path to the JSON configuration file

        Returns:
            The parsed tool configuration

        Raises:
            FileNotFoundError: If the configuration file is not found
            json.JSONDecodeError: If the JSON file is invalid
            ValueError: If the configuration format is invalid
        """
        try:
            config_json = json.loads(open_file(config_file_path))
            return JsonConfigParser.parse_tool_configuration(
                config_json, get_directory_name(config_file_path)
            )
        except FileNotFoundError:
            logging.error(f"Configuration file not found: {config_file_path}")
            raise
        except json.JSONDecodeError:
            logging.error(f"Invalid JSON in configuration file: {config_file_path}")
            raise
        except Exception as e:
            logging.error(f"Error reading configuration file: {e}")
            raise
