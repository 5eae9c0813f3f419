# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

from dataclasses import dataclass


@dataclass
class Config:
    preset_cautionary_licenses: list[str]
    default_encoding: str
    default_csv_delimiter: str
    default_target_directory: str
    default_maven_repository_url: str


default_config = Config(
    preset_cautionary_licenses=[
        "GPL",
        "EUPL",
        "AGPL",
    ],
    default_encoding="utf-8",
    default_csv_delimiter=",",
    default_target_directory="antenna",
    default_maven_repository_url="https://repo.maven.apache.org/maven2",
)
