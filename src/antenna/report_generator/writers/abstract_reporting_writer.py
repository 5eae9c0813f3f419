# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from abc import ABC, abstractmethod

from antenna.model.artifact import Artifact


class ReportingWriter(ABC):
    @abstractmethod
    def write(self, artifacts: list[Artifact]) -> str:
        raise NotImplementedError
