# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.


class AntennaException(Exception):
    """Base class of the errors raised by antenna."""


class AntennaExecutionException(AntennaException):
    """A workflow step or an external system it talks to failed."""
