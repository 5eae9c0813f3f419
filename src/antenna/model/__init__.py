# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from antenna.model.artifact import Artifact
from antenna.model.facts import FactKind, MatchState

__all__ = ["Artifact", "FactKind", "MatchState"]
