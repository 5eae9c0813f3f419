# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from typing import Type, TypeVar

from antenna.model.coordinates import Coordinate, CoordinateType
from antenna.model.facts import (
    ArtifactCoordinates,
    ArtifactFact,
    ArtifactFile,
    ArtifactFilename,
    ArtifactMatchingMetadata,
    ArtifactSourceFile,
    FactKind,
    MatchState,
    merge_facts,
)

F = TypeVar("F", bound=ArtifactFact)

# preferred coordinate when an artifact has to be named by one of them
_MAIN_COORDINATE_ORDER = [
    CoordinateType.MAVEN,
    CoordinateType.NPM,
    CoordinateType.NUGET,
    CoordinateType.P2,
    CoordinateType.GENERIC,
]


class Artifact:
    """A dependency of the analyzed project and the facts known about it."""

    def __init__(self, analysis_source: str = "", proprietary: bool = False) -> None:
        self.analysis_source = analysis_source
        self.proprietary = proprietary
        self._facts: dict[FactKind, ArtifactFact] = {}

    def add_fact(self, fact: ArtifactFact) -> "Artifact":
        self._facts[fact.kind] = merge_facts(self._facts.get(fact.kind), fact)
        return self

    def ask_for(self, fact_class: Type[F]) -> F | None:
        fact = self._facts.get(fact_class.kind)
        if isinstance(fact, fact_class):
            return fact
        return None

    def get_fact(self, kind: FactKind) -> ArtifactFact | None:
        return self._facts.get(kind)

    def get_facts(self) -> list[ArtifactFact]:
        return list(self._facts.values())

    def set_proprietary(self, proprietary: bool) -> "Artifact":
        self.proprietary = proprietary
        return self

    def get_coordinates(self) -> set[Coordinate]:
        coordinates = self.ask_for(ArtifactCoordinates)
        if coordinates is None:
            return set()
        return set(coordinates.coordinates)

    def get_coordinate_for_type(self, coordinate_type: CoordinateType) -> Coordinate | None:
        coordinates = self.ask_for(ArtifactCoordinates)
        if coordinates is None:
            return None
        return coordinates.get_coordinate_for_type(coordinate_type)

    def get_main_coordinate(self) -> Coordinate | None:
        for coordinate_type in _MAIN_COORDINATE_ORDER:
            coordinate = self.get_coordinate_for_type(coordinate_type)
            if coordinate is not None:
                return coordinate
        return None

    def get_filename(self) -> str | None:
        filename = self.ask_for(ArtifactFilename)
        if filename is None:
            return None
        entry = filename.get_best_filename_guess()
        return entry.filename if entry is not None else None

    def get_file(self) -> str | None:
        file = self.ask_for(ArtifactFile)
        return file.value if file is not None else None

    def get_source_file(self) -> str | None:
        source_file = self.ask_for(ArtifactSourceFile)
        return source_file.value if source_file is not None else None

    def get_match_state(self) -> MatchState:
        matching_metadata = self.ask_for(ArtifactMatchingMetadata)
        if matching_metadata is None:
            return MatchState.UNKNOWN
        return matching_metadata.match_state

    def is_same_component(self, other: "Artifact") -> bool:
        return not self.get_coordinates().isdisjoint(other.get_coordinates())

    def merge_with(self, other: "Artifact") -> "Artifact":
        for fact in other.get_facts():
            self.add_fact(fact)
        self.proprietary = self.proprietary or other.proprietary
        return self

    def __str__(self) -> str:
        coordinate = self.get_main_coordinate()
        if coordinate is not None:
            identifier = coordinate.to_string()
        else:
            identifier = self.get_filename() or "unidentified artifact"
        return f"Artifact({identifier}, source={self.analysis_source})"

    def __repr__(self) -> str:
        return self.__str__()
