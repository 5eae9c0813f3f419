# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Facts are the typed pieces of metadata an artifact accumulates.

Every fact belongs to exactly one ``FactKind``. An artifact keeps a single
fact per kind: kinds listed in ``MERGE_RULES`` combine the existing and the
incoming value, every other kind is overwritten by the last writer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, ClassVar

from antenna.model.coordinates import Coordinate, CoordinateType
from antenna.model.license_information import (
    EmptyLicense,
    LicenseInformation,
    merge_license_information,
)


class FactKind(Enum):
    COORDINATES = "coordinates"
    FILENAME = "filename"
    COPYRIGHT = "copyright"
    DECLARED_LICENSE = "declared_license"
    OBSERVED_LICENSE = "observed_license"
    CONFIGURED_LICENSE = "configured_license"
    MATCHING_METADATA = "matching_metadata"
    MODIFICATION_STATUS = "modification_status"
    SOURCE_URL = "source_url"
    HOMEPAGE = "homepage"
    RELEASE_TAG_URL = "release_tag_url"
    SOFTWARE_HERITAGE_ID = "software_heritage_id"
    CLEARING_STATE = "clearing_state"
    CPE = "cpe"
    FILE = "file"
    SOURCE_FILE = "source_file"


class MatchState(Enum):
    EXACT = "EXACT"
    SIMILAR = "SIMILAR"
    UNKNOWN = "UNKNOWN"


class ArtifactFact:
    kind: ClassVar[FactKind]

    def is_empty(self) -> bool:
        return False


@dataclass(frozen=True)
class ArtifactCoordinates(ArtifactFact):
    kind: ClassVar[FactKind] = FactKind.COORDINATES

    coordinates: frozenset[Coordinate] = frozenset()

    def __init__(self, *coordinates: Coordinate) -> None:
        # keep a single coordinate per type, later arguments win
        by_type: dict[CoordinateType, Coordinate] = {}
        for coordinate in coordinates:
            by_type[coordinate.type] = coordinate
        object.__setattr__(self, "coordinates", frozenset(by_type.values()))

    def get_coordinate_for_type(self, coordinate_type: CoordinateType) -> Coordinate | None:
        return next(
            (c for c in self.coordinates if c.type == coordinate_type),
            None,
        )

    def merge_with(self, other: "ArtifactCoordinates") -> "ArtifactCoordinates":
        # one coordinate per type, the incoming coordinate wins on a shared type
        return ArtifactCoordinates(*self.coordinates, *other.coordinates)

    def is_empty(self) -> bool:
        return not self.coordinates


@dataclass(frozen=True)
class ArtifactFilenameEntry:
    filename: str | None
    hash: str | None = None
    hash_algorithm: str | None = None


@dataclass(frozen=True)
class ArtifactFilename(ArtifactFact):
    kind: ClassVar[FactKind] = FactKind.FILENAME

    entries: tuple[ArtifactFilenameEntry, ...] = ()

    @classmethod
    def of(
        cls,
        filename: str | None,
        file_hash: str | None = None,
        hash_algorithm: str | None = None,
    ) -> "ArtifactFilename":
        return cls((ArtifactFilenameEntry(filename, file_hash, hash_algorithm),))

    def get_best_filename_guess(self) -> ArtifactFilenameEntry | None:
        return next((entry for entry in self.entries if entry.filename), None)

    def get_hashes(self) -> list[str]:
        return [entry.hash for entry in self.entries if entry.hash]

    def is_empty(self) -> bool:
        return self.get_best_filename_guess() is None and not self.get_hashes()


@dataclass(frozen=True)
class CopyrightStatement(ArtifactFact):
    kind: ClassVar[FactKind] = FactKind.COPYRIGHT

    statement: str | None

    def get_statements(self) -> list[str]:
        if not self.statement:
            return []
        return [line.strip() for line in self.statement.splitlines() if line.strip()]

    def merge_with(self, other: "CopyrightStatement") -> "CopyrightStatement":
        statements: list[str] = []
        for statement in self.get_statements() + other.get_statements():
            if statement not in statements:
                statements.append(statement)
        return CopyrightStatement("\n".join(statements))

    def is_empty(self) -> bool:
        return not self.get_statements()


@dataclass(frozen=True)
class _LicenseFact(ArtifactFact):
    license_information: LicenseInformation = field(default_factory=EmptyLicense)

    def is_empty(self) -> bool:
        return self.license_information.is_empty()


@dataclass(frozen=True)
class DeclaredLicenseInformation(_LicenseFact):
    kind: ClassVar[FactKind] = FactKind.DECLARED_LICENSE


@dataclass(frozen=True)
class ObservedLicenseInformation(_LicenseFact):
    kind: ClassVar[FactKind] = FactKind.OBSERVED_LICENSE


@dataclass(frozen=True)
class ConfiguredLicenseInformation(_LicenseFact):
    kind: ClassVar[FactKind] = FactKind.CONFIGURED_LICENSE


@dataclass(frozen=True)
class ArtifactMatchingMetadata(ArtifactFact):
    kind: ClassVar[FactKind] = FactKind.MATCHING_METADATA

    match_state: MatchState = MatchState.UNKNOWN


@dataclass(frozen=True)
class _TextFact(ArtifactFact):
    value: str | None

    def is_empty(self) -> bool:
        return not self.value


@dataclass(frozen=True)
class ArtifactModificationStatus(_TextFact):
    kind: ClassVar[FactKind] = FactKind.MODIFICATION_STATUS


@dataclass(frozen=True)
class ArtifactSourceUrl(_TextFact):
    kind: ClassVar[FactKind] = FactKind.SOURCE_URL


@dataclass(frozen=True)
class ArtifactHomepage(_TextFact):
    kind: ClassVar[FactKind] = FactKind.HOMEPAGE


@dataclass(frozen=True)
class ArtifactReleaseTagUrl(_TextFact):
    kind: ClassVar[FactKind] = FactKind.RELEASE_TAG_URL


@dataclass(frozen=True)
class ArtifactSoftwareHeritageId(_TextFact):
    kind: ClassVar[FactKind] = FactKind.SOFTWARE_HERITAGE_ID


@dataclass(frozen=True)
class ArtifactClearingState(_TextFact):
    kind: ClassVar[FactKind] = FactKind.CLEARING_STATE


@dataclass(frozen=True)
class ArtifactCpe(_TextFact):
    kind: ClassVar[FactKind] = FactKind.CPE


@dataclass(frozen=True)
class ArtifactFile(_TextFact):
    """Local path of the binary artifact."""

    kind: ClassVar[FactKind] = FactKind.FILE


@dataclass(frozen=True)
class ArtifactSourceFile(_TextFact):
    """Local path of the source archive of the artifact."""

    kind: ClassVar[FactKind] = FactKind.SOURCE_FILE


def _mismatch(existing: ArtifactFact, other: ArtifactFact) -> TypeError:
    return TypeError(
        f"Cannot merge {type(other).__name__} into {type(existing).__name__}"
    )


def _merge_coordinates(existing: ArtifactFact, other: ArtifactFact) -> ArtifactFact:
    if not isinstance(existing, ArtifactCoordinates) or not isinstance(
        other, ArtifactCoordinates
    ):
        raise _mismatch(existing, other)
    return existing.merge_with(other)


def _merge_copyrights(existing: ArtifactFact, other: ArtifactFact) -> ArtifactFact:
    if not isinstance(existing, CopyrightStatement) or not isinstance(
        other, CopyrightStatement
    ):
        raise _mismatch(existing, other)
    return existing.merge_with(other)


def _merge_licenses(existing: ArtifactFact, other: ArtifactFact) -> ArtifactFact:
    if not isinstance(existing, _LicenseFact) or not isinstance(other, _LicenseFact):
        raise _mismatch(existing, other)
    merged = merge_license_information(
        existing.license_information, other.license_information
    )
    return type(other)(merged)


MERGE_RULES: dict[FactKind, Callable[[ArtifactFact, ArtifactFact], ArtifactFact]] = {
    FactKind.COORDINATES: _merge_coordinates,
    FactKind.COPYRIGHT: _merge_copyrights,
    FactKind.DECLARED_LICENSE: _merge_licenses,
    FactKind.OBSERVED_LICENSE: _merge_licenses,
    FactKind.CONFIGURED_LICENSE: _merge_licenses,
}


def merge_facts(existing: ArtifactFact | None, other: ArtifactFact) -> ArtifactFact:
    if existing is None:
        return other
    rule = MERGE_RULES.get(other.kind)
    if rule is None:
        return other
    return rule(existing, other)
