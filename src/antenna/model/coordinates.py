# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Typed identifiers of an artifact in one of the supported ecosystems."""

from dataclasses import dataclass
from enum import Enum

from packageurl import PackageURL


class CoordinateType(Enum):
    MAVEN = "maven"
    P2 = "p2"  # OSGi bundles
    NPM = "npm"
    NUGET = "nuget"
    GENERIC = "generic"


@dataclass(frozen=True)
class Coordinate:
    type: CoordinateType
    namespace: str | None
    name: str | None
    version: str | None

    def to_purl(self) -> PackageURL:
        return PackageURL(
            type=self.type.value,
            namespace=self.namespace or None,
            name=self.name or "",
            version=self.version or None,
        )

    def to_purl_string(self) -> str:
        return self.to_purl().to_string()

    def to_string(self) -> str:
        parts = [self.namespace, self.name, self.version]
        return ":".join(part for part in parts if part)

    def __str__(self) -> str:
        return self.to_string()


def maven_coordinate(group_id: str | None, artifact_id: str | None, version: str | None) -> Coordinate:
    return Coordinate(CoordinateType.MAVEN, group_id, artifact_id, version)


def bundle_coordinate(symbolic_name: str | None, bundle_version: str | None) -> Coordinate:
    return Coordinate(CoordinateType.P2, None, symbolic_name, bundle_version)


def npm_coordinate(name: str | None, version: str | None) -> Coordinate:
    # scoped packages keep their scope as namespace, e.g. @types/node
    if name and name.startswith("@") and "/" in name:
        scope, package_name = name.split("/", 1)
        return Coordinate(CoordinateType.NPM, scope, package_name, version)
    return Coordinate(CoordinateType.NPM, None, name, version)


def nuget_coordinate(package_id: str | None, version: str | None) -> Coordinate:
    return Coordinate(CoordinateType.NUGET, None, package_id, version)


def generic_coordinate(name: str | None, version: str | None) -> Coordinate:
    return Coordinate(CoordinateType.GENERIC, None, name, version)


def coordinate_for_type(
    coordinate_type: CoordinateType,
    namespace: str | None,
    name: str | None,
    version: str | None,
) -> Coordinate:
    """Build a coordinate from loosely typed input such as a CSV row.

    Only Maven coordinates carry a namespace; for npm it is folded back into
    the package name.
    """
    if coordinate_type == CoordinateType.MAVEN:
        return maven_coordinate(namespace, name, version)
    if coordinate_type == CoordinateType.P2:
        return bundle_coordinate(name, version)
    if coordinate_type == CoordinateType.NPM:
        if namespace and name:
            return npm_coordinate(f"{namespace}/{name}", version)
        return npm_coordinate(name, version)
    if coordinate_type == CoordinateType.NUGET:
        return nuget_coordinate(name, version)
    return generic_coordinate(name, version)
