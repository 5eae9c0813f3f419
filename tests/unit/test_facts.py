# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import pytest

from antenna.model.coordinates import (
    CoordinateType,
    bundle_coordinate,
    maven_coordinate,
)
from antenna.model.facts import (
    MERGE_RULES,
    ArtifactCoordinates,
    ArtifactFilename,
    ArtifactHomepage,
    CopyrightStatement,
    DeclaredLicenseInformation,
    FactKind,
    ObservedLicenseInformation,
    merge_facts,
)
from antenna.model.license_information import EmptyLicense, License


def test_coordinates_keep_one_coordinate_per_type() -> None:
    fact = ArtifactCoordinates(
        maven_coordinate("org.x", "y", "1"),
        bundle_coordinate("org.x.y", "1.0.0"),
        maven_coordinate("org.x", "y", "2"),
    )

    assert len(fact.coordinates) == 2
    assert fact.get_coordinate_for_type(CoordinateType.MAVEN) == maven_coordinate(
        "org.x", "y", "2"
    )
    assert fact.get_coordinate_for_type(CoordinateType.NPM) is None


def test_empty_coordinates() -> None:
    assert ArtifactCoordinates().is_empty()
    assert not ArtifactCoordinates(maven_coordinate("a", "b", "1")).is_empty()


def test_filename_best_guess_and_hashes() -> None:
    fact = ArtifactFilename.of("lib-1.0.jar", "abc123", "SHA-1")

    entry = fact.get_best_filename_guess()
    assert entry is not None
    assert entry.filename == "lib-1.0.jar"
    assert entry.hash_algorithm == "SHA-1"
    assert fact.get_hashes() == ["abc123"]
    assert not fact.is_empty()
    assert ArtifactFilename.of(None).is_empty()


def test_copyright_statement_splits_lines() -> None:
    fact = CopyrightStatement("Copyright A\n\n  Copyright B  ")

    assert fact.get_statements() == ["Copyright A", "Copyright B"]
    assert CopyrightStatement(None).is_empty()
    assert CopyrightStatement(" \n ").is_empty()


def test_copyright_merge_deduplicates() -> None:
    merged = CopyrightStatement("Copyright A\nCopyright B").merge_with(
        CopyrightStatement("Copyright B\nCopyright C")
    )

    assert merged.statement == "Copyright A\nCopyright B\nCopyright C"


def test_merge_rules_cover_mergeable_kinds() -> None:
    assert set(MERGE_RULES) == {
        FactKind.COORDINATES,
        FactKind.COPYRIGHT,
        FactKind.DECLARED_LICENSE,
        FactKind.OBSERVED_LICENSE,
        FactKind.CONFIGURED_LICENSE,
    }


def test_merge_facts_without_existing_value() -> None:
    fact = ArtifactHomepage("https://example.com")

    assert merge_facts(None, fact) is fact


def test_merge_facts_last_writer_wins() -> None:
    merged = merge_facts(
        ArtifactHomepage("https://old.example.com"),
        ArtifactHomepage("https://new.example.com"),
    )

    assert merged == ArtifactHomepage("https://new.example.com")


def test_merge_facts_merges_copyrights() -> None:
    merged = merge_facts(CopyrightStatement("A"), CopyrightStatement("B"))

    assert isinstance(merged, CopyrightStatement)
    assert merged.get_statements() == ["A", "B"]


def test_merge_facts_merges_licenses() -> None:
    merged = merge_facts(
        DeclaredLicenseInformation(License("MIT")),
        DeclaredLicenseInformation(License("Apache-2.0")),
    )

    assert isinstance(merged, DeclaredLicenseInformation)
    assert merged.license_information.evaluate() == "MIT AND Apache-2.0"


def test_license_fact_is_empty() -> None:
    assert ObservedLicenseInformation(EmptyLicense()).is_empty()
    assert ObservedLicenseInformation().is_empty()
    assert not ObservedLicenseInformation(License("MIT")).is_empty()


def test_merge_facts_unions_coordinates_per_type() -> None:
    bundle = bundle_coordinate("org.x.y", "1.0.0")
    newer_maven = maven_coordinate("org.x", "y", "2")

    merged = merge_facts(
        ArtifactCoordinates(maven_coordinate("org.x", "y", "1"), bundle),
        ArtifactCoordinates(newer_maven),
    )

    assert isinstance(merged, ArtifactCoordinates)
    assert merged.coordinates == frozenset({newer_maven, bundle})


def test_merge_facts_rejects_mismatched_fact_types() -> None:
    with pytest.raises(TypeError, match="Cannot merge"):
        merge_facts(
            CopyrightStatement("A"),
            DeclaredLicenseInformation(License("MIT")),
        )
