# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from antenna.model.license_information import (
    EmptyLicense,
    License,
    LicenseOperator,
    LicenseStatement,
    map_licenses,
    merge_license_information,
    parse_license_expression,
)


def test_empty_license() -> None:
    empty = EmptyLicense()

    assert empty.is_empty()
    assert empty.evaluate() == ""
    assert empty.evaluate_long() is None
    assert empty.get_licenses() == []


def test_single_license() -> None:
    license = License("MIT", "MIT License")

    assert not license.is_empty()
    assert license.evaluate() == "MIT"
    assert license.evaluate_long() == "MIT License"
    assert license.get_licenses() == [license]


def test_blank_license_id_is_empty() -> None:
    assert License("  ").is_empty()
    assert License("  ").get_licenses() == []


def test_statement_evaluates_with_operator() -> None:
    statement = LicenseStatement(
        LicenseOperator.OR, (License("MIT"), License("Apache-2.0"))
    )

    assert statement.evaluate() == "MIT OR Apache-2.0"
    assert statement.get_licenses() == [License("MIT"), License("Apache-2.0")]


def test_nested_statement_is_parenthesized() -> None:
    statement = LicenseStatement(
        LicenseOperator.AND,
        (
            LicenseStatement(
                LicenseOperator.OR, (License("MIT"), License("Apache-2.0"))
            ),
            License("BSD-3-Clause"),
        ),
    )

    assert statement.evaluate() == "(MIT OR Apache-2.0) AND BSD-3-Clause"


def test_statement_skips_empty_elements() -> None:
    statement = LicenseStatement(
        LicenseOperator.AND, (EmptyLicense(), License("MIT"), License(""))
    )

    assert statement.evaluate() == "MIT"
    assert not statement.is_empty()
    assert LicenseStatement(LicenseOperator.AND, (EmptyLicense(),)).is_empty()


def test_statement_evaluate_long_falls_back_to_ids() -> None:
    with_long_name = LicenseStatement(
        LicenseOperator.AND,
        (License("MIT", "MIT License"), License("Apache-2.0")),
    )
    without_long_name = LicenseStatement(
        LicenseOperator.AND, (License("MIT"), License("Apache-2.0"))
    )

    assert with_long_name.evaluate_long() == "MIT License AND Apache-2.0"
    assert without_long_name.evaluate_long() is None


def test_parse_license_expression_single_id() -> None:
    assert parse_license_expression("Apache-2.0") == License("Apache-2.0")


def test_parse_license_expression_with_operators() -> None:
    parsed = parse_license_expression("MIT OR Apache-2.0")

    assert isinstance(parsed, LicenseStatement)
    assert parsed.operator == LicenseOperator.OR
    assert parsed.evaluate() == "MIT OR Apache-2.0"


def test_parse_license_expression_nested() -> None:
    parsed = parse_license_expression("(MIT OR Apache-2.0) AND BSD-3-Clause")

    assert parsed.evaluate() == "(MIT OR Apache-2.0) AND BSD-3-Clause"
    assert [license.license_id for license in parsed.get_licenses()] == [
        "MIT",
        "Apache-2.0",
        "BSD-3-Clause",
    ]


def test_parse_license_expression_empty_input() -> None:
    assert parse_license_expression(None) == EmptyLicense()
    assert parse_license_expression("   ") == EmptyLicense()


def test_map_licenses() -> None:
    assert map_licenses([]) == EmptyLicense()
    assert map_licenses(["", "MIT"]) == License("MIT")

    mapped = map_licenses(["MIT", "Apache-2.0"])
    assert mapped.evaluate() == "MIT AND Apache-2.0"


def test_merge_license_information_with_empty_side() -> None:
    mit = License("MIT")

    assert merge_license_information(EmptyLicense(), mit) == mit
    assert merge_license_information(mit, EmptyLicense()) == mit


def test_merge_license_information_keeps_superset() -> None:
    mit = License("MIT")
    both = LicenseStatement(LicenseOperator.AND, (License("MIT"), License("BSD")))

    assert merge_license_information(both, mit) == both
    assert merge_license_information(mit, both) == both


def test_merge_license_information_combines_distinct() -> None:
    merged = merge_license_information(License("MIT"), License("Apache-2.0"))

    assert merged.evaluate() == "MIT AND Apache-2.0"


def test_merge_license_information_deduplicates_overlapping_leaves() -> None:
    declared = parse_license_expression("MIT AND GPL-2.0")
    other = parse_license_expression("MIT AND BSD-3-Clause")

    merged = merge_license_information(declared, other)

    assert merged.evaluate() == "MIT AND GPL-2.0 AND BSD-3-Clause"
    assert [license.license_id for license in merged.get_licenses()] == [
        "MIT",
        "GPL-2.0",
        "BSD-3-Clause",
    ]
