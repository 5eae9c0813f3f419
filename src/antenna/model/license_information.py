# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""License expression trees attached to artifacts.

A license information is either a single ``License``, an ``AND``/``OR``
``LicenseStatement`` over other license information, or ``EmptyLicense``.
Expression strings are parsed with the ``license-expression`` library.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from license_expression import ExpressionError, Licensing

logger = logging.getLogger(__name__)

_licensing = Licensing()


class LicenseInformation(ABC):
    @abstractmethod
    def get_licenses(self) -> list["License"]:
        raise NotImplementedError

    @abstractmethod
    def evaluate(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def evaluate_long(self) -> str | None:
        raise NotImplementedError

    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class EmptyLicense(LicenseInformation):
    def get_licenses(self) -> list["License"]:
        return []

    def evaluate(self) -> str:
        return ""

    def evaluate_long(self) -> str | None:
        return None

    def is_empty(self) -> bool:
        return True


@dataclass(frozen=True)
class License(LicenseInformation):
    license_id: str
    long_name: str | None = None
    text: str | None = None

    def get_licenses(self) -> list["License"]:
        return [self] if not self.is_empty() else []

    def evaluate(self) -> str:
        return self.license_id

    def evaluate_long(self) -> str | None:
        return self.long_name

    def is_empty(self) -> bool:
        return not self.license_id or not self.license_id.strip()


class LicenseOperator(Enum):
    AND = "AND"
    OR = "OR"


@dataclass(frozen=True)
class LicenseStatement(LicenseInformation):
    operator: LicenseOperator
    elements: tuple[LicenseInformation, ...]

    def _non_empty_elements(self) -> list[LicenseInformation]:
        return [element for element in self.elements if not element.is_empty()]

    def get_licenses(self) -> list["License"]:
        licenses: list[License] = []
        for element in self._non_empty_elements():
            licenses.extend(element.get_licenses())
        return licenses

    def _render(self, parts: list[str]) -> str:
        return f" {self.operator.value} ".join(parts)

    def _wrap(self, element: LicenseInformation, rendered: str) -> str:
        # nested statements with more than one operand need parentheses
        if (
            isinstance(element, LicenseStatement)
            and len(element._non_empty_elements()) > 1
        ):
            return f"({rendered})"
        return rendered

    def evaluate(self) -> str:
        return self._render(
            [
                self._wrap(element, element.evaluate())
                for element in self._non_empty_elements()
            ]
        )

    def evaluate_long(self) -> str | None:
        if not any(license.long_name for license in self.get_licenses()):
            return None
        parts = []
        for element in self._non_empty_elements():
            long_value = element.evaluate_long()
            parts.append(
                self._wrap(element, long_value if long_value else element.evaluate())
            )
        return self._render(parts)

    def is_empty(self) -> bool:
        return not self._non_empty_elements()


def _from_parsed_expression(node: object) -> LicenseInformation:
    if node is None:
        return EmptyLicense()
    if isinstance(node, _licensing.AND):
        return LicenseStatement(
            LicenseOperator.AND,
            tuple(_from_parsed_expression(arg) for arg in node.args),
        )
    if isinstance(node, _licensing.OR):
        return LicenseStatement(
            LicenseOperator.OR,
            tuple(_from_parsed_expression(arg) for arg in node.args),
        )
    # plain symbols and "X WITH exception" symbols render as a single id
    return License(str(node))


def parse_license_expression(expression: str | None) -> LicenseInformation:
    if expression is None or not expression.strip():
        return EmptyLicense()
    try:
        parsed = _licensing.parse(expression)
    except ExpressionError as e:
        logger.debug(
            f"Could not parse license expression '{expression}', using it verbatim: {e}"
        )
        return License(expression.strip())
    return _from_parsed_expression(parsed)


def map_licenses(licenses: Iterable[str]) -> LicenseInformation:
    """Map a collection of license expressions to a single AND statement."""
    parsed = [
        parse_license_expression(license)
        for license in licenses
        if license and license.strip()
    ]
    if not parsed:
        return EmptyLicense()
    if len(parsed) == 1:
        return parsed[0]
    return LicenseStatement(LicenseOperator.AND, tuple(parsed))


def _and_operands(license_information: LicenseInformation) -> list[LicenseInformation]:
    if (
        isinstance(license_information, LicenseStatement)
        and license_information.operator == LicenseOperator.AND
    ):
        return license_information._non_empty_elements()
    return [license_information]


def merge_license_information(
    existing: LicenseInformation, other: LicenseInformation
) -> LicenseInformation:
    """AND both trees, leaving out operands of ``other`` whose licenses are
    already part of ``existing``."""
    if existing.is_empty():
        return other
    if other.is_empty():
        return existing
    existing_ids = {license.license_id for license in existing.get_licenses()}
    other_ids = {license.license_id for license in other.get_licenses()}
    if other_ids <= existing_ids:
        return existing
    if existing_ids <= other_ids:
        return other

    operands = _and_operands(existing)
    known_ids = set(existing_ids)
    for operand in _and_operands(other):
        operand_ids = {license.license_id for license in operand.get_licenses()}
        if operand_ids <= known_ids:
            continue
        operands.append(operand)
        known_ids |= operand_ids
    return LicenseStatement(LicenseOperator.AND, tuple(operands))
