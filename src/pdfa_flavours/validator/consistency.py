"""
Taxonomy Consistency Validator
===============================
Checks the flavour enumerations against the invariants that keep the closed
set internally consistent: unique identifiers, correctly derived names and
only well-formed (standard, level) pairs.

Returns structured ValidationResult objects with pass/fail/warn per rule.

Example::

    from pdfa_flavours.validator.consistency import TaxonomyValidator

    result = TaxonomyValidator().validate()
    if not result.passed:
        for issue in result.issues:
            print(f"[{issue.severity}] {issue.rule_id}: {issue.message}")
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable

from ..models import specifications as specs
from ..models.flavour import IsoStandard, IsoStandardSeries, Level, PdfaFlavour

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------


class Severity(str, Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass
class ValidationIssue:
    rule_id: str
    severity: Severity
    message: str
    field: str | None = None


@dataclass
class ValidationResult:
    """Result of a consistency validation run."""
    passed: bool
    issues: list[ValidationIssue] = field(default_factory=list)
    rule_count: int = 0

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.WARNING]

    def __str__(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        return (
            f"[{status}] {self.rule_count} rule(s) "
            f"– {len(self.errors)} error(s), {len(self.warnings)} warning(s)"
        )


def _duplicates(values: Iterable[Any]) -> list[Any]:
    return [value for value, count in Counter(values).items() if count > 1]


# ---------------------------------------------------------------------------
# Taxonomy Validator
# ---------------------------------------------------------------------------


class TaxonomyValidator:
    """
    Validates the flavour taxonomy.

    Members are read through their attributes only, so any collection of
    objects shaped like the enumerations can be checked. By default the
    enumerations themselves are validated.

    Rules implemented:
    - TX-001  Series ids must be pairwise distinct
    - TX-002  Only the NONE series may use the sentinel id
    - TX-003  Standard ids must be pairwise distinct
    - TX-004  Standard id must be '<series name>-<part>:<year>'
    - TX-005  Standard name must be 'PDF/A-<part>'
    - TX-006  Level codes must be pairwise distinct
    - TX-007  Level full name must be 'level <code>'
    - TX-008  Flavour display must be '<standard> <level>'
    - TX-009  Flavour (standard, level) pairs must be pairwise distinct
    - TX-010  Flavour ids must be pairwise distinct
    - TX-011  Sentinel standards and levels only appear in the NONE flavour
    """

    # Rules checked per member by _check_standard, _check_level and _check_flavour
    STANDARD_RULES = ("TX-004", "TX-005")
    LEVEL_RULES = ("TX-007",)
    FLAVOUR_RULES = ("TX-008", "TX-011")

    def validate(
        self,
        *,
        series: Iterable[Any] | None = None,
        standards: Iterable[Any] | None = None,
        levels: Iterable[Any] | None = None,
        flavours: Iterable[Any] | None = None,
    ) -> ValidationResult:
        all_series = list(IsoStandardSeries if series is None else series)
        all_standards = list(IsoStandard if standards is None else standards)
        all_levels = list(Level if levels is None else levels)
        all_flavours = list(PdfaFlavour if flavours is None else flavours)

        issues: list[ValidationIssue] = []
        rules_run = 0

        def add(rule_id: str, sev: Severity, msg: str, fld: str | None = None) -> None:
            issues.append(ValidationIssue(rule_id, sev, msg, fld))

        # TX-001 Unique series ids
        rules_run += 1
        for dup in _duplicates(s.id for s in all_series):
            add("TX-001", Severity.ERROR, f"Series id {dup} is used more than once", "id")

        # TX-002 Sentinel series id
        rules_run += 1
        for s in all_series:
            is_none = s.name == "NONE"
            if is_none and s.id != specs.NONE_ID:
                add(
                    "TX-002",
                    Severity.ERROR,
                    f"NONE series must use sentinel id {specs.NONE_ID}, got {s.id}",
                    "id",
                )
            elif not is_none and s.id == specs.NONE_ID:
                add(
                    "TX-002",
                    Severity.ERROR,
                    f"Series {s.name} uses the reserved sentinel id {specs.NONE_ID}",
                    "id",
                )

        # TX-003 Unique standard ids
        rules_run += 1
        for dup in _duplicates(s.id for s in all_standards):
            add("TX-003", Severity.ERROR, f"Standard id '{dup}' is used more than once", "id")

        # TX-004 + TX-005 Standard derivations
        rules_run += len(self.STANDARD_RULES)
        for standard in all_standards:
            issues.extend(self._check_standard(standard))

        # TX-006 Unique level codes
        rules_run += 1
        for dup in _duplicates(lv.code for lv in all_levels):
            add("TX-006", Severity.ERROR, f"Level code '{dup}' is used more than once", "code")

        # TX-007 Level derivation
        rules_run += len(self.LEVEL_RULES)
        for level in all_levels:
            issues.extend(self._check_level(level))

        # TX-008 + TX-011 Per-flavour rules
        rules_run += len(self.FLAVOUR_RULES)
        for flavour in all_flavours:
            issues.extend(self._check_flavour(flavour))

        # TX-009 Unique pairs
        rules_run += 1
        pairs = Counter((f.standard.id, f.level.code) for f in all_flavours)
        for (std_id, code), count in pairs.items():
            if count > 1:
                add(
                    "TX-009",
                    Severity.ERROR,
                    f"{count} flavours share standard '{std_id}' and level '{code}'",
                    "level",
                )

        # TX-010 Unique flavour ids
        rules_run += 1
        for dup in _duplicates(f.flavour_id for f in all_flavours):
            add("TX-010", Severity.ERROR, f"Flavour id '{dup}' is used more than once", "flavour_id")

        passed = not any(i.severity == Severity.ERROR for i in issues)
        result = ValidationResult(passed=passed, issues=issues, rule_count=rules_run)
        for issue in result.errors:
            logger.warning("%s: %s", issue.rule_id, issue.message)
        logger.debug("Taxonomy validation: %s", result)
        return result

    def validate_flavour(self, flavour: Any) -> ValidationResult:
        """Run the per-member rules for a single flavour and its parts."""
        issues = (
            self._check_standard(flavour.standard)
            + self._check_level(flavour.level)
            + self._check_flavour(flavour)
        )
        rules_run = len(self.STANDARD_RULES) + len(self.LEVEL_RULES) + len(self.FLAVOUR_RULES)
        passed = not any(i.severity == Severity.ERROR for i in issues)
        return ValidationResult(passed=passed, issues=issues, rule_count=rules_run)

    # ------------------------------------------------------------------
    # Per-member rules
    # ------------------------------------------------------------------

    @staticmethod
    def _check_standard(standard: Any) -> list[ValidationIssue]:
        issues: list[ValidationIssue] = []
        expected_id = f"{standard.series.series_name}-{standard.part_number}:{standard.year}"
        if standard.id != expected_id:
            issues.append(ValidationIssue(
                "TX-004",
                Severity.ERROR,
                f"Standard {standard.name} id is '{standard.id}', expected '{expected_id}'",
                "id",
            ))
        expected_name = f"{specs.PDFA_STRING_PREFIX}{standard.part_number}"
        if standard.standard_name != expected_name:
            issues.append(ValidationIssue(
                "TX-005",
                Severity.ERROR,
                f"Standard {standard.name} name is '{standard.standard_name}', "
                f"expected '{expected_name}'",
                "standard_name",
            ))
        return issues

    @staticmethod
    def _check_level(level: Any) -> list[ValidationIssue]:
        expected = f"{specs.LEVEL_PREFIX}{level.code}"
        if level.full_name != expected:
            return [ValidationIssue(
                "TX-007",
                Severity.ERROR,
                f"Level {level.name} full name is '{level.full_name}', expected '{expected}'",
                "full_name",
            )]
        return []

    @staticmethod
    def _check_flavour(flavour: Any) -> list[ValidationIssue]:
        issues: list[ValidationIssue] = []
        expected = str(flavour.standard) + " " + str(flavour.level)
        if flavour.display != expected:
            issues.append(ValidationIssue(
                "TX-008",
                Severity.ERROR,
                f"Flavour {flavour.name} display is '{flavour.display}', expected '{expected}'",
                "display",
            ))

        is_none = flavour.name == "NONE"
        sentinel_standard = flavour.standard.name == "NONE"
        sentinel_level = flavour.level.name == "NONE"
        if is_none and not (sentinel_standard and sentinel_level):
            issues.append(ValidationIssue(
                "TX-011",
                Severity.ERROR,
                "NONE flavour must combine the NONE standard and the NONE level",
                "standard",
            ))
        elif not is_none and (sentinel_standard or sentinel_level):
            issues.append(ValidationIssue(
                "TX-011",
                Severity.ERROR,
                f"Flavour {flavour.name} refers to a sentinel standard or level",
                "level" if sentinel_level else "standard",
            ))
        return issues
