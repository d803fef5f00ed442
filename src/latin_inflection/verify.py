"""Database verification for the word store.

This module checks that the stored words can still be declined: their flags
parse, their kinds are valid, every paradigm they need is in the 'forms'
table, and a handful of well-known words decline as expected through it.

Usage:
    from latin_inflection.verify import verify_database
    from latin_inflection.db import get_connection

    with get_connection(db_path) as conn:
        report = verify_database(conn, verbose=True)
        if not report.all_passed:
            sys.exit(1)
"""

from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import Connection, func, select, text

from latin_inflection.db.forms import DatabaseFormsCatalog
from latin_inflection.db.schema import forms, word_relations, words
from latin_inflection.db.store import word_from_row
from latin_inflection.enums import TABLE_GENDERS, Case, Category, Gender, Kind
from latin_inflection.errors import InflectionError
from latin_inflection.inflection import adjective_kinds, adjective_tables, noun_table, render
from latin_inflection.word import Word, word_from_mapping


@dataclass
class CheckResult:
    """Result of a single verification check."""

    name: str
    passed: bool
    message: str
    details: list[str] | None = None


@dataclass
class VerificationReport:
    """Complete verification report with all check results and metrics."""

    integrity_checks: list[CheckResult] = field(default_factory=lambda: list[CheckResult]())
    consistency_checks: list[CheckResult] = field(default_factory=lambda: list[CheckResult]())
    coverage_checks: list[CheckResult] = field(default_factory=lambda: list[CheckResult]())
    spot_checks: list[CheckResult] = field(default_factory=lambda: list[CheckResult]())
    metrics: dict[str, Any] = field(default_factory=lambda: dict[str, Any]())

    @property
    def all_checks(self) -> list[CheckResult]:
        return (
            self.integrity_checks
            + self.consistency_checks
            + self.coverage_checks
            + self.spot_checks
        )

    @property
    def all_passed(self) -> bool:
        """Return True if all checks passed."""
        return all(check.passed for check in self.all_checks)

    @property
    def failed_count(self) -> int:
        """Return the number of failed checks."""
        return sum(1 for check in self.all_checks if not check.passed)

    @property
    def total_count(self) -> int:
        """Return the total number of checks."""
        return len(self.all_checks)

    def summary(self, *, verbose: bool = False) -> str:
        """Generate a human-readable summary of the verification results."""
        lines: list[str] = []

        def format_checks(title: str, checks: list[CheckResult]) -> None:
            if not checks:
                return
            lines.append(f"\n{title}:")
            for check in checks:
                status = "\033[32m[PASS]\033[0m" if check.passed else "\033[31m[FAIL]\033[0m"
                lines.append(f"  {status} {check.message}")
                if verbose and check.details:
                    lines.extend(f"    - {d}" for d in check.details[:10])
                    if len(check.details) > 10:
                        lines.append(f"    ... and {len(check.details) - 10} more")

        format_checks("Integrity Checks", self.integrity_checks)
        format_checks("Consistency Checks", self.consistency_checks)
        format_checks("Coverage", self.coverage_checks)
        format_checks("Spot Checks", self.spot_checks)

        if self.metrics and verbose:
            lines.append("\nMetrics:")
            for key, value in self.metrics.items():
                if isinstance(value, float):
                    lines.append(f"  {key}: {value:.1f}%")
                else:
                    lines.append(f"  {key}: {value:,}")

        lines.append("")
        if self.all_passed:
            lines.append(f"Result: All {self.total_count} checks passed")
        else:
            lines.append(f"Result: FAILED ({self.failed_count} check(s) failed)")

        return "\n".join(lines)


# =============================================================================
# Integrity Checks
# =============================================================================


def check_orphaned_relations(conn: Connection) -> CheckResult:
    """Check that all relations reference existing words on both ends."""
    query = text("""
        SELECT r.id, r.source_id, r.destination_id
        FROM word_relations r
        LEFT JOIN words s ON r.source_id = s.id
        LEFT JOIN words d ON r.destination_id = d.id
        WHERE s.id IS NULL OR d.id IS NULL
    """)
    result = conn.execute(query).fetchall()

    if not result:
        return CheckResult(
            name="orphaned_relations",
            passed=True,
            message="No orphaned relations",
        )
    details = [f"relation {row[0]}: {row[1]} -> {row[2]}" for row in result[:10]]
    return CheckResult(
        name="orphaned_relations",
        passed=False,
        message=f"Orphaned relations: {len(result)} records without words",
        details=details,
    )


def check_forms_seeded(conn: Connection) -> CheckResult:
    """Check that the forms catalog has been loaded."""
    count = conn.execute(select(func.count()).select_from(forms)).scalar() or 0
    if count == 0:
        return CheckResult(
            name="forms_seeded",
            passed=False,
            message="Forms catalog is empty (run 'init')",
        )
    return CheckResult(
        name="forms_seeded",
        passed=True,
        message=f"Forms catalog: {count:,} rows",
    )


# =============================================================================
# Consistency Checks
# =============================================================================


def _load_words(conn: Connection) -> tuple[list[Word], list[str]]:
    loaded: list[Word] = []
    issues: list[str] = []
    for row in conn.execute(select(words).order_by(words.c.id)):
        try:
            loaded.append(word_from_row(row))
        except InflectionError as e:
            issues.append(f"{row.enunciated}: {e}")
    return loaded, issues


def check_word_records(conn: Connection) -> CheckResult:
    """Check that every stored word has valid flags and a kind fit for its declension."""
    _, issues = _load_words(conn)

    if not issues:
        return CheckResult(
            name="word_records",
            passed=True,
            message="All words load",
        )
    return CheckResult(
        name="word_records",
        passed=False,
        message=f"Invalid words: {len(issues)}",
        details=issues,
    )


def check_self_relations(conn: Connection) -> CheckResult:
    """Check that no word is related to itself."""
    query = select(words.c.enunciated, word_relations.c.kind).join(
        word_relations, words.c.id == word_relations.c.source_id
    ).where(word_relations.c.source_id == word_relations.c.destination_id)
    issues = [f"{row.enunciated} ({row.kind})" for row in conn.execute(query)]

    if not issues:
        return CheckResult(
            name="self_relations",
            passed=True,
            message="No self relations",
        )
    return CheckResult(
        name="self_relations",
        passed=False,
        message=f"Self relations: {len(issues)}",
        details=issues,
    )


# =============================================================================
# Coverage Checks
# =============================================================================


def required_paradigms(word: Word) -> set[tuple[Kind, Gender]]:
    """Return the (kind, gender) paradigms needed to decline `word`."""
    if word.kind is None or word.is_indeclinable:
        return set()

    if word.category == Category.NOUN:
        gender = Gender.MASCULINE if word.gender == Gender.MASCULINE_OR_FEMININE else word.gender
        return {(word.kind, gender)}
    if word.category == Category.ADJECTIVE:
        return set(zip(adjective_kinds(word), TABLE_GENDERS, strict=True))
    return set()


def check_catalog_coverage(conn: Connection) -> CheckResult:
    """Check that the forms catalog has rows for every paradigm a stored word needs."""
    available = {
        (row.kind, row.gender)
        for row in conn.execute(select(forms.c.kind, forms.c.gender).distinct())
    }

    stored, _ = _load_words(conn)
    issues: list[str] = []
    for word in stored:
        for kind, gender in sorted(required_paradigms(word)):
            if (kind.value, gender.value) not in available:
                issues.append(f"{word.enunciated}: no rows for {kind} ({gender})")

    if not issues:
        return CheckResult(
            name="catalog_coverage",
            passed=True,
            message=f"Paradigms available for {len(stored):,} words",
        )
    return CheckResult(
        name="catalog_coverage",
        passed=False,
        message=f"Missing paradigms: {len(issues)}",
        details=issues,
    )


# =============================================================================
# Spot Checks
# =============================================================================

# (word, case, gender (None for nouns), expected render)
SPOT_CHECKS: list[tuple[dict[str, Any], Case, Gender | None, str]] = [
    (
        {
            "enunciated": "rosa, rosae",
            "particle": "ros",
            "category": "noun",
            "declension": 1,
            "kind": "a",
            "gender": "feminine",
        },
        Case.ABLATIVE,
        None,
        "rosā, rosīs",
    ),
    (
        {
            "enunciated": "liber, librī",
            "particle": "liber",
            "category": "noun",
            "declension": 2,
            "kind": "er/ir",
            "gender": "masculine",
            "flags": {"contracted_root": True},
        },
        Case.GENITIVE,
        None,
        "librī, librōrum",
    ),
    (
        {
            "enunciated": "fīlius, fīliī",
            "particle": "fīli",
            "category": "noun",
            "declension": 2,
            "kind": "ius",
            "gender": "masculine",
            "flags": {"contracted_vocative": True},
        },
        Case.GENITIVE,
        None,
        "fīlī/fīliī, fīliōrum",
    ),
    (
        {
            "enunciated": "leō, leōnis",
            "particle": "leōn",
            "category": "noun",
            "declension": 3,
            "kind": "is",
            "gender": "masculine",
        },
        Case.NOMINATIVE,
        None,
        "leō, leōnēs",
    ),
    (
        {
            "enunciated": "diēs, diēī",
            "particle": "di",
            "category": "noun",
            "declension": 5,
            "kind": "ies",
            "gender": "masculine",
        },
        Case.GENITIVE,
        None,
        "diēī, diērum",
    ),
    (
        {
            "enunciated": "pulcher, pulchra, pulchrum",
            "particle": "pulcher",
            "category": "adjective",
            "declension": 2,
            "kind": "er/ir",
            "flags": {"contracted_root": True},
        },
        Case.NOMINATIVE,
        Gender.FEMININE,
        "pulchra, pulchrae",
    ),
    (
        {
            "enunciated": "ferōx, ferōcis",
            "particle": "ferōc",
            "category": "adjective",
            "declension": 3,
            "kind": "one",
        },
        Case.ACCUSATIVE,
        Gender.NEUTER,
        "ferōx, ferōcia",
    ),
]


def run_spot_checks(conn: Connection) -> list[CheckResult]:
    """Decline well-known words through the 'forms' table."""
    results: list[CheckResult] = []
    catalog = DatabaseFormsCatalog(conn)

    for data, case, gender, expected in SPOT_CHECKS:
        word = word_from_mapping(data)
        if gender is None:
            table = noun_table(word, catalog)
        else:
            table = adjective_tables(word, catalog).for_gender(gender)
        got = render(word, table[case])

        scope = case.value if gender is None else f"{case.value}, {gender.value}"
        if got != expected:
            results.append(
                CheckResult(
                    name=f"spot_{word.singular_nominative}",
                    passed=False,
                    message=f"{word.enunciated} ({scope}): '{got}' != '{expected}'",
                )
            )
        else:
            results.append(
                CheckResult(
                    name=f"spot_{word.singular_nominative}",
                    passed=True,
                    message=f"{word.enunciated} ({scope}): verified",
                )
            )

    return results


# =============================================================================
# Metrics Collection
# =============================================================================


def collect_metrics(conn: Connection) -> dict[str, Any]:
    """Collect informational metrics about the database."""
    metrics: dict[str, Any] = {}

    for category in (Category.NOUN, Category.ADJECTIVE):
        metrics[f"{category.value}s"] = (
            conn.execute(
                select(func.count()).select_from(words).where(words.c.category == category.value)
            ).scalar()
            or 0
        )

    metrics["relations"] = (
        conn.execute(select(func.count()).select_from(word_relations)).scalar() or 0
    )

    # % of words with at least one enabled flag or override block
    query = text("""
        SELECT CAST(SUM(CASE WHEN flags != '{}' THEN 1 ELSE 0 END) AS FLOAT) * 100 /
               COUNT(*)
        FROM words
    """)
    metrics["words_with_flags_pct"] = round(conn.execute(query).scalar() or 0, 1)

    return metrics


# =============================================================================
# Main Entry Point
# =============================================================================


def verify_database(conn: Connection, *, verbose: bool = False) -> VerificationReport:
    """Run all verification checks and return a complete report.

    Args:
        conn: SQLAlchemy database connection
        verbose: If True, collect additional metrics

    Returns:
        VerificationReport with all check results and optional metrics
    """
    report = VerificationReport()

    report.integrity_checks = [
        check_orphaned_relations(conn),
        check_forms_seeded(conn),
    ]

    report.consistency_checks = [
        check_word_records(conn),
        check_self_relations(conn),
    ]

    report.coverage_checks = [check_catalog_coverage(conn)]

    report.spot_checks = run_spot_checks(conn)

    if verbose:
        report.metrics = collect_metrics(conn)

    return report
