"""Tests for database verification system."""

import tempfile
from pathlib import Path

import pytest
from sqlalchemy import delete

from latin_inflection.db import (
    add_relation,
    dispose_engine,
    forms,
    get_connection,
    get_engine,
    init_db,
    insert_word,
    seed_forms,
    words,
)
from latin_inflection.enums import Gender, Kind, RelationKind
from latin_inflection.verify import (
    SPOT_CHECKS,
    CheckResult,
    VerificationReport,
    check_catalog_coverage,
    check_forms_seeded,
    check_orphaned_relations,
    check_self_relations,
    check_word_records,
    collect_metrics,
    required_paradigms,
    run_spot_checks,
    verify_database,
)
from latin_inflection.word import word_from_mapping

ROSA = {
    "enunciated": "rosa, rosae",
    "particle": "ros",
    "category": "noun",
    "declension": 1,
    "kind": "a",
    "gender": "feminine",
}

BONUS = {
    "enunciated": "bonus, bona, bonum",
    "particle": "bon",
    "category": "adjective",
    "declension": 2,
    "kind": "us",
}


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    try:
        engine = get_engine(db_path)
        init_db(engine)
        yield db_path
    finally:
        dispose_engine(db_path)
        db_path.unlink(missing_ok=True)


class TestCheckResult:
    """Tests for CheckResult dataclass."""

    def test_passed_check(self) -> None:
        result = CheckResult(
            name="test",
            passed=True,
            message="Test passed",
        )
        assert result.passed
        assert result.details is None

    def test_failed_check_with_details(self) -> None:
        result = CheckResult(
            name="test",
            passed=False,
            message="Test failed",
            details=["issue 1", "issue 2"],
        )
        assert not result.passed
        assert result.details is not None
        assert len(result.details) == 2


class TestVerificationReport:
    """Tests for VerificationReport dataclass."""

    def test_empty_report_passes(self) -> None:
        report = VerificationReport()
        assert report.all_passed
        assert report.failed_count == 0
        assert report.total_count == 0

    def test_counts_every_section(self) -> None:
        report = VerificationReport(
            integrity_checks=[CheckResult(name="a", passed=True, message="A")],
            consistency_checks=[CheckResult(name="b", passed=True, message="B")],
            coverage_checks=[CheckResult(name="c", passed=False, message="C")],
            spot_checks=[CheckResult(name="d", passed=True, message="D")],
        )
        assert not report.all_passed
        assert report.failed_count == 1
        assert report.total_count == 4

    def test_summary_output(self) -> None:
        report = VerificationReport(
            spot_checks=[
                CheckResult(name="a", passed=True, message="Test A"),
            ],
        )
        summary = report.summary()
        assert "Spot Checks:" in summary
        assert "\033[32m[PASS]\033[0m Test A" in summary
        assert "All 1 checks passed" in summary

    def test_summary_details_only_when_verbose(self) -> None:
        details = [f"issue {i}" for i in range(12)]
        report = VerificationReport(
            consistency_checks=[
                CheckResult(name="a", passed=False, message="Test A", details=details),
            ],
            metrics={"nouns": 1200, "words_with_flags_pct": 12.345},
        )

        summary = report.summary()
        assert "\033[31m[FAIL]\033[0m Test A" in summary
        assert "issue 0" not in summary
        assert "FAILED (1 check(s) failed)" in summary

        verbose = report.summary(verbose=True)
        assert "    - issue 9" in verbose
        assert "issue 10" not in verbose
        assert "... and 2 more" in verbose
        assert "nouns: 1,200" in verbose
        assert "words_with_flags_pct: 12.3%" in verbose


class TestIntegrityChecks:
    """Tests for integrity check functions."""

    def test_forms_not_seeded(self, temp_db: Path) -> None:
        with get_connection(temp_db) as conn:
            result = check_forms_seeded(conn)
        assert not result.passed
        assert "run 'init'" in result.message

    def test_forms_seeded(self, temp_db: Path) -> None:
        with get_connection(temp_db) as conn:
            count = seed_forms(conn)
            result = check_forms_seeded(conn)
        assert result.passed
        assert f"{count:,}" in result.message

    def test_no_orphaned_relations(self, temp_db: Path) -> None:
        with get_connection(temp_db) as conn:
            bonus = word_from_mapping(BONUS)
            bene = word_from_mapping(
                {"enunciated": "bene", "particle": "bene", "category": "adverb"}
            )
            insert_word(conn, bonus)
            insert_word(conn, bene)
            add_relation(conn, bonus, bene, RelationKind.ADVERB)

            result = check_orphaned_relations(conn)

        assert result.passed


class TestConsistencyChecks:
    """Tests for consistency check functions."""

    def test_word_records_clean(self, temp_db: Path) -> None:
        with get_connection(temp_db) as conn:
            insert_word(conn, word_from_mapping(ROSA))
            result = check_word_records(conn)
        assert result.passed

    def test_word_records_bad_flags(self, temp_db: Path) -> None:
        """Rows written behind the importer's back are reported, not raised."""
        with get_connection(temp_db) as conn:
            conn.execute(
                words.insert().values(
                    {**ROSA, "flags": {"sets": {"instrumental": {"singular": ["ā"]}}}}
                )
            )
            result = check_word_records(conn)

        assert not result.passed
        assert result.details is not None
        assert result.details[0].startswith("rosa, rosae: ")
        assert "instrumental" in result.details[0]

    def test_word_records_kind_outside_declension(self, temp_db: Path) -> None:
        with get_connection(temp_db) as conn:
            conn.execute(words.insert().values({**ROSA, "declension": 3}))
            result = check_word_records(conn)
        assert not result.passed

    def test_self_relation(self, temp_db: Path) -> None:
        with get_connection(temp_db) as conn:
            bonus = word_from_mapping(BONUS)
            insert_word(conn, bonus)
            assert check_self_relations(conn).passed

            add_relation(conn, bonus, bonus, RelationKind.ALTERNATIVE)
            result = check_self_relations(conn)

        assert not result.passed
        assert result.details == ["bonus, bona, bonum (alternative)"]


class TestCoverage:
    """Tests for forms catalog coverage."""

    def test_required_paradigms_noun(self) -> None:
        word = word_from_mapping(ROSA)
        assert required_paradigms(word) == {(Kind.A, Gender.FEMININE)}

    def test_required_paradigms_masculine_or_feminine(self) -> None:
        word = word_from_mapping(
            {
                "enunciated": "cīvis, cīvis",
                "particle": "cīv",
                "category": "noun",
                "declension": 3,
                "kind": "istem",
                "gender": "masculine_or_feminine",
            }
        )
        assert required_paradigms(word) == {(Kind.ISTEM, Gender.MASCULINE)}

    def test_required_paradigms_adjective(self) -> None:
        word = word_from_mapping(BONUS)
        assert required_paradigms(word) == {
            (Kind.US, Gender.MASCULINE),
            (Kind.A, Gender.FEMININE),
            (Kind.UM, Gender.NEUTER),
        }

    def test_required_paradigms_indeclinable(self) -> None:
        word = word_from_mapping(
            {
                "enunciated": "nihil",
                "particle": "nihil",
                "category": "noun",
                "declension": 6,
                "kind": "indeclinable",
                "gender": "neuter",
                "flags": {"indeclinable": True},
            }
        )
        assert required_paradigms(word) == set()

    def test_catalog_coverage(self, temp_db: Path) -> None:
        with get_connection(temp_db) as conn:
            seed_forms(conn)
            insert_word(conn, word_from_mapping(ROSA))
            insert_word(conn, word_from_mapping(BONUS))
            result = check_catalog_coverage(conn)

        assert result.passed
        assert "2 words" in result.message

    def test_catalog_coverage_missing_paradigm(self, temp_db: Path) -> None:
        with get_connection(temp_db) as conn:
            seed_forms(conn)
            conn.execute(delete(forms).where(forms.c.kind == "a"))
            insert_word(conn, word_from_mapping(ROSA))
            insert_word(conn, word_from_mapping(BONUS))
            result = check_catalog_coverage(conn)

        assert not result.passed
        assert result.details == [
            "rosa, rosae: no rows for a (feminine)",
            "bonus, bona, bonum: no rows for a (feminine)",
        ]


class TestSpotChecks:
    """Tests for spot checks through the 'forms' table."""

    def test_spot_checks_pass(self, temp_db: Path) -> None:
        with get_connection(temp_db) as conn:
            seed_forms(conn)
            results = run_spot_checks(conn)

        assert len(results) == len(SPOT_CHECKS)
        assert all(r.passed for r in results), [r.message for r in results if not r.passed]

    def test_spot_checks_fail_without_catalog(self, temp_db: Path) -> None:
        with get_connection(temp_db) as conn:
            results = run_spot_checks(conn)

        assert not any(r.passed for r in results)
        assert "rosa, rosae (ablative): ', ' != 'rosā, rosīs'" in [r.message for r in results]


class TestVerifyDatabase:
    """Tests for the main verify_database function."""

    def test_empty_database(self, temp_db: Path) -> None:
        """Without a forms catalog, the seeding and spot checks fail."""
        with get_connection(temp_db) as conn:
            report = verify_database(conn)

        assert not report.all_passed
        assert not report.integrity_checks[1].passed
        assert all(c.passed for c in report.consistency_checks)
        assert all(c.passed for c in report.coverage_checks)
        assert not any(c.passed for c in report.spot_checks)

    def test_with_verbose(self, temp_db: Path) -> None:
        with get_connection(temp_db) as conn:
            report = verify_database(conn, verbose=True)

        assert report.metrics == {
            "nouns": 0,
            "adjectives": 0,
            "relations": 0,
            "words_with_flags_pct": 0,
        }

    def test_full_verification(self, temp_db: Path) -> None:
        with get_connection(temp_db) as conn:
            seed_forms(conn)
            insert_word(conn, word_from_mapping(ROSA))
            insert_word(conn, word_from_mapping({**BONUS, "flags": {"compsup_prefix": True}}))

            report = verify_database(conn)
            metrics = collect_metrics(conn)

        assert report.all_passed
        assert metrics["nouns"] == 1
        assert metrics["adjectives"] == 1
        assert metrics["words_with_flags_pct"] == 50.0
