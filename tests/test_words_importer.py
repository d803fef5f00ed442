"""Tests for the JSON Lines words importer."""

import json
import logging
import tempfile
from pathlib import Path
from typing import Any

import pytest
from sqlalchemy import func, select

from latin_inflection.db import (
    dispose_engine,
    find_by,
    get_connection,
    get_engine,
    init_db,
    select_related_words,
    word_relations,
)
from latin_inflection.enums import Kind, RelationKind
from latin_inflection.importers import import_words

SAMPLE_NOUN = {
    "enunciated": "rosa, rosae",
    "particle": "ros",
    "category": "noun",
    "declension": 1,
    "kind": "a",
    "gender": "feminine",
    "translation": {"en": "rose"},
}

SAMPLE_ADJECTIVE = {
    "enunciated": "bonus, bona, bonum",
    "particle": "bon",
    "category": "adjective",
    "declension": 2,
    "kind": "us",
    "translation": {"en": "good"},
    "related": {
        "comparative": ["melior, melius"],
        "superlative": "optimus, optima, optimum",
        "adverb": ["bene"],
    },
}

SAMPLE_RELATED = [
    {
        "enunciated": "melior, melius",
        "particle": "melior",
        "category": "adjective",
        "declension": 3,
        "kind": "onenonistem",
    },
    {
        "enunciated": "optimus, optima, optimum",
        "particle": "optim",
        "category": "adjective",
        "declension": 2,
        "kind": "us",
    },
    {"enunciated": "bene", "particle": "bene", "category": "adverb"},
]


def _create_test_jsonl(lines: list[Any]) -> Path:
    """Create a temporary JSONL file; strings are written verbatim."""
    with tempfile.NamedTemporaryFile(
        mode="w", suffix=".jsonl", delete=False, encoding="utf-8"
    ) as f:
        for line in lines:
            f.write((line if isinstance(line, str) else json.dumps(line)) + "\n")
        return Path(f.name)


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    try:
        init_db(get_engine(db_path))
        yield db_path
    finally:
        dispose_engine(db_path)
        db_path.unlink(missing_ok=True)


class TestWordsImporter:
    """Tests for importing words."""

    def test_imports_words(self, temp_db: Path) -> None:
        jsonl_path = _create_test_jsonl([SAMPLE_NOUN])

        try:
            with get_connection(temp_db) as conn:
                stats = import_words(conn, jsonl_path)

            assert stats["lines"] == 1
            assert stats["inserted"] == 1
            assert stats["invalid"] == 0

            with get_connection(temp_db) as conn:
                word = find_by(conn, "rosa, rosae")

            assert word is not None
            assert word.kind == Kind.A
            assert word.translation == {"en": "rose"}
        finally:
            jsonl_path.unlink()

    def test_skips_existing_words(self, temp_db: Path) -> None:
        jsonl_path = _create_test_jsonl([SAMPLE_NOUN])

        try:
            with get_connection(temp_db) as conn:
                import_words(conn, jsonl_path)
            with get_connection(temp_db) as conn:
                stats = import_words(conn, jsonl_path)

            assert stats["inserted"] == 0
            assert stats["existing"] == 1
        finally:
            jsonl_path.unlink()

    def test_duplicate_in_same_file(self, temp_db: Path) -> None:
        jsonl_path = _create_test_jsonl([SAMPLE_NOUN, SAMPLE_NOUN])

        try:
            with get_connection(temp_db) as conn:
                stats = import_words(conn, jsonl_path)

            assert stats["inserted"] == 1
            assert stats["existing"] == 1
        finally:
            jsonl_path.unlink()

    def test_invalid_lines(self, temp_db: Path, caplog: pytest.LogCaptureFixture) -> None:
        jsonl_path = _create_test_jsonl(
            [
                "{not json",
                '["a list"]',
                {**SAMPLE_NOUN, "enunciated": "terra, terrae", "kind": "us"},
                {**SAMPLE_NOUN, "flags": {"sets": {"instrumental": {"singular": ["ā"]}}}},
                "",
                SAMPLE_NOUN,
            ]
        )

        try:
            with caplog.at_level(logging.WARNING), get_connection(temp_db) as conn:
                stats = import_words(conn, jsonl_path)

            assert stats["lines"] == 5
            assert stats["invalid"] == 4
            assert stats["inserted"] == 1
            assert "Line 1: malformed JSON" in caplog.text
            assert "Line 2: expected an object" in caplog.text
            assert "Line 4: bad key 'instrumental' for a case" in caplog.text
        finally:
            jsonl_path.unlink()

    def test_imports_relations(self, temp_db: Path) -> None:
        """Relations may point to words later in the file."""
        jsonl_path = _create_test_jsonl([SAMPLE_ADJECTIVE, *SAMPLE_RELATED])

        try:
            with get_connection(temp_db) as conn:
                stats = import_words(conn, jsonl_path)

            assert stats["inserted"] == 4
            assert stats["relations"] == 3
            assert stats["relations_missing"] == 0

            with get_connection(temp_db) as conn:
                bonus = find_by(conn, "bonus, bona, bonum")
                assert bonus is not None
                related = select_related_words(conn, bonus)

            assert [w.enunciated for w in related[RelationKind.COMPARATIVE]] == [
                "melior, melius"
            ]
            assert [w.enunciated for w in related[RelationKind.SUPERLATIVE]] == [
                "optimus, optima, optimum"
            ]
            assert [w.enunciated for w in related[RelationKind.ADVERB]] == ["bene"]
        finally:
            jsonl_path.unlink()

    def test_missing_relation_target(self, temp_db: Path) -> None:
        jsonl_path = _create_test_jsonl([SAMPLE_ADJECTIVE])

        try:
            with get_connection(temp_db) as conn:
                stats = import_words(conn, jsonl_path)
                n_relations = conn.execute(
                    select(func.count()).select_from(word_relations)
                ).scalar()

            assert stats["inserted"] == 1
            assert stats["relations"] == 0
            assert stats["relations_missing"] == 3
            assert n_relations == 0
        finally:
            jsonl_path.unlink()

    def test_unknown_relation_kind(
        self, temp_db: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        entry = {**SAMPLE_ADJECTIVE, "related": {"antonym": ["malus, mala, malum"]}}
        jsonl_path = _create_test_jsonl([entry])

        try:
            with caplog.at_level(logging.WARNING), get_connection(temp_db) as conn:
                stats = import_words(conn, jsonl_path)

            assert stats["inserted"] == 1
            assert stats["relations"] == 0
            assert stats["relations_missing"] == 0
            assert "unknown relation kind 'antonym'" in caplog.text
        finally:
            jsonl_path.unlink()

    def test_malformed_fields_keep_other_words(
        self, temp_db: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A bad field only skips its own line."""
        lupus = {
            "enunciated": "lupus, lupī",
            "particle": "lup",
            "category": "noun",
            "declension": 2,
            "kind": "us",
            "gender": "masculine",
        }
        jsonl_path = _create_test_jsonl(
            [
                SAMPLE_NOUN,
                {**lupus, "translation": "wolf"},
                {**lupus, "regular": "false"},
                {**lupus, "locative": "yes"},
                {**lupus, "id": "12"},
            ]
        )

        try:
            with caplog.at_level(logging.WARNING), get_connection(temp_db) as conn:
                stats = import_words(conn, jsonl_path)

            assert stats["inserted"] == 1
            assert stats["invalid"] == 4
            assert "Line 2: 'translation' must map locales to text" in caplog.text
            assert "Line 3: 'regular' must be true or false" in caplog.text

            with get_connection(temp_db) as conn:
                assert find_by(conn, "rosa, rosae") is not None
                assert find_by(conn, "lupus, lupī") is None
        finally:
            jsonl_path.unlink()
