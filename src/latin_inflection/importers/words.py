"""Import words from a JSON Lines file.

One word per line, using the same fields as the 'words' table plus an
optional "related" object mapping a relation kind to enunciates:

    {"enunciated": "bonus, bona, bonum", "particle": "bon", "category": "adjective",
     "declension": 2, "kind": "us", "translation": {"en": "good"},
     "related": {"comparative": ["melior, melius"]}}

Relations are resolved after every word of the file has been stored, so
they can point to words appearing later in the file.
"""

import json
import logging
from pathlib import Path
from typing import Any

from sqlalchemy import Connection, select

from latin_inflection.db.schema import words
from latin_inflection.db.store import add_relation, find_by, insert_word
from latin_inflection.enums import RelationKind
from latin_inflection.errors import InflectionError
from latin_inflection.word import word_from_mapping

logger = logging.getLogger(__name__)


def _parse_related(value: Any, line_number: int) -> list[tuple[RelationKind, str]]:
    if value is None:
        return []
    if not isinstance(value, dict):
        logger.warning("Line %d: 'related' must be an object, ignoring it", line_number)
        return []

    pairs: list[tuple[RelationKind, str]] = []
    for kind_name, targets in value.items():
        try:
            kind = RelationKind(kind_name)
        except ValueError:
            logger.warning("Line %d: unknown relation kind %r", line_number, kind_name)
            continue
        if isinstance(targets, str):
            targets = [targets]
        if not isinstance(targets, list) or not all(isinstance(t, str) for t in targets):
            logger.warning("Line %d: '%s' must list enunciates", line_number, kind_name)
            continue
        pairs.extend((kind, target) for target in targets)
    return pairs


def import_words(conn: Connection, path: Path) -> dict[str, int]:
    """Import the words of a JSON Lines file into the word store.

    Words whose enunciated is already stored are skipped, as are malformed
    lines and invalid words (both logged with their line number).

    Args:
        conn: SQLAlchemy connection
        path: Path to the JSON Lines file

    Returns:
        Statistics dict with counts
    """
    stats: dict[str, int] = {
        "lines": 0,
        "inserted": 0,
        "existing": 0,
        "invalid": 0,
        "relations": 0,
        "relations_missing": 0,
    }

    known = set(conn.execute(select(words.c.enunciated)).scalars())
    pending: list[tuple[str, RelationKind, str]] = []

    with path.open(encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            stats["lines"] += 1

            try:
                data = json.loads(line)
            except json.JSONDecodeError as e:
                logger.warning("Line %d: malformed JSON (%s)", line_number, e)
                stats["invalid"] += 1
                continue
            if not isinstance(data, dict):
                logger.warning("Line %d: expected an object", line_number)
                stats["invalid"] += 1
                continue

            try:
                word = word_from_mapping(data)
            except InflectionError as e:
                logger.warning("Line %d: %s", line_number, e)
                stats["invalid"] += 1
                continue

            if word.enunciated in known:
                logger.debug("Line %d: '%s' already exists", line_number, word.enunciated)
                stats["existing"] += 1
                continue

            insert_word(conn, word)
            known.add(word.enunciated)
            stats["inserted"] += 1

            pending.extend(
                (word.enunciated, kind, target)
                for kind, target in _parse_related(data.get("related"), line_number)
            )

    for source_name, kind, target_name in pending:
        source = find_by(conn, source_name)
        target = find_by(conn, target_name)
        if source is None or target is None:
            logger.warning(
                "Cannot relate '%s' to '%s' (%s): word not found", source_name, target_name, kind
            )
            stats["relations_missing"] += 1
            continue
        add_relation(conn, source, target, kind)
        stats["relations"] += 1

    return stats
