"""Command-line interface for the Latin declension engine."""

import argparse
import logging
import sys
from pathlib import Path

from sqlalchemy import func, select

from latin_inflection.answers import blank_answer, expected_answer
from latin_inflection.config import Configuration, load_configuration
from latin_inflection.db import (
    DatabaseFormsCatalog,
    count_forms,
    find_by,
    get_connection,
    get_engine,
    init_db,
    seed_forms,
    select_enunciated,
    select_related_words,
    word_relations,
    words,
)
from latin_inflection.degrees import adverb, comparative, superlative
from latin_inflection.enums import TABLE_GENDERS, Category, RelationKind
from latin_inflection.errors import InflectionError
from latin_inflection.importers import import_words
from latin_inflection.inflection import (
    DeclensionTable,
    adjective_tables,
    inflection_lines,
    noun_table,
)
from latin_inflection.verify import verify_database
from latin_inflection.word import Word


def _database(args: argparse.Namespace, config: Configuration) -> Path:
    return Path(args.database) if args.database else config.database


def _require_database(db_path: Path) -> bool:
    if not db_path.exists():
        print(f"Error: Database not found: {db_path}", file=sys.stderr)
        print("Run 'init' first to create the database.", file=sys.stderr)
        return False
    return True


def cmd_init(args: argparse.Namespace) -> int:
    """Create the schema and load the forms catalog."""
    db_path = _database(args, args.config)

    print(f"Initializing database: {db_path}")
    init_db(get_engine(db_path))

    with get_connection(db_path) as conn:
        seeded = seed_forms(conn)

    print(f"Forms catalog: {seeded:,} rows")
    return 0


def cmd_import_words(args: argparse.Namespace) -> int:
    """Import words from a JSON Lines file."""
    input_path = Path(args.input)
    db_path = _database(args, args.config)

    if not input_path.exists():
        print(f"Error: Input file not found: {input_path}", file=sys.stderr)
        return 1

    init_db(get_engine(db_path))

    print(f"Importing from: {input_path}")
    with get_connection(db_path) as conn:
        if count_forms(conn) == 0:
            seed_forms(conn)
        stats = import_words(conn, input_path)

    print(f"  Lines:             {stats['lines']:,}")
    print(f"  Words inserted:    {stats['inserted']:,}")
    print(f"  Already existing:  {stats['existing']:,}")
    print(f"  Invalid:           {stats['invalid']:,}")
    print(f"  Relations:         {stats['relations']:,}")
    if stats["relations_missing"] > 0:
        print(f"  Missing relations: {stats['relations_missing']:,}")
    return 0


def _print_inflection(word: Word, args: argparse.Namespace, catalog: DatabaseFormsCatalog) -> None:
    lines = inflection_lines(word, args.config.case_order, catalog)
    if not lines:
        print(f"'{word.enunciated}' does not decline")
        return
    for line in lines:
        print(line)


def cmd_inflect(args: argparse.Namespace) -> int:
    """Print the declension of a stored word."""
    db_path = _database(args, args.config)
    if not _require_database(db_path):
        return 1

    try:
        with get_connection(db_path) as conn:
            word = find_by(conn, args.enunciated)
            if word is None:
                print(f"Error: Word not found: {args.enunciated}", file=sys.stderr)
                return 1
            _print_inflection(word, args, DatabaseFormsCatalog(conn))
    except InflectionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def _print_degrees(word: Word, related: dict[RelationKind, list[Word]]) -> None:
    if word.flags.is_set("notcomparable"):
        return
    print(f"Comparative:\t{comparative(word, related[RelationKind.COMPARATIVE])}")
    print(f"Superlative:\t{superlative(word, related[RelationKind.SUPERLATIVE])}")
    adv = adverb(word, related[RelationKind.ADVERB])
    if adv is not None:
        print(f"Adverb:\t\t{adv}")


def cmd_show(args: argparse.Namespace) -> int:
    """Print everything known about a stored word."""
    db_path = _database(args, args.config)
    if not _require_database(db_path):
        return 1

    try:
        with get_connection(db_path) as conn:
            word = find_by(conn, args.enunciated)
            if word is None:
                print(f"Error: Word not found: {args.enunciated}", file=sys.stderr)
                return 1
            related = select_related_words(conn, word)

            print(f"== {word.enunciated} ==")
            print()
            print(f"Category:\t{word.category}")
            if word.declension is not None:
                print(f"Declension:\t{word.declension.label}")
            if word.kind is not None:
                print(f"Kind:\t\t{word.kind.humanized}")
            if word.category == Category.NOUN:
                print(f"Gender:\t\t{word.gender.abbrev}")
            for locale, meaning in sorted(word.translation.items()):
                print(f"Meaning ({locale}):\t{meaning}")
            if flags := word.flags.enabled():
                print(f"Flags:\t\t{', '.join(flags)}")

            for kind in (RelationKind.ALTERNATIVE, RelationKind.GENDERED):
                if related[kind]:
                    names = "; ".join(w.enunciated for w in related[kind])
                    print(f"{kind.value.capitalize()}:\t{names}")

            if word.category == Category.ADJECTIVE:
                print()
                _print_degrees(word, related)

            if word.category.is_declinable and not word.is_indeclinable:
                print("\n== Inflection ==\n")
                _print_inflection(word, args, DatabaseFormsCatalog(conn))
    except InflectionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def cmd_answers(args: argparse.Namespace) -> int:
    """Print the answer sheet of a stored word, one sheet per gender for adjectives."""
    db_path = _database(args, args.config)
    if not _require_database(db_path):
        return 1

    case_order = args.config.case_order
    sheets: list[tuple[str | None, DeclensionTable]] = []
    try:
        with get_connection(db_path) as conn:
            word = find_by(conn, args.enunciated)
            if word is None:
                print(f"Error: Word not found: {args.enunciated}", file=sys.stderr)
                return 1
            if not word.category.is_declinable or word.is_indeclinable:
                print(f"'{word.enunciated}' does not decline")
                return 0

            catalog = DatabaseFormsCatalog(conn)
            if word.category == Category.NOUN:
                sheets.append((None, noun_table(word, catalog)))
            else:
                tables = adjective_tables(word, catalog)
                sheets += [(g.value, tables.for_gender(g)) for g in TABLE_GENDERS]
    except InflectionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for label, table in sheets:
        if args.blank:
            print(blank_answer(word, case_order, label))
        else:
            print(expected_answer(word, table, case_order, label))

    return 0


def cmd_ls(args: argparse.Namespace) -> int:
    """List stored words."""
    db_path = _database(args, args.config)
    if not _require_database(db_path):
        return 1

    with get_connection(db_path) as conn:
        for enunciated in select_enunciated(conn, args.filter):
            print(enunciated)

    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    """Verify database integrity and consistency."""
    db_path = _database(args, args.config)
    if not _require_database(db_path):
        return 1

    print(f"Database Verification: {db_path}")

    with get_connection(db_path) as conn:
        report = verify_database(conn, verbose=args.verbose)

    print(report.summary(verbose=args.verbose))

    return 0 if report.all_passed else 1


def cmd_stats(args: argparse.Namespace) -> int:
    """Print database statistics."""
    db_path = _database(args, args.config)
    if not _require_database(db_path):
        return 1

    with get_connection(db_path) as conn:
        total_words = conn.execute(select(func.count()).select_from(words)).scalar() or 0
        by_category = dict(
            conn.execute(
                select(words.c.category, func.count()).group_by(words.c.category)
            ).tuples()
        )
        n_relations = conn.execute(select(func.count()).select_from(word_relations)).scalar() or 0
        n_forms = count_forms(conn)

    n_nouns = by_category.get(Category.NOUN.value, 0)
    n_adjectives = by_category.get(Category.ADJECTIVE.value, 0)

    print(f"Database: {db_path}")
    print()
    print("Words:")
    print(f"  Total:      {total_words:,}")
    print(f"  Nouns:      {n_nouns:,}")
    print(f"  Adjectives: {n_adjectives:,}")
    print(f"  Other:      {total_words - n_nouns - n_adjectives:,}")
    print()
    print(f"Relations:    {n_relations:,}")
    print(f"Forms:        {n_forms:,}")

    return 0


def _add_database_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-d",
        "--database",
        type=str,
        default=None,
        help="Path to SQLite database (default: from the configuration)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="latin-inflection",
        description="Decline Latin nouns and adjectives",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        dest="debug",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Create the database and load the forms catalog",
    )
    _add_database_argument(init_parser)
    init_parser.set_defaults(func=cmd_init)

    # import-words subcommand
    import_parser = subparsers.add_parser(
        "import-words",
        help="Import words from a JSON Lines file",
    )
    import_parser.add_argument(
        "-i",
        "--input",
        type=str,
        required=True,
        help="Path to JSON Lines file with one word per line",
    )
    _add_database_argument(import_parser)
    import_parser.set_defaults(func=cmd_import_words)

    # inflect subcommand
    inflect_parser = subparsers.add_parser(
        "inflect",
        help="Print the declension of a word",
    )
    inflect_parser.add_argument("enunciated", help="Enunciated of the word (e.g. 'rosa, rosae')")
    _add_database_argument(inflect_parser)
    inflect_parser.set_defaults(func=cmd_inflect)

    # show subcommand
    show_parser = subparsers.add_parser(
        "show",
        help="Print a word with its degrees and declension",
    )
    show_parser.add_argument("enunciated", help="Enunciated of the word (e.g. 'rosa, rosae')")
    _add_database_argument(show_parser)
    show_parser.set_defaults(func=cmd_show)

    # answers subcommand
    answers_parser = subparsers.add_parser(
        "answers",
        help="Print the answer sheet of a word in the configured case order",
    )
    answers_parser.add_argument("enunciated", help="Enunciated of the word (e.g. 'rosa, rosae')")
    answers_parser.add_argument(
        "--blank",
        action="store_true",
        help="Print the empty template instead of the forms",
    )
    _add_database_argument(answers_parser)
    answers_parser.set_defaults(func=cmd_answers)

    # ls subcommand
    ls_parser = subparsers.add_parser(
        "ls",
        help="List stored words",
    )
    ls_parser.add_argument("filter", nargs="?", default=None, help="Only show matching words")
    _add_database_argument(ls_parser)
    ls_parser.set_defaults(func=cmd_ls)

    # verify subcommand
    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify database integrity and consistency",
    )
    _add_database_argument(verify_parser)
    verify_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show detailed breakdown and metrics",
    )
    verify_parser.set_defaults(func=cmd_verify)

    # stats subcommand
    stats_parser = subparsers.add_parser(
        "stats",
        help="Show database statistics",
    )
    _add_database_argument(stats_parser)
    stats_parser.set_defaults(func=cmd_stats)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    args.config = load_configuration()
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
