"""Declension tables for nouns and adjectives.

A table is built in three passes:

1. The forms catalog is queried for the (kind, gender) of the table and
   every row is turned into surface forms by `resolve`, which decides which
   stem to glue to the catalog term.
2. The `sets` block of the word replaces whole cells.
3. The `adds` block of the word appends alternates to cells.

Example:
    >>> word = Word("rosa, rosae", "ros", Category.NOUN, Kind.A,
    ...             Declension.FIRST, Gender.FEMININE)
    >>> render(word, noun_table(word)[Case.NOMINATIVE])
    'rosa, rosae'
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from latin_inflection.enums import Case, CaseOrder, Category, Declension, Gender, Kind, Number
from latin_inflection.paradigms import DEFAULT_CATALOG, FormsCatalog
from latin_inflection.word import OverrideBlock, Word, parse_case

logger = logging.getLogger(__name__)

__all__ = [
    "AdjectiveTables",
    "DeclensionRow",
    "DeclensionTable",
    "adjective_tables",
    "build_table",
    "inflection_lines",
    "noun_table",
    "parse_case",
    "render",
    "resolve",
]

# Kinds whose root contracts on some forms ('liber' -> 'libr-ī')
CONTRACTING_KINDS = frozenset({Kind.ER_IR, Kind.UNUS_NAUTA_ER_IR})

# Kinds whose nominative (and neuter accusative) singular is the first
# principal part instead of the particle ('leō' vs 'leōn-is')
FIRST_ROOT_KINDS = frozenset(
    {Kind.IS, Kind.ISTEM, Kind.PURE_ISTEM, Kind.ONE, Kind.ONE_NON_ISTEM}
)


# =============================================================================
# Root resolution
# =============================================================================


def _contracts_root(word: Word, case: Case, number: Number, gender: Gender) -> bool:
    if not word.flags.contracted_root or word.kind not in CONTRACTING_KINDS:
        return False

    # All plurals have to be contracted.
    if number == Number.PLURAL:
        return True

    # Nominative/vocative singular are only contracted for feminine words. The
    # accusative is only not contracted on neuter words.
    if case in (Case.NOMINATIVE, Case.VOCATIVE):
        return gender == Gender.FEMININE
    if case == Case.ACCUSATIVE:
        return gender != Gender.NEUTER
    return True


def _uses_first_root(word: Word, case: Case, number: Number, gender: Gender) -> bool:
    if number == Number.PLURAL or word.kind not in FIRST_ROOT_KINDS:
        return False
    if case in (Case.NOMINATIVE, Case.VOCATIVE):
        return True
    return case == Case.ACCUSATIVE and gender == Gender.NEUTER


def resolve(word: Word, case: Case, number: Number, gender: Gender, term: str) -> list[str]:
    """Return the surface form(s) for `term` on the given cell.

    The result usually holds a single candidate. Singular genitives of the
    '-ius' paradigm hold two: the contracted one first ('fīlī', 'fīliī').
    """
    if not word.regular:
        return [term]

    particle = word.particle
    if _contracts_root(word, case, number, gender):
        return [particle[:-2] + "r" + term]
    if _uses_first_root(word, case, number, gender):
        return [word.first_root + term]

    if word.kind == Kind.IUS and number == Number.SINGULAR:
        if case == Case.VOCATIVE and word.flags.contracted_vocative:
            return [particle[:-1] + term]
        if case == Case.GENITIVE:
            return [particle[:-1] + term, particle + term]

    return [particle + term]


# =============================================================================
# Tables
# =============================================================================


@dataclass
class DeclensionRow:
    """Singular and plural candidates of a single case."""

    singular: list[str] = field(default_factory=lambda: list[str]())
    plural: list[str] = field(default_factory=lambda: list[str]())

    def __getitem__(self, number: Number) -> list[str]:
        return self.singular if number == Number.SINGULAR else self.plural

    def __setitem__(self, number: Number, values: list[str]) -> None:
        if number == Number.SINGULAR:
            self.singular = values
        else:
            self.plural = values


@dataclass
class DeclensionTable:
    """Fixed case x number grid of candidate forms."""

    rows: dict[Case, DeclensionRow] = field(
        default_factory=lambda: {case: DeclensionRow() for case in Case}
    )

    def __getitem__(self, case: Case) -> DeclensionRow:
        return self.rows[case]

    def cell(self, case: Case, number: Number) -> list[str]:
        return self.rows[case][number]

    def is_empty(self) -> bool:
        return not any(row.singular or row.plural for row in self.rows.values())

    def set(
        self, word: Word, case: Case, number: Number, gender: Gender, terms: Iterable[str]
    ) -> None:
        """Replace the cell with the forms resolved from `terms`."""
        values: list[str] = []
        for term in terms:
            values.extend(resolve(word, case, number, gender, term))
        self.rows[case][number] = values

    def add(
        self, word: Word, case: Case, number: Number, gender: Gender, terms: Iterable[str]
    ) -> None:
        """Append the forms resolved from `terms` to the cell."""
        cell = self.rows[case][number]
        for term in terms:
            cell.extend(resolve(word, case, number, gender, term))

    def apply(self, word: Word, gender: Gender, block: OverrideBlock, *, replace: bool) -> None:
        """Apply a `sets` (replace=True) or `adds` block for a table of `gender`."""
        for entry in block.for_gender(gender):
            for number, terms in entry.override.terms():
                if replace:
                    self.set(word, entry.case, number, gender, terms)
                else:
                    self.add(word, entry.case, number, gender, terms)


def _skips(word: Word, case: Case, number: Number) -> bool:
    onlyplural = word.flags.onlyplural
    if number == Number.SINGULAR and onlyplural:
        return True
    if number == Number.PLURAL and word.flags.onlysingular:
        return True

    # Locative plurals only exist on defective nouns such as 'Athēnīs', which
    # are flagged as 'onlyplural'.
    return case == Case.LOCATIVE and number == Number.PLURAL and not onlyplural


def build_table(
    word: Word,
    kind: Kind,
    gender: Gender,
    catalog: FormsCatalog | None = None,
) -> DeclensionTable:
    """Return the declension table of `word` for the given `kind` and `gender`.

    The kind is passed explicitly because adjectives decline some genders
    with a different paradigm than the one stored on the word.
    """
    catalog = catalog or DEFAULT_CATALOG
    table = DeclensionTable()

    entries = catalog.lookup(kind, gender)
    if not entries:
        logger.debug("No catalog rows for kind=%s gender=%s", kind, gender)

    for entry in entries:
        if _skips(word, entry.case, entry.number):
            continue
        table.add(word, entry.case, entry.number, gender, [entry.term])

    table.apply(word, gender, word.flags.sets, replace=True)
    table.apply(word, gender, word.flags.adds, replace=False)

    logger.debug("Built %s table for '%s' (kind=%s)", gender, word.enunciated, kind)
    return table


def noun_table(word: Word, catalog: FormsCatalog | None = None) -> DeclensionTable:
    """Return the declension table of `word` by assuming it's a noun."""
    if word.kind is None:
        msg = f"'{word.enunciated}' has no paradigm kind"
        raise ValueError(msg)

    gender = Gender.MASCULINE if word.gender == Gender.MASCULINE_OR_FEMININE else word.gender
    return build_table(word, word.kind, gender, catalog)


@dataclass
class AdjectiveTables:
    """One declension table per gender."""

    masculine: DeclensionTable
    feminine: DeclensionTable
    neuter: DeclensionTable

    def __iter__(self):
        return iter((self.masculine, self.feminine, self.neuter))

    def for_gender(self, gender: Gender) -> DeclensionTable:
        return {
            Gender.MASCULINE: self.masculine,
            Gender.FEMININE: self.feminine,
            Gender.NEUTER: self.neuter,
        }[gender]


def adjective_kinds(word: Word) -> tuple[Kind, Kind, Kind]:
    """Return the (masculine, feminine, neuter) paradigm kinds of an adjective."""
    if word.kind is None:
        msg = f"'{word.enunciated}' has no paradigm kind"
        raise ValueError(msg)

    # Unless the word is a special "ūnus nauta" variant, 1st/2nd declension
    # adjectives take the "a" kind in the feminine.
    feminine = word.kind
    if word.kind != Kind.UNUS_NAUTA and word.declension in (Declension.FIRST, Declension.SECOND):
        feminine = Kind.A

    neuter = Kind.UM if word.kind == Kind.US else word.kind
    return word.kind, feminine, neuter


def adjective_tables(word: Word, catalog: FormsCatalog | None = None) -> AdjectiveTables:
    """Return the declension tables for each gender of `word` as an adjective."""
    masculine, feminine, neuter = adjective_kinds(word)
    return AdjectiveTables(
        masculine=build_table(word, masculine, Gender.MASCULINE, catalog),
        feminine=build_table(word, feminine, Gender.FEMININE, catalog),
        neuter=build_table(word, neuter, Gender.NEUTER, catalog),
    )


# =============================================================================
# Presentation
# =============================================================================


def render(word: Word, row: DeclensionRow) -> str:
    """Render a case row honoring the singular-only/plural-only flags."""
    if word.flags.onlysingular:
        return "/".join(row.singular)
    if word.flags.onlyplural:
        return "/".join(row.plural)
    return f"{'/'.join(row.singular)}, {'/'.join(row.plural)}"


def inflection_lines(
    word: Word,
    case_order: CaseOrder = CaseOrder.EUROPEAN,
    catalog: FormsCatalog | None = None,
) -> list[str]:
    """Return the printable inflection of `word`, one line per case.

    Nothing is returned for indeclinable words or for categories that are
    not declined here (verbs, pronouns, particles).
    """
    if word.is_indeclinable:
        return []

    if word.category == Category.NOUN:
        table = noun_table(word, catalog)

        def row_text(case: Case) -> str:
            return render(word, table[case])
    elif word.category == Category.ADJECTIVE:
        tables = adjective_tables(word, catalog)

        def row_text(case: Case) -> str:
            return " | ".join(render(word, t[case]) for t in tables)
    else:
        return []

    lines: list[str] = []
    for case in case_order.cases:
        if case == Case.LOCATIVE and not word.locative:
            continue
        # Keep columns aligned for the short "Dative:" label.
        separator = "\t\t" if case == Case.DATIVE else "\t"
        lines.append(f"{case.label}:{separator}{row_text(case)}")
    return lines
