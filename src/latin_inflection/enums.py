"""Enumeration types for Latin linguistic data.

Values are the strings stored in SQLite and used in import files and in
the flags of a word, so members can be compared and stored directly.
"""

from enum import IntEnum, StrEnum


class Case(StrEnum):
    """Grammatical case. Declaration order is the European case order."""

    NOMINATIVE = "nominative"
    VOCATIVE = "vocative"
    ACCUSATIVE = "accusative"
    GENITIVE = "genitive"
    DATIVE = "dative"
    ABLATIVE = "ablative"
    LOCATIVE = "locative"

    @property
    def label(self) -> str:
        """Return the capitalized name used in printed tables."""
        return self.value.capitalize()


class Number(StrEnum):
    """Grammatical number."""

    SINGULAR = "singular"
    PLURAL = "plural"


class Gender(StrEnum):
    """Gender of a word.

    Declension tables only exist for MASCULINE, FEMININE and NEUTER. Nouns
    marked MASCULINE_OR_FEMININE are declined with the masculine rows.
    """

    MASCULINE = "masculine"
    FEMININE = "feminine"
    MASCULINE_OR_FEMININE = "masculine_or_feminine"
    NEUTER = "neuter"
    NONE = "none"

    @property
    def abbrev(self) -> str:
        """Return the dictionary abbreviation (e.g., 'm.')."""
        return {
            Gender.MASCULINE: "m.",
            Gender.FEMININE: "f.",
            Gender.MASCULINE_OR_FEMININE: "m./f.",
            Gender.NEUTER: "n.",
            Gender.NONE: "(genderless)",
        }[self]


# Genders that can be used as a scope inside `sets`/`adds` blocks.
TABLE_GENDERS = (Gender.MASCULINE, Gender.FEMININE, Gender.NEUTER)


class Category(StrEnum):
    """Part of speech classification for words."""

    UNKNOWN = "unknown"
    NOUN = "noun"
    ADJECTIVE = "adjective"
    VERB = "verb"
    PRONOUN = "pronoun"
    ADVERB = "adverb"
    PREPOSITION = "preposition"
    CONJUNCTION = "conjunction"
    INTERJECTION = "interjection"
    DETERMINER = "determiner"

    @property
    def is_declinable(self) -> bool:
        return self in (Category.NOUN, Category.ADJECTIVE)


class Declension(IntEnum):
    """Declension family, stored as an integer (6 for everything else)."""

    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4
    FIFTH = 5
    OTHER = 6

    @property
    def label(self) -> str:
        return {
            Declension.FIRST: "1st (-ae)",
            Declension.SECOND: "2nd (-ī)",
            Declension.THIRD: "3rd (-is)",
            Declension.FOURTH: "4th (-ūs)",
            Declension.FIFTH: "5th (-eī/-ēī)",
            Declension.OTHER: "other",
        }[self]


class Kind(StrEnum):
    """Paradigm identifier selecting the rows of the forms catalog."""

    # Nouns
    A = "a"
    US = "us"
    UM = "um"
    ER_IR = "er/ir"
    IUS = "ius"
    IS = "is"
    ISTEM = "istem"
    PURE_ISTEM = "pureistem"
    VIS_VIS = "visvis"
    SUS_SUIS = "sussuis"
    BOS_BOVIS = "bosbovis"
    IUPPITER_IOVIS = "iuppiteriovis"
    FUS = "fus"
    DOMUS_DOMUS = "domusdomus"
    IES = "ies"
    ES = "es"
    INDECLINABLE = "indeclinable"

    # Adjectives
    ONE = "one"
    ONE_NON_ISTEM = "onenonistem"
    TWO = "two"
    THREE = "three"
    UNUS_NAUTA = "unusnauta"
    UNUS_NAUTA_ER_IR = "unusnautaer/ir"
    DUO = "duo"
    TRES = "tres"
    MILLE = "mille"

    @property
    def humanized(self) -> str:
        """Return a human-readable description of this kind."""
        return _KIND_LABELS[self]


_KIND_LABELS: dict[Kind, str] = {
    Kind.A: "-a",
    Kind.US: "-us",
    Kind.UM: "-um",
    Kind.ER_IR: "-er/-ir",
    Kind.IUS: "-ius; like 'fīlius'",
    Kind.IS: "-is",
    Kind.ISTEM: "i-stem; '-i-' also in the genitive plural",
    Kind.PURE_ISTEM: "pure i-stem; '-i-' also in the ablative singular",
    Kind.VIS_VIS: "irregular 'vīs, vīs'",
    Kind.SUS_SUIS: "irregular 'sūs, suis'",
    Kind.BOS_BOVIS: "irregular 'bōs, bovis'",
    Kind.IUPPITER_IOVIS: "irregular 'Iuppiter, Iovis'",
    Kind.FUS: "-u-",
    Kind.DOMUS_DOMUS: "irregular 'domus, domūs/domī'",
    Kind.IES: "-iēs; like 'diēs, diēī'",
    Kind.ES: "-ēs; like 'rēs, reī'",
    Kind.INDECLINABLE: "indeclinable",
    Kind.ONE: "one termination adjective",
    Kind.ONE_NON_ISTEM: "one termination adjective; non i-stem like 'vetus, veteris'",
    Kind.TWO: "two termination adjective",
    Kind.THREE: "three termination adjective",
    Kind.UNUS_NAUTA: "'ūnus nauta' like 'ūnus, ūna, ūnum'",
    Kind.UNUS_NAUTA_ER_IR: "'ūnus nauta' like 'neuter, neutra, neutrum'",
    Kind.DUO: "number 'duo, duae, duo'",
    Kind.TRES: "number 'trēs, trēs, tria'",
    Kind.MILLE: "number 'mīlle, mīlle'",
}

# Exhaustive mapping of which kinds are valid for each declension.
KINDS_BY_DECLENSION: dict[Declension, frozenset[Kind]] = {
    Declension.FIRST: frozenset({Kind.A}),
    Declension.SECOND: frozenset(
        {
            Kind.US,
            Kind.UM,
            Kind.ER_IR,
            Kind.IUS,
            Kind.UNUS_NAUTA,
            Kind.UNUS_NAUTA_ER_IR,
        }
    ),
    Declension.THIRD: frozenset(
        {
            Kind.IS,
            Kind.ISTEM,
            Kind.PURE_ISTEM,
            Kind.VIS_VIS,
            Kind.SUS_SUIS,
            Kind.BOS_BOVIS,
            Kind.IUPPITER_IOVIS,
            Kind.ONE,
            Kind.ONE_NON_ISTEM,
            Kind.TWO,
            Kind.THREE,
            Kind.TRES,
        }
    ),
    Declension.FOURTH: frozenset({Kind.FUS, Kind.DOMUS_DOMUS}),
    Declension.FIFTH: frozenset({Kind.IES, Kind.ES}),
    Declension.OTHER: frozenset({Kind.DUO, Kind.MILLE, Kind.INDECLINABLE}),
}


class CaseOrder(StrEnum):
    """Order in which cases are listed when printing or asking for a table."""

    EUROPEAN = "european"
    ENGLISH = "english"

    @property
    def cases(self) -> tuple[Case, ...]:
        if self is CaseOrder.ENGLISH:
            return (
                Case.NOMINATIVE,
                Case.GENITIVE,
                Case.DATIVE,
                Case.ACCUSATIVE,
                Case.ABLATIVE,
                Case.VOCATIVE,
                Case.LOCATIVE,
            )
        return tuple(Case)


class RelationKind(StrEnum):
    """How two stored words are related to each other."""

    COMPARATIVE = "comparative"
    SUPERLATIVE = "superlative"
    ADVERB = "adverb"
    ALTERNATIVE = "alternative"
    GENDERED = "gendered"
