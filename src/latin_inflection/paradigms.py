"""Forms catalog: the terms of every paradigm kind, per gender.

Each paradigm lists, for every case, a (singular, plural) pair of terms.
For regular words a term is a suffix appended to the word's stem; for
irregular words (kinds such as 'iuppiteriovis' or 'duo') the term is
already the complete surface form. Alternates are separated with "/" and
keep their order; None marks a cell the paradigm does not have. An empty
string is a valid term: the bare stem (e.g. 'liber', 'leō').

The catalog is exposed through the FormsCatalog protocol so that the
declension code works the same with this in-memory table or with the
'forms' table of a database seeded from it.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Protocol

from latin_inflection.enums import KINDS_BY_DECLENSION, Case, Declension, Gender, Kind, Number

Cell = tuple[str | None, str | None]
Paradigm = dict[Case, Cell]

_MISSING: Cell = (None, None)


@dataclass(frozen=True)
class FormEntry:
    """One row of the forms catalog."""

    case: Case
    number: Number
    term: str


class FormsCatalog(Protocol):
    """Read-only lookup of catalog rows for a (kind, gender) pair."""

    def lookup(self, kind: Kind, gender: Gender) -> list[FormEntry]: ...


def _paradigm(
    nominative: Cell,
    vocative: Cell,
    accusative: Cell,
    genitive: Cell,
    dative: Cell,
    ablative: Cell,
    locative: Cell = _MISSING,
) -> Paradigm:
    return {
        Case.NOMINATIVE: nominative,
        Case.VOCATIVE: vocative,
        Case.ACCUSATIVE: accusative,
        Case.GENITIVE: genitive,
        Case.DATIVE: dative,
        Case.ABLATIVE: ablative,
        Case.LOCATIVE: locative,
    }


M, F, N = Gender.MASCULINE, Gender.FEMININE, Gender.NEUTER

# =============================================================================
# Nouns
# =============================================================================

_FIRST = _paradigm(
    ("a", "ae"), ("a", "ae"), ("am", "ās"), ("ae", "ārum"), ("ae", "īs"), ("ā", "īs"),
    ("ae", "īs"),
)  # fmt: skip

_SECOND_US = _paradigm(
    ("us", "ī"), ("e", "ī"), ("um", "ōs"), ("ī", "ōrum"), ("ō", "īs"), ("ō", "īs"),
    ("ī", "īs"),
)  # fmt: skip

_SECOND_UM = _paradigm(
    ("um", "a"), ("um", "a"), ("um", "a"), ("ī", "ōrum"), ("ō", "īs"), ("ō", "īs"),
    ("ī", "īs"),
)  # fmt: skip

_SECOND_ER = _paradigm(
    ("", "ī"), ("", "ī"), ("um", "ōs"), ("ī", "ōrum"), ("ō", "īs"), ("ō", "īs"),
    ("ī", "īs"),
)  # fmt: skip

_SECOND_ER_NEUTER = _paradigm(
    ("", "a"), ("", "a"), ("", "a"), ("ī", "ōrum"), ("ō", "īs"), ("ō", "īs"),
    ("ī", "īs"),
)  # fmt: skip

# The vocative term assumes the contracted stem ('fīl' + 'ī').
_SECOND_IUS = _paradigm(
    ("us", "ī"), ("ī", "ī"), ("um", "ōs"), ("ī", "ōrum"), ("ō", "īs"), ("ō", "īs"),
    ("ī", "īs"),
)  # fmt: skip

_THIRD = _paradigm(
    ("", "ēs"), ("", "ēs"), ("em", "ēs"), ("is", "um"), ("ī", "ibus"), ("e", "ibus"),
    ("ī", "ibus"),
)  # fmt: skip

_THIRD_NEUTER = _paradigm(
    ("", "a"), ("", "a"), ("", "a"), ("is", "um"), ("ī", "ibus"), ("e", "ibus"),
    ("ī", "ibus"),
)  # fmt: skip

_THIRD_ISTEM = _paradigm(
    ("", "ēs"), ("", "ēs"), ("em", "ēs/īs"), ("is", "ium"), ("ī", "ibus"), ("e", "ibus"),
    ("ī", "ibus"),
)  # fmt: skip

_THIRD_ISTEM_NEUTER = _paradigm(
    ("", "a"), ("", "a"), ("", "a"), ("is", "ium"), ("ī", "ibus"), ("e", "ibus"),
    ("ī", "ibus"),
)  # fmt: skip

_THIRD_PURE_ISTEM = _paradigm(
    ("", "ēs"), ("", "ēs"), ("im", "ēs/īs"), ("is", "ium"), ("ī", "ibus"), ("ī", "ibus"),
    ("ī", "ibus"),
)  # fmt: skip

_THIRD_PURE_ISTEM_NEUTER = _paradigm(
    ("", "ia"), ("", "ia"), ("", "ia"), ("is", "ium"), ("ī", "ibus"), ("ī", "ibus"),
    ("ī", "ibus"),
)  # fmt: skip

_VIS_VIS = _paradigm(
    ("vīs", "vīrēs"), ("vīs", "vīrēs"), ("vim", "vīrēs/vīrīs"), ("vīs", "vīrium"),
    ("vī", "vīribus"), ("vī", "vīribus"),
)  # fmt: skip

_SUS_SUIS = _paradigm(
    ("sūs", "suēs"), ("sūs", "suēs"), ("suem", "suēs"), ("suis", "suum"),
    ("suī", "suibus/sūbus/subus"), ("sue", "suibus/sūbus/subus"),
)  # fmt: skip

_BOS_BOVIS = _paradigm(
    ("bōs", "bovēs"), ("bōs", "bovēs"), ("bovem", "bovēs"), ("bovis", "boum/bovum"),
    ("bovī", "bōbus/būbus"), ("bove", "bōbus/būbus"),
)  # fmt: skip

_IUPPITER_IOVIS = _paradigm(
    ("Iuppiter", None), ("Iuppiter", None), ("Iovem", None), ("Iovis", None),
    ("Iovī", None), ("Iove", None),
)  # fmt: skip

_FOURTH = _paradigm(
    ("us", "ūs"), ("us", "ūs"), ("um", "ūs"), ("ūs", "uum"), ("uī", "ibus"), ("ū", "ibus"),
)  # fmt: skip

_FOURTH_NEUTER = _paradigm(
    ("ū", "ua"), ("ū", "ua"), ("ū", "ua"), ("ūs", "uum"), ("uī", "ibus"), ("ū", "ibus"),
)  # fmt: skip

_DOMUS_DOMUS = _paradigm(
    ("domus", "domūs"), ("domus", "domūs"), ("domum", "domūs/domōs"),
    ("domūs/domī", "domuum/domōrum"), ("domuī/domō", "domibus"), ("domō/domū", "domibus"),
    ("domī", None),
)  # fmt: skip

_FIFTH_IES = _paradigm(
    ("ēs", "ēs"), ("ēs", "ēs"), ("em", "ēs"), ("ēī", "ērum"), ("ēī", "ēbus"), ("ē", "ēbus"),
)  # fmt: skip

_FIFTH_ES = _paradigm(
    ("ēs", "ēs"), ("ēs", "ēs"), ("em", "ēs"), ("eī", "ērum"), ("eī", "ēbus"), ("ē", "ēbus"),
)  # fmt: skip

# =============================================================================
# Adjectives
# =============================================================================

_ONE = _paradigm(
    ("", "ēs"), ("", "ēs"), ("em", "ēs"), ("is", "ium"), ("ī", "ibus"), ("ī", "ibus"),
)  # fmt: skip

_ONE_NEUTER = _paradigm(
    ("", "ia"), ("", "ia"), ("", "ia"), ("is", "ium"), ("ī", "ibus"), ("ī", "ibus"),
)  # fmt: skip

_ONE_NON_ISTEM = _paradigm(
    ("", "ēs"), ("", "ēs"), ("em", "ēs"), ("is", "um"), ("ī", "ibus"), ("e", "ibus"),
)  # fmt: skip

_ONE_NON_ISTEM_NEUTER = _paradigm(
    ("", "a"), ("", "a"), ("", "a"), ("is", "um"), ("ī", "ibus"), ("e", "ibus"),
)  # fmt: skip

_TWO = _paradigm(
    ("is", "ēs"), ("is", "ēs"), ("em/īs", "ēs"), ("is", "ium"), ("ī", "ibus"), ("ī", "ibus"),
)  # fmt: skip

_TWO_NEUTER = _paradigm(
    ("e", "ia"), ("e", "ia"), ("e", "ia"), ("is", "ium"), ("ī", "ibus"), ("ī", "ibus"),
)  # fmt: skip

_THREE_MASCULINE = _paradigm(
    ("", "ēs"), ("", "ēs"), ("em", "ēs"), ("is", "ium"), ("ī", "ibus"), ("ī", "ibus"),
)  # fmt: skip

_THREE_FEMININE = _paradigm(
    ("is", "ēs"), ("is", "ēs"), ("em", "ēs"), ("is", "ium"), ("ī", "ibus"), ("ī", "ibus"),
)  # fmt: skip

_UNUS_NAUTA_MASCULINE = _paradigm(
    ("us", "ī"), ("e", "ī"), ("um", "ōs"), ("īus", "ōrum"), ("ī", "īs"), ("ō", "īs"),
)  # fmt: skip

_UNUS_NAUTA_FEMININE = _paradigm(
    ("a", "ae"), ("a", "ae"), ("am", "ās"), ("īus", "ārum"), ("ī", "īs"), ("ā", "īs"),
)  # fmt: skip

_UNUS_NAUTA_NEUTER = _paradigm(
    ("um", "a"), ("um", "a"), ("um", "a"), ("īus", "ōrum"), ("ī", "īs"), ("ō", "īs"),
)  # fmt: skip

_UNUS_NAUTA_ER = _paradigm(
    ("", "ī"), ("", "ī"), ("um", "ōs"), ("īus", "ōrum"), ("ī", "īs"), ("ō", "īs"),
)  # fmt: skip

_UNUS_NAUTA_ER_NEUTER = _paradigm(
    ("", "a"), ("", "a"), ("", "a"), ("īus", "ōrum"), ("ī", "īs"), ("ō", "īs"),
)  # fmt: skip

_DUO_MASCULINE = _paradigm(
    (None, "duo"), (None, "duo"), (None, "duo/duōs"), (None, "duōrum"), (None, "duōbus"),
    (None, "duōbus"),
)  # fmt: skip

_DUO_FEMININE = _paradigm(
    (None, "duae"), (None, "duae"), (None, "duās"), (None, "duārum"), (None, "duābus"),
    (None, "duābus"),
)  # fmt: skip

_DUO_NEUTER = _paradigm(
    (None, "duo"), (None, "duo"), (None, "duo"), (None, "duōrum"), (None, "duōbus"),
    (None, "duōbus"),
)  # fmt: skip

_TRES = _paradigm(
    (None, "ēs"), (None, "ēs"), (None, "ēs/īs"), (None, "ium"), (None, "ibus"), (None, "ibus"),
)  # fmt: skip

_TRES_NEUTER = _paradigm(
    (None, "ia"), (None, "ia"), (None, "ia"), (None, "ium"), (None, "ibus"), (None, "ibus"),
)  # fmt: skip

_MILLE = _paradigm(
    ("mīlle", "mīlia"), ("mīlle", "mīlia"), ("mīlle", "mīlia"), ("mīlle", "mīlium"),
    ("mīlle", "mīlibus"), ("mīlle", "mīlibus"),
)  # fmt: skip

PARADIGMS: dict[tuple[Kind, Gender], Paradigm] = {
    (Kind.A, F): _FIRST,
    (Kind.A, M): _FIRST,
    (Kind.US, M): _SECOND_US,
    (Kind.US, F): _SECOND_US,
    (Kind.UM, N): _SECOND_UM,
    (Kind.ER_IR, M): _SECOND_ER,
    (Kind.ER_IR, F): _SECOND_ER,
    (Kind.ER_IR, N): _SECOND_ER_NEUTER,
    (Kind.IUS, M): _SECOND_IUS,
    (Kind.IS, M): _THIRD,
    (Kind.IS, F): _THIRD,
    (Kind.IS, N): _THIRD_NEUTER,
    (Kind.ISTEM, M): _THIRD_ISTEM,
    (Kind.ISTEM, F): _THIRD_ISTEM,
    (Kind.ISTEM, N): _THIRD_ISTEM_NEUTER,
    (Kind.PURE_ISTEM, M): _THIRD_PURE_ISTEM,
    (Kind.PURE_ISTEM, F): _THIRD_PURE_ISTEM,
    (Kind.PURE_ISTEM, N): _THIRD_PURE_ISTEM_NEUTER,
    (Kind.VIS_VIS, F): _VIS_VIS,
    (Kind.SUS_SUIS, M): _SUS_SUIS,
    (Kind.SUS_SUIS, F): _SUS_SUIS,
    (Kind.BOS_BOVIS, M): _BOS_BOVIS,
    (Kind.BOS_BOVIS, F): _BOS_BOVIS,
    (Kind.IUPPITER_IOVIS, M): _IUPPITER_IOVIS,
    (Kind.FUS, M): _FOURTH,
    (Kind.FUS, F): _FOURTH,
    (Kind.FUS, N): _FOURTH_NEUTER,
    (Kind.DOMUS_DOMUS, F): _DOMUS_DOMUS,
    (Kind.IES, M): _FIFTH_IES,
    (Kind.IES, F): _FIFTH_IES,
    (Kind.ES, F): _FIFTH_ES,
    (Kind.ONE, M): _ONE,
    (Kind.ONE, F): _ONE,
    (Kind.ONE, N): _ONE_NEUTER,
    (Kind.ONE_NON_ISTEM, M): _ONE_NON_ISTEM,
    (Kind.ONE_NON_ISTEM, F): _ONE_NON_ISTEM,
    (Kind.ONE_NON_ISTEM, N): _ONE_NON_ISTEM_NEUTER,
    (Kind.TWO, M): _TWO,
    (Kind.TWO, F): _TWO,
    (Kind.TWO, N): _TWO_NEUTER,
    (Kind.THREE, M): _THREE_MASCULINE,
    (Kind.THREE, F): _THREE_FEMININE,
    (Kind.THREE, N): _TWO_NEUTER,
    (Kind.UNUS_NAUTA, M): _UNUS_NAUTA_MASCULINE,
    (Kind.UNUS_NAUTA, F): _UNUS_NAUTA_FEMININE,
    (Kind.UNUS_NAUTA, N): _UNUS_NAUTA_NEUTER,
    (Kind.UNUS_NAUTA_ER_IR, M): _UNUS_NAUTA_ER,
    (Kind.UNUS_NAUTA_ER_IR, N): _UNUS_NAUTA_ER_NEUTER,
    (Kind.DUO, M): _DUO_MASCULINE,
    (Kind.DUO, F): _DUO_FEMININE,
    (Kind.DUO, N): _DUO_NEUTER,
    (Kind.TRES, M): _TRES,
    (Kind.TRES, F): _TRES,
    (Kind.TRES, N): _TRES_NEUTER,
    (Kind.MILLE, M): _MILLE,
    (Kind.MILLE, F): _MILLE,
    (Kind.MILLE, N): _MILLE,
}


def declension_of(kind: Kind) -> Declension:
    """Return the declension a paradigm kind belongs to."""
    for declension, kinds in KINDS_BY_DECLENSION.items():
        if kind in kinds:
            return declension
    msg = f"kind '{kind}' is not part of any declension"
    raise ValueError(msg)


def expand_paradigm(paradigm: Paradigm) -> Iterator[FormEntry]:
    """Yield the catalog rows of a paradigm in catalog order."""
    for case in Case:
        singular, plural = paradigm[case]
        for number, terms in ((Number.SINGULAR, singular), (Number.PLURAL, plural)):
            if terms is None:
                continue
            for term in terms.split("/"):
                yield FormEntry(case, number, term)


class StaticFormsCatalog:
    """Forms catalog backed by an in-memory paradigm table."""

    def __init__(self, paradigms: dict[tuple[Kind, Gender], Paradigm] | None = None):
        source = PARADIGMS if paradigms is None else paradigms
        self._rows: dict[tuple[Kind, Gender], tuple[FormEntry, ...]] = {
            key: tuple(expand_paradigm(paradigm)) for key, paradigm in source.items()
        }

    def lookup(self, kind: Kind, gender: Gender) -> list[FormEntry]:
        return list(self._rows.get((kind, gender), ()))

    def keys(self) -> list[tuple[Kind, Gender]]:
        return list(self._rows)


def catalog_rows() -> Iterator[dict[str, Any]]:
    """Yield the built-in catalog as rows for the 'forms' table."""
    for (kind, gender), paradigm in PARADIGMS.items():
        declension = declension_of(kind)
        for entry in expand_paradigm(paradigm):
            yield {
                "declension": int(declension),
                "kind": kind.value,
                "gender": gender.value,
                "case": entry.case.value,
                "number": entry.number.value,
                "value": entry.term,
            }


DEFAULT_CATALOG = StaticFormsCatalog()
