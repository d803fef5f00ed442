"""Words and their flags.

A word arrives from the store (or an import file) with its flags encoded as
a JSON object mixing boolean switches with two override blocks:

    {
      "onlysingular": true,
      "sets": {
        "accusative": {"singular": ["im"]}
      },
      "adds": {
        "feminine": {"dative": {"plural": ["ābus"]}}
      }
    }

`parse_flags` turns that object into a `WordFlags` instance so that the
declension code never deals with untyped values.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeVar

from latin_inflection.enums import (
    KINDS_BY_DECLENSION,
    TABLE_GENDERS,
    Case,
    Category,
    Declension,
    Gender,
    Kind,
    Number,
)
from latin_inflection.errors import (
    BadOverrideKey,
    InvalidFlagsError,
    InvalidWordError,
    UnsupportedKindError,
)

# Switches with a dedicated attribute on WordFlags
NAMED_FLAGS = (
    "onlysingular",
    "onlyplural",
    "contracted_root",
    "irregularsup",
    "compsup_prefix",
    "contracted_vocative",
    "indeclinable",
)

# Every boolean switch accepted on a word. The ones without a named
# attribute are only used for display purposes.
BOOLEAN_FLAGS = frozenset(
    {
        *NAMED_FLAGS,
        "deponent",
        "nonpositive",
        "nopassive",
        "nosupine",
        "noperfect",
        "nogerundive",
        "impersonal",
        "impersonalpassive",
        "noimperative",
        "noinfinitive",
        "shortimperative",
        "onlythirdpassive",
        "enclitic",
        "notcomparable",
        "onlyperfect",
        "semideponent",
    }
)

OVERRIDE_KEYS = ("sets", "adds")

E = TypeVar("E", bound=Enum)


def parse_case(name: str) -> Case:
    """Return the case named by `name`, or raise BadOverrideKey."""
    try:
        return Case(name)
    except ValueError:
        raise BadOverrideKey(name) from None


@dataclass(frozen=True)
class CellOverride:
    """Literal terms overriding the singular and/or plural cell of a case."""

    singular: tuple[str, ...] | None = None
    plural: tuple[str, ...] | None = None

    def terms(self) -> Iterator[tuple[Number, tuple[str, ...]]]:
        """Yield (number, terms) for each number present in this override."""
        if self.singular is not None:
            yield Number.SINGULAR, self.singular
        if self.plural is not None:
            yield Number.PLURAL, self.plural

    def to_dict(self) -> dict[str, list[str]]:
        return {number.value: list(values) for number, values in self.terms()}


@dataclass(frozen=True)
class OverrideEntry:
    """One case of a `sets`/`adds` block, optionally restricted to a gender."""

    case: Case
    override: CellOverride
    gender: Gender | None = None


@dataclass(frozen=True)
class OverrideBlock:
    """Ordered entries of a `sets` or `adds` block."""

    entries: tuple[OverrideEntry, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.entries)

    def for_gender(self, gender: Gender) -> Iterator[OverrideEntry]:
        """Yield entries that apply to a table of the given gender."""
        for entry in self.entries:
            if entry.gender is None or entry.gender == gender:
                yield entry

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for entry in self.entries:
            if entry.gender is None:
                result[entry.case.value] = entry.override.to_dict()
            else:
                scoped = result.setdefault(entry.gender.value, {})
                scoped[entry.case.value] = entry.override.to_dict()
        return result


@dataclass
class WordFlags:
    """Typed view over the flags of a word."""

    onlysingular: bool = False
    onlyplural: bool = False
    contracted_root: bool = False
    irregularsup: bool = False
    compsup_prefix: bool = False
    contracted_vocative: bool = False
    indeclinable: bool = False
    extra: frozenset[str] = frozenset()
    sets: OverrideBlock = field(default_factory=OverrideBlock)
    adds: OverrideBlock = field(default_factory=OverrideBlock)

    def is_set(self, flag: str) -> bool:
        """Return whether the given boolean flag is enabled."""
        if flag in NAMED_FLAGS:
            return bool(getattr(self, flag))
        return flag in self.extra

    def enabled(self) -> list[str]:
        """Return the enabled boolean flags, sorted by name."""
        named = [flag for flag in NAMED_FLAGS if getattr(self, flag)]
        return sorted([*named, *self.extra])

    def to_dict(self) -> dict[str, Any]:
        """Return the external JSON representation of these flags."""
        result: dict[str, Any] = dict.fromkeys(self.enabled(), True)
        if self.sets:
            result["sets"] = self.sets.to_dict()
        if self.adds:
            result["adds"] = self.adds.to_dict()
        return result


def _parse_terms(value: Any, where: str) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        msg = f"{where}: expected a list of strings, got {value!r}"
        raise InvalidFlagsError(msg)
    return tuple(value)


def _parse_cell(value: Any, where: str) -> CellOverride:
    if not isinstance(value, Mapping):
        msg = f"{where}: expected an object with 'singular' and/or 'plural'"
        raise InvalidFlagsError(msg)

    unknown = set(value) - {"singular", "plural"}
    if unknown:
        msg = f"{where}: unknown number(s) {', '.join(sorted(unknown))}"
        raise InvalidFlagsError(msg)

    singular = value.get("singular")
    plural = value.get("plural")
    return CellOverride(
        singular=None if singular is None else _parse_terms(singular, f"{where}.singular"),
        plural=None if plural is None else _parse_terms(plural, f"{where}.plural"),
    )


def _parse_block(value: Any, name: str) -> OverrideBlock:
    if not isinstance(value, Mapping):
        msg = f"'{name}' must be an object keyed by case or gender"
        raise InvalidFlagsError(msg)

    entries: list[OverrideEntry] = []
    for key, blob in value.items():
        if key in TABLE_GENDERS:
            gender = Gender(key)
            if not isinstance(blob, Mapping):
                msg = f"{name}.{key}: expected an object keyed by case"
                raise InvalidFlagsError(msg)
            for case_key, cell in blob.items():
                case = parse_case(case_key)
                override = _parse_cell(cell, f"{name}.{key}.{case_key}")
                entries.append(OverrideEntry(case, override, gender))
        else:
            case = parse_case(key)
            entries.append(OverrideEntry(case, _parse_cell(blob, f"{name}.{key}")))
    return OverrideBlock(tuple(entries))


def parse_flags(raw: Mapping[str, Any] | None) -> WordFlags:
    """Parse the external flags object of a word.

    Raises:
        BadOverrideKey: a `sets`/`adds` block names an unknown case.
        InvalidFlagsError: an unknown switch, a non-boolean switch value or a
            malformed override payload.
    """
    if raw is None:
        return WordFlags()
    if not isinstance(raw, Mapping):
        msg = f"flags must be an object, got {type(raw).__name__}"
        raise InvalidFlagsError(msg)

    switches: dict[str, bool] = {}
    extra: set[str] = set()
    blocks: dict[str, OverrideBlock] = {}

    for key, value in raw.items():
        if key in OVERRIDE_KEYS:
            blocks[key] = _parse_block(value, key)
        elif key in BOOLEAN_FLAGS:
            if not isinstance(value, bool):
                msg = f"flag '{key}' must be a boolean, got {value!r}"
                raise InvalidFlagsError(msg)
            if key in NAMED_FLAGS:
                switches[key] = value
            elif value:
                extra.add(key)
        else:
            msg = f"unknown flag '{key}'"
            raise InvalidFlagsError(msg)

    return WordFlags(
        **switches,
        extra=frozenset(extra),
        sets=blocks.get("sets", OverrideBlock()),
        adds=blocks.get("adds", OverrideBlock()),
    )


@dataclass
class Word:
    """A word as stored in the 'words' table."""

    enunciated: str
    particle: str
    category: Category
    kind: Kind | None = None
    declension: Declension | None = None
    gender: Gender = Gender.NONE
    regular: bool = True
    locative: bool = False
    flags: WordFlags = field(default_factory=WordFlags)
    translation: dict[str, str] = field(default_factory=lambda: dict[str, str]())
    id: int = 0

    @property
    def first_root(self) -> str:
        """Return the first principal part, as written before the first comma."""
        return self.enunciated.split(",", 1)[0]

    @property
    def singular_nominative(self) -> str:
        return self.first_root.strip()

    @property
    def real_particle(self) -> str:
        """Return the particle as it looks on contracted forms ('liber' -> 'libr')."""
        if self.flags.contracted_root:
            return self.particle[:-2] + self.particle[-1:]
        return self.particle

    @property
    def is_indeclinable(self) -> bool:
        return self.flags.indeclinable or self.kind == Kind.INDECLINABLE


def _enum_value(enum: type[E], value: Any, field_name: str) -> E:
    try:
        return enum(value)
    except (ValueError, TypeError):
        msg = f"invalid {field_name}: {value!r}"
        raise InvalidWordError(msg) from None


def _bool_field(data: Mapping[str, Any], field_name: str, default: bool) -> bool:
    value = data.get(field_name)
    if value is None:
        return default
    if not isinstance(value, bool):
        msg = f"'{field_name}' must be true or false, got {value!r}"
        raise InvalidWordError(msg)
    return value


def _translation_field(value: Any) -> dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, Mapping) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    ):
        msg = f"'translation' must map locales to text, got {value!r}"
        raise InvalidWordError(msg)
    return dict(value)


def _id_field(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        msg = f"invalid id: {value!r}"
        raise InvalidWordError(msg)
    return value


def validate_word(word: Word) -> None:
    """Check that declension and kind make sense for the category of `word`.

    Raises:
        InvalidWordError: missing declension/kind, or inflection data on a
            category that does not decline.
        UnsupportedKindError: the kind does not belong to the declension.
    """
    if word.category in (Category.UNKNOWN, Category.PRONOUN):
        msg = f"you cannot create a word from the '{word.category}' category"
        raise InvalidWordError(msg)

    if not word.category.is_declinable:
        if word.declension is not None or word.kind is not None:
            msg = f"no inflection allowed for '{word.category}'"
            raise InvalidWordError(msg)
        return

    if word.declension is None or word.kind is None:
        msg = f"you have to provide the declension and kind for '{word.enunciated}'"
        raise InvalidWordError(msg)

    if word.kind not in KINDS_BY_DECLENSION[word.declension]:
        msg = (
            f"kind '{word.kind}' is not valid for the {word.declension.label} declension "
            f"('{word.enunciated}')"
        )
        raise UnsupportedKindError(msg)


def word_from_mapping(data: Mapping[str, Any]) -> Word:
    """Build and validate a Word from its external representation.

    Used both for rows coming from the database and for lines of an import
    file. Flags may be given either as a mapping or as a JSON-decoded value.
    """
    try:
        enunciated = str(data["enunciated"]).strip()
        particle = str(data["particle"]).strip()
        category = _enum_value(Category, data["category"], "category")
    except KeyError as e:
        msg = f"missing field {e.args[0]!r}"
        raise InvalidWordError(msg) from None

    declension_value = data.get("declension")
    kind_value = data.get("kind")
    gender_value = data.get("gender")

    word = Word(
        enunciated=enunciated,
        particle=particle,
        category=category,
        kind=None if kind_value in (None, "") else _enum_value(Kind, kind_value, "kind"),
        declension=(
            None
            if declension_value is None
            else _enum_value(Declension, declension_value, "declension")
        ),
        gender=Gender.NONE if gender_value is None else _enum_value(Gender, gender_value, "gender"),
        regular=_bool_field(data, "regular", True),
        locative=_bool_field(data, "locative", False),
        flags=parse_flags(data.get("flags")),
        translation=_translation_field(data.get("translation")),
        id=_id_field(data.get("id")),
    )
    validate_word(word)
    return word
