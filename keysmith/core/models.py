from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Collection, Iterable, Optional, Tuple

from keysmith.core.charsets import CharacterClass, canonical_classes
from keysmith.core.error_dialect import InvalidArgumentError

PASSWORD_DEFAULT_LENGTH = 16
WORD_CHAIN_DEFAULT_WORDS = 4
WORD_CHAIN_DEFAULT_SEPARATOR = "hyphen"
WORD_CHAIN_DEFAULT_CASE = "none"

# Fixed separators a random-per-gap separator draws from, in draw order.
SEPARATORS = {
    "hyphen": "-",
    "space": " ",
    "underscore": "_",
    "none": "",
}
RANDOM_SEPARATOR = "random"
SEPARATOR_CHOICES = tuple(SEPARATORS) + (RANDOM_SEPARATOR,)


class CapitalizationMode(Enum):
    NONE = "none"
    LOWER = "lower"
    UPPER = "upper"
    TITLE = "title"
    RANDOM_CHARS = "random-chars"
    # Per word, one of LOWER / UPPER / TITLE / RANDOM_CHARS chosen uniformly.
    MIXED = "mixed"


CASE_CHOICES = tuple(mode.value for mode in CapitalizationMode)


@dataclass(frozen=True)
class SeparatorSpec:
    """Either a fixed separator (possibly empty) or a fresh draw per gap."""

    fixed: str = "-"
    random_per_gap: bool = False

    @classmethod
    def random(cls) -> "SeparatorSpec":
        return cls(fixed="", random_per_gap=True)

    @classmethod
    def from_name(cls, name: str) -> "SeparatorSpec":
        key = name.strip().lower()
        if key == RANDOM_SEPARATOR:
            return cls.random()
        if key not in SEPARATORS:
            raise InvalidArgumentError(f"unknown separator: {name!r}")
        return cls(fixed=SEPARATORS[key])


@dataclass(frozen=True)
class PasswordPolicy:
    length: int
    classes: Tuple[CharacterClass, ...]

    @classmethod
    def build(cls, length: int, classes: Iterable[CharacterClass]) -> "PasswordPolicy":
        return cls(length=length, classes=canonical_classes(classes))


@dataclass(frozen=True)
class WordChainPolicy:
    word_count: int
    vocabulary: Collection[str]
    separator: SeparatorSpec = field(default_factory=SeparatorSpec)
    capitalization: CapitalizationMode = CapitalizationMode.NONE
    inject_digit: bool = False
    inject_symbol: bool = False


@dataclass(frozen=True)
class PasswordRequest:
    count: int = 1
    length: int = PASSWORD_DEFAULT_LENGTH
    lowercase: bool = True
    uppercase: bool = True
    digits: bool = True
    symbols: bool = True

    def selected_classes(self) -> Tuple[CharacterClass, ...]:
        flags = (
            (self.lowercase, CharacterClass.LOWERCASE),
            (self.uppercase, CharacterClass.UPPERCASE),
            (self.digits, CharacterClass.DIGIT),
            (self.symbols, CharacterClass.SYMBOL),
        )
        return tuple(cls for enabled, cls in flags if enabled)


@dataclass(frozen=True)
class WordChainRequest:
    count: int = 1
    word_count: int = WORD_CHAIN_DEFAULT_WORDS
    use_default_list: bool = True
    custom_words: str = ""
    wordlist_files: Tuple[str, ...] = ()
    separator: str = WORD_CHAIN_DEFAULT_SEPARATOR
    capitalization: str = WORD_CHAIN_DEFAULT_CASE
    inject_digit: bool = False
    inject_symbol: bool = False


@dataclass(frozen=True)
class GenerationResult:
    outputs: Tuple[str, ...]
    vocabulary_size: Optional[int] = None
