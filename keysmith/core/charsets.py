from __future__ import annotations

import string
from enum import Enum
from typing import Iterable, Tuple


class CharacterClass(Enum):
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    DIGIT = "digit"
    SYMBOL = "symbol"

    @property
    def alphabet(self) -> str:
        return ALPHABETS[self]


SYMBOL_ALPHABET = "!@#$%^&*()_+-=[]{}|;:'\",.<>?/"
DIGIT_ALPHABET = string.digits

ALPHABETS = {
    CharacterClass.LOWERCASE: string.ascii_lowercase,
    CharacterClass.UPPERCASE: string.ascii_uppercase,
    CharacterClass.DIGIT: DIGIT_ALPHABET,
    CharacterClass.SYMBOL: SYMBOL_ALPHABET,
}

CLASS_ORDER: Tuple[CharacterClass, ...] = tuple(CharacterClass)


def canonical_classes(classes: Iterable[CharacterClass]) -> Tuple[CharacterClass, ...]:
    """Collapse duplicates and order classes by enumeration order."""
    wanted = set(classes)
    return tuple(cls for cls in CLASS_ORDER if cls in wanted)


def pooled_alphabet(classes: Iterable[CharacterClass]) -> str:
    return "".join(cls.alphabet for cls in canonical_classes(classes))
