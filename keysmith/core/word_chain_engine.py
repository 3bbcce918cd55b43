from __future__ import annotations

from typing import List, Optional

from keysmith.core.charsets import DIGIT_ALPHABET, SYMBOL_ALPHABET
from keysmith.core.error_dialect import EmptyVocabularyError, InvalidArgumentError
from keysmith.core.models import SEPARATORS, CapitalizationMode, SeparatorSpec, WordChainPolicy
from keysmith.core.random_source import RandomSource, resolve_source

# Draw order matters for MIXED: next_below(4) indexes this tuple.
_MIXED_MODES = (
    CapitalizationMode.LOWER,
    CapitalizationMode.UPPER,
    CapitalizationMode.TITLE,
    CapitalizationMode.RANDOM_CHARS,
)
_GAP_SEPARATORS = tuple(SEPARATORS.values())


def _random_chars(word: str, rng: RandomSource) -> str:
    return "".join(ch.upper() if rng.next_below(2) else ch.lower() for ch in word)


def apply_capitalization(
    word: str,
    mode: CapitalizationMode,
    source: Optional[RandomSource] = None,
) -> str:
    if mode is CapitalizationMode.NONE:
        return word
    rng = resolve_source(source)
    if mode is CapitalizationMode.MIXED:
        mode = _MIXED_MODES[rng.next_below(len(_MIXED_MODES))]
    if mode is CapitalizationMode.LOWER:
        return word.lower()
    if mode is CapitalizationMode.UPPER:
        return word.upper()
    if mode is CapitalizationMode.TITLE:
        return word[:1].upper() + word[1:].lower()
    if mode is CapitalizationMode.RANDOM_CHARS:
        return _random_chars(word, rng)
    raise InvalidArgumentError(f"unsupported capitalization mode: {mode!r}")


def resolve_separator(spec: SeparatorSpec, source: Optional[RandomSource] = None) -> str:
    if not spec.random_per_gap:
        return spec.fixed
    rng = resolve_source(source)
    return _GAP_SEPARATORS[rng.next_below(len(_GAP_SEPARATORS))]


def generate_word_chain(policy: WordChainPolicy, source: Optional[RandomSource] = None) -> str:
    # Duplicates would skew the draw toward repeated words.
    vocabulary = tuple(dict.fromkeys(policy.vocabulary))
    if not vocabulary:
        raise EmptyVocabularyError("no words available; enable the built-in list or supply custom words")
    count = policy.word_count
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise InvalidArgumentError(f"word count must be an integer >= 1, got {count!r}")

    rng = resolve_source(source)
    parts: List[str] = []
    for i in range(count):
        word = vocabulary[rng.next_below(len(vocabulary))]
        parts.append(apply_capitalization(word, policy.capitalization, rng))
        if i == count - 1:
            break
        parts.append(resolve_separator(policy.separator, rng))
        if policy.inject_digit:
            parts.append(DIGIT_ALPHABET[rng.next_below(len(DIGIT_ALPHABET))])
        if policy.inject_symbol:
            parts.append(SYMBOL_ALPHABET[rng.next_below(len(SYMBOL_ALPHABET))])
    return "".join(parts)
