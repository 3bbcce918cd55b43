from __future__ import annotations

from typing import List

from keysmith.core import word_chain_engine as engine
from keysmith.core.error_dialect import EmptyVocabularyError, InvalidArgumentError
from keysmith.core.models import (
    CapitalizationMode,
    GenerationResult,
    SeparatorSpec,
    WordChainPolicy,
    WordChainRequest,
)
from keysmith.core.random_source import assert_csprng_ready
from keysmith.core.vocabulary import build_vocabulary, load_wordlist_file, split_words


def _resolve_capitalization(name: str) -> CapitalizationMode:
    try:
        return CapitalizationMode(name.strip().lower())
    except ValueError as exc:
        raise InvalidArgumentError(f"unknown capitalization mode: {name!r}") from exc


def _collect_file_words(paths: tuple[str, ...]) -> List[List[str]]:
    sources = []
    for path in paths:
        if not path.strip():
            continue
        sources.append(load_wordlist_file(path))
    return sources


def build_policy(request: WordChainRequest) -> WordChainPolicy:
    if request.word_count <= 0:
        raise InvalidArgumentError("word count must be > 0")
    separator = SeparatorSpec.from_name(request.separator)
    capitalization = _resolve_capitalization(request.capitalization)
    vocabulary = build_vocabulary(
        use_default=request.use_default_list,
        custom_words=split_words(request.custom_words),
        extra_sources=_collect_file_words(request.wordlist_files),
    )
    if not vocabulary:
        raise EmptyVocabularyError(
            "no words available; enable the built-in list or provide a non-empty custom list"
        )
    return WordChainPolicy(
        word_count=request.word_count,
        vocabulary=vocabulary,
        separator=separator,
        capitalization=capitalization,
        inject_digit=request.inject_digit,
        inject_symbol=request.inject_symbol,
    )


def generate_word_chains(request: WordChainRequest) -> GenerationResult:
    if request.count <= 0:
        raise InvalidArgumentError("count must be > 0")
    policy = build_policy(request)
    try:
        assert_csprng_ready()
    except OSError as e:
        raise ValueError(str(e)) from e

    outputs = []
    for _ in range(request.count):
        try:
            outputs.append(engine.generate_word_chain(policy))
        except OSError as e:
            raise ValueError(str(e)) from e
    return GenerationResult(outputs=tuple(outputs), vocabulary_size=len(policy.vocabulary))
