#!/usr/bin/env python3
r"""
password_engine.py - character-class password generator (os.urandom)

One character is drawn from each selected class so every class is present,
the rest is filled from the pooled alphabet, and the whole collection is
shuffled so guaranteed characters carry no positional signal.

When ``length`` is smaller than the number of selected classes, only the
first ``length`` guaranteed characters (in class enumeration order) are kept
before shuffling. Some selected classes are then absent from the output.
"""
from __future__ import annotations

from typing import List, Optional

from keysmith.core.charsets import canonical_classes, pooled_alphabet
from keysmith.core.error_dialect import InvalidArgumentError, NoClassSelectedError
from keysmith.core.models import PasswordPolicy
from keysmith.core.random_source import RandomSource, resolve_source
from keysmith.core.shuffler import shuffle


def _pick(alphabet: str, rng: RandomSource) -> str:
    return alphabet[rng.next_below(len(alphabet))]


def generate_password(policy: PasswordPolicy, source: Optional[RandomSource] = None) -> str:
    classes = canonical_classes(policy.classes)
    if not classes:
        raise NoClassSelectedError("select at least one character class")
    if isinstance(policy.length, bool) or not isinstance(policy.length, int) or policy.length < 1:
        raise InvalidArgumentError(f"length must be an integer >= 1, got {policy.length!r}")

    rng = resolve_source(source)
    pool = pooled_alphabet(classes)

    chars: List[str] = [_pick(cls.alphabet, rng) for cls in classes]
    if policy.length < len(chars):
        del chars[policy.length:]
    while len(chars) < policy.length:
        chars.append(_pick(pool, rng))

    return "".join(shuffle(chars, rng))
