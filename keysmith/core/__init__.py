"""Core generation engines, models, and service APIs for Keysmith."""

from __future__ import annotations


def generate_passwords(request):
    from keysmith.core.password_service import generate_passwords as _generate_passwords

    return _generate_passwords(request)


def generate_word_chains(request):
    from keysmith.core.word_chain_service import generate_word_chains as _generate_word_chains

    return _generate_word_chains(request)


__all__ = ["generate_passwords", "generate_word_chains"]
