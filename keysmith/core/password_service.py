from __future__ import annotations

from keysmith.core import password_engine as engine
from keysmith.core.error_dialect import InvalidArgumentError
from keysmith.core.models import GenerationResult, PasswordPolicy, PasswordRequest
from keysmith.core.random_source import assert_csprng_ready


def generate_passwords(request: PasswordRequest) -> GenerationResult:
    if request.count <= 0:
        raise InvalidArgumentError("count must be > 0")
    if request.length <= 0:
        raise InvalidArgumentError("length must be > 0")
    try:
        assert_csprng_ready()
    except OSError as e:
        raise ValueError(str(e)) from e

    policy = PasswordPolicy.build(request.length, request.selected_classes())
    outputs = []
    for _ in range(request.count):
        try:
            outputs.append(engine.generate_password(policy))
        except OSError as e:
            raise ValueError(str(e)) from e
    return GenerationResult(outputs=tuple(outputs))
