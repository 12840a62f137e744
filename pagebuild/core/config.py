"""Merging caller configuration over the compiler defaults."""

from __future__ import annotations

from typing import Any, Mapping

from .models import CompilerConfig

DEFAULT_CONFIG: dict[str, Any] = {
    "partials": "templates/partials",
    "dest": "build",
}


def resolve_config(caller: Mapping[str, Any] | None = None) -> CompilerConfig:
    """Shallow-merge ``caller`` over :data:`DEFAULT_CONFIG`.

    Keys present in ``caller`` replace the default value entirely.

    Raises:
        pydantic.ValidationError: if a value has the wrong type
    """
    merged = {**DEFAULT_CONFIG, **(caller or {})}
    return CompilerConfig.model_validate(merged)
