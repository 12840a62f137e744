"""CLI argument parsers and validators."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import typer
import yaml

from ..host import LocalPackage


def load_package(manifest: Path) -> LocalPackage:
    """Load the package manifest, or an empty package when it is absent."""
    if not manifest.exists():
        return LocalPackage(Path.cwd())
    try:
        return LocalPackage.from_file(manifest)
    except (ValueError, yaml.YAMLError) as e:
        raise typer.BadParameter(f"Invalid manifest {manifest}: {e}") from e


def parse_template(value: str) -> str:
    """Validate a --template value as a relative, non-empty path."""
    if not value.strip():
        raise typer.BadParameter("Template path must not be empty")
    if Path(value).is_absolute():
        raise typer.BadParameter(f"Template path must be relative, got: {value!r}")
    return value


def build_overrides(
    templates: list[str],
    dest: str,
    partials: str,
    locals_source: str,
    keep_going: bool,
) -> dict[str, Any]:
    """Collect the options given on the command line as config overrides."""
    overrides: dict[str, Any] = {}
    if templates:
        overrides["templates"] = [parse_template(t) for t in templates]
    if dest:
        overrides["dest"] = dest
    if partials:
        overrides["partials"] = partials
    if locals_source:
        overrides["locals-source"] = locals_source
    if keep_going:
        overrides["fail-fast"] = False
    return overrides
