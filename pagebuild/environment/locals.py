"""Loading template locals from a JSON or YAML file."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml

from ..core.models import LoadedLocals, LocalsStatus

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}


class LocalsParseError(Exception):
    """Raised when an existing locals file cannot be parsed into a mapping."""


def _parse(path: Path) -> object:
    text = path.read_text(encoding="utf-8")
    if path.suffix in _YAML_SUFFIXES:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise LocalsParseError(f"Invalid YAML in {path}: {e}") from e
        return {} if data is None else data
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise LocalsParseError(f"Invalid JSON in {path}: {e}") from e


def load_locals(source: str | None, base_dir: Path | None = None) -> LoadedLocals:
    """Load template locals from ``source``.

    Args:
        source: Path to the locals file, or None when no locals are configured
        base_dir: Directory relative paths resolve against (default: cwd)

    Returns:
        LoadedLocals whose ``values`` is always a mapping; a missing file
        yields status NOT_FOUND with an empty mapping

    Raises:
        LocalsParseError: if the file exists but does not hold a mapping
    """
    if not source:
        return LoadedLocals(status=LocalsStatus.NOT_CONFIGURED)

    path = (base_dir or Path.cwd()) / source
    if not path.exists():
        logger.debug(f"Locals file not found, using empty locals: {path}")
        return LoadedLocals(status=LocalsStatus.NOT_FOUND, source=path)

    data = _parse(path)
    if not isinstance(data, dict):
        raise LocalsParseError(
            f"Locals in {path} must be an object, got {type(data).__name__}"
        )

    logger.debug(f"Loaded {len(data)} local(s) from {path}")
    return LoadedLocals(status=LocalsStatus.FOUND, values=data, source=path)
