"""Builder plugin hooking template compilation into "before scripts"."""

from __future__ import annotations

import logging
from typing import Any, Callable

from .compiler import Package, compile_templates

logger = logging.getLogger(__name__)

STAGE = "before scripts"
CONFIG_KEY = "pagebuild"


def build_templates(package: Package, next: Callable[..., None]) -> None:
    """Compile the package's templates, then call ``next`` exactly once."""
    logger.debug("building templates")
    try:
        compile_templates(package, package.config.get(CONFIG_KEY))
    except Exception as exc:
        next(exc)
        return
    next()


def register(builder: Any) -> None:
    logger.info("Compiling HTML Templates")
    builder.hook(STAGE, build_templates)
