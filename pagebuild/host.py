"""Minimal builder host for running the plugin outside a build tool."""

from __future__ import annotations

import json
import logging
from collections import defaultdict
from pathlib import Path
from typing import Any, Callable, Optional

import yaml

logger = logging.getLogger(__name__)

Next = Callable[..., None]
Hook = Callable[[Any, Next], None]


class LocalPackage:
    """A package rooted at a directory, configured by a manifest mapping."""

    def __init__(self, root: Path, config: dict[str, Any] | None = None) -> None:
        self.root = Path(root).absolute()
        self.config: dict[str, Any] = config or {}

    @classmethod
    def from_file(cls, manifest: Path) -> "LocalPackage":
        """Load a JSON or YAML manifest; the package root is its directory."""
        text = manifest.read_text(encoding="utf-8")
        if manifest.suffix in {".yaml", ".yml"}:
            config = yaml.safe_load(text) or {}
        else:
            config = json.loads(text)
        return cls(manifest.parent, config)

    def path(self, relative: str) -> Path:
        return self.root / relative


class Builder:
    """Stage-keyed hook registry."""

    def __init__(self) -> None:
        self.hooks: dict[str, list[Hook]] = defaultdict(list)

    def hook(self, stage: str, fn: Hook) -> None:
        self.hooks[stage].append(fn)

    def run(self, stage: str, package: Any) -> None:
        """Run every hook registered for ``stage`` in order.

        Each hook must call ``next`` exactly once. The first error handed to
        ``next`` stops the chain and is raised.
        """
        for fn in self.hooks.get(stage, []):
            calls: list[Optional[BaseException]] = []

            def _next(err: Optional[BaseException] = None) -> None:
                calls.append(err)

            fn(package, _next)
            if len(calls) != 1:
                raise RuntimeError(
                    f"Hook {getattr(fn, '__name__', fn)!r} for {stage!r} "
                    f"called next {len(calls)} time(s)"
                )
            if calls[0] is not None:
                raise calls[0]
            logger.debug(f"Hook {getattr(fn, '__name__', fn)!r} finished")
