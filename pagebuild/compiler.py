"""Batch compilation of HTML page templates."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Protocol

from .core.config import resolve_config
from .core.models import CompileReport, TemplateOutcome
from .environment.locals import load_locals
from .rendering.engine import RenderContext
from .rendering.io import atomic_write_text, ensure_dir, read_source
from .rendering.paths import OUTPUT_NAME, file_info, is_html, output_dir

logger = logging.getLogger(__name__)


class Package(Protocol):
    config: Mapping[str, Any]

    def path(self, relative: str) -> Path: ...


class TemplateCompileError(Exception):
    """Raised when a single template cannot be read, rendered or written."""

    def __init__(self, template: str, cause: Exception) -> None:
        super().__init__(f"Failed to compile {template}: {cause}")
        self.template = template
        self.cause = cause


class CompileError(Exception):
    """Raised after a keep-going pass in which one or more templates failed."""

    def __init__(self, report: CompileReport) -> None:
        failed = report.failed
        lines = [f"{len(failed)} template(s) failed to compile:"]
        lines += [f"  {o.template}: {o.error}" for o in failed]
        super().__init__("\n".join(lines))
        self.report = report


def compile_one(
    package: Package,
    template: str,
    context: RenderContext,
    local_vars: Mapping[str, Any],
    dest_root: Path,
) -> Path:
    """Render one template into ``<dest>/<name>/index.html``.

    Returns:
        Output file path
    """
    logger.debug(f"Compiling: {template}")

    target_dir = output_dir(file_info(template), dest_root)
    ensure_dir(target_dir)

    resolved = package.path(template)
    source = read_source(resolved)
    rendered = context.render(source, resolved, local_vars)

    target = target_dir / OUTPUT_NAME
    atomic_write_text(target, rendered)
    logger.info(f"complete {template}")
    return target


def compile_templates(
    package: Package,
    caller_config: Mapping[str, Any] | None = None,
    *,
    base_dir: Path | None = None,
) -> CompileReport:
    """Run one compile pass over the configured templates.

    Args:
        package: Resolves template paths to readable files
        caller_config: Overrides merged over the default configuration
        base_dir: Directory ``dest``, ``partials`` and ``locals-source``
            resolve against (default: cwd)

    Returns:
        Report of every template attempted

    Raises:
        LocalsParseError: if the locals file is not valid, before any render
        TemplateCompileError: on the first failure in fail-fast mode
        CompileError: after the pass when any template failed in keep-going mode
    """
    base = base_dir or Path.cwd()
    config = resolve_config(caller_config)
    loaded = load_locals(config.locals_source, base)
    context = RenderContext.from_config(config, base)

    report = CompileReport()
    if not config.templates:
        logger.debug("No templates to compile.")
        return report

    dest_root = base / config.dest
    files = [t for t in config.templates if is_html(t)]
    logger.info(f"Compiling {len(files)} template(s) into {dest_root}")

    for template in files:
        try:
            target = compile_one(package, template, context, loaded.values, dest_root)
        except Exception as exc:
            if config.fail_fast:
                raise TemplateCompileError(template, exc) from exc
            logger.error(f"Failed to compile {template}: {exc}")
            report.outcomes.append(TemplateOutcome(template=template, error=exc))
            continue
        report.outcomes.append(TemplateOutcome(template=template, output_file=target))

    if not report.ok:
        raise CompileError(report)

    logger.info(f"Successfully compiled {len(report.written)} template(s)")
    return report
