"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import typer
from typing_extensions import Annotated

from ..core.config import resolve_config
from ..host import Builder, LocalPackage
from ..plugin import CONFIG_KEY, STAGE, register
from ..rendering.paths import is_html, output_file
from ..settings import get_settings
from .parsers import build_overrides, load_package

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="pagebuild",
    help="Compile Jinja2 HTML templates into a <dest>/<name>/index.html layout.",
)

ManifestOption = Annotated[
    Optional[Path],
    typer.Option(
        "--manifest",
        "-m",
        help="Package manifest (JSON or YAML). Default: $PAGEBUILD_MANIFEST or component.json.",
        metavar="PATH",
    ),
]
TemplateOption = Annotated[
    list[str],
    typer.Option(
        "--template",
        "-t",
        help="Template to compile, relative to the manifest. Repeatable; replaces the manifest list.",
        metavar="PATH",
    ),
]
DestOption = Annotated[
    str,
    typer.Option("--dest", help="Output root directory.", metavar="DIR"),
]
PartialsOption = Annotated[
    str,
    typer.Option("--partials", help="Partials root directory.", metavar="DIR"),
]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose or get_settings().verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )


def _prepare(
    manifest: Optional[Path],
    templates: list[str],
    dest: str,
    partials: str,
    locals_source: str = "",
    keep_going: bool = False,
) -> tuple[LocalPackage, dict[str, Any]]:
    settings = get_settings()
    package = load_package(manifest or settings.manifest)
    section = dict(package.config.get(settings.config_key) or {})
    section.update(
        build_overrides(templates, dest, partials, locals_source, keep_going)
    )
    package.config = {**package.config, CONFIG_KEY: section}
    return package, section


@app.command()
def build(
    manifest: ManifestOption = None,
    templates: TemplateOption = [],
    dest: DestOption = "",
    partials: PartialsOption = "",
    locals_source: Annotated[
        str,
        typer.Option(
            "--locals",
            help="JSON or YAML file with variables for every template.",
            metavar="PATH",
        ),
    ] = "",
    keep_going: Annotated[
        bool,
        typer.Option(
            "--keep-going",
            "-k",
            help="Render every template and report all failures at the end.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging."),
    ] = False,
) -> None:
    """Run the template compile pass once."""
    _configure_logging(verbose)
    logger.debug("Starting pagebuild")

    package, _ = _prepare(
        manifest, templates, dest, partials, locals_source, keep_going
    )

    builder = Builder()
    register(builder)
    try:
        builder.run(STAGE, package)
    except Exception as exc:
        logger.error(str(exc))
        raise typer.Exit(code=1) from exc


@app.command()
def targets(
    manifest: ManifestOption = None,
    templates: TemplateOption = [],
    dest: DestOption = "",
) -> None:
    """Print where each template would be written, without rendering."""
    _, section = _prepare(manifest, templates, dest, "")
    config = resolve_config(section)
    for template in config.templates or []:
        if is_html(template):
            typer.echo(f"{template} -> {output_file(template, config.dest)}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
