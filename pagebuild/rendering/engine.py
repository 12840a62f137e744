"""Template rendering engine."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    Undefined,
)

from ..core.models import CompilerConfig

logger = logging.getLogger(__name__)


class RenderContext:
    """Jinja2 environment shared by every render of one compile pass.

    Includes, imports and ``extends`` resolve against the partials root.
    """

    def __init__(
        self,
        partials: str | Path,
        *,
        autoescape: bool = True,
        strict_undefined: bool = False,
    ) -> None:
        self.partials = Path(partials).absolute()
        self.env = Environment(
            loader=FileSystemLoader(str(self.partials)),
            undefined=StrictUndefined if strict_undefined else Undefined,
            autoescape=autoescape,
            keep_trailing_newline=True,
        )
        logger.debug(f"Partials root: {self.partials}")

    @classmethod
    def from_config(
        cls, config: CompilerConfig, base_dir: Path | None = None
    ) -> "RenderContext":
        return cls(
            (base_dir or Path.cwd()) / config.partials,
            autoescape=config.autoescape,
            strict_undefined=config.strict_undefined,
        )

    def compile(self, source: str, filename: str | Path) -> Template:
        """Compile template source, tagging it with ``filename`` for errors.

        Raises:
            jinja2.TemplateSyntaxError: if the source is malformed
        """
        filename = str(filename)
        code = self.env.compile(source, name=Path(filename).name, filename=filename)
        return self.env.template_class.from_code(
            self.env, code, self.env.make_globals(None)
        )

    def render(
        self,
        source: str,
        filename: str | Path,
        local_vars: Mapping[str, Any] | None = None,
    ) -> str:
        """Render template source with the given locals.

        Raises:
            jinja2.TemplateSyntaxError: on malformed source
            jinja2.TemplateNotFound: when an included partial is missing
        """
        template = self.compile(source, filename)
        # Context names must be strings; YAML allows int and bool keys.
        context = {str(k): v for k, v in (local_vars or {}).items()}
        return template.render(context)
