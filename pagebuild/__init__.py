"""Pagebuild - HTML template compiler plugin.

Renders Jinja2 page templates into a ``<dest>/<name>/index.html`` layout
during a builder's "before scripts" stage.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .compiler import CompileError, TemplateCompileError, compile_templates
from .plugin import build_templates, register

__all__ = [
    "CompileError",
    "TemplateCompileError",
    "build_templates",
    "compile_templates",
    "register",
]
