"""Domain models for template compilation configuration and results."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CompilerConfig(BaseModel):
    """Configuration for one compile pass."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    partials: str = Field(
        default="templates/partials", description="Root directory for partials"
    )
    dest: str = Field(default="build", description="Root output directory")
    templates: list[str] | None = Field(
        default=None, description="Template paths relative to the package"
    )
    locals_source: str | None = Field(
        default=None,
        alias="locals-source",
        description="JSON or YAML file supplying template locals",
    )
    fail_fast: bool = Field(
        default=True,
        alias="fail-fast",
        description="Abort on the first failing template",
    )
    autoescape: bool = Field(default=True, description="HTML-escape substitutions")
    strict_undefined: bool = Field(
        default=False,
        alias="strict-undefined",
        description="Raise on undefined template variables",
    )


class FileInfo(BaseModel):
    """Name and extension parsed from a template's last path segment."""

    model_config = ConfigDict(frozen=True)

    name: str
    extension: str | None = None


class LocalsStatus(str, enum.Enum):
    NOT_CONFIGURED = "not_configured"
    NOT_FOUND = "not_found"
    FOUND = "found"


@dataclass(frozen=True)
class LoadedLocals:
    status: LocalsStatus
    values: dict[str, Any] = field(default_factory=dict)
    source: Path | None = None


@dataclass(frozen=True)
class TemplateOutcome:
    template: str
    output_file: Path | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class CompileReport:
    """Ordered per-template outcomes of a compile pass."""

    outcomes: list[TemplateOutcome] = field(default_factory=list)

    @property
    def written(self) -> list[Path]:
        return [o.output_file for o in self.outcomes if o.output_file is not None]

    @property
    def failed(self) -> list[TemplateOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def ok(self) -> bool:
        return not self.failed
