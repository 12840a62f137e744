"""Mapping template source paths to their output locations."""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from ..core.models import FileInfo

HTML_SUFFIX = ".html"
OUTPUT_NAME = "index.html"


def is_html(path: str) -> bool:
    """Return True when ``path`` has exactly the ``.html`` suffix."""
    return PurePosixPath(path).suffix == HTML_SUFFIX


def file_info(path: str) -> FileInfo:
    """Split the last segment of ``path`` on dots.

    ``templates/about.page.html`` gives name ``about``, extension ``page``.
    """
    pieces = path.split("/")[-1].split(".")
    return FileInfo(
        name=pieces[0],
        extension=pieces[1] if len(pieces) > 1 else None,
    )


def output_dir(info: FileInfo, dest_root: str | Path) -> Path:
    """Directory a template renders into.

    ``index`` templates render into ``dest_root`` itself, everything else
    into ``dest_root/<name>``.
    """
    root = Path(dest_root).absolute()
    if info.name == "index":
        return root
    return root / info.name


def output_file(path: str, dest_root: str | Path) -> Path:
    return output_dir(file_info(path), dest_root) / OUTPUT_NAME
