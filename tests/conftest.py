import json
from pathlib import Path
from typing import Callable

import pytest

from pagebuild.host import LocalPackage


@pytest.fixture
def site(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A package directory with two pages and a header partial; cwd is the root."""
    templates = tmp_path / "templates"
    (templates / "partials").mkdir(parents=True)
    (templates / "partials" / "header.html").write_text("<header>Site</header>\n")
    (templates / "index.html").write_text(
        '{% include "header.html" %}<h1>{{ title | default("Home") }}</h1>\n'
    )
    (templates / "about.html").write_text(
        '{% include "header.html" %}<p>About {{ company }}</p>\n'
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def package(site: Path) -> LocalPackage:
    return LocalPackage(site)


@pytest.fixture
def write_json() -> Callable[[Path, object], Path]:
    def _write(path: Path, data: object) -> Path:
        path.write_text(json.dumps(data))
        return path

    return _write


@pytest.fixture
def tree() -> Callable[[Path], set[str]]:
    """Relative POSIX paths of every file under a directory."""

    def _tree(root: Path) -> set[str]:
        return {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()}

    return _tree
