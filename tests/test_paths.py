"""Tests for pagebuild.rendering.paths."""

from pathlib import Path

from pagebuild.core.models import FileInfo
from pagebuild.rendering.paths import file_info, is_html, output_dir, output_file


class TestIsHtml:
    def test_html_suffix(self):
        assert is_html("templates/about.html")

    def test_bare_filename(self):
        assert is_html("index.html")

    def test_htm_excluded(self):
        assert not is_html("templates/about.htm")

    def test_uppercase_excluded(self):
        assert not is_html("templates/about.HTML")

    def test_extensionless_excluded(self):
        assert not is_html("templates/README")

    def test_other_suffix_after_html_excluded(self):
        assert not is_html("templates/about.html.bak")


class TestFileInfo:
    def test_name_and_extension(self):
        assert file_info("templates/about.html") == FileInfo(name="about", extension="html")

    def test_name_stops_at_first_dot(self):
        info = file_info("templates/about.page.html")
        assert info.name == "about"
        assert info.extension == "page"

    def test_no_dot(self):
        assert file_info("templates/README") == FileInfo(name="README", extension=None)

    def test_nested_directories_ignored(self):
        assert file_info("a/b/c/contact.html").name == "contact"


class TestOutputDir:
    def test_index_renders_into_dest_root(self, tmp_path: Path):
        assert output_dir(file_info("templates/index.html"), tmp_path) == tmp_path

    def test_named_page_gets_own_directory(self, tmp_path: Path):
        assert output_dir(file_info("templates/about.html"), tmp_path) == tmp_path / "about"

    def test_extension_and_directories_do_not_matter(self, tmp_path: Path):
        info = file_info("deep/nested/blog.page.html")
        assert output_dir(info, tmp_path) == tmp_path / "blog"

    def test_nested_index_still_maps_to_root(self, tmp_path: Path):
        assert output_dir(file_info("pages/sub/index.html"), tmp_path) == tmp_path

    def test_relative_dest_made_absolute(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert output_dir(FileInfo(name="about"), "build") == tmp_path / "build" / "about"

    def test_deterministic(self, tmp_path: Path):
        info = file_info("templates/about.html")
        assert output_dir(info, tmp_path) == output_dir(info, tmp_path)


class TestOutputFile:
    def test_index(self, tmp_path: Path):
        assert output_file("templates/index.html", tmp_path) == tmp_path / "index.html"

    def test_named(self, tmp_path: Path):
        assert output_file("templates/about.html", tmp_path) == tmp_path / "about" / "index.html"
