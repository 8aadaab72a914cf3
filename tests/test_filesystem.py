"""Tests for pxblue_cli.toolbox.filesystem."""

from __future__ import annotations

from pathlib import Path

from pxblue_cli.toolbox.filesystem import ProjectFilesystem


class TestReadWrite:
    def test_paths_resolve_against_base(self, tmp_path: Path) -> None:
        fs = ProjectFilesystem(tmp_path)
        fs.write_text("demo/src/index.html", "<html/>")

        assert (tmp_path / "demo" / "src" / "index.html").read_text() == "<html/>"
        assert fs.is_file("demo/src/index.html")
        assert fs.is_dir("demo/src")
        assert not fs.exists("demo/missing")

    def test_json_uses_four_space_indent(self, tmp_path: Path) -> None:
        fs = ProjectFilesystem(tmp_path)
        fs.write_json("package.json", {"name": "demo", "scripts": {"a": "b"}})

        content = (tmp_path / "package.json").read_text()
        assert content.endswith("}\n")
        assert '\n    "name": "demo"' in content
        assert fs.read_json("package.json") == {"name": "demo", "scripts": {"a": "b"}}

    def test_append_starts_on_new_line(self, tmp_path: Path) -> None:
        fs = ProjectFilesystem(tmp_path)
        fs.write_text("build.gradle", "apply plugin: 'x'")
        fs.append_text("build.gradle", "apply from: 'y'")

        assert (tmp_path / "build.gradle").read_text() == "apply plugin: 'x'\napply from: 'y'\n"

    def test_append_creates_file(self, tmp_path: Path) -> None:
        fs = ProjectFilesystem(tmp_path)
        fs.append_text("new.txt", "line")
        assert (tmp_path / "new.txt").read_text() == "line\n"


class TestCopy:
    def test_tree_merges_into_existing_directory(self, tmp_path: Path) -> None:
        (tmp_path / "src" / "nested").mkdir(parents=True)
        (tmp_path / "src" / "a.txt").write_text("new a")
        (tmp_path / "src" / "nested" / "b.txt").write_text("b")
        (tmp_path / "dst").mkdir()
        (tmp_path / "dst" / "a.txt").write_text("old a")
        (tmp_path / "dst" / "keep.txt").write_text("keep")

        ProjectFilesystem(tmp_path).copy("src", "dst")

        assert (tmp_path / "dst" / "a.txt").read_text() == "new a"
        assert (tmp_path / "dst" / "nested" / "b.txt").read_text() == "b"
        assert (tmp_path / "dst" / "keep.txt").read_text() == "keep"

    def test_no_overwrite_keeps_existing_files(self, tmp_path: Path) -> None:
        (tmp_path / "a.txt").write_text("new")
        (tmp_path / "b.txt").write_text("old")

        ProjectFilesystem(tmp_path).copy("a.txt", "b.txt", overwrite=False)

        assert (tmp_path / "b.txt").read_text() == "old"

    def test_single_file_into_new_directory(self, tmp_path: Path) -> None:
        (tmp_path / "App.tsx").write_text("app")
        ProjectFilesystem(tmp_path).copy("App.tsx", "demo/App.tsx")
        assert (tmp_path / "demo" / "App.tsx").read_text() == "app"


class TestRemove:
    def test_removes_files_and_trees(self, tmp_path: Path) -> None:
        fs = ProjectFilesystem(tmp_path)
        fs.write_text("tree/deep/file.txt", "x")
        fs.write_text("single.txt", "x")

        fs.remove("tree")
        fs.remove("single.txt")

        assert not (tmp_path / "tree").exists()
        assert not (tmp_path / "single.txt").exists()

    def test_missing_path_is_ignored(self, tmp_path: Path) -> None:
        ProjectFilesystem(tmp_path).remove("nothing-here")
