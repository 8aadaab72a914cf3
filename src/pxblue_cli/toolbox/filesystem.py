"""Filesystem facade over the directory pxb was invoked from.

Relative paths resolve against ``base``; JSON is written with the
4-space indent the generated projects use.
"""

from __future__ import annotations

import json
import shutil
from pathlib import Path
from typing import Any


class ProjectFilesystem:
    """Read, write, copy and remove files under a base directory."""

    def __init__(self, base: Path | str | None = None) -> None:
        self.base = Path(base) if base is not None else Path.cwd()

    def path(self, *parts: str | Path) -> Path:
        """Resolve path parts against the base directory."""
        return self.base.joinpath(*parts)

    def exists(self, path: str | Path) -> bool:
        return self.path(path).exists()

    def is_file(self, path: str | Path) -> bool:
        return self.path(path).is_file()

    def is_dir(self, path: str | Path) -> bool:
        return self.path(path).is_dir()

    def read_text(self, path: str | Path) -> str:
        return self.path(path).read_text(encoding="utf-8")

    def read_json(self, path: str | Path) -> Any:
        return json.loads(self.read_text(path))

    def write_text(self, path: str | Path, content: str) -> None:
        target = self.path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")

    def write_json(self, path: str | Path, data: Any, indent: int = 4) -> None:
        self.write_text(path, json.dumps(data, indent=indent, ensure_ascii=False) + "\n")

    def append_text(self, path: str | Path, content: str) -> None:
        """Append content on a new line, creating the file if needed."""
        target = self.path(path)
        existing = target.read_text(encoding="utf-8") if target.exists() else ""
        if existing and not existing.endswith("\n"):
            existing += "\n"
        self.write_text(path, existing + content + "\n")

    def mkdir(self, path: str | Path) -> None:
        self.path(path).mkdir(parents=True, exist_ok=True)

    def copy(self, src: str | Path, dst: str | Path, overwrite: bool = True) -> None:
        """Copy a file or a directory tree.

        Directory trees are merged into an existing destination. When
        ``overwrite`` is False, files that already exist are kept.
        """
        source = self.path(src)
        target = self.path(dst)
        if source.is_dir():
            for item in source.rglob("*"):
                relative = item.relative_to(source)
                if item.is_dir():
                    (target / relative).mkdir(parents=True, exist_ok=True)
                    continue
                self._copy_file(item, target / relative, overwrite)
        else:
            self._copy_file(source, target, overwrite)

    @staticmethod
    def _copy_file(source: Path, target: Path, overwrite: bool) -> None:
        if target.exists() and not overwrite:
            return
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source, target)

    def remove(self, path: str | Path) -> None:
        """Remove a file or directory tree. Missing paths are ignored."""
        target = self.path(path)
        if target.is_dir() and not target.is_symlink():
            shutil.rmtree(target)
        elif target.exists() or target.is_symlink():
            target.unlink()
