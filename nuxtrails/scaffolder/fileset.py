"""In-memory set of generated files and its flush/rollback to disk.

Each generator builds a ``GeneratedFileSet`` (relative path -> text) and
flushes it under the project root.  Flushing remembers what it replaced so a
failed cascade can put the tree back the way it found it.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path

from nuxtrails.utils import write_text


@dataclass
class GeneratedFileSet:
    """Files produced by one generator stage.

    Attributes:
        root: Project root the relative paths are resolved against.
        files: Mapping of project-relative POSIX path to file content.
    """

    root: Path
    files: dict[str, str] = field(default_factory=dict)
    _previous: dict[Path, str | None] = field(default_factory=dict, init=False, repr=False)
    _created_dirs: list[Path] = field(default_factory=list, init=False, repr=False)

    def add(self, relative_path: str, content: str) -> None:
        self.files[relative_path] = content

    def paths(self) -> list[Path]:
        """Absolute paths of every file in the set, in insertion order."""
        return [self.root / rel for rel in self.files]

    async def flush(self) -> list[Path]:
        """Write every file, overwriting existing ones.

        Returns:
            The written paths, in insertion order.
        """
        return await asyncio.to_thread(self._flush_sync)

    async def rollback(self) -> None:
        """Undo :meth:`flush`: restore overwritten files, delete new ones."""
        await asyncio.to_thread(self._rollback_sync)

    # -- Internal helpers --------------------------------------------------

    def _flush_sync(self) -> list[Path]:
        written: list[Path] = []
        for path, content in zip(self.paths(), self.files.values()):
            self._remember(path)
            write_text(path, content)
            written.append(path)
        return written

    def _remember(self, path: Path) -> None:
        if path not in self._previous:
            self._previous[path] = (
                path.read_text(encoding="utf-8") if path.exists() else None
            )
        parent = path.parent
        missing: list[Path] = []
        while not parent.exists():
            missing.append(parent)
            parent = parent.parent
        self._created_dirs.extend(missing)

    def _rollback_sync(self) -> None:
        for path, previous in reversed(list(self._previous.items())):
            if previous is None:
                # is_file() is also False when a parent turned out to be a file
                if path.is_file():
                    path.unlink()
            else:
                path.write_text(previous, encoding="utf-8")
        # Deepest directories first
        for directory in sorted(set(self._created_dirs), key=lambda p: len(p.parts), reverse=True):
            if directory.is_dir() and not any(directory.iterdir()):
                directory.rmdir()
        self._previous.clear()
        self._created_dirs.clear()
