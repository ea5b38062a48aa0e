"""
Collection and rendering of generated client code.
"""

import os
from dataclasses import dataclass
from pathlib import Path, PurePath

from statelydb_mcp.utils.logging import setup_logging

logger = setup_logging(__name__)

LANGUAGE_TAGS: dict[str, str] = {
    ".ts": "typescript",
    ".js": "javascript",
    ".py": "python",
    ".rb": "ruby",
    ".go": "go",
    ".json": "json",
    ".md": "markdown",
}


@dataclass
class CollectedFile:
    """A generated file read into memory.

    ``content`` is None for files that are not valid UTF-8 text.
    """

    path: str
    content: str | None
    size: int

    @property
    def is_binary(self) -> bool:
        return self.content is None


def language_tag(path: str) -> str:
    """Syntax tag for a fenced code block, derived from the file extension only."""
    return LANGUAGE_TAGS.get(PurePath(path).suffix, "")


def collect_files(root: Path) -> list[CollectedFile]:
    """Recursively read every regular file below root.

    Order follows directory enumeration order. Symlinks are skipped. A missing
    or empty root yields an empty list.

    Args:
        root: Directory to walk

    Returns:
        Collected files with root-relative POSIX paths
    """
    root = Path(root)
    if not root.is_dir():
        return []

    files: list[CollectedFile] = []
    _collect_into(root, root, files)
    logger.debug(f"Collected {len(files)} files from {root}")
    return files


def _collect_into(root: Path, directory: Path, files: list[CollectedFile]) -> None:
    with os.scandir(directory) as entries:
        for entry in entries:
            if entry.is_symlink():
                logger.debug(f"Skipping symlink: {entry.path}")
                continue

            entry_path = Path(entry.path)
            if entry.is_dir():
                _collect_into(root, entry_path, files)
            elif entry.is_file():
                data = entry_path.read_bytes()
                try:
                    content: str | None = data.decode("utf-8")
                except UnicodeDecodeError:
                    content = None
                files.append(CollectedFile(
                    path=entry_path.relative_to(root).as_posix(),
                    content=content,
                    size=len(data),
                ))


def render_files(files: list[CollectedFile], language: str) -> str:
    """Render collected files as labeled, syntax-tagged code blocks."""
    blocks = []
    for file in files:
        if file.is_binary:
            body = f"(binary file, {file.size} bytes, contents omitted)"
        else:
            body = f"```{language_tag(file.path)}\n{file.content}\n```"
        blocks.append(f"File: {file.path}\nContents:\n{body}")

    return f"Generated the following files for language {language}:\n\n" + "\n\n".join(blocks)
