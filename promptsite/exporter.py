"""Export helpers for generated file trees.

Packs a file tree into a ZIP archive, writes it out as a directory, renders a
box-drawing listing of it and summarises its size. None of these functions
modify the tree they are given.
"""

from __future__ import annotations

import asyncio
import io
import json
import zipfile
from datetime import datetime, timezone
from pathlib import Path, PurePosixPath

from promptsite.utils import format_bytes, slugify

FileTree = dict[str, str]

# File extension -> icon shown in the tree listing.
FILE_ICONS: dict[str, str] = {
    "tsx": "⚛️",
    "jsx": "⚛️",
    "ts": "\U0001F4D8",
    "js": "\U0001F4D2",
    "json": "\U0001F4CB",
    "css": "\U0001F3A8",
    "html": "\U0001F310",
    "md": "\U0001F4DD",
    "yml": "⚙️",
    "yaml": "⚙️",
    "env": "\U0001F512",
    "example": "\U0001F512",
    "gitignore": "\U0001F648",
    "svg": "\U0001F5BC️",
    "png": "\U0001F5BC️",
    "jpg": "\U0001F5BC️",
}
DEFAULT_FILE_ICON = "\U0001F4C4"
FOLDER_ICON = "\U0001F4C1"


class ExportError(Exception):
    """Raised when an archive or directory cannot be written."""


# ---------------------------------------------------------------------------
# Archives
# ---------------------------------------------------------------------------


def _safe_relative(path: str) -> PurePosixPath:
    """Validate that *path* is a relative POSIX path that stays inside its root."""
    rel = PurePosixPath(path)
    if not path or rel.is_absolute() or ".." in rel.parts:
        raise ExportError(f"Refusing to export unsafe path: {path!r}")
    return rel


def zip_file_tree(tree: FileTree) -> bytes:
    """Pack *tree* into an in-memory ZIP archive.

    Entries use DEFLATE at compression level 9 and are written in sorted
    path order. Contents are stored as UTF-8.

    Raises:
        ExportError: If a path is absolute or escapes the archive root.
    """
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=9) as archive:
        for path in sorted(tree):
            rel = _safe_relative(path)
            archive.writestr(rel.as_posix(), tree[path].encode("utf-8"))
    return buffer.getvalue()


def export_to_zip(tree: FileTree, site_name: str, output_dir: str | Path) -> Path:
    """Write *tree* to ``<output_dir>/<slug(site_name)>.zip``.

    Args:
        tree: File tree to archive.
        site_name: Display name; its slug becomes the file name.
        output_dir: Target directory, created if missing.

    Returns:
        Path to the written archive.

    Raises:
        ExportError: If the archive cannot be built or written.
    """
    target = Path(output_dir) / f"{slugify(site_name)}.zip"
    data = zip_file_tree(tree)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
    except OSError as exc:
        raise ExportError(f"Could not write {target}: {exc}") from exc
    return target


# ---------------------------------------------------------------------------
# Directory output
# ---------------------------------------------------------------------------


async def write_file_tree(tree: FileTree, output_dir: str | Path) -> list[Path]:
    """Write every file in *tree* below *output_dir*.

    Parent directories are created as needed. Existing files are overwritten.

    Returns:
        The written paths, in sorted order.

    Raises:
        ExportError: On unsafe paths or filesystem errors.
    """
    root = Path(output_dir)
    written: list[Path] = []
    for path in sorted(tree):
        out = root.joinpath(*_safe_relative(path).parts)
        try:
            await asyncio.to_thread(_write_file, out, tree[path])
        except OSError as exc:
            raise ExportError(f"Could not write {out}: {exc}") from exc
        written.append(out)
    return written


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8", newline="\n")


# ---------------------------------------------------------------------------
# Summaries
# ---------------------------------------------------------------------------


def _file_icon(filename: str) -> str:
    ext = filename.rsplit(".", 1)[-1].lower()
    return FILE_ICONS.get(ext, DEFAULT_FILE_ICON)


def file_tree_preview(tree: FileTree, icons: bool = True) -> str:
    """Render *tree* as a box-drawing listing, folders before files.

    Example (``icons=False``)::

        ├── src/
        │   └── App.tsx
        └── package.json
    """

    def build(items: list[str], prefix: str) -> list[str]:
        groups: dict[str, list[str]] = {}
        files: list[str] = []
        for item in items:
            head, sep, rest = item.partition("/")
            if sep:
                groups.setdefault(head, []).append(rest)
            else:
                files.append(item)

        lines: list[str] = []
        folders = sorted(groups)
        for index, folder in enumerate(folders):
            is_last = index == len(folders) - 1 and not files
            label = f"{FOLDER_ICON} {folder}/" if icons else f"{folder}/"
            lines.append(f"{prefix}{'└──' if is_last else '├──'} {label}")
            lines.extend(build(groups[folder], prefix + ("    " if is_last else "│   ")))

        files.sort()
        for index, name in enumerate(files):
            is_last = index == len(files) - 1
            label = f"{_file_icon(name)} {name}" if icons else name
            lines.append(f"{prefix}{'└──' if is_last else '├──'} {label}")
        return lines

    return "\n".join(build(sorted(tree), ""))


def calculate_project_size(tree: FileTree) -> int:
    """Return the total UTF-8 size of all file contents, in bytes."""
    return sum(len(content.encode("utf-8")) for content in tree.values())


def generate_json_output(tree: FileTree, site_name: str) -> str:
    """Serialise *tree* with a small summary header as indented JSON."""
    output = {
        "status": "success",
        "site_name": site_name,
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "file_count": len(tree),
        "total_size": format_bytes(calculate_project_size(tree)),
        "file_tree": tree,
    }
    return json.dumps(output, indent=2, ensure_ascii=False)
