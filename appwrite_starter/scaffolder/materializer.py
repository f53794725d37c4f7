"""Template tree materialization.

Walks a template directory, substitutes placeholders in every relative path
and in every UTF-8 file, and writes the result below a destination directory.
Binary files are copied byte-for-byte. Blocking filesystem calls run in worker
threads via ``asyncio.to_thread``; files are processed one after another and
the first failure aborts the run.

Files written before a failure stay on disk: there is no rollback.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable, Mapping
from pathlib import Path

from .templates import TemplateRenderer, is_text


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Base class for scaffolding failures."""

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(message)


class DestinationNotEmptyError(ScaffoldError):
    """Raised when the project directory already contains entries."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(path, f"{path} is not empty.")


class DirectoryCreationError(ScaffoldError):
    """Raised when a target directory cannot be created."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(path, f"Cannot create directory with the path {path}")


class UnsafeTargetPathError(ScaffoldError):
    """Raised when a rendered path would land outside the destination."""

    def __init__(self, path: str | Path, destination: str | Path) -> None:
        self.destination = Path(destination)
        super().__init__(path, f"Rendered path {path} escapes {destination}")


# ---------------------------------------------------------------------------
# Directory walker
# ---------------------------------------------------------------------------


def walk_files(root: str | Path) -> list[Path]:
    """Return every regular file below *root*, in sorted order.

    Directories are descended into but never returned. Symlinked directories
    are followed; a symlink loop is not detected and ends in an ``OSError``.

    Raises:
        FileNotFoundError: If *root* does not exist.
        NotADirectoryError: If *root* is a file.
        PermissionError: If a directory cannot be listed.
    """
    files: list[Path] = []
    for entry in sorted(Path(root).iterdir()):
        if entry.is_dir():
            files.extend(walk_files(entry))
        else:
            files.append(entry)
    return files


# ---------------------------------------------------------------------------
# Target materializer
# ---------------------------------------------------------------------------


def prepare_destination(destination: str | Path) -> Path:
    """Ensure *destination* exists and is empty.

    Creates the directory (and its parents) when absent.

    Raises:
        DestinationNotEmptyError: If the directory holds at least one entry.
        DirectoryCreationError: If the directory cannot be created, or if
            *destination* is an existing file.
    """
    path = Path(destination)
    if path.exists():
        if not path.is_dir():
            raise DirectoryCreationError(path)
        if any(path.iterdir()):
            raise DestinationNotEmptyError(path)
        return path

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreationError(path) from exc
    return path


def write_file(target: Path, content: bytes) -> Path:
    """Create the parent directories of *target* and write *content* to it.

    An existing file at *target* is overwritten.
    """
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreationError(target.parent) from exc
    target.write_bytes(content)
    return target


def resolve_target(
    destination: Path,
    relative_path: str,
    context: Mapping[str, str],
    renderer: TemplateRenderer,
) -> Path:
    """Render *relative_path* and join it onto *destination*.

    Raises:
        UnsafeTargetPathError: If the rendered path resolves outside
            *destination*.
    """
    target = destination / renderer.render_path(relative_path, context)
    if not target.resolve().is_relative_to(destination.resolve()):
        raise UnsafeTargetPathError(target, destination)
    return target


def _render_file(source: Path, target: Path, context: Mapping[str, str], renderer: TemplateRenderer) -> Path:
    """Synchronous helper: read *source*, render it if textual, write *target*."""
    content = source.read_bytes()
    if is_text(content):
        content = renderer.render_string(content.decode("utf-8"), context).encode("utf-8")
    return write_file(target, content)


async def materialize_file(
    source: Path,
    target: Path,
    context: Mapping[str, str],
    renderer: TemplateRenderer,
) -> Path:
    """Render one template file to *target*."""
    return await asyncio.to_thread(_render_file, source, target, context, renderer)


# ---------------------------------------------------------------------------
# Orchestration
# ---------------------------------------------------------------------------


async def copy_tree(
    template_root: str | Path,
    destination: str | Path,
    context: Mapping[str, str],
    *,
    renderer: TemplateRenderer | None = None,
) -> list[Path]:
    """Render every file under *template_root* into *destination*.

    Unlike :func:`materialize` this does not check that *destination* is
    empty; existing files at the rendered paths are overwritten.

    Returns:
        The written paths, in walk order.
    """
    renderer = renderer or TemplateRenderer()
    root = Path(template_root)
    out_base = Path(destination)

    sources = await asyncio.to_thread(walk_files, root)
    written: list[Path] = []
    for source in sources:
        relative = source.relative_to(root).as_posix()
        target = resolve_target(out_base, relative, context, renderer)
        written.append(await materialize_file(source, target, context, renderer))
    return written


async def materialize(
    template_root: str | Path,
    destination: str | Path,
    context: Mapping[str, str],
    *,
    renderer: TemplateRenderer | None = None,
) -> list[Path]:
    """Instantiate the template at *template_root* into *destination*.

    The destination must be empty or absent; it is created when absent. Every
    file of the template is written at its substituted relative path, with
    placeholders in textual content substituted from *context*.

    Args:
        template_root: Directory tree to copy. Never modified.
        destination: Project directory to populate.
        context: Placeholder name -> value, constant for the whole run.
        renderer: Optional renderer to reuse across runs.

    Returns:
        Every written path, once all files have been materialized.

    Raises:
        DestinationNotEmptyError: *destination* already has entries. Nothing
            is written in that case.
        DirectoryCreationError: A directory could not be created.
        UnsafeTargetPathError: A rendered path escapes *destination*.
        OSError: A template file could not be read or a target written.
    """
    await asyncio.to_thread(prepare_destination, destination)
    return await copy_tree(template_root, destination, context, renderer=renderer)


async def copy_services(
    project_dir: str | Path,
    services: Iterable[str],
    context: Mapping[str, str],
    *,
    services_root: str | Path,
    renderer: TemplateRenderer | None = None,
) -> list[Path]:
    """Copy the Appwrite client modules for *services* into the project.

    ``appwrite.ts`` (the shared client) is always copied; each selected
    service adds ``<service>.ts``. Everything lands in ``src/appwrite``.

    Raises:
        ValueError: If a service has no module under *services_root*. Nothing
            is written in that case.
    """
    renderer = renderer or TemplateRenderer()
    root = Path(services_root)
    out_base = Path(project_dir) / "src" / "appwrite"

    names = ["appwrite", *[name for name in services if name != "appwrite"]]
    sources = [root / f"{name}.ts" for name in names]
    missing = [source.stem for source in sources if not source.is_file()]
    if missing:
        raise ValueError(f"Unknown Appwrite service(s): {', '.join(missing)}")

    written: list[Path] = []
    for source in sources:
        target = resolve_target(out_base, source.name, context, renderer)
        written.append(await materialize_file(source, target, context, renderer))
    return written
