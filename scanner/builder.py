"""Traversal engine that follows imports and builds the context bundle."""

import asyncio
import logging
import os
from pathlib import Path
from typing import Iterable, Optional, Union

from bundle.model import BundleRecord, BundleRun
from exporters.context_exporter import ContextWriter
from .discovery import is_vendored, normalize_path
from .minifier import minify_content
from .parser import find_imports
from .resolver import resolve_import_path
from .tsconfig import ProjectConfig, read_tsconfig


logger = logging.getLogger(__name__)


def load_config(run: BundleRun) -> ProjectConfig:
    """Return the run's alias configuration, reading tsconfig.json on first use."""
    if run.config is None:
        run.config = read_tsconfig(run.project_folder)
    return run.config


async def process_file(file_path: Union[str, Path], run: BundleRun) -> None:
    """
    Bundle a file and, recursively, every local file it imports.

    The path is claimed in the visited set before anything is read, so a
    file reached through several import chains (or a cycle) is bundled
    exactly once. Unreadable files are logged and skipped.

    Args:
        file_path: The file to process.
        run: State of the current run.
    """
    path = normalize_path(file_path)

    if not run.visited.claim(path):
        return

    if is_vendored(path):
        return

    try:
        content = await asyncio.to_thread(path.read_text, encoding="utf-8", errors="replace")
    except OSError:
        logger.error("Error reading file: %s", path)
        return
    logger.info("Processing: %s", path)

    record = BundleRecord(
        path=path,
        content=minify_content(content),
        project_folder=run.project_folder,
    )
    run.records.append(record)
    await run.writer.append(record.render())

    config = load_config(run)
    import_paths = find_imports(record.content)

    async with asyncio.TaskGroup() as group:
        for import_path in import_paths:
            group.create_task(_follow_import(path, import_path, config, run))


async def _follow_import(
    current_file: Path,
    import_path: str,
    config: ProjectConfig,
    run: BundleRun,
) -> None:
    resolved = await asyncio.to_thread(resolve_import_path, current_file, import_path, config)
    if resolved is not None:
        await process_file(resolved, run)


async def bundle_files(input_files: Iterable[Union[str, Path]], run: BundleRun) -> None:
    """Process every entry file concurrently."""
    async with asyncio.TaskGroup() as group:
        for input_file in input_files:
            group.create_task(process_file(input_file, run))


def build_bundle(
    input_files: Iterable[Union[str, Path]],
    output_file: Union[str, Path],
    project_folder: Optional[Union[str, Path]] = None,
    compress: bool = False,
) -> BundleRun:
    """
    Bundle entry files and their local imports into a single context file.

    The output file is truncated before any input is processed. Records are
    written in the order their processing completes.

    Args:
        input_files: Entry files, resolved against the current directory.
        output_file: Destination of the bundled artifact.
        project_folder: Project root (default: current working directory).
        compress: If True, gzip the artifact once all files are written.

    Returns:
        The finished BundleRun.
    """
    project = normalize_path(project_folder if project_folder is not None else os.getcwd())
    run = BundleRun(project_folder=project, writer=ContextWriter(output_file))

    load_config(run)
    run.writer.truncate()

    try:
        asyncio.run(bundle_files([normalize_path(f) for f in input_files], run))
    except BaseExceptionGroup as group:
        raise _first_error(group) from group

    if compress:
        run.writer.compress()

    return run


def _first_error(group: BaseExceptionGroup) -> BaseException:
    """Return the first leaf exception of a (possibly nested) task group failure."""
    error: BaseException = group
    while isinstance(error, BaseExceptionGroup):
        error = error.exceptions[0]
    return error
