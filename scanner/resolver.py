"""Path resolution utilities for mapping import specifiers to actual files."""

import os
import re
import stat
from pathlib import Path
from typing import Dict, List, Optional

from .discovery import normalize_path
from .tsconfig import ProjectConfig


# Preference order: typed sources first, then plain scripts.
EXTENSIONS = (".ts", ".tsx", ".js", ".jsx")
INDEX_NAME = "index"


def resolve_import_path(
    current_file: Path,
    import_path: str,
    config: ProjectConfig,
) -> Optional[Path]:
    """
    Resolve an import specifier to an actual file path.

    Relative specifiers (starting with ``.``) are resolved against the
    importing file's directory. Anything else goes through the project's
    path aliases; bare package names without an alias resolve to nothing.

    Args:
        current_file: The file containing the import.
        import_path: The raw specifier string.
        config: The project's alias configuration.

    Returns:
        Resolved Path if a file exists, None otherwise.
    """
    if not import_path:
        return None

    if import_path.startswith("."):
        source_dir = os.path.dirname(current_file)
        return find_file_with_extensions(
            normalize_path(os.path.join(source_dir, import_path))
        )

    return resolve_module_path(import_path, config.base_url, config.paths)


def resolve_module_path(
    module_name: str,
    base_url: Path,
    paths: Dict[str, List[str]],
) -> Optional[Path]:
    """
    Resolve a module specifier through tsconfig-style path aliases.

    Aliases are tried in mapping order and each alias's targets in list
    order; the first candidate that exists wins.

    Args:
        module_name: The specifier, e.g. ``@app/util``.
        base_url: Directory the alias targets are relative to.
        paths: Alias pattern -> target templates.

    Returns:
        Resolved Path, or None if no alias produces an existing file.
    """
    for pattern, targets in paths.items():
        match = _match_alias(pattern, module_name)
        if match is None:
            continue

        captured = match.group(1) if match.re.groups else ""
        for target in targets:
            mapped = target.replace("*", captured, 1)
            candidate = normalize_path(
                os.path.join(str(base_url), mapped.lstrip("/\\"))
            )
            resolved = find_file_with_extensions(candidate)
            if resolved is not None:
                return resolved

    return None


def find_file_with_extensions(file_path: Path) -> Optional[Path]:
    """
    Find a file for a path that may lack its extension.

    - An existing regular file is returned as-is.
    - An existing directory is probed for ``index`` + each extension.
    - A missing path is probed with each extension appended.

    Args:
        file_path: Candidate path.

    Returns:
        The first existing file, or None.
    """
    try:
        mode = os.stat(file_path).st_mode
    except (OSError, ValueError):
        for ext in EXTENSIONS:
            full_path = Path(f"{file_path}{ext}")
            if _is_file(full_path):
                return full_path
        return None

    if stat.S_ISREG(mode):
        return Path(file_path)

    if stat.S_ISDIR(mode):
        for ext in EXTENSIONS:
            index_path = Path(file_path) / f"{INDEX_NAME}{ext}"
            if _is_file(index_path):
                return index_path

    return None


def _match_alias(pattern: str, module_name: str) -> Optional["re.Match[str]"]:
    """Match a specifier against an alias pattern with one ``*`` wildcard."""
    regex = "^" + pattern.replace("*", "(.*)", 1) + "$"
    try:
        return re.match(regex, module_name)
    except re.error:
        return None


def _is_file(path: Path) -> bool:
    try:
        return path.is_file()
    except (OSError, ValueError):
        return False
