"""Scanner module for import extraction, resolution and traversal."""

from .minifier import minify_content
from .parser import find_imports
from .resolver import resolve_import_path, find_file_with_extensions
from .tsconfig import ProjectConfig, read_tsconfig
from .builder import build_bundle, process_file

__all__ = [
    "minify_content",
    "find_imports",
    "resolve_import_path",
    "find_file_with_extensions",
    "ProjectConfig",
    "read_tsconfig",
    "build_bundle",
    "process_file",
]
