"""Data model for a single bundling run."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, List, Optional, Set

from exporters.context_exporter import ContextWriter

if TYPE_CHECKING:
    from scanner.tsconfig import ProjectConfig


def get_relative_path(file_path: Path, root: Path) -> str:
    """
    Get the display path of a file relative to the project root.
    
    Files outside the root keep their ``..`` segments. Separators are
    always forward slashes.
    
    Args:
        file_path: The file path to make relative.
        root: The project root directory.
    
    Returns:
        Relative path string, or the original path if no relative form exists
        (e.g. a different drive on Windows).
    """
    try:
        relative = os.path.relpath(file_path, root)
    except ValueError:
        relative = str(file_path)
    return relative.replace("\\", "/")


class VisitedSet:
    """
    Set of files already claimed by the traversal.
    
    The set only grows. ``claim`` is the single check-and-insert step; it
    never suspends, so two branches racing for the same file cannot both win.
    """
    
    def __init__(self):
        self._paths: Set[Path] = set()
    
    def claim(self, path: Path) -> bool:
        """
        Mark a path as visited.
        
        Returns:
            True if the path was newly claimed, False if it was already visited.
        """
        if path in self._paths:
            return False
        self._paths.add(path)
        return True
    
    def __contains__(self, path: Path) -> bool:
        return path in self._paths
    
    def __len__(self) -> int:
        return len(self._paths)
    
    def __iter__(self) -> Iterator[Path]:
        return iter(sorted(self._paths))


@dataclass(frozen=True)
class BundleRecord:
    """One bundled file: its path and minified content."""
    
    path: Path
    content: str
    project_folder: Path
    
    @property
    def relative_path(self) -> str:
        return get_relative_path(self.path, self.project_folder)
    
    def render(self) -> str:
        """Render the record as ``// Begin``/``// End`` delimited text."""
        rel = self.relative_path
        return f"// Begin {rel}\n{self.content}\n// End {rel}\n"


@dataclass
class BundleRun:
    """
    State scoped to one bundling run.
    
    Attributes:
        project_folder: Project root, used for headers and tsconfig lookup.
        writer: Destination of the bundled artifact.
        config: Cached alias configuration, loaded once per run.
        visited: Files already claimed by the traversal.
        records: Records in the order they were appended to the output.
    """
    
    project_folder: Path
    writer: ContextWriter
    config: Optional["ProjectConfig"] = None
    visited: VisitedSet = field(default_factory=VisitedSet)
    records: List[BundleRecord] = field(default_factory=list)
    
    def bundled_paths(self) -> List[Path]:
        """Paths of the files that were written, in output order."""
        return [record.path for record in self.records]
    
    def __repr__(self) -> str:
        return f"BundleRun(project={self.project_folder}, visited={len(self.visited)}, records={len(self.records)})"
