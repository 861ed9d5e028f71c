"""Loading of path-alias settings from a project's tsconfig.json."""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from .discovery import normalize_path


logger = logging.getLogger(__name__)

TSCONFIG_NAME = "tsconfig.json"


@dataclass(frozen=True)
class ProjectConfig:
    """
    Alias configuration for a project.

    Attributes:
        base_url: Absolute directory alias targets are resolved against.
        paths: Alias pattern -> ordered target templates, in file order.
    """

    base_url: Path
    paths: Dict[str, List[str]] = field(default_factory=dict)

    @classmethod
    def empty(cls, project_folder: Path) -> "ProjectConfig":
        """Configuration with no aliases, based at the project root."""
        return cls(base_url=normalize_path(project_folder))

    @classmethod
    def from_tsconfig(cls, data: Any, project_folder: Path) -> "ProjectConfig":
        """
        Build a configuration from parsed tsconfig.json data.

        Values of an unexpected type are ignored rather than rejected.
        """
        compiler_options = data.get("compilerOptions") if isinstance(data, dict) else None
        if not isinstance(compiler_options, dict):
            return cls.empty(project_folder)

        base_url = compiler_options.get("baseUrl")
        if isinstance(base_url, str) and base_url:
            base = normalize_path(os.path.join(project_folder, base_url))
        else:
            base = normalize_path(project_folder)

        paths: Dict[str, List[str]] = {}
        raw_paths = compiler_options.get("paths")
        if isinstance(raw_paths, dict):
            for pattern, targets in raw_paths.items():
                if isinstance(targets, str):
                    targets = [targets]
                if isinstance(targets, list):
                    paths[pattern] = [t for t in targets if isinstance(t, str)]

        return cls(base_url=base, paths=paths)


def read_tsconfig(project_folder: Path) -> ProjectConfig:
    """
    Read tsconfig.json from the project folder.

    A missing or unparsable file degrades to an empty configuration; the
    failure is logged as a warning and never raised.

    Args:
        project_folder: The project root directory.

    Returns:
        The parsed ProjectConfig.
    """
    tsconfig_path = Path(project_folder) / TSCONFIG_NAME

    try:
        content = tsconfig_path.read_text(encoding="utf-8")
        data = json.loads(content)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        logger.warning(
            "Could not read %s at %s. Default settings will be used.",
            TSCONFIG_NAME,
            tsconfig_path,
        )
        return ProjectConfig.empty(project_folder)

    return ProjectConfig.from_tsconfig(data, project_folder)
