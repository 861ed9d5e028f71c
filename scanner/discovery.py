"""Path helpers shared by the resolver and the traversal engine."""

import os
from pathlib import Path
from typing import Union


VENDORED_DIR = "node_modules"

PathLike = Union[str, os.PathLike]


def normalize_path(file_path: PathLike) -> Path:
    """Return an absolute, lexically normalized path (symlinks are kept)."""
    return Path(os.path.normpath(os.path.abspath(file_path)))


def is_vendored(file_path: PathLike) -> bool:
    """Check if a path lies inside a vendored-dependencies directory."""
    return VENDORED_DIR in Path(file_path).parts
