"""Extraction of import specifiers from minified source text."""

import re
from typing import List


# Applied in this order: static imports, dynamic imports, require calls, re-exports.
IMPORT_PATTERNS = (
    re.compile(r"""import\s+.*?\s+from\s+['"](.*?)['"]"""),
    re.compile(r"""import\(['"](.*?)['"]\)"""),
    re.compile(r"""require\(['"](.*?)['"]\)"""),
    re.compile(r"""export\s+.*?\s+from\s+['"](.*?)['"]"""),
)


def find_imports(content: str) -> List[str]:
    """
    Find import specifiers in source text.
    
    Matches are grouped by pattern, in the order the patterns are applied,
    and kept in the order they occur within each pattern. Duplicates are
    preserved.
    
    Args:
        content: Minified source text.
    
    Returns:
        List of raw specifier strings.
    """
    import_paths: List[str] = []
    
    for pattern in IMPORT_PATTERNS:
        for match in pattern.finditer(content):
            import_paths.append(match.group(1))
    
    return import_paths
