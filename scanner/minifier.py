"""Content normalization applied to every file before scanning or bundling."""

import re


# Block comments (non-greedy, across newlines) or line comments to end of line.
COMMENT_PATTERN = re.compile(r"/\*[\s\S]*?\*/|//.*")
# Byte order marks count as whitespace, as in JavaScript.
WHITESPACE_PATTERN = re.compile(r"[\s\ufeff]+")


def minify_content(content: str) -> str:
    """
    Strip comments and collapse whitespace into single spaces.
    
    The transform is purely textual: comment-like sequences inside string
    literals are removed as well.
    
    Args:
        content: Raw file text.
    
    Returns:
        A single-line, comment-free string.
    """
    without_comments = COMMENT_PATTERN.sub("", content)
    return WHITESPACE_PATTERN.sub(" ", without_comments).strip()
