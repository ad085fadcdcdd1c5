# npmignore/utils/__init__.py
from .text import as_lines, diff_lines, split_lines, unique_lines

__all__ = [
    "as_lines",
    "diff_lines",
    "split_lines",
    "unique_lines",
]
