from .options import MergeOptions
from .sources import GitSource, PlainGitSource, StructuredGitSource, git_lines

__all__ = [
    "GitSource",
    "MergeOptions",
    "PlainGitSource",
    "StructuredGitSource",
    "git_lines",
]
