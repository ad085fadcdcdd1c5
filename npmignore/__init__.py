from .core import merge
from .errors import InvalidInputError, NpmignoreError
from .extract import (
    Zones,
    extract_preserved_zone,
    has_marker,
    parse_git_attributes,
    split_zones,
)
from .format import MARKER_COMMENT, MARKER_LINES, MARKER_PATTERN, format_document
from .models import GitSource, MergeOptions, PlainGitSource, StructuredGitSource

__all__ = [
    "merge",
    "extract_preserved_zone",
    "split_zones",
    "has_marker",
    "parse_git_attributes",
    "format_document",
    "Zones",
    "GitSource",
    "PlainGitSource",
    "StructuredGitSource",
    "MergeOptions",
    "MARKER_COMMENT",
    "MARKER_LINES",
    "MARKER_PATTERN",
    "NpmignoreError",
    "InvalidInputError",
]
