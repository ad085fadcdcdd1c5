from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import List, Union

from ..extract.attributes import parse_git_attributes
from ..utils.text import split_lines

Lines = Union[str, Sequence[str], None]


@dataclass(frozen=True)
class PlainGitSource:
    """Plain `.gitignore` text."""

    text: str = ""

    def to_lines(self) -> List[str]:
        return split_lines(self.text)


@dataclass(frozen=True)
class StructuredGitSource:
    """`.gitignore` rules plus `.gitattributes` export-ignore entries.

    Either field may be raw text or an already-split sequence of lines.
    """

    ignore: Lines = None
    attributes: Lines = None

    def to_lines(self) -> List[str]:
        if isinstance(self.ignore, str) or self.ignore is None:
            ignore = split_lines(self.ignore)
        else:
            ignore = list(self.ignore)
        if isinstance(self.attributes, str) or self.attributes is None:
            attributes = parse_git_attributes(self.attributes)
        else:
            attributes = list(self.attributes)
        return ignore + attributes


GitSource = Union[PlainGitSource, StructuredGitSource]


def is_structured_mapping(value) -> bool:
    """True for a mapping that names both `ignore` and `attributes`."""
    return isinstance(value, Mapping) and "ignore" in value and "attributes" in value


def git_lines(source) -> List[str]:
    """
    Normalize any accepted git source into a list of lines.

    Accepts None, a string, a sequence of lines, a mapping with both
    `ignore` and `attributes` keys, or one of the GitSource variants.
    Anything else, bytes and other mappings included, raises TypeError.
    """
    if source is None:
        return []
    if isinstance(source, (PlainGitSource, StructuredGitSource)):
        return source.to_lines()
    if isinstance(source, str):
        return split_lines(source)
    if is_structured_mapping(source):
        return StructuredGitSource(source["ignore"], source["attributes"]).to_lines()
    if isinstance(source, Sequence) and not isinstance(source, (bytes, bytearray)):
        return list(source)
    raise TypeError(f"Unsupported git source: {type(source).__name__}")
