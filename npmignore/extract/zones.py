# npmignore/extract/zones.py
from typing import List, NamedTuple, Optional

from ..errors import InvalidInputError
from ..format import is_marker_line
from ..utils.text import split_lines


class Zones(NamedTuple):
    """Lines of an existing `.npmignore`, split at the marker comment."""

    generated: List[str]
    preserved: List[str]


def split_zones(text: Optional[str], *, keepdest: bool = False) -> Zones:
    """
    Classify each line of `text` as generated or preserved.

    Lines before the first marker line are generated; the marker line and
    everything after it are preserved. With `keepdest`, all lines count as
    preserved even when no marker is present.
    """
    if text is None:
        raise InvalidInputError("npmignore expects a string.")

    generated: List[str] = []
    preserved: List[str] = []
    in_preserved = keepdest
    for line in split_lines(text):
        if not in_preserved and is_marker_line(line):
            in_preserved = True
        if in_preserved:
            preserved.append(line)
        else:
            generated.append(line)
    return Zones(generated, preserved)


def extract_preserved_zone(text: Optional[str], *, keepdest: bool = False) -> List[str]:
    """
    Return the lines at and below the marker comment of `text`.

    The generated part is discarded: it is always rebuilt from the git
    source on the next merge.
    """
    return split_zones(text, keepdest=keepdest).preserved


def has_marker(text: Optional[str]) -> bool:
    """True when any line of `text` carries the marker comment."""
    return any(is_marker_line(line) for line in split_lines(text))
