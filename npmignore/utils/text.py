# npmignore/utils/text.py
from typing import Iterable, List, Optional, Sequence, Union

LineInput = Union[str, Sequence[str], None]


def split_lines(text: Optional[str]) -> List[str]:
    """
    Normalize line endings and split `text` into lines.

    Every carriage return is dropped, so CRLF and lone CR both collapse.
    Empty or missing text yields no lines; a trailing newline yields a
    trailing empty line.
    """
    if not text:
        return []
    return text.replace("\r", "").split("\n")


def as_lines(value: LineInput) -> List[str]:
    """Coerce a single line, a sequence of lines, or None to a new list."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


def diff_lines(lines: Optional[Iterable[str]], remove: Optional[Iterable[str]]) -> List[str]:
    """Return `lines` without any entry found in `remove`, order kept."""
    if lines is None:
        return []
    if remove is None:
        return list(lines)
    unwanted = set(remove)
    return [line for line in lines if line not in unwanted]


def unique_lines(lines: Iterable[str]) -> List[str]:
    """Drop repeated lines; the first occurrence keeps its position."""
    seen = set()
    out: List[str] = []
    for line in lines:
        if line in seen:
            continue
        seen.add(line)
        out.append(line)
    return out
