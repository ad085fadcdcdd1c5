# npmignore/extract/attributes.py
import re
from typing import List, Optional

from ..utils.text import split_lines

# "<path> export-ignore", optionally padded with whitespace.
_EXPORT_IGNORE = re.compile(r"^\s*(.+?)\s+export-ignore\s*$")
# Provenance comments written by tools that generate .gitattributes.
_RULES_FROM = re.compile(r"^# Rules from:.+$")


def parse_git_attributes(text: Optional[str]) -> List[str]:
    """
    Pull ignore entries out of `.gitattributes` content.

    Paths marked `export-ignore` are emitted bare, `# Rules from:` comments
    pass through verbatim, and every other line is dropped. Order is kept
    and nothing is deduplicated.
    """
    result: List[str] = []
    for line in split_lines(text):
        match = _EXPORT_IGNORE.match(line)
        if match:
            result.append(match.group(1))
        elif _RULES_FROM.match(line):
            result.append(line)
    return result
