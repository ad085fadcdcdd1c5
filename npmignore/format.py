"""
The marker banner that separates the two zones of a merged `.npmignore`,
and the formatter that joins the zones back into a document.
"""
import re
from typing import Sequence

MARKER_LINES = (
    "# npmignore - content above this line is automatically generated and modifications may be omitted",
    "# see npmjs.com/npmignore for more details.",
)
MARKER_COMMENT = "\n".join(MARKER_LINES)

# Any line containing this starts the preserved zone.
MARKER_PATTERN = re.compile(r"#\s*npmignore")

# Marker remnants dropped from preserved content before the banner is re-added.
# Blank lines go too, so an empty footer stays empty across runs.
MARKER_REMNANTS = frozenset(MARKER_LINES + ("#npmignore", "# npmignore", ""))


def is_marker_line(line: str) -> bool:
    return MARKER_PATTERN.search(line) is not None


def format_document(generated: Sequence[str], preserved: Sequence[str]) -> str:
    """
    Join the generated and preserved zones around the marker banner.

    An empty zone contributes nothing, but the separators are always
    written so the banner appears exactly once.
    """
    return "\n".join(generated) + "\n\n" + MARKER_COMMENT + "\n" + "\n".join(preserved)
