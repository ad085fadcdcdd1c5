# npmignore/core.py
import logging
from typing import Any, Mapping, Optional, Union

from ._logging import resolve_logger
from .extract.zones import extract_preserved_zone, has_marker
from .format import MARKER_REMNANTS, format_document, is_marker_line
from .models.options import MergeOptions
from .models.sources import git_lines, is_structured_mapping
from .utils.text import diff_lines, unique_lines


def merge(
    npm_text: Optional[str],
    git: Any = None,
    options: Union[MergeOptions, Mapping[str, Any], None] = None,
    *,
    logger: Optional[logging.Logger] = None,
    log: bool = False,
) -> str:
    """
    Create or update `.npmignore` content from `.gitignore` rules.

    The generated zone is rebuilt from `git` on every call. Lines the user
    added below the marker comment in `npm_text` are kept, minus anything
    the generated zone already covers. `options` adds or removes lines.

    Content without any marker comment was written by hand, so all of it
    is kept as preserved content.

    A mapping passed as `git` without both `ignore` and `attributes` keys
    is read as `options`, so `merge(npm_text, {"ignore": ...})` works.

    Raises:
        InvalidInputError: if `npm_text` is None.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)
    if isinstance(git, Mapping) and not is_structured_mapping(git):
        if options is not None:
            raise TypeError("options given twice: as the git source and as options")
        git, options = None, git
    opts = MergeOptions.from_value(options)

    git_zone = git_lines(git)
    keepdest = opts.keepdest or (npm_text is not None and not has_marker(npm_text))
    npm_zone = extract_preserved_zone(npm_text, keepdest=keepdest)
    lg.debug(
        "merge: %d git lines, %d preserved lines (keepdest=%s)",
        len(git_zone), len(npm_zone), keepdest,
    )

    if opts.unignore:
        git_zone = diff_lines(git_zone, opts.unignore)
        npm_zone = diff_lines(npm_zone, opts.unignore)
        lg.debug("merge: unignored %d line(s)", len(opts.unignore))

    # The banner is re-added by the formatter.
    npm_zone = diff_lines(npm_zone, MARKER_REMNANTS)
    npm_zone = diff_lines(npm_zone, git_zone)

    if opts.ignore:
        forced = [line for line in diff_lines(opts.ignore, MARKER_REMNANTS) if not is_marker_line(line)]
        npm_zone.extend(diff_lines(forced, git_zone))
        lg.debug("merge: forced %d ignore line(s)", len(opts.ignore))

    npm_zone = unique_lines(npm_zone)
    lg.debug("merge: emitting %d generated, %d preserved", len(git_zone), len(npm_zone))
    return format_document(git_zone, npm_zone)
