"""Remove stopwords from TV episode file names before season/episode detection."""

import logging
import re
from collections.abc import Iterable

from .lexicon import DELIMITER, HARD_STOPWORDS
from .title_parser import RESOLUTION_PATTERN, compile_bad_words

logger = logging.getLogger(__name__)

# The delimiter in front of a word must not belong to a DVD structure folder (VIDEO_TS)
_LEADING_BOUND = r"(?:^|(?<!video)(?<!audio)" + DELIMITER + ")"
_TRAILING_BOUND = r"(?:" + DELIMITER + "|$)"

_TV_STOPWORD_PATTERNS = [
    (word, re.compile(_LEADING_BOUND + re.escape(word) + _TRAILING_BOUND, re.IGNORECASE))
    for word in HARD_STOPWORDS
]


def get_extension(filename: str) -> str:
    """Return everything after the last dot of the file name part."""
    dot = filename.rfind(".")
    if dot < max(filename.rfind("/"), filename.rfind("\\")):
        return ""
    return filename[dot + 1 :] if dot >= 0 else ""


def strip_tv_stopwords(filename: str, user_bad_words: Iterable[str] = ()) -> str:
    """Remove number-like stopwords (1080p, 720p, ...) and bad words from an episode name.

    Unlike the title parser, every word must be bounded by delimiters on both
    sides, since this works on the whole raw name.

    Args:
        filename: The episode file name
        user_bad_words: Regular expressions configured by the user

    Returns:
        The cleaned name, with the original extension attached again
    """
    if not filename:
        return ""

    extension = get_extension(filename)
    basename = re.sub(r"\." + re.escape(extension) + "$", "", filename, count=1, flags=re.IGNORECASE)
    basename = RESOLUTION_PATTERN.sub(" ", basename, count=1)

    for word, pattern in _TV_STOPWORD_PATTERNS:
        # a match consumes its trailing delimiter, so repeated words need another pass
        stripped = pattern.sub(" ", basename)
        while stripped != basename:
            logger.debug(f"Removed TV stopword ({word}): {basename} -> {stripped}")
            basename = stripped
            stripped = pattern.sub(" ", basename)

    bad_word_patterns = compile_bad_words(
        user_bad_words, prefix=_LEADING_BOUND + "(?:", suffix=")" + _TRAILING_BOUND
    )
    for pattern in bad_word_patterns:
        stripped = pattern.sub(" ", basename)
        if stripped != basename:
            logger.debug(f"Removed TV bad word ({pattern.pattern}): {basename} -> {stripped}")
            basename = stripped

    if extension.strip():
        return f"{basename}.{extension}"
    return basename
