"""Get a clean and workable title and year out of weird file names."""

import logging
import re
from collections.abc import Callable, Iterable

from whenever import Instant

from .lexicon import (
    CLEANWORDS,
    DELIMITER,
    is_hard_stopword,
    is_soft_stopword,
    lower_stopword_position,
    normalize_roman_numeral,
)
from .media_ids import is_valid_imdb_id
from .models import IdentityResult
from .tokenizer import TokenPool, tokenize

logger = logging.getLogger(__name__)

_EXTENSION_PATTERN = re.compile(r"\.\w{2,4}$", re.ASCII)
# Resolutions like 1920x1080, only when surrounded by delimiters
RESOLUTION_PATTERN = re.compile(
    DELIMITER + r"\d{3,4}x\d{3,4}(?:" + DELIMITER + r"|$)", re.IGNORECASE | re.ASCII
)
_CLEANWORD_PATTERNS = [re.compile(DELIMITER + word, re.IGNORECASE) for word in CLEANWORDS]
_YEAR_TOKEN_PATTERN = re.compile(r"\d{4}", re.ASCII)

_TITLE_YEAR_PATTERN = re.compile(r"(.*)\s+\(?([0-9]{4})\)?", re.IGNORECASE)
_LIST_SEPARATOR_PATTERN = re.compile(r"[;,/|]")
_PUNCTUATION_PATTERN = re.compile(r"[!\"#$%&'()*+,\-./:;<=>?@\[\\\]^_`{|}~]")

# Years must satisfy MIN_YEAR < year < current year + YEAR_HORIZON
MIN_YEAR = 1800
YEAR_HORIZON = 5


def compile_bad_words(
    bad_words: Iterable[str], prefix: str = "", suffix: str = ""
) -> list[re.Pattern]:
    """Compile user supplied bad word regexes case-insensitively.

    Broken patterns are logged and skipped, the remaining ones are still used.

    Args:
        bad_words: Regular expressions entered by the user
        prefix: Regex prepended to every pattern
        suffix: Regex appended to every pattern

    Returns:
        List of compiled patterns
    """
    patterns = []
    for bad_word in bad_words or ():
        try:
            # The word must be valid on its own, the bounds could otherwise absorb a broken group
            re.compile(bad_word)
            patterns.append(re.compile(prefix + bad_word + suffix, re.IGNORECASE))
        except re.error as e:
            logger.warning(f"Skipping invalid bad word '{bad_word}': {e}")
    return patterns


def parse_year(token: str, current_year: int) -> int | None:
    """Return the token as year if it is a plausible release year."""
    if not _YEAR_TOKEN_PATTERN.fullmatch(token):
        return None
    year = int(token)
    if MIN_YEAR < year < current_year + YEAR_HORIZON:
        return year
    return None


def _clean_name(filename: str, bad_words: Iterable[str]) -> str:
    name = _EXTENSION_PATTERN.sub("", filename, count=1)
    name = RESOLUTION_PATTERN.sub(" ", name, count=1)
    for pattern in _CLEANWORD_PATTERNS:
        name = pattern.sub(" ", name, count=1)

    logger.debug(f"IN: {name}")

    # bad words are applied on the whole term to allow expressions spanning tokens
    cleaned = name
    for pattern in compile_bad_words(bad_words):
        cleaned = pattern.sub("", cleaned)

    # bad words must never remove the whole term
    if not cleaned.strip():
        return name
    return cleaned


def _remove_stopwords(
    pool: TokenPool,
    is_stopword: Callable[[str], bool],
    start: int,
    stopword_position: int,
) -> int:
    """Blank stopwords and IMDb ids from `start` on, return the new stopword position."""
    for position in range(start, len(pool.tokens)):
        if is_stopword(pool.tokens[position]):
            pool.blank(position)
            stopword_position = lower_stopword_position(stopword_position, position)
        if is_valid_imdb_id(pool.tokens[position]):
            pool.blank(position)
    return stopword_position


def _find_year(pool: TokenPool, current_year: int) -> tuple[int, str]:
    """Find the release year, scanning the tokens backwards.

    Returns:
        Tuple of (year position or -1, year or "")
    """
    # the very first token is part of the title (think of "1917")
    for position in range(len(pool.tokens) - 1, 0, -1):
        year = parse_year(pool.tokens[position], current_year)
        if year is not None:
            logger.debug(f"removed token '{pool.tokens[position]}' - seems to be year")
            pool.blank(position)
            return position, str(year)

    found = ""
    for token in pool.bracket_tokens:
        year = parse_year(token, current_year)
        if year is not None:
            logger.debug(f"found possible year: {token}")
            found = str(year)
    return -1, found


def segment(
    filename: str | None,
    bad_words: Iterable[str] = (),
    now_func: Callable[[], Instant] = Instant.now,
) -> IdentityResult:
    """Get title and year out of a file or folder name.

    1. removes extension, resolution, framerate and bad words
    2. splits the name using common delimiters
    3. removes hard stopwords and remembers the first stopword position
    4. takes the last plausible 4 digit token as year
    5. removes soft stopwords after the year
    6. everything before the first stopword (or the year) is the title

    Args:
        filename: The file name to get the title from
        bad_words: Regular expressions to remove from the name
        now_func: Clock used for the upper year limit

    Returns:
        IdentityResult, the year is empty if none was found
    """
    logger.debug(f'Parse filename for title: "{filename}"')

    if not filename:
        logger.debug("Filename empty")
        return IdentityResult()

    current_year = now_func().to_stdlib().year

    pool = tokenize(_clean_name(filename, bad_words))
    stopword_position = _remove_stopwords(pool, is_hard_stopword, 0, len(pool.tokens))

    year_position, year = _find_year(pool, current_year)

    start = year_position if year_position > 0 else 0
    stopword_position = _remove_stopwords(pool, is_soft_stopword, start, stopword_position)

    end = stopword_position
    if year_position > 0:
        end = min(end, year_position)

    words = [normalize_roman_numeral(token) for token in pool.tokens[:end] if token]
    title = " ".join(words).strip()
    if not title:
        # nothing but stopwords - take the cleaned name unchanged
        title = pool.residual

    logger.debug(f'Movie title should be: "{title}", from {year}')
    return IdentityResult(title=title, year=year.strip())


def parse_title(title: str | None) -> tuple[str, str]:
    """Split a title in the format "Title YEAR" or "Title (YEAR)".

    Returns:
        Tuple of (title, year), year is empty if there is none
    """
    if title is None:
        return "", ""

    match = _TITLE_YEAR_PATTERN.search(title)
    if match:
        return match.group(1), match.group(2)
    return title, ""


def parse_title_and_date_in_brackets(title: str | None) -> tuple[str | None, str | None]:
    """Like parse_title, but with None for missing parts."""
    if title is None:
        return None, None

    match = _TITLE_YEAR_PATTERN.search(title)
    if match:
        return match.group(1), match.group(2)
    return title, None


def split(source: str) -> list[str]:
    """Split a string by all known list separators (; , / |)."""
    return [part.strip() for part in _LIST_SEPARATOR_PATTERN.split(source) if part.strip()]


def split_by_punctuation(source: str) -> list[str]:
    """Split a string by punctuation characters (no space!)."""
    return [part.strip() for part in _PUNCTUATION_PATTERN.split(source) if part.strip()]
